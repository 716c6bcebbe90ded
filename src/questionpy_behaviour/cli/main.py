"""questionpy-behaviour CLI entry point: Click group with subcommands."""

import logging

import click

from questionpy_behaviour import __version__


@click.group()
@click.version_option(version=__version__, prog_name="questionpy-behaviour")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """QuestionPy behaviour - inspect the state QuestionPy keeps on question attempts."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


from questionpy_behaviour.cli.inspect import inspect  # noqa: E402

cli.add_command(inspect)
