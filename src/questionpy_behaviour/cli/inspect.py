"""CLI command: questionpy-behaviour inspect -- show diagnostics of a saved attempt."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from questionpy_behaviour.config import DiagnosticsConfig
from questionpy_behaviour.constants import QB_VAR_BEHAVIOUR, QT_VAR_ATTEMPT_STATE, QT_VAR_SCORING_STATE
from questionpy_behaviour.diagnostics import history_diagnostics, scoring_state_suffix
from questionpy_behaviour.model.attempt import QuestionAttempt


@click.command()
@click.argument("attempt_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--show-correctness/--hide-correctness",
    default=True,
    help="Distinguish right/partial/wrong in the state string.",
)
def inspect(attempt_file: str, show_correctness: bool) -> None:
    """Load a saved question attempt and print the QuestionPy diagnostics.

    Shows the archetypal behaviour the attempt was started with, the
    history diagnostics added when rendering, and the state string suffix.
    """
    try:
        qa = QuestionAttempt.load(Path(attempt_file))
    except (json.JSONDecodeError, KeyError, ValueError, TypeError) as exc:
        click.echo(f"Invalid attempt file: {exc}", err=True)
        sys.exit(1)

    config = DiagnosticsConfig.from_env()
    state = qa.get_state()

    click.echo(f"Question:  {qa.question.name or '(unnamed)'}")
    click.echo(f"Behaviour: {qa.get_last_behaviour_var(QB_VAR_BEHAVIOUR, '(not recorded)')}")
    click.echo(f"State:     {state.default_string(show_correctness)}")
    click.echo(f"Steps:     {len(qa.steps)}")
    click.echo()

    click.echo("History diagnostics:")
    click.echo(
        history_diagnostics(qa.question.questionstate, qa.get_last_qt_var(QT_VAR_ATTEMPT_STATE), config)
        or "  (none)"
    )
    click.echo()

    click.echo("State string suffix:")
    click.echo(
        scoring_state_suffix(qa.get_last_qt_var(QT_VAR_SCORING_STATE), state.is_graded, config)
        or "  (none)"
    )
