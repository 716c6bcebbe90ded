"""Diagnostic markup the QuestionPy behaviour adds to rendered attempts.

Question and attempt state are untrusted and always escaped. The scoring
state is inserted as-is, as the host does for that field.
"""

from __future__ import annotations

from markupsafe import Markup

from questionpy_behaviour.config import DiagnosticsConfig

_STATE_BLOCK = Markup("<details open><summary>{}</summary><pre><code>{}</code></pre></details>")
_SCORING_STATE = Markup(
    '<div><small class="font-weight-normal"><details><summary>QuestionPy Scoring State</summary>'
    "{}</details></small></div>"
)
NO_SCORING_STATE = Markup('<div><small class="font-weight-normal">No QuestionPy Scoring State</small></div>')


def state_block(label: str, value: str | None) -> Markup:
    """An open collapsible block showing *value* escaped inside ``<pre><code>``."""
    return _STATE_BLOCK.format(label, value or "")


def history_diagnostics(
    question_state: str | None,
    attempt_state: str | None,
    config: DiagnosticsConfig | None = None,
) -> str:
    """Markup appended to the extra history content of the display options."""
    config = config or DiagnosticsConfig()
    blocks = []
    if config.show_question_state:
        blocks.append(state_block("Question State:", question_state))
    if config.show_attempt_state:
        blocks.append(state_block("Attempt State:", attempt_state))
    if not blocks:
        return ""
    return str(Markup('<div class="m-2">{}</div>').format(Markup("").join(blocks)))


def scoring_state_suffix(
    scoring_state: str | None,
    graded: bool,
    config: DiagnosticsConfig | None = None,
) -> str:
    """Markup appended to the state string.

    Empty when there is no scoring state and the attempt is not graded yet.
    """
    config = config or DiagnosticsConfig()
    if not config.show_scoring_state:
        return ""
    if scoring_state is not None:
        return str(_SCORING_STATE.format(Markup(scoring_state)))
    if graded:
        return str(NO_SCORING_STATE)
    return ""
