"""Configuration for the diagnostics the QuestionPy behaviour adds to its output."""
from __future__ import annotations

import os
from dataclasses import dataclass

_FALSY = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() not in _FALSY


@dataclass(frozen=True)
class DiagnosticsConfig:
    show_question_state: bool = True
    show_attempt_state: bool = True
    show_scoring_state: bool = True

    @classmethod
    def from_env(cls) -> DiagnosticsConfig:
        """Build a config from ``QPY_BEHAVIOUR_SHOW_*`` environment variables."""
        return cls(
            show_question_state=_env_flag("QPY_BEHAVIOUR_SHOW_QUESTION_STATE", True),
            show_attempt_state=_env_flag("QPY_BEHAVIOUR_SHOW_ATTEMPT_STATE", True),
            show_scoring_state=_env_flag("QPY_BEHAVIOUR_SHOW_SCORING_STATE", True),
        )
