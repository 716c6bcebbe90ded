"""Attempt steps: one entry in the history of a question attempt."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Return values of Behaviour.process_action and friends.
KEEP = True
DISCARD = False


@dataclass
class Step:
    """A persisted entry in a question attempt's history.

    Question type variables live in ``qt_data``; behaviour variables live
    in ``behaviour_data``. All values are stored as strings.
    """

    qt_data: dict[str, str] = field(default_factory=dict)
    behaviour_data: dict[str, str] = field(default_factory=dict)

    # --- question type variables ----------------------------------------------

    def get_qt_var(self, name: str, default: str | None = None) -> str | None:
        return self.qt_data.get(name, default)

    def set_qt_var(self, name: str, value: Any) -> None:
        self.qt_data[name] = str(value)

    def has_qt_var(self, name: str) -> bool:
        return name in self.qt_data

    # --- behaviour variables --------------------------------------------------

    def get_behaviour_var(self, name: str, default: str | None = None) -> str | None:
        return self.behaviour_data.get(name, default)

    def set_behaviour_var(self, name: str, value: Any) -> None:
        self.behaviour_data[name] = str(value)

    def has_behaviour_var(self, name: str) -> bool:
        return name in self.behaviour_data

    # --- bulk -----------------------------------------------------------------

    def get_all_data(self) -> dict[str, str]:
        """Return qt variables as-is and behaviour variables prefixed with ``-``."""
        data = dict(self.qt_data)
        data.update({f"-{name}": value for name, value in self.behaviour_data.items()})
        return data

    def to_dict(self) -> dict[str, Any]:
        return {"qt": dict(self.qt_data), "behaviour": dict(self.behaviour_data)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Step:
        return cls(
            qt_data={k: str(v) for k, v in data.get("qt", {}).items()},
            behaviour_data={k: str(v) for k, v in data.get("behaviour", {}).items()},
        )


@dataclass
class PendingStep(Step):
    """A proposed next step that has not been persisted yet and may still be mutated."""

    outcome: bool | None = None

    @property
    def kept(self) -> bool:
        return self.outcome is KEEP
