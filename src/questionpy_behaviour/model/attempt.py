"""Question attempt: the full step history of one question in one quiz attempt."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

from questionpy_behaviour.model.question import QuestionDefinition
from questionpy_behaviour.model.step import KEEP, PendingStep, Step

if TYPE_CHECKING:
    from questionpy_behaviour.behaviours.base import Behaviour


class AttemptState(Enum):
    """State of a question attempt."""

    NOT_STARTED = "notstarted"
    UNPROCESSED = "unprocessed"
    TODO = "todo"
    INVALID = "invalid"
    COMPLETE = "complete"
    NEEDS_GRADING = "needsgrading"
    FINISHED = "finished"
    GAVE_UP = "gaveup"
    GRADED_WRONG = "gradedwrong"
    GRADED_PARTIAL = "gradedpartial"
    GRADED_RIGHT = "gradedright"
    MANUALLY_FINISHED = "manfinished"
    MANUALLY_GAVE_UP = "mangaveup"
    MANUALLY_GRADED_WRONG = "mangrwrong"
    MANUALLY_GRADED_PARTIAL = "mangrpartial"
    MANUALLY_GRADED_RIGHT = "mangrright"

    @property
    def is_active(self) -> bool:
        return self in _ACTIVE

    @property
    def is_finished(self) -> bool:
        return not self.is_active and self not in (AttemptState.NOT_STARTED, AttemptState.UNPROCESSED)

    @property
    def is_graded(self) -> bool:
        return self in _GRADED

    def default_string(self, show_correctness: bool) -> str:
        if self.is_graded and not show_correctness:
            return "Complete"
        return _LABELS[self]


_ACTIVE = frozenset({AttemptState.TODO, AttemptState.INVALID, AttemptState.COMPLETE})

_GRADED = frozenset({
    AttemptState.GRADED_WRONG,
    AttemptState.GRADED_PARTIAL,
    AttemptState.GRADED_RIGHT,
    AttemptState.MANUALLY_GRADED_WRONG,
    AttemptState.MANUALLY_GRADED_PARTIAL,
    AttemptState.MANUALLY_GRADED_RIGHT,
})

_LABELS = {
    AttemptState.NOT_STARTED: "Not started",
    AttemptState.UNPROCESSED: "Unprocessed",
    AttemptState.TODO: "Not yet answered",
    AttemptState.INVALID: "Incomplete answer",
    AttemptState.COMPLETE: "Answer saved",
    AttemptState.NEEDS_GRADING: "Requires grading",
    AttemptState.FINISHED: "Complete",
    AttemptState.GAVE_UP: "Not answered",
    AttemptState.GRADED_WRONG: "Incorrect",
    AttemptState.GRADED_PARTIAL: "Partially correct",
    AttemptState.GRADED_RIGHT: "Correct",
    AttemptState.MANUALLY_FINISHED: "Complete",
    AttemptState.MANUALLY_GAVE_UP: "Not answered",
    AttemptState.MANUALLY_GRADED_WRONG: "Incorrect",
    AttemptState.MANUALLY_GRADED_PARTIAL: "Partially correct",
    AttemptState.MANUALLY_GRADED_RIGHT: "Correct",
}


@dataclass
class QuestionAttempt:
    """Ordered step history, current state and variant of one question attempt."""

    question: QuestionDefinition
    steps: list[Step] = field(default_factory=list)
    state: AttemptState = AttemptState.NOT_STARTED
    variant: int = 1

    # --- steps ----------------------------------------------------------------

    def get_step(self, index: int) -> Step:
        return self.steps[index]

    def get_last_step(self) -> Step:
        if not self.steps:
            raise IndexError("attempt has no steps")
        return self.steps[-1]

    def add_step(self, step: Step) -> None:
        self.steps.append(step)

    # --- variable lookup ------------------------------------------------------

    def get_last_qt_var(self, name: str, default: str | None = None) -> str | None:
        """Return the most recent value of a question type variable."""
        for step in reversed(self.steps):
            if step.has_qt_var(name):
                return step.get_qt_var(name)
        return default

    def get_last_behaviour_var(self, name: str, default: Any = None) -> Any:
        """Return the most recent value of a behaviour variable."""
        for step in reversed(self.steps):
            if step.has_behaviour_var(name):
                return step.get_behaviour_var(name)
        return default

    def get_manual_comment(self) -> str | None:
        """Return the most recent manual comment recorded in the step history."""
        return self.get_last_behaviour_var("comment")

    def get_last_qt_data(self) -> dict[str, str]:
        for step in reversed(self.steps):
            if step.qt_data:
                return dict(step.qt_data)
        return {}

    # --- state ----------------------------------------------------------------

    def get_state(self) -> AttemptState:
        return self.state

    def set_state(self, state: AttemptState) -> None:
        self.state = state

    # --- driving behaviours ---------------------------------------------------

    def start(self, behaviour: Behaviour, variant: int | None = None) -> Step:
        """Create the first step and let *behaviour* initialise it."""
        if variant is not None:
            self.variant = variant
        first = Step()
        behaviour.init_first_step(first, self.variant)
        self.steps = [first]
        self.state = AttemptState.TODO
        return first

    def process_action(self, behaviour: Behaviour, submitted: dict[str, Any]) -> PendingStep:
        """Run one submitted action through *behaviour*.

        Keys starting with ``-`` are behaviour variables, everything else is a
        question type variable. The pending step is appended to the history
        when the behaviour decides to keep it.
        """
        pending = PendingStep()
        for name, value in submitted.items():
            if name.startswith("-"):
                pending.set_behaviour_var(name[1:], value)
            else:
                pending.set_qt_var(name, value)
        pending.outcome = bool(behaviour.process_action(pending))
        if pending.outcome is KEEP:
            self.add_step(pending)
        return pending

    # --- persistence ----------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "question": self.question.to_dict(),
            "state": self.state.value,
            "variant": self.variant,
            "steps": [step.to_dict() for step in self.steps],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QuestionAttempt:
        return cls(
            question=QuestionDefinition.from_dict(data["question"]),
            steps=[Step.from_dict(s) for s in data.get("steps", [])],
            state=AttemptState(data.get("state", AttemptState.NOT_STARTED.value)),
            variant=int(data.get("variant", 1)),
        )

    def save(self, path: Path) -> None:
        """Serialise to JSON and write to *path*."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")

    @classmethod
    def load(cls, path: Path) -> QuestionAttempt:
        """Deserialise an attempt from a JSON file at *path*."""
        return cls.from_dict(json.loads(path.read_text(encoding="utf-8")))
