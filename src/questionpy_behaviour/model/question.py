"""Question definitions as seen by behaviours."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from questionpy_behaviour.constants import (
    QT_VAR_ATTEMPT_STATE,
    QT_VAR_SCORING_STATE,
    QUESTION_TYPE_NAME,
)
from questionpy_behaviour.model.step import Step

if TYPE_CHECKING:
    from questionpy_behaviour.behaviours.questionpy import QuestionPyBehaviour


_PERSISTED_FIELDS = (
    "name",
    "qtype",
    "questionstate",
    "min_fraction",
    "max_fraction",
    "summary",
    "right_answer_summary",
    "expected_data",
    "correct_response",
)


@dataclass
class QuestionDefinition:
    """A question instance: static definition plus its opaque serialized state."""

    name: str = ""
    qtype: str = "generic"
    questionstate: str | None = None
    min_fraction: float = 0.0
    max_fraction: float = 1.0
    summary: str | None = None
    right_answer_summary: str | None = None
    expected_data: dict[str, Any] = field(default_factory=dict)
    correct_response: dict[str, str] = field(default_factory=dict)

    def get_type_name(self) -> str:
        return self.qtype

    def get_min_fraction(self) -> float:
        return self.min_fraction

    def get_max_fraction(self) -> float:
        return self.max_fraction

    def get_expected_data(self) -> dict[str, Any]:
        return dict(self.expected_data)

    def get_correct_response(self) -> dict[str, str]:
        return dict(self.correct_response)

    def get_question_summary(self) -> str | None:
        return self.summary

    def get_right_answer_summary(self) -> str | None:
        return self.right_answer_summary

    def start_attempt(self, step: Step, variant: int) -> None:
        """Seed the first step of a new attempt."""

    def apply_attempt_state(self, step: Step) -> None:
        """Restore state from the first step of an existing attempt."""

    def classify_response(self, response: dict[str, str]) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        data = {name: getattr(self, name) for name in _PERSISTED_FIELDS}
        data["expected_data"] = dict(self.expected_data)
        data["correct_response"] = dict(self.correct_response)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QuestionDefinition:
        kwargs = {name: data[name] for name in _PERSISTED_FIELDS if name in data}
        if kwargs.get("qtype", QUESTION_TYPE_NAME) == QUESTION_TYPE_NAME:
            kwargs.pop("qtype", None)
            return QuestionPyQuestion(**kwargs)
        return cls(**kwargs)


@dataclass
class QuestionPyQuestion(QuestionDefinition):
    """A QuestionPy question.

    The governing behaviour installs itself as ``behaviour`` so the question
    can reach the full attempt and, while an action is processed, the
    pending step.
    """

    qtype: str = QUESTION_TYPE_NAME
    behaviour: QuestionPyBehaviour | None = field(default=None, repr=False, compare=False)

    def _pending_step(self) -> Step:
        if self.behaviour is None:
            raise RuntimeError(f"question {self.name!r} is not governed by a QuestionPy behaviour")
        return self.behaviour.get_pending_step()

    def set_attempt_state(self, value: str) -> None:
        """Record a new attempt state on the step currently being processed."""
        self._pending_step().set_qt_var(QT_VAR_ATTEMPT_STATE, value)

    def set_scoring_state(self, value: str) -> None:
        """Record a new scoring state on the step currently being processed."""
        self._pending_step().set_qt_var(QT_VAR_SCORING_STATE, value)
