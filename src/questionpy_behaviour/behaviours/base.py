"""Base class for question behaviours."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from questionpy_behaviour.model.attempt import QuestionAttempt
from questionpy_behaviour.model.display import DisplayOptions
from questionpy_behaviour.model.step import DISCARD, KEEP, PendingStep, Step

if TYPE_CHECKING:
    from questionpy_behaviour.behaviours.registry import BehaviourRegistry

LAST_TRY = "lasttry"
FIRST_TRY = "firsttry"
ALL_TRIES = "alltries"


class QuestionRenderer(Protocol):
    """Protocol for the host renderer that turns an attempt into markup."""

    def question(
        self, qa: QuestionAttempt, behaviour: Behaviour, options: DisplayOptions, number: str | None
    ) -> str: ...


class Behaviour:
    """Controls how a question attempt processes actions, renders and reports state.

    Subclasses must set ``name`` and implement :meth:`process_action` and
    :meth:`summarise_action`. Everything else has a sensible default that
    defers to the question.
    """

    name: str = ""

    def __init__(
        self,
        qa: QuestionAttempt,
        preferred_behaviour: str | Behaviour | None = None,
        *,
        registry: BehaviourRegistry | None = None,
    ) -> None:
        self.qa = qa
        self.question = qa.question
        self.registry = registry

    def rebind(self, qa: QuestionAttempt) -> Behaviour:
        """Return a new behaviour of the same class bound to *qa*.

        The current instance is passed as the preferred behaviour so the new
        one can copy whatever it needs from it.
        """
        return type(self)(qa, self, registry=self.registry)

    # --- identity -------------------------------------------------------------

    def get_name(self) -> str:
        return self.name

    def is_compatible_question(self, question: Any) -> bool:
        return True

    # --- lifecycle ------------------------------------------------------------

    def init_first_step(self, step: Step, variant: int) -> None:
        self.question.start_attempt(step, variant)

    def apply_attempt_state(self, step: Step) -> None:
        self.question.apply_attempt_state(step)

    def can_finish_during_attempt(self) -> bool:
        return False

    def process_action(self, pending_step: PendingStep) -> bool:
        raise NotImplementedError(f"{type(self).__name__} must implement process_action")

    def process_autosave(self, pending_step: PendingStep) -> bool:
        return DISCARD

    def process_comment(self, pending_step: PendingStep) -> bool:
        # The comment stays on the pending step and is read back from the history.
        return KEEP

    # --- rendering ------------------------------------------------------------

    def render(self, options: DisplayOptions, number: str | None, renderer: QuestionRenderer) -> str:
        options = options.clone()
        self.adjust_display_options(options)
        return renderer.question(self.qa, self, options, number)

    def get_renderer(self, page: Any) -> Any:
        """Return a behaviour specific renderer, or None to use the host's."""
        return None

    def adjust_display_options(self, options: DisplayOptions) -> None:
        if self.qa.get_state().is_finished:
            options.readonly = True

    def check_file_access(
        self, options: DisplayOptions, component: str, filearea: str, args: list[str], forcedownload: bool
    ) -> bool:
        return False

    def get_applicable_hint(self) -> Any:
        return None

    # --- grading --------------------------------------------------------------

    def get_min_fraction(self) -> float:
        return self.question.get_min_fraction()

    def get_max_fraction(self) -> float:
        return self.question.get_max_fraction()

    def get_expected_data(self) -> dict[str, Any]:
        return {}

    def get_expected_qt_data(self) -> dict[str, Any]:
        options = DisplayOptions()
        self.adjust_display_options(options)
        if options.readonly:
            return {}
        return self.question.get_expected_data()

    def get_correct_response(self) -> dict[str, str]:
        return {}

    def classify_response(self, which_tries: str = LAST_TRY) -> dict[str, Any]:
        return self.question.classify_response(self.qa.get_last_qt_data())

    # --- summaries ------------------------------------------------------------

    def get_question_summary(self) -> str | None:
        return self.question.get_question_summary()

    def get_right_answer_summary(self) -> str | None:
        return self.question.get_right_answer_summary()

    def get_resume_data(self) -> dict[str, str]:
        data = self.qa.get_step(0).get_all_data() if self.qa.steps else {}
        data.update(self.qa.get_last_qt_data())
        return data

    def get_state_string(self, show_correctness: bool) -> str:
        return self.qa.get_state().default_string(show_correctness)

    def summarise_action(self, step: Step) -> str:
        raise NotImplementedError(f"{type(self).__name__} must implement summarise_action")

    def summarise_start(self, step: Step) -> str:
        return "Started"

    def summarise_finish(self, step: Step) -> str:
        return "Attempt finished"

    def format_comment(
        self, comment: str | None = None, commentformat: int | None = None, context: Any = None
    ) -> str:
        return comment if comment is not None else (self.qa.get_manual_comment() or "")

    def step_has_submitted_response(self, step: Step) -> bool:
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.get_name()!r})"
