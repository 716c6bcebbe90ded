"""QuestionPyBehaviour: wraps the behaviour a question would ordinarily use.

All calls are delegated to the archetypal behaviour (deferred feedback,
adaptive, immediate feedback, ...), but the wrapper additionally

- gives the question access to the entire attempt (questions are usually
  only handed the first step),
- gives the question access to the pending step while an action is being
  processed,
- adds the question state and attempt state to the extra history content
  of the display options,
- adds the scoring state (if any) to the state string.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from questionpy_behaviour.behaviours.base import Behaviour, QuestionRenderer
from questionpy_behaviour.behaviours.registry import BehaviourRegistry
from questionpy_behaviour.config import DiagnosticsConfig
from questionpy_behaviour.constants import (
    BEHAVIOUR_NAME,
    QB_VAR_BEHAVIOUR,
    QT_VAR_ATTEMPT_STATE,
    QT_VAR_SCORING_STATE,
)
from questionpy_behaviour.diagnostics import history_diagnostics, scoring_state_suffix
from questionpy_behaviour.errors import BehaviourResolutionError, PendingStepError
from questionpy_behaviour.model.attempt import QuestionAttempt
from questionpy_behaviour.model.display import DisplayOptions
from questionpy_behaviour.model.question import QuestionPyQuestion
from questionpy_behaviour.model.step import PendingStep, Step

logger = logging.getLogger(__name__)


class _Forward:
    """Class attribute that resolves to the delegate's method of the same name."""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: QuestionPyBehaviour | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return getattr(instance.delegate, self.name)


class QuestionPyBehaviour(Behaviour):
    """Behaviour decorator used for every QuestionPy question."""

    name = BEHAVIOUR_NAME

    def __init__(
        self,
        qa: QuestionAttempt,
        preferred_behaviour: str | QuestionPyBehaviour | None,
        delegate: Behaviour | None = None,
        *,
        registry: BehaviourRegistry | None = None,
        config: DiagnosticsConfig | None = None,
    ) -> None:
        """Initialise the behaviour for *qa*.

        Args:
            qa: The attempt this behaviour governs.
            preferred_behaviour: Usually the name of the archetypal behaviour.
                When re-deriving an attempt (regrading, for example) the host
                passes the previous QuestionPyBehaviour instance instead.
            delegate: An already constructed behaviour to delegate to.
            registry: Used to look up the delegate by name.
            config: Which diagnostics to add to rendered output.
        """
        super().__init__(qa, preferred_behaviour, registry=registry)
        self.config = config or DiagnosticsConfig()
        self._pending_step: PendingStep | None = None
        self._delegate = self._resolve_delegate(preferred_behaviour, delegate)

        if isinstance(self.question, QuestionPyQuestion):
            self.question.behaviour = self

    def _resolve_delegate(
        self, preferred_behaviour: str | QuestionPyBehaviour | None, delegate: Behaviour | None
    ) -> Behaviour:
        if delegate is not None:
            logger.debug("Adopting explicit delegate %s", type(delegate).__name__)
            return delegate

        if isinstance(preferred_behaviour, QuestionPyBehaviour):
            # The old delegate is bound to the old attempt, so it can't be reused as-is.
            logger.debug("Rebinding delegate %s to new attempt", type(preferred_behaviour.delegate).__name__)
            return preferred_behaviour.delegate.rebind(self.qa)

        if isinstance(preferred_behaviour, Behaviour):
            raise BehaviourResolutionError(
                f"cannot derive a delegate from {type(preferred_behaviour).__name__}, "
                "expected a behaviour name or a QuestionPyBehaviour"
            )

        if self.registry is None:
            raise BehaviourResolutionError("no behaviour registry to resolve the delegate with")
        delegate_name = self.qa.get_last_behaviour_var(QB_VAR_BEHAVIOUR, preferred_behaviour)
        if not delegate_name:
            raise BehaviourResolutionError("no behaviour name recorded on the attempt or given")
        logger.debug("Resolving delegate %r through registry", delegate_name)
        return self.registry.make_behaviour(delegate_name, self.qa, preferred_behaviour)

    @property
    def delegate(self) -> Behaviour:
        return self._delegate

    def rebind(self, qa: QuestionAttempt) -> QuestionPyBehaviour:
        return type(self)(qa, self, registry=self.registry, config=self.config)

    # --- extra capabilities ---------------------------------------------------

    def get_pending_step(self) -> PendingStep:
        """Return the pending step of the action currently being processed.

        The pending step is not persisted yet and can still be mutated.

        Raises:
            PendingStepError: if no action is currently being processed.
        """
        if self._pending_step is None:
            raise PendingStepError()
        return self._pending_step

    def get_attempt(self) -> QuestionAttempt:
        """Return the complete question attempt."""
        return self.qa

    def invoke_extension(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Call an operation specific to the delegate's behaviour by name."""
        return getattr(self._delegate, name)(*args, **kwargs)

    # --- intercepted operations -----------------------------------------------

    @contextmanager
    def _processing(self, pending_step: PendingStep) -> Iterator[PendingStep]:
        self._pending_step = pending_step
        try:
            yield pending_step
        finally:
            self._pending_step = None

    def process_action(self, pending_step: PendingStep) -> bool:
        with self._processing(pending_step):
            return self._delegate.process_action(pending_step)

    def init_first_step(self, step: Step, variant: int) -> None:
        self._delegate.init_first_step(step, variant)
        step.set_behaviour_var(QB_VAR_BEHAVIOUR, self._delegate.get_name())

    def render(self, options: DisplayOptions, number: str | None, renderer: QuestionRenderer) -> str:
        # adjust_display_options is called from inside the delegate's render,
        # so the diagnostics are added here instead.
        options = options.clone()
        options.extrahistorycontent += history_diagnostics(
            self.question.questionstate,
            self.qa.get_last_qt_var(QT_VAR_ATTEMPT_STATE),
            self.config,
        )
        return self._delegate.render(options, number, renderer)

    def get_state_string(self, show_correctness: bool) -> str:
        result = self._delegate.get_state_string(show_correctness)
        return result + scoring_state_suffix(
            self.qa.get_last_qt_var(QT_VAR_SCORING_STATE),
            self.qa.get_state().is_graded,
            self.config,
        )

    # --- everything else is delegated -----------------------------------------

    get_name = _Forward()
    is_compatible_question = _Forward()
    can_finish_during_attempt = _Forward()
    check_file_access = _Forward()
    get_renderer = _Forward()
    adjust_display_options = _Forward()
    get_applicable_hint = _Forward()
    get_min_fraction = _Forward()
    get_max_fraction = _Forward()
    get_expected_data = _Forward()
    get_expected_qt_data = _Forward()
    get_correct_response = _Forward()
    get_question_summary = _Forward()
    get_right_answer_summary = _Forward()
    get_resume_data = _Forward()
    classify_response = _Forward()
    summarise_action = _Forward()
    apply_attempt_state = _Forward()
    process_autosave = _Forward()
    process_comment = _Forward()
    format_comment = _Forward()
    summarise_start = _Forward()
    summarise_finish = _Forward()
    step_has_submitted_response = _Forward()

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes not found the normal way: operations
        # that specific behaviours add for their own renderers.
        if name.startswith("_") or "_delegate" not in self.__dict__:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
        return getattr(self.__dict__["_delegate"], name)

    def __repr__(self) -> str:
        delegate = self.__dict__.get("_delegate")
        return f"{type(self).__name__}(delegate={delegate!r})"


FORWARDED_OPERATIONS = tuple(
    name for name, value in vars(QuestionPyBehaviour).items() if isinstance(value, _Forward)
)
