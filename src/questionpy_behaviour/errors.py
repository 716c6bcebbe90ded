"""Error hierarchy for the QuestionPy behaviour."""
from __future__ import annotations


class BehaviourError(Exception):
    """Base error for all questionpy_behaviour errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class PendingStepError(BehaviourError):
    """The pending step was requested while no action is being processed."""

    def __init__(self, message: str | None = None, **kwargs) -> None:
        super().__init__(
            message
            or "pending step is not set, we are probably not currently processing an action",
            **kwargs,
        )


class UnknownBehaviourError(BehaviourError):
    """No behaviour is registered under the requested name."""

    def __init__(self, name: str, **kwargs) -> None:
        super().__init__(f"Unknown behaviour: {name!r}", **kwargs)
        self.name = name


class BehaviourResolutionError(BehaviourError):
    """A delegate had to be looked up by name but no registry was available."""
