"""QuestionPy question behaviour: a delegating wrapper around archetypal behaviours."""

__version__ = "0.1.0"

from questionpy_behaviour.behaviours import (  # noqa: E402
    Behaviour,
    BehaviourRegistry,
    QuestionPyBehaviour,
    create_default_registry,
)
from questionpy_behaviour.config import DiagnosticsConfig  # noqa: E402
from questionpy_behaviour.errors import (  # noqa: E402
    BehaviourError,
    BehaviourResolutionError,
    PendingStepError,
    UnknownBehaviourError,
)

__all__ = [
    "__version__",
    "Behaviour",
    "BehaviourRegistry",
    "QuestionPyBehaviour",
    "create_default_registry",
    "DiagnosticsConfig",
    "BehaviourError",
    "BehaviourResolutionError",
    "PendingStepError",
    "UnknownBehaviourError",
]
