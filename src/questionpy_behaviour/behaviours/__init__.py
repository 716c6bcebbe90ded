"""Question behaviours: the base class, the registry and the QuestionPy wrapper."""

from questionpy_behaviour.behaviours.base import ALL_TRIES, FIRST_TRY, LAST_TRY, Behaviour, QuestionRenderer
from questionpy_behaviour.behaviours.questionpy import FORWARDED_OPERATIONS, QuestionPyBehaviour
from questionpy_behaviour.behaviours.registry import BehaviourRegistry, create_default_registry

__all__ = [
    "Behaviour",
    "QuestionRenderer",
    "BehaviourRegistry",
    "QuestionPyBehaviour",
    "FORWARDED_OPERATIONS",
    "create_default_registry",
    "LAST_TRY",
    "FIRST_TRY",
    "ALL_TRIES",
]
