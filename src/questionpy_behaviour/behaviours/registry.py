"""Registry mapping behaviour names to behaviour classes."""

from __future__ import annotations

import logging

from questionpy_behaviour.behaviours.base import Behaviour
from questionpy_behaviour.errors import UnknownBehaviourError
from questionpy_behaviour.model.attempt import QuestionAttempt

logger = logging.getLogger(__name__)


class BehaviourRegistry:
    """Creates behaviour instances by name."""

    def __init__(self) -> None:
        self._behaviours: dict[str, type[Behaviour]] = {}

    def register(self, name: str, behaviour_class: type[Behaviour]) -> None:
        """Register a behaviour class under *name*, replacing any previous one."""
        logger.debug("Registering behaviour %r -> %s", name, behaviour_class.__name__)
        self._behaviours[name] = behaviour_class

    def names(self) -> list[str]:
        return sorted(self._behaviours)

    def __contains__(self, name: object) -> bool:
        return name in self._behaviours

    def make_behaviour(
        self,
        name: str,
        qa: QuestionAttempt,
        preferred_behaviour: str | Behaviour | None = None,
    ) -> Behaviour:
        """Instantiate the behaviour registered as *name* for *qa*.

        Raises:
            UnknownBehaviourError: if nothing is registered under *name*.
        """
        try:
            behaviour_class = self._behaviours[name]
        except KeyError as exc:
            raise UnknownBehaviourError(name, cause=exc) from exc
        return behaviour_class(qa, preferred_behaviour, registry=self)


def create_default_registry() -> BehaviourRegistry:
    """Create a BehaviourRegistry with the QuestionPy behaviour registered.

    Hosts register their archetypal behaviours (deferred feedback, adaptive,
    ...) on top of this.
    """
    from questionpy_behaviour.behaviours.questionpy import QuestionPyBehaviour

    registry = BehaviourRegistry()
    registry.register(QuestionPyBehaviour.name, QuestionPyBehaviour)
    return registry
