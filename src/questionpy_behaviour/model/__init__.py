"""Host-side model -- attempts, steps, questions and display options."""

from questionpy_behaviour.model.attempt import AttemptState, QuestionAttempt
from questionpy_behaviour.model.display import HIDDEN, VISIBLE, DisplayOptions
from questionpy_behaviour.model.question import QuestionDefinition, QuestionPyQuestion
from questionpy_behaviour.model.step import DISCARD, KEEP, PendingStep, Step

__all__ = [
    # attempt
    "AttemptState",
    "QuestionAttempt",
    # step
    "Step",
    "PendingStep",
    "KEEP",
    "DISCARD",
    # question
    "QuestionDefinition",
    "QuestionPyQuestion",
    # display
    "DisplayOptions",
    "HIDDEN",
    "VISIBLE",
]
