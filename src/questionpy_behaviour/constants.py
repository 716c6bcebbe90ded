"""Reserved variable names and identifiers shared with the host."""

# Behaviour variable recording which archetypal behaviour the wrapper delegates to.
QB_VAR_BEHAVIOUR = "_behaviour"

# Question type variables written by QuestionPy questions.
QT_VAR_ATTEMPT_STATE = "_attemptstate"
QT_VAR_SCORING_STATE = "_scoringstate"

QUESTION_TYPE_NAME = "questionpy"
BEHAVIOUR_NAME = "questionpy"
