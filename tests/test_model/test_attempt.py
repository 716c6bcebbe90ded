"""Tests for attempts, steps, questions and display options."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from questionpy_behaviour.model import (
    DISCARD,
    KEEP,
    AttemptState,
    DisplayOptions,
    PendingStep,
    QuestionAttempt,
    QuestionDefinition,
    QuestionPyQuestion,
    Step,
)


class RecordingBehaviour:
    """Duck-typed behaviour for driving QuestionAttempt."""

    def __init__(self, outcome: bool = KEEP) -> None:
        self.outcome = outcome
        self.first_steps: list[tuple[Step, int]] = []
        self.pending: list[PendingStep] = []

    def init_first_step(self, step: Step, variant: int) -> None:
        step.set_qt_var("_variant", variant)
        self.first_steps.append((step, variant))

    def process_action(self, pending_step: PendingStep) -> bool:
        self.pending.append(pending_step)
        return self.outcome


# ---------------------------------------------------------------------------
# Step
# ---------------------------------------------------------------------------


class TestStep:
    def test_values_are_stored_as_strings(self) -> None:
        step = Step()
        step.set_qt_var("n", 3)
        step.set_behaviour_var("submit", 1)
        assert step.get_qt_var("n") == "3"
        assert step.get_behaviour_var("submit") == "1"

    def test_missing_vars_use_default(self) -> None:
        step = Step()
        assert step.get_qt_var("x") is None
        assert step.get_behaviour_var("x", "d") == "d"
        assert not step.has_qt_var("x")

    def test_all_data_prefixes_behaviour_vars(self) -> None:
        step = Step(qt_data={"a": "1"}, behaviour_data={"b": "2"})
        assert step.get_all_data() == {"a": "1", "-b": "2"}

    def test_pending_step_outcome(self) -> None:
        pending = PendingStep()
        assert pending.outcome is None
        assert not pending.kept
        pending.outcome = KEEP
        assert pending.kept


# ---------------------------------------------------------------------------
# AttemptState
# ---------------------------------------------------------------------------


class TestAttemptState:
    @pytest.mark.parametrize(
        "state",
        [AttemptState.GRADED_RIGHT, AttemptState.GRADED_PARTIAL, AttemptState.MANUALLY_GRADED_WRONG],
    )
    def test_graded_states(self, state: AttemptState) -> None:
        assert state.is_graded
        assert state.is_finished
        assert not state.is_active

    def test_active_states(self) -> None:
        assert AttemptState.TODO.is_active
        assert not AttemptState.TODO.is_graded
        assert not AttemptState.TODO.is_finished

    def test_not_started_is_neither_active_nor_finished(self) -> None:
        assert not AttemptState.NOT_STARTED.is_active
        assert not AttemptState.NOT_STARTED.is_finished

    def test_default_string_hides_correctness(self) -> None:
        assert AttemptState.GRADED_RIGHT.default_string(True) == "Correct"
        assert AttemptState.GRADED_RIGHT.default_string(False) == "Complete"
        assert AttemptState.TODO.default_string(False) == "Not yet answered"


# ---------------------------------------------------------------------------
# QuestionAttempt
# ---------------------------------------------------------------------------


class TestQuestionAttempt:
    def test_last_vars_prefer_latest_step(self) -> None:
        qa = QuestionAttempt(question=QuestionDefinition())
        qa.add_step(Step(qt_data={"x": "1"}, behaviour_data={"b": "first"}))
        qa.add_step(Step(qt_data={"y": "2"}))
        qa.add_step(Step(qt_data={"x": "3"}))

        assert qa.get_last_qt_var("x") == "3"
        assert qa.get_last_qt_var("y") == "2"
        assert qa.get_last_qt_var("z", "none") == "none"
        assert qa.get_last_behaviour_var("b") == "first"
        assert qa.get_last_behaviour_var("c", "fallback") == "fallback"

    def test_last_step_of_empty_attempt(self) -> None:
        with pytest.raises(IndexError):
            QuestionAttempt(question=QuestionDefinition()).get_last_step()

    def test_start_initialises_first_step(self) -> None:
        qa = QuestionAttempt(question=QuestionDefinition())
        behaviour = RecordingBehaviour()

        first = qa.start(behaviour, variant=4)

        assert qa.steps == [first]
        assert qa.variant == 4
        assert qa.get_state() is AttemptState.TODO
        assert behaviour.first_steps == [(first, 4)]

    def test_process_action_splits_submitted_data(self) -> None:
        qa = QuestionAttempt(question=QuestionDefinition())
        qa.start(RecordingBehaviour())
        behaviour = RecordingBehaviour()

        pending = qa.process_action(behaviour, {"answer": "42", "-submit": "1"})

        assert pending.qt_data == {"answer": "42"}
        assert pending.behaviour_data == {"submit": "1"}
        assert behaviour.pending == [pending]
        assert qa.get_last_step() is pending

    def test_discarded_step_is_not_recorded(self) -> None:
        qa = QuestionAttempt(question=QuestionDefinition())
        qa.start(RecordingBehaviour())

        pending = qa.process_action(RecordingBehaviour(outcome=DISCARD), {"answer": "1"})

        assert pending.outcome is DISCARD
        assert len(qa.steps) == 1

    def test_save_and_load(self, tmp_path: Path) -> None:
        qa = QuestionAttempt(
            question=QuestionPyQuestion(name="q", questionstate="{}"),
            steps=[Step(qt_data={"_attemptstate": "a"}, behaviour_data={"_behaviour": "adaptive"})],
            state=AttemptState.GRADED_RIGHT,
            variant=2,
        )
        path = tmp_path / "nested" / "qa.json"

        qa.save(path)
        loaded = QuestionAttempt.load(path)

        assert json.loads(path.read_text())["state"] == "gradedright"
        assert isinstance(loaded.question, QuestionPyQuestion)
        assert loaded.question.questionstate == "{}"
        assert loaded.state is AttemptState.GRADED_RIGHT
        assert loaded.variant == 2
        assert loaded.steps == qa.steps

    def test_from_dict_other_question_type(self) -> None:
        qa = QuestionAttempt.from_dict({"question": {"qtype": "shortanswer", "name": "s"}})
        assert type(qa.question) is QuestionDefinition
        assert qa.question.get_type_name() == "shortanswer"

    def test_from_dict_missing_state_matches_default(self) -> None:
        qa = QuestionAttempt.from_dict({"question": {}})
        assert qa.state is QuestionAttempt(question=QuestionDefinition()).state
        assert qa.state is AttemptState.NOT_STARTED

    def test_save_and_load_keeps_question_fields_and_comment(self, tmp_path: Path) -> None:
        question = QuestionPyQuestion(
            name="q",
            min_fraction=-0.5,
            max_fraction=0.75,
            summary="Sort the list",
            right_answer_summary="1, 2, 3",
            expected_data={"answer": "text"},
            correct_response={"answer": "1,2,3"},
        )
        qa = QuestionAttempt(question=question)
        qa.start(RecordingBehaviour())
        qa.process_action(RecordingBehaviour(), {"-comment": "good work"})
        path = tmp_path / "qa.json"

        qa.save(path)
        loaded = QuestionAttempt.load(path)

        assert loaded.get_manual_comment() == "good work"
        assert loaded.question == question
        assert loaded.question.get_min_fraction() == -0.5
        assert loaded.question.get_expected_data() == {"answer": "text"}

    def test_manual_comment_absent(self) -> None:
        assert QuestionAttempt(question=QuestionDefinition()).get_manual_comment() is None

    def test_from_dict_rejects_unknown_state(self) -> None:
        with pytest.raises(ValueError):
            QuestionAttempt.from_dict({"question": {}, "state": "bogus"})


# ---------------------------------------------------------------------------
# Questions and display options
# ---------------------------------------------------------------------------


class TestQuestionPyQuestion:
    def test_requires_behaviour_for_pending_step(self) -> None:
        with pytest.raises(RuntimeError, match="not governed"):
            QuestionPyQuestion(name="q").set_attempt_state("{}")

    def test_type_name(self) -> None:
        assert QuestionPyQuestion().get_type_name() == "questionpy"


class TestDisplayOptions:
    def test_clone_is_independent(self) -> None:
        options = DisplayOptions(extrahistorycontent="a")
        copy = options.clone()
        copy.extrahistorycontent += "b"
        copy.readonly = True

        assert options.extrahistorycontent == "a"
        assert options.readonly is False
        assert copy == DisplayOptions(readonly=True, extrahistorycontent="ab")
