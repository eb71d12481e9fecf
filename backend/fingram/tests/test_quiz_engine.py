"""Tests for the quiz state machine."""

import pathlib
import sys

# Allow importing the fingram package
sys.path.append(str(pathlib.Path(__file__).resolve().parents[2]))

from fingram.content import QUIZ_QUESTIONS
from fingram.quiz import (
    FINISHED,
    IN_PROGRESS,
    NOT_STARTED,
    TIER_HIGH,
    TIER_LOW,
    TIER_MEDIUM,
    QuizEngine,
    filter_questions,
    score_tier,
)
from fingram.schemas import QuizQuestion


class ManualHandle:
    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    """Collects scheduled callbacks so a test can fire them on demand."""

    def __init__(self):
        self.handles = []

    def __call__(self, delay, callback):
        handle = ManualHandle(delay, callback)
        self.handles.append(handle)
        return handle

    def fire(self):
        handles, self.handles = self.handles, []
        for handle in handles:
            if not handle.cancelled:
                handle.callback()


def _question(qid, correct=0, difficulty="beginner"):
    return QuizQuestion(
        id=qid,
        question=f"Question {qid}?",
        options=("a", "b", "c", "d"),
        correct=correct,
        explanation=f"Because {qid}.",
        difficulty=difficulty,
    )


def _engine(questions, **kwargs):
    scheduler = ManualScheduler()
    finished = []
    engine = QuizEngine(
        questions, schedule=scheduler, on_finish=finished.append, **kwargs
    )
    return engine, scheduler, finished


def test_three_question_session_scores_two_of_three():
    questions = [_question(1, 0), _question(2, 1), _question(3, 2)]
    engine, scheduler, finished = _engine(questions)

    assert engine.start()
    for option in (0, 1, 0):
        assert engine.answer(option)
        scheduler.fire()

    assert engine.phase == FINISHED
    assert engine.score == 2
    result = engine.result()
    assert (result.score, result.total) == (2, 3)
    assert result.tier == TIER_MEDIUM
    assert finished == [result]


def test_answer_reveals_then_advances_after_delay():
    engine, scheduler, _ = _engine([_question(1, 2), _question(2, 0)])
    engine.start()
    assert engine.answer(2)
    assert engine.selected_answer == 2
    assert engine.current_index == 0
    assert not engine.can_answer
    assert scheduler.handles[0].delay == 1.5

    scheduler.fire()
    assert engine.phase == IN_PROGRESS
    assert engine.current_index == 1
    assert engine.selected_answer is None
    assert engine.can_answer


def test_second_answer_before_advance_is_ignored():
    engine, scheduler, _ = _engine([_question(1, 0), _question(2, 0)])
    engine.start()
    assert engine.answer(1)
    assert not engine.answer(0)
    assert engine.selected_answer == 1
    assert engine.score == 0
    assert len(scheduler.handles) == 1


def test_actions_outside_a_session_are_ignored():
    engine, scheduler, finished = _engine([_question(1)])
    assert not engine.answer(0)
    assert engine.current_question is None
    assert scheduler.handles == []

    engine.start()
    assert not engine.start()
    assert not engine.select_difficulty("advanced")
    assert not engine.answer(7)
    assert engine.selected_answer is None

    engine.answer(0)
    scheduler.fire()
    assert engine.finished
    assert not engine.answer(0)
    assert not engine.start()
    assert finished[0].score == 1


def test_empty_difficulty_cannot_start():
    engine, _, _ = _engine([_question(1), _question(2)])
    assert engine.select_difficulty("advanced")
    assert engine.questions == []
    assert not engine.can_start
    assert not engine.start()
    assert engine.phase == NOT_STARTED


def test_filter_keeps_original_order():
    intermediate = filter_questions(QUIZ_QUESTIONS, "intermediate")
    assert [q.id for q in intermediate] == [5, 6, 7]
    assert [q.id for q in filter_questions(QUIZ_QUESTIONS, "beginner")] == [1, 2, 3, 4]
    assert [q.id for q in filter_questions(QUIZ_QUESTIONS, "advanced")] == [8, 9, 10]


def test_reset_cancels_pending_advance_and_replay_starts_clean():
    engine, scheduler, finished = _engine([_question(1, 0), _question(2, 0)])
    engine.start()
    engine.answer(0)
    pending = scheduler.handles[0]

    engine.reset()
    assert pending.cancelled
    assert engine.phase == NOT_STARTED
    assert engine.score == 0
    assert engine.selected_answer is None

    engine.start()
    assert engine.current_index == 0
    assert engine.score == 0
    # A stale callback from the old session must not move the new one.
    pending.callback()
    assert engine.current_index == 0
    assert engine.can_answer
    assert finished == []


def test_reset_keeps_selected_difficulty():
    questions = [_question(1), _question(2, difficulty="advanced")]
    engine, scheduler, _ = _engine(questions)
    engine.select_difficulty("advanced")
    engine.start()
    engine.answer(0)
    scheduler.fire()
    assert engine.finished
    engine.reset()
    assert engine.difficulty == "advanced"
    assert [q.id for q in engine.questions] == [2]


def test_score_stays_within_question_count():
    questions = [_question(i, correct=i % 4) for i in range(1, 5)]
    for answers in ([0, 1, 2, 3], [1, 2, 3, 0], [1, 1, 1, 1]):
        engine, scheduler, _ = _engine(questions)
        engine.start()
        for option in answers:
            engine.answer(option)
            scheduler.fire()
        assert engine.finished
        assert 0 <= engine.score <= len(questions)


def test_score_tiers():
    assert score_tier(4, 5) == TIER_HIGH
    assert score_tier(3, 5) == TIER_MEDIUM
    assert score_tier(2, 3) == TIER_MEDIUM
    assert score_tier(1, 2) == TIER_LOW
    assert score_tier(0, 0) == TIER_LOW


def test_custom_reveal_delay_is_used():
    engine, scheduler, _ = _engine([_question(1)], reveal_delay=0.25)
    engine.start()
    engine.answer(3)
    assert scheduler.handles[0].delay == 0.25
