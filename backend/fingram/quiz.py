"""Quiz state machine.

A session moves ``not_started -> in_progress -> finished`` and ``reset()``
returns it to ``not_started`` from anywhere. Actions that are not allowed in
the current state are ignored and report ``False``; the ``can_*`` properties
let the front end disable the matching controls.

After an answer the explanation stays visible for ``reveal_delay`` seconds
before the engine advances on its own. The advance is scheduled through the
``schedule`` callable (``schedule(delay, callback) -> handle`` where the
handle has ``cancel()``, e.g. ``loop.call_later``) and is tagged with the
session generation so a callback left over from a reset session is a no-op.
"""

import asyncio
import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable, Sequence

from fingram.schemas import QuizQuestion

logger = logging.getLogger(__name__)

NOT_STARTED = "not_started"
IN_PROGRESS = "in_progress"
FINISHED = "finished"

BEGINNER = "beginner"
INTERMEDIATE = "intermediate"
ADVANCED = "advanced"
DIFFICULTIES = (BEGINNER, INTERMEDIATE, ADVANCED)

TIER_HIGH = "high"
TIER_MEDIUM = "medium"
TIER_LOW = "low"

DEFAULT_REVEAL_DELAY = 1.5


def score_percent(score: int, total: int) -> float:
    return score / total * 100 if total else 0.0


def score_tier(score: int, total: int) -> str:
    percent = score_percent(score, total)
    if percent >= 80:
        return TIER_HIGH
    if percent >= 60:
        return TIER_MEDIUM
    return TIER_LOW


def filter_questions(
    questions: Sequence[QuizQuestion], difficulty: str
) -> list[QuizQuestion]:
    """Questions tagged ``difficulty`` in their original order."""
    return [q for q in questions if q.difficulty == difficulty]


def call_later(delay: float, callback: Callable[[], None]):
    return asyncio.get_running_loop().call_later(delay, callback)


@dataclass(frozen=True)
class QuizResult:
    difficulty: str
    score: int
    total: int

    @property
    def percent(self) -> float:
        return score_percent(self.score, self.total)

    @property
    def tier(self) -> str:
        return score_tier(self.score, self.total)


class QuizEngine:
    def __init__(
        self,
        questions: Sequence[QuizQuestion],
        schedule: Callable = call_later,
        reveal_delay: float = DEFAULT_REVEAL_DELAY,
        on_finish: Callable[[QuizResult], None] | None = None,
        difficulty: str = BEGINNER,
    ):
        self._all_questions = tuple(questions)
        self._schedule = schedule
        self.reveal_delay = reveal_delay
        self.on_finish = on_finish
        self._difficulty = difficulty
        self._questions = filter_questions(self._all_questions, difficulty)
        self._generation = 0
        self._pending = None
        self._clear()

    def _clear(self) -> None:
        self._phase = NOT_STARTED
        self._index = 0
        self._selected: int | None = None
        self._score = 0

    @property
    def phase(self) -> str:
        return self._phase

    @property
    def difficulty(self) -> str:
        return self._difficulty

    @property
    def questions(self) -> list[QuizQuestion]:
        return list(self._questions)

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def selected_answer(self) -> int | None:
        return self._selected

    @property
    def score(self) -> int:
        return self._score

    @property
    def started(self) -> bool:
        return self._phase != NOT_STARTED

    @property
    def finished(self) -> bool:
        return self._phase == FINISHED

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def current_question(self) -> QuizQuestion | None:
        if self._phase != IN_PROGRESS:
            return None
        return self._questions[self._index]

    @property
    def can_select_difficulty(self) -> bool:
        return self._phase == NOT_STARTED

    @property
    def can_start(self) -> bool:
        return self._phase == NOT_STARTED and bool(self._questions)

    @property
    def can_answer(self) -> bool:
        return self._phase == IN_PROGRESS and self._selected is None

    def result(self) -> QuizResult | None:
        if self._phase != FINISHED:
            return None
        return QuizResult(self._difficulty, self._score, len(self._questions))

    def select_difficulty(self, difficulty: str) -> bool:
        if not self.can_select_difficulty or difficulty not in DIFFICULTIES:
            logger.debug("Ignoring difficulty change to %s in %s", difficulty, self._phase)
            return False
        self._difficulty = difficulty
        self._questions = filter_questions(self._all_questions, difficulty)
        return True

    def start(self) -> bool:
        if not self.can_start:
            logger.debug("Ignoring start in %s with %d questions", self._phase, len(self._questions))
            return False
        self._new_generation()
        self._clear()
        self._phase = IN_PROGRESS
        logger.info("Quiz started: %s, %d questions", self._difficulty, len(self._questions))
        return True

    def answer(self, option: int) -> bool:
        if not self.can_answer:
            logger.debug("Ignoring answer %s in %s", option, self._phase)
            return False
        question = self._questions[self._index]
        if not 0 <= option < len(question.options):
            logger.debug("Ignoring out of range answer %s for question %s", option, question.id)
            return False
        self._selected = option
        if option == question.correct:
            self._score += 1
        self._pending = self._schedule(
            self.reveal_delay, partial(self._advance, self._generation)
        )
        return True

    def reset(self) -> None:
        self._new_generation()
        self._clear()

    def _new_generation(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        self._generation += 1

    def _advance(self, generation: int) -> None:
        if generation != self._generation or self._phase != IN_PROGRESS:
            return
        self._pending = None
        if self._index + 1 < len(self._questions):
            self._index += 1
            self._selected = None
            return
        self._phase = FINISHED
        result = self.result()
        logger.info("Quiz finished: %d/%d (%s)", result.score, result.total, result.tier)
        if self.on_finish is not None:
            self.on_finish(result)
