"""In-memory state of the running app.

The app serves a single user, so the budget form, the investment form and
the live quiz session are held by one :class:`Workspace` for the lifetime of
the process. Finishing a quiz updates the persisted progress record.
"""

import asyncio
import logging
import os
from typing import Callable

from fingram.content import QUIZ_QUESTIONS
from fingram.crud import load_progress, next_progress, save_progress
from fingram.database import async_session
from fingram.quiz import QuizEngine, QuizResult, call_later
from fingram.schemas import BudgetData, InvestmentInputs, UserProgress

logger = logging.getLogger(__name__)

REVEAL_DELAY = float(os.getenv("QUIZ_REVEAL_DELAY", "1.5"))


class Workspace:
    def __init__(
        self,
        session_factory=async_session,
        schedule: Callable = call_later,
        reveal_delay: float = REVEAL_DELAY,
        questions=QUIZ_QUESTIONS,
    ):
        self._session_factory = session_factory
        self._commits: set[asyncio.Task] = set()
        self.budget = BudgetData()
        self.investment = InvestmentInputs()
        self.progress = UserProgress()
        self.quiz = QuizEngine(
            questions,
            schedule=schedule,
            reveal_delay=reveal_delay,
            on_finish=self._on_quiz_finished,
        )

    async def load_progress(self) -> UserProgress:
        async with self._session_factory() as db:
            self.progress = await load_progress(db)
        logger.info("Loaded progress: %s", self.progress)
        return self.progress

    def _on_quiz_finished(self, result: QuizResult) -> None:
        self.progress = next_progress(
            self.progress, result.score, self.budget.income > 0
        )
        task = asyncio.get_running_loop().create_task(
            self._save_progress(self.progress)
        )
        self._commits.add(task)
        task.add_done_callback(self._commits.discard)

    async def _save_progress(self, progress: UserProgress) -> None:
        try:
            async with self._session_factory() as db:
                await save_progress(db, progress)
            logger.info("Progress saved: %s", progress)
        except Exception as exc:
            logger.exception("Saving progress failed: %s", exc)

    async def flush(self) -> None:
        """Wait for progress writes that are still in flight."""
        if self._commits:
            await asyncio.gather(*list(self._commits))


_workspace: Workspace | None = None


def get_workspace() -> Workspace:
    global _workspace
    if _workspace is None:
        _workspace = Workspace()
    return _workspace
