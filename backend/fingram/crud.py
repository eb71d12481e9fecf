"""Asynchronous CRUD helpers for the application's data models.

Each function in this module encapsulates a specific database operation
using SQLModel and SQLAlchemy.  Centralizing the logic keeps route
handlers light and makes behavior easier to test.
"""

import logging
from datetime import datetime, timezone

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from fingram.models import Settings, KeyValue
from fingram.schemas import UserProgress

logger = logging.getLogger(__name__)

PROGRESS_KEY = "financeProgress"


async def get_settings(db: AsyncSession) -> Settings:
    """Fetch the singleton settings record, creating it if necessary."""
    result = await db.execute(select(Settings).where(Settings.id == 1))
    settings = result.scalar_one_or_none()
    if not settings:
        settings = Settings()
        db.add(settings)
        await db.commit()
        await db.refresh(settings)
    return settings


async def save_settings(db: AsyncSession, settings: Settings) -> Settings:
    """Persist settings changes and return the refreshed object."""

    db.add(settings)
    await db.commit()
    await db.refresh(settings)
    return settings


async def get_value(db: AsyncSession, key: str) -> str | None:
    result = await db.execute(select(KeyValue).where(KeyValue.key == key))
    item = result.scalar_one_or_none()
    return item.value if item else None


async def set_value(db: AsyncSession, key: str, value: str) -> KeyValue:
    """Insert or overwrite the value stored under ``key``."""

    result = await db.execute(select(KeyValue).where(KeyValue.key == key))
    item = result.scalar_one_or_none()
    if item:
        item.value = value
        item.updated_at = datetime.now(timezone.utc)
    else:
        item = KeyValue(key=key, value=value)
    db.add(item)
    await db.commit()
    await db.refresh(item)
    return item


def encode_progress(progress: UserProgress) -> str:
    return progress.model_dump_json(by_alias=True)


def decode_progress(raw: str | None) -> UserProgress:
    """Parse a stored progress snapshot, falling back to zeros if unusable."""
    if raw is None:
        return UserProgress()
    try:
        return UserProgress.model_validate_json(raw)
    except (ValidationError, RecursionError) as exc:
        logger.warning("Ignoring unreadable progress snapshot: %s", exc)
        return UserProgress()


def next_progress(
    progress: UserProgress, score: int, budget_planned: bool
) -> UserProgress:
    """Progress after one more finished quiz.

    The best score only ever goes up and each finished quiz counts once; a
    budget plan is counted when an income had been entered at that point.
    """
    return UserProgress(
        best_quiz_score=max(progress.best_quiz_score, score),
        completed_tests=progress.completed_tests + 1,
        budget_plans=progress.budget_plans + (1 if budget_planned else 0),
    )


async def load_progress(db: AsyncSession) -> UserProgress:
    return decode_progress(await get_value(db, PROGRESS_KEY))


async def save_progress(db: AsyncSession, progress: UserProgress) -> UserProgress:
    await set_value(db, PROGRESS_KEY, encode_progress(progress))
    return progress
