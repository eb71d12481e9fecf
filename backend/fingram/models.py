"""Database models used by fingram.

The models are defined with SQLModel (built on SQLAlchemy and Pydantic).
The app keeps very little on disk: a settings singleton and a small
string-keyed store for snapshots such as the user's quiz progress.
"""

from typing import Optional
from datetime import datetime, timezone
from sqlmodel import SQLModel, Field


class Settings(SQLModel, table=True):
    """Singleton table storing site‑wide display settings."""
    id: Optional[int] = Field(default=1, primary_key=True)
    site_name: str = "Финансовая грамотность"
    currency_symbol: str = "₽"
    locale: str = "ru-RU"


class KeyValue(SQLModel, table=True):
    """String value stored under a unique key (JSON snapshots, flags)."""

    key: str = Field(primary_key=True)
    value: str
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
