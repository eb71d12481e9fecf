"""Aggregate import for all API route modules."""

from . import (
    budget,
    investment,
    tips,
    quiz,
    progress,
    settings,
)

__all__ = [
    "budget",
    "investment",
    "tips",
    "quiz",
    "progress",
    "settings",
]
