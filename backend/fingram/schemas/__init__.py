"""Convenience imports for all schema classes used by the API."""

from .budget import (
    EXPENSE_CATEGORIES,
    Expenses,
    BudgetData,
    BudgetUpdate,
    BudgetSummary,
    CategoryShare,
    Advice,
    BudgetReport,
)
from .investment import (
    InvestmentInputs,
    InvestmentUpdate,
    Projection,
    YearSnapshot,
    ProjectionReport,
)
from .quiz import (
    Difficulty,
    QuizQuestion,
    QuestionRead,
    Reveal,
    QuizResultRead,
    QuizView,
    DifficultySelect,
    AnswerSubmission,
)
from .progress import UserProgress
from .tip import Tip
from .settings import SettingsRead, SettingsUpdate

__all__ = [
    "EXPENSE_CATEGORIES",
    "Expenses",
    "BudgetData",
    "BudgetUpdate",
    "BudgetSummary",
    "CategoryShare",
    "Advice",
    "BudgetReport",
    "InvestmentInputs",
    "InvestmentUpdate",
    "Projection",
    "YearSnapshot",
    "ProjectionReport",
    "Difficulty",
    "QuizQuestion",
    "QuestionRead",
    "Reveal",
    "QuizResultRead",
    "QuizView",
    "DifficultySelect",
    "AnswerSubmission",
    "UserProgress",
    "Tip",
    "SettingsRead",
    "SettingsUpdate",
]
