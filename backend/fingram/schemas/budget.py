"""Schemas for the budget calculator."""

from pydantic import BaseModel, Field

from .fields import Amount

EXPENSE_CATEGORIES = ("housing", "food", "transport", "entertainment", "savings")


class Expenses(BaseModel):
    housing: Amount = 0.0
    food: Amount = 0.0
    transport: Amount = 0.0
    entertainment: Amount = 0.0
    savings: Amount = 0.0


class BudgetData(BaseModel):
    income: Amount = 0.0
    expenses: Expenses = Field(default_factory=Expenses)


class BudgetUpdate(BaseModel):
    """Partial edit of the budget form; only fields that were sent are applied."""

    income: Amount = 0.0
    housing: Amount = 0.0
    food: Amount = 0.0
    transport: Amount = 0.0
    entertainment: Amount = 0.0
    savings: Amount = 0.0


class BudgetSummary(BaseModel):
    total_expenses: float
    remaining: float
    savings_rate: float


class CategoryShare(BaseModel):
    category: str
    label: str
    amount: float
    percent: float
    display_percent: float


class Advice(BaseModel):
    code: str
    message: str


class BudgetReport(BaseModel):
    data: BudgetData
    summary: BudgetSummary
    savings_rate_display: float
    recommended_savings_rate: tuple[float, float]
    categories: list[CategoryShare]
    advice: list[Advice]
