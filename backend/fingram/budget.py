"""Budget calculator arithmetic.

All functions are pure: they take a :class:`BudgetData` snapshot and return
derived figures. A deficit (expenses above income) is a valid state and is
reported as a negative ``remaining`` rather than an error.
"""

from fingram.content import BUDGET_ADVICE_MESSAGES, CATEGORY_LABELS
from fingram.schemas import (
    EXPENSE_CATEGORIES,
    Advice,
    BudgetData,
    BudgetReport,
    BudgetSummary,
    CategoryShare,
)

ADVICE_LOW_SAVINGS = "low_savings"
ADVICE_HIGH_HOUSING = "high_housing"
ADVICE_OVER_BUDGET = "over_budget"
ADVICE_GOOD_BALANCE = "good_balance"

MIN_SAVINGS_RATE = 10.0
MAX_HOUSING_SHARE = 30.0
RECOMMENDED_SAVINGS_RATE = (10.0, 20.0)


def total_expenses(data: BudgetData) -> float:
    return sum(getattr(data.expenses, category) for category in EXPENSE_CATEGORIES)


def share_of_income(amount: float, income: float) -> float:
    """Percentage of income taken by ``amount``; zero when there is no income."""
    if income <= 0:
        return 0.0
    return amount / income * 100


def summarize(data: BudgetData) -> BudgetSummary:
    total = total_expenses(data)
    return BudgetSummary(
        total_expenses=total,
        remaining=data.income - total,
        savings_rate=share_of_income(data.expenses.savings, data.income),
    )


def category_shares(data: BudgetData) -> list[CategoryShare]:
    """Per-category share of income.

    ``percent`` is the raw value used by the advice checks; ``display_percent``
    is capped at 100 for progress bars.
    """
    shares = []
    for category in EXPENSE_CATEGORIES:
        amount = getattr(data.expenses, category)
        percent = share_of_income(amount, data.income)
        shares.append(
            CategoryShare(
                category=category,
                label=CATEGORY_LABELS[category],
                amount=amount,
                percent=percent,
                display_percent=min(percent, 100.0),
            )
        )
    return shares


def budget_advice(data: BudgetData, summary: BudgetSummary | None = None) -> list[str]:
    """Return advice codes for the budget, in display order.

    Nothing is advised until an income has been entered.
    """
    if data.income <= 0:
        return []
    summary = summary or summarize(data)
    codes = []
    if summary.savings_rate < MIN_SAVINGS_RATE:
        codes.append(ADVICE_LOW_SAVINGS)
    if share_of_income(data.expenses.housing, data.income) > MAX_HOUSING_SHARE:
        codes.append(ADVICE_HIGH_HOUSING)
    if summary.remaining < 0:
        codes.append(ADVICE_OVER_BUDGET)
    if summary.remaining >= 0 and summary.savings_rate >= MIN_SAVINGS_RATE:
        codes.append(ADVICE_GOOD_BALANCE)
    return codes


def build_report(data: BudgetData) -> BudgetReport:
    summary = summarize(data)
    return BudgetReport(
        data=data,
        summary=summary,
        savings_rate_display=min(summary.savings_rate, 100.0),
        recommended_savings_rate=RECOMMENDED_SAVINGS_RATE,
        categories=category_shares(data),
        advice=[
            Advice(code=code, message=BUDGET_ADVICE_MESSAGES[code])
            for code in budget_advice(data, summary)
        ],
    )
