"""Compound growth projections for the investment calculator.

Interest compounds monthly at ``annual_rate_percent / 100 / 12`` and the
monthly contribution is treated as an ordinary annuity. When the rate is
exactly zero the contribution stream contributes no growth value at all
(not ``contribution * months``); the front end has always shown it that way.
"""

from fingram.content import INVESTMENT_ADVICE_MESSAGES
from fingram.schemas import (
    Advice,
    InvestmentInputs,
    Projection,
    ProjectionReport,
    YearSnapshot,
)

ADVICE_SEEK_HIGHER_YIELD = "seek_higher_yield"
ADVICE_ADD_CONTRIBUTIONS = "add_contributions"
ADVICE_GO_LONGER_TERM = "go_longer_term"
ADVICE_EXCELLENT_STRATEGY = "excellent_strategy"

MONTHS_PER_YEAR = 12
BREAKDOWN_YEARS = 5
TARGET_RATE = 8.0
SHORT_TERM_YEARS = 5
LONG_TERM_YEARS = 10


def monthly_rate(annual_rate_percent: float) -> float:
    return annual_rate_percent / 100 / MONTHS_PER_YEAR


def principal_growth(principal: float, rate: float, months: int) -> float:
    if principal <= 0:
        return 0.0
    return principal * (1 + rate) ** months


def contribution_growth(contribution: float, rate: float, months: int) -> float:
    if contribution <= 0 or rate <= 0:
        return 0.0
    return contribution * ((1 + rate) ** months - 1) / rate


def value_after(inputs: InvestmentInputs, months: int) -> float:
    """Projected capital after ``months`` periods."""
    rate = monthly_rate(inputs.annual_rate_percent)
    return principal_growth(inputs.principal, rate, months) + contribution_growth(
        inputs.monthly_contribution, rate, months
    )


def project(inputs: InvestmentInputs) -> Projection:
    rate = monthly_rate(inputs.annual_rate_percent)
    months = inputs.years * MONTHS_PER_YEAR
    principal_value = principal_growth(inputs.principal, rate, months)
    contributions_value = contribution_growth(inputs.monthly_contribution, rate, months)
    future_value = principal_value + contributions_value
    total_invested = inputs.principal + inputs.monthly_contribution * months
    profit = future_value - total_invested
    return Projection(
        monthly_rate=rate,
        months=months,
        principal_value=principal_value,
        contributions_value=contributions_value,
        future_value=future_value,
        total_invested=total_invested,
        profit=profit,
        return_percent=profit / total_invested * 100 if total_invested > 0 else 0.0,
    )


class YearlyBreakdown:
    """Year-end snapshots for the first few years of a projection.

    Iterating is lazy and can be repeated; each pass recomputes the values
    from the inputs captured at construction time.
    """

    def __init__(self, inputs: InvestmentInputs, limit: int = BREAKDOWN_YEARS):
        self.inputs = inputs
        self.limit = limit

    def __len__(self) -> int:
        return max(0, min(self.inputs.years, self.limit))

    def __iter__(self):
        for year in range(1, len(self) + 1):
            yield YearSnapshot(
                year=year, value=value_after(self.inputs, year * MONTHS_PER_YEAR)
            )

    @property
    def truncated(self) -> bool:
        return self.inputs.years > self.limit


def investment_advice(inputs: InvestmentInputs) -> list[str]:
    """Return advice codes; only given once an amount and a term are entered."""
    if inputs.principal <= 0 or inputs.years <= 0:
        return []
    codes = []
    if inputs.annual_rate_percent < TARGET_RATE:
        codes.append(ADVICE_SEEK_HIGHER_YIELD)
    if inputs.monthly_contribution == 0:
        codes.append(ADVICE_ADD_CONTRIBUTIONS)
    if inputs.years < SHORT_TERM_YEARS:
        codes.append(ADVICE_GO_LONGER_TERM)
    if inputs.years >= LONG_TERM_YEARS and inputs.annual_rate_percent >= TARGET_RATE:
        codes.append(ADVICE_EXCELLENT_STRATEGY)
    return codes


def build_report(inputs: InvestmentInputs) -> ProjectionReport:
    breakdown = YearlyBreakdown(inputs)
    return ProjectionReport(
        inputs=inputs,
        projection=project(inputs),
        yearly=list(breakdown),
        breakdown_truncated=breakdown.truncated,
        advice=[
            Advice(code=code, message=INVESTMENT_ADVICE_MESSAGES[code])
            for code in investment_advice(inputs)
        ],
    )
