"""Schemas for the investment growth calculator."""

from pydantic import BaseModel

from .fields import Amount, WholeYears
from .budget import Advice


class InvestmentInputs(BaseModel):
    principal: Amount = 0.0
    years: WholeYears = 0
    annual_rate_percent: Amount = 0.0
    monthly_contribution: Amount = 0.0


class InvestmentUpdate(BaseModel):
    principal: Amount = 0.0
    years: WholeYears = 0
    annual_rate_percent: Amount = 0.0
    monthly_contribution: Amount = 0.0


class Projection(BaseModel):
    monthly_rate: float
    months: int
    principal_value: float
    contributions_value: float
    future_value: float
    total_invested: float
    profit: float
    return_percent: float


class YearSnapshot(BaseModel):
    year: int
    value: float


class ProjectionReport(BaseModel):
    inputs: InvestmentInputs
    projection: Projection
    yearly: list[YearSnapshot]
    breakdown_truncated: bool
    advice: list[Advice]
