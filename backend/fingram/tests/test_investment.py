"""Tests for the compound growth projection."""

import itertools
import pathlib
import sys

import pytest

# Allow importing the fingram package
sys.path.append(str(pathlib.Path(__file__).resolve().parents[2]))

from fingram.investment import (
    ADVICE_ADD_CONTRIBUTIONS,
    ADVICE_EXCELLENT_STRATEGY,
    ADVICE_GO_LONGER_TERM,
    ADVICE_SEEK_HIGHER_YIELD,
    YearlyBreakdown,
    build_report,
    investment_advice,
    project,
)
from fingram.schemas import InvestmentInputs


def _inputs(principal=0, contribution=0, rate=0, years=0):
    return InvestmentInputs(
        principal=principal,
        monthly_contribution=contribution,
        annual_rate_percent=rate,
        years=years,
    )


def test_one_year_with_contributions():
    projection = project(_inputs(principal=10000, contribution=1000, rate=8, years=1))
    assert projection.monthly_rate == pytest.approx(0.08 / 12)
    assert projection.months == 12
    assert projection.principal_value == pytest.approx(10830.0, abs=1)
    assert projection.contributions_value == pytest.approx(12449.9, abs=1)
    assert projection.future_value == pytest.approx(23279.9, abs=1)
    assert projection.total_invested == 22000
    assert projection.profit == pytest.approx(projection.future_value - 22000)
    assert projection.return_percent == pytest.approx(projection.profit / 22000 * 100)


def test_zero_rate_contributions_do_not_grow():
    projection = project(_inputs(principal=5000, contribution=100, rate=0, years=2))
    assert projection.principal_value == 5000
    assert projection.contributions_value == 0
    assert projection.future_value == 5000
    assert projection.total_invested == 5000 + 100 * 24
    assert projection.profit == -2400


def test_zero_rate_without_contributions_keeps_principal():
    projection = project(_inputs(principal=7500, rate=0, years=7))
    assert projection.future_value == projection.total_invested == 7500
    assert projection.profit == 0
    assert projection.return_percent == 0


def test_nothing_invested_returns_zero_percent():
    projection = project(_inputs(rate=12, years=3))
    assert projection.future_value == 0
    assert projection.total_invested == 0
    assert projection.return_percent == 0


@pytest.mark.parametrize(
    "principal,contribution,rate,years",
    list(itertools.product((0, 1500), (0, 250), (0.5, 8, 25), (0, 1, 10))),
)
def test_growth_never_loses_money_with_positive_rate(principal, contribution, rate, years):
    projection = project(_inputs(principal, contribution, rate, years))
    assert projection.future_value >= projection.total_invested - 1e-9


def test_breakdown_is_limited_to_five_years_and_restartable():
    breakdown = YearlyBreakdown(_inputs(principal=1000, contribution=50, rate=6, years=12))
    first = list(breakdown)
    second = list(breakdown)
    assert [s.year for s in first] == [1, 2, 3, 4, 5]
    assert first == second
    assert breakdown.truncated
    assert first[0].value == pytest.approx(
        project(_inputs(principal=1000, contribution=50, rate=6, years=1)).future_value
    )
    assert all(a.value < b.value for a, b in zip(first, first[1:]))


def test_breakdown_for_short_and_empty_terms():
    assert [s.year for s in YearlyBreakdown(_inputs(principal=10, rate=5, years=3))] == [1, 2, 3]
    empty = YearlyBreakdown(_inputs(principal=10, rate=5, years=0))
    assert list(empty) == []
    assert not empty.truncated


def test_advice_flags():
    assert investment_advice(_inputs(principal=1000, rate=5, years=2)) == [
        ADVICE_SEEK_HIGHER_YIELD,
        ADVICE_ADD_CONTRIBUTIONS,
        ADVICE_GO_LONGER_TERM,
    ]
    assert investment_advice(_inputs(principal=1000, contribution=100, rate=8, years=10)) == [
        ADVICE_EXCELLENT_STRATEGY
    ]
    assert investment_advice(_inputs(principal=1000, contribution=100, rate=9, years=7)) == []


def test_advice_needs_amount_and_term():
    assert investment_advice(_inputs(contribution=100, rate=2, years=3)) == []
    assert investment_advice(_inputs(principal=100, rate=2, years=0)) == []


def test_years_are_whole_numbers():
    inputs = InvestmentInputs(years="7.9", principal="", annual_rate_percent=None)
    assert inputs.years == 7
    assert inputs.principal == 0
    report = build_report(inputs)
    assert report.projection.months == 84
    assert report.breakdown_truncated
    assert len(report.yearly) == 5
