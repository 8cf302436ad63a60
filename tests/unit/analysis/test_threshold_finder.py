"""Unit tests for Pareto threshold detection."""

from __future__ import annotations

from decimal import Decimal

import pytest

import analysis.threshold_finder as threshold_finder
from analysis.rank_cumulate import rank_customers
from analysis.threshold_finder import (
    find_pareto_threshold,
    find_threshold_customer,
    validate_target_share,
)
from core.errors import InvalidArgumentError, NoThresholdReachedError


def _scenario_ranking():
    return rank_customers(
        {"A": Decimal("100"), "B": Decimal("300"), "C": Decimal("500"), "D": Decimal("100")}
    )


def test_find_pareto_threshold_reports_eighty_percent_scenario() -> None:
    """Top two customers hold exactly 80% of revenue in the scenario."""
    result = find_pareto_threshold(_scenario_ranking(), Decimal("0.80"))

    assert result.customers_needed == 2
    assert result.cumulative_share == Decimal("0.8")
    assert result.cumulative_revenue_at_threshold == Decimal("800")
    assert result.total_revenue == Decimal("1000")
    assert result.total_customers == 4
    assert result.cumulative_customer_fraction == Decimal("0.5")


def test_find_pareto_threshold_single_customer() -> None:
    """A single customer always covers the whole revenue."""
    result = find_pareto_threshold(rank_customers({"solo": Decimal("50")}), "0.5")

    assert result.customers_needed == 1 and result.cumulative_share == Decimal("1")


def test_find_threshold_customer_picks_first_qualifying_rank() -> None:
    """The first row meeting the share should be returned, not a later one."""
    ranked = _scenario_ranking()

    assert find_threshold_customer(ranked, Decimal("0.5")).customer_id == "C"
    assert find_threshold_customer(ranked, Decimal("0.5000001")).customer_id == "B"
    assert find_threshold_customer(ranked, Decimal("0.85")).customer_id == "A"


def test_find_pareto_threshold_is_monotone_in_target_share() -> None:
    """Raising the target share never lowers the customers needed."""
    ranked = rank_customers({f"c{i}": Decimal(i * i) for i in range(1, 30)})
    shares = [Decimal(step) / Decimal(20) for step in range(1, 21)]

    needed = [find_pareto_threshold(ranked, share).customers_needed for share in shares]

    assert needed == sorted(needed)


def test_full_share_counts_every_customer_including_zero_revenue() -> None:
    """A target of 1 should include zero-revenue customers at the tail."""
    ranked = rank_customers({"A": Decimal("10"), "B": Decimal("0"), "C": Decimal("0")})

    result = find_pareto_threshold(ranked, 1)

    assert result.customers_needed == result.total_customers == 3


def test_find_pareto_threshold_raises_for_zero_revenue() -> None:
    """All-zero revenue cannot reach any positive share."""
    ranked = rank_customers({"A": Decimal("0"), "B": Decimal("0")})

    with pytest.raises(NoThresholdReachedError):
        find_pareto_threshold(ranked, Decimal("0.8"))


def test_find_pareto_threshold_raises_without_customers() -> None:
    """An empty ranking has no threshold row."""
    with pytest.raises(NoThresholdReachedError):
        find_pareto_threshold([], Decimal("0.8"))


@pytest.mark.parametrize("target_share", [0, "-0.1", Decimal("1.01"), "abc", float("nan"), True])
def test_validate_target_share_rejects_out_of_range(target_share: object) -> None:
    """Shares outside (0, 1] or non-numeric values are invalid arguments."""
    with pytest.raises(InvalidArgumentError):
        validate_target_share(target_share)


def test_validate_target_share_checks_before_ranking_state() -> None:
    """Invalid shares fail even when the ranking itself is degenerate."""
    with pytest.raises(InvalidArgumentError):
        find_pareto_threshold([], Decimal("2"))


def test_find_pareto_threshold_parses_share_once(monkeypatch: pytest.MonkeyPatch) -> None:
    """A result lookup should validate its target share a single time."""
    calls: list[object] = []
    original = threshold_finder.validate_target_share

    def _counting_validate(target_share: object) -> Decimal:
        calls.append(target_share)
        return original(target_share)

    monkeypatch.setattr(threshold_finder, "validate_target_share", _counting_validate)

    result = find_pareto_threshold(_scenario_ranking(), "0.8")

    assert calls == ["0.8"]
    assert result.customers_needed == 2
