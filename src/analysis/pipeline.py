"""Pareto analysis orchestration.

This module runs revenue derivation, customer aggregation, and
ranking once, then evaluates every requested target share against
the same ranked sequence.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Sequence

from analysis.customer_aggregator import aggregate_customer_revenue
from analysis.rank_cumulate import rank_customers
from analysis.revenue_deriver import derive_line_revenues
from analysis.threshold_finder import find_pareto_threshold, validate_target_share
from core.errors import InvalidArgumentError, ParetoError
from core.logging_config import get_logger
from core.types import ParetoReport, ParetoResult, Transaction

_LOGGER = get_logger(__name__)


def analyze_transactions(
    transactions: Iterable[Transaction],
    target_shares: Sequence[object],
) -> ParetoReport:
    """Run the full Pareto pipeline for one or more target shares.

    Target shares are validated before any transaction is read, and
    any failure aborts the run without a partial report.

    Args:
        transactions: Input transactions.
        target_shares: Shares in (0, 1], evaluated in the given order.

    Returns:
        Ranked customers plus one result per target share.

    Raises:
        InvalidArgumentError: If any target share is outside (0, 1].
        InvalidInputError: If any transaction is malformed.
        NoThresholdReachedError: If total revenue is not positive.
    """
    shares = _validate_target_shares(target_shares)
    try:
        line_revenues = derive_line_revenues(transactions)
        customer_totals = aggregate_customer_revenue(line_revenues)
        ranked_customers = rank_customers(customer_totals)
        results = tuple(find_pareto_threshold(ranked_customers, share) for share in shares)
    except ParetoError as error:
        _LOGGER.error("pareto_analysis_failed", error_type=type(error).__name__, error=str(error))
        raise
    _log_analysis_completion(len(line_revenues), len(ranked_customers), results)
    return ParetoReport(ranked_customers=tuple(ranked_customers), results=results)


def run_pareto_analysis(
    transactions: Iterable[Transaction],
    target_share: object,
) -> ParetoResult:
    """Run the full Pareto pipeline for a single target share."""
    report = analyze_transactions(transactions, (target_share,))
    return report.results[0]


def _validate_target_shares(target_shares: Sequence[object]) -> tuple[Decimal, ...]:
    if len(target_shares) == 0:
        raise InvalidArgumentError("At least one target share is required, e.g. 0.80.")
    return tuple(validate_target_share(share) for share in target_shares)


def _log_analysis_completion(
    transaction_count: int,
    customer_count: int,
    results: tuple[ParetoResult, ...],
) -> None:
    _LOGGER.info(
        "pareto_analysis_completed",
        transaction_count=transaction_count,
        customer_count=customer_count,
        thresholds={str(result.target_share): result.customers_needed for result in results},
    )
