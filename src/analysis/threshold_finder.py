"""Pareto threshold detection over ranked customers.

This module finds the smallest prefix of ranked customers whose
cumulative revenue share meets a target share. Cumulative revenue
is non-decreasing in rank, so the first qualifying row is found
with a binary search instead of a filter over every row.
"""

from __future__ import annotations

from bisect import bisect_left
from decimal import Decimal
from typing import Sequence

from core.errors import InvalidArgumentError, NoThresholdReachedError
from core.logging_config import get_logger
from core.numbers import coerce_decimal, exact_context
from core.types import ParetoResult, RankedCustomer

_LOGGER = get_logger(__name__)
_FULL_SHARE = Decimal(1)


def validate_target_share(target_share: object) -> Decimal:
    """Parse and bound-check a target share.

    Args:
        target_share: Share as Decimal, int, float, or numeric string.

    Returns:
        Target share as Decimal.

    Raises:
        InvalidArgumentError: If the share is not a number in (0, 1].
    """
    share = coerce_decimal(target_share)
    if share is None or not share.is_finite():
        raise InvalidArgumentError(
            f"Invalid target share {target_share!r}: expected a decimal number in (0, 1]."
        )
    if share <= 0 or share > _FULL_SHARE:
        raise InvalidArgumentError(
            f"Target share {share} is out of range. Use a value greater than 0 and at most 1."
        )
    return share


def find_threshold_customer(
    ranked_customers: Sequence[RankedCustomer],
    target_share: object,
) -> RankedCustomer:
    """Return the first ranked customer whose cumulative share meets the target.

    A target of exactly 1 resolves to the last ranked customer so that
    customers with zero revenue are counted toward the full base.

    Args:
        ranked_customers: Customers in ascending rank order.
        target_share: Requested cumulative revenue share.

    Returns:
        Threshold customer row.

    Raises:
        InvalidArgumentError: If the target share is outside (0, 1].
        NoThresholdReachedError: If there are no customers or no positive revenue.
    """
    return _locate_threshold_customer(ranked_customers, validate_target_share(target_share))


def _locate_threshold_customer(
    ranked_customers: Sequence[RankedCustomer],
    share: Decimal,
) -> RankedCustomer:
    if not ranked_customers:
        raise NoThresholdReachedError(
            "Cannot reach any target share: no customers were ranked. "
            "Provide at least one transaction."
        )
    total_revenue = ranked_customers[-1].grand_total_revenue
    if total_revenue <= 0:
        raise NoThresholdReachedError(
            f"Cannot reach target share {share}: total revenue is {total_revenue}. "
            "At least one transaction must have positive revenue."
        )
    if share == _FULL_SHARE:
        return ranked_customers[-1]
    with exact_context():
        required_revenue = share * total_revenue
    index = bisect_left(
        ranked_customers,
        required_revenue,
        key=lambda customer: customer.cumulative_revenue,
    )
    return ranked_customers[index]


def find_pareto_threshold(
    ranked_customers: Sequence[RankedCustomer],
    target_share: object,
) -> ParetoResult:
    """Summarize the minimal customer prefix reaching a target share.

    Args:
        ranked_customers: Customers in ascending rank order.
        target_share: Requested cumulative revenue share.

    Returns:
        Pareto result for the target share.

    Raises:
        InvalidArgumentError: If the target share is outside (0, 1].
        NoThresholdReachedError: If there are no customers or no positive revenue.
    """
    share = validate_target_share(target_share)
    threshold = _locate_threshold_customer(ranked_customers, share)
    result = ParetoResult(
        target_share=share,
        customers_needed=threshold.rank,
        total_customers=threshold.total_customers,
        cumulative_revenue_at_threshold=threshold.cumulative_revenue,
        total_revenue=threshold.grand_total_revenue,
        cumulative_share=threshold.cumulative_revenue / threshold.grand_total_revenue,
        cumulative_customer_fraction=Decimal(threshold.rank) / Decimal(threshold.total_customers),
    )
    _LOGGER.debug(
        "pareto_threshold_found",
        target_share=str(share),
        customers_needed=result.customers_needed,
        total_customers=result.total_customers,
    )
    return result

