"""Customer ranking with running revenue totals.

This module orders customers by descending revenue and computes
cumulative revenue and customer counts in one linear pass.

Ties in revenue are broken by ascending customer id. Integer ids
order numerically and come before string ids, which order
lexicographically. The rule keeps repeated runs reproducible.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Mapping

from core.logging_config import get_logger
from core.numbers import exact_context
from core.types import CustomerId, CustomerRevenue, RankedCustomer

_LOGGER = get_logger(__name__)


def order_customers(customer_totals: Mapping[CustomerId, Decimal]) -> list[CustomerRevenue]:
    """Sort customers by revenue descending with the id tie-break.

    Args:
        customer_totals: Mapping of customer id to total revenue.

    Returns:
        Customer revenues in rank order.
    """
    customers = [
        CustomerRevenue(customer_id=customer_id, total_revenue=total_revenue)
        for customer_id, total_revenue in customer_totals.items()
    ]
    # Stable sorts: apply the secondary key first.
    customers.sort(key=lambda customer: _customer_id_sort_key(customer.customer_id))
    customers.sort(key=lambda customer: customer.total_revenue, reverse=True)
    return customers


def rank_customers(customer_totals: Mapping[CustomerId, Decimal]) -> list[RankedCustomer]:
    """Rank customers and attach running and overall totals.

    Args:
        customer_totals: Mapping of customer id to total revenue.

    Returns:
        Ranked customers sorted by revenue descending. Empty input
        yields an empty list.
    """
    ordered = order_customers(customer_totals)
    running_customer_count = 0
    running_revenue_sum = Decimal(0)
    running_rows: list[tuple[CustomerRevenue, int, Decimal]] = []
    with exact_context():
        for customer in ordered:
            running_customer_count += 1
            running_revenue_sum += customer.total_revenue
            running_rows.append((customer, running_customer_count, running_revenue_sum))
    ranked = [
        RankedCustomer(
            customer_id=customer.customer_id,
            total_revenue=customer.total_revenue,
            rank=rank,
            cumulative_revenue=cumulative_revenue,
            cumulative_customer_count=rank,
            total_customers=running_customer_count,
            grand_total_revenue=running_revenue_sum,
        )
        for customer, rank, cumulative_revenue in running_rows
    ]
    _LOGGER.debug(
        "customers_ranked",
        total_customers=running_customer_count,
        total_revenue=str(running_revenue_sum),
    )
    return ranked


def _customer_id_sort_key(customer_id: CustomerId) -> tuple[int, int, str]:
    if isinstance(customer_id, int) and not isinstance(customer_id, bool):
        return (0, customer_id, "")
    return (1, 0, str(customer_id))
