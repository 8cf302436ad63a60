"""Per-customer revenue aggregation."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from core.numbers import exact_context
from core.types import CustomerId, LineRevenue


def aggregate_customer_revenue(
    line_revenues: Iterable[LineRevenue],
) -> dict[CustomerId, Decimal]:
    """Sum line revenue per customer id.

    Customer ids are used exactly as given, so ``"A"`` and ``"a"`` stay
    distinct customers.

    Args:
        line_revenues: Derived line revenues.

    Returns:
        Mapping of customer id to total revenue in first-seen order.
    """
    totals: dict[CustomerId, Decimal] = {}
    with exact_context():
        for line in line_revenues:
            totals[line.customer_id] = totals.get(line.customer_id, Decimal(0)) + line.revenue
    return totals
