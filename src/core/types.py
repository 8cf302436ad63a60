"""Shared typed models.

This module defines immutable data models passed between the
revenue, aggregation, ranking, and threshold stages and the
reader, exporter, and CLI layers around them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Union

from core.constants import (
    DEFAULT_CUSTOMER_COLUMN,
    DEFAULT_QUANTITY_COLUMN,
    DEFAULT_UNIT_PRICE_COLUMN,
)

CustomerId = Union[str, int]


@dataclass(frozen=True)
class Transaction:
    """One retail transaction line.

    Attributes:
        customer_id: Customer identifier, grouped exactly as given.
        quantity: Units sold, a non-negative integer.
        unit_price: Price per unit, a non-negative decimal.
    """

    customer_id: CustomerId
    quantity: int
    unit_price: Decimal


@dataclass(frozen=True)
class LineRevenue:
    """Revenue derived from a single transaction."""

    customer_id: CustomerId
    revenue: Decimal


@dataclass(frozen=True)
class CustomerRevenue:
    """Total revenue for one distinct customer."""

    customer_id: CustomerId
    total_revenue: Decimal


@dataclass(frozen=True)
class RankedCustomer:
    """Customer row in descending revenue order with running totals.

    Attributes:
        customer_id: Customer identifier.
        total_revenue: Revenue of this customer alone.
        rank: One-based position in descending revenue order.
        cumulative_revenue: Revenue summed over ranks 1..rank.
        cumulative_customer_count: Customers counted so far, equal to rank.
        total_customers: Number of ranked customers overall.
        grand_total_revenue: Revenue summed over every customer.
    """

    customer_id: CustomerId
    total_revenue: Decimal
    rank: int
    cumulative_revenue: Decimal
    cumulative_customer_count: int
    total_customers: int
    grand_total_revenue: Decimal

    @property
    def cumulative_share(self) -> Decimal | None:
        """Cumulative revenue share, or None when total revenue is zero."""
        if self.grand_total_revenue <= 0:
            return None
        return self.cumulative_revenue / self.grand_total_revenue


@dataclass(frozen=True)
class ParetoResult:
    """Summary of the smallest customer prefix reaching a target share.

    Attributes:
        target_share: Requested cumulative revenue share in (0, 1].
        customers_needed: Rank of the threshold customer.
        total_customers: Number of ranked customers overall.
        cumulative_revenue_at_threshold: Revenue of the top customers_needed.
        total_revenue: Revenue summed over every customer.
        cumulative_share: Achieved share at the threshold row.
        cumulative_customer_fraction: customers_needed / total_customers.
    """

    target_share: Decimal
    customers_needed: int
    total_customers: int
    cumulative_revenue_at_threshold: Decimal
    total_revenue: Decimal
    cumulative_share: Decimal
    cumulative_customer_fraction: Decimal

    def to_dict(self) -> dict[str, object]:
        """Serialize result into a JSON-safe mapping with string decimals."""
        return {
            "target_share": str(self.target_share),
            "customers_needed": self.customers_needed,
            "total_customers": self.total_customers,
            "cumulative_revenue_at_threshold": str(self.cumulative_revenue_at_threshold),
            "total_revenue": str(self.total_revenue),
            "cumulative_share": str(self.cumulative_share),
            "cumulative_customer_fraction": str(self.cumulative_customer_fraction),
        }


@dataclass(frozen=True)
class ParetoReport:
    """Ranked customers plus one result per requested target share."""

    ranked_customers: tuple[RankedCustomer, ...]
    results: tuple[ParetoResult, ...]


@dataclass(frozen=True)
class TransactionColumns:
    """Source column names mapped onto transaction fields."""

    customer_id: str = DEFAULT_CUSTOMER_COLUMN
    quantity: str = DEFAULT_QUANTITY_COLUMN
    unit_price: str = DEFAULT_UNIT_PRICE_COLUMN


@dataclass(frozen=True)
class AnalysisOptions:
    """Options for one file-backed analysis run.

    Attributes:
        source_path: CSV or JSONL transaction file.
        target_shares: Shares to evaluate, in report order.
        columns: Source column mapping.
        output_dir: Optional directory for exported report files.
    """

    source_path: str
    target_shares: tuple[object, ...]
    columns: TransactionColumns = field(default_factory=TransactionColumns)
    output_dir: Path | None = None


@dataclass(frozen=True)
class ReportPaths:
    """Files written by a report export."""

    ranked_customers_path: Path
    results_path: Path


@dataclass(frozen=True)
class AnalysisRunResult:
    """Outcome of a file-backed analysis run."""

    report: ParetoReport
    report_paths: ReportPaths | None = None
