"""Printable line rendering for Pareto results.

This module renders results and ranked rows as plain text lines shared
by the CLI and run-spec execution paths.
"""

from __future__ import annotations

from core.types import ParetoResult, RankedCustomer, ReportPaths

RANKED_HEADER_LINE = "rank\tcustomer_id\ttotal_revenue\tcumulative_revenue\tcumulative_share"


def render_result_lines(result: ParetoResult) -> tuple[str, ...]:
    """Render one result as ``key=value`` lines in field order."""
    return tuple(f"{key}={value}" for key, value in result.to_dict().items())


def render_ranked_line(customer: RankedCustomer) -> str:
    """Render one ranked customer as a tab-separated row."""
    share = customer.cumulative_share
    return (
        f"{customer.rank}\t"
        f"{customer.customer_id}\t"
        f"{customer.total_revenue}\t"
        f"{customer.cumulative_revenue}\t"
        f"{'-' if share is None else share}"
    )


def render_report_path_lines(paths: ReportPaths) -> tuple[str, ...]:
    """Render exported file locations as ``key=value`` lines."""
    return (
        f"ranked_customers_path={paths.ranked_customers_path}",
        f"results_path={paths.results_path}",
    )
