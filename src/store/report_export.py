"""Report export helpers for Pareto analysis output.

This module writes the ranked customer sequence as CSV and the
Pareto results as a JSON array with string-encoded decimals.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Sequence

from core.constants import (
    PARETO_RESULTS_FILE_NAME,
    RANKED_CUSTOMER_COLUMNS,
    RANKED_CUSTOMERS_FILE_NAME,
)
from core.errors import ParetoExportError
from core.logging_config import get_logger
from core.types import ParetoReport, ParetoResult, RankedCustomer, ReportPaths

_LOGGER = get_logger(__name__)


def save_analysis_report(report: ParetoReport, output_dir: str | Path) -> ReportPaths:
    """Write ranked customers and results into an output directory.

    Args:
        report: Completed Pareto report.
        output_dir: Destination directory, created when missing.

    Returns:
        Paths of the written files.

    Raises:
        ParetoExportError: If the directory or files cannot be written.
    """
    export_dir = _build_export_dir(output_dir)
    paths = ReportPaths(
        ranked_customers_path=export_dir / RANKED_CUSTOMERS_FILE_NAME,
        results_path=export_dir / PARETO_RESULTS_FILE_NAME,
    )
    write_ranked_customers(report.ranked_customers, paths.ranked_customers_path)
    write_pareto_results(report.results, paths.results_path)
    _LOGGER.info(
        "pareto_report_saved",
        output_dir=str(export_dir),
        customer_count=len(report.ranked_customers),
        result_count=len(report.results),
    )
    return paths


def write_ranked_customers(ranked_customers: Sequence[RankedCustomer], path: Path) -> Path:
    """Write ranked customers as CSV rows in rank order.

    Args:
        ranked_customers: Ranked customer sequence.
        path: Destination CSV path.

    Returns:
        Written file path.

    Raises:
        ParetoExportError: If the file cannot be written.
    """
    try:
        with path.open("w", encoding="utf-8", newline="") as csv_file:
            writer = csv.writer(csv_file)
            writer.writerow(RANKED_CUSTOMER_COLUMNS)
            for customer in ranked_customers:
                writer.writerow(_ranked_customer_row(customer))
    except OSError as error:
        raise ParetoExportError(
            f"Failed to write ranked customers to {path}: {error}. "
            "Check the output directory permissions and retry."
        ) from error
    return path


def write_pareto_results(results: Sequence[ParetoResult], path: Path) -> Path:
    """Write Pareto results as a JSON array.

    Args:
        results: Results in request order.
        path: Destination JSON path.

    Returns:
        Written file path.

    Raises:
        ParetoExportError: If the file cannot be written.
    """
    payload = [result.to_dict() for result in results]
    try:
        path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    except OSError as error:
        raise ParetoExportError(
            f"Failed to write Pareto results to {path}: {error}. "
            "Check the output directory permissions and retry."
        ) from error
    return path


def _build_export_dir(output_dir: str | Path) -> Path:
    """Build and create destination export directory."""
    export_dir = Path(output_dir).expanduser().resolve()
    try:
        export_dir.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        raise ParetoExportError(
            f"Failed to create output directory {export_dir}: {error}."
        ) from error
    return export_dir


def _ranked_customer_row(customer: RankedCustomer) -> list[object]:
    share = customer.cumulative_share
    return [
        customer.rank,
        customer.customer_id,
        str(customer.total_revenue),
        str(customer.cumulative_revenue),
        customer.cumulative_customer_count,
        "" if share is None else str(share),
    ]
