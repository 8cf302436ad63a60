"""Analyze command wiring for the Pareto CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.constants import (
    DEFAULT_CUSTOMER_COLUMN,
    DEFAULT_QUANTITY_COLUMN,
    DEFAULT_UNIT_PRICE_COLUMN,
)
from core.report_format import render_report_path_lines, render_result_lines
from core.types import AnalysisOptions, TransactionColumns
from store.analysis_sdk import ParetoClient


def add_analyze_command(subparsers: Any) -> None:
    """Register analyze subcommand."""
    parser = subparsers.add_parser(
        "analyze",
        help="Find how many top customers reach each target revenue share",
    )
    parser.add_argument("source", help="Transaction CSV or JSONL file")
    parser.add_argument(
        "--target-share",
        action="append",
        dest="target_shares",
        default=[],
        help="Target cumulative revenue share in (0, 1]; repeat for several",
    )
    parser.add_argument(
        "--export",
        action="store_true",
        help="Write ranked customers and results under the output directory",
    )
    add_column_arguments(parser)


def add_column_arguments(parser: argparse.ArgumentParser) -> None:
    """Register source column mapping options."""
    parser.add_argument(
        "--customer-column",
        default=DEFAULT_CUSTOMER_COLUMN,
        help="Source column holding the customer id",
    )
    parser.add_argument(
        "--quantity-column",
        default=DEFAULT_QUANTITY_COLUMN,
        help="Source column holding the quantity",
    )
    parser.add_argument(
        "--unit-price-column",
        default=DEFAULT_UNIT_PRICE_COLUMN,
        help="Source column holding the unit price",
    )


def columns_from_args(args: argparse.Namespace) -> TransactionColumns:
    """Build a column mapping from parsed CLI args."""
    return TransactionColumns(
        customer_id=args.customer_column,
        quantity=args.quantity_column,
        unit_price=args.unit_price_column,
    )


def run_analyze_command(client: ParetoClient, args: argparse.Namespace) -> int:
    """Handle analyze command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    options = AnalysisOptions(
        source_path=args.source,
        target_shares=tuple(args.target_shares),
        columns=columns_from_args(args),
        output_dir=client.config.output_dir if args.export else None,
    )
    run_result = client.analyze(options)
    for index, result in enumerate(run_result.report.results):
        if index > 0:
            print()
        for line in render_result_lines(result):
            print(line)
    if run_result.report_paths is not None:
        for line in render_report_path_lines(run_result.report_paths):
            print(line)
    return 0
