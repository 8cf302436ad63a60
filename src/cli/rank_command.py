"""Rank command wiring for the Pareto CLI."""

from __future__ import annotations

import argparse
from typing import Any

from cli.analyze_command import add_column_arguments, columns_from_args
from core.constants import DEFAULT_RANK_PREVIEW_SIZE
from core.errors import InvalidArgumentError
from core.report_format import RANKED_HEADER_LINE, render_ranked_line
from store.analysis_sdk import ParetoClient


def add_rank_command(subparsers: Any) -> None:
    """Register rank subcommand."""
    parser = subparsers.add_parser(
        "rank",
        help="Print customers in descending revenue order with running totals",
    )
    parser.add_argument("source", help="Transaction CSV or JSONL file")
    parser.add_argument(
        "--top",
        type=int,
        default=DEFAULT_RANK_PREVIEW_SIZE,
        help="Number of ranked customers to print",
    )
    add_column_arguments(parser)


def run_rank_command(client: ParetoClient, args: argparse.Namespace) -> int:
    """Print the top ranked customers as tab-separated rows."""
    if args.top < 1:
        raise InvalidArgumentError(f"Invalid --top value {args.top}: expected value >= 1.")
    ranked = client.rank(args.source, columns_from_args(args))
    print(RANKED_HEADER_LINE)
    for customer in ranked[: args.top]:
        print(render_ranked_line(customer))
    return 0
