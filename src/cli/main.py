"""Pareto CLI entry points.

This module exposes the analyze, rank, and run-spec commands.
It maps argparse commands onto SDK calls and turns domain errors
into exit codes.
"""

from __future__ import annotations

import argparse
from typing import Sequence

from cli.analyze_command import add_analyze_command, run_analyze_command
from cli.rank_command import add_rank_command, run_rank_command
from cli.run_spec_command import add_run_spec_command, run_run_spec_command
from core.config import ParetoConfig
from core.errors import ParetoError
from core.logging_config import configure_logging
from store.analysis_sdk import ParetoClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="pareto",
        description="Customer revenue concentration (Pareto) analysis",
    )
    parser.add_argument("--output-dir", help="Override PARETO_OUTPUT_DIR for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_analyze_command(subparsers)
    add_rank_command(subparsers)
    add_run_spec_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Pareto CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = _build_client(args.output_dir)
        if args.command == "analyze":
            return run_analyze_command(client, args)
        if args.command == "rank":
            return run_rank_command(client, args)
        if args.command == "run-spec":
            return run_run_spec_command(client, args)
    except ParetoError as error:
        print(f"error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(output_dir: str | None) -> ParetoClient:
    """Build SDK client with optional output-dir override.

    Args:
        output_dir: Optional override path.

    Returns:
        Configured SDK client.
    """
    config = ParetoConfig.from_env()
    configure_logging(config.log_level)
    client = ParetoClient(config)
    if output_dir:
        client = client.with_output_dir(output_dir)
    return client
