"""`pareto run-spec` subcommand.

Runs every analyze and rank step of a YAML run-spec through the
configured client and prints the step output in order.
"""

from __future__ import annotations

import argparse
from typing import Any

from store.analysis_sdk import ParetoClient


def add_run_spec_command(subparsers: Any) -> None:
    """Register the run-spec subcommand."""
    parser = subparsers.add_parser(
        "run-spec",
        help="Run analyze and rank steps from a YAML file",
    )
    parser.add_argument("spec_file", help="Path to a version 1 run-spec YAML file")


def run_run_spec_command(client: ParetoClient, args: argparse.Namespace) -> int:
    for line in client.run_spec(args.spec_file):
        print(line)
    return 0
