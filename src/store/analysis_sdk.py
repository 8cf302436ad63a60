"""SDK client for file-backed Pareto analyses.

This module ties the transaction reader, analysis pipeline, and
report exporter together behind one client used by the CLI,
run-spec execution, and library callers.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from analysis.customer_aggregator import aggregate_customer_revenue
from analysis.pipeline import analyze_transactions
from analysis.rank_cumulate import rank_customers
from analysis.revenue_deriver import derive_line_revenues
from core.config import ParetoConfig
from core.types import (
    AnalysisOptions,
    AnalysisRunResult,
    RankedCustomer,
    TransactionColumns,
)
from ingest.transaction_reader import read_transactions
from store.report_export import save_analysis_report


class ParetoClient:
    """Primary SDK entry point for Pareto analysis workflows."""

    def __init__(self, config: ParetoConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or ParetoConfig.from_env()

    @property
    def config(self) -> ParetoConfig:
        """Runtime configuration used by this client."""
        return self._config

    def analyze(self, options: AnalysisOptions) -> AnalysisRunResult:
        """Analyze a transaction file for every requested target share.

        Args:
            options: Analysis options. An empty share list falls back to
                the configured default target shares.

        Returns:
            Report plus export paths when an output directory was given.

        Raises:
            ParetoIngestError: If the source file cannot be parsed.
            InvalidInputError: If any transaction is malformed.
            InvalidArgumentError: If any target share is outside (0, 1].
            NoThresholdReachedError: If total revenue is not positive.
            ParetoExportError: If report files cannot be written.
        """
        target_shares = options.target_shares or self._config.default_target_shares
        transactions = read_transactions(options.source_path, options.columns)
        report = analyze_transactions(transactions, target_shares)
        if options.output_dir is None:
            return AnalysisRunResult(report=report)
        report_paths = save_analysis_report(report, options.output_dir)
        return AnalysisRunResult(report=report, report_paths=report_paths)

    def rank(
        self,
        source_path: str,
        columns: TransactionColumns | None = None,
    ) -> list[RankedCustomer]:
        """Rank customers of a transaction file without threshold lookup.

        Args:
            source_path: CSV or JSONL transaction file.
            columns: Optional source column mapping.

        Returns:
            Ranked customers in ascending rank order.
        """
        transactions = read_transactions(source_path, columns)
        return rank_customers(aggregate_customer_revenue(derive_line_revenues(transactions)))

    def with_output_dir(self, output_dir: str) -> "ParetoClient":
        """Clone the client with a different export directory.

        Args:
            output_dir: New output directory path.

        Returns:
            New SDK client instance.
        """
        resolved_dir = Path(output_dir).expanduser().resolve()
        return ParetoClient(replace(self._config, output_dir=resolved_dir))

    def run_spec(self, spec_file: str) -> tuple[str, ...]:
        """Execute a YAML run-spec through the shared execution engine.

        Args:
            spec_file: Path to YAML run-spec.

        Returns:
            Printable output lines from every step.
        """
        from core.run_spec_execution import execute_run_spec_file

        return execute_run_spec_file(self, spec_file)
