"""Public SDK surface for Pareto revenue analysis.

This module provides a stable import path for library users.
It re-exports the pipeline entry points, client, and typed models.
"""

from __future__ import annotations

from analysis.customer_aggregator import aggregate_customer_revenue
from analysis.pipeline import analyze_transactions, run_pareto_analysis
from analysis.rank_cumulate import rank_customers
from analysis.revenue_deriver import derive_line_revenues
from analysis.threshold_finder import find_pareto_threshold, find_threshold_customer
from core.config import ParetoConfig
from core.errors import (
    InvalidArgumentError,
    InvalidInputError,
    NoThresholdReachedError,
    ParetoError,
)
from core.types import (
    AnalysisOptions,
    AnalysisRunResult,
    CustomerRevenue,
    LineRevenue,
    ParetoReport,
    ParetoResult,
    RankedCustomer,
    Transaction,
    TransactionColumns,
)
from ingest.transaction_reader import read_transactions
from store.analysis_sdk import ParetoClient
from store.report_export import save_analysis_report

__all__ = [
    "AnalysisOptions",
    "AnalysisRunResult",
    "CustomerRevenue",
    "InvalidArgumentError",
    "InvalidInputError",
    "LineRevenue",
    "NoThresholdReachedError",
    "ParetoClient",
    "ParetoConfig",
    "ParetoError",
    "ParetoReport",
    "ParetoResult",
    "RankedCustomer",
    "Transaction",
    "TransactionColumns",
    "aggregate_customer_revenue",
    "analyze_transactions",
    "derive_line_revenues",
    "find_pareto_threshold",
    "find_threshold_customer",
    "rank_customers",
    "read_transactions",
    "run_pareto_analysis",
    "save_analysis_report",
]
