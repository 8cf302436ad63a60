"""Core constants used across Pareto modules.

This module centralizes shared defaults and file names.
Keeping values here avoids magic literals in analysis logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_OUTPUT_DIR = Path(".pareto")
DEFAULT_TARGET_SHARES = ("0.80", "0.60")
DEFAULT_LOG_LEVEL = "INFO"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_CUSTOMER_COLUMN = "customer_id"
DEFAULT_QUANTITY_COLUMN = "quantity"
DEFAULT_UNIT_PRICE_COLUMN = "unit_price"
SUPPORTED_SOURCE_EXTENSIONS = (".csv", ".jsonl")
RANKED_CUSTOMERS_FILE_NAME = "ranked_customers.csv"
PARETO_RESULTS_FILE_NAME = "pareto_results.json"
RANKED_CUSTOMER_COLUMNS = (
    "rank",
    "customer_id",
    "total_revenue",
    "cumulative_revenue",
    "cumulative_customer_count",
    "cumulative_share",
)
DEFAULT_RANK_PREVIEW_SIZE = 20
