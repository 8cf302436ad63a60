"""Transaction file readers.

This module loads transactions from local CSV or JSONL files.
It normalizes rows into typed records for the analysis pipeline.
"""

from __future__ import annotations

import csv
import json
from decimal import Decimal
from pathlib import Path
from typing import Mapping

from core.constants import SUPPORTED_SOURCE_EXTENSIONS
from core.errors import ParetoIngestError
from core.logging_config import get_logger
from core.numbers import coerce_decimal
from core.types import CustomerId, Transaction, TransactionColumns

_LOGGER = get_logger(__name__)


def read_transactions(
    source_path: str | Path,
    columns: TransactionColumns | None = None,
) -> list[Transaction]:
    """Load transactions from a CSV or JSONL file.

    Negative quantities and prices are passed through unchanged so the
    revenue stage can reject them as invalid input.

    Args:
        source_path: Path to a ``.csv`` or ``.jsonl`` file.
        columns: Optional source column mapping.

    Returns:
        Transactions in file order.

    Raises:
        ParetoIngestError: If the file is missing, unsupported, or malformed.
    """
    resolved_columns = columns or TransactionColumns()
    file_path = Path(source_path).expanduser()
    if not file_path.is_file():
        raise ParetoIngestError(
            f"Failed to read transactions at {file_path}: file does not exist. "
            "Provide an existing CSV or JSONL file."
        )
    suffix = file_path.suffix.lower()
    if suffix not in SUPPORTED_SOURCE_EXTENSIONS:
        raise ParetoIngestError(
            f"Unsupported transaction file {file_path}. "
            f"Supported extensions: {SUPPORTED_SOURCE_EXTENSIONS}."
        )
    if suffix == ".csv":
        transactions = _read_csv_transactions(file_path, resolved_columns)
    else:
        transactions = _read_jsonl_transactions(file_path, resolved_columns)
    _LOGGER.info("transactions_loaded", source=str(file_path), count=len(transactions))
    return transactions


def _read_csv_transactions(file_path: Path, columns: TransactionColumns) -> list[Transaction]:
    """Read transactions from a CSV file with a header row.

    Args:
        file_path: Path to CSV file.
        columns: Source column mapping.

    Returns:
        Parsed transactions.

    Raises:
        ParetoIngestError: If the file is not UTF-8, required columns are
            missing, or values are malformed.
    """
    transactions: list[Transaction] = []
    try:
        with file_path.open(encoding="utf-8-sig", newline="") as csv_file:
            reader = csv.DictReader(csv_file)
            _require_columns(file_path, reader.fieldnames or [], columns)
            for row in reader:
                location = f"{file_path}:{reader.line_num}"
                transactions.append(_build_transaction(row, columns, location))
    except (UnicodeDecodeError, csv.Error) as error:
        raise _decode_error(file_path, error) from error
    return transactions


def _read_jsonl_transactions(file_path: Path, columns: TransactionColumns) -> list[Transaction]:
    """Read transactions from JSONL, one object per line.

    Args:
        file_path: Path to JSONL file.
        columns: Source column mapping.

    Returns:
        Parsed transactions.

    Raises:
        ParetoIngestError: If the file is not UTF-8, a line is not a JSON
            object, or values are malformed.
    """
    try:
        content = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as error:
        raise _decode_error(file_path, error) from error
    transactions: list[Transaction] = []
    for line_number, line in enumerate(content.splitlines(), 1):
        if not line.strip():
            continue
        location = f"{file_path}:{line_number}"
        payload = _parse_jsonl_line(line, location)
        _require_columns(file_path, list(payload.keys()), columns, location)
        transactions.append(_build_transaction(payload, columns, location))
    return transactions


def _parse_jsonl_line(line: str, location: str) -> Mapping[str, object]:
    try:
        payload = json.loads(line)
    except json.JSONDecodeError as error:
        raise ParetoIngestError(
            f"Failed to parse JSONL record at {location}: {error.msg}. "
            "Fix the JSON syntax and retry."
        ) from error
    if not isinstance(payload, dict):
        raise ParetoIngestError(
            f"Invalid JSONL record at {location}: expected an object per line."
        )
    return payload


def _require_columns(
    file_path: Path,
    available: list[str],
    columns: TransactionColumns,
    location: str | None = None,
) -> None:
    required = (columns.customer_id, columns.quantity, columns.unit_price)
    missing = [name for name in required if name not in available]
    if missing:
        raise ParetoIngestError(
            f"Missing transaction columns {missing} in {location or file_path}. "
            f"Found: {sorted(available)}. Rename the columns or pass a column mapping."
        )


def _build_transaction(
    row: Mapping[str, object],
    columns: TransactionColumns,
    location: str,
) -> Transaction:
    return Transaction(
        customer_id=_parse_customer_id(row.get(columns.customer_id), location),
        quantity=_parse_quantity(row.get(columns.quantity), location),
        unit_price=_parse_unit_price(row.get(columns.unit_price), location),
    )


def _parse_customer_id(raw_value: object, location: str) -> CustomerId:
    if isinstance(raw_value, int) and not isinstance(raw_value, bool):
        return raw_value
    if isinstance(raw_value, str) and raw_value.strip():
        return raw_value
    raise ParetoIngestError(
        f"Invalid customer id {raw_value!r} at {location}: "
        "expected a non-empty string or integer. Drop rows without a customer."
    )


def _parse_quantity(raw_value: object, location: str) -> int:
    value = coerce_decimal(raw_value)
    if value is None or not value.is_finite() or value != value.to_integral_value():
        raise ParetoIngestError(
            f"Invalid quantity {raw_value!r} at {location}: expected a whole number."
        )
    return int(value)


def _parse_unit_price(raw_value: object, location: str) -> Decimal:
    value = coerce_decimal(raw_value)
    if value is None or not value.is_finite():
        raise ParetoIngestError(
            f"Invalid unit price {raw_value!r} at {location}: expected a decimal number."
        )
    return value


def _decode_error(file_path: Path, error: Exception) -> ParetoIngestError:
    return ParetoIngestError(
        f"Failed to decode transactions at {file_path}: {error}. "
        "Re-save the file as UTF-8 and retry."
    )
