"""Type-safe field parsing helpers for run-spec execution.

This module centralizes primitive parsing so run-spec executors can stay
concise and produce consistent validation errors.
"""

from __future__ import annotations

from typing import Mapping

from core.errors import ParetoRunSpecError
from core.types import TransactionColumns


def required_string(args: Mapping[str, object], field_name: str) -> str:
    """Read a required string field from a run-spec step."""
    value = optional_string(args, field_name)
    if value is None:
        raise ParetoRunSpecError(f"Run-spec step is missing required field '{field_name}'.")
    return value


def optional_string(args: Mapping[str, object], field_name: str) -> str | None:
    """Read an optional string field from a run-spec step."""
    value = args.get(field_name)
    if value is None:
        return None
    if isinstance(value, str):
        stripped = value.strip()
        return stripped if stripped else None
    raise ParetoRunSpecError(f"Run-spec field '{field_name}' must be a string when provided.")


def optional_int(args: Mapping[str, object], field_name: str) -> int | None:
    """Read an optional integer field from a run-spec step."""
    value = args.get(field_name)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ParetoRunSpecError(f"Run-spec field '{field_name}' must be an integer.")
    return value


def optional_bool(args: Mapping[str, object], field_name: str, default_value: bool) -> bool:
    """Read an optional boolean field from a run-spec step."""
    value = args.get(field_name)
    if value is None:
        return default_value
    if isinstance(value, bool):
        return value
    raise ParetoRunSpecError(f"Run-spec field '{field_name}' must be true or false.")


def optional_share_list(args: Mapping[str, object], field_name: str) -> tuple[object, ...] | None:
    """Read an optional list of target shares.

    Values are returned unparsed; range checks belong to the analysis layer.
    """
    value = args.get(field_name)
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return tuple(value)
    raise ParetoRunSpecError(
        f"Run-spec field '{field_name}' must be a list of shares, e.g. [0.8, 0.6]."
    )


def optional_columns(args: Mapping[str, object], field_name: str) -> TransactionColumns:
    """Read an optional column mapping, defaulting unset names."""
    value = args.get(field_name)
    if value is None:
        return TransactionColumns()
    if not isinstance(value, Mapping):
        raise ParetoRunSpecError(f"Run-spec field '{field_name}' must be a mapping.")
    allowed_keys = {"customer_id", "quantity", "unit_price"}
    unknown_keys = sorted(set(value) - allowed_keys)
    if unknown_keys:
        raise ParetoRunSpecError(
            f"Run-spec field '{field_name}' has unknown keys: {', '.join(unknown_keys)}."
        )
    defaults = TransactionColumns()
    return TransactionColumns(
        customer_id=optional_string(value, "customer_id") or defaults.customer_id,
        quantity=optional_string(value, "quantity") or defaults.quantity,
        unit_price=optional_string(value, "unit_price") or defaults.unit_price,
    )
