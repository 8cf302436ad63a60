"""Decimal helpers shared by analysis and ingest.

Revenue products and sums run inside ``exact_context`` so that money
with more significant digits than the default 28-digit context is
never rounded. Division for reported shares stays in the ambient
context because it can produce non-terminating expansions.
"""

from __future__ import annotations

from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    Decimal,
    InvalidOperation,
    getcontext,
    localcontext,
)
from typing import ContextManager


def coerce_decimal(value: object) -> Decimal | None:
    """Convert a numeric value into Decimal.

    Floats are converted through ``str`` so that binary rounding
    artifacts do not leak into exact revenue sums.

    Args:
        value: Decimal, int, float, or numeric string.

    Returns:
        Parsed Decimal, or None when the value is not numeric.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, (float, str)):
        try:
            return Decimal(str(value).strip())
        except InvalidOperation:
            return None
    return None


def exact_context() -> ContextManager[object]:
    """Return a decimal context in which addition and multiplication never round."""
    context = getcontext().copy()
    context.prec = MAX_PREC
    context.Emax = MAX_EMAX
    context.Emin = MIN_EMIN
    return localcontext(context)
