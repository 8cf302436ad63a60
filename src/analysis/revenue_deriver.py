"""Line revenue derivation.

This module turns transactions into exact decimal line revenues.
It is the first stage of the Pareto analysis pipeline.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from core.errors import InvalidInputError
from core.numbers import coerce_decimal, exact_context
from core.types import LineRevenue, Transaction


def derive_line_revenues(transactions: Iterable[Transaction]) -> list[LineRevenue]:
    """Compute ``quantity * unit_price`` for every transaction.

    Args:
        transactions: Input transactions in any order.

    Returns:
        One line revenue per transaction, in input order.

    Raises:
        InvalidInputError: If any quantity or unit price is negative or malformed.
    """
    line_revenues: list[LineRevenue] = []
    with exact_context():
        for position, transaction in enumerate(transactions, 1):
            quantity = _validate_quantity(transaction, position)
            unit_price = _validate_unit_price(transaction, position)
            line_revenues.append(
                LineRevenue(customer_id=transaction.customer_id, revenue=quantity * unit_price)
            )
    return line_revenues


def _validate_quantity(transaction: Transaction, position: int) -> int:
    quantity = transaction.quantity
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise InvalidInputError(
            f"Invalid quantity {quantity!r} for customer {transaction.customer_id!r} "
            f"at transaction #{position}: expected an integer."
        )
    if quantity < 0:
        raise InvalidInputError(
            f"Negative quantity {quantity} for customer {transaction.customer_id!r} "
            f"at transaction #{position}. Remove returns or cancellations before analysis."
        )
    return quantity


def _validate_unit_price(transaction: Transaction, position: int) -> Decimal:
    unit_price = coerce_decimal(transaction.unit_price)
    if unit_price is None or not unit_price.is_finite():
        raise InvalidInputError(
            f"Invalid unit price {transaction.unit_price!r} for customer "
            f"{transaction.customer_id!r} at transaction #{position}: expected a finite decimal."
        )
    if unit_price < 0:
        raise InvalidInputError(
            f"Negative unit price {unit_price} for customer {transaction.customer_id!r} "
            f"at transaction #{position}. Discounts must not be encoded as negative prices."
        )
    return unit_price

