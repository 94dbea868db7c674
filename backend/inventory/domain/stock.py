# backend/inventory/domain/stock.py
from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Optional

from .constants import TXN_IN, TXN_OUT, TXN_ADJUSTMENT, TXN_TYPES, MONEY_PLACES
from .errors import BusinessRuleError, InsufficientStockError


def to_money(val) -> Decimal:
    try:
        d = val if isinstance(val, Decimal) else Decimal(str(val))
        if d.is_finite():
            return d.quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)
    except (InvalidOperation, TypeError, ValueError):
        pass
    raise BusinessRuleError(f"Invalid amount: {val!r}")


def check_movement(current: int, txn_type: str, quantity: int) -> None:
    """
    Validate a movement against the stock read under lock.
    - quantity >= 0 for every type
    - OUT needs current >= quantity
    - ADJUSTMENT is an explicit override, no lower bound
    """
    if txn_type not in TXN_TYPES:
        raise BusinessRuleError(f"Transaction type must be one of {', '.join(TXN_TYPES)}")
    if quantity is None or quantity < 0:
        raise BusinessRuleError("Quantity must be >= 0")
    if txn_type == TXN_OUT and current < quantity:
        raise InsufficientStockError(available=current, requested=quantity)


def next_stock(current: int, txn_type: str, quantity: int) -> int:
    """
    IN  -> current + quantity
    OUT -> current - quantity, floored at 0
    ADJUSTMENT -> quantity
    """
    if txn_type == TXN_IN:
        return current + quantity
    if txn_type == TXN_OUT:
        return max(current - quantity, 0)
    if txn_type == TXN_ADJUSTMENT:
        return quantity
    raise BusinessRuleError(f"Unknown transaction type: {txn_type}")


def total_amount(unit_price: Optional[Decimal], quantity: int) -> Optional[Decimal]:
    if unit_price is None:
        return None
    return to_money(to_money(unit_price) * quantity)

