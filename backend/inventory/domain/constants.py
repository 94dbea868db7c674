# backend/inventory/domain/constants.py

"""
Single source of the transaction types and the fixed texts/limits used across the app.
"""

from decimal import Decimal
from typing import Final, Literal

TXN_IN: Final[str] = "IN"
TXN_OUT: Final[str] = "OUT"
TXN_ADJUSTMENT: Final[str] = "ADJUSTMENT"
TXN_TYPES: Final[tuple] = (TXN_IN, TXN_OUT, TXN_ADJUSTMENT)

TxnTypeLiteral = Literal["IN", "OUT", "ADJUSTMENT"]

# Reason of the IN transaction written when a part is created with stock
REASON_INITIAL_STOCK: Final[str] = "Initial stock"

MONEY_PLACES: Final[Decimal] = Decimal("0.01")

# averagePerMonth = all-time OUT total / 12, not a rolling window
FAST_MOVING_MONTHS: Final[int] = 12
FAST_MOVING_DEFAULT_LIMIT: Final[int] = 10
DASHBOARD_TOP_N: Final[int] = 5

SEARCH_DEFAULT_LIMIT: Final[int] = 20
SEARCH_MAX_LIMIT: Final[int] = 500
