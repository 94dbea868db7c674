# backend/inventory/schemas/common.py
from decimal import Decimal
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel

from ..domain.errors import BusinessRuleError
from ..domain.stock import to_money

T = TypeVar("T")


def money_in(v, field: str, allow_none: bool = False) -> Optional[Decimal]:
    """Round with to_money() and require >= 0."""
    if v is None and allow_none:
        return None
    try:
        d = to_money(v)
    except BusinessRuleError:
        raise ValueError(f"{field} must be a valid decimal")
    if d < 0:
        raise ValueError(f"{field} must be >= 0")
    return d


def money_out(v: Optional[Decimal]) -> Optional[float]:
    return float(v) if v is not None else None


class Page(BaseModel, Generic[T]):
    data: List[T]
    page: int
    limit: int
    total: int
    totalPages: int
