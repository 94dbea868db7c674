# backend/inventory/schemas/stats.py
from typing import List

from pydantic import BaseModel

from .part import PartOut


class FastMovingPartOut(BaseModel):
    partId: int
    partName: str
    totalOutQuantity: int
    transactionCount: int
    averagePerMonth: float


class CategoryStatsOut(BaseModel):
    categoryId: int
    categoryName: str
    partCount: int
    totalValue: float
    lowStockCount: int


class InventoryStatsOut(BaseModel):
    totalCategories: int
    totalParts: int
    totalValue: float
    lowStockParts: List[PartOut]
    fastMovingParts: List[FastMovingPartOut]
    topCategories: List[CategoryStatsOut]
