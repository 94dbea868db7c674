# backend/inventory/services/stats_service.py
from typing import List, Optional

from sqlalchemy.orm import Session

from ..domain.constants import DASHBOARD_TOP_N
from ..repositories.category_repository import CategoryRepository
from ..repositories.part_repository import PartRepository
from ..repositories.stats_repository import StatsRepository
from ..schemas.stats import CategoryStatsOut, InventoryStatsOut
from .converters import part_to_dto
from .transaction_service import TransactionService


class StatsService:
    def __init__(
        self,
        db: Session,
        stats: Optional[StatsRepository] = None,
        parts: Optional[PartRepository] = None,
        categories: Optional[CategoryRepository] = None,
        transactions: Optional[TransactionService] = None,
    ):
        self.db = db
        self.stats = stats or StatsRepository(db)
        self.parts = parts or PartRepository(db)
        self.categories = categories or CategoryRepository(db)
        self.transactions = transactions or TransactionService(db, parts=self.parts)

    def category_stats(self, limit: Optional[int] = None) -> List[CategoryStatsOut]:
        return [
            CategoryStatsOut(
                categoryId=r.categoryId,
                categoryName=r.categoryName,
                partCount=int(r.partCount or 0),
                totalValue=float(r.totalValue or 0),
                lowStockCount=int(r.lowStockCount or 0),
            )
            for r in self.stats.category_stats(limit)
        ]

    def inventory_stats(self) -> InventoryStatsOut:
        return InventoryStatsOut(
            totalCategories=self.categories.count(),
            totalParts=self.parts.count(),
            totalValue=float(self.stats.total_value()),
            lowStockParts=[part_to_dto(p) for p in self.parts.low_stock()],
            fastMovingParts=self.transactions.fast_moving_parts(DASHBOARD_TOP_N),
            topCategories=self.category_stats(DASHBOARD_TOP_N),
        )
