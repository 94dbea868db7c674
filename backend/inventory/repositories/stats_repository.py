# backend/inventory/repositories/stats_repository.py
from typing import Optional

from sqlalchemy import case, desc, func
from sqlalchemy.orm import Session

from ..models import Category, Part
from .part_repository import low_stock_clause


class StatsRepository:
    def __init__(self, db: Session):
        self.db = db

    def total_value(self):
        val = self.db.query(
            func.coalesce(func.sum(Part.current_stock * Part.unit_price), 0)
        ).scalar()
        return val or 0

    def category_stats(self, limit: Optional[int] = None):
        """Per category: part count, sum(stock * price) and low-stock count; most parts first."""
        part_count = func.count(Part.id)
        q = (
            self.db.query(
                Category.id.label("categoryId"),
                Category.name.label("categoryName"),
                part_count.label("partCount"),
                func.coalesce(func.sum(Part.current_stock * Part.unit_price), 0).label("totalValue"),
                func.coalesce(func.sum(case((low_stock_clause(), 1), else_=0)), 0).label("lowStockCount"),
            )
            .outerjoin(Part, Part.category_id == Category.id)
            .group_by(Category.id, Category.name)
            .order_by(desc(part_count), Category.id.asc())
        )
        if limit is not None:
            q = q.limit(limit)
        return q.all()
