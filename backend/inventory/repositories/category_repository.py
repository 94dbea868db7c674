# backend/inventory/repositories/category_repository.py
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ..models import Category


class CategoryRepository:
    def __init__(self, db: Session):
        self.db = db

    def list(self) -> List[Category]:
        return self.db.query(Category).order_by(Category.id.asc()).all()

    def get(self, category_id: int) -> Optional[Category]:
        return self.db.get(Category, category_id)

    def count(self) -> int:
        return self.db.query(func.count(Category.id)).scalar() or 0

    def add(self, *, name: str, description: Optional[str]) -> Category:
        cat = Category(name=name, description=description)
        self.db.add(cat)
        self.db.flush()
        return cat

    def update(self, cat: Category, *, name: str, description: Optional[str]) -> Category:
        cat.name = name
        cat.description = description
        self.db.flush()
        return cat

    def delete(self, cat: Category) -> None:
        self.db.delete(cat)
        self.db.flush()
