# backend/inventory/services/category_service.py
from typing import List, Optional
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.db import atomic
from ..domain.errors import BusinessRuleError, DuplicateError, NotFoundError
from ..repositories.category_repository import CategoryRepository
from ..schemas.category import CategoryIn, CategoryOut
from .converters import category_to_dto

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, db: Session, categories: Optional[CategoryRepository] = None):
        self.db = db
        self.categories = categories or CategoryRepository(db)

    def _get_or_404(self, category_id: int):
        cat = self.categories.get(category_id)
        if not cat:
            raise NotFoundError("Category not found")
        return cat

    def list_categories(self) -> List[CategoryOut]:
        return [category_to_dto(c) for c in self.categories.list()]

    def get_category(self, category_id: int) -> CategoryOut:
        return category_to_dto(self._get_or_404(category_id))

    def create_category(self, payload: CategoryIn) -> CategoryOut:
        try:
            with atomic(self.db):
                cat = self.categories.add(name=payload.name.strip(), description=payload.description)
        except IntegrityError:
            raise DuplicateError(f"Category '{payload.name}' already exists")
        return category_to_dto(cat)

    def update_category(self, category_id: int, payload: CategoryIn) -> CategoryOut:
        cat = self._get_or_404(category_id)
        try:
            with atomic(self.db):
                self.categories.update(cat, name=payload.name.strip(), description=payload.description)
        except IntegrityError:
            raise DuplicateError(f"Category '{payload.name}' already exists")
        return category_to_dto(cat)

    def delete_category(self, category_id: int) -> bool:
        cat = self._get_or_404(category_id)
        try:
            with atomic(self.db):
                self.categories.delete(cat)
        except IntegrityError:
            logger.info("Delete of category %s blocked by foreign key", category_id)
            raise BusinessRuleError("Category still has parts and cannot be deleted")
        return True
