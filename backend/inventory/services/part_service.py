# backend/inventory/services/part_service.py
from __future__ import annotations
from typing import List, Optional
import logging
import math

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.db import atomic
from ..domain.constants import TXN_IN, REASON_INITIAL_STOCK
from ..domain.errors import BusinessRuleError, DuplicateError, MissingReferenceError, NotFoundError
from ..domain.stock import total_amount
from ..repositories.category_repository import CategoryRepository
from ..repositories.part_repository import PartRepository
from ..repositories.transaction_repository import TransactionRepository
from ..schemas.common import Page
from ..schemas.part import PartCreate, PartOut, PartSearch, PartUpdate
from .converters import part_to_dto

logger = logging.getLogger(__name__)

# request field -> column
UPDATABLE_FIELDS = {
    "name": "name",
    "description": "description",
    "unitPrice": "unit_price",
    "minimumStock": "minimum_stock",
    "maxStock": "max_stock",
    "location": "location",
    "supplier": "supplier",
}


class PartService:
    def __init__(
        self,
        db: Session,
        parts: Optional[PartRepository] = None,
        categories: Optional[CategoryRepository] = None,
        transactions: Optional[TransactionRepository] = None,
    ):
        self.db = db
        self.parts = parts or PartRepository(db)
        self.categories = categories or CategoryRepository(db)
        self.transactions = transactions or TransactionRepository(db)

    def _get_or_404(self, part_id: int):
        part = self.parts.get(part_id)
        if not part:
            raise NotFoundError("Part not found")
        return part

    def list_parts(self) -> List[PartOut]:
        return [part_to_dto(p) for p in self.parts.list()]

    def get_part(self, part_id: int) -> PartOut:
        return part_to_dto(self._get_or_404(part_id))

    def low_stock_parts(self) -> List[PartOut]:
        return [part_to_dto(p) for p in self.parts.low_stock()]

    def search_parts(self, req: PartSearch) -> Page[PartOut]:
        rows, total = self.parts.search(
            query=req.query,
            category_id=req.categoryId,
            low_stock=req.lowStock,
            page=req.page,
            limit=req.limit,
        )
        return Page[PartOut](
            data=[part_to_dto(p) for p in rows],
            page=req.page,
            limit=req.limit,
            total=total,
            totalPages=math.ceil(total / req.limit),
        )

    def create_part(self, req: PartCreate) -> PartOut:
        """
        Insert the part and, when initialStock > 0, its seeded IN transaction in one DB transaction.
        """
        if not self.categories.get(req.categoryId):
            raise MissingReferenceError(f"Category with id {req.categoryId} not found")
        try:
            with atomic(self.db):
                part = self.parts.add(
                    name=req.name,
                    description=req.description,
                    part_number=req.partNumber,
                    category_id=req.categoryId,
                    unit_price=req.unitPrice,
                    current_stock=req.initialStock,
                    minimum_stock=req.minimumStock,
                    max_stock=req.maxStock,
                    location=req.location,
                    supplier=req.supplier,
                )
                if req.initialStock > 0:
                    amount = total_amount(req.unitPrice, req.initialStock)
                    self.transactions.add(
                        part_id=part.id,
                        type=TXN_IN,
                        quantity=req.initialStock,
                        unit_price=req.unitPrice,
                        total_amount=amount,
                        reason=REASON_INITIAL_STOCK,
                        is_paid=True,
                        amount_paid=amount,
                    )
        except IntegrityError as exc:
            # rolled back by atomic(); find out which constraint fired
            if self.parts.get_by_number(req.partNumber):
                raise DuplicateError(f"Part number '{req.partNumber}' already exists")
            if not self.categories.get(req.categoryId):
                raise MissingReferenceError(f"Category with id {req.categoryId} not found")
            logger.info("Create of part %s rejected by the database: %s", req.partNumber, exc.orig)
            raise BusinessRuleError("Part violates a database constraint and was not created")
        logger.info("Part %s (%s) created with stock %s", part.id, part.part_number, req.initialStock)
        return self.get_part(part.id)

    def update_part(self, part_id: int, req: PartUpdate) -> PartOut:
        part = self._get_or_404(part_id)
        changes = {
            UPDATABLE_FIELDS[k]: v
            for k, v in req.model_dump(exclude_none=True).items()
            if k in UPDATABLE_FIELDS
        }
        with atomic(self.db):
            self.parts.update(part, changes)
        return self.get_part(part_id)

    def delete_part(self, part_id: int) -> bool:
        part = self._get_or_404(part_id)
        try:
            with atomic(self.db):
                self.parts.delete(part)
        except IntegrityError:
            logger.info("Delete of part %s blocked by foreign key", part_id)
            raise BusinessRuleError("Part still has transactions and cannot be deleted")
        return True
