# backend/inventory/services/transaction_service.py
from __future__ import annotations
from typing import List, Optional
import logging

from sqlalchemy.orm import Session

from ..core.db import atomic
from ..domain.constants import FAST_MOVING_DEFAULT_LIMIT, FAST_MOVING_MONTHS
from ..domain.errors import MissingReferenceError, NotFoundError, StockConflictError
from ..domain.stock import check_movement, next_stock, total_amount
from ..repositories.part_repository import PartRepository
from ..repositories.transaction_repository import TransactionRepository
from ..schemas.stats import FastMovingPartOut
from ..schemas.transaction import PaymentUpdate, TransactionCreate, TransactionOut
from .converters import transaction_to_dto

logger = logging.getLogger(__name__)


class TransactionService:
    def __init__(
        self,
        db: Session,
        transactions: Optional[TransactionRepository] = None,
        parts: Optional[PartRepository] = None,
    ):
        self.db = db
        self.transactions = transactions or TransactionRepository(db)
        self.parts = parts or PartRepository(db)

    def _get_or_404(self, txn_id: int):
        tx = self.transactions.get(txn_id)
        if not tx:
            raise NotFoundError("Transaction not found")
        return tx

    def list_transactions(self) -> List[TransactionOut]:
        return [transaction_to_dto(t) for t in self.transactions.list()]

    def get_transaction(self, txn_id: int) -> TransactionOut:
        return transaction_to_dto(self._get_or_404(txn_id))

    def transactions_for_part(self, part_id: int) -> List[TransactionOut]:
        return [transaction_to_dto(t) for t in self.transactions.list_for_part(part_id)]

    def create_transaction(self, req: TransactionCreate) -> TransactionOut:
        """
        Record a stock movement and apply it to Part.current_stock.
        - IN  -> stock += quantity
        - OUT -> stock -= quantity (400 when stock < quantity, floor 0)
        - ADJUSTMENT -> stock = quantity
        The part row is locked, the stock write is a compare-and-swap, and the
        transaction row + stock update commit together or not at all.
        """
        with atomic(self.db):
            part = self.parts.get_for_update(req.partId)
            if not part:
                raise MissingReferenceError(f"Part with id {req.partId} not found")

            current = int(part.current_stock or 0)
            check_movement(current, req.type, req.quantity)
            new_stock = next_stock(current, req.type, req.quantity)

            unit_price = req.unitPrice if req.unitPrice is not None else part.unit_price
            tx = self.transactions.add(
                part_id=part.id,
                type=req.type,
                quantity=req.quantity,
                unit_price=unit_price,
                total_amount=total_amount(unit_price, req.quantity),
                recipient_name=req.recipientName,
                reason=req.reason,
                is_paid=req.isPaid,
                amount_paid=req.amountPaid,
                notes=req.notes,
            )
            if not self.parts.set_stock(part, expected=current, new_stock=new_stock):
                raise StockConflictError("Stock of the part changed concurrently, please retry")

        logger.info(
            "Stock movement %s part=%s qty=%s: %s -> %s (txn %s)",
            req.type, req.partId, req.quantity, current, new_stock, tx.id,
        )
        return self.get_transaction(tx.id)

    def update_payment(self, txn_id: int, req: PaymentUpdate) -> TransactionOut:
        tx = self._get_or_404(txn_id)
        with atomic(self.db):
            self.transactions.update_payment(tx, amount_paid=req.amountPaid, is_paid=req.isPaid)
        return self.get_transaction(txn_id)

    def delete_transaction(self, txn_id: int) -> bool:
        """Removes the row only; the part's stock is not reversed."""
        tx = self._get_or_404(txn_id)
        with atomic(self.db):
            self.transactions.delete(tx)
        return True

    def fast_moving_parts(self, limit: int = FAST_MOVING_DEFAULT_LIMIT) -> List[FastMovingPartOut]:
        return [
            FastMovingPartOut(
                partId=r.partId,
                partName=r.partName,
                totalOutQuantity=int(r.totalOutQuantity or 0),
                transactionCount=int(r.transactionCount or 0),
                averagePerMonth=int(r.totalOutQuantity or 0) / FAST_MOVING_MONTHS,
            )
            for r in self.transactions.fast_moving(limit)
        ]
