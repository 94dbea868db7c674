# backend/inventory/repositories/transaction_repository.py
from typing import List, Optional

from sqlalchemy import func, desc
from sqlalchemy.orm import Session, joinedload

from ..domain.constants import TXN_OUT
from ..models import Part, StockTransaction


class TransactionRepository:
    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(StockTransaction).options(joinedload(StockTransaction.part))

    def _newest_first(self, q):
        return q.order_by(StockTransaction.created_at.desc(), StockTransaction.id.desc())

    def list(self) -> List[StockTransaction]:
        return self._newest_first(self._query()).all()

    def get(self, txn_id: int) -> Optional[StockTransaction]:
        return self._query().filter(StockTransaction.id == txn_id).one_or_none()

    def list_for_part(self, part_id: int) -> List[StockTransaction]:
        return self._newest_first(self._query().filter(StockTransaction.part_id == part_id)).all()

    def add(self, **fields) -> StockTransaction:
        tx = StockTransaction(**fields)
        self.db.add(tx)
        self.db.flush()
        return tx

    def update_payment(self, tx: StockTransaction, *, amount_paid, is_paid: bool) -> StockTransaction:
        tx.amount_paid = amount_paid
        tx.is_paid = is_paid
        self.db.flush()
        return tx

    def delete(self, tx: StockTransaction) -> None:
        # stock effect of the movement is intentionally left in place
        self.db.delete(tx)
        self.db.flush()

    def fast_moving(self, limit: int):
        """Rows of (partId, partName, totalOutQuantity, transactionCount), biggest OUT total first."""
        qty_sum = func.sum(StockTransaction.quantity)
        q = (
            self.db.query(
                Part.id.label("partId"),
                Part.name.label("partName"),
                func.coalesce(qty_sum, 0).label("totalOutQuantity"),
                func.count(StockTransaction.id).label("transactionCount"),
            )
            .join(Part, Part.id == StockTransaction.part_id)
            .filter(StockTransaction.type == TXN_OUT)
            .group_by(Part.id, Part.name)
            .order_by(desc(func.coalesce(qty_sum, 0)), Part.id.asc())
            .limit(limit)
        )
        return q.all()
