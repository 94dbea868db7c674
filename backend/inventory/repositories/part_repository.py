# backend/inventory/repositories/part_repository.py
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func, or_, text, update
from sqlalchemy.orm import Session, joinedload

from ..models import Part


def low_stock_clause():
    return Part.current_stock <= Part.minimum_stock


class PartRepository:
    def __init__(self, db: Session):
        self.db = db

    def _dialect(self) -> str:
        try:
            return self.db.bind.dialect.name
        except Exception:
            return "unknown"

    def _query(self):
        return self.db.query(Part).options(joinedload(Part.category))

    def list(self) -> List[Part]:
        return self._query().order_by(Part.id.asc()).all()

    def get(self, part_id: int) -> Optional[Part]:
        return self._query().filter(Part.id == part_id).one_or_none()

    def get_for_update(self, part_id: int) -> Optional[Part]:
        """
        Lock the part row for the rest of the DB transaction and read it fresh.
        MSSQL uses UPDLOCK+ROWLOCK; elsewhere SELECT ... FOR UPDATE
        (SQLite has no row locks and serialises writers instead).
        """
        if self._dialect() == "mssql":
            self.db.execute(
                text("SELECT id FROM parts WITH (UPDLOCK, ROWLOCK) WHERE id = :pid"),
                {"pid": part_id},
            )
            part = self.db.get(Part, part_id)
            if part:
                self.db.refresh(part)
            return part
        return (
            self.db.query(Part)
            .filter(Part.id == part_id)
            .populate_existing()
            .with_for_update()
            .one_or_none()
        )

    def get_by_number(self, part_number: str) -> Optional[Part]:
        return self.db.query(Part).filter(Part.part_number == part_number).one_or_none()

    def count(self) -> int:
        return self.db.query(func.count(Part.id)).scalar() or 0

    def low_stock(self) -> List[Part]:
        return self._query().filter(low_stock_clause()).order_by(Part.id.asc()).all()

    def search(
        self,
        *,
        query: Optional[str] = None,
        category_id: Optional[int] = None,
        low_stock: Optional[bool] = None,
        page: int = 1,
        limit: int = 20,
    ) -> Tuple[List[Part], int]:
        q = self.db.query(Part)

        if query:
            # plain substring: % and _ in the query are escaped, not wildcards
            q = q.filter(or_(
                Part.name.icontains(query, autoescape=True),
                Part.part_number.icontains(query, autoescape=True),
                Part.description.icontains(query, autoescape=True),
            ))
        if category_id is not None:
            q = q.filter(Part.category_id == category_id)
        if low_stock:
            q = q.filter(low_stock_clause())

        total = q.count()
        rows = (
            q.options(joinedload(Part.category))
            .order_by(Part.id.asc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return rows, total

    def add(self, **fields: Any) -> Part:
        part = Part(**fields)
        self.db.add(part)
        self.db.flush()
        return part

    def update(self, part: Part, changes: Dict[str, Any]) -> Part:
        for attr, value in changes.items():
            setattr(part, attr, value)
        part.updated_at = datetime.now(timezone.utc)
        self.db.flush()
        return part

    def set_stock(self, part: Part, *, expected: int, new_stock: int) -> bool:
        """
        Compare-and-swap write of current_stock: only applies while the row still
        holds `expected`. Returns False when another writer got there first.
        """
        res = self.db.execute(
            update(Part)
            .where(Part.id == part.id, Part.current_stock == expected)
            .values(current_stock=new_stock, updated_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session="fetch")
        )
        return res.rowcount == 1

    def delete(self, part: Part) -> None:
        self.db.delete(part)
        self.db.flush()
