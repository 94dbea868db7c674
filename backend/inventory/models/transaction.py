from sqlalchemy import (
    Column, Integer, String, Text, Boolean, DateTime, DECIMAL, ForeignKey, CheckConstraint, text
)
from sqlalchemy.orm import relationship
from ..core.db import Base
from .category import utcnow


class StockTransaction(Base):
    __tablename__ = "transactions"

    id               = Column(Integer, primary_key=True, autoincrement=True)
    part_id          = Column(Integer, ForeignKey("parts.id"), nullable=False, index=True)
    type             = Column(String(20), nullable=False, index=True)  # 'IN' | 'OUT' | 'ADJUSTMENT'
    quantity         = Column(Integer, nullable=False)
    unit_price       = Column(DECIMAL(10, 2))
    total_amount     = Column(DECIMAL(10, 2))
    recipient_name   = Column(String(200))
    reason           = Column(Text)
    is_paid          = Column(Boolean, nullable=False, default=False)
    amount_paid      = Column(DECIMAL(10, 2), nullable=False, default=0, server_default=text("0"))
    transaction_date = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    notes            = Column(Text)
    created_at       = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        CheckConstraint("type IN ('IN','OUT','ADJUSTMENT')", name="ck_transactions_type"),
        CheckConstraint("quantity >= 0", name="ck_transactions_quantity_non_negative"),
    )

    part = relationship("Part", back_populates="txns")
