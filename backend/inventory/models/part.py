from sqlalchemy import (
    Column, Integer, String, Text, DateTime, DECIMAL, ForeignKey, CheckConstraint, UniqueConstraint
)
from sqlalchemy.orm import relationship
from ..core.db import Base
from .category import utcnow


class Part(Base):
    __tablename__ = "parts"

    id            = Column(Integer, primary_key=True, autoincrement=True)
    name          = Column(String(200), nullable=False)
    description   = Column(Text)
    part_number   = Column(String(100), nullable=False)
    category_id   = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    unit_price    = Column(DECIMAL(10, 2), nullable=False)
    current_stock = Column(Integer, nullable=False, default=0)
    minimum_stock = Column(Integer, nullable=False, default=0)
    max_stock     = Column(Integer)
    location      = Column(String(100))
    supplier      = Column(String(200))
    created_at    = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at    = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        UniqueConstraint("part_number", name="uq_parts_part_number"),
        CheckConstraint("current_stock >= 0", name="ck_parts_current_stock_non_negative"),
    )

    category = relationship("Category", back_populates="parts")
    # Stock movements
    txns = relationship("StockTransaction", back_populates="part", passive_deletes=True)
