# backend/inventory/schemas/transaction.py
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_serializer, field_validator

from ..domain.constants import TxnTypeLiteral
from .common import money_in, money_out


class TransactionCreate(BaseModel):
    partId: int
    type: TxnTypeLiteral
    quantity: int = Field(..., ge=0)
    unitPrice: Optional[Decimal] = None   # defaults to the part's unit price
    recipientName: Optional[str] = Field(default=None, max_length=200)
    reason: Optional[str] = None
    isPaid: bool = False
    amountPaid: Decimal = Decimal("0")
    notes: Optional[str] = None

    @field_validator("unitPrice", mode="before")
    @classmethod
    def _price_decimal(cls, v):
        return money_in(v, "unitPrice", allow_none=True)

    @field_validator("amountPaid", mode="before")
    @classmethod
    def _paid_decimal(cls, v):
        return money_in(v, "amountPaid")


class PaymentUpdate(BaseModel):
    amountPaid: Decimal
    isPaid: bool = False

    @field_validator("amountPaid", mode="before")
    @classmethod
    def _paid_decimal(cls, v):
        return money_in(v, "amountPaid")


class TransactionOut(BaseModel):
    id: int
    partId: int
    partName: Optional[str] = None
    type: TxnTypeLiteral
    quantity: int
    unitPrice: Optional[Decimal] = None
    totalAmount: Optional[Decimal] = None
    recipientName: Optional[str] = None
    reason: Optional[str] = None
    isPaid: bool = False
    amountPaid: Decimal = Decimal("0")
    transactionDate: Optional[datetime] = None
    notes: Optional[str] = None

    @field_serializer("unitPrice", "totalAmount", "amountPaid")
    def _ser_money(self, v: Optional[Decimal]):
        return money_out(v)
