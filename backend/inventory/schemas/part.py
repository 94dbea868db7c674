# backend/inventory/schemas/part.py
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_serializer, field_validator

from ..domain.constants import SEARCH_DEFAULT_LIMIT, SEARCH_MAX_LIMIT
from .common import money_in, money_out


class PartCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    partNumber: str = Field(..., min_length=1, max_length=100)
    categoryId: int
    unitPrice: Decimal
    initialStock: int = Field(0, ge=0)
    minimumStock: int = Field(0, ge=0)
    maxStock: Optional[int] = Field(default=None, ge=0)
    location: Optional[str] = Field(default=None, max_length=100)
    supplier: Optional[str] = Field(default=None, max_length=200)

    @field_validator("unitPrice", mode="before")
    @classmethod
    def _price_decimal(cls, v):
        return money_in(v, "unitPrice")


class PartUpdate(BaseModel):
    """Partial update: null/missing fields are left as they are."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    unitPrice: Optional[Decimal] = None
    minimumStock: Optional[int] = Field(default=None, ge=0)
    maxStock: Optional[int] = Field(default=None, ge=0)
    location: Optional[str] = Field(default=None, max_length=100)
    supplier: Optional[str] = Field(default=None, max_length=200)

    @field_validator("unitPrice", mode="before")
    @classmethod
    def _price_decimal(cls, v):
        return money_in(v, "unitPrice", allow_none=True)


class PartSearch(BaseModel):
    query: Optional[str] = None
    categoryId: Optional[int] = None
    lowStock: Optional[bool] = None
    page: int = Field(1, ge=1)
    limit: int = Field(SEARCH_DEFAULT_LIMIT, ge=1, le=SEARCH_MAX_LIMIT)


class PartOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    partNumber: str
    categoryId: int
    categoryName: Optional[str] = None
    unitPrice: Decimal
    currentStock: int
    minimumStock: int
    maxStock: Optional[int] = None
    location: Optional[str] = None
    supplier: Optional[str] = None
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    # JSON clients get a plain number
    @field_serializer("unitPrice")
    def _ser_price(self, v: Decimal):
        return money_out(v)
