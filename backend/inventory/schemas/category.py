# backend/inventory/schemas/category.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CategoryIn(BaseModel):
    # id/createdAt sent by clients are ignored
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None


class CategoryOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    createdAt: Optional[datetime] = None
