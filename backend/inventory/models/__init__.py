from .category import Category
from .part import Part
from .transaction import StockTransaction
__all__ = ["Category", "Part", "StockTransaction"]
