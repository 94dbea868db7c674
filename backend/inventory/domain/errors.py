# backend/inventory/domain/errors.py

"""
Domain errors raised by the service layer.

Each carries the HTTP status the boundary maps it to; main.py turns them into
the standard failure envelope.
"""


class InventoryError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(InventoryError):
    status_code = 404


class BusinessRuleError(InventoryError):
    status_code = 400


class MissingReferenceError(BusinessRuleError):
    """A request points at a part/category that does not exist."""


class DuplicateError(BusinessRuleError):
    pass


class InsufficientStockError(BusinessRuleError):
    def __init__(self, available: int, requested: int):
        super().__init__(f"Insufficient stock. Available: {available}, Requested: {requested}")
        self.available = available
        self.requested = requested


class StockConflictError(BusinessRuleError):
    """The part's stock changed between the read and the write."""
