# backend/inventory/services/converters.py
from ..models import Category, Part, StockTransaction
from ..schemas.category import CategoryOut
from ..schemas.part import PartOut
from ..schemas.transaction import TransactionOut


def category_to_dto(c: Category) -> CategoryOut:
    return CategoryOut(id=c.id, name=c.name, description=c.description, createdAt=c.created_at)


def part_to_dto(p: Part) -> PartOut:
    return PartOut(
        id=p.id,
        name=p.name,
        description=p.description,
        partNumber=p.part_number,
        categoryId=p.category_id,
        categoryName=p.category.name if p.category is not None else None,
        unitPrice=p.unit_price,
        currentStock=int(p.current_stock or 0),
        minimumStock=int(p.minimum_stock or 0),
        maxStock=p.max_stock,
        location=p.location,
        supplier=p.supplier,
        createdAt=p.created_at,
        updatedAt=p.updated_at,
    )


def transaction_to_dto(t: StockTransaction) -> TransactionOut:
    return TransactionOut(
        id=t.id,
        partId=t.part_id,
        partName=t.part.name if t.part is not None else None,
        type=t.type,
        quantity=t.quantity,
        unitPrice=t.unit_price,
        totalAmount=t.total_amount,
        recipientName=t.recipient_name,
        reason=t.reason,
        isPaid=bool(t.is_paid),
        amountPaid=t.amount_paid if t.amount_paid is not None else 0,
        transactionDate=t.transaction_date,
        notes=t.notes,
    )
