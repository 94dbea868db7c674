# backend/inventory/scripts/seed_demo.py
"""
Idempotent demo data: categories, parts (with their initial IN movements) and a
few OUT/ADJUSTMENT movements, all written through the services.

    DATABASE_URL=sqlite+pysqlite:///./inventory.db python -m inventory.scripts.seed_demo
"""
import logging
from decimal import Decimal

from ..core.db import Database
from ..domain.errors import InventoryError
from ..models import Category, Part
from ..schemas.category import CategoryIn
from ..schemas.part import PartCreate
from ..schemas.transaction import TransactionCreate
from ..services.category_service import CategoryService
from ..services.part_service import PartService
from ..services.transaction_service import TransactionService

logger = logging.getLogger(__name__)

CATEGORIES = [
    {"name": "Bearings", "description": "Ball and roller bearings"},
    {"name": "Belts", "description": "Drive and timing belts"},
    {"name": "Fasteners", "description": None},
]

PARTS = [
    {"partNumber": "BRG-6204", "name": "Ball bearing 6204", "category": "Bearings",
     "unitPrice": Decimal("4.80"), "initialStock": 40, "minimumStock": 10, "location": "A-1"},
    {"partNumber": "BLT-A42", "name": "V-belt A42", "category": "Belts",
     "unitPrice": Decimal("12.50"), "initialStock": 8, "minimumStock": 10, "location": "B-2"},
    {"partNumber": "FST-M8", "name": "Hex bolt M8x30", "category": "Fasteners",
     "unitPrice": Decimal("0.15"), "initialStock": 500, "minimumStock": 100, "supplier": "Acme Fasteners"},
]

MOVEMENTS = [
    {"partNumber": "BRG-6204", "type": "OUT", "quantity": 12, "reason": "Line 1 overhaul", "recipientName": "Maintenance"},
    {"partNumber": "FST-M8", "type": "OUT", "quantity": 120, "reason": "Assembly"},
    {"partNumber": "BLT-A42", "type": "ADJUSTMENT", "quantity": 6, "reason": "Cycle count"},
]


def get_one(db, model, **by):
    return db.query(model).filter_by(**by).first()


def run(database: Database) -> None:
    database.create_all()
    db = database.session()
    try:
        cats = CategoryService(db)
        for c in CATEGORIES:
            if not get_one(db, Category, name=c["name"]):
                cats.create_category(CategoryIn(**c))

        parts = PartService(db)
        created = set()
        for p in PARTS:
            if get_one(db, Part, part_number=p["partNumber"]):
                continue
            data = {k: v for k, v in p.items() if k != "category"}
            data["categoryId"] = get_one(db, Category, name=p["category"]).id
            parts.create_part(PartCreate(**data))
            created.add(p["partNumber"])

        # movements only for parts created in this run
        txns = TransactionService(db)
        for m in MOVEMENTS:
            if m["partNumber"] not in created:
                continue
            part = get_one(db, Part, part_number=m["partNumber"])
            data = {k: v for k, v in m.items() if k != "partNumber"}
            try:
                txns.create_transaction(TransactionCreate(partId=part.id, **data))
            except InventoryError as e:
                logger.warning("Skipped movement for %s: %s", m["partNumber"], e)

        logger.info("Seed done: %s new part(s)", len(created))
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    database = Database.from_env()
    try:
        run(database)
    finally:
        database.dispose()
