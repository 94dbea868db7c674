"""create inventory tables (categories, parts, transactions)

Revision ID: 0001_create_inventory_tables
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_create_inventory_tables'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("name", name="uq_categories_name"),
    )

    op.create_table(
        "parts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column("part_number", sa.String(100), nullable=False),
        sa.Column("category_id", sa.Integer(), sa.ForeignKey("categories.id"), nullable=False),
        sa.Column("unit_price", sa.DECIMAL(10, 2), nullable=False),
        sa.Column("current_stock", sa.Integer(), nullable=False),
        sa.Column("minimum_stock", sa.Integer(), nullable=False),
        sa.Column("max_stock", sa.Integer()),
        sa.Column("location", sa.String(100)),
        sa.Column("supplier", sa.String(200)),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("part_number", name="uq_parts_part_number"),
        sa.CheckConstraint("current_stock >= 0", name="ck_parts_current_stock_non_negative"),
    )
    op.create_index("ix_parts_category_id", "parts", ["category_id"], unique=False)

    op.create_table(
        "transactions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("part_id", sa.Integer(), sa.ForeignKey("parts.id"), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("unit_price", sa.DECIMAL(10, 2)),
        sa.Column("total_amount", sa.DECIMAL(10, 2)),
        sa.Column("recipient_name", sa.String(200)),
        sa.Column("reason", sa.Text()),
        sa.Column("is_paid", sa.Boolean(), nullable=False),
        sa.Column("amount_paid", sa.DECIMAL(10, 2), nullable=False, server_default=sa.text("0")),
        sa.Column("transaction_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("notes", sa.Text()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("type IN ('IN','OUT','ADJUSTMENT')", name="ck_transactions_type"),
        sa.CheckConstraint("quantity >= 0", name="ck_transactions_quantity_non_negative"),
    )
    op.create_index("ix_transactions_part_id", "transactions", ["part_id"], unique=False)
    op.create_index("ix_transactions_type", "transactions", ["type"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_transactions_type", table_name="transactions")
    op.drop_index("ix_transactions_part_id", table_name="transactions")
    op.drop_table("transactions")
    op.drop_index("ix_parts_category_id", table_name="parts")
    op.drop_table("parts")
    op.drop_table("categories")
