"""initial northwind schema

Revision ID: 3c9e1a7d52f4
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c9e1a7d52f4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "locations",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("address", sa.String(length=60), nullable=True),
        sa.Column("city", sa.String(length=15), nullable=True),
        sa.Column("region", sa.String(length=15), nullable=True),
        sa.Column("postal_code", sa.String(length=10), nullable=True),
        sa.Column("country", sa.String(length=15), nullable=True),
        sa.Column("phone", sa.String(length=24), nullable=True),
        sa.Column("extension", sa.String(length=4), nullable=True),
        sa.Column("fax", sa.String(length=24), nullable=True),
        sa.UniqueConstraint("address"),
    )
    op.create_index(op.f("ix_locations_id"), "locations", ["id"], unique=False)

    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=15), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.UniqueConstraint("name"),
    )
    op.create_index(op.f("ix_categories_id"), "categories", ["id"], unique=False)

    op.create_table(
        "suppliers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("company_name", sa.String(length=40), nullable=False),
        sa.Column("contact_name", sa.String(length=30), nullable=True),
        sa.Column("contact_title", sa.String(length=30), nullable=True),
        sa.Column("home_page", sa.Text(), nullable=True),
        sa.Column("location_id", sa.Integer(), sa.ForeignKey("locations.id"), nullable=True),
        sa.UniqueConstraint("location_id"),
    )
    op.create_index(op.f("ix_suppliers_id"), "suppliers", ["id"], unique=False)

    op.create_table(
        "customers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("company_code", sa.String(length=5), nullable=True),
        sa.Column("company_name", sa.String(length=40), nullable=False),
        sa.Column("contact_name", sa.String(length=30), nullable=True),
        sa.Column("contact_title", sa.String(length=30), nullable=True),
        sa.Column("location_id", sa.Integer(), sa.ForeignKey("locations.id"), nullable=True),
        sa.UniqueConstraint("location_id"),
    )
    op.create_index(op.f("ix_customers_id"), "customers", ["id"], unique=False)
    op.create_index(op.f("ix_customers_company_code"), "customers", ["company_code"], unique=False)

    op.create_table(
        "shippers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("company_name", sa.String(length=40), nullable=False),
        sa.Column("phone", sa.String(length=24), nullable=True),
    )
    op.create_index(op.f("ix_shippers_id"), "shippers", ["id"], unique=False)

    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=40), nullable=False),
        sa.Column("quantity_per_unit", sa.String(length=20), nullable=True),
        sa.Column("unit_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("units_in_stock", sa.Integer(), nullable=False),
        sa.Column("units_on_order", sa.Integer(), nullable=False),
        sa.Column("reorder_level", sa.Integer(), nullable=False),
        sa.Column("discontinued", sa.Integer(), nullable=False),
        sa.Column("category_id", sa.Integer(), sa.ForeignKey("categories.id"), nullable=True),
        sa.Column("supplier_id", sa.Integer(), sa.ForeignKey("suppliers.id"), nullable=True),
        sa.CheckConstraint("unit_price >= 0", name="ck_unit_price_non_negative"),
        sa.CheckConstraint("units_in_stock >= 0", name="ck_units_in_stock_non_negative"),
        sa.CheckConstraint("discontinued IN (0, 1)", name="ck_discontinued_flag"),
    )
    op.create_index(op.f("ix_products_id"), "products", ["id"], unique=False)
    op.create_index("ix_products_category_id", "products", ["category_id"], unique=False)
    op.create_index("ix_products_supplier_id", "products", ["supplier_id"], unique=False)

    op.create_table(
        "orders",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("customer_id", sa.Integer(), sa.ForeignKey("customers.id"), nullable=False),
        sa.Column("shipper_id", sa.Integer(), sa.ForeignKey("shippers.id"), nullable=True),
        sa.Column("location_id", sa.Integer(), sa.ForeignKey("locations.id"), nullable=False),
        sa.Column("order_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("required_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("shipped_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("ship_name", sa.String(length=40), nullable=True),
        sa.Column("total", sa.Numeric(12, 2), nullable=False),
    )
    op.create_index(op.f("ix_orders_id"), "orders", ["id"], unique=False)
    op.create_index(op.f("ix_orders_customer_id"), "orders", ["customer_id"], unique=False)
    op.create_index(op.f("ix_orders_shipper_id"), "orders", ["shipper_id"], unique=False)

    op.create_table(
        "order_details",
        sa.Column("order_id", sa.Integer(), sa.ForeignKey("orders.id"), primary_key=True),
        sa.Column("product_id", sa.Integer(), sa.ForeignKey("products.id"), primary_key=True),
        sa.Column("unit_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("discount", sa.Numeric(10, 2), nullable=False),
        sa.CheckConstraint("quantity >= 0", name="ck_order_detail_quantity_non_negative"),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_identifier", sa.String(length=36), nullable=False),
        sa.Column("username", sa.String(), nullable=False),
        sa.Column("password_salt", sa.LargeBinary(length=64), nullable=False),
        sa.Column("password_hash", sa.LargeBinary(length=32), nullable=False),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("access_token", sa.Text(), nullable=True),
        sa.Column("refresh_token_value", sa.String(length=64), nullable=True),
        sa.Column("refresh_token_create_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("refresh_token_expiry_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("refresh_token_revoke_date", sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint("user_identifier"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)
    op.create_index(op.f("ix_users_refresh_token_value"), "users", ["refresh_token_value"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_users_refresh_token_value"), table_name="users")
    op.drop_index(op.f("ix_users_username"), table_name="users")
    op.drop_index(op.f("ix_users_id"), table_name="users")
    op.drop_table("users")

    op.drop_table("order_details")

    op.drop_index(op.f("ix_orders_shipper_id"), table_name="orders")
    op.drop_index(op.f("ix_orders_customer_id"), table_name="orders")
    op.drop_index(op.f("ix_orders_id"), table_name="orders")
    op.drop_table("orders")

    op.drop_index("ix_products_supplier_id", table_name="products")
    op.drop_index("ix_products_category_id", table_name="products")
    op.drop_index(op.f("ix_products_id"), table_name="products")
    op.drop_table("products")

    op.drop_index(op.f("ix_shippers_id"), table_name="shippers")
    op.drop_table("shippers")

    op.drop_index(op.f("ix_customers_company_code"), table_name="customers")
    op.drop_index(op.f("ix_customers_id"), table_name="customers")
    op.drop_table("customers")

    op.drop_index(op.f("ix_suppliers_id"), table_name="suppliers")
    op.drop_table("suppliers")

    op.drop_index(op.f("ix_categories_id"), table_name="categories")
    op.drop_table("categories")

    op.drop_index(op.f("ix_locations_id"), table_name="locations")
    op.drop_table("locations")
