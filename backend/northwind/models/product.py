from decimal import Decimal

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import relationship

from northwind.core.database import Base


class Product(Base):
    __tablename__ = "products"

    __table_args__ = (
        # SAFETY CONSTRAINTS
        CheckConstraint("unit_price >= 0", name="ck_unit_price_non_negative"),
        CheckConstraint("units_in_stock >= 0", name="ck_units_in_stock_non_negative"),
        CheckConstraint("discontinued IN (0, 1)", name="ck_discontinued_flag"),

        # PERFORMANCE INDEXES
        Index("ix_products_category_id", "category_id"),
        Index("ix_products_supplier_id", "supplier_id"),
    )

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(40), nullable=False)
    quantity_per_unit = Column(String(20), nullable=True)
    unit_price = Column(Numeric(10, 2), nullable=False, default=Decimal("0"))

    units_in_stock = Column(Integer, nullable=False, default=0)
    units_on_order = Column(Integer, nullable=False, default=0)
    reorder_level = Column(Integer, nullable=False, default=0)

    # 0 = active, 1 = discontinued
    discontinued = Column(Integer, nullable=False, default=0)

    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    supplier_id = Column(Integer, ForeignKey("suppliers.id"), nullable=True)

    category = relationship("Category", back_populates="products")
    supplier = relationship("Supplier", back_populates="products")

    @property
    def is_active(self) -> bool:
        return not self.discontinued
