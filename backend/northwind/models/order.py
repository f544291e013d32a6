from decimal import Decimal

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import relationship

from northwind.core.database import Base


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)

    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    shipper_id = Column(Integer, ForeignKey("shippers.id"), nullable=True, index=True)
    # snapshot of the customer's location when the order was placed
    location_id = Column(Integer, ForeignKey("locations.id"), nullable=False)

    order_date = Column(DateTime(timezone=True), nullable=False)
    required_date = Column(DateTime(timezone=True), nullable=False)
    shipped_date = Column(DateTime(timezone=True), nullable=True)
    ship_name = Column(String(40), nullable=True)

    total = Column(Numeric(12, 2), nullable=False, default=Decimal("0"))

    customer = relationship("Customer", back_populates="orders")
    shipper = relationship("Shipper", back_populates="orders")
    location = relationship("Location")
    details = relationship(
        "OrderDetail",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderDetail.product_id",
    )

    @property
    def is_shipped(self) -> bool:
        return self.shipped_date is not None


class OrderDetail(Base):
    __tablename__ = "order_details"

    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_order_detail_quantity_non_negative"),
    )

    order_id = Column(Integer, ForeignKey("orders.id"), primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id"), primary_key=True)

    unit_price = Column(Numeric(10, 2), nullable=False)
    quantity = Column(Integer, nullable=False)
    discount = Column(Numeric(10, 2), nullable=False, default=Decimal("0"))

    order = relationship("Order", back_populates="details")
    product = relationship("Product")

    @property
    def product_name(self):
        return self.product.name if self.product is not None else None
