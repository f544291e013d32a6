from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from northwind.core.database import Base


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)

    company_code = Column(String(5), nullable=True, index=True)
    company_name = Column(String(40), nullable=False)
    contact_name = Column(String(30), nullable=True)
    contact_title = Column(String(30), nullable=True)

    location_id = Column(Integer, ForeignKey("locations.id"), unique=True, nullable=True)

    location = relationship(
        "Location",
        back_populates="customer",
        cascade="all, delete-orphan",
        single_parent=True,
    )
    # orders are customer-owned data: deleting the customer deletes them
    orders = relationship(
        "Order",
        back_populates="customer",
        cascade="all, delete-orphan",
        order_by="Order.id",
    )
