from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from northwind.core.database import Base


class Shipper(Base):
    __tablename__ = "shippers"

    id = Column(Integer, primary_key=True, index=True)

    company_name = Column(String(40), nullable=False)
    phone = Column(String(24), nullable=True)

    orders = relationship("Order", back_populates="shipper", order_by="Order.id")
