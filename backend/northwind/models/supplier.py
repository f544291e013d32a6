from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from northwind.core.database import Base


class Supplier(Base):
    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True, index=True)

    company_name = Column(String(40), nullable=False)
    contact_name = Column(String(30), nullable=True)
    contact_title = Column(String(30), nullable=True)
    home_page = Column(Text, nullable=True)

    location_id = Column(Integer, ForeignKey("locations.id"), unique=True, nullable=True)

    location = relationship(
        "Location",
        back_populates="supplier",
        cascade="all, delete-orphan",
        single_parent=True,
    )
    products = relationship("Product", back_populates="supplier")
