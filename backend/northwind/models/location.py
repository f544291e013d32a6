from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from northwind.core.database import Base


class Location(Base):
    __tablename__ = "locations"

    id = Column(Integer, primary_key=True, index=True)

    address = Column(String(60), unique=True, nullable=True)
    city = Column(String(15), nullable=True)
    region = Column(String(15), nullable=True)
    postal_code = Column(String(10), nullable=True)
    country = Column(String(15), nullable=True)
    phone = Column(String(24), nullable=True)
    extension = Column(String(4), nullable=True)
    fax = Column(String(24), nullable=True)

    # owner (at most one of these is set)
    supplier = relationship("Supplier", back_populates="location", uselist=False)
    customer = relationship("Customer", back_populates="location", uselist=False)
