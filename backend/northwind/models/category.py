from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship

from northwind.core.database import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(15), unique=True, nullable=False)
    description = Column(Text, nullable=True)

    # products outlive their category (detached on delete, never cascaded)
    products = relationship("Product", back_populates="category")
