# Import every model so Base.metadata knows all tables before create_all.

from northwind.models.category import Category
from northwind.models.customer import Customer
from northwind.models.location import Location
from northwind.models.order import Order, OrderDetail
from northwind.models.product import Product
from northwind.models.shipper import Shipper
from northwind.models.supplier import Supplier
from northwind.models.user import RefreshToken, User

__all__ = [
    "Category",
    "Customer",
    "Location",
    "Order",
    "OrderDetail",
    "Product",
    "RefreshToken",
    "Shipper",
    "Supplier",
    "User",
]
