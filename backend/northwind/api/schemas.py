# backend/northwind/api/schemas.py

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from northwind.core.roles import Role
from northwind.models import Location


# ---------- HELPERS ----------

def apply_fields(entity, payload: BaseModel, exclude: Optional[set] = None):
    """Copies the fields the client actually sent onto an ORM row."""
    for k, v in payload.model_dump(exclude_unset=True, exclude=exclude).items():
        setattr(entity, k, v)
    return entity


def apply_location(entity, payload: Optional["LocationModel"]):
    if payload is None:
        return entity
    if entity.location is None:
        entity.location = Location()
    apply_fields(entity.location, payload, exclude={"id"})
    return entity


# ---------- LOCATIONS ----------

class LocationModel(BaseModel):
    id: Optional[int] = None
    address: Optional[str] = Field(default=None, max_length=60)
    city: Optional[str] = Field(default=None, max_length=15)
    region: Optional[str] = Field(default=None, max_length=15)
    postal_code: Optional[str] = Field(default=None, max_length=10)
    country: Optional[str] = Field(default=None, max_length=15)
    phone: Optional[str] = Field(default=None, max_length=24)
    extension: Optional[str] = Field(default=None, max_length=4)
    fax: Optional[str] = Field(default=None, max_length=24)

    class Config:
        from_attributes = True


# ---------- CATEGORIES / PRODUCTS ----------

class CategoryModel(BaseModel):
    id: Optional[int] = None
    name: str = Field(min_length=1, max_length=15)
    description: Optional[str] = None

    class Config:
        from_attributes = True


class ProductModel(BaseModel):
    id: Optional[int] = None
    name: str = Field(min_length=1, max_length=40)
    quantity_per_unit: Optional[str] = Field(default=None, max_length=20)
    unit_price: Decimal = Field(default=Decimal("0"), ge=0)
    units_in_stock: int = Field(default=0, ge=0)
    units_on_order: int = Field(default=0, ge=0)
    reorder_level: int = Field(default=0, ge=0)
    discontinued: int = Field(default=0, ge=0, le=1)

    # the owning parent is always taken from the route
    category_id: Optional[int] = None
    supplier_id: Optional[int] = None

    class Config:
        from_attributes = True


# ---------- SUPPLIERS / CUSTOMERS / SHIPPERS ----------

class SupplierModel(BaseModel):
    id: Optional[int] = None
    company_name: str = Field(min_length=1, max_length=40)
    contact_name: Optional[str] = Field(default=None, max_length=30)
    contact_title: Optional[str] = Field(default=None, max_length=30)
    home_page: Optional[str] = None
    location: Optional[LocationModel] = None

    class Config:
        from_attributes = True


class CustomerModel(BaseModel):
    id: Optional[int] = None
    company_code: Optional[str] = Field(default=None, max_length=5)
    company_name: str = Field(min_length=1, max_length=40)
    contact_name: Optional[str] = Field(default=None, max_length=30)
    contact_title: Optional[str] = Field(default=None, max_length=30)
    location: Optional[LocationModel] = None

    class Config:
        from_attributes = True


class ShipperModel(BaseModel):
    id: Optional[int] = None
    company_name: str = Field(min_length=1, max_length=40)
    phone: Optional[str] = Field(default=None, max_length=24)

    class Config:
        from_attributes = True


# ---------- ORDERS ----------

class OrderModelBase(BaseModel):
    required_date: datetime


class OrderItemRequest(BaseModel):
    product_id: int
    quantity: int
    discount: Decimal = Field(default=Decimal("0"), ge=0)


class OrderRequest(OrderModelBase):
    order_items: List[OrderItemRequest] = Field(default_factory=list)


class OrderItemResponse(BaseModel):
    product_id: int
    product_name: Optional[str] = None
    quantity: int
    unit_price: Decimal
    discount: Decimal

    class Config:
        from_attributes = True


class OrderResponse(OrderModelBase):
    id: int
    customer_id: int
    shipper_id: Optional[int] = None
    order_date: datetime
    shipped_date: Optional[datetime] = None
    total: Decimal
    ship_name: Optional[str] = None
    order_items: List[OrderItemResponse] = Field(default_factory=list, validation_alias="details")

    class Config:
        from_attributes = True


class ShipperOrderModel(BaseModel):
    shipped_date: datetime
    ship_name: Optional[str] = Field(default=None, max_length=40)


# ---------- AUTH / USERS ----------

class AuthRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserRequest(AuthRequest):
    role: str


class RefreshTokenRequest(BaseModel):
    refresh_token: str


class AuthResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    refresh_token: str
    refresh_token_expiry_date: datetime


class RefreshTokenOut(BaseModel):
    value: Optional[str] = None
    create_date: Optional[datetime] = None
    expiry_date: Optional[datetime] = None
    revoke_date: Optional[datetime] = None
    is_revoked: bool = False

    class Config:
        from_attributes = True


class UserOut(BaseModel):
    id: int
    user_identifier: str
    username: str
    role: Role
    access_token: Optional[str] = None
    refresh_token: Optional[RefreshTokenOut] = None

    class Config:
        from_attributes = True


class MessageOut(BaseModel):
    message: str
