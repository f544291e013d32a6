# backend/northwind/api/shipper_routes.py

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from northwind.api.deps_auth import get_current_principal, get_db
from northwind.api.schemas import (
    MessageOut,
    OrderResponse,
    ShipperModel,
    ShipperOrderModel,
    apply_fields,
)
from northwind.core.errors import NotFound, PersistenceFailure
from northwind.models import Order, Shipper
from northwind.services.shipper_service import ShipperService

router = APIRouter(dependencies=[Depends(get_current_principal)])


def get_shipper_service(db: Session = Depends(get_db)) -> ShipperService:
    return ShipperService(db)


def _get_shipper(shippers: ShipperService, shipper_id: int) -> Shipper:
    shipper = shippers.get_by_id(shipper_id)
    if shipper is None:
        raise NotFound(f"Shipper with id {shipper_id} not found")
    return shipper


def _get_order(shippers: ShipperService, shipper_id: int, order_id: int) -> Order:
    order = shippers.get_entity_by_id(shipper_id, order_id)
    if order is None:
        raise NotFound(f"Order with id {order_id} not found for shipper with id {shipper_id}")
    return order


# ---------- SHIPPERS ----------

@router.get("", response_model=List[ShipperModel])
def list_shippers(shippers: ShipperService = Depends(get_shipper_service)):
    return shippers.get_all()


@router.get("/{shipper_id}", response_model=ShipperModel)
def get_shipper(shipper_id: int, shippers: ShipperService = Depends(get_shipper_service)):
    return _get_shipper(shippers, shipper_id)


@router.post("", response_model=ShipperModel, status_code=status.HTTP_201_CREATED)
def add_shipper(payload: ShipperModel, shippers: ShipperService = Depends(get_shipper_service)):
    shipper = apply_fields(Shipper(), payload, exclude={"id"})

    shippers.add(shipper)
    if not shippers.is_saved_to_db():
        raise PersistenceFailure("Unable to save shipper")
    return shipper


@router.put("/{shipper_id}", response_model=ShipperModel)
def update_shipper(
    shipper_id: int,
    payload: ShipperModel,
    shippers: ShipperService = Depends(get_shipper_service),
):
    shipper = _get_shipper(shippers, shipper_id)

    apply_fields(shipper, payload, exclude={"id"})
    shippers.update(shipper)
    if not shippers.is_saved_to_db():
        raise PersistenceFailure("Unable to update shipper")
    return shipper


@router.delete("/{shipper_id}", response_model=MessageOut)
def delete_shipper(shipper_id: int, shippers: ShipperService = Depends(get_shipper_service)):
    shipper = _get_shipper(shippers, shipper_id)

    shippers.delete(shipper)
    if not shippers.is_saved_to_db():
        raise PersistenceFailure("Unable to delete shipper")
    return MessageOut(message=f"Shipper with id '{shipper_id}' has been deleted")


# ---------- ORDERS OF A SHIPPER ----------

@router.get("/{shipper_id}/orders", response_model=List[OrderResponse])
def list_orders(shipper_id: int, shippers: ShipperService = Depends(get_shipper_service)):
    _get_shipper(shippers, shipper_id)
    return shippers.get_all_entities(shipper_id)


@router.get("/{shipper_id}/orders/{order_id}", response_model=OrderResponse)
def get_order(
    shipper_id: int,
    order_id: int,
    shippers: ShipperService = Depends(get_shipper_service),
):
    _get_shipper(shippers, shipper_id)
    return _get_order(shippers, shipper_id, order_id)


@router.put("/{shipper_id}/orders/{order_id}", response_model=OrderResponse)
def ship_order(
    shipper_id: int,
    order_id: int,
    payload: ShipperOrderModel,
    shippers: ShipperService = Depends(get_shipper_service),
):
    """Hands an existing order to this shipper (any order, shipped or not)."""
    _get_shipper(shippers, shipper_id)

    order = shippers.get_order_by_id(order_id)
    if order is None:
        raise NotFound(f"Order with id {order_id} not found")

    shippers.update_entity(shipper_id, order, payload.shipped_date, payload.ship_name)
    if not shippers.is_saved_to_db():
        raise PersistenceFailure("Unable to ship order")
    return order


@router.delete("/{shipper_id}/orders/{order_id}", response_model=MessageOut)
def unship_order(
    shipper_id: int,
    order_id: int,
    shippers: ShipperService = Depends(get_shipper_service),
):
    _get_shipper(shippers, shipper_id)
    order = _get_order(shippers, shipper_id, order_id)

    shippers.delete_entity(shipper_id, order)
    if not shippers.is_saved_to_db():
        raise PersistenceFailure("Unable to detach order")
    return MessageOut(message=f"Order with id '{order_id}' has been removed from shipper '{shipper_id}'")
