# backend/northwind/api/customer_routes.py

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from northwind.api.deps_auth import get_current_principal, get_db
from northwind.api.schemas import (
    CustomerModel,
    MessageOut,
    OrderModelBase,
    OrderRequest,
    OrderResponse,
    apply_fields,
    apply_location,
)
from northwind.core.errors import NotFound, PersistenceFailure
from northwind.models import Customer, Order
from northwind.services.customer_service import CustomerService
from northwind.services.ordering import LineItem

router = APIRouter(dependencies=[Depends(get_current_principal)])


def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    return CustomerService(db)


def _get_customer(customers: CustomerService, customer_id: int) -> Customer:
    customer = customers.get_by_id(customer_id)
    if customer is None:
        raise NotFound(f"Customer with id {customer_id} not found")
    return customer


def _get_order(customers: CustomerService, customer_id: int, order_id: int) -> Order:
    order = customers.get_entity_by_id(customer_id, order_id)
    if order is None:
        raise NotFound(f"Order with id {order_id} not found for customer with id {customer_id}")
    return order


# ---------- CUSTOMERS ----------

@router.get("", response_model=List[CustomerModel])
def list_customers(customers: CustomerService = Depends(get_customer_service)):
    return customers.get_all()


@router.get("/{customer_id}", response_model=CustomerModel)
def get_customer(customer_id: int, customers: CustomerService = Depends(get_customer_service)):
    return _get_customer(customers, customer_id)


@router.post("", response_model=CustomerModel, status_code=status.HTTP_201_CREATED)
def add_customer(payload: CustomerModel, customers: CustomerService = Depends(get_customer_service)):
    customer = apply_fields(Customer(), payload, exclude={"id", "location"})
    apply_location(customer, payload.location)

    customers.add(customer)
    if not customers.is_saved_to_db():
        raise PersistenceFailure("Unable to save customer")
    return customer


@router.put("/{customer_id}", response_model=CustomerModel)
def update_customer(
    customer_id: int,
    payload: CustomerModel,
    customers: CustomerService = Depends(get_customer_service),
):
    customer = _get_customer(customers, customer_id)

    apply_fields(customer, payload, exclude={"id", "location"})
    apply_location(customer, payload.location)

    customers.update(customer)
    if not customers.is_saved_to_db():
        raise PersistenceFailure("Unable to update customer")
    return customer


@router.delete("/{customer_id}", response_model=MessageOut)
def delete_customer(customer_id: int, customers: CustomerService = Depends(get_customer_service)):
    customer = _get_customer(customers, customer_id)

    customers.delete(customer)
    if not customers.is_saved_to_db():
        raise PersistenceFailure("Unable to delete customer")
    return MessageOut(message=f"Customer with id '{customer_id}' has been deleted")


# ---------- ORDERS OF A CUSTOMER ----------

@router.get("/{customer_id}/orders", response_model=List[OrderResponse])
def list_orders(customer_id: int, customers: CustomerService = Depends(get_customer_service)):
    _get_customer(customers, customer_id)
    return customers.get_all_entities(customer_id)


@router.get("/{customer_id}/orders/{order_id}", response_model=OrderResponse)
def get_order(
    customer_id: int,
    order_id: int,
    customers: CustomerService = Depends(get_customer_service),
):
    _get_customer(customers, customer_id)
    return _get_order(customers, customer_id, order_id)


@router.post(
    "/{customer_id}/orders",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_order(
    customer_id: int,
    payload: OrderRequest,
    customers: CustomerService = Depends(get_customer_service),
):
    customer = _get_customer(customers, customer_id)

    items = [
        LineItem(product_id=i.product_id, quantity=i.quantity, discount=i.discount)
        for i in payload.order_items
    ]
    order = customers.add_entity(customer, Order(required_date=payload.required_date), items)
    if not customers.is_saved_to_db():
        raise PersistenceFailure("Unable to save order")
    return order


@router.put("/{customer_id}/orders/{order_id}", response_model=OrderResponse)
def update_order(
    customer_id: int,
    order_id: int,
    payload: OrderModelBase,
    customers: CustomerService = Depends(get_customer_service),
):
    _get_customer(customers, customer_id)
    order = _get_order(customers, customer_id, order_id)

    customers.update_entity(customer_id, order, payload.required_date)
    if not customers.is_saved_to_db():
        raise PersistenceFailure("Unable to update order")
    return order


@router.delete("/{customer_id}/orders/{order_id}", response_model=MessageOut)
def delete_order(
    customer_id: int,
    order_id: int,
    customers: CustomerService = Depends(get_customer_service),
):
    _get_customer(customers, customer_id)
    order = _get_order(customers, customer_id, order_id)

    customers.delete_entity(customer_id, order)
    if not customers.is_saved_to_db():
        raise PersistenceFailure("Unable to delete order")
    return MessageOut(message=f"Order with id '{order_id}' has been deleted")
