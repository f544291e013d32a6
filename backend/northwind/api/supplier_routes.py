# backend/northwind/api/supplier_routes.py

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from northwind.api.deps_auth import get_db, require_supplier, require_supplier_admin
from northwind.api.schemas import (
    MessageOut,
    ProductModel,
    SupplierModel,
    apply_fields,
    apply_location,
)
from northwind.core.errors import NotFound, PersistenceFailure
from northwind.models import Product, Supplier
from northwind.services.supplier_service import SupplierService

router = APIRouter()

# reads: Supplier policy, writes: SupplierAdmin policy
read_access = [Depends(require_supplier)]
write_access = [Depends(require_supplier_admin)]


def get_supplier_service(db: Session = Depends(get_db)) -> SupplierService:
    return SupplierService(db)


def _get_supplier(suppliers: SupplierService, supplier_id: int) -> Supplier:
    supplier = suppliers.get_by_id(supplier_id)
    if supplier is None:
        raise NotFound(f"Supplier with id {supplier_id} not found")
    return supplier


def _get_product(suppliers: SupplierService, supplier_id: int, product_id: int) -> Product:
    product = suppliers.get_entity_by_id(supplier_id, product_id)
    if product is None:
        raise NotFound(f"Product with id {product_id} not found for supplier with id {supplier_id}")
    return product


# ---------- SUPPLIERS ----------

@router.get("", response_model=List[SupplierModel], dependencies=read_access)
def list_suppliers(suppliers: SupplierService = Depends(get_supplier_service)):
    return suppliers.get_all()


@router.get("/{supplier_id}", response_model=SupplierModel, dependencies=read_access)
def get_supplier(supplier_id: int, suppliers: SupplierService = Depends(get_supplier_service)):
    return _get_supplier(suppliers, supplier_id)


@router.post(
    "",
    response_model=SupplierModel,
    status_code=status.HTTP_201_CREATED,
    dependencies=write_access,
)
def add_supplier(payload: SupplierModel, suppliers: SupplierService = Depends(get_supplier_service)):
    supplier = apply_fields(Supplier(), payload, exclude={"id", "location"})
    apply_location(supplier, payload.location)

    suppliers.add(supplier)
    if not suppliers.is_saved_to_db():
        raise PersistenceFailure("Unable to save supplier")
    return supplier


@router.put("/{supplier_id}", response_model=SupplierModel, dependencies=write_access)
def update_supplier(
    supplier_id: int,
    payload: SupplierModel,
    suppliers: SupplierService = Depends(get_supplier_service),
):
    supplier = _get_supplier(suppliers, supplier_id)

    apply_fields(supplier, payload, exclude={"id", "location"})
    apply_location(supplier, payload.location)

    suppliers.update(supplier)
    if not suppliers.is_saved_to_db():
        raise PersistenceFailure("Unable to update supplier")
    return supplier


@router.delete("/{supplier_id}", response_model=MessageOut, dependencies=write_access)
def delete_supplier(supplier_id: int, suppliers: SupplierService = Depends(get_supplier_service)):
    supplier = _get_supplier(suppliers, supplier_id)

    suppliers.delete(supplier)
    if not suppliers.is_saved_to_db():
        raise PersistenceFailure("Unable to delete supplier")
    return MessageOut(message=f"Supplier with id '{supplier_id}' has been deleted")


# ---------- PRODUCTS OF A SUPPLIER ----------

@router.get("/{supplier_id}/products", response_model=List[ProductModel], dependencies=read_access)
def list_products(supplier_id: int, suppliers: SupplierService = Depends(get_supplier_service)):
    _get_supplier(suppliers, supplier_id)
    return suppliers.get_all_entities(supplier_id)


@router.get(
    "/{supplier_id}/products/{product_id}",
    response_model=ProductModel,
    dependencies=read_access,
)
def get_product(
    supplier_id: int,
    product_id: int,
    suppliers: SupplierService = Depends(get_supplier_service),
):
    _get_supplier(suppliers, supplier_id)
    return _get_product(suppliers, supplier_id, product_id)


@router.post(
    "/{supplier_id}/products",
    response_model=ProductModel,
    status_code=status.HTTP_201_CREATED,
    dependencies=write_access,
)
def add_product(
    supplier_id: int,
    payload: ProductModel,
    suppliers: SupplierService = Depends(get_supplier_service),
):
    _get_supplier(suppliers, supplier_id)

    product = apply_fields(Product(), payload, exclude={"id", "supplier_id"})
    suppliers.add_entity(supplier_id, product)
    if not suppliers.is_saved_to_db():
        raise PersistenceFailure("Unable to save product")
    return product


@router.put(
    "/{supplier_id}/products/{product_id}",
    response_model=ProductModel,
    dependencies=write_access,
)
def update_product(
    supplier_id: int,
    product_id: int,
    payload: ProductModel,
    suppliers: SupplierService = Depends(get_supplier_service),
):
    _get_supplier(suppliers, supplier_id)
    product = _get_product(suppliers, supplier_id, product_id)

    apply_fields(product, payload, exclude={"id", "supplier_id"})
    suppliers.update_entity(supplier_id, product)
    if not suppliers.is_saved_to_db():
        raise PersistenceFailure("Unable to update product")
    return product


@router.delete(
    "/{supplier_id}/products/{product_id}",
    response_model=MessageOut,
    dependencies=write_access,
)
def delete_product(
    supplier_id: int,
    product_id: int,
    suppliers: SupplierService = Depends(get_supplier_service),
):
    _get_supplier(suppliers, supplier_id)
    product = _get_product(suppliers, supplier_id, product_id)

    suppliers.delete_entity(supplier_id, product)
    if not suppliers.is_saved_to_db():
        raise PersistenceFailure("Unable to detach product")
    return MessageOut(message=f"Product with id '{product_id}' has been removed from supplier '{supplier_id}'")
