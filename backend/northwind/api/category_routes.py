# backend/northwind/api/category_routes.py

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from northwind.api.deps_auth import get_current_principal, get_db
from northwind.api.schemas import CategoryModel, MessageOut, ProductModel, apply_fields
from northwind.core.errors import AlreadyExists, NotFound, PersistenceFailure
from northwind.models import Category, Product
from northwind.services.category_service import CategoryService

# any authenticated principal can manage the catalog
router = APIRouter(dependencies=[Depends(get_current_principal)])


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    return CategoryService(db)


def _get_category(categories: CategoryService, category_id: int) -> Category:
    category = categories.get_by_id(category_id)
    if category is None:
        raise NotFound(f"Category with id {category_id} not found")
    return category


def _get_product(categories: CategoryService, category_id: int, product_id: int) -> Product:
    product = categories.get_entity_by_id(category_id, product_id)
    if product is None:
        raise NotFound(f"Product with id {product_id} not found in category with id {category_id}")
    return product


# ---------- CATEGORIES ----------

@router.get("", response_model=List[CategoryModel])
def list_categories(categories: CategoryService = Depends(get_category_service)):
    return categories.get_all()


@router.get("/{category_id}", response_model=CategoryModel)
def get_category(category_id: int, categories: CategoryService = Depends(get_category_service)):
    return _get_category(categories, category_id)


@router.post("", response_model=CategoryModel, status_code=status.HTTP_201_CREATED)
def add_category(payload: CategoryModel, categories: CategoryService = Depends(get_category_service)):
    if categories.get_by_name(payload.name) is not None:
        raise AlreadyExists(f"Category with name {payload.name} already exists")

    category = apply_fields(Category(), payload, exclude={"id"})
    categories.add(category)
    if not categories.is_saved_to_db():
        raise PersistenceFailure("Unable to save category")
    return category


@router.put("/{category_id}", response_model=CategoryModel)
def update_category(
    category_id: int,
    payload: CategoryModel,
    categories: CategoryService = Depends(get_category_service),
):
    category = _get_category(categories, category_id)

    existing = categories.get_by_name(payload.name)
    if existing is not None and existing.id != category.id:
        raise AlreadyExists(f"Category with name {payload.name} already exists")

    apply_fields(category, payload, exclude={"id"})
    categories.update(category)
    if not categories.is_saved_to_db():
        raise PersistenceFailure("Unable to update category")
    return category


@router.delete("/{category_id}", response_model=MessageOut)
def delete_category(category_id: int, categories: CategoryService = Depends(get_category_service)):
    category = _get_category(categories, category_id)

    categories.delete(category)
    if not categories.is_saved_to_db():
        raise PersistenceFailure("Unable to delete category")
    return MessageOut(message=f"Category with id '{category_id}' has been deleted")


# ---------- PRODUCTS OF A CATEGORY ----------

@router.get("/{category_id}/products", response_model=List[ProductModel])
def list_products(category_id: int, categories: CategoryService = Depends(get_category_service)):
    _get_category(categories, category_id)
    return categories.get_all_entities(category_id)


@router.get("/{category_id}/products/{product_id}", response_model=ProductModel)
def get_product(
    category_id: int,
    product_id: int,
    categories: CategoryService = Depends(get_category_service),
):
    _get_category(categories, category_id)
    return _get_product(categories, category_id, product_id)


@router.post(
    "/{category_id}/products",
    response_model=ProductModel,
    status_code=status.HTTP_201_CREATED,
)
def add_product(
    category_id: int,
    payload: ProductModel,
    categories: CategoryService = Depends(get_category_service),
):
    _get_category(categories, category_id)

    product = apply_fields(Product(), payload, exclude={"id", "category_id"})
    categories.add_entity(category_id, product)
    if not categories.is_saved_to_db():
        raise PersistenceFailure("Unable to save product")
    return product


@router.put("/{category_id}/products/{product_id}", response_model=ProductModel)
def update_product(
    category_id: int,
    product_id: int,
    payload: ProductModel,
    categories: CategoryService = Depends(get_category_service),
):
    _get_category(categories, category_id)
    product = _get_product(categories, category_id, product_id)

    apply_fields(product, payload, exclude={"id", "category_id"})
    categories.update_entity(category_id, product)
    if not categories.is_saved_to_db():
        raise PersistenceFailure("Unable to update product")
    return product


@router.delete("/{category_id}/products/{product_id}", response_model=MessageOut)
def delete_product(
    category_id: int,
    product_id: int,
    categories: CategoryService = Depends(get_category_service),
):
    _get_category(categories, category_id)
    product = _get_product(categories, category_id, product_id)

    categories.delete_entity(category_id, product)
    if not categories.is_saved_to_db():
        raise PersistenceFailure("Unable to detach product")
    return MessageOut(message=f"Product with id '{product_id}' has been removed from category '{category_id}'")
