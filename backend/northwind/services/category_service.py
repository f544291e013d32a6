import logging
from typing import Optional

from sqlalchemy.orm import Session

from northwind.core.repository import Repository, products_of_category
from northwind.models import Category, Product

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, db: Session):
        self.categories = Repository(db, Category)
        self.products = Repository(db, Product)

    def get_all(self) -> list[Category]:
        logger.info("Retrieving all categories")
        return self.categories.find_all().order_by(Category.id).all()

    def get_by_id(self, category_id: int) -> Optional[Category]:
        logger.info("Retrieving category with id: %s", category_id)
        return self.categories.get(category_id)

    def get_by_name(self, name: str) -> Optional[Category]:
        logger.info("Retrieving category with name: %s", name)
        return self.categories.find_matching(Category.name == name).first()

    def add(self, category: Category) -> None:
        logger.info("Adding a new category: %s", category.name)
        self.categories.add(category)

    def update(self, category: Category) -> None:
        logger.info("Updating an existing category: %s", category.name)
        self.categories.update(category)

    def delete(self, category: Category) -> None:
        logger.info("Detach products from category: %s", category.name)

        for product in products_of_category(self.products, category.id):
            product.category_id = None

        # detachments must be durable before the FK parent disappears
        self.products.commit()

        logger.info("Deleting a category: %s", category.name)
        self.categories.delete(category)

    def is_saved_to_db(self) -> bool:
        return self.categories.commit()

    # ---------- PRODUCTS OF A CATEGORY ----------

    def get_all_entities(self, category_id: int) -> list[Product]:
        logger.info("Retrieving products of category with id: %s", category_id)
        return products_of_category(self.products, category_id).order_by(Product.id).all()

    def get_entity_by_id(self, category_id: int, product_id: int) -> Optional[Product]:
        logger.info("Retrieving product with id %s of category with id: %s", product_id, category_id)
        return products_of_category(self.products, category_id).filter(Product.id == product_id).first()

    def add_entity(self, category_id: int, product: Product) -> None:
        logger.info("Adding product %s to category with id: %s", product.name, category_id)
        product.category_id = category_id
        self.products.add(product)

    def update_entity(self, category_id: int, product: Product) -> None:
        logger.info("Updating product %s of category with id: %s", product.name, category_id)
        product.category_id = category_id
        self.products.update(product)

    def delete_entity(self, category_id: int, product: Product) -> None:
        # the product stays in the catalog, only the link goes
        logger.info("Detaching product with id %s from category with id: %s", product.id, category_id)
        product.category_id = None
        self.products.update(product)
