import logging
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from northwind.core.repository import Repository, products_of_supplier
from northwind.models import Location, Product, Supplier

logger = logging.getLogger(__name__)


class SupplierService:
    def __init__(self, db: Session):
        self.suppliers = Repository(db, Supplier)
        self.locations = Repository(db, Location)
        self.products = Repository(db, Product)

    def get_all(self) -> list[Supplier]:
        logger.info("Retrieving all suppliers")
        # one location per supplier, so it always travels with it
        return (
            self.suppliers.find_all()
            .options(joinedload(Supplier.location))
            .order_by(Supplier.id)
            .all()
        )

    def get_by_id(self, supplier_id: int) -> Optional[Supplier]:
        logger.info("Retrieving supplier with id: %s", supplier_id)
        return (
            self.suppliers.find_matching(Supplier.id == supplier_id)
            .options(joinedload(Supplier.location))
            .first()
        )

    def add(self, supplier: Supplier) -> None:
        logger.info("Adding a new supplier: %s", supplier.company_name)
        self.suppliers.add(supplier)

    def update(self, supplier: Supplier) -> None:
        logger.info("Updating an existing supplier: %s", supplier.company_name)
        self.suppliers.update(supplier)

    def delete(self, supplier: Supplier) -> None:
        logger.info("Detach products from supplier: %s", supplier.company_name)

        for product in products_of_supplier(self.products, supplier.id):
            product.supplier_id = None

        self.products.commit()

        logger.info("Deleting a supplier: %s", supplier.company_name)
        location = supplier.location
        self.suppliers.delete(supplier)
        self.locations.delete(location)

    def is_saved_to_db(self) -> bool:
        return self.suppliers.commit()

    # ---------- PRODUCTS OF A SUPPLIER ----------

    def get_all_entities(self, supplier_id: int) -> list[Product]:
        logger.info("Retrieving products of supplier with id: %s", supplier_id)
        return products_of_supplier(self.products, supplier_id).order_by(Product.id).all()

    def get_entity_by_id(self, supplier_id: int, product_id: int) -> Optional[Product]:
        logger.info("Retrieving product with id %s of supplier with id: %s", product_id, supplier_id)
        return products_of_supplier(self.products, supplier_id).filter(Product.id == product_id).first()

    def add_entity(self, supplier_id: int, product: Product) -> None:
        logger.info("Adding product %s to supplier with id: %s", product.name, supplier_id)
        product.supplier_id = supplier_id
        self.products.add(product)

    def update_entity(self, supplier_id: int, product: Product) -> None:
        logger.info("Updating product %s of supplier with id: %s", product.name, supplier_id)
        product.supplier_id = supplier_id
        self.products.update(product)

    def delete_entity(self, supplier_id: int, product: Product) -> None:
        logger.info("Detaching product with id %s from supplier with id: %s", product.id, supplier_id)
        product.supplier_id = None
        self.products.update(product)
