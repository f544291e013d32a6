# backend/northwind/core/repository.py

import logging
from typing import Generic, Optional, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from northwind.models import Order, Product, User

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Session.info slot holding the entities passed to Repository.update()
UPDATED_KEY = "northwind.updated"


class Repository(Generic[T]):
    """
    Data access for one entity type.

    Every repository built on the same Session shares its change set:
    add/update/delete only stage work, commit() makes it durable.
    """

    def __init__(self, db: Session, model: type[T]):
        self.db = db
        self.model = model

    def find_all(self) -> Query:
        return self.db.query(self.model)

    def find_matching(self, *criteria) -> Query:
        return self.find_all().filter(*criteria)

    def get(self, entity_id) -> Optional[T]:
        return self.db.get(self.model, entity_id)

    def add(self, entity: T) -> None:
        self.db.add(entity)

    def update(self, entity: T) -> None:
        # attached instances are tracked already; this re-attaches detached ones
        self.db.add(entity)
        # an explicit update is a written row even when no value changed
        self.db.info.setdefault(UPDATED_KEY, set()).add(entity)

    def delete(self, entity: T) -> None:
        if entity is None:
            return
        if entity in self.db.new:
            self.db.expunge(entity)
            return
        self.db.delete(entity)

    def commit(self) -> bool:
        """True iff at least one pending row was written."""
        updated = self.db.info.pop(UPDATED_KEY, set())
        written = {obj for obj in self.db.dirty if self.db.is_modified(obj)}
        written.update(
            obj for obj in updated
            if obj in self.db and obj not in self.db.new and obj not in self.db.deleted
        )
        pending = len(self.db.new) + len(self.db.deleted) + len(written)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning("Commit rejected by a database constraint", exc_info=True)
            return False
        except Exception:
            self.db.rollback()
            raise
        return pending > 0


# ---------- QUERY HELPERS ----------

def products_of_category(products: Repository[Product], category_id: int) -> Query:
    return products.find_matching(Product.category_id == category_id)


def products_of_supplier(products: Repository[Product], supplier_id: int) -> Query:
    return products.find_matching(Product.supplier_id == supplier_id)


def orders_of_customer(orders: Repository[Order], customer_id: int) -> Query:
    return orders.find_matching(Order.customer_id == customer_id)


def orders_of_shipper(orders: Repository[Order], shipper_id: int) -> Query:
    return orders.find_matching(Order.shipper_id == shipper_id)


def user_by_username(users: Repository[User], username: str) -> Optional[User]:
    return users.find_matching(User.username == username).first()


def user_by_refresh_token(users: Repository[User], refresh_token: str) -> Optional[User]:
    if not refresh_token:
        return None
    return users.find_matching(User.refresh_token_value == refresh_token).first()


__all__ = [
    "Repository",
    "orders_of_customer",
    "orders_of_shipper",
    "products_of_category",
    "products_of_supplier",
    "user_by_refresh_token",
    "user_by_username",
]
