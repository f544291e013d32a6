import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from northwind.core.repository import Repository, orders_of_shipper
from northwind.models import Order, Shipper

logger = logging.getLogger(__name__)


def attach_order(order: Order, shipper_id: int, shipped_date: datetime, ship_name: Optional[str]) -> Order:
    order.shipper_id = shipper_id
    order.shipped_date = shipped_date
    order.ship_name = ship_name
    return order


def detach_order(order: Order) -> Order:
    # an order without a shipper is an unshipped order: all three go together
    order.shipper_id = None
    order.shipped_date = None
    order.ship_name = None
    return order


class ShipperService:
    def __init__(self, db: Session):
        self.shippers = Repository(db, Shipper)
        self.orders = Repository(db, Order)

    def get_all(self) -> list[Shipper]:
        logger.info("Retrieving all shippers")
        return self.shippers.find_all().order_by(Shipper.id).all()

    def get_by_id(self, shipper_id: int) -> Optional[Shipper]:
        logger.info("Retrieving shipper with id: %s", shipper_id)
        return self.shippers.get(shipper_id)

    def add(self, shipper: Shipper) -> None:
        logger.info("Adding a new shipper: %s", shipper.company_name)
        self.shippers.add(shipper)

    def update(self, shipper: Shipper) -> None:
        logger.info("Updating an existing shipper: %s", shipper.company_name)
        self.shippers.update(shipper)

    def delete(self, shipper: Shipper) -> None:
        logger.info("Detach orders from shipper: %s", shipper.company_name)
        for order in orders_of_shipper(self.orders, shipper.id):
            detach_order(order)
            self.orders.update(order)

        logger.info("Deleting a shipper: %s", shipper.company_name)
        self.shippers.delete(shipper)

    def is_saved_to_db(self) -> bool:
        return self.shippers.commit()

    # ---------- ORDERS OF A SHIPPER ----------

    def get_all_entities(self, shipper_id: int) -> list[Order]:
        logger.info("Retrieving orders of shipper with id: %s", shipper_id)
        return orders_of_shipper(self.orders, shipper_id).order_by(Order.id).all()

    def get_entity_by_id(self, shipper_id: int, order_id: int) -> Optional[Order]:
        logger.info("Retrieving order with id %s of shipper with id: %s", order_id, shipper_id)
        return orders_of_shipper(self.orders, shipper_id).filter(Order.id == order_id).first()

    def get_order_by_id(self, order_id: int) -> Optional[Order]:
        logger.info("Retrieving order with id: %s", order_id)
        return self.orders.get(order_id)

    def update_entity(
        self,
        shipper_id: int,
        order: Order,
        shipped_date: datetime,
        ship_name: Optional[str] = None,
    ) -> Order:
        logger.info("Attaching order with id %s to shipper with id: %s", order.id, shipper_id)
        attach_order(order, shipper_id, shipped_date, ship_name)
        self.orders.update(order)
        return order

    def delete_entity(self, shipper_id: int, order: Order) -> None:
        logger.info("Detaching order with id %s from shipper with id: %s", order.id, shipper_id)
        detach_order(order)
        self.orders.update(order)
