import logging
from datetime import datetime
from typing import Iterable, Optional

from sqlalchemy.orm import Session, joinedload

from northwind.core.repository import Repository, orders_of_customer
from northwind.models import Customer, Location, Order, Product
from northwind.services.ordering import LineItem, place_order, update_required_date

logger = logging.getLogger(__name__)


class CustomerService:
    def __init__(self, db: Session):
        self.customers = Repository(db, Customer)
        self.locations = Repository(db, Location)
        self.orders = Repository(db, Order)
        self.products = Repository(db, Product)

    def get_all(self) -> list[Customer]:
        logger.info("Retrieving all customers")
        return (
            self.customers.find_all()
            .options(joinedload(Customer.location))
            .order_by(Customer.id)
            .all()
        )

    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        logger.info("Retrieving customer with id: %s", customer_id)
        return (
            self.customers.find_matching(Customer.id == customer_id)
            .options(joinedload(Customer.location))
            .first()
        )

    def add(self, customer: Customer) -> None:
        logger.info("Adding a new customer: %s", customer.company_name)
        self.customers.add(customer)

    def update(self, customer: Customer) -> None:
        logger.info("Updating an existing customer: %s", customer.company_name)
        self.customers.update(customer)

    def delete(self, customer: Customer) -> None:
        logger.info("Deleting orders of customer: %s", customer.company_name)
        for order in orders_of_customer(self.orders, customer.id):
            self.orders.delete(order)

        logger.info("Deleting a customer: %s", customer.company_name)
        location = customer.location
        self.locations.delete(location)
        self.customers.delete(customer)

    def is_saved_to_db(self) -> bool:
        return self.customers.commit()

    # ---------- ORDERS OF A CUSTOMER ----------

    def get_all_entities(self, customer_id: int) -> list[Order]:
        logger.info("Retrieving orders of customer with id: %s", customer_id)
        return orders_of_customer(self.orders, customer_id).order_by(Order.id).all()

    def get_entity_by_id(self, customer_id: int, order_id: int) -> Optional[Order]:
        logger.info("Retrieving order with id %s of customer with id: %s", order_id, customer_id)
        return orders_of_customer(self.orders, customer_id).filter(Order.id == order_id).first()

    def add_entity(self, customer: Customer, order: Order, items: Iterable[LineItem]) -> Order:
        logger.info("Adding an order to customer with id: %s", customer.id)
        return place_order(customer, order, items, products=self.products, orders=self.orders)

    def update_entity(self, customer_id: int, order: Order, required_date: datetime) -> Order:
        logger.info("Updating order with id %s of customer with id: %s", order.id, customer_id)
        update_required_date(order, required_date)
        self.orders.update(order)
        return order

    def delete_entity(self, customer_id: int, order: Order) -> None:
        logger.info("Deleting order with id %s of customer with id: %s", order.id, customer_id)
        self.orders.delete(order)
