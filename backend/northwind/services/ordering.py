import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional

from northwind.core.errors import InvalidQuantity, MissingLocation, OrderImmutable, ProductsNotFound
from northwind.core.repository import Repository
from northwind.core.time_utils import utcnow
from northwind.models import Customer, Order, OrderDetail, Product

logger = logging.getLogger(__name__)


@dataclass
class LineItem:
    product_id: int
    quantity: int
    discount: Decimal = Decimal("0")


def validate_quantities(items: Iterable[LineItem]) -> None:
    for item in items:
        if item.quantity is None or item.quantity <= 0:
            raise InvalidQuantity(item.product_id, item.quantity)


def merge_line_items(items: Iterable[LineItem]) -> list[LineItem]:
    """One line per product: repeated product ids add up quantity and discount."""
    merged: dict[int, LineItem] = {}
    for item in items:
        line = merged.get(item.product_id)
        if line is None:
            merged[item.product_id] = LineItem(
                product_id=item.product_id,
                quantity=item.quantity,
                discount=Decimal(item.discount or 0),
            )
        else:
            line.quantity += item.quantity
            line.discount += Decimal(item.discount or 0)
    return list(merged.values())


def resolve_products(products: Repository[Product], items: list[LineItem]) -> dict[int, Product]:
    """
    Looks up every requested product. Unknown or discontinued ids are collected
    and reported together in a single ProductsNotFound.
    """
    requested_ids = [item.product_id for item in items]
    found = {
        p.id: p
        for p in products.find_matching(Product.id.in_(requested_ids), Product.discontinued == 0)
    }

    missing = [product_id for product_id in requested_ids if product_id not in found]
    if missing:
        raise ProductsNotFound(missing)
    return found


def build_detail(item: LineItem, product: Product) -> OrderDetail:
    # stock is not decremented here, only used as an upper bound
    stock = product.units_in_stock or 0
    quantity = min(item.quantity, stock)
    if quantity < item.quantity:
        logger.info(
            "Clamping quantity of product %s from %s to %s (units in stock)",
            product.id,
            item.quantity,
            quantity,
        )
    return OrderDetail(
        product_id=product.id,
        product=product,
        unit_price=Decimal(product.unit_price or 0),
        quantity=quantity,
        discount=Decimal(item.discount or 0),
    )


def compute_total(details: Iterable[OrderDetail]) -> Decimal:
    total = Decimal("0")
    for d in details:
        total += Decimal(d.quantity) * Decimal(d.unit_price) - Decimal(d.discount or 0)
    return total


def place_order(
    customer: Customer,
    order: Order,
    items: Iterable[LineItem],
    products: Repository[Product],
    orders: Repository[Order],
    now: Optional[datetime] = None,
) -> Order:
    """
    Validates and prices the requested line items and stages the order.
    Raises before anything is staged, so a failed placement leaves no trace.
    """
    items = list(items)
    validate_quantities(items)

    if customer.location_id is None and customer.location is None:
        raise MissingLocation(f"Customer with id {customer.id} has no location on file")

    lines = merge_line_items(items)
    found = resolve_products(products, lines)

    details = [build_detail(item, found[item.product_id]) for item in lines]

    order.customer = customer
    order.location = customer.location
    order.order_date = now or utcnow()
    order.details = details
    order.total = compute_total(details)

    logger.info(
        "Placing order for customer %s with %s item(s), total %s", customer.id, len(details), order.total
    )
    orders.add(order)
    return order


def update_required_date(order: Order, required_date: datetime) -> Order:
    if order.shipped_date is not None:
        raise OrderImmutable(
            "Order's required date cannot be updated as "
            f"it has already been scheduled to ship on {order.shipped_date}"
        )
    order.required_date = required_date
    return order
