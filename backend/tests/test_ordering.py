"""
Order placement: validation, clamping, batched lookups and totals.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from northwind.core.errors import (
    InvalidQuantity,
    MissingLocation,
    OrderImmutable,
    ProductsNotFound,
)
from northwind.models import Customer, Order, OrderDetail, Product
from northwind.services.customer_service import CustomerService
from northwind.services.ordering import (
    LineItem,
    compute_total,
    merge_line_items,
    update_required_date,
)


def place(db_session, customer, items, required_date):
    customers = CustomerService(db_session)
    order = customers.add_entity(customer, Order(required_date=required_date), items)
    assert customers.is_saved_to_db()
    return order


class TestTotals:
    def test_total_is_exact_sum(self, db_session, customer, products, required_date):
        chai, chang, syrup = products
        order = place(
            db_session,
            customer,
            [
                LineItem(product_id=chai.id, quantity=5),
                LineItem(product_id=chang.id, quantity=2),
                LineItem(product_id=syrup.id, quantity=3),
            ],
            required_date,
        )

        assert order.total == Decimal("31.38")
        assert [d.quantity for d in order.details] == [5, 2, 3]

    def test_discount_is_subtracted_per_line(self):
        details = [
            OrderDetail(product_id=1, unit_price=Decimal("2.79"), quantity=5, discount=Decimal("0.95")),
            OrderDetail(product_id=2, unit_price=Decimal("3.95"), quantity=3, discount=Decimal("0")),
        ]
        assert compute_total(details) == Decimal("24.85")

    def test_price_is_snapshotted(self, db_session, customer, products, required_date):
        chai = products[0]
        order = place(db_session, customer, [LineItem(product_id=chai.id, quantity=1)], required_date)

        chai.unit_price = Decimal("99.00")
        db_session.commit()

        db_session.refresh(order)
        assert order.details[0].unit_price == Decimal("2.79")
        assert order.total == Decimal("2.79")


class TestClamping:
    def test_quantity_clamped_to_stock(self, db_session, customer, products, required_date):
        chai = products[0]
        chai.units_in_stock = 3
        db_session.commit()

        order = place(db_session, customer, [LineItem(product_id=chai.id, quantity=10)], required_date)

        assert order.details[0].quantity == 3
        assert order.total == Decimal("8.37")

    def test_out_of_stock_product_keeps_an_empty_line(self, db_session, customer, products, required_date):
        chai, chang = products[0], products[1]
        chai.units_in_stock = 0
        db_session.commit()

        order = place(
            db_session,
            customer,
            [LineItem(product_id=chai.id, quantity=4), LineItem(product_id=chang.id, quantity=1)],
            required_date,
        )

        assert [(d.product_id, d.quantity) for d in order.details] == [(chai.id, 0), (chang.id, 1)]
        assert order.total == Decimal("2.79")

    def test_stock_is_not_decremented(self, db_session, customer, products, required_date):
        chai = products[0]
        place(db_session, customer, [LineItem(product_id=chai.id, quantity=10)], required_date)

        db_session.refresh(chai)
        assert chai.units_in_stock == 50


class TestValidation:
    def test_unknown_products_reported_together(self, db_session, customer, category, required_date):
        only = Product(name="Chai", unit_price=Decimal("2.79"), units_in_stock=10, category=category)
        db_session.add(only)
        db_session.commit()

        missing = [only.id + 1, only.id + 2]
        items = [LineItem(product_id=only.id, quantity=1)] + [LineItem(product_id=i, quantity=1) for i in missing]

        with pytest.raises(ProductsNotFound) as exc:
            CustomerService(db_session).add_entity(customer, Order(required_date=required_date), items)

        assert exc.value.product_ids == missing
        assert f"[{missing[0]},{missing[1]}]" in exc.value.message

    def test_discontinued_product_is_not_found(self, db_session, customer, products, required_date):
        chai = products[0]
        chai.discontinued = 1
        db_session.commit()

        with pytest.raises(ProductsNotFound) as exc:
            CustomerService(db_session).add_entity(
                customer, Order(required_date=required_date), [LineItem(product_id=chai.id, quantity=1)]
            )
        assert exc.value.product_ids == [chai.id]

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity(self, db_session, customer, products, required_date, quantity):
        with pytest.raises(InvalidQuantity):
            CustomerService(db_session).add_entity(
                customer,
                Order(required_date=required_date),
                [LineItem(product_id=products[0].id, quantity=quantity)],
            )

    def test_failed_placement_leaves_no_order(self, db_session, customer, products, required_date):
        customers = CustomerService(db_session)
        with pytest.raises(ProductsNotFound):
            customers.add_entity(
                customer,
                Order(required_date=required_date),
                [LineItem(product_id=products[0].id, quantity=1), LineItem(product_id=999, quantity=1)],
            )

        assert not customers.is_saved_to_db()
        assert db_session.query(Order).count() == 0

    def test_customer_without_location(self, db_session, products, required_date):
        nomad = Customer(company_name="No Fixed Abode")
        db_session.add(nomad)
        db_session.commit()

        with pytest.raises(MissingLocation):
            CustomerService(db_session).add_entity(
                nomad, Order(required_date=required_date), [LineItem(product_id=products[0].id, quantity=1)]
            )

    def test_repeated_product_lines_are_merged(self):
        merged = merge_line_items(
            [LineItem(product_id=1, quantity=2), LineItem(product_id=2, quantity=1), LineItem(product_id=1, quantity=3)]
        )
        assert [(m.product_id, m.quantity) for m in merged] == [(1, 5), (2, 1)]


class TestRequiredDate:
    def test_unshipped_order_can_move(self, required_date):
        order = Order(required_date=required_date)
        later = required_date + timedelta(days=3)
        update_required_date(order, later)
        assert order.required_date == later

    def test_shipped_order_is_immutable(self, required_date):
        order = Order(required_date=required_date, shipped_date=datetime.now(timezone.utc))

        with pytest.raises(OrderImmutable):
            update_required_date(order, required_date + timedelta(days=3))
        assert order.required_date == required_date
