"""
Cross-entity rules on delete: detach, cascade and shipper detachment.
"""

from datetime import datetime, timezone

from northwind.models import Category, Customer, Location, Order, OrderDetail, Product, Shipper, Supplier
from northwind.services.category_service import CategoryService
from northwind.services.customer_service import CustomerService
from northwind.services.ordering import LineItem
from northwind.services.shipper_service import ShipperService
from northwind.services.supplier_service import SupplierService


def place_order(db_session, customer, products, required_date):
    customers = CustomerService(db_session)
    order = customers.add_entity(
        customer,
        Order(required_date=required_date),
        [LineItem(product_id=p.id, quantity=1) for p in products],
    )
    assert customers.is_saved_to_db()
    return order


class TestCategoryDelete:
    def test_products_are_detached_not_deleted(self, db_session, category, products):
        product_ids = [p.id for p in products]
        categories = CategoryService(db_session)

        categories.delete(category)
        assert categories.is_saved_to_db()

        assert db_session.get(Category, category.id) is None
        for product_id in product_ids:
            product = db_session.get(Product, product_id)
            assert product is not None
            assert product.category_id is None

    def test_detach_single_product(self, db_session, category, products):
        categories = CategoryService(db_session)
        chai = products[0]

        categories.delete_entity(category.id, chai)
        assert categories.is_saved_to_db()

        assert db_session.get(Product, chai.id).category_id is None
        assert [p.id for p in categories.get_all_entities(category.id)] == [p.id for p in products[1:]]


class TestSupplierDelete:
    def test_products_detached_and_location_removed(self, db_session, supplier, products):
        location_id = supplier.location_id
        supplied = [p.id for p in products if p.supplier_id == supplier.id]
        assert supplied

        suppliers = SupplierService(db_session)
        suppliers.delete(supplier)
        assert suppliers.is_saved_to_db()

        assert db_session.get(Supplier, supplier.id) is None
        assert db_session.get(Location, location_id) is None
        for product_id in supplied:
            product = db_session.get(Product, product_id)
            assert product is not None
            assert product.supplier_id is None


class TestCustomerDelete:
    def test_orders_and_location_are_deleted(self, db_session, customer, products, required_date):
        first = place_order(db_session, customer, products[:2], required_date)
        second = place_order(db_session, customer, products[2:], required_date)
        order_ids = [first.id, second.id]
        location_id = customer.location_id

        customers = CustomerService(db_session)
        customers.delete(customer)
        assert customers.is_saved_to_db()

        assert db_session.get(Customer, customer.id) is None
        assert db_session.get(Location, location_id) is None
        for order_id in order_ids:
            assert db_session.get(Order, order_id) is None
        assert db_session.query(OrderDetail).count() == 0
        # the catalog is untouched
        assert db_session.query(Product).count() == len(products)

    def test_delete_single_order(self, db_session, customer, products, required_date):
        order = place_order(db_session, customer, products, required_date)
        customers = CustomerService(db_session)

        customers.delete_entity(customer.id, order)
        assert customers.is_saved_to_db()

        assert customers.get_all_entities(customer.id) == []
        assert db_session.get(Customer, customer.id) is not None


class TestShipperDetach:
    def ship(self, db_session, shipper, order):
        shippers = ShipperService(db_session)
        shippers.update_entity(shipper.id, order, datetime.now(timezone.utc), "Alfreds Futterkiste")
        assert shippers.is_saved_to_db()
        return shippers

    def test_attach_sets_all_three_fields(self, db_session, shipper, customer, products, required_date):
        order = place_order(db_session, customer, products, required_date)
        self.ship(db_session, shipper, order)

        assert order.shipper_id == shipper.id
        assert order.shipped_date is not None
        assert order.ship_name == "Alfreds Futterkiste"

    def test_explicit_detach_clears_all_three_fields(self, db_session, shipper, customer, products, required_date):
        order = place_order(db_session, customer, products, required_date)
        shippers = self.ship(db_session, shipper, order)

        shippers.delete_entity(shipper.id, order)
        assert shippers.is_saved_to_db()

        assert (order.shipper_id, order.shipped_date, order.ship_name) == (None, None, None)

    def test_shipper_delete_detaches_its_orders(self, db_session, shipper, customer, products, required_date):
        order = place_order(db_session, customer, products, required_date)
        shippers = self.ship(db_session, shipper, order)

        shippers.delete(shipper)
        assert shippers.is_saved_to_db()

        assert db_session.get(Shipper, shipper.id) is None
        kept = db_session.get(Order, order.id)
        assert kept is not None
        assert (kept.shipper_id, kept.shipped_date, kept.ship_name) == (None, None, None)
