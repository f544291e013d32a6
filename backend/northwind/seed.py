# backend/northwind/seed.py
#
# Demo catalog for local development:
#   cd backend && python -m northwind.seed

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

import northwind.models  # noqa: F401
from northwind.core.config import get_settings
from northwind.core.database import Base, SessionLocal, engine
from northwind.core.logging import setup_logging
from northwind.core.seed import seed_admin_if_empty
from northwind.models import Category, Customer, Location, Product, Shipper, Supplier

logger = logging.getLogger(__name__)


def build_catalog() -> list:
    beverages = Category(name="Beverages", description="Soft drinks, coffees, teas, beers, and ales")
    condiments = Category(name="Condiments", description="Sweet and savory sauces, relishes, spreads")
    seafood = Category(name="Seafood", description="Seaweed and fish")

    exotic = Supplier(
        company_name="Exotic Liquids",
        contact_name="Charlotte Cooper",
        contact_title="Purchasing Manager",
        location=Location(
            address="49 Gilbert St.",
            city="London",
            postal_code="EC1 4SD",
            country="UK",
            phone="(171) 555-2222",
        ),
    )
    new_orleans = Supplier(
        company_name="New Orleans Cajun Delights",
        contact_name="Shelley Burke",
        contact_title="Order Administrator",
        location=Location(
            address="P.O. Box 78934",
            city="New Orleans",
            region="LA",
            postal_code="70117",
            country="USA",
            phone="(100) 555-4822",
        ),
    )

    products = [
        Product(
            name="Chai",
            quantity_per_unit="10 boxes x 20 bags",
            unit_price=Decimal("18.00"),
            units_in_stock=39,
            reorder_level=10,
            category=beverages,
            supplier=exotic,
        ),
        Product(
            name="Chang",
            quantity_per_unit="24 - 12 oz bottles",
            unit_price=Decimal("19.00"),
            units_in_stock=17,
            units_on_order=40,
            reorder_level=25,
            category=beverages,
            supplier=exotic,
        ),
        Product(
            name="Aniseed Syrup",
            quantity_per_unit="12 - 550 ml bottles",
            unit_price=Decimal("10.00"),
            units_in_stock=13,
            units_on_order=70,
            reorder_level=25,
            category=condiments,
            supplier=exotic,
        ),
        Product(
            name="Chef Anton's Gumbo Mix",
            quantity_per_unit="36 boxes",
            unit_price=Decimal("21.35"),
            units_in_stock=0,
            discontinued=1,
            category=condiments,
            supplier=new_orleans,
        ),
        Product(
            name="Boston Crab Meat",
            quantity_per_unit="24 - 4 oz tins",
            unit_price=Decimal("18.40"),
            units_in_stock=123,
            reorder_level=30,
            category=seafood,
        ),
    ]

    customers = [
        Customer(
            company_code="ALFKI",
            company_name="Alfreds Futterkiste",
            contact_name="Maria Anders",
            contact_title="Sales Representative",
            location=Location(
                address="Obere Str. 57",
                city="Berlin",
                postal_code="12209",
                country="Germany",
                phone="030-0074321",
                fax="030-0076545",
            ),
        ),
        Customer(
            company_code="ANATR",
            company_name="Ana Trujillo Emparedados",
            contact_name="Ana Trujillo",
            contact_title="Owner",
            location=Location(
                address="Avda. de la Constitucion 2222",
                city="Mexico D.F.",
                postal_code="05021",
                country="Mexico",
                phone="(5) 555-4729",
            ),
        ),
    ]

    shippers = [
        Shipper(company_name="Speedy Express", phone="(503) 555-9831"),
        Shipper(company_name="United Package", phone="(503) 555-3199"),
        Shipper(company_name="Federal Shipping", phone="(503) 555-9931"),
    ]

    return [beverages, condiments, seafood, exotic, new_orleans, *products, *customers, *shippers]


def seed_catalog(db: Session) -> int:
    if db.query(Category).count() > 0:
        logger.info("Catalog already seeded, skipping")
        return 0

    rows = build_catalog()
    db.add_all(rows)
    db.commit()
    logger.info("Seeded %s catalog rows", len(rows))
    return len(rows)


def main() -> None:
    settings = get_settings()
    setup_logging(settings)

    # make sure tables exist
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        seed_catalog(db)
        seed_admin_if_empty(db, settings)
    finally:
        db.close()

    logger.info("Database seeded")


if __name__ == "__main__":
    main()
