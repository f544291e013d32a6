"""
Pytest fixtures for the Northwind backend tests.

Provides an isolated in-memory database per test, a small seeded catalog,
users for every role and a FastAPI test client wired to the same session.
"""

import os

# must be in place before northwind.core.config is first imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_SCHEMA", "false")

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

import northwind.models  # noqa: F401
from northwind.api.deps_auth import get_db
from northwind.core.config import Settings, get_settings
from northwind.core.database import Base, make_engine
from northwind.core.roles import Role
from northwind.core.security import create_access_token
from northwind.main import app
from northwind.models import Category, Customer, Location, Product, Shipper, Supplier, User
from northwind.services.user_service import UserService


@pytest.fixture(scope="function")
def settings():
    return Settings(
        DATABASE_URL="sqlite://",
        JWT_SECRET_KEY="test-secret",
        ACCESS_TOKEN_EXPIRE_MINUTES=15,
        AUTO_CREATE_SCHEMA=False,
        ADMIN_PASSWORD=None,
    )


@pytest.fixture(scope="function")
def engine():
    """Fresh in-memory SQLite database (FK enforcement on) for each test."""
    engine = make_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.rollback()
    session.close()


@pytest.fixture(scope="function")
def client(db_session, settings):
    """Test client sharing the test's session and settings."""

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


# ---------- USERS ----------

@pytest.fixture(scope="function")
def make_user(db_session):
    """Factory: make_user(username, password, role) -> persisted User."""

    def _make(username: str, password: str = "Password123!", role: Role = Role.CUSTOMER) -> User:
        users = UserService(db_session)
        user = User(username=username, role=role)
        users.add(user, password)
        assert users.is_saved_to_db()
        return user

    return _make


@pytest.fixture(scope="function")
def admin_user(make_user):
    return make_user("admin", "AdminPass1!", Role.ADMIN)


@pytest.fixture(scope="function")
def headers_for(settings):
    """Factory: bearer headers carrying the user's identifier and role claims."""

    def _headers(user: User) -> dict:
        token = create_access_token(user.user_identifier, user.role, settings=settings)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture(scope="function")
def admin_headers(admin_user, headers_for):
    return headers_for(admin_user)


@pytest.fixture(scope="function")
def customer_headers(make_user, headers_for):
    return headers_for(make_user("customer", role=Role.CUSTOMER))


@pytest.fixture(scope="function")
def supplier_headers(make_user, headers_for):
    return headers_for(make_user("supplier", role=Role.SUPPLIER))


@pytest.fixture(scope="function")
def supplier_admin_headers(make_user, headers_for):
    return headers_for(make_user("supplier_admin", role=Role.SUPPLIER_ADMIN))


# ---------- CATALOG ----------

@pytest.fixture(scope="function")
def category(db_session):
    category = Category(name="Beverages", description="Soft drinks, coffees, teas")
    db_session.add(category)
    db_session.commit()
    return category


@pytest.fixture(scope="function")
def supplier(db_session):
    supplier = Supplier(
        company_name="Exotic Liquids",
        contact_name="Charlotte Cooper",
        location=Location(address="49 Gilbert St.", city="London", country="UK"),
    )
    db_session.add(supplier)
    db_session.commit()
    return supplier


@pytest.fixture(scope="function")
def products(db_session, category, supplier):
    """Three active products priced 2.79, 2.79 and 3.95."""
    rows = [
        Product(name="Chai", unit_price=Decimal("2.79"), units_in_stock=50, category=category, supplier=supplier),
        Product(name="Chang", unit_price=Decimal("2.79"), units_in_stock=50, category=category, supplier=supplier),
        Product(name="Aniseed Syrup", unit_price=Decimal("3.95"), units_in_stock=50, category=category),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return rows


@pytest.fixture(scope="function")
def customer(db_session):
    customer = Customer(
        company_code="ALFKI",
        company_name="Alfreds Futterkiste",
        location=Location(address="Obere Str. 57", city="Berlin", country="Germany"),
    )
    db_session.add(customer)
    db_session.commit()
    return customer


@pytest.fixture(scope="function")
def shipper(db_session):
    shipper = Shipper(company_name="Speedy Express", phone="(503) 555-9831")
    db_session.add(shipper)
    db_session.commit()
    return shipper


@pytest.fixture(scope="function")
def required_date():
    return datetime.now(timezone.utc) + timedelta(days=7)
