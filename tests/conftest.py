"""
Pytest configuration and fixtures for the API tests.

The application is pointed at an in-memory SQLite database before it is
imported; every test starts from freshly created, empty tables.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_SAMPLE_DATA"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from database import Base, engine, SessionLocal
from main import app
from models.product import Product
from models.customer import Customer
from models.sale import Sale, SaleItem


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    # Enforce foreign keys the way Postgres does
    with engine.connect() as conn:
        conn.exec_driver_sql("PRAGMA foreign_keys=ON")
    yield


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_product():
    """Insert a product directly and return its id."""

    def _make(**overrides):
        data = {
            "name_en": "Potato",
            "name_bn": "আলু",
            "is_packed": False,
            "unit_type": "KG",
            "base_price": 35,
            "stock_quantity": 100,
        }
        data.update(overrides)
        with SessionLocal() as db:
            product = Product(**data)
            db.add(product)
            db.commit()
            return product.id

    return _make


@pytest.fixture
def make_customer():
    """Insert a customer directly and return its id."""

    def _make(name="Mr. Rahim", phone="01700000001", total_due=0):
        with SessionLocal() as db:
            customer = Customer(name=name, phone=phone, total_due=total_due)
            db.add(customer)
            db.commit()
            return customer.id

    return _make


@pytest.fixture
def make_sale():
    """
    Insert a sale with a chosen timestamp, bypassing the checkout flow.
    `items` is a list of (product_id, quantity, unit_price) tuples.
    """

    def _make(sale_time=None, total_amount=0, total_paid=0, payment_status="Paid", customer_id=None, items=()):
        with SessionLocal() as db:
            sale = Sale(
                sale_time=sale_time or datetime.now(),
                total_amount=total_amount,
                total_paid=total_paid,
                payment_status=payment_status,
                customer_id=customer_id,
            )
            db.add(sale)
            db.flush()
            for product_id, quantity, unit_price in items:
                db.add(SaleItem(
                    sale_id=sale.id, product_id=product_id, quantity_sold=quantity, unit="KG",
                    unit_price_at_sale=unit_price, final_line_price=quantity * unit_price,
                ))
            db.commit()
            return sale.id

    return _make


@pytest.fixture
def stock_of(client):
    def _stock(product_id):
        return client.get(f"/api/products/{product_id}").json()["stock_quantity"]

    return _stock


@pytest.fixture
def due_of(client):
    def _due(customer_id):
        return client.get(f"/api/customers/{customer_id}").json()["total_due"]

    return _due
