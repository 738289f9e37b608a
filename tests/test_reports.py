"""Tests for the read-only aggregations: summaries, details and dashboards."""

from datetime import datetime, timedelta

from fastapi.testclient import TestClient

from database import engine
from main import app
from models.product import Product


def test_summary_groups_sales_per_day(client, make_sale):
    make_sale(sale_time=datetime(2024, 1, 1, 10), total_amount=100, total_paid=100)
    make_sale(sale_time=datetime(2024, 1, 1, 15), total_amount=50, total_paid=20, payment_status="Half Paid")
    make_sale(sale_time=datetime(2024, 1, 2, 9), total_amount=30, total_paid=0, payment_status="Unpaid")

    summary = client.get("/api/sales/summary").json()
    assert summary == [
        {"date": "2024-01-02", "total_amount": 30, "total_paid": 0, "order_count": 1},
        {"date": "2024-01-01", "total_amount": 150, "total_paid": 120, "order_count": 2},
    ]


def test_summary_empty(client):
    assert client.get("/api/sales/summary").json() == []


def test_by_date_joins_customers(client, make_sale, make_customer):
    cid = make_customer(name="Mrs. Akter")
    morning = make_sale(sale_time=datetime(2024, 1, 1, 9), total_amount=10)
    evening = make_sale(sale_time=datetime(2024, 1, 1, 21), total_amount=20, customer_id=cid)
    make_sale(sale_time=datetime(2024, 1, 2, 0, 0), total_amount=30)
    make_sale(sale_time=datetime(2023, 12, 31, 23, 59), total_amount=40)

    sales = client.get("/api/sales/by-date/2024-01-01").json()
    assert [s["id"] for s in sales] == [evening, morning]
    assert sales[0]["customer"]["name"] == "Mrs. Akter"
    assert sales[1]["customer"] is None


def test_by_date_rejects_bad_date(client):
    resp = client.get("/api/sales/by-date/yesterday")
    assert resp.status_code == 400
    assert "yesterday" in resp.json()["message"]


def test_details_joins_items_products_and_customer(client, make_product, make_customer, make_sale):
    potato = make_product(name_en="Potato")
    onion = make_product(name_en="Onion", base_price=70)
    cid = make_customer(name="Mr. Rahim")
    sid = make_sale(
        total_amount=140, total_paid=0, payment_status="Unpaid", customer_id=cid,
        items=[(potato, 2, 35), (onion, 1, 70)],
    )

    details = client.get(f"/api/sales/details/{sid}").json()
    assert details["sale"]["id"] == sid
    assert details["customer"]["name"] == "Mr. Rahim"
    assert [i["product"]["name_en"] for i in details["items"]] == ["Potato", "Onion"]
    assert details["items"][0]["final_line_price"] == 70


def test_details_skip_lines_of_deleted_products(client, make_product, make_sale):
    potato = make_product(name_en="Potato")
    onion = make_product(name_en="Onion")
    sid = make_sale(total_amount=105, total_paid=105, items=[(potato, 1, 35), (onion, 1, 70)])

    client.delete(f"/api/products/{onion}")

    details = client.get(f"/api/sales/details/{sid}").json()
    assert [i["product_id"] for i in details["items"]] == [potato]
    assert details["customer"] is None


def test_details_bad_ids(client):
    assert client.get("/api/sales/details/zzz").status_code == 400
    assert client.get("/api/sales/details/3").status_code == 404


def test_owner_dashboard_totals_today_only(client, make_sale):
    now = datetime.now()
    make_sale(sale_time=now, total_amount=100, total_paid=100)
    make_sale(sale_time=now, total_amount=80, total_paid=30, payment_status="Half Paid")
    make_sale(sale_time=now - timedelta(days=1), total_amount=500, total_paid=0, payment_status="Unpaid")

    board = client.get("/api/dashboard/owner").json()
    assert len(board["today_sales"]) == 2
    assert board["total_cash_in"] == 130
    assert board["total_due"] == 50


def test_employee_dashboard(client, make_sale, make_customer):
    now = datetime.now()
    first = make_sale(sale_time=now - timedelta(seconds=5), total_amount=10, total_paid=10)
    second = make_sale(sale_time=now, total_amount=20, total_paid=20)
    make_sale(sale_time=now - timedelta(days=2), total_amount=30, total_paid=30)
    make_customer(name="Mr. Rahim", total_due=0)
    owing = make_customer(name="Mrs. Akter", total_due=150.5)

    board = client.get("/api/dashboard/employee").json()
    assert [s["id"] for s in board["today_sales"]] == [second, first]
    assert [c["id"] for c in board["unpaid_customers"]] == [owing]


def test_dashboard_reflects_checkout(client, make_product):
    pid = make_product()
    client.post("/api/sell", json={
        "cart": [{"_id": pid, "quantity": 2, "base_price": 35}], "paymentType": "due", "total": 70,
        "customer": {"name": "Mr. Karim"},
    })

    owner = client.get("/api/dashboard/owner").json()
    assert owner["total_cash_in"] == 0
    assert owner["total_due"] == 70

    employee = client.get("/api/dashboard/employee").json()
    assert [c["name"] for c in employee["unpaid_customers"]] == ["Mr. Karim"]


def test_theme(client):
    theme = client.get("/api/theme").json()
    assert theme["primary"] == "#8bd832"
    assert set(theme) == {"text", "background", "primary", "secondary", "accent"}


def test_root(client):
    assert client.get("/").json() == {"message": "Store management server is running"}


def test_logs_are_paginated_newest_first(client):
    for name in ("A", "B", "C"):
        client.post("/api/customers", json={"name": name})

    page = client.get("/api/logs", params={"page": 1, "page_size": 2}).json()
    assert page["total"] == 3
    assert len(page["items"]) == 2
    assert [e["meta"]["id"] for e in page["items"]] == [3, 2]


def test_unexpected_database_error_is_500_with_message():
    Product.__table__.drop(bind=engine)

    client = TestClient(app, raise_server_exceptions=False)
    resp = client.get("/api/products")
    assert resp.status_code == 500
    assert "products" in resp.json()["message"]


def test_owner_dashboard_sums_are_not_rounded(client, make_sale):
    make_sale(total_amount=0.004, total_paid=0.001, payment_status="Half Paid")

    board = client.get("/api/dashboard/owner").json()
    assert board["total_cash_in"] == 0.001
    assert board["total_due"] == 0.004 - 0.001
