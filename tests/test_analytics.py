from datetime import date, timedelta

import pytest
from sqlalchemy import insert

from catalog_gateway.db.analytics import one_month_before
from catalog_gateway.db.models import SalesAnalytics


@pytest.fixture
def sales(analytics_engine):
    today = date.today()
    rows = [
        {"product_id": "p1", "quantity_sold": 5, "revenue": 50.0, "sale_date": today},
        {"product_id": "p2", "quantity_sold": 9, "revenue": 45.0, "sale_date": today},
        {"product_id": "p1", "quantity_sold": 2, "revenue": 20.0, "sale_date": today - timedelta(days=1)},
        {"product_id": "p3", "quantity_sold": 1, "revenue": 99.0, "sale_date": today - timedelta(days=90)},
    ]
    with analytics_engine.begin() as conn:
        conn.execute(insert(SalesAnalytics.__table__), rows)
    return rows


def test_sales_default_range_is_last_month(client, sales):
    result = client.get("/api/analytics/sales").json()
    assert len(result) == 3
    assert "p3" not in {r["product_id"] for r in result}


def test_sales_explicit_range_is_inclusive(client, sales):
    day = (date.today() - timedelta(days=1)).isoformat()
    result = client.get(f"/api/analytics/sales?start_date={day}&end_date={day}").json()
    assert [(r["product_id"], r["quantity_sold"]) for r in result] == [("p1", 2)]


def test_sales_malformed_date_is_400(client):
    assert client.get("/api/analytics/sales?start_date=yesterday").status_code == 400


def test_popular_products_ordered_by_quantity(client, sales):
    result = client.get("/api/analytics/popular-products").json()
    assert [r["product_id"] for r in result] == ["p2", "p1", "p3"]
    assert result[1] == {"product_id": "p1", "total_sold": 7, "total_revenue": 70.0}


def test_revenue_groups_by_day_inside_window(client, sales):
    result = client.get("/api/analytics/revenue").json()
    today = date.today()
    assert result == [
        {"date": today.isoformat(), "daily_revenue": 95.0, "products_sold": 2},
        {"date": (today - timedelta(days=1)).isoformat(), "daily_revenue": 20.0, "products_sold": 1},
    ]


def test_one_month_before_clamps_to_month_end():
    assert one_month_before(date(2024, 3, 31)) == date(2024, 2, 29)
    assert one_month_before(date(2024, 1, 15)) == date(2023, 12, 15)


def test_sales_and_popular_products_are_capped(client, analytics_engine):
    today = date.today()
    rows = [
        {"product_id": f"p{n % 21}", "quantity_sold": 1, "revenue": 1.0, "sale_date": today}
        for n in range(1001)
    ]
    with analytics_engine.begin() as conn:
        conn.execute(insert(SalesAnalytics.__table__), rows)

    assert len(client.get("/api/analytics/sales").json()) == 1000
    assert len(client.get("/api/analytics/popular-products").json()) == 20
