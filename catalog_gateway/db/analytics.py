# catalog_gateway/db/analytics.py
import calendar
from datetime import date, timedelta
from typing import Optional

from sqlalchemy import desc, distinct
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.sql import func

from catalog_gateway.db.models import SalesAnalytics
from catalog_gateway.db.schemas import (
    SalesAnalytics as SalesAnalyticsSchema, PopularProduct, RevenueStats,
)
from catalog_gateway.db.serialize import rows_to_models

SALES_LIMIT = 1000
POPULAR_LIMIT = 20
REVENUE_WINDOW_DAYS = 30


def one_month_before(day: date) -> date:
    year, month = (day.year, day.month - 1) if day.month > 1 else (day.year - 1, 12)
    last_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last_day))


async def get_sales_analytics(
    db: AsyncSession,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
):
    today = date.today()
    if start_date is None:
        start_date = one_month_before(today)
    if end_date is None:
        end_date = today

    result = await db.execute(
        select(SalesAnalytics)
        .filter(SalesAnalytics.sale_date.between(start_date, end_date))
        .limit(SALES_LIMIT)
    )
    return rows_to_models(result.scalars().all(), SalesAnalyticsSchema, "sales analytics")


async def get_popular_products(db: AsyncSession):
    total_sold = func.sum(SalesAnalytics.quantity_sold).label("total_sold")
    result = await db.execute(
        select(
            SalesAnalytics.product_id,
            total_sold,
            func.sum(SalesAnalytics.revenue).label("total_revenue"),
        )
        .group_by(SalesAnalytics.product_id)
        .order_by(desc(total_sold))
        .limit(POPULAR_LIMIT)
    )
    return rows_to_models(result.all(), PopularProduct, "popular product")


async def get_revenue_stats(db: AsyncSession):
    since = date.today() - timedelta(days=REVENUE_WINDOW_DAYS)
    result = await db.execute(
        select(
            SalesAnalytics.sale_date,
            func.sum(SalesAnalytics.revenue).label("daily_revenue"),
            func.count(distinct(SalesAnalytics.product_id)).label("products_sold"),
        )
        .filter(SalesAnalytics.sale_date >= since)
        .group_by(SalesAnalytics.sale_date)
        .order_by(SalesAnalytics.sale_date.desc())
    )
    rows = [
        {
            "date": str(row.sale_date),
            "daily_revenue": row.daily_revenue,
            "products_sold": row.products_sold,
        }
        for row in result.all()
    ]
    return rows_to_models(rows, RevenueStats, "revenue")
