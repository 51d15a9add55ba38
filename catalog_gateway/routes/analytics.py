# catalog_gateway/routes/analytics.py
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_gateway.db import analytics as functions
from catalog_gateway.db.database import get_analytics_db
from catalog_gateway.db.schemas import SalesAnalytics, PopularProduct, RevenueStats

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("/sales", response_model=List[SalesAnalytics])
async def read_sales(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    db: AsyncSession = Depends(get_analytics_db),
):
    return await functions.get_sales_analytics(db, start_date, end_date)


@router.get("/popular-products", response_model=List[PopularProduct])
async def read_popular_products(db: AsyncSession = Depends(get_analytics_db)):
    return await functions.get_popular_products(db)


@router.get("/revenue", response_model=List[RevenueStats])
async def read_revenue(db: AsyncSession = Depends(get_analytics_db)):
    return await functions.get_revenue_stats(db)
