# catalog_gateway/routes/orders.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_gateway.db import orders as functions
from catalog_gateway.db.database import get_orders_db
from catalog_gateway.db.schemas import Order, OrderCreate, OrderDetail, OrderStatusUpdate, Message

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post("", response_model=OrderDetail, status_code=201)
async def create_order(order: OrderCreate, db: AsyncSession = Depends(get_orders_db)):
    return await functions.create_order(db, order)


@router.get("", response_model=List[Order])
async def read_orders(db: AsyncSession = Depends(get_orders_db)):
    return await functions.get_all_orders(db)


@router.get("/{order_id}", response_model=OrderDetail)
async def read_order(order_id: int, db: AsyncSession = Depends(get_orders_db)):
    return await functions.get_order_with_items(db, order_id)


@router.patch("/{order_id}/status", response_model=Message)
async def update_order_status(order_id: int, body: OrderStatusUpdate, db: AsyncSession = Depends(get_orders_db)):
    await functions.set_order_status(db, order_id, body.status)
    return {"message": "Order status updated successfully"}


@router.post("/{order_id}/cancel", response_model=Message)
async def cancel_order(order_id: int, db: AsyncSession = Depends(get_orders_db)):
    await functions.cancel_order(db, order_id)
    return {"message": "Order cancelled successfully"}
