# catalog_gateway/db/orders.py
import logging

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.sql import func

from catalog_gateway.db.models import Order, OrderItem
from catalog_gateway.db.schemas import (
    OrderCreate, Order as OrderSchema, OrderDetail, OrderItem as OrderItemSchema,
)
from catalog_gateway.db.serialize import rows_to_models
from catalog_gateway.errors import InternalError, NotFound

logger = logging.getLogger(__name__)

LIST_LIMIT = 100


async def create_order(db: AsyncSession, order_data: OrderCreate) -> OrderDetail:
    """
    Insert the order row and all of its items in one transaction.

    Either every row is committed or none is. Rollback runs on every exit
    path and is a no-op once the commit went through.
    """
    try:
        new_order = Order(
            user_id=order_data.user_id,
            total_amount=order_data.total_amount,
            status=order_data.status,
            payment_method=order_data.payment_method,
            shipping_address=order_data.shipping_address,
        )
        db.add(new_order)
        await db.flush()
        await db.refresh(new_order, ["created_at", "updated_at"])

        order_items = []
        for item in order_data.items:
            order_item = OrderItem(
                order_id=new_order.id,
                product_id=item.product_id,
                quantity=item.quantity,
                price=item.price,
            )
            db.add(order_item)
            order_items.append(order_item)
        await db.flush()

        await db.commit()
    except SQLAlchemyError as e:
        logger.error("order creation rolled back: %s", e)
        raise InternalError(str(e))
    finally:
        await db.rollback()

    order = OrderSchema.model_validate(new_order)
    return OrderDetail(
        **order.model_dump(),
        items=[OrderItemSchema.model_validate(i) for i in order_items],
    )


async def get_all_orders(db: AsyncSession, limit: int = LIST_LIMIT):
    result = await db.execute(select(Order).limit(limit))
    return rows_to_models(result.scalars().all(), OrderSchema, "order")


async def get_order_with_items(db: AsyncSession, order_id: int) -> OrderDetail:
    result = await db.execute(select(Order).filter(Order.id == order_id))
    order = result.scalar_one_or_none()
    if not order:
        raise NotFound("Order not found")

    items_result = await db.execute(select(OrderItem).filter(OrderItem.order_id == order_id))
    items = rows_to_models(items_result.scalars().all(), OrderItemSchema, "order item")

    return OrderDetail(**OrderSchema.model_validate(order).model_dump(), items=items)


async def set_order_status(db: AsyncSession, order_id: int, status: str):
    # No transition rules, any status may follow any other
    result = await db.execute(
        update(Order)
        .where(Order.id == order_id)
        .values(status=status, updated_at=func.now())
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        raise NotFound("Order not found")
    await db.commit()


async def cancel_order(db: AsyncSession, order_id: int):
    await set_order_status(db, order_id, "cancelled")
