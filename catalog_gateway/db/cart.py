# catalog_gateway/db/cart.py
import logging

from sqlalchemy import delete, insert
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.sql import func

from catalog_gateway.db.models import CartItem
from catalog_gateway.db.schemas import CartItemCreate, CartItem as CartItemSchema
from catalog_gateway.db.serialize import rows_to_models
from catalog_gateway.errors import NotFound

logger = logging.getLogger(__name__)

LIST_LIMIT = 100

UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}

RETURNED_COLUMNS = (CartItem.id, CartItem.quantity, CartItem.created_at, CartItem.updated_at)


def _upsert_statement(dialect_name: str, user_id: int, item: CartItemCreate):
    dialect_insert = UPSERT_INSERTS.get(dialect_name, postgresql.insert)
    stmt = dialect_insert(CartItem).values(
        user_id=user_id, product_id=item.product_id, quantity=item.quantity
    )
    return stmt.on_conflict_do_update(
        index_elements=[CartItem.user_id, CartItem.product_id],
        set_={
            "quantity": CartItem.quantity + stmt.excluded.quantity,
            "updated_at": func.now(),
        },
    ).returning(*RETURNED_COLUMNS)


async def get_cart_items(db: AsyncSession, user_id: int, limit: int = LIST_LIMIT):
    result = await db.execute(select(CartItem).filter(CartItem.user_id == user_id).limit(limit))
    return rows_to_models(result.scalars().all(), CartItemSchema, "cart")


async def add_to_cart(db: AsyncSession, user_id: int, item: CartItemCreate) -> CartItemSchema:
    """
    Merge the quantity into the existing (user, product) row when the store has
    a unique constraint for the pair. Without one the upsert fails and a plain
    insert is issued, leaving a second row for the same pair.
    """
    stmt = _upsert_statement(db.get_bind().dialect.name, user_id, item)
    try:
        row = (await db.execute(stmt)).one()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.warning("cart upsert failed, inserting duplicate-tolerant row: %s", e)
        row = (await db.execute(
            insert(CartItem)
            .values(user_id=user_id, product_id=item.product_id, quantity=item.quantity)
            .returning(*RETURNED_COLUMNS)
        )).one()
    await db.commit()

    return CartItemSchema(
        id=row.id,
        user_id=user_id,
        product_id=item.product_id,
        quantity=row.quantity,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


async def remove_from_cart(db: AsyncSession, user_id: int, item_id: int):
    result = await db.execute(
        delete(CartItem).where(CartItem.id == item_id, CartItem.user_id == user_id)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        raise NotFound("Cart item not found")
    await db.commit()


async def clear_cart(db: AsyncSession, user_id: int):
    await db.execute(
        delete(CartItem)
        .where(CartItem.user_id == user_id)
        .execution_options(synchronize_session=False)
    )
    await db.commit()
