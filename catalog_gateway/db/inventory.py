# catalog_gateway/db/inventory.py
import logging

from sqlalchemy import insert, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.sql import func

from catalog_gateway.db.models import Inventory
from catalog_gateway.db.schemas import InventoryUpdate, Inventory as InventorySchema
from catalog_gateway.db.serialize import rows_to_models
from catalog_gateway.errors import NotFound

logger = logging.getLogger(__name__)

LIST_LIMIT = 100


async def get_all_inventory(db: AsyncSession, limit: int = LIST_LIMIT):
    result = await db.execute(select(Inventory).limit(limit))
    return rows_to_models(result.scalars().all(), InventorySchema, "inventory")


async def get_inventory_by_product(db: AsyncSession, product_id: str) -> InventorySchema:
    result = await db.execute(select(Inventory).filter(Inventory.product_id == product_id))
    item = result.scalar_one_or_none()
    if not item:
        raise NotFound("Inventory not found")
    return InventorySchema.model_validate(item)


async def update_inventory(db: AsyncSession, product_id: str, data: InventoryUpdate):
    """Overwrite quantity and location; a product without a row gets one."""
    result = await db.execute(
        update(Inventory)
        .where(Inventory.product_id == product_id)
        .values(
            quantity=data.quantity,
            warehouse_location=data.warehouse_location,
            updated_at=func.now(),
        )
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        logger.debug("no inventory row for %s, inserting", product_id)
        await db.execute(
            insert(Inventory).values(
                product_id=product_id,
                quantity=data.quantity,
                warehouse_location=data.warehouse_location,
                last_restocked=func.now(),
            )
        )
    await db.commit()


async def restock_inventory(db: AsyncSession, product_id: str, quantity: int):
    # Restock never creates a row
    result = await db.execute(
        update(Inventory)
        .where(Inventory.product_id == product_id)
        .values(
            quantity=Inventory.quantity + quantity,
            last_restocked=func.now(),
            updated_at=func.now(),
        )
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        raise NotFound("Inventory not found")
    await db.commit()


async def get_low_stock_items(db: AsyncSession):
    result = await db.execute(
        select(Inventory).filter(Inventory.quantity <= Inventory.low_stock_threshold)
    )
    return rows_to_models(result.scalars().all(), InventorySchema, "inventory")
