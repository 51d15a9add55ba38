# catalog_gateway/routes/inventory.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_gateway.db import inventory as functions
from catalog_gateway.db.database import get_analytics_db
from catalog_gateway.db.schemas import Inventory, InventoryUpdate, RestockRequest, Message

router = APIRouter(prefix="/api/inventory", tags=["inventory"])


@router.get("", response_model=List[Inventory])
async def read_inventory(db: AsyncSession = Depends(get_analytics_db)):
    return await functions.get_all_inventory(db)


# Registered before /{product_id} so "low-stock" is not taken for a product id
@router.get("/low-stock", response_model=List[Inventory])
async def read_low_stock(db: AsyncSession = Depends(get_analytics_db)):
    return await functions.get_low_stock_items(db)


@router.get("/{product_id}", response_model=Inventory)
async def read_product_inventory(product_id: str, db: AsyncSession = Depends(get_analytics_db)):
    return await functions.get_inventory_by_product(db, product_id)


@router.put("/{product_id}", response_model=Message)
async def update_inventory(product_id: str, data: InventoryUpdate, db: AsyncSession = Depends(get_analytics_db)):
    await functions.update_inventory(db, product_id, data)
    return {"message": "Inventory updated successfully"}


@router.post("/{product_id}/restock", response_model=Message)
async def restock_inventory(product_id: str, data: RestockRequest, db: AsyncSession = Depends(get_analytics_db)):
    await functions.restock_inventory(db, product_id, data.quantity)
    return {"message": "Inventory restocked successfully"}
