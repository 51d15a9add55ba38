# catalog_gateway/routes/cart.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_gateway.db import cart as functions
from catalog_gateway.db.database import get_orders_db
from catalog_gateway.db.schemas import CartItem, CartItemCreate, Message

router = APIRouter(prefix="/api/cart", tags=["cart"])


@router.get("/{user_id}", response_model=List[CartItem])
async def get_cart(user_id: int, db: AsyncSession = Depends(get_orders_db)):
    return await functions.get_cart_items(db, user_id)


@router.post("/{user_id}/items", response_model=CartItem, status_code=201)
async def add_to_cart(user_id: int, item: CartItemCreate, db: AsyncSession = Depends(get_orders_db)):
    return await functions.add_to_cart(db, user_id, item)


@router.delete("/{user_id}/items/{item_id}", response_model=Message)
async def remove_from_cart(user_id: int, item_id: int, db: AsyncSession = Depends(get_orders_db)):
    await functions.remove_from_cart(db, user_id, item_id)
    return {"message": "Item removed from cart"}


@router.delete("/{user_id}/clear", response_model=Message)
async def clear_cart(user_id: int, db: AsyncSession = Depends(get_orders_db)):
    await functions.clear_cart(db, user_id)
    return {"message": "Cart cleared successfully"}
