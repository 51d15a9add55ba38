# catalog_gateway/routes/wishlist.py
from typing import List

from fastapi import APIRouter, Depends

from catalog_gateway.db import wishlist as functions
from catalog_gateway.db.database import get_document_db
from catalog_gateway.db.schemas import WishlistItem, WishlistItemCreate, Message

router = APIRouter(prefix="/api/wishlist", tags=["wishlist"])


@router.get("/{user_id}", response_model=List[WishlistItem])
async def get_wishlist(user_id: int, db=Depends(get_document_db)):
    return await functions.get_wishlist(db, user_id)


@router.post("/{user_id}/items", response_model=WishlistItem, status_code=201)
async def add_to_wishlist(user_id: int, item: WishlistItemCreate, db=Depends(get_document_db)):
    return await functions.add_to_wishlist(db, user_id, item.product_id)


@router.delete("/{user_id}/items/{product_id}", response_model=Message)
async def remove_from_wishlist(user_id: int, product_id: str, db=Depends(get_document_db)):
    await functions.remove_from_wishlist(db, user_id, product_id)
    return {"message": "Item removed from wishlist"}
