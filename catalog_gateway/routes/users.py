# catalog_gateway/routes/users.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_gateway.db import users as functions
from catalog_gateway.db.database import get_orders_db
from catalog_gateway.db.schemas import User, UserCreate, UserUpdate, Order, Message

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=User, status_code=201)
async def create_user(user: UserCreate, db: AsyncSession = Depends(get_orders_db)):
    return await functions.create_user(db, user)


@router.get("", response_model=List[User])
async def read_users(db: AsyncSession = Depends(get_orders_db)):
    return await functions.get_all_users(db)


@router.get("/{user_id}", response_model=User)
async def read_user(user_id: int, db: AsyncSession = Depends(get_orders_db)):
    return await functions.get_user_by_id(db, user_id)


@router.put("/{user_id}", response_model=Message)
async def update_user(user_id: int, user: UserUpdate, db: AsyncSession = Depends(get_orders_db)):
    await functions.update_user(db, user_id, user)
    return {"message": "User updated successfully"}


@router.delete("/{user_id}", response_model=Message)
async def delete_user(user_id: int, db: AsyncSession = Depends(get_orders_db)):
    await functions.delete_user(db, user_id)
    return {"message": "User deleted successfully"}


@router.get("/{user_id}/orders", response_model=List[Order])
async def read_user_orders(user_id: int, db: AsyncSession = Depends(get_orders_db)):
    return await functions.get_user_orders(db, user_id)
