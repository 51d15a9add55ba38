# catalog_gateway/db/users.py
import hashlib
import logging

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.sql import func

from catalog_gateway.db.models import User, Order
from catalog_gateway.db.schemas import (
    UserCreate, UserUpdate, User as UserSchema, Order as OrderSchema,
)
from catalog_gateway.db.serialize import rows_to_models
from catalog_gateway.errors import NotFound

logger = logging.getLogger(__name__)

LIST_LIMIT = 100


def hash_password(password: str) -> str:
    """Hash a password with SHA-256."""
    return hashlib.sha256(password.encode()).hexdigest()


async def create_user(db: AsyncSession, user_data: UserCreate) -> UserSchema:
    db_user = User(
        name=user_data.name,
        email=user_data.email,
        password=hash_password(user_data.password),
        address=user_data.address,
        phone=user_data.phone,
    )
    db.add(db_user)
    await db.commit()
    await db.refresh(db_user)
    logger.debug("created user id=%s", db_user.id)
    return UserSchema.model_validate(db_user)


async def get_all_users(db: AsyncSession, limit: int = LIST_LIMIT):
    result = await db.execute(select(User).limit(limit))
    return rows_to_models(result.scalars().all(), UserSchema, "user")


async def get_user_by_id(db: AsyncSession, user_id: int) -> UserSchema:
    result = await db.execute(select(User).filter(User.id == user_id))
    user = result.scalar_one_or_none()
    if not user:
        raise NotFound("User not found")
    return UserSchema.model_validate(user)


async def update_user(db: AsyncSession, user_id: int, user_data: UserUpdate):
    result = await db.execute(
        update(User)
        .where(User.id == user_id)
        .values(
            name=user_data.name,
            email=user_data.email,
            address=user_data.address,
            phone=user_data.phone,
            updated_at=func.now(),
        )
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        raise NotFound("User not found")
    await db.commit()


# Orders and cart rows of the user are left in place
async def delete_user(db: AsyncSession, user_id: int):
    result = await db.execute(
        delete(User).where(User.id == user_id).execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        raise NotFound("User not found")
    await db.commit()


async def get_user_orders(db: AsyncSession, user_id: int, limit: int = LIST_LIMIT):
    result = await db.execute(select(Order).filter(Order.user_id == user_id).limit(limit))
    return rows_to_models(result.scalars().all(), OrderSchema, "order")
