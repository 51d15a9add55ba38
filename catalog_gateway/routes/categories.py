# catalog_gateway/routes/categories.py
from typing import List

from fastapi import APIRouter, Depends

from catalog_gateway.db import categories as functions
from catalog_gateway.db.database import get_document_db
from catalog_gateway.db.schemas import Category, CategoryBase, Message

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.post("", response_model=Category, response_model_exclude_none=True, status_code=201)
async def create_category(category: CategoryBase, db=Depends(get_document_db)):
    return await functions.create_category(db, category)


@router.get("", response_model=List[Category], response_model_exclude_none=True)
async def read_categories(db=Depends(get_document_db)):
    return await functions.get_all_categories(db)


@router.get("/{category_id}", response_model=Category, response_model_exclude_none=True)
async def read_category(category_id: str, db=Depends(get_document_db)):
    return await functions.get_category_by_id(db, category_id)


@router.put("/{category_id}", response_model=Message)
async def update_category(category_id: str, category: CategoryBase, db=Depends(get_document_db)):
    await functions.update_category(db, category_id, category)
    return {"message": "Category updated successfully"}


@router.delete("/{category_id}", response_model=Message)
async def delete_category(category_id: str, db=Depends(get_document_db)):
    await functions.delete_category(db, category_id)
    return {"message": "Category deleted successfully"}
