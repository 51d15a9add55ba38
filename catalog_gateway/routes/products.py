# catalog_gateway/routes/products.py
from typing import List

from fastapi import APIRouter, Depends, Query

from catalog_gateway.db import products as functions
from catalog_gateway.db.database import get_document_db
from catalog_gateway.db.schemas import Product, ProductBase, Message

router = APIRouter(prefix="/api/products", tags=["products"])


# Fixed paths first, the /{product_id} routes would shadow them
@router.get("/search", response_model=List[Product])
async def search_products(q: str = Query(default=""), db=Depends(get_document_db)):
    return await functions.search_products(db, q)


@router.get("/category/{category}", response_model=List[Product])
async def read_products_by_category(category: str, db=Depends(get_document_db)):
    return await functions.get_products_by_category(db, category)


@router.post("", response_model=Product, status_code=201)
async def create_product(product: ProductBase, db=Depends(get_document_db)):
    return await functions.create_product(db, product)


@router.get("", response_model=List[Product])
async def read_products(db=Depends(get_document_db)):
    return await functions.get_all_products(db)


@router.get("/{product_id}", response_model=Product)
async def read_product(product_id: str, db=Depends(get_document_db)):
    return await functions.get_product_by_id(db, product_id)


@router.put("/{product_id}", response_model=Message)
async def update_product(product_id: str, product: ProductBase, db=Depends(get_document_db)):
    await functions.update_product(db, product_id, product)
    return {"message": "Product updated successfully"}


@router.delete("/{product_id}", response_model=Message)
async def delete_product(product_id: str, db=Depends(get_document_db)):
    await functions.delete_product(db, product_id)
    return {"message": "Product deleted successfully"}
