# catalog_gateway/routes/reviews.py
from typing import List

from fastapi import APIRouter, Depends

from catalog_gateway.db import reviews as functions
from catalog_gateway.db.database import get_document_db
from catalog_gateway.db.schemas import Review, ReviewCreate, Message

router = APIRouter(prefix="/api/reviews", tags=["reviews"])


@router.post("", response_model=Review, status_code=201)
async def create_review(review: ReviewCreate, db=Depends(get_document_db)):
    return await functions.create_review(db, review)


@router.get("/product/{product_id}", response_model=List[Review])
async def read_product_reviews(product_id: str, db=Depends(get_document_db)):
    return await functions.get_product_reviews(db, product_id)


@router.delete("/{review_id}", response_model=Message)
async def delete_review(review_id: str, db=Depends(get_document_db)):
    await functions.delete_review(db, review_id)
    return {"message": "Review deleted successfully"}


@router.post("/{review_id}/helpful", response_model=Message)
async def mark_review_helpful(review_id: str, db=Depends(get_document_db)):
    await functions.mark_review_helpful(db, review_id)
    return {"message": "Review marked as helpful"}
