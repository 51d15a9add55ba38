# catalog_gateway/db/reviews.py
from datetime import datetime, timezone

from catalog_gateway.db.schemas import ReviewCreate, Review
from catalog_gateway.db.serialize import docs_to_models, doc_to_dict, to_object_id
from catalog_gateway.errors import NotFound

COLLECTION = "reviews"
LIST_LIMIT = 100


async def create_review(db, review: ReviewCreate) -> Review:
    doc = {**review.model_dump(), "helpful": 0, "created_at": datetime.now(timezone.utc)}
    result = await db[COLLECTION].insert_one(doc)
    doc["_id"] = result.inserted_id
    return Review.model_validate(doc_to_dict(doc))


async def get_product_reviews(db, product_id: str, limit: int = LIST_LIMIT):
    docs = await db[COLLECTION].find({"product_id": product_id}).limit(limit).to_list(None)
    return docs_to_models(docs, Review, "review")


async def delete_review(db, review_id: str):
    result = await db[COLLECTION].delete_one({"_id": to_object_id(review_id, "review")})
    if result.deleted_count == 0:
        raise NotFound("Review not found")


async def mark_review_helpful(db, review_id: str):
    # Server-side increment, concurrent calls are all counted
    result = await db[COLLECTION].update_one(
        {"_id": to_object_id(review_id, "review")},
        {"$inc": {"helpful": 1}},
    )
    if result.matched_count == 0:
        raise NotFound("Review not found")
