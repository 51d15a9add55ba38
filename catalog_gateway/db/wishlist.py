# catalog_gateway/db/wishlist.py
from datetime import datetime, timezone

from catalog_gateway.db.schemas import WishlistItem
from catalog_gateway.db.serialize import docs_to_models, doc_to_dict
from catalog_gateway.errors import NotFound

COLLECTION = "wishlist"
LIST_LIMIT = 100


async def get_wishlist(db, user_id: int, limit: int = LIST_LIMIT):
    docs = await db[COLLECTION].find({"user_id": user_id}).limit(limit).to_list(None)
    return docs_to_models(docs, WishlistItem, "wishlist")


# Adding the same product twice stores two documents
async def add_to_wishlist(db, user_id: int, product_id: str) -> WishlistItem:
    doc = {"user_id": user_id, "product_id": product_id, "added_at": datetime.now(timezone.utc)}
    result = await db[COLLECTION].insert_one(doc)
    doc["_id"] = result.inserted_id
    return WishlistItem.model_validate(doc_to_dict(doc))


async def remove_from_wishlist(db, user_id: int, product_id: str):
    result = await db[COLLECTION].delete_one({"user_id": user_id, "product_id": product_id})
    if result.deleted_count == 0:
        raise NotFound("Wishlist item not found")
