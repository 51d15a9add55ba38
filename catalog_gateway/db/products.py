# catalog_gateway/db/products.py
import re
from datetime import datetime, timezone

from catalog_gateway.db.schemas import ProductBase, Product
from catalog_gateway.db.serialize import docs_to_models, doc_to_dict, to_object_id
from catalog_gateway.errors import NotFound

COLLECTION = "products"
LIST_LIMIT = 100


async def create_product(db, product: ProductBase) -> Product:
    now = datetime.now(timezone.utc)
    doc = {**product.model_dump(), "created_at": now, "updated_at": now}
    result = await db[COLLECTION].insert_one(doc)
    doc["_id"] = result.inserted_id
    return Product.model_validate(doc_to_dict(doc))


async def get_all_products(db, limit: int = LIST_LIMIT):
    docs = await db[COLLECTION].find({}).limit(limit).to_list(None)
    return docs_to_models(docs, Product, "product")


async def get_product_by_id(db, product_id: str) -> Product:
    doc = await db[COLLECTION].find_one({"_id": to_object_id(product_id, "product")})
    if not doc:
        raise NotFound("Product not found")
    return Product.model_validate(doc_to_dict(doc))


async def update_product(db, product_id: str, product: ProductBase):
    # Only the fields present in the body are overwritten
    oid = to_object_id(product_id, "product")
    changes = product.model_dump(exclude_unset=True)
    changes["updated_at"] = datetime.now(timezone.utc)
    result = await db[COLLECTION].update_one({"_id": oid}, {"$set": changes})
    if result.matched_count == 0:
        raise NotFound("Product not found")


async def delete_product(db, product_id: str):
    result = await db[COLLECTION].delete_one({"_id": to_object_id(product_id, "product")})
    if result.deleted_count == 0:
        raise NotFound("Product not found")


async def search_products(db, query: str, limit: int = LIST_LIMIT):
    """Case-insensitive substring match over name, description, brand and tags."""
    # An empty query matches nothing rather than every product
    if not query:
        return []
    pattern = {"$regex": re.escape(query), "$options": "i"}
    filter_ = {"$or": [
        {"name": pattern},
        {"description": pattern},
        {"brand": pattern},
        {"tags": pattern},
    ]}
    docs = await db[COLLECTION].find(filter_).limit(limit).to_list(None)
    return docs_to_models(docs, Product, "product")


async def get_products_by_category(db, category: str, limit: int = LIST_LIMIT):
    docs = await db[COLLECTION].find({"category": category}).limit(limit).to_list(None)
    return docs_to_models(docs, Product, "product")
