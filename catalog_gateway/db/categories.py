# catalog_gateway/db/categories.py
from datetime import datetime, timezone

from catalog_gateway.db.schemas import CategoryBase, Category
from catalog_gateway.db.serialize import docs_to_models, doc_to_dict, to_object_id
from catalog_gateway.errors import NotFound

COLLECTION = "categories"
LIST_LIMIT = 100


def _category_doc(category: CategoryBase) -> dict:
    # parent_id is left out of the document when empty; it is not checked
    # against existing categories
    doc = category.model_dump()
    if not doc.get("parent_id"):
        doc.pop("parent_id", None)
    return doc


async def create_category(db, category: CategoryBase) -> Category:
    now = datetime.now(timezone.utc)
    doc = {**_category_doc(category), "created_at": now, "updated_at": now}
    result = await db[COLLECTION].insert_one(doc)
    doc["_id"] = result.inserted_id
    return Category.model_validate(doc_to_dict(doc))


async def get_all_categories(db, limit: int = LIST_LIMIT):
    docs = await db[COLLECTION].find({}).limit(limit).to_list(None)
    return docs_to_models(docs, Category, "category")


async def get_category_by_id(db, category_id: str) -> Category:
    doc = await db[COLLECTION].find_one({"_id": to_object_id(category_id, "category")})
    if not doc:
        raise NotFound("Category not found")
    return Category.model_validate(doc_to_dict(doc))


async def update_category(db, category_id: str, category: CategoryBase):
    oid = to_object_id(category_id, "category")
    changes = category.model_dump(exclude_unset=True)
    update = {}
    if "parent_id" in changes and not changes["parent_id"]:
        # An explicitly empty parent detaches the category
        del changes["parent_id"]
        update["$unset"] = {"parent_id": ""}
    changes["updated_at"] = datetime.now(timezone.utc)
    update["$set"] = changes
    result = await db[COLLECTION].update_one({"_id": oid}, update)
    if result.matched_count == 0:
        raise NotFound("Category not found")


async def delete_category(db, category_id: str):
    result = await db[COLLECTION].delete_one({"_id": to_object_id(category_id, "category")})
    if result.deleted_count == 0:
        raise NotFound("Category not found")
