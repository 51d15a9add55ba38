# catalog_gateway/db/init_db.py
import logging

from pymongo import ASCENDING

from catalog_gateway.db.database import Base, AnalyticsBase, Stores
# Registers the tables on both metadata objects
from catalog_gateway.db import models  # noqa: F401

logger = logging.getLogger(__name__)

# (collection, index keys)
DOCUMENT_INDEXES = [
    ("products", [("category", ASCENDING)]),
    ("reviews", [("product_id", ASCENDING)]),
    ("categories", [("parent_id", ASCENDING)]),
    ("wishlist", [("user_id", ASCENDING), ("product_id", ASCENDING)]),
]


async def init_relational(store, metadata):
    try:
        await store.create_tables(metadata)
    except Exception:
        logger.exception("Error creating %s tables", store.name)
        return False
    logger.info("%s tables created/verified", store.name)
    return True


async def init_documents(store):
    ok = True
    for collection, keys in DOCUMENT_INDEXES:
        try:
            await store.collection(collection).create_index(keys)
        except Exception:
            logger.exception("Error creating index on %s", collection)
            ok = False
    if ok:
        logger.info("document collections verified")
    return ok


async def init_db(stores: Stores):
    """Idempotent schema bootstrap; failures are logged and startup goes on."""
    await init_relational(stores.orders, Base.metadata)
    await init_relational(stores.analytics, AnalyticsBase.metadata)
    await init_documents(stores.documents)
