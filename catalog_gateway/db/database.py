# catalog_gateway/db/database.py
import asyncio
import logging
from dataclasses import dataclass

from fastapi import Request
from pymongo import AsyncMongoClient
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from catalog_gateway.config import Settings

logger = logging.getLogger(__name__)

# Declarative bases, one per relational store
Base = declarative_base()
AnalyticsBase = declarative_base()

CLOSE_TIMEOUT = 5.0


class RelationalStore:
    """Connection pool and session factory for one relational database."""

    def __init__(self, name: str, url: str, echo: bool = False, **pool_options):
        self.name = name
        self.engine = create_async_engine(url, echo=echo, **pool_options)
        self.SessionLocal = sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False
        )

    async def connect(self):
        # Liveness probe, any error here aborts startup
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("Connected to %s store", self.name)

    def session(self) -> AsyncSession:
        return self.SessionLocal()

    async def create_tables(self, metadata):
        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)

    async def close(self, timeout: float = CLOSE_TIMEOUT):
        await asyncio.wait_for(self.engine.dispose(), timeout=timeout)
        logger.info("%s store connection closed", self.name)


class DocumentStore:
    """Client for the document database; collections are addressed by name."""

    name = "document"

    def __init__(self, uri: str, database_name: str, connect_timeout: float = 10.0):
        self.database_name = database_name
        self.connect_timeout = connect_timeout
        self.client = AsyncMongoClient(uri, serverSelectionTimeoutMS=int(connect_timeout * 1000))

    async def connect(self):
        await asyncio.wait_for(self.client.admin.command("ping"), timeout=self.connect_timeout)
        logger.info("Connected to document store, database %r", self.database_name)

    def database(self):
        return self.client[self.database_name]

    def collection(self, name: str):
        return self.database()[name]

    async def close(self, timeout: float = CLOSE_TIMEOUT):
        await asyncio.wait_for(self.client.close(), timeout=timeout)
        logger.info("document store connection closed")


@dataclass
class Stores:
    orders: RelationalStore
    analytics: RelationalStore
    documents: DocumentStore

    def all(self):
        return (self.orders, self.analytics, self.documents)

    async def connect(self):
        for store in self.all():
            await store.connect()

    async def close(self):
        # Stores are independent, a failing close does not block the others
        for store in self.all():
            try:
                await store.close()
            except Exception:
                logger.exception("Failed to close %s store", store.name)


def build_stores(settings: Settings) -> Stores:
    pool_options = {
        "pool_size": settings.pool_size,
        "max_overflow": settings.max_overflow,
        "pool_recycle": settings.pool_recycle,
    }
    return Stores(
        orders=RelationalStore("transactional", settings.transactional_url, echo=settings.db_echo, **pool_options),
        analytics=RelationalStore("analytics", settings.analytics_url, echo=settings.db_echo, **pool_options),
        documents=DocumentStore(settings.mongo_uri, settings.mongo_db, settings.mongo_connect_timeout),
    )


# Session generators, one per relational store
async def get_orders_db(request: Request):
    async with request.app.state.stores.orders.session() as session:
        yield session


async def get_analytics_db(request: Request):
    async with request.app.state.stores.analytics.session() as session:
        yield session


def get_document_db(request: Request):
    return request.app.state.stores.documents.database()
