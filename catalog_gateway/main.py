# catalog_gateway/main.py
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_gateway.config import Settings
from catalog_gateway.db.database import Stores, build_stores
from catalog_gateway.db.init_db import init_db
from catalog_gateway.errors import install_error_handlers
from catalog_gateway.logging_config import configure_logging
from catalog_gateway.routes import ROUTERS

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    stores: Stores = app.state.stores
    # No degraded mode: a store that cannot be reached stops startup
    await stores.connect()
    await init_db(stores)
    yield
    await stores.close()


def create_app(settings: Optional[Settings] = None, stores: Optional[Stores] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(title="Catalog Gateway", lifespan=lifespan)
    app.state.settings = settings
    app.state.stores = stores or build_stores(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    for router in ROUTERS:
        app.include_router(router)

    return app


def run():
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    logger.info("Server starting on port %s", settings.port)
    uvicorn.run("catalog_gateway.main:create_app", factory=True, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
