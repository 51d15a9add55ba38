# catalog_gateway/config.py
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _env(key: str, default: str) -> str:
    value = os.getenv(key)
    return value if value else default


def _relational_url(prefix: str, default_name: str) -> str:
    url = os.getenv(f"{prefix}_DATABASE_URL")
    if url:
        return url
    return (
        f"postgresql+asyncpg://{_env(f'{prefix}_DB_USER', 'postgres')}:{_env(f'{prefix}_DB_PASSWORD', 'postgres')}"
        f"@{_env(f'{prefix}_DB_HOST', 'localhost')}:{_env(f'{prefix}_DB_PORT', '5432')}"
        f"/{_env(f'{prefix}_DB_NAME', default_name)}"
    )


def _mongo_uri() -> str:
    host = _env("MONGO_HOST", "localhost")
    port = _env("MONGO_PORT", "27017")
    user = os.getenv("MONGO_USER", "")
    password = os.getenv("MONGO_PASSWORD", "")
    if user and password:
        return f"mongodb://{user}:{password}@{host}:{port}"
    return f"mongodb://{host}:{port}"


@dataclass(frozen=True)
class Settings:
    transactional_url: str
    analytics_url: str
    mongo_uri: str
    mongo_db: str = "ecommerce"
    mongo_connect_timeout: float = 10.0
    pool_size: int = 5
    max_overflow: int = 20
    pool_recycle: int = 300
    db_echo: bool = False
    port: int = 8080
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            transactional_url=_relational_url("TRANSACTIONAL", "ecommerce"),
            analytics_url=_relational_url("ANALYTICS", "analytics"),
            mongo_uri=_mongo_uri(),
            mongo_db=_env("MONGO_DB", "ecommerce"),
            mongo_connect_timeout=float(_env("MONGO_CONNECT_TIMEOUT", "10")),
            pool_size=int(_env("DB_POOL_SIZE", "5")),
            max_overflow=int(_env("DB_MAX_OVERFLOW", "20")),
            pool_recycle=int(_env("DB_POOL_RECYCLE", "300")),
            db_echo=_env("DB_ECHO", "false").lower() in ("1", "true", "yes"),
            port=int(_env("PORT", "8080")),
            log_level=_env("LOG_LEVEL", "INFO").upper(),
            cors_origins=[o.strip() for o in _env("CORS_ORIGINS", "*").split(",") if o.strip()],
        )
