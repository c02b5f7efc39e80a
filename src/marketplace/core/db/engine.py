"""Database engine management.

PostgreSQL (asyncpg) is the production backend; SQLite (aiosqlite) is used for
local runs and tests and takes no pool or SSL options.
"""

import ssl
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.marketplace.core.config import Settings, get_settings

_engine: AsyncEngine | None = None

# ssl mode -> (check_hostname, verify_mode)
_SSL_MODES: dict[str, tuple[bool, ssl.VerifyMode]] = {
    "prefer": (False, ssl.CERT_NONE),
    "require": (False, ssl.CERT_NONE),
    "verify-ca": (False, ssl.CERT_REQUIRED),
    "verify-full": (True, ssl.CERT_REQUIRED),
}


def _ssl_context(mode: str) -> ssl.SSLContext | None:
    if mode == "disable":
        return None
    check_hostname, verify_mode = _SSL_MODES[mode]
    context = ssl.create_default_context()
    context.check_hostname = check_hostname
    context.verify_mode = verify_mode
    return context


def _engine_options(settings: Settings) -> dict[str, Any]:
    """Keyword arguments for create_async_engine, by driver."""
    if make_url(settings.database_url).get_driver_name() != "asyncpg":
        return {}

    connect_args: dict[str, Any] = {
        "statement_cache_size": settings.database_statement_cache_size,
    }
    context = _ssl_context(settings.database_ssl_mode)
    if context is not None:
        connect_args["ssl"] = context

    return {
        "pool_size": settings.database_pool_size,
        "max_overflow": settings.database_max_overflow,
        "pool_pre_ping": True,
        "connect_args": connect_args,
    }


def get_engine() -> AsyncEngine:
    """Get or create the database engine singleton."""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_async_engine(settings.database_url, **_engine_options(settings))
    return _engine


async def dispose_engine() -> None:
    """Dispose the database engine. Call during shutdown."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None
