import secrets
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy import text

from src.marketplace.api.middlewares import setup_middlewares
from src.marketplace.api.v1.router import api_router
from src.marketplace.core.config import Settings, get_settings
from src.marketplace.core.db import dispose_engine, get_session
from src.marketplace.core.exceptions import setup_exception_handlers
from src.marketplace.core.logging import get_logger, setup_logging

logger = get_logger(__name__)

HEALTH_CACHE_TTL = 10  # seconds
_health_cache: dict[str, Any] | None = None
_health_cache_time: float = 0


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info("Starting application", app_name=settings.app_name, env=settings.app_env)

    yield

    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "projects", "description": "Project posting and management for SMEs"},
    {"name": "matches", "description": "Consultant matches, proposals and decisions"},
]


def _setup_metrics(app: FastAPI, settings: Settings) -> None:
    """Expose Prometheus metrics, behind X-Metrics-Key when one is configured."""
    instrumentator = Instrumentator().instrument(app)

    if not settings.metrics_api_key:
        instrumentator.expose(app, endpoint="/metrics")
        return

    expected_key = settings.metrics_api_key
    api_key_header = APIKeyHeader(name="X-Metrics-Key", auto_error=False)

    async def verify_metrics_key(api_key: str | None = Depends(api_key_header)) -> None:
        if api_key is None or not secrets.compare_digest(api_key, expected_key):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or missing metrics API key",
            )

    instrumentator.expose(app, endpoint="/metrics", dependencies=[Depends(verify_metrics_key)])


async def _check_database() -> str:
    try:
        async with get_session() as session:
            await session.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Database health check failed", error=str(e))
        return f"unhealthy: {e}"
    return "healthy"


async def health() -> JSONResponse:
    """Health check with a database probe, cached for HEALTH_CACHE_TTL seconds."""
    global _health_cache, _health_cache_time

    now = time.time()
    if _health_cache is not None and (now - _health_cache_time) < HEALTH_CACHE_TTL:
        body = {
            **_health_cache,
            "cached": True,
            "cache_age_seconds": round(now - _health_cache_time, 1),
        }
    else:
        database = await _check_database()
        body = {
            "status": "healthy" if database == "healthy" else "unhealthy",
            "database": database,
            "cached": False,
            "timestamp": now,
        }
        _health_cache = body
        _health_cache_time = now

    status_code = 200 if body["status"] == "healthy" else 503
    return JSONResponse(content=body, status_code=status_code)


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Matches SME sustainability projects with expert consultants",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
        lifespan=lifespan,
    )

    setup_exception_handlers(app)
    setup_middlewares(app, settings)

    app.include_router(api_router)
    app.add_api_route("/health", health, methods=["GET"], include_in_schema=False)
    _setup_metrics(app, settings)

    return app


app = create_app()
