"""Application middlewares."""

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.marketplace.core.config import Settings

from .logging_context import logging_context_middleware

__all__ = [
    "logging_context_middleware",
    "setup_middlewares",
]


def setup_middlewares(app: FastAPI, settings: Settings) -> None:
    """Install middlewares, innermost first.

    Starlette wraps each new middleware around the previous ones, so the
    correlation id middleware is added last and runs first: the logging
    context and error handlers can then read the request id.
    """
    app.middleware("http")(logging_context_middleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )

    app.add_middleware(CorrelationIdMiddleware, header_name="X-Request-ID")
