"""Domain errors and the exception handlers that render them with request_id."""

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.marketplace.core.logging import get_logger

logger = get_logger(__name__)


class MarketplaceError(Exception):
    """Base class for errors raised by the service layer.

    Each subclass carries the HTTP status the API layer responds with.
    """

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(MarketplaceError):
    """Referenced project, match or consultant does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class PermissionDeniedError(MarketplaceError):
    """Acting identity does not own the referenced project or match."""

    status_code = status.HTTP_403_FORBIDDEN


class InvalidStateTransitionError(MarketplaceError):
    """Requested status change is not legal from the current state."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, entity: str, current: str, requested: str):
        super().__init__(f"Cannot move {entity} from '{current}' to '{requested}'")
        self.entity = entity
        self.current = current
        self.requested = requested


class ValidationError(MarketplaceError):
    """Malformed input that passed schema validation but violates a business rule."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(MarketplaceError)
    async def marketplace_exception_handler(
        request: Request, exc: MarketplaceError
    ) -> JSONResponse:
        logger.info(
            "Request rejected",
            error=type(exc).__name__,
            detail=exc.detail,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = correlation_id.get()
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=request_id,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error",
                "request_id": request_id,
            },
        )
