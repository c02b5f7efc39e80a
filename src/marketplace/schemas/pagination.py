"""Keyset pagination: response envelope and opaque cursors.

A cursor encodes the ``(created_at, id)`` of the last row of a page. The id
breaks ties between rows created in the same instant, which happens for
matches inserted together when a project is posted.
"""

import base64
from datetime import datetime
from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, Field

T = TypeVar("T")

_SEPARATOR = "|"


class PaginatedResponse(BaseModel, Generic[T]):
    """Page of results, newest first.

    Clients should treat ``next_cursor`` as an opaque token and pass it back
    to get the next page.
    """

    items: list[T]
    next_cursor: str | None = Field(
        default=None,
        description="Opaque cursor for fetching the next page. None if no more pages.",
    )
    has_more: bool = Field(
        default=False,
        description="Whether there are more items after this page.",
    )


def encode_cursor(created_at: datetime, id: UUID) -> str:
    """Encode a row position as an opaque cursor."""
    raw = f"{created_at.isoformat()}{_SEPARATOR}{id}"
    return base64.urlsafe_b64encode(raw.encode()).decode()


def decode_cursor(cursor: str) -> tuple[datetime, UUID]:
    """Decode a cursor produced by ``encode_cursor``.

    Raises:
        ValueError: If the cursor is malformed
    """
    try:
        raw = base64.urlsafe_b64decode(cursor.encode()).decode()
        created_at, id = raw.split(_SEPARATOR)
        return datetime.fromisoformat(created_at), UUID(id)
    except Exception as e:
        raise ValueError("Invalid cursor") from e
