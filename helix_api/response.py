"""Response envelope shared by every Helix call."""

from datetime import datetime, timezone
from typing import Any, Dict, Generic, Optional, TypeVar

from httpx import Headers
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import (
    RATE_LIMIT_LIMIT_HEADER,
    RATE_LIMIT_REMAINING_HEADER,
    RATE_LIMIT_RESET_HEADER,
)
from .endpoints import parse_rate_limit_header

T = TypeVar("T")


class RateLimit(BaseModel):
    """Rate limit snapshot taken from the response headers of one call."""

    limit: Optional[int] = None
    remaining: Optional[int] = None
    reset: Optional[int] = None  # unix seconds

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_headers(cls, headers: Headers) -> "RateLimit":
        """Build a snapshot; missing or malformed headers leave fields unset."""
        return cls(
            limit=parse_rate_limit_header(
                headers.get(RATE_LIMIT_LIMIT_HEADER), RATE_LIMIT_LIMIT_HEADER
            ),
            remaining=parse_rate_limit_header(
                headers.get(RATE_LIMIT_REMAINING_HEADER), RATE_LIMIT_REMAINING_HEADER
            ),
            reset=parse_rate_limit_header(
                headers.get(RATE_LIMIT_RESET_HEADER), RATE_LIMIT_RESET_HEADER
            ),
        )

    @property
    def reset_at(self) -> Optional[datetime]:
        """Reset time as an aware UTC datetime."""
        if self.reset is None:
            return None
        return datetime.fromtimestamp(self.reset, tz=timezone.utc)


class Pagination(BaseModel):
    """Opaque forward-only cursor. No cursor means the last page was reached."""

    cursor: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("cursor")
    @classmethod
    def empty_cursor_is_absent(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    @property
    def has_next(self) -> bool:
        return self.cursor is not None


class ResponseCommon(BaseModel):
    """Metadata attached to every response, successful or not."""

    status_code: int
    rate_limit: RateLimit = Field(default_factory=RateLimit)

    # Populated only for non-2xx responses
    error: Optional[str] = None
    error_status: Optional[int] = None
    error_message: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_error(self) -> bool:
        return self.error is not None or self.status_code >= 400

    def common_fields(self) -> Dict[str, Any]:
        """Common fields only, for hydrating an endpoint-specific response."""
        return {name: getattr(self, name) for name in ResponseCommon.model_fields}


class HelixResponse(ResponseCommon, Generic[T]):
    """Envelope around a decoded payload of type ``T``.

    ``data`` is set on success and ``None`` on an upstream error; the error
    fields are the reverse.
    """

    data: Optional[T] = None
