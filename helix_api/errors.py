"""Custom error classes for the Helix API client."""

from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from .response import HelixResponse


class HelixError(Exception):
    """Base exception for Helix client errors with status code tracking."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Dict[str, Any]] = None,
        response: Optional["HelixResponse[Any]"] = None,
    ) -> None:
        """
        Initialize HelixError.

        Args:
            message: Error message
            status_code: HTTP status code (400, 401, 403, 404, 429, 503, etc.)
            response_data: Raw error body decoded from the API, if any
            response: Envelope built from the failed response, if one was received
        """
        super().__init__(message)
        self.message: str = message
        self.status_code: Optional[int] = status_code
        self.response_data: Dict[str, Any] = response_data or {}
        self.response: Optional["HelixResponse[Any]"] = response

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.status_code:
            return f"Helix API Error {self.status_code}: {self.message}"
        return f"Helix API Error: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON serialization."""
        rate_limit = self.response.rate_limit if self.response is not None else None
        return {
            "error": type(self).__name__,
            "message": self.message,
            "status_code": self.status_code,
            "rate_limit": rate_limit.model_dump() if rate_limit is not None else None,
            "response_data": self.response_data,
        }

    # Helper methods for error type checking
    def is_rate_limit(self) -> bool:
        """Check if this is a rate limit error (429)."""
        return self.status_code == 429

    def is_not_found(self) -> bool:
        """Check if this is a not found error (404)."""
        return self.status_code == 404

    def is_auth_error(self) -> bool:
        """Check if this is an authentication/authorization error (401, 403)."""
        return self.status_code in (401, 403)

    def is_server_error(self) -> bool:
        """Check if this is a server error (5xx)."""
        return self.status_code is not None and self.status_code >= 500

    def is_bad_request(self) -> bool:
        """Check if this is a bad request error (400)."""
        return self.status_code == 400


class HelixAPIError(HelixError):
    """Upstream returned a non-2xx status; ``response`` holds the populated envelope."""

    pass


class HelixTransportError(HelixError):
    """Network failure or timeout - no response envelope is available."""

    pass


class HelixDecodeError(HelixTransportError):
    """Response body could not be parsed into the expected payload."""

    pass
