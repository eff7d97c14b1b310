"""Helix API endpoint definitions and rate limit header parsing."""

from typing import Optional

from .constants import DEFAULT_BASE_URL
from .logging import get_logger

logger = get_logger(__name__)

# Resource paths, relative to the API base URL
DROPS_ENTITLEMENTS_PATH = "/entitlements/drops"


class HelixEndpoints:
    """Helix API endpoint definitions and URL building."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL):
        """
        Initialize endpoint configuration.

        Args:
            base_url: API base URL every path is resolved against
        """
        self.base_url = base_url.rstrip("/")

    def url(self, path: str) -> str:
        """Resolve a path relative to the base URL."""
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.base_url}{path}"


def parse_rate_limit_header(header_value: Optional[str], header: str = "") -> Optional[int]:
    """
    Parse a single integer rate limit header value.

    Example: "800" -> 800, "" -> None, "abc" -> None (logged)

    Args:
        header_value: Raw header value, or None when the header is missing
        header: Header name, used for logging only

    Returns:
        Parsed integer, or None when missing or unparseable
    """
    if header_value is None or not header_value.strip():
        return None

    try:
        return int(header_value.strip())
    except ValueError:
        logger.warning(
            "Failed to parse rate limit header", header=header, value=header_value
        )
        return None
