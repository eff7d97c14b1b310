"""Auth header providers for the Helix client.

Token acquisition and refresh live outside this library. The client only asks a
provider for the headers to attach to each request.
"""

from abc import abstractmethod
from typing import Dict, Optional, Protocol, runtime_checkable

from .config import get_global_settings
from .constants import AUTHORIZATION_HEADER, CLIENT_ID_HEADER


@runtime_checkable
class AuthProvider(Protocol):
    """Protocol for anything that can supply per-request auth headers."""

    @abstractmethod
    def auth_headers(self) -> Dict[str, str]:
        """Return the headers to attach to the next request."""
        ...


class StaticTokenProvider:
    """Attaches a fixed client id and bearer token (App Access or User OAuth)."""

    def __init__(
        self, client_id: Optional[str] = None, access_token: Optional[str] = None
    ):
        settings = get_global_settings()
        self.client_id = client_id or settings.helix_client_id
        self.access_token = access_token or settings.helix_access_token

    def auth_headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        if self.client_id:
            headers[CLIENT_ID_HEADER] = self.client_id
        if self.access_token:
            headers[AUTHORIZATION_HEADER] = f"Bearer {self.access_token}"
        return headers

    def __repr__(self) -> str:
        token = "[REDACTED]" if self.access_token else "None"
        return f"StaticTokenProvider(client_id={self.client_id!r}, access_token={token})"
