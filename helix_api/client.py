"""Helix API HTTP client with typed request dispatch and response envelopes."""

import asyncio
from typing import Any, Callable, Dict, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from .auth import AuthProvider, StaticTokenProvider
from .config import get_global_settings
from .constants import USER_AGENT, HTTPMethod
from .encoding import encode_body, encode_query
from .endpoints import DROPS_ENTITLEMENTS_PATH, HelixEndpoints
from .errors import HelixAPIError, HelixDecodeError, HelixTransportError
from .logging import get_logger
from .models import (
    GetDropEntitlementsParams,
    GetDropsEntitlementsResponse,
    ManyEntitlementStatuses,
    ManyEntitlementsWithPagination,
    UpdateDropEntitlementsParams,
    UpdateDropsEntitlementsResponse,
)
from .response import HelixResponse, RateLimit

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


class HelixAPIClient:
    """Helix API client.

    Every call is a single request: there is no retry loop and no state shared
    between calls besides the HTTP session. Retry decisions belong to the caller.
    """

    def __init__(
        self,
        client_id: Optional[str] = None,
        access_token: Optional[str] = None,
        base_url: Optional[str] = None,
        auth_provider: Optional[AuthProvider] = None,
        session: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
        enable_logging: bool = True,
        request_callback: Optional[Callable[[str, int], None]] = None,
    ):
        """
        Initialize Helix API client.

        Args:
            client_id: Application client id (uses config if None)
            access_token: App Access or User OAuth token (uses config if None)
            base_url: API base URL (uses config if None)
            auth_provider: Header provider; overrides client_id/access_token
            session: Externally owned httpx client; not closed by this client
            timeout: Total request timeout in seconds (uses config if None)
            enable_logging: Enable request logging
            request_callback: Optional callback for tracking API requests (metric_name, count)
        """
        settings = get_global_settings()
        self.auth_provider: AuthProvider = auth_provider or StaticTokenProvider(
            client_id, access_token
        )
        self.base_url = base_url or settings.helix_base_url
        self.timeout = timeout if timeout is not None else settings.helix_timeout
        self.enable_logging = enable_logging
        self.request_callback = request_callback

        self.endpoints = HelixEndpoints(self.base_url)

        # HTTP session
        self.session = session
        self._owns_session = session is None
        self._session_lock = asyncio.Lock()

    async def __aenter__(self):
        """Async context manager entry."""
        await self.start_session()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def start_session(self) -> None:
        """Start the httpx session."""
        if self.session is None or self.session.is_closed:
            async with self._session_lock:
                if self.session is None or self.session.is_closed:
                    headers = {
                        "Accept": "application/json",
                        "User-Agent": USER_AGENT,
                    }

                    self.session = httpx.AsyncClient(
                        headers=headers, timeout=httpx.Timeout(self.timeout)
                    )
                    self._owns_session = True

                    logger.info(
                        "Helix API client session started",
                        base_url=self.base_url,
                        auth_provider=repr(self.auth_provider),
                    )

    async def close(self) -> None:
        """Close the httpx session if this client created it."""
        if self._owns_session and self.session and not self.session.is_closed:
            await self.session.aclose()
            logger.info("Helix API client session closed")

    def _track(self, metric_name: str) -> None:
        if self.request_callback:
            self.request_callback(metric_name, 1)

    # Dispatch

    async def _call(
        self,
        method: Union[HTTPMethod, str],
        path: str,
        data_model: Type[T],
        params: Optional[BaseModel] = None,
    ) -> HelixResponse[T]:
        """
        Issue one request and decode the body into ``data_model``.

        GET parameters go into the query string; every other verb sends them as
        a JSON body.

        Returns:
            Envelope holding the decoded payload and response metadata

        Raises:
            HelixAPIError: Non-2xx status; ``.response`` holds the envelope
            HelixTransportError: Network failure or timeout, no envelope
            HelixDecodeError: 2xx body that is not valid for ``data_model``
        """
        await self.start_session()

        if self.session is None:
            raise HelixTransportError("Session not initialized")

        method = HTTPMethod(method)
        url = self.endpoints.url(path)
        if method == HTTPMethod.GET:
            query, body = encode_query(params), None
        else:
            query, body = [], encode_body(params)

        if self.enable_logging:
            logger.debug(
                "Helix request", method=method.value, path=path, params=query or body
            )

        try:
            response = await self.session.request(
                method.value,
                url,
                params=query or None,
                json=body,
                headers=self.auth_provider.auth_headers(),
            )
        except httpx.HTTPError as e:
            self._track("request_errors")
            logger.warning(
                "Helix request failed", method=method.value, path=path, error=str(e)
            )
            raise HelixTransportError(f"Request failed: {e}") from e

        try:
            self._track("requests_made")
            return self._decode_response(response, data_model)
        finally:
            await response.aclose()

    def _decode_response(
        self, response: httpx.Response, data_model: Type[T]
    ) -> HelixResponse[T]:
        """Build the envelope; raise HelixAPIError for non-2xx statuses."""
        envelope_type = HelixResponse[data_model]  # type: ignore[valid-type]
        rate_limit = RateLimit.from_headers(response.headers)

        if response.is_success:
            return envelope_type(
                status_code=response.status_code,
                rate_limit=rate_limit,
                data=self._decode_payload(response, data_model),
            )

        error_body = self._decode_error_body(response)
        error = self._body_str(error_body, "error") or (
            response.reason_phrase or str(response.status_code)
        )
        message = self._body_str(error_body, "message") or error
        error_status = error_body.get("status")
        if not isinstance(error_status, int) or isinstance(error_status, bool):
            error_status = response.status_code

        envelope = envelope_type(
            status_code=response.status_code,
            rate_limit=rate_limit,
            error=error,
            error_status=error_status,
            error_message=message,
        )

        self._track("request_errors")
        logger.warning(
            "Helix API error",
            status_code=response.status_code,
            error=error,
            message=message,
            rate_limit_remaining=rate_limit.remaining,
        )
        raise HelixAPIError(
            message,
            status_code=response.status_code,
            response_data=error_body,
            response=envelope,
        )

    def _decode_payload(
        self, response: httpx.Response, data_model: Type[T]
    ) -> Optional[T]:
        if not response.content.strip():
            return None

        try:
            return data_model.model_validate_json(response.content)
        except ValidationError as e:
            self._track("request_errors")
            logger.warning(
                "Failed to decode Helix response",
                status_code=response.status_code,
                model=data_model.__name__,
                error_count=e.error_count(),
            )
            raise HelixDecodeError(
                f"Malformed {data_model.__name__} response body",
                status_code=response.status_code,
            ) from e

    @staticmethod
    def _body_str(body: Dict[str, Any], key: str) -> Optional[str]:
        """Non-empty string value from an error body; anything else is ignored."""
        value = body.get(key)
        return value if isinstance(value, str) and value else None

    @staticmethod
    def _decode_error_body(response: httpx.Response) -> Dict[str, Any]:
        """Decode an error body if it is a JSON object, else return {}."""
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}

    async def get(
        self, path: str, data_model: Type[T], params: Optional[BaseModel] = None
    ) -> HelixResponse[T]:
        """GET with parameters encoded as a query string."""
        return await self._call(HTTPMethod.GET, path, data_model, params)

    async def post_as_json(
        self, path: str, data_model: Type[T], params: Optional[BaseModel] = None
    ) -> HelixResponse[T]:
        """POST with parameters encoded as a JSON body."""
        return await self._call(HTTPMethod.POST, path, data_model, params)

    async def patch_as_json(
        self, path: str, data_model: Type[T], params: Optional[BaseModel] = None
    ) -> HelixResponse[T]:
        """PATCH with parameters encoded as a JSON body."""
        return await self._call(HTTPMethod.PATCH, path, data_model, params)

    # Drops endpoints

    async def get_drops_entitlements(
        self, params: Optional[GetDropEntitlementsParams] = None
    ) -> GetDropsEntitlementsResponse:
        """
        List entitlements awarded to users by your organization.

        Filtering by user_id returns that user's entitlements, filtering by
        game_id returns the game's, and both together narrow to that user and
        game. One page per call: pass ``response.pagination`` to
        ``params.next_page()`` or use ``get_next_drops_entitlements``.

        Requires User OAuth Token or App Access Token.
        """
        params = params or GetDropEntitlementsParams()
        resp = await self.get(
            DROPS_ENTITLEMENTS_PATH, ManyEntitlementsWithPagination, params
        )
        return GetDropsEntitlementsResponse(**resp.common_fields(), data=resp.data)

    async def get_next_drops_entitlements(
        self,
        params: GetDropEntitlementsParams,
        previous: GetDropsEntitlementsResponse,
    ) -> Optional[GetDropsEntitlementsResponse]:
        """Fetch the page after ``previous``, or None if it was the last page."""
        next_params = params.next_page(previous.pagination)
        if next_params is None:
            return None
        return await self.get_drops_entitlements(next_params)

    async def update_drops_entitlements(
        self, params: UpdateDropEntitlementsParams
    ) -> UpdateDropsEntitlementsResponse:
        """
        Update the fulfillment status of a batch of entitlements (max 100 ids).

        Ids are grouped by outcome in the result. Failed groups are part of a
        successful response, so callers must check each group's status.

        The client id of the token must own the game: Client ID > Organization
        ID > Game ID.
        """
        resp = await self.patch_as_json(
            DROPS_ENTITLEMENTS_PATH, ManyEntitlementStatuses, params
        )
        return UpdateDropsEntitlementsResponse(**resp.common_fields(), data=resp.data)
