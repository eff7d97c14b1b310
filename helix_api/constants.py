"""Helix API constants and enum definitions."""

from enum import Enum

DEFAULT_BASE_URL = "https://api.twitch.tv/helix"
USER_AGENT = "helix-api-client/0.1"

# Auth headers
AUTHORIZATION_HEADER = "Authorization"
CLIENT_ID_HEADER = "Client-Id"

# Rate limit headers, present on every Helix response
RATE_LIMIT_LIMIT_HEADER = "Ratelimit-Limit"
RATE_LIMIT_REMAINING_HEADER = "Ratelimit-Remaining"
RATE_LIMIT_RESET_HEADER = "Ratelimit-Reset"

# Documented upstream limits. Not validated client-side.
DROPS_ENTITLEMENTS_DEFAULT_PAGE_SIZE = 20
DROPS_ENTITLEMENTS_MAX_PAGE_SIZE = 1000
DROPS_ENTITLEMENTS_MAX_UPDATE_IDS = 100


class HTTPMethod(str, Enum):
    """HTTP verbs used by the dispatcher."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class FulfillmentStatus(str, Enum):
    """Target fulfillment status for an entitlement update.

    Sent as ``FULFILLED``, the value the API accepts. Some API references spell
    it ``FULLFILLED``; that spelling is not sent.
    """

    CLAIMED = "CLAIMED"
    FULFILLED = "FULFILLED"


class EntitlementCodeStatus(str, Enum):
    """Per-id outcome of an entitlement fulfillment update."""

    SUCCESS = "SUCCESS"
    INVALID_ID = "INVALID_ID"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    UPDATE_FAILED = "UPDATE_FAILED"
