"""
Helix API client package for drops entitlement integration.

This package provides a typed async HTTP client for the Helix API: parameter
encoding, a generic call dispatcher, response envelopes with rate limit
metadata, and caller-driven pagination.
"""

from .client import HelixAPIClient
from .auth import AuthProvider, StaticTokenProvider
from .constants import EntitlementCodeStatus, FulfillmentStatus, HTTPMethod
from .encoding import encode_body, encode_query
from .errors import (
    HelixError,
    HelixAPIError,
    HelixTransportError,
    HelixDecodeError,
)
from .models import (
    Entitlement,
    EntitlementStatus,
    ManyEntitlements,
    ManyEntitlementsWithPagination,
    ManyEntitlementStatuses,
    GetDropEntitlementsParams,
    UpdateDropEntitlementsParams,
    GetDropsEntitlementsResponse,
    UpdateDropsEntitlementsResponse,
)
from .response import HelixResponse, Pagination, RateLimit, ResponseCommon
from .endpoints import HelixEndpoints

__all__ = [
    "HelixAPIClient",
    "AuthProvider",
    "StaticTokenProvider",
    "EntitlementCodeStatus",
    "FulfillmentStatus",
    "HTTPMethod",
    "encode_body",
    "encode_query",
    "HelixError",
    "HelixAPIError",
    "HelixTransportError",
    "HelixDecodeError",
    "Entitlement",
    "EntitlementStatus",
    "ManyEntitlements",
    "ManyEntitlementsWithPagination",
    "ManyEntitlementStatuses",
    "GetDropEntitlementsParams",
    "UpdateDropEntitlementsParams",
    "GetDropsEntitlementsResponse",
    "UpdateDropsEntitlementsResponse",
    "HelixResponse",
    "Pagination",
    "RateLimit",
    "ResponseCommon",
    "HelixEndpoints",
]
