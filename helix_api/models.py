"""Pydantic models for Helix drops entitlement requests and responses."""

from datetime import datetime
from typing import Dict, List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import (
    DROPS_ENTITLEMENTS_DEFAULT_PAGE_SIZE,
    EntitlementCodeStatus,
    FulfillmentStatus,
)
from .response import HelixResponse, Pagination


# Payloads


class Entitlement(BaseModel):
    """A single benefit granted to a user for a game."""

    id: str
    benefit_id: str
    timestamp: datetime
    user_id: str
    game_id: str

    model_config = ConfigDict(frozen=True)


class ManyEntitlements(BaseModel):
    """Entitlements list as returned under ``data``."""

    entitlements: List[Entitlement] = Field(default_factory=list, alias="data")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("entitlements", mode="before")
    @classmethod
    def null_data_is_empty(cls, v):
        return [] if v is None else v


class ManyEntitlementsWithPagination(ManyEntitlements):
    """Entitlements page plus the cursor for the next one."""

    pagination: Pagination = Field(default_factory=Pagination)

    @field_validator("pagination", mode="before")
    @classmethod
    def null_pagination_is_last_page(cls, v):
        return {} if v is None else v


class EntitlementStatus(BaseModel):
    """Entitlement ids that share one update outcome."""

    status: EntitlementCodeStatus
    ids: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class ManyEntitlementStatuses(BaseModel):
    """Update outcome groups as returned under ``data``.

    Group order is not meaningful; look statuses up rather than indexing.
    """

    entitlement_statuses: List[EntitlementStatus] = Field(
        default_factory=list, alias="data"
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("entitlement_statuses", mode="before")
    @classmethod
    def null_data_is_empty(cls, v):
        return [] if v is None else v

    def ids_by_status(self) -> Dict[EntitlementCodeStatus, List[str]]:
        """Merge groups by status code."""
        grouped: Dict[EntitlementCodeStatus, List[str]] = {}
        for group in self.entitlement_statuses:
            grouped.setdefault(group.status, []).extend(group.ids)
        return grouped

    def all_ids(self) -> Set[str]:
        """Every id mentioned in any group."""
        return {
            entitlement_id
            for group in self.entitlement_statuses
            for entitlement_id in group.ids
        }

    def failed_ids(self) -> Set[str]:
        """Ids whose update did not succeed."""
        return {
            entitlement_id
            for group in self.entitlement_statuses
            if group.status != EntitlementCodeStatus.SUCCESS
            for entitlement_id in group.ids
        }


# Parameters


class GetDropEntitlementsParams(BaseModel):
    """Filters for listing drops entitlements.

    ``first`` is documented by the API as at most 1000. Larger values are sent
    unchanged and the API decides how to handle them.
    """

    id: Optional[str] = None
    user_id: Optional[str] = None
    game_id: Optional[str] = None
    after: Optional[str] = None
    first: int = DROPS_ENTITLEMENTS_DEFAULT_PAGE_SIZE

    model_config = ConfigDict(frozen=True)

    def next_page(
        self, pagination: Optional[Pagination]
    ) -> Optional["GetDropEntitlementsParams"]:
        """Same filters continuing after ``pagination``, or None on the last page."""
        if pagination is None or not pagination.has_next:
            return None
        return self.model_copy(update={"after": pagination.cursor})


class UpdateDropEntitlementsParams(BaseModel):
    """Fulfillment update for a batch of entitlements.

    The API accepts at most 100 ids per call. This is not checked locally.
    """

    entitlement_ids: List[str] = Field(default_factory=list)
    fulfillment_status: FulfillmentStatus

    model_config = ConfigDict(frozen=True)


# Endpoint responses


class GetDropsEntitlementsResponse(HelixResponse[ManyEntitlementsWithPagination]):
    """Result of listing drops entitlements."""

    @property
    def entitlements(self) -> List[Entitlement]:
        return self.data.entitlements if self.data is not None else []

    @property
    def pagination(self) -> Pagination:
        return self.data.pagination if self.data is not None else Pagination()


class UpdateDropsEntitlementsResponse(HelixResponse[ManyEntitlementStatuses]):
    """Result of a fulfillment status update."""

    @property
    def entitlement_statuses(self) -> List[EntitlementStatus]:
        return self.data.entitlement_statuses if self.data is not None else []
