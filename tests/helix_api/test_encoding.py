"""
Tests for parameter encoding.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field

from helix_api.constants import FulfillmentStatus
from helix_api.encoding import encode_body, encode_query
from helix_api.models import GetDropEntitlementsParams, UpdateDropEntitlementsParams


class AliasedParams(BaseModel):
    """Parameter model exercising aliases and scalar formatting."""

    broadcaster: Optional[str] = Field(None, alias="broadcaster_id")
    started_at: Optional[datetime] = None
    live_only: bool = False
    ids: List[str] = Field(default_factory=list, alias="id")
    language: str = "en"


class TestEncodeQuery:
    """Test cases for encode_query."""

    def test_unset_page_size_emits_default(self):
        """Test that an unset page size is sent as the declared default."""
        pairs = encode_query(GetDropEntitlementsParams())

        assert ("first", "20") in pairs
        assert [value for key, value in pairs if key == "first"] == ["20"]

    def test_explicit_page_size_overrides_default(self):
        """Test that an explicit page size replaces the default exactly."""
        pairs = encode_query(GetDropEntitlementsParams(first=1000))

        assert [value for key, value in pairs if key == "first"] == ["1000"]

    def test_documented_limit_is_not_enforced(self):
        """Test that values above documented limits pass through unchanged."""
        pairs = encode_query(GetDropEntitlementsParams(first=5000))

        assert ("first", "5000") in pairs

    def test_absent_filters_are_omitted(self):
        """Test that only set filters are emitted."""
        pairs = encode_query(
            GetDropEntitlementsParams(user_id="user-1", game_id="game-1")
        )

        assert set(pairs) == {
            ("user_id", "user-1"),
            ("game_id", "game-1"),
            ("first", "20"),
        }

    def test_empty_string_is_omitted(self):
        """Test that empty strings count as absent."""
        pairs = encode_query(GetDropEntitlementsParams(user_id="", after=""))

        keys = {key for key, _ in pairs}
        assert "user_id" not in keys
        assert "after" not in keys

    def test_sequence_emits_repeated_keys_in_order(self):
        """Test repeated-key encoding of a batch id list."""
        pairs = encode_query(AliasedParams(id=["c", "a", "b"]))

        id_values = [value for key, value in pairs if key == "id"]
        assert id_values == ["c", "a", "b"]

    def test_alias_is_wire_name(self):
        """Test that aliases are used as wire names."""
        pairs = encode_query(AliasedParams(broadcaster_id="1234"))

        assert ("broadcaster_id", "1234") in pairs
        assert "broadcaster" not in {key for key, _ in pairs}

    def test_scalar_formatting(self):
        """Test bool, datetime and enum formatting."""
        started = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        pairs = encode_query(AliasedParams(started_at=started, live_only=True))

        assert ("live_only", "true") in pairs
        assert ("started_at", "2024-05-01T12:00:00+00:00") in pairs

        update_pairs = encode_query(
            UpdateDropEntitlementsParams(
                entitlement_ids=["x"],
                fulfillment_status=FulfillmentStatus.CLAIMED,
            )
        )
        assert ("fulfillment_status", "CLAIMED") in update_pairs

    def test_zero_page_size_emits_default(self):
        """Test that a zero page size is sent as the declared default."""
        pairs = encode_query(GetDropEntitlementsParams(first=0))

        assert [value for key, value in pairs if key == "first"] == ["20"]

    def test_zero_without_default_is_omitted(self):
        """Test that a zero value with no non-zero default is not sent."""

        class OffsetParams(BaseModel):
            offset: int = 0
            limit: Optional[int] = None

        assert encode_query(OffsetParams(offset=0, limit=0)) == []
        assert encode_query(OffsetParams(offset=5)) == [("offset", "5")]

    def test_empty_value_falls_back_to_default(self):
        """Test that an empty value with a non-empty default sends the default."""
        pairs = encode_query(AliasedParams(language=""))

        assert ("language", "en") in pairs

    def test_none_params(self):
        """Test that no parameters encode to no pairs."""
        assert encode_query(None) == []


class TestEncodeBody:
    """Test cases for encode_body."""

    def test_update_body(self):
        """Test JSON body for a fulfillment update."""
        body = encode_body(
            UpdateDropEntitlementsParams(
                entitlement_ids=["a", "b", "c"],
                fulfillment_status=FulfillmentStatus.FULFILLED,
            )
        )

        assert body == {
            "entitlement_ids": ["a", "b", "c"],
            "fulfillment_status": "FULFILLED",
        }

    def test_body_uses_aliases_and_drops_none(self):
        """Test that bodies use wire names and skip absent fields."""
        body = encode_body(AliasedParams(id=["1"]))

        assert body == {"live_only": False, "id": ["1"], "language": "en"}

    def test_batch_limit_is_not_enforced(self):
        """Test that more than 100 ids are sent unchanged."""
        ids = [f"id-{i}" for i in range(150)]
        body = encode_body(
            UpdateDropEntitlementsParams(
                entitlement_ids=ids, fulfillment_status=FulfillmentStatus.CLAIMED
            )
        )

        assert body["entitlement_ids"] == ids

    def test_none_params(self):
        """Test that no parameters encode to no body."""
        assert encode_body(None) is None

    def test_empty_value_falls_back_to_default(self):
        """Test that bodies send the declared default for empty values."""
        body = encode_body(AliasedParams(language=""))

        assert body["language"] == "en"

    def test_zero_page_size_emits_default(self):
        """Test that a zero page size is sent as the declared default."""
        body = encode_body(GetDropEntitlementsParams(first=0, game_id="33214"))

        assert body == {"game_id": "33214", "first": 20}

    def test_body_and_query_agree(self):
        """Test that both encodings carry the same fields and values."""
        params = AliasedParams(
            broadcaster_id="1234",
            language="",
            id=["c", "a"],
            started_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
        )

        body = encode_body(params)
        pairs = encode_query(params)

        assert set(body) == {key for key, _ in pairs}
        assert body["id"] == [value for key, value in pairs if key == "id"]
        assert body["language"] == "en"
        assert ("language", "en") in pairs
        assert ("broadcaster_id", "1234") in pairs
        assert body["broadcaster_id"] == "1234"
        assert datetime.fromisoformat(
            body["started_at"].replace("Z", "+00:00")
        ) == datetime.fromisoformat(dict(pairs)["started_at"])
