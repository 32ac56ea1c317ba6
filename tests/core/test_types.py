"""Tests for core types module.

Tests cover:
- Entity creation and validation
- Entity properties and serialization
"""

import pytest

from tweetspan.core.types import Entity, EntityKind


class TestEntity:
    """Tests for Entity dataclass."""

    def test_indices_and_length(self):
        entity = Entity(kind=EntityKind.HASHTAG, text="#world", start=6, end=12)

        assert entity.indices == (6, 12)
        assert len(entity) == 6

    def test_kind_from_string(self):
        entity = Entity(kind="url", text="example.com", start=0, end=11)

        assert entity.kind is EntityKind.URL

    def test_negative_start_raises(self):
        with pytest.raises(ValueError):
            Entity(kind=EntityKind.HASHTAG, text="#a", start=-1, end=1)

    def test_empty_span_raises(self):
        with pytest.raises(ValueError):
            Entity(kind=EntityKind.HASHTAG, text="", start=3, end=3)

    def test_text_length_mismatch_raises(self):
        with pytest.raises(ValueError):
            Entity(kind=EntityKind.HASHTAG, text="#world", start=0, end=3)

    def test_frozen(self):
        entity = Entity(kind=EntityKind.HASHTAG, text="#a", start=0, end=2)

        with pytest.raises(AttributeError):
            entity.start = 1

    def test_overlaps(self, entity_factory):
        first = entity_factory(0, 10)
        second = entity_factory(5, 15)
        adjacent = entity_factory(10, 12)

        assert first.overlaps(second)
        assert second.overlaps(first)
        assert not first.overlaps(adjacent)


class TestEntityValue:
    """Tests for Entity.value."""

    def test_hashtag_value_drops_sign(self):
        assert Entity(kind=EntityKind.HASHTAG, text="#world", start=0, end=6).value == "world"

    def test_cashtag_value_drops_dollar(self):
        assert Entity(kind=EntityKind.CASHTAG, text="$AAPL", start=0, end=5).value == "AAPL"

    def test_url_value_is_text(self):
        assert Entity(kind=EntityKind.URL, text="example.com", start=0, end=11).value == "example.com"

    def test_list_value(self):
        entity = Entity(
            kind=EntityKind.LIST, text="@jack/team", start=0, end=10,
            screen_name="jack", list_slug="/team",
        )

        assert entity.value == "jack/team"


class TestEntityToDict:
    """Tests for Entity.to_dict."""

    def test_hashtag(self):
        entity = Entity(kind=EntityKind.HASHTAG, text="#world", start=6, end=12)

        assert entity.to_dict() == {"kind": "hashtag", "text": "#world", "indices": [6, 12]}

    def test_url(self):
        entity = Entity(kind=EntityKind.URL, text="http://t.co/x", start=0, end=13)

        assert entity.to_dict() == {"kind": "url", "text": "http://t.co/x", "indices": [0, 13]}

    def test_cashtag(self):
        entity = Entity(kind=EntityKind.CASHTAG, text="$AAPL", start=4, end=9)

        assert entity.to_dict() == {"kind": "cashtag", "text": "$AAPL", "indices": [4, 9]}

    def test_mention(self):
        entity = Entity(
            kind=EntityKind.MENTION, text="@jack", start=0, end=5, screen_name="jack",
        )

        assert entity.to_dict() == {
            "kind": "mention", "text": "@jack", "indices": [0, 5],
            "screen_name": "jack", "list_slug": "",
        }

    def test_list(self):
        entity = Entity(
            kind=EntityKind.LIST, text="@jack/team", start=0, end=10,
            screen_name="jack", list_slug="/team",
        )

        assert entity.to_dict()["list_slug"] == "/team"
