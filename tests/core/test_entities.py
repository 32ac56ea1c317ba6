"""Tests for combined entity extraction and the module-level helpers."""

import pytest

import tweetspan
from tweetspan.core.types import EntityKind

MIXED = "Hey @jack check #python at http://example.com/#frag $AAPL"


@pytest.mark.integration
class TestExtractEntities:
    """Tests for extract_entities_with_indices."""

    def test_all_kinds_in_order(self, extractor):
        entities = extractor.extract_entities_with_indices(MIXED)

        assert [(e.kind, e.indices) for e in entities] == [
            (EntityKind.MENTION, (4, 9)),
            (EntityKind.HASHTAG, (16, 23)),
            (EntityKind.URL, (27, 51)),
            (EntityKind.CASHTAG, (52, 57)),
        ]

    def test_pairwise_disjoint(self, extractor):
        entities = extractor.extract_entities_with_indices(MIXED)

        for a, b in zip(entities, entities[1:]):
            assert a.end <= b.start

    def test_text_matches_indices(self, extractor):
        for entity in extractor.extract_entities_with_indices(MIXED):
            assert MIXED[entity.start:entity.end] == entity.text

    def test_to_dict(self, extractor):
        entities = extractor.extract_entities_with_indices("#hello")

        assert [e.to_dict() for e in entities] == [{"kind": "hashtag", "text": "#hello", "indices": [0, 6]}]

    def test_records_slice_back_to_text(self, extractor):
        for record in (e.to_dict() for e in extractor.extract_entities_with_indices(MIXED)):
            start, end = record["indices"]
            assert MIXED[start:end] == record["text"]

    @pytest.mark.parametrize("text", [None, "", "nothing to see"])
    def test_nothing_found(self, extractor, text):
        assert extractor.extract_entities_with_indices(text) == []


class TestModuleHelpers:
    """Tests for the package-level convenience functions."""

    def test_extract_hashtags(self):
        assert tweetspan.extract_hashtags("Hello #world") == ["#world"]

    def test_extract_urls(self):
        assert tweetspan.extract_urls("visit example.com today") == ["example.com"]

    def test_extract_mentioned_screen_names(self):
        assert tweetspan.extract_mentioned_screen_names("@jack hi") == ["jack"]

    def test_extract_cashtags(self):
        assert tweetspan.extract_cashtags("$AAPL") == ["$AAPL"]

    def test_extract_entities(self):
        kinds = [e.kind for e in tweetspan.extract_entities(MIXED)]

        assert kinds == [EntityKind.MENTION, EntityKind.HASHTAG, EntityKind.URL, EntityKind.CASHTAG]
