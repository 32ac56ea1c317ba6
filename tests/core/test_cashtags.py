"""Tests for cashtag extraction."""

import pytest

from tweetspan.core.types import EntityKind


class TestExtractCashtags:
    """Tests for extract_cashtags_with_indices and extract_cashtags."""

    def test_indices(self, extractor):
        tags = extractor.extract_cashtags_with_indices("buy $AAPL and $goog.b now")

        assert [(t.text, t.indices) for t in tags] == [("$AAPL", (4, 9)), ("$goog.b", (14, 21))]
        assert all(t.kind is EntityKind.CASHTAG for t in tags)
        assert tags[0].value == "AAPL"

    def test_at_start(self, extractor):
        assert extractor.extract_cashtags("$TWTR up") == ["$TWTR"]

    def test_followed_by_punctuation(self, extractor):
        assert extractor.extract_cashtags("$AAPL's price") == ["$AAPL"]

    @pytest.mark.parametrize("text", ["$123", "a$AAPL", "$TOOLONGX", "price $"])
    def test_rejected(self, extractor, text):
        assert extractor.extract_cashtags(text) == []

    @pytest.mark.parametrize("text", [None, "", "no dollar"])
    def test_nothing_found(self, extractor, text):
        assert extractor.extract_cashtags_with_indices(text) == []
