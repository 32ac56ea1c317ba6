"""Tests for hashtag extraction."""

import pytest

from tweetspan.core.types import EntityKind


class TestExtractHashtags:
    """Tests for extract_hashtags_with_indices and extract_hashtags."""

    def test_indices(self, extractor):
        tags = extractor.extract_hashtags_with_indices("Hello #world, this is #nice")

        assert [t.text for t in tags] == ["#world", "#nice"]
        assert [t.indices for t in tags] == [(6, 12), (22, 27)]
        assert all(t.kind is EntityKind.HASHTAG for t in tags)

    def test_projection_keeps_order(self, extractor):
        assert extractor.extract_hashtags("#b then #a") == ["#b", "#a"]

    def test_digits_only_rejected(self, extractor):
        assert extractor.extract_hashtags("#12345") == []

    def test_digits_with_letter_accepted(self, extractor):
        assert extractor.extract_hashtags("#123abc") == ["#123abc"]

    def test_underscore_counts_as_alpha(self, extractor):
        assert extractor.extract_hashtags("#1_2") == ["#1_2"]

    @pytest.mark.parametrize("tag", ["#日本語", "#привет", "#café", "#한국어", "#שלום"])
    def test_non_latin(self, extractor, tag):
        assert extractor.extract_hashtags(f"say {tag} now") == [tag]

    def test_fullwidth_hash_sign(self, extractor):
        assert extractor.extract_hashtags("＃tag") == ["＃tag"]

    def test_followed_by_hash_rejected(self, extractor):
        assert extractor.extract_hashtags("#foo#bar") == []

    def test_followed_by_scheme_separator_rejected(self, extractor):
        assert extractor.extract_hashtags("#http://example.com") == []

    def test_preceded_by_letter_rejected(self, extractor):
        assert extractor.extract_hashtags("a#b") == []

    def test_preceded_by_ampersand_rejected(self, extractor):
        """HTML entities such as &#39; are not hashtags."""
        assert extractor.extract_hashtags("it&#39s") == []

    @pytest.mark.parametrize("text", [None, "", "no hash sign here"])
    def test_nothing_found(self, extractor, text):
        assert extractor.extract_hashtags_with_indices(text) == []

    def test_non_string_raises(self, extractor):
        with pytest.raises(TypeError):
            extractor.extract_hashtags(42)


class TestHashtagUrlOverlap:
    """Hashtags inside URLs."""

    def test_fragment_absorbed_by_url(self, extractor):
        assert extractor.extract_hashtags_with_indices("check http://example.com/#frag") == []

    def test_overlap_check_disabled_by_argument(self, extractor):
        tags = extractor.extract_hashtags_with_indices(
            "check http://example.com/#frag", check_url_overlap=False,
        )

        assert [(t.text, t.indices) for t in tags] == [("#frag", (25, 30))]

    def test_overlap_check_disabled_by_config(self, raw_extractor):
        assert raw_extractor.extract_hashtags("check http://example.com/#frag") == ["#frag"]

    def test_hashtag_outside_url_kept(self, extractor):
        text = "#python http://example.com/#frag #code"

        assert extractor.extract_hashtags(text) == ["#python", "#code"]


class TestHashtagProperties:
    """General properties of hashtag extraction."""

    SAMPLES = [
        "Hello #world, this is #nice",
        "日本語 #日本語 and #tag",
        "\U0001F600 #emoji \U0001F600 #again",
        "check http://example.com/#frag #real",
        "#a #b #c",
    ]

    @pytest.mark.parametrize("text", SAMPLES)
    def test_text_matches_indices(self, extractor, text):
        for tag in extractor.extract_hashtags_with_indices(text):
            assert 0 <= tag.start < tag.end <= len(text)
            assert text[tag.start:tag.end] == tag.text

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, extractor, text):
        assert extractor.extract_hashtags_with_indices(text) == extractor.extract_hashtags_with_indices(text)

    @pytest.mark.parametrize("text", SAMPLES)
    def test_disjoint_from_urls(self, extractor, text):
        tags = extractor.extract_hashtags_with_indices(text)
        urls = extractor.extract_urls_with_indices(text)

        for tag in tags:
            for url in urls:
                assert not tag.overlaps(url)
