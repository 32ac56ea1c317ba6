"""Tests for ExtractionConfig."""

import dataclasses

import pytest

from tweetspan.core.config import ExtractionConfig


class TestExtractionConfig:
    """Tests for ExtractionConfig presets."""

    def test_defaults(self):
        config = ExtractionConfig()

        assert config.extract_urls_without_protocol is True
        assert config.check_url_overlap is True
        assert ExtractionConfig.default() == config

    def test_strict(self):
        config = ExtractionConfig.strict()

        assert config.extract_urls_without_protocol is False
        assert config.check_url_overlap is True

    def test_raw(self):
        config = ExtractionConfig.raw()

        assert config.extract_urls_without_protocol is True
        assert config.check_url_overlap is False

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ExtractionConfig().check_url_overlap = False
