"""Extraction configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractionConfig:
    """Options consumed by the extractor.

    Use class methods for common presets:
        config = ExtractionConfig.default()  # protocol-less URLs, overlap checks
        config = ExtractionConfig.strict()   # only URLs with http(s)://
        config = ExtractionConfig.raw()      # no URL overlap checks
    """

    # Accept "example.com" as a URL, not only "http://example.com"
    extract_urls_without_protocol: bool = True

    # Drop hashtags, mentions and cashtags that fall inside a URL
    check_url_overlap: bool = True

    @classmethod
    def default(cls) -> ExtractionConfig:
        return cls()

    @classmethod
    def strict(cls) -> ExtractionConfig:
        """URLs must carry a protocol."""
        return cls(extract_urls_without_protocol=False)

    @classmethod
    def raw(cls) -> ExtractionConfig:
        """Every pattern match is reported, even inside URLs."""
        return cls(check_url_overlap=False)
