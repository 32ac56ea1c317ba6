"""
TweetSpan - entity extraction for tweet text

This package provides:
- Core: URL, hashtag, mention, list and cashtag extraction with code point offsets
- Validation: single-entity checks for URLs, hashtags, usernames and lists
- CLI: ``tweetspan extract`` and ``tweetspan validate``

Usage:
    import tweetspan

    tweetspan.extract_hashtags("Hello #world")   # ["#world"]
"""

from functools import lru_cache

from tweetspan.core import (
    Entity,
    EntityKind,
    ExtractionConfig,
    Extractor,
    Validator,
    build_pattern_set,
    remove_overlapping,
)

__version__ = "0.1.0"

__all__ = [
    "Entity",
    "EntityKind",
    "ExtractionConfig",
    "Extractor",
    "Validator",
    "build_pattern_set",
    "remove_overlapping",
    "extract_entities",
    "extract_urls",
    "extract_hashtags",
    "extract_mentioned_screen_names",
    "extract_cashtags",
]


@lru_cache(maxsize=1)
def default_extractor() -> Extractor:
    """Shared extractor over the default pattern set."""
    return Extractor()


def extract_entities(text: str | None) -> list[Entity]:
    return default_extractor().extract_entities_with_indices(text)


def extract_urls(text: str | None) -> list[str]:
    return default_extractor().extract_urls(text)


def extract_hashtags(text: str | None) -> list[str]:
    return default_extractor().extract_hashtags(text)


def extract_mentioned_screen_names(text: str | None) -> list[str]:
    return default_extractor().extract_mentioned_screen_names(text)


def extract_cashtags(text: str | None) -> list[str]:
    return default_extractor().extract_cashtags(text)
