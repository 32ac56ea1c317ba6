"""
TweetSpan core: pattern grammar, entity extraction and validation.

Usage:
    from tweetspan.core import Extractor

    extractor = Extractor()
    for entity in extractor.extract_hashtags_with_indices("Hello #world"):
        print(entity.text, entity.indices)
"""

from .config import ExtractionConfig
from .extraction import Extractor, remove_overlapping
from .patterns import PatternSet, build_pattern_set, default_pattern_set
from .types import Entity, EntityKind
from .validation import Validator

__all__ = [
    "Entity",
    "EntityKind",
    "ExtractionConfig",
    "Extractor",
    "PatternSet",
    "Validator",
    "build_pattern_set",
    "default_pattern_set",
    "remove_overlapping",
]
