"""
Pattern composition: fragments, the registry that resolves them, and the
default entity grammar.

Usage:
    from tweetspan.core.patterns import default_pattern_set

    patterns = default_pattern_set()
    patterns["validHashtag"].finditer("Hello #world")
"""

from .fragment import Flag, Fragment, ResolvedPattern, parse_literal
from .grammar import build_pattern_set, default_pattern_set, define_grammar
from .registry import FragmentRegistry, PatternSet, string_supplant, substitute_placeholders

__all__ = [
    "Flag",
    "Fragment",
    "ResolvedPattern",
    "parse_literal",
    "FragmentRegistry",
    "PatternSet",
    "string_supplant",
    "substitute_placeholders",
    "define_grammar",
    "build_pattern_set",
    "default_pattern_set",
]
