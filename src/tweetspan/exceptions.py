"""
Unified exception hierarchy for TweetSpan.

All exception classes live here. No per-module exception files.

Hierarchy:
    TweetSpanError (base)
    ├── PatternBuildError
    │   ├── InvalidCodePointError
    │   ├── InvalidRangeError
    │   ├── InvalidFlagError
    │   ├── DuplicateFragmentError
    │   ├── FragmentCycleError
    │   └── PatternCompileError
    └── ConfigurationError

Warnings:
    UndefinedFragmentWarning

Pattern build errors are fatal: the pattern set is built once at startup and
a partially built set is never handed to an extractor.

Usage:
    from tweetspan.exceptions import PatternBuildError, InvalidCodePointError
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# ROOT
# =============================================================================


class TweetSpanError(Exception):
    """
    Base exception for all TweetSpan errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about what was being done
        details: Technical details (fragment names, code points, etc.)
    """

    def __init__(
        self,
        message: str,
        context: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.context = context
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]
        if self.context:
            parts.append(f"Context: {self.context}")
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            parts.append(f"Details: {detail_str}")
        return ". ".join(parts)


# =============================================================================
# PATTERN BUILD
# =============================================================================


class PatternBuildError(TweetSpanError):
    """Raised when the pattern set cannot be built."""

    def __init__(
        self,
        message: str,
        fragment: str | None = None,
        **kwargs: Any,
    ):
        details = kwargs.pop("details", {})
        if fragment:
            details["fragment"] = fragment
        super().__init__(message, details=details, **kwargs)
        self.fragment = fragment


class InvalidCodePointError(PatternBuildError):
    """Raised when a hex literal does not denote a Unicode scalar value."""

    def __init__(self, code_point: str, **kwargs: Any):
        details = kwargs.pop("details", {})
        details["code_point"] = code_point
        super().__init__(
            f"Could not create character for code {code_point}",
            details=details,
            **kwargs,
        )
        self.code_point = code_point


class InvalidRangeError(PatternBuildError):
    """Raised when a character range ends before it starts."""

    def __init__(self, start: str, end: str, **kwargs: Any):
        details = kwargs.pop("details", {})
        details["start"] = start
        details["end"] = end
        super().__init__(
            f"Invalid character range {start}-{end}: end precedes start",
            details=details,
            **kwargs,
        )
        self.start = start
        self.end = end


class InvalidFlagError(PatternBuildError):
    """Raised when a fragment literal carries an unknown modifier letter."""

    def __init__(self, flag: str, **kwargs: Any):
        super().__init__(f"{flag!r} is not a valid flag", **kwargs)
        self.flag = flag


class DuplicateFragmentError(PatternBuildError):
    """Raised when a fragment name is defined twice."""

    def __init__(self, name: str, **kwargs: Any):
        super().__init__(
            f"Fragment {name!r} is already defined",
            fragment=name,
            **kwargs,
        )


class FragmentCycleError(PatternBuildError):
    """Raised when fragments reference each other in a cycle."""

    def __init__(self, cycle: list[str], **kwargs: Any):
        super().__init__(
            f"Fragment reference cycle: {' -> '.join(cycle)}",
            fragment=cycle[0] if cycle else None,
            **kwargs,
        )
        self.cycle = cycle


class PatternCompileError(PatternBuildError):
    """Raised when a resolved fragment is not a valid regular expression."""

    def __init__(self, name: str, reason: str, **kwargs: Any):
        super().__init__(
            f"Fragment {name!r} failed to compile: {reason}",
            fragment=name,
            **kwargs,
        )
        self.reason = reason


# =============================================================================
# CONFIGURATION
# =============================================================================


class ConfigurationError(TweetSpanError):
    """Raised when settings cannot be loaded or are inconsistent."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        **kwargs: Any,
    ):
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details=details, **kwargs)
        self.config_key = config_key


# =============================================================================
# WARNINGS
# =============================================================================


class UndefinedFragmentWarning(UserWarning):
    """A ``#{name}`` placeholder referenced a fragment that does not exist.

    The placeholder is replaced with an empty string, which keeps old
    grammars loading but can hide a typo in a fragment name.
    """


__all__ = [
    "TweetSpanError",
    "PatternBuildError",
    "InvalidCodePointError",
    "InvalidRangeError",
    "InvalidFlagError",
    "DuplicateFragmentError",
    "FragmentCycleError",
    "PatternCompileError",
    "ConfigurationError",
    "UndefinedFragmentWarning",
]
