"""
Validation of single URLs, hashtags, usernames and lists.

URL validation follows the ABNF of RFC 3986, somewhat tightened: hosts must
be IPs or dotted domain names, and with ``unicode_domains`` internationalized
labels are accepted unencoded.
"""

from __future__ import annotations

import re

from .extraction import Extractor
from .patterns import PatternSet, default_pattern_set

_HTTP_SCHEME = re.compile(r"https?", re.IGNORECASE)


def _full_match(value: str | None, pattern: re.Pattern[str], optional: bool = False) -> bool:
    if value is None:
        return optional
    return pattern.fullmatch(value) is not None


class Validator:
    """Stateless validator backed by the shared pattern set."""

    def __init__(
        self,
        patterns: PatternSet | None = None,
        extractor: Extractor | None = None,
    ) -> None:
        self.patterns = patterns if patterns is not None else default_pattern_set()
        self.extractor = extractor or Extractor(self.patterns)

    def is_valid_url(
        self,
        text: str | None,
        unicode_domains: bool = True,
        require_protocol: bool = True,
    ) -> bool:
        """
        Check whether *text* is a single, well-formed URL.

        Args:
            text: Candidate URL
            unicode_domains: Accept unencoded internationalized domain names
            require_protocol: Require an http or https scheme
        """
        if not text:
            return False

        p = self.patterns
        parts = p["validateUrlUnencoded"].fullmatch(text)
        if parts is None:
            return False

        scheme, authority, path, query, fragment = parts.groups()

        if require_protocol and not (
            _full_match(scheme, p["validateUrlScheme"])
            and _HTTP_SCHEME.fullmatch(scheme)
        ):
            return False
        if path and not _full_match(path, p["validateUrlPath"]):
            return False
        if not _full_match(query, p["validateUrlQuery"], optional=True):
            return False
        if not _full_match(fragment, p["validateUrlFragment"], optional=True):
            return False

        if unicode_domains:
            return _full_match(authority, p["validateUrlUnicodeAuthority"])
        return _full_match(authority, p["validateUrlAuthority"])

    def is_valid_hashtag(self, text: str | None) -> bool:
        """True if *text* is exactly one hashtag, e.g. ``"#python"``."""
        if not text:
            return False
        extracted = self.extractor.extract_hashtags_with_indices(text, check_url_overlap=False)
        return len(extracted) == 1 and extracted[0].text == text

    def is_valid_username(self, text: str | None) -> bool:
        """True if *text* is exactly one mention, e.g. ``"@jack"``."""
        if not text:
            return False
        extracted = self.extractor.extract_mentioned_screen_names_with_indices(
            text, check_url_overlap=False,
        )
        return len(extracted) == 1 and extracted[0].text == text

    def is_valid_list(self, text: str | None) -> bool:
        """True if *text* is exactly one list reference, e.g. ``"@jack/team"``."""
        if not text:
            return False
        match = self.patterns["validMentionOrList"].fullmatch(text)
        return match is not None and match.group(1) == "" and bool(match.group(4))

    def has_invalid_characters(self, text: str | None) -> bool:
        """True if *text* holds a BOM, non-character or directional override."""
        if not text:
            return False
        return self.patterns["invalidChars"].search(text) is not None
