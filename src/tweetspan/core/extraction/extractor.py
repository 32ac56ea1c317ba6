"""
Entity extraction over tweet text.

The Extractor applies the frozen pattern set to text and turns matches into
Entity records. It holds no mutable state, so one instance can be shared
between threads.

Usage:
    from tweetspan.core.extraction import Extractor

    extractor = Extractor()
    for entity in extractor.extract_entities_with_indices(text):
        print(entity.kind.value, entity.indices)
"""

from __future__ import annotations

import logging
import re

from ..config import ExtractionConfig
from ..patterns import PatternSet, default_pattern_set
from ..types import Entity, EntityKind
from .overlap import remove_overlapping

logger = logging.getLogger(__name__)


def _coerce_text(text: object) -> str:
    """Normalize extractor input; None becomes the empty string."""
    if text is None:
        return ""
    if not isinstance(text, str):
        raise TypeError(f"text must be str or None, not {type(text).__name__}")
    return text


class Extractor:
    """
    Extracts URLs, hashtags, mentions, lists and cashtags.

    Args:
        patterns: Frozen pattern set; the shared default when omitted
        config: Extraction options; ``ExtractionConfig.default()`` when omitted
    """

    def __init__(
        self,
        patterns: PatternSet | None = None,
        config: ExtractionConfig | None = None,
    ) -> None:
        self.patterns = patterns if patterns is not None else default_pattern_set()
        self.config = config or ExtractionConfig.default()

        p = self.patterns
        self._extract_url = p["extractUrl"]
        self._valid_ascii_domain = p["validAsciiDomain"]
        self._invalid_short_domain = p["invalidShortDomain"]
        self._invalid_preceding = p["invalidUrlWithoutProtocolPrecedingChars"]
        self._valid_tco_url = p["validTcoUrl"]
        self._hash_signs = p["hashSigns"]
        self._valid_hashtag = p["validHashtag"]
        self._end_hashtag = p["endHashtagMatch"]
        self._at_signs = p["atSigns"]
        self._valid_mention_or_list = p["validMentionOrList"]
        self._end_mention = p["endMentionMatch"]
        self._valid_reply = p["validReply"]
        self._valid_cashtag = p["validCashtag"]

    def __repr__(self) -> str:
        return f"Extractor(config={self.config!r})"

    # =========================================================================
    # COMBINED
    # =========================================================================

    def extract_entities_with_indices(self, text: str | None) -> list[Entity]:
        """All entities in *text*, overlaps removed, ordered by position."""
        text = _coerce_text(text)
        if not text:
            return []

        entities: list[Entity] = self.extract_urls_with_indices(text)
        entities += self.extract_hashtags_with_indices(text, check_url_overlap=False)
        entities += self.extract_mentions_or_lists_with_indices(text, check_url_overlap=False)
        entities += self.extract_cashtags_with_indices(text, check_url_overlap=False)

        remove_overlapping(entities)
        logger.debug("Extracted %d entities from %d chars", len(entities), len(text))
        return entities

    # =========================================================================
    # URLS
    # =========================================================================

    def extract_urls(self, text: str | None) -> list[str]:
        return [e.text for e in self.extract_urls_with_indices(text)]

    def extract_urls_with_indices(
        self,
        text: str | None,
        extract_urls_without_protocol: bool | None = None,
    ) -> list[Entity]:
        """
        Extract URLs with their code point offsets.

        URLs without ``http://`` or ``https://`` are accepted only when
        protocol-less extraction is enabled and their domain is plain ASCII
        (mixed domains are split into their ASCII parts).

        Args:
            text: Text to scan
            extract_urls_without_protocol: Overrides the configured value

        Returns:
            URL entities in order of appearance
        """
        text = _coerce_text(text)
        without_protocol = (
            self.config.extract_urls_without_protocol
            if extract_urls_without_protocol is None
            else extract_urls_without_protocol
        )

        if not text:
            return []
        if without_protocol:
            if "." not in text:
                return []
        elif ":" not in text:
            return []

        urls: list[Entity] = []
        for match in self._extract_url.finditer(text):
            protocol = match.group(4)
            if protocol:
                urls.append(self._url_with_protocol(match))
            elif without_protocol and not self._invalid_preceding.search(match.group(2)):
                urls.extend(self._urls_without_protocol(text, match))
        return urls

    def _url_with_protocol(self, match: re.Match[str]) -> Entity:
        start, end = match.span(3)
        url = match.group(3)

        # t.co links carry no further path or query
        tco = self._valid_tco_url.match(url)
        if tco:
            url = tco.group()
            end = start + len(url)

        return Entity(
            kind=EntityKind.URL,
            text=url,
            start=start,
            end=end,
            protocol=match.group(4),
            domain=match.group(5),
        )

    def _urls_without_protocol(self, text: str, match: re.Match[str]) -> list[Entity]:
        """Split a protocol-less match into its ASCII-only domains."""
        domain = match.group(5)
        domain_start, domain_end = match.span(5)
        has_path = match.group(7) is not None

        found = list(self._valid_ascii_domain.finditer(domain))
        if not found:
            return []

        urls: list[Entity] = []
        for i, ascii_match in enumerate(found):
            start = domain_start + ascii_match.start()
            end = domain_start + ascii_match.end()
            ascii_domain = ascii_match.group()
            short = self._invalid_short_domain.search(ascii_domain) is not None
            is_last = i == len(found) - 1

            # The path is reattached only when it directly follows the domain
            if is_last and has_path and end == domain_end:
                end = match.end(3)
            elif short:
                continue

            urls.append(Entity(
                kind=EntityKind.URL,
                text=text[start:end],
                start=start,
                end=end,
                domain=ascii_domain,
            ))
        return urls

    # =========================================================================
    # HASHTAGS
    # =========================================================================

    def extract_hashtags(self, text: str | None) -> list[str]:
        """Hashtag texts (``"#tag"``) in order of appearance."""
        return [e.text for e in self.extract_hashtags_with_indices(text)]

    def extract_hashtags_with_indices(
        self,
        text: str | None,
        check_url_overlap: bool | None = None,
    ) -> list[Entity]:
        """
        Extract hashtags with their code point offsets.

        A hashtag followed directly by another hash sign or by ``://`` is
        rejected. With the URL overlap check on, hashtags inside a URL
        (``http://example.com/#frag``) are dropped.
        """
        text = _coerce_text(text)
        if not text or not self._hash_signs.search(text):
            return []

        tags: list[Entity] = []
        for match in self._valid_hashtag.finditer(text):
            if self._end_hashtag.match(text[match.end():]):
                continue
            start, end = match.start(2), match.end()
            tags.append(Entity(
                kind=EntityKind.HASHTAG,
                text=text[start:end],
                start=start,
                end=end,
            ))

        return self._without_url_overlap(text, tags, check_url_overlap)

    # =========================================================================
    # MENTIONS AND LISTS
    # =========================================================================

    def extract_mentioned_screen_names(self, text: str | None) -> list[str]:
        """Screen names mentioned in *text*, without the at sign."""
        return [
            e.screen_name for e in self.extract_mentioned_screen_names_with_indices(text)
            if e.screen_name
        ]

    def extract_mentioned_screen_names_with_indices(
        self,
        text: str | None,
        check_url_overlap: bool | None = None,
    ) -> list[Entity]:
        """Mentions only; list references are left out."""
        return [
            e for e in self.extract_mentions_or_lists_with_indices(text, check_url_overlap)
            if e.kind is EntityKind.MENTION
        ]

    def extract_mentions_or_lists_with_indices(
        self,
        text: str | None,
        check_url_overlap: bool | None = None,
    ) -> list[Entity]:
        """
        Extract ``@user`` mentions and ``@user/list`` references.

        A candidate followed by another at sign, an accented Latin letter
        or ``://`` is rejected, as are screen names starting with "http".
        """
        text = _coerce_text(text)
        if not text or not self._at_signs.search(text):
            return []

        found: list[Entity] = []
        for match in self._valid_mention_or_list.finditer(text):
            screen_name = match.group(3)
            if self._end_mention.match(text[match.end():]) or screen_name.startswith("http"):
                continue

            list_slug = match.group(4)
            start, end = match.start(2), match.end()
            found.append(Entity(
                kind=EntityKind.LIST if list_slug else EntityKind.MENTION,
                text=text[start:end],
                start=start,
                end=end,
                screen_name=screen_name,
                list_slug=list_slug,
            ))

        return self._without_url_overlap(text, found, check_url_overlap)

    def extract_reply_screen_name(self, text: str | None) -> str | None:
        """Screen name replied to, when *text* opens with a mention."""
        text = _coerce_text(text)
        if not text:
            return None

        match = self._valid_reply.match(text)
        if match is None:
            return None
        screen_name = match.group(1)
        if self._end_mention.match(text[match.end():]) or screen_name.startswith("http"):
            return None
        return screen_name

    # =========================================================================
    # CASHTAGS
    # =========================================================================

    def extract_cashtags(self, text: str | None) -> list[str]:
        """Cashtag texts (``"$AAPL"``) in order of appearance."""
        return [e.text for e in self.extract_cashtags_with_indices(text)]

    def extract_cashtags_with_indices(
        self,
        text: str | None,
        check_url_overlap: bool | None = None,
    ) -> list[Entity]:
        text = _coerce_text(text)
        if not text or "$" not in text:
            return []

        tags: list[Entity] = []
        for match in self._valid_cashtag.finditer(text):
            start, end = match.start(2), match.end()
            tags.append(Entity(
                kind=EntityKind.CASHTAG,
                text=text[start:end],
                start=start,
                end=end,
            ))

        return self._without_url_overlap(text, tags, check_url_overlap)

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _without_url_overlap(
        self,
        text: str,
        entities: list[Entity],
        check_url_overlap: bool | None,
    ) -> list[Entity]:
        """Drop *entities* that overlap a URL found in *text*."""
        check = self.config.check_url_overlap if check_url_overlap is None else check_url_overlap
        if not check or not entities:
            return entities

        urls = self.extract_urls_with_indices(text)
        if not urls:
            return entities

        kinds = {e.kind for e in entities}
        merged = entities + urls
        remove_overlapping(merged)
        kept = [e for e in merged if e.kind in kinds]
        if len(kept) != len(entities):
            logger.debug("Dropped %d entities inside URLs", len(entities) - len(kept))
        return kept
