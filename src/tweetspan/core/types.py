"""
Core data types for entity extraction.

- EntityKind: the kinds of entity the extractor reports
- Entity: a positioned, immutable entity record

Offsets are code point (Unicode scalar) offsets into the source text, which
is what Python's ``str`` indexing and ``re`` match positions report.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "EntityKind",
    "Entity",
]


class EntityKind(str, Enum):
    """Kinds of entity found in tweet text."""
    URL = "url"
    HASHTAG = "hashtag"
    MENTION = "mention"
    LIST = "list"
    CASHTAG = "cashtag"


# Length of the leading "#", "$" or "@"
_SIGIL_LEN = 1


@dataclass(frozen=True)
class Entity:
    """
    An extracted entity.

    Attributes:
        kind: What was found
        text: The matched substring, sigil included ("#tag", "@user/list")
        start: Start code point offset (0-indexed)
        end: End code point offset (exclusive)
        protocol: URL scheme with "://", when the URL carried one
        domain: Domain part of a URL
        screen_name: Screen name of a mention or list, without "@"
        list_slug: List slug including the leading "/"
    """
    kind: EntityKind
    text: str
    start: int
    end: int

    protocol: str | None = None
    domain: str | None = None
    screen_name: str | None = None
    list_slug: str | None = None

    def __post_init__(self) -> None:
        """Validate entity attributes."""
        if self.start < 0:
            raise ValueError(f"Invalid entity: start={self.start} cannot be negative")
        if self.start >= self.end:
            raise ValueError(f"Invalid entity: start={self.start} >= end={self.end}")

        expected_len = self.end - self.start
        if len(self.text) != expected_len:
            raise ValueError(
                f"Invalid entity: text length {len(self.text)} != span length {expected_len}"
            )

        if not isinstance(self.kind, EntityKind):
            object.__setattr__(self, "kind", EntityKind(self.kind))

    @property
    def indices(self) -> tuple[int, int]:
        return (self.start, self.end)

    @property
    def value(self) -> str:
        """The entity text without its leading sigil."""
        if self.kind is EntityKind.MENTION or self.kind is EntityKind.LIST:
            return f"{self.screen_name}{self.list_slug or ''}"
        if self.kind is EntityKind.URL:
            return self.text
        return self.text[_SIGIL_LEN:]

    def overlaps(self, other: Entity) -> bool:
        """Check if this entity's span intersects another's."""
        return not (self.end <= other.start or other.end <= self.start)

    def __len__(self) -> int:
        return self.end - self.start

    def to_dict(self) -> dict[str, object]:
        """
        Convert to a JSON-serializable record.

        ``text`` keeps the sigil so that ``source[start:end] == text`` holds
        for the emitted ``indices``. Mentions and lists also carry their
        screen name and list slug.
        """
        d: dict[str, object] = {
            "kind": self.kind.value,
            "text": self.text,
            "indices": [self.start, self.end],
        }
        if self.kind is EntityKind.MENTION or self.kind is EntityKind.LIST:
            d["screen_name"] = self.screen_name
            d["list_slug"] = self.list_slug or ""
        return d
