"""Pattern fragments and their modifier flags.

A fragment is a named unit of regex source that may embed other fragments
through ``#{name}`` placeholders. Fragments are frozen dataclasses: created
while the grammar is defined, never mutated afterwards.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Flag as _EnumFlag
from enum import auto

from ...exceptions import InvalidFlagError

PLACEHOLDER = re.compile(r"#\{(\w+)\}")


class Flag(_EnumFlag):
    """Matching modifiers carried by a fragment."""

    NONE = 0
    CASE_INSENSITIVE = auto()
    MULTILINE = auto()
    GREEDY = auto()     # no-op: Python quantifiers are greedy by default
    UNICODE = auto()    # always set; classes match by scalar value

    @classmethod
    def from_letters(cls, letters: str) -> Flag:
        """Parse modifier letters such as ``"im"``.

        Raises:
            InvalidFlagError: On a letter outside ``i``, ``m`` and ``u``
        """
        flags = cls.NONE
        for letter in letters:
            try:
                flags |= _LETTERS[letter]
            except KeyError:
                raise InvalidFlagError(letter) from None
        return flags

    def to_re_flags(self) -> re.RegexFlag:
        """Translate to the ``re`` module's flag bits."""
        result = re.UNICODE
        if Flag.CASE_INSENSITIVE in self:
            result |= re.IGNORECASE
        if Flag.MULTILINE in self:
            result |= re.MULTILINE
        return result


_LETTERS = {
    "i": Flag.CASE_INSENSITIVE,
    "m": Flag.MULTILINE,
    "u": Flag.UNICODE,
}


def parse_literal(literal: str) -> tuple[str, Flag]:
    """Split a ``/body/flags`` literal into its source and flags.

    Strings that do not start with ``/`` are returned unchanged with no
    flags. The body runs to the last ``/``, so bodies may contain slashes.
    """
    if not literal.startswith("/") or literal.count("/") < 2:
        return literal, Flag.NONE
    body, _, letters = literal[1:].rpartition("/")
    return body, Flag.from_letters(letters)


@dataclass(frozen=True)
class Fragment:
    """Named, immutable pattern fragment."""

    name: str
    source: str
    flags: Flag = Flag.UNICODE

    def __post_init__(self) -> None:
        if not self.name or not re.fullmatch(r"\w+", self.name):
            raise ValueError(f"Invalid fragment name: {self.name!r}")
        if Flag.UNICODE not in self.flags:
            object.__setattr__(self, "flags", self.flags | Flag.UNICODE)

    @property
    def references(self) -> tuple[str, ...]:
        """Names embedded through placeholders, in order of appearance."""
        return tuple(PLACEHOLDER.findall(self.source))

    def __repr__(self) -> str:
        return f"Fragment(name={self.name!r}, flags={self.flags!r})"


@dataclass(frozen=True)
class ResolvedPattern:
    """A fragment with every placeholder substituted and flags merged."""

    name: str
    source: str
    flags: Flag

    def compile(self) -> re.Pattern[str]:
        return re.compile(self.source, self.flags.to_re_flags())

    def __str__(self) -> str:
        letters = "".join(
            letter for letter, flag in _LETTERS.items() if flag in self.flags
        )
        return f"/{self.source}/{letters}"
