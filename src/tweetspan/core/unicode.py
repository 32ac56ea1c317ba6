"""
Unicode character-class tables for entity grammars.

Character classes are assembled from hexadecimal code point literals. Each
member is either a single scalar value or a ``start-end`` range, and the
joined members form a class *body* (no enclosing brackets) that grammars
embed inside larger classes such as ``[a-z_#{latinAccentChars}]``.

Tables:
- UNICODE_SPACES: characters with the White_Space property
- INVALID_CHARS: byte-order marks, non-characters and directional overrides
- NON_LATIN_HASHTAG_CHARS: Cyrillic, Hebrew, Arabic, Thai, Hangul, CJK
- LATIN_ACCENT_CHARS: accented Latin letters and combining diacritics
- RTL_CHARS: right-to-left script blocks

Supplementary-plane CJK extension blocks (B, C, D and the compatibility
supplement) are not part of NON_LATIN_HASHTAG_CHARS.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, MutableSequence
from dataclasses import dataclass

from ..exceptions import InvalidCodePointError, InvalidRangeError

__all__ = [
    "decode_code_point",
    "append_range",
    "CharClass",
    "build_char_class",
    "UNICODE_SPACES",
    "INVALID_CHARS",
    "NON_LATIN_HASHTAG_CHARS",
    "LATIN_ACCENT_CHARS",
    "RTL_CHARS",
]

_HEX_LITERAL = re.compile(r"[0-9A-Fa-f]{4,5}")

_MAX_SCALAR = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)

# Characters with a meaning inside [...] that must stay literal
_CLASS_SPECIALS = frozenset("\\]^-[")


def decode_code_point(hex_literal: str) -> str:
    """
    Decode a 4-5 digit hexadecimal literal to the character it denotes.

    Args:
        hex_literal: Code point in hex, e.g. ``"0400"`` or ``"1F600"``

    Returns:
        A one-character string

    Raises:
        InvalidCodePointError: If the literal is malformed or names a
            surrogate or out-of-range value
    """
    if not isinstance(hex_literal, str) or not _HEX_LITERAL.fullmatch(hex_literal):
        raise InvalidCodePointError(str(hex_literal))

    value = int(hex_literal, 16)
    if value > _MAX_SCALAR or value in _SURROGATES:
        raise InvalidCodePointError(hex_literal)
    return chr(value)


def _class_literal(char: str) -> str:
    if char in _CLASS_SPECIALS:
        return "\\" + char
    return char


def append_range(
    char_class: MutableSequence[str],
    start: str,
    end: str | None = None,
) -> None:
    """
    Append a single character or a ``start-end`` range to *char_class*.

    Raises:
        InvalidCodePointError: If either literal is invalid
        InvalidRangeError: If *end* precedes *start*
    """
    first = decode_code_point(start)
    last = first if end is None else decode_code_point(end)

    if last < first:
        raise InvalidRangeError(start, end or start)

    if first == last:
        char_class.append(_class_literal(first))
    else:
        char_class.append(f"{_class_literal(first)}-{_class_literal(last)}")


@dataclass(frozen=True)
class CharClass:
    """An ordered, immutable character-class body."""

    name: str
    members: tuple[str, ...]

    @property
    def body(self) -> str:
        """Class body suitable for embedding between ``[`` and ``]``."""
        return "".join(self.members)

    def contains(self, char: str) -> bool:
        """Check whether *char* falls inside this class."""
        if not self.members:
            return False
        return re.fullmatch(f"[{self.body}]", char) is not None

    def __len__(self) -> int:
        return len(self.members)

    def __str__(self) -> str:
        return self.body


def build_char_class(
    name: str,
    ranges: Iterable[tuple[str, str]],
    singles: Iterable[str] = (),
) -> CharClass:
    """Build a CharClass from single code points followed by ranges."""
    members: list[str] = []
    for code_point in singles:
        append_range(members, code_point)
    for start, end in ranges:
        append_range(members, start, end)
    return CharClass(name=name, members=tuple(members))


# =============================================================================
# TABLES
# =============================================================================

# Space is more than %20: U+3000 is the full-width space used with Kanji.
# Source: ActiveSupport::Multibyte::Handlers::UTF8Handler::UNICODE_WHITESPACE
UNICODE_SPACES = build_char_class(
    "spaces",
    singles=(
        "0020",  # Zs SPACE
        "0085",  # Cc <control-0085>
        "00A0",  # Zs NO-BREAK SPACE
        "1680",  # Zs OGHAM SPACE MARK
        "180E",  # Zs MONGOLIAN VOWEL SEPARATOR
        "2028",  # Zl LINE SEPARATOR
        "2029",  # Zp PARAGRAPH SEPARATOR
        "202F",  # Zs NARROW NO-BREAK SPACE
        "205F",  # Zs MEDIUM MATHEMATICAL SPACE
        "3000",  # Zs IDEOGRAPHIC SPACE
    ),
    ranges=(
        ("0009", "000D"),  # Cc <control-0009>..<control-000D>
        ("2000", "200A"),  # Zs EN QUAD..HAIR SPACE
    ),
)

INVALID_CHARS = build_char_class(
    "invalid_chars",
    singles=(
        "FFFE",
        "FEFF",  # BOM
        "FFFF",  # Special
    ),
    ranges=(
        ("202A", "202E"),  # Directional change
    ),
)

_CYRILLIC = (
    ("0400", "04FF"),  # Cyrillic
    ("0500", "0527"),  # Cyrillic Supplement
    ("2DE0", "2DFF"),  # Cyrillic Extended A
    ("A640", "A69F"),  # Cyrillic Extended B
)

_HEBREW = (
    ("0591", "05BF"),
    ("05C1", "05C2"),
    ("05C4", "05C5"),
    ("05C7", "05C7"),
    ("05D0", "05EA"),
    ("05F0", "05F4"),
    ("FB12", "FB28"),  # Hebrew Presentation Forms
    ("FB2A", "FB36"),
    ("FB38", "FB3C"),
    ("FB3E", "FB3E"),
    ("FB40", "FB41"),
    ("FB43", "FB44"),
    ("FB46", "FB4F"),
)

_ARABIC = (
    ("0610", "061A"),
    ("0620", "065F"),
    ("066E", "06D3"),
    ("06D5", "06DC"),
    ("06DE", "06E8"),
    ("06EA", "06EF"),
    ("06FA", "06FC"),
    ("06FF", "06FF"),
    ("0750", "077F"),  # Arabic Supplement
    ("08A0", "08A0"),  # Arabic Extended A
    ("08A2", "08AC"),
    ("08E4", "08FE"),
    ("FB50", "FBB1"),  # Arabic Pres. Forms A
    ("FBD3", "FD3D"),
    ("FD50", "FD8F"),
    ("FD92", "FDC7"),
    ("FDF0", "FDFB"),
    ("FE70", "FE74"),  # Arabic Pres. Forms B
    ("FE76", "FEFC"),
    ("200C", "200C"),  # Zero-Width Non-Joiner
)

_THAI = (
    ("0E01", "0E3A"),
    ("0E40", "0E4E"),
)

_HANGUL = (
    ("1100", "11FF"),  # Hangul Jamo
    ("3130", "3185"),  # Hangul Compatibility Jamo
    ("A960", "A97F"),  # Hangul Jamo Extended-A
    ("AC00", "D7AF"),  # Hangul Syllables
    ("D7B0", "D7FF"),  # Hangul Jamo Extended-B
    ("FFA1", "FFDC"),  # half-width Hangul
)

_JAPANESE_CHINESE = (
    ("30A1", "30FA"),  # Katakana (full-width)
    ("30FC", "30FE"),  # Katakana Chouon and iteration marks (full-width)
    ("FF66", "FF9F"),  # Katakana (half-width)
    ("FF70", "FF70"),  # Katakana Chouon (half-width)
    ("FF10", "FF19"),  # Latin digits (full-width)
    ("FF21", "FF3A"),  # Latin upper case (full-width)
    ("FF41", "FF5A"),  # Latin lower case (full-width)
    ("3041", "3096"),  # Hiragana
    ("3099", "309E"),  # Hiragana voicing and iteration mark
    ("3400", "4DBF"),  # Kanji (CJK Extension A)
    ("4E00", "9FFF"),  # Kanji (Unified)
    ("3003", "3003"),  # Kanji iteration mark
    ("3005", "3005"),  # Kanji iteration mark
    ("303B", "303B"),  # Han iteration mark
)

NON_LATIN_HASHTAG_CHARS = build_char_class(
    "nonLatinHashtagChars",
    ranges=_CYRILLIC + _HEBREW + _ARABIC + _THAI + _HANGUL + _JAPANESE_CHINESE,
)

# Latin accented characters. 00D7 (multiplication sign, confusable with "x")
# and 00F7 (division sign) are left out.
LATIN_ACCENT_CHARS = build_char_class(
    "latinAccentChars",
    ranges=(
        ("00C0", "00D6"),
        ("00D8", "00F6"),
        ("00F8", "00FF"),
        ("0100", "024F"),  # Latin Extended A and B
        # assorted IPA Extensions
        ("0253", "0254"),
        ("0256", "0257"),
        ("0259", "0259"),
        ("025B", "025B"),
        ("0263", "0263"),
        ("0268", "0268"),
        ("026F", "026F"),
        ("0272", "0272"),
        ("0289", "0289"),
        ("028B", "028B"),
        ("02BB", "02BB"),  # Okina for Hawaiian (it *is* a letter character)
        ("0300", "036F"),  # Combining diacritics
        ("1E00", "1EFF"),  # Latin Extended Additional
    ),
)

RTL_CHARS = build_char_class(
    "rtlChars",
    ranges=(
        ("0600", "06FF"),
        ("0750", "077F"),
        ("0590", "05FF"),
        ("FE70", "FEFF"),
    ),
)
