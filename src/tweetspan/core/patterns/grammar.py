"""Default entity grammar: hashtags, mentions, lists, URLs and cashtags.

Fragments are defined in dependency order, so every ``#{name}`` refers to a
fragment defined above it. ``build_pattern_set()`` is the single build step:
it registers the grammar, resolves it and returns the frozen PatternSet that
extractors and validators share.

Main patterns and their capture groups:

validHashtag
    1 boundary, 2 hash sign, 3 hashtag body
validMentionOrList
    1 preceding character, 2 at sign, 3 screen name, 4 list slug (optional)
validReply
    1 screen name
extractUrl
    1 total match, 2 preceding character, 3 URL, 4 protocol (optional),
    5 domain, 6 port (optional), 7 path (optional), 8 query (optional)
validCashtag
    1 preceding space, 2 dollar sign, 3 symbol
validateUrlUnencoded
    1 scheme, 2 authority, 3 path, 4 query, 5 fragment
"""

from __future__ import annotations

import logging
from functools import lru_cache

from ..unicode import (
    INVALID_CHARS,
    LATIN_ACCENT_CHARS,
    NON_LATIN_HASHTAG_CHARS,
    RTL_CHARS,
    UNICODE_SPACES,
)
from .fragment import Flag
from .registry import FragmentRegistry, PatternSet

logger = logging.getLogger(__name__)

I = Flag.CASE_INSENSITIVE
M = Flag.MULTILINE
G = Flag.GREEDY

GENERIC_TLDS: tuple[str, ...] = (
    "aero", "asia", "biz", "cat", "com", "coop", "edu", "gov", "info", "int",
    "jobs", "mil", "mobi", "museum", "name", "net", "org", "pro", "tel",
    "travel", "xxx",
)

COUNTRY_TLDS: tuple[str, ...] = (
    "ac", "ad", "ae", "af", "ag", "ai", "al", "am", "an", "ao", "aq", "ar",
    "as", "at", "au", "aw", "ax", "az", "ba", "bb", "bd", "be", "bf", "bg",
    "bh", "bi", "bj", "bm", "bn", "bo", "br", "bs", "bt", "bv", "bw", "by",
    "bz", "ca", "cc", "cd", "cf", "cg", "ch", "ci", "ck", "cl", "cm", "cn",
    "co", "cr", "cs", "cu", "cv", "cx", "cy", "cz", "dd", "de", "dj", "dk",
    "dm", "do", "dz", "ec", "ee", "eg", "eh", "er", "es", "et", "eu", "fi",
    "fj", "fk", "fm", "fo", "fr", "ga", "gb", "gd", "ge", "gf", "gg", "gh",
    "gi", "gl", "gm", "gn", "gp", "gq", "gr", "gs", "gt", "gu", "gw", "gy",
    "hk", "hm", "hn", "hr", "ht", "hu", "id", "ie", "il", "im", "in", "io",
    "iq", "ir", "is", "it", "je", "jm", "jo", "jp", "ke", "kg", "kh", "ki",
    "km", "kn", "kp", "kr", "kw", "ky", "kz", "la", "lb", "lc", "li", "lk",
    "lr", "ls", "lt", "lu", "lv", "ly", "ma", "mc", "md", "me", "mg", "mh",
    "mk", "ml", "mm", "mn", "mo", "mp", "mq", "mr", "ms", "mt", "mu", "mv",
    "mw", "mx", "my", "mz", "na", "nc", "ne", "nf", "ng", "ni", "nl", "no",
    "np", "nr", "nu", "nz", "om", "pa", "pe", "pf", "pg", "ph", "pk", "pl",
    "pm", "pn", "pr", "ps", "pt", "pw", "py", "qa", "re", "ro", "rs", "ru",
    "rw", "sa", "sb", "sc", "sd", "se", "sg", "sh", "si", "sj", "sk", "sl",
    "sm", "sn", "so", "sr", "ss", "st", "su", "sv", "sx", "sy", "sz", "tc",
    "td", "tf", "tg", "th", "tj", "tk", "tl", "tm", "tn", "to", "tp", "tr",
    "tt", "tv", "tw", "tz", "ua", "ug", "uk", "us", "uy", "uz", "va", "vc",
    "ve", "vg", "vi", "vn", "vu", "wf", "ws", "ye", "yt", "za", "zm", "zw",
)

# A TLD must not run on into further alphanumerics
_TLD_END = r"(?=[^0-9a-zA-Z]|$)"


def _define_char_classes(r: FragmentRegistry) -> None:
    r.define("spaces_group", UNICODE_SPACES.body)
    r.define("spaces", "[#{spaces_group}]")
    r.define("invalid_chars_group", INVALID_CHARS.body)
    r.define("invalidChars", "[#{invalid_chars_group}]")
    r.define("punct", r"\!'#%&'\(\)*\+,\\\-\./:;<=>\?@\[\]\^_{|}~\$")
    r.define("rtlChars", f"[{RTL_CHARS.body}]", M | G)
    r.define("nonLatinHashtagChars", NON_LATIN_HASHTAG_CHARS.body)
    r.define("latinAccentChars", LATIN_ACCENT_CHARS.body)


def _define_hashtags(r: FragmentRegistry) -> None:
    # A hashtag holds letters, digits and underscores, but not only digits.
    r.define("hashSigns", "[#＃]")
    r.define("hashtagAlpha", "[a-z_#{latinAccentChars}#{nonLatinHashtagChars}]", I)
    r.define("hashtagAlphaNumeric", "[a-z0-9_#{latinAccentChars}#{nonLatinHashtagChars}]", I)
    r.define("endHashtagMatch", "^(?:#{hashSigns}|://)")
    r.define("hashtagBoundary", "(?:^|$|[^&a-z0-9_#{latinAccentChars}#{nonLatinHashtagChars}])")
    r.define(
        "validHashtag",
        "(#{hashtagBoundary})(#{hashSigns})"
        "(#{hashtagAlphaNumeric}*#{hashtagAlpha}#{hashtagAlphaNumeric}*)",
        G | I,
    )


def _define_mentions(r: FragmentRegistry) -> None:
    r.define("validMentionPrecedingChars", "(?:^|[^a-zA-Z0-9_!#$%&*@＠]|RT:?)")
    r.define("atSigns", "[@＠]")
    r.define(
        "validMentionOrList",
        "(#{validMentionPrecedingChars})"
        "(#{atSigns})"
        "([a-zA-Z0-9_]{1,20})"
        r"(/[a-zA-Z][a-zA-Z0-9_\-]{0,24})?",
        G,
    )
    r.define("validReply", "^(?:#{spaces})*#{atSigns}([a-zA-Z0-9_]{1,20})")
    r.define("endMentionMatch", "^(?:#{atSigns}|[#{latinAccentChars}]|://)")


def _define_url_extraction(r: FragmentRegistry) -> None:
    r.define("validUrlPrecedingChars", "(?:[^A-Za-z0-9@＠$#＃#{invalid_chars_group}]|^)")
    r.define("invalidUrlWithoutProtocolPrecedingChars", "[-_./]$")
    r.define("invalidDomainChars", "#{punct}#{spaces_group}#{invalid_chars_group}")
    r.define("validDomainChars", "[^#{invalidDomainChars}]")
    r.define(
        "validSubdomain",
        r"(?:(?:#{validDomainChars}(?:[_-]|#{validDomainChars})*)?#{validDomainChars}\.)",
    )
    r.define(
        "validDomainName",
        r"(?:(?:#{validDomainChars}(?:-|#{validDomainChars})*)?#{validDomainChars}\.)",
    )
    r.define("validGTLD", f"(?:(?:{'|'.join(GENERIC_TLDS)}){_TLD_END})")
    r.define("validCCTLD", f"(?:(?:{'|'.join(COUNTRY_TLDS)}){_TLD_END})")
    r.define("validPunycode", "(?:xn--[0-9a-z]+)")
    r.define(
        "validDomain",
        "(?:#{validSubdomain}*#{validDomainName}"
        "(?:#{validGTLD}|#{validCCTLD}|#{validPunycode}))",
    )
    r.define(
        "validAsciiDomain",
        r"(?:(?:[\-a-z0-9#{latinAccentChars}]+)\.)+"
        "(?:#{validGTLD}|#{validCCTLD}|#{validPunycode})",
        G | I,
    )
    r.define("invalidShortDomain", "^#{validDomainName}#{validCCTLD}$", I)
    r.define("validPortNumber", "[0-9]+")

    r.define(
        "validGeneralUrlPathChars",
        r"[a-z0-9!\*';:=\+,\.\$/%#\[\]\-_~@|&#{latinAccentChars}]",
        I,
    )
    # Balanced parens in paths: Wikipedia's /Primer_(film), IIS's /S(dfd346)/
    r.define("validUrlBalancedParens", r"\(#{validGeneralUrlPathChars}+\)", I)
    # Valid end-of-path characters, so /foo. does not gobble the period.
    # =&# are allowed for empty URL parameters and other URL-join artifacts.
    r.define(
        "validUrlPathEndingChars",
        r"[\+\-a-z0-9=_#/#{latinAccentChars}]|(?:#{validUrlBalancedParens})",
        I,
    )
    # @ only in the middle of a path: http://example.com/@user/
    r.define(
        "validUrlPath",
        "(?:"
        "(?:"
        "#{validGeneralUrlPathChars}*"
        "(?:#{validUrlBalancedParens}#{validGeneralUrlPathChars}*)*"
        "#{validUrlPathEndingChars}"
        ")|(?:@#{validGeneralUrlPathChars}+/)"
        ")",
        I,
    )
    r.define("validUrlQueryChars", r"[a-z0-9!?\*'@\(\);:&=\+\$/%#\[\]\-_\.,~|]", I)
    r.define("validUrlQueryEndingChars", "[a-z0-9_&=#/]", I)
    r.define(
        "extractUrl",
        "("                                                         # $1 total match
        "(#{validUrlPrecedingChars})"                               # $2 preceding character
        "("                                                         # $3 URL
        "(https?://)?"                                              # $4 protocol
        "(#{validDomain})"                                          # $5 domain(s)
        "(?::(#{validPortNumber}))?"                                # $6 port number
        "(/#{validUrlPath}*)?"                                      # $7 URL path
        r"(\?#{validUrlQueryChars}*#{validUrlQueryEndingChars})?"   # $8 query string
        ")"
        ")",
        I | G,
    )

    r.define("validTcoUrl", r"^https?://t\.co/[a-z0-9]+", I)
    r.define("urlHasProtocol", "^https?://", I)
    r.define("urlHasHttps", "^https://", I)


def _define_cashtags(r: FragmentRegistry) -> None:
    r.define("cashtag", "[a-z]{1,6}(?:[._][a-z]{1,2})?", I)
    r.define("validCashtag", r"(^|#{spaces})(\$)(#{cashtag})(?=$|\s|[#{punct}])", I | G)


def _define_url_validation(r: FragmentRegistry) -> None:
    # Based on the ABNF of RFC 3986
    r.define("validateUrlUnreserved", r"[a-z0-9\-._~]", I)
    r.define("validateUrlPctEncoded", "(?:%[0-9a-f]{2})", I)
    r.define("validateUrlSubDelims", "[!$&'()*+,;=]", I)
    r.define(
        "validateUrlPchar",
        "(?:"
        "#{validateUrlUnreserved}|"
        "#{validateUrlPctEncoded}|"
        "#{validateUrlSubDelims}|"
        "[:|@]"
        ")",
        I,
    )
    r.define("validateUrlScheme", r"(?:[a-z][a-z0-9+\-.]*)", I)
    r.define(
        "validateUrlUserinfo",
        "(?:"
        "#{validateUrlUnreserved}|"
        "#{validateUrlPctEncoded}|"
        "#{validateUrlSubDelims}|"
        ":"
        ")*",
        I,
    )
    r.define(
        "validateUrlDecOctet",
        "(?:[0-9]|(?:[1-9][0-9])|(?:1[0-9]{2})|(?:2[0-4][0-9])|(?:25[0-5]))",
        I,
    )
    r.define("validateUrlIpv4", r"(?:#{validateUrlDecOctet}(?:\.#{validateUrlDecOctet}){3})", I)
    # Punting on real IPv6 validation for now
    r.define("validateUrlIpv6", r"(?:\[[a-f0-9:\.]+\])", I)
    # Also punting on IPvFuture for now
    r.define("validateUrlIp", "(?:#{validateUrlIpv4}|#{validateUrlIpv6})", I)

    # Stricter than the RFC
    r.define("validateUrlSubDomainSegment", r"(?:[a-z0-9](?:[a-z0-9_\-]*[a-z0-9])?)", I)
    r.define("validateUrlDomainSegment", r"(?:[a-z0-9](?:[a-z0-9\-]*[a-z0-9])?)", I)
    r.define("validateUrlDomainTld", r"(?:[a-z](?:[a-z0-9\-]*[a-z0-9])?)", I)
    r.define(
        "validateUrlDomain",
        r"(?:(?:#{validateUrlSubDomainSegment}\.)*"
        r"(?:#{validateUrlDomainSegment}\.)#{validateUrlDomainTld})",
        I,
    )
    r.define("validateUrlHost", "(?:#{validateUrlIp}|#{validateUrlDomain})", I)

    # Unencoded internationalized domains; invalid UTF-8 is not checked
    non_ascii = r"[^\x00-\x7f]"
    r.define(
        "validateUrlUnicodeSubDomainSegment",
        rf"(?:(?:[a-z0-9]|{non_ascii})(?:(?:[a-z0-9_\-]|{non_ascii})*(?:[a-z0-9]|{non_ascii}))?)",
        I,
    )
    r.define(
        "validateUrlUnicodeDomainSegment",
        rf"(?:(?:[a-z0-9]|{non_ascii})(?:(?:[a-z0-9\-]|{non_ascii})*(?:[a-z0-9]|{non_ascii}))?)",
        I,
    )
    r.define(
        "validateUrlUnicodeDomainTld",
        rf"(?:(?:[a-z]|{non_ascii})(?:(?:[a-z0-9\-]|{non_ascii})*(?:[a-z0-9]|{non_ascii}))?)",
        I,
    )
    r.define(
        "validateUrlUnicodeDomain",
        r"(?:(?:#{validateUrlUnicodeSubDomainSegment}\.)*"
        r"(?:#{validateUrlUnicodeDomainSegment}\.)#{validateUrlUnicodeDomainTld})",
        I,
    )
    r.define("validateUrlUnicodeHost", "(?:#{validateUrlIp}|#{validateUrlUnicodeDomain})", I)
    r.define("validateUrlPort", "[0-9]{1,5}")

    r.define(
        "validateUrlUnicodeAuthority",
        "(?:(#{validateUrlUserinfo})@)?"   # $1 userinfo
        "(#{validateUrlUnicodeHost})"      # $2 host
        "(?::(#{validateUrlPort}))?",      # $3 port
        I,
    )
    r.define(
        "validateUrlAuthority",
        "(?:(#{validateUrlUserinfo})@)?"   # $1 userinfo
        "(#{validateUrlHost})"             # $2 host
        "(?::(#{validateUrlPort}))?",      # $3 port
        I,
    )
    r.define("validateUrlPath", "(/#{validateUrlPchar}*)*", I)
    r.define("validateUrlQuery", r"(#{validateUrlPchar}|/|\?)*", I)
    r.define("validateUrlFragment", r"(#{validateUrlPchar}|/|\?)*", I)

    # Modified version of RFC 3986 Appendix B
    r.define(
        "validateUrlUnencoded",
        "^"
        "(?:"
        "([^:/?#]+)://"     # $1 scheme
        ")?"
        "([^/?#]*)"         # $2 authority
        "([^?#]*)"          # $3 path
        "(?:"
        r"\?([^#]*)"        # $4 query
        ")?"
        "(?:"
        "#(.*)"             # $5 fragment
        ")?$",
        I,
    )


def define_grammar(registry: FragmentRegistry) -> FragmentRegistry:
    """Register the full entity grammar on *registry*."""
    _define_char_classes(registry)
    _define_hashtags(registry)
    _define_mentions(registry)
    _define_url_extraction(registry)
    _define_cashtags(registry)
    _define_url_validation(registry)
    return registry


def build_pattern_set() -> PatternSet:
    """Build, resolve and compile a fresh copy of the default grammar.

    Raises:
        PatternBuildError: If any fragment fails to build. There is no
            fallback: callers must not continue without a pattern set.
    """
    registry = define_grammar(FragmentRegistry())
    patterns = registry.freeze()
    logger.debug("Built default entity grammar (%d patterns)", len(patterns))
    return patterns


@lru_cache(maxsize=1)
def default_pattern_set() -> PatternSet:
    """Shared, read-only default pattern set."""
    return build_pattern_set()
