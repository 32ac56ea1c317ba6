"""Fragment registry and resolver.

Fragments are registered by name and later resolved into final pattern
strings. Resolution walks the placeholder graph depth-first (dependencies
before the fragment that embeds them) and unions the flags of every
fragment it embeds, so a case-insensitive character class makes the whole
pattern that uses it case-insensitive.

``freeze()`` resolves and compiles every fragment once and hands back an
immutable ``PatternSet``; after that the registry accepts no new names.

Usage::

    registry = FragmentRegistry()
    registry.define("atSigns", "[@＠]")
    registry.define("reply", r"^\\s*#{atSigns}(\\w+)", Flag.CASE_INSENSITIVE)
    patterns = registry.freeze()
    patterns["reply"].match("@jack")
"""

from __future__ import annotations

import logging
import re
import warnings
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType

from ...exceptions import (
    DuplicateFragmentError,
    FragmentCycleError,
    PatternBuildError,
    PatternCompileError,
    UndefinedFragmentWarning,
)
from .fragment import PLACEHOLDER, Flag, Fragment, ResolvedPattern, parse_literal

logger = logging.getLogger(__name__)


def substitute_placeholders(
    source: str,
    lookup: Callable[[str], ResolvedPattern | None],
    owner: str | None = None,
) -> tuple[str, Flag]:
    """Replace every ``#{name}`` in *source* with the resolved fragment.

    This is the only place an undefined reference is handled: it becomes an
    empty string and an ``UndefinedFragmentWarning`` is issued. Nothing is
    raised, so grammars that reference optional fragments keep loading.

    Returns:
        The substituted source and the union of the embedded flags.
    """
    embedded = Flag.NONE

    def replace(match: re.Match[str]) -> str:
        nonlocal embedded
        name = match.group(1)
        resolved = lookup(name)
        if resolved is None:
            logger.warning(
                "Undefined fragment %r referenced by %r; substituting empty string",
                name, owner,
            )
            warnings.warn(
                f"Undefined fragment {name!r} referenced by {owner!r}",
                UndefinedFragmentWarning,
                stacklevel=4,
            )
            return ""
        embedded |= resolved.flags
        return resolved.source

    return PLACEHOLDER.sub(replace, source), embedded


def string_supplant(template: str, values: Mapping[str, object]) -> str:
    """Interpolate ``#{key}`` placeholders from *values*.

    Missing or falsy values become empty strings.
    """
    def replace(match: re.Match[str]) -> str:
        value = values.get(match.group(1))
        return str(value) if value else ""

    return PLACEHOLDER.sub(replace, template)


class PatternSet(Mapping[str, re.Pattern]):
    """Read-only mapping of fragment name to compiled pattern.

    Safe to share between threads: nothing in it changes after construction.
    """

    def __init__(
        self,
        resolved: Mapping[str, ResolvedPattern],
        compiled: Mapping[str, re.Pattern[str]],
    ) -> None:
        self._resolved = MappingProxyType(dict(resolved))
        self._compiled = MappingProxyType(dict(compiled))

    def __getitem__(self, name: str) -> re.Pattern[str]:
        return self._compiled[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._compiled)

    def __len__(self) -> int:
        return len(self._compiled)

    def source(self, name: str) -> str:
        """Final pattern text of *name*."""
        return self._resolved[name].source

    def flags(self, name: str) -> Flag:
        """Accumulated flags of *name*."""
        return self._resolved[name].flags

    def __repr__(self) -> str:
        return f"PatternSet(patterns={len(self)})"


class FragmentRegistry:
    """Named store of pattern fragments."""

    def __init__(self) -> None:
        self._fragments: dict[str, Fragment] = {}
        self._frozen = False

    def define(
        self,
        name: str,
        source: str | Fragment,
        flags: Flag | str | None = None,
    ) -> Fragment:
        """Register a fragment.

        Args:
            name: Fragment name, referenced elsewhere as ``#{name}``
            source: Regex source, a ``/body/flags`` literal, or an existing
                Fragment whose source and flags are copied
            flags: Extra flags, as a Flag or modifier letters

        Raises:
            DuplicateFragmentError: If *name* is already defined
            InvalidFlagError: On an unknown modifier letter
            PatternBuildError: If the registry has been frozen
        """
        if self._frozen:
            raise PatternBuildError(
                "Registry is frozen; no fragments can be added",
                fragment=name,
            )
        if name in self._fragments:
            raise DuplicateFragmentError(name)

        if isinstance(source, Fragment):
            body, merged = source.source, source.flags
        else:
            body, merged = parse_literal(source)

        if isinstance(flags, str):
            merged |= Flag.from_letters(flags)
        elif flags is not None:
            merged |= flags

        fragment = Fragment(name=name, source=body, flags=merged)
        self._fragments[name] = fragment
        return fragment

    def get(self, name: str) -> Fragment | None:
        return self._fragments.get(name)

    def names(self) -> list[str]:
        return list(self._fragments)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, name: object) -> bool:
        return name in self._fragments

    def __len__(self) -> int:
        return len(self._fragments)

    def resolve(self, name: str) -> ResolvedPattern:
        """Resolve *name* to its final source and flags.

        Raises:
            KeyError: If *name* itself is not defined
            FragmentCycleError: If *name* embeds itself, directly or not
        """
        if name not in self._fragments:
            raise KeyError(f"Unknown fragment: {name!r}")
        resolved = self._resolve(name, {}, [])
        assert resolved is not None
        return resolved

    def _resolve(
        self,
        name: str,
        cache: dict[str, ResolvedPattern],
        stack: list[str],
    ) -> ResolvedPattern | None:
        if name in cache:
            return cache[name]
        fragment = self._fragments.get(name)
        if fragment is None:
            return None
        if name in stack:
            raise FragmentCycleError(stack[stack.index(name):] + [name])

        stack.append(name)
        try:
            source, embedded = substitute_placeholders(
                fragment.source,
                lambda ref: self._resolve(ref, cache, stack),
                owner=name,
            )
        finally:
            stack.pop()

        resolved = ResolvedPattern(name=name, source=source, flags=fragment.flags | embedded)
        cache[name] = resolved
        return resolved

    def freeze(self) -> PatternSet:
        """Resolve and compile every fragment, then close the registry.

        Raises:
            PatternBuildError: On any resolution or compile failure. The
                registry stays open in that case and no PatternSet exists.
        """
        cache: dict[str, ResolvedPattern] = {}
        compiled: dict[str, re.Pattern[str]] = {}

        for name in self._fragments:
            resolved = self._resolve(name, cache, [])
            assert resolved is not None
            try:
                compiled[name] = resolved.compile()
            except re.error as exc:
                raise PatternCompileError(name, str(exc)) from exc

        self._frozen = True
        logger.debug("Pattern set frozen with %d fragments", len(compiled))
        return PatternSet(cache, compiled)
