"""Entity overlap resolution.

Given a mixed list of positioned entities (hashtags and URLs, say), drop
every entity that starts inside the span of an earlier kept entity.
"""

from __future__ import annotations

from collections.abc import MutableSequence

from ..types import Entity


def remove_overlapping(entities: MutableSequence[Entity]) -> None:
    """Remove overlapping entities in place, keeping the earliest.

    Sort + single-pass scan, O(n log n). The sort is stable, so entities
    that start at the same offset keep their original relative order and
    the first of them wins.
    """
    if not entities:
        return

    ordered = sorted(entities, key=lambda e: e.start)
    kept: list[Entity] = [ordered[0]]

    for entity in ordered[1:]:
        if entity.start < kept[-1].end:
            continue
        kept.append(entity)

    entities[:] = kept
