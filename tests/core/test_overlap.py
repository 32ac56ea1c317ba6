"""Tests for overlap resolution."""

from tweetspan.core.extraction import remove_overlapping
from tweetspan.core.types import EntityKind


def spans(entities):
    return [(e.start, e.end) for e in entities]


class TestRemoveOverlapping:
    """Tests for remove_overlapping."""

    def test_keeps_earliest_on_overlap(self, entity_factory):
        entities = [entity_factory(0, 5), entity_factory(3, 8), entity_factory(8, 10)]

        remove_overlapping(entities)

        assert spans(entities) == [(0, 5), (8, 10)]

    def test_sorts_by_start(self, entity_factory):
        entities = [entity_factory(20, 25), entity_factory(0, 5), entity_factory(10, 12)]

        remove_overlapping(entities)

        assert spans(entities) == [(0, 5), (10, 12), (20, 25)]

    def test_adjacent_spans_kept(self, entity_factory):
        entities = [entity_factory(0, 5), entity_factory(5, 7)]

        remove_overlapping(entities)

        assert spans(entities) == [(0, 5), (5, 7)]

    def test_contained_span_dropped(self, entity_factory):
        entities = [entity_factory(0, 30, EntityKind.URL), entity_factory(19, 24)]

        remove_overlapping(entities)

        assert spans(entities) == [(0, 30)]

    def test_ties_keep_original_order(self, entity_factory):
        """Entities starting at the same offset: the first one listed wins."""
        first = entity_factory(0, 3, EntityKind.HASHTAG)
        second = entity_factory(0, 5, EntityKind.URL)
        entities = [first, second]

        remove_overlapping(entities)

        assert entities == [first]

    def test_compares_with_last_kept_entity(self, entity_factory):
        """A dropped entity does not shadow later ones."""
        entities = [entity_factory(0, 5), entity_factory(2, 20), entity_factory(6, 8)]

        remove_overlapping(entities)

        assert spans(entities) == [(0, 5), (6, 8)]

    def test_modifies_in_place(self, entity_factory):
        entities = [entity_factory(0, 5), entity_factory(1, 2)]
        same = entities

        remove_overlapping(entities)

        assert same is entities
        assert len(entities) == 1

    def test_empty(self):
        entities = []

        remove_overlapping(entities)

        assert entities == []

    def test_result_pairwise_disjoint(self, entity_factory):
        entities = [
            entity_factory(start, start + length)
            for start, length in [(0, 4), (2, 9), (3, 1), (10, 5), (12, 2), (15, 1)]
        ]

        remove_overlapping(entities)

        for a, b in zip(entities, entities[1:]):
            assert a.end <= b.start
