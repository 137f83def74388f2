"""
Name: Chunk Combiner Unit Tests

Responsibilities:
  - Merge: unión de solapados y contiguos, estabilidad, punto fijo
  - Split: descomposición atómica con procedencia exacta
  - Split: orden numérico de boundaries y fin-antes-que-inicio
  - Split: la cobertura reconstruye la unión de intervalos crudos
"""

from __future__ import annotations

import pytest
from highlight_chunks.application.chunk_combiner import combine_chunks
from highlight_chunks.domain.entities import Chunk
from highlight_chunks.infrastructure.text.match_finder import find_chunks

pytestmark = pytest.mark.unit

TEXT = "This is a string with words to search."


def _covered(chunks: list[Chunk]) -> set[int]:
    return {i for c in chunks for i in range(c.start, c.end)}


# ---------------------------------------------------------------------------
# Merge policy
# ---------------------------------------------------------------------------


class TestMergePolicy:
    def test_partially_overlapping_words(self):
        combined = combine_chunks(
            chunks=find_chunks(search_words=["thi", "is"], text_to_highlight=TEXT)
        )
        assert combined == [Chunk(start=0, end=4), Chunk(start=5, end=7)]

    def test_touching_chunks_merge(self):
        combined = combine_chunks(
            chunks=[Chunk(start=0, end=3), Chunk(start=3, end=5)]
        )
        assert combined == [Chunk(start=0, end=5)]

    def test_contained_chunk_keeps_outer_end(self):
        combined = combine_chunks(
            chunks=[Chunk(start=0, end=10), Chunk(start=2, end=4)]
        )
        assert combined == [Chunk(start=0, end=10)]

    def test_unsorted_input_is_sorted(self):
        combined = combine_chunks(
            chunks=[Chunk(start=8, end=9), Chunk(start=0, end=2), Chunk(start=1, end=3)]
        )
        assert combined == [Chunk(start=0, end=3), Chunk(start=8, end=9)]

    def test_provenance_is_discarded(self):
        combined = combine_chunks(
            chunks=[
                Chunk(start=0, end=2, term_indexes=(0,)),
                Chunk(start=5, end=6, span_indexes=(1,)),
            ]
        )
        assert combined == [Chunk(start=0, end=2), Chunk(start=5, end=6)]
        assert all(c.term_indexes is None and c.span_indexes is None for c in combined)

    def test_empty_input(self):
        assert combine_chunks(chunks=[]) == []

    def test_zero_length_chunks_dropped(self):
        assert combine_chunks(chunks=[Chunk(start=4, end=4)]) == []

    def test_merge_is_a_fixed_point(self):
        raw = [
            Chunk(start=10, end=12),
            Chunk(start=0, end=3),
            Chunk(start=2, end=6),
            Chunk(start=6, end=7),
            Chunk(start=20, end=25),
            Chunk(start=21, end=22),
        ]
        once = combine_chunks(chunks=raw)
        assert combine_chunks(chunks=once) == once
        assert once == [
            Chunk(start=0, end=7),
            Chunk(start=10, end=12),
            Chunk(start=20, end=25),
        ]


# ---------------------------------------------------------------------------
# Split policy
# ---------------------------------------------------------------------------


class TestSplitPolicy:
    def test_overlapping_terms_decompose(self):
        raw = find_chunks(
            search_words=["Tom", "om Joh", "Tom"],
            text_to_highlight="Tom Johnson Tom test",
            split_intersecting_chunks=True,
        )
        combined = combine_chunks(chunks=raw, split_intersecting_chunks=True)
        assert combined == [
            Chunk(start=0, end=1, term_indexes=(0, 2)),
            Chunk(start=1, end=3, term_indexes=(0, 1, 2)),
            Chunk(start=3, end=7, term_indexes=(1,)),
            Chunk(start=12, end=15, term_indexes=(0, 2)),
        ]

    def test_end_before_start_at_shared_boundary(self):
        combined = combine_chunks(
            chunks=[
                Chunk(start=0, end=3, term_indexes=(0,)),
                Chunk(start=3, end=6, term_indexes=(1,)),
            ],
            split_intersecting_chunks=True,
        )
        assert combined == [
            Chunk(start=0, end=3, term_indexes=(0,)),
            Chunk(start=3, end=6, term_indexes=(1,)),
        ]

    def test_boundaries_sorted_numerically(self):
        combined = combine_chunks(
            chunks=[
                Chunk(start=2, end=10, term_indexes=(10,)),
                Chunk(start=9, end=100, term_indexes=(2,)),
            ],
            split_intersecting_chunks=True,
        )
        assert combined == [
            Chunk(start=2, end=9, term_indexes=(10,)),
            Chunk(start=9, end=10, term_indexes=(2, 10)),
            Chunk(start=10, end=100, term_indexes=(2,)),
        ]

    def test_terms_and_spans_tracked_separately(self):
        combined = combine_chunks(
            chunks=[
                Chunk(start=0, end=4, term_indexes=(0,)),
                Chunk(start=2, end=6, span_indexes=(0,)),
            ],
            split_intersecting_chunks=True,
        )
        assert combined == [
            Chunk(start=0, end=2, term_indexes=(0,)),
            Chunk(start=2, end=4, term_indexes=(0,), span_indexes=(0,)),
            Chunk(start=4, end=6, span_indexes=(0,)),
        ]

    def test_uncovered_intervals_are_not_emitted(self):
        combined = combine_chunks(
            chunks=[
                Chunk(start=0, end=2, span_indexes=(0,)),
                Chunk(start=5, end=7, span_indexes=(1,)),
            ],
            split_intersecting_chunks=True,
        )
        assert combined == [
            Chunk(start=0, end=2, span_indexes=(0,)),
            Chunk(start=5, end=7, span_indexes=(1,)),
        ]

    def test_overlapping_chunks_of_same_term_report_index_once(self):
        combined = combine_chunks(
            chunks=[
                Chunk(start=0, end=4, term_indexes=(0,)),
                Chunk(start=2, end=6, term_indexes=(0,)),
            ],
            split_intersecting_chunks=True,
        )
        assert combined == [
            Chunk(start=0, end=2, term_indexes=(0,)),
            Chunk(start=2, end=4, term_indexes=(0,)),
            Chunk(start=4, end=6, term_indexes=(0,)),
        ]

    def test_degenerate_chunks_carry_no_coverage(self):
        combined = combine_chunks(
            chunks=[
                Chunk(start=3, end=3, span_indexes=(0,)),
                Chunk(start=8, end=5, span_indexes=(1,)),
                Chunk(start=0, end=2, term_indexes=(0,)),
            ],
            split_intersecting_chunks=True,
        )
        assert combined == [Chunk(start=0, end=2, term_indexes=(0,))]

    def test_every_emitted_chunk_has_provenance(self):
        raw = find_chunks(
            search_words=["s", "is", "st"],
            text_to_highlight=TEXT,
            spans=[[0, 5], [30, 38]],
            split_intersecting_chunks=True,
        )
        combined = combine_chunks(chunks=raw, split_intersecting_chunks=True)
        assert combined
        assert all(c.term_indexes or c.span_indexes for c in combined)
        assert all(a.end <= b.start for a, b in zip(combined, combined[1:]))

    def test_coverage_reconstructs_union_of_raw_intervals(self):
        raw = find_chunks(
            search_words=["Tom", "om Joh", "son", "n"],
            text_to_highlight="Tom Johnson Tom test",
            spans=[[0, 1], [16, 17], [4, 8]],
            split_intersecting_chunks=True,
        )
        combined = combine_chunks(chunks=raw, split_intersecting_chunks=True)

        assert _covered(combined) == _covered(raw)

        # Re-expand per term/span: each label covers exactly its raw intervals.
        for index in range(4):
            expected = _covered([c for c in raw if c.term_indexes == (index,)])
            got = _covered([c for c in combined if index in (c.term_indexes or ())])
            assert got == expected
        for index in range(3):
            expected = _covered([c for c in raw if c.span_indexes == (index,)])
            got = _covered([c for c in combined if index in (c.span_indexes or ())])
            assert got == expected
