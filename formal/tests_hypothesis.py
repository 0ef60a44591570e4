"""
Property-based tests for the range merger using Hypothesis.

Checks the invariants merge_all_ranges must hold for all valid inputs:
coverage is preserved, output is canonical (sorted, disjoint, non-touching),
and the result does not depend on input order or on being merged twice.
"""

import pytest
from hypothesis import given, strategies as st, settings
from hypothesis.strategies import lists, integers

from range_engine.range_types import Range
from range_engine.range_merger import merge_all_ranges, is_canonical
from range_engine.range_checker import total_coverage


# Strategy for generating valid ranges (start <= end)
@st.composite
def valid_range(draw, min_value=-1000000, max_value=1000000):
    """Generate a valid range where start <= end."""
    start = draw(integers(min_value=min_value, max_value=max_value))
    end = draw(integers(min_value=start, max_value=max_value))
    return Range(start, end)


ranges_strategy = lists(valid_range(), min_size=0, max_size=100)

# Dense ranges over a small domain, so touching and overlapping pairs are common
small_ranges_strategy = lists(valid_range(min_value=-50, max_value=50), min_size=0, max_size=30)

# Bounds well past 64 bits
huge_ranges_strategy = lists(valid_range(min_value=-10 ** 40, max_value=10 ** 40), min_size=0, max_size=50)


def ranges_to_set(ranges):
    """Convert a list of ranges to a set of all integers covered."""
    result = set()
    for r in ranges:
        result.update(range(r.start, r.end + 1))
    return result


# Property 1: Merged ranges cover the same integers as original ranges
@given(small_ranges_strategy)
@settings(max_examples=500)
def test_coverage_preservation(ranges):
    merged = merge_all_ranges(ranges)
    assert ranges_to_set(merged) == ranges_to_set(ranges)


# Property 2: Output is canonical for any input
@given(ranges_strategy)
def test_output_is_canonical(ranges):
    merged = merge_all_ranges(ranges)

    assert merged == sorted(merged)
    assert all(r.start <= r.end for r in merged)
    assert is_canonical(merged), f"Output has touching ranges: {merged}"


@given(huge_ranges_strategy)
def test_output_is_canonical_for_huge_bounds(ranges):
    assert is_canonical(merge_all_ranges(ranges))


# Property 3: Idempotence - merging already merged ranges has no effect
@given(ranges_strategy)
def test_idempotence(ranges):
    merged_once = merge_all_ranges(ranges)
    merged_twice = merge_all_ranges(merged_once)

    assert merged_once == merged_twice, \
        f"Not idempotent: first={merged_once}, second={merged_twice}"


# Property 4: Order independence under any permutation
@given(st.data(), small_ranges_strategy)
def test_order_independence(data, ranges):
    permuted = data.draw(st.permutations(ranges))
    assert merge_all_ranges(permuted) == merge_all_ranges(ranges)


# Property 5: Inputs are never modified
@given(ranges_strategy)
def test_input_not_mutated(ranges):
    snapshot = list(ranges)
    merge_all_ranges(ranges)
    assert ranges == snapshot


# Property 6: Single range remains unchanged
@given(valid_range())
def test_single_range(r):
    assert merge_all_ranges([r]) == [r]


# Property 7: Coverage of merged set equals number of distinct integers
@given(small_ranges_strategy)
@settings(max_examples=500)
def test_coverage_calculation(ranges):
    merged = merge_all_ranges(ranges)
    assert total_coverage(merged) == len(ranges_to_set(ranges))


# Property 8: Merging never increases the number of ranges
@given(ranges_strategy)
def test_merge_never_grows(ranges):
    assert len(merge_all_ranges(ranges)) <= len(ranges)


# Property 9: Ranges separated by gaps remain separate
@given(lists(integers(min_value=0, max_value=100), min_size=2, max_size=10, unique=True))
def test_non_touching_ranges_separate(positions):
    positions.sort()
    # each range is two wide and starts 10 apart, leaving a gap of 8
    ranges = [Range(pos * 10, pos * 10 + 1) for pos in positions]

    merged = merge_all_ranges(ranges)

    assert merged == ranges


# Property 10: Complete overlap collapses to single range
@given(integers(min_value=-1000, max_value=1000), integers(min_value=2, max_value=100))
def test_complete_overlap_single_range(start, length):
    end = start + length
    ranges = [
        Range(start, end),
        Range(start, end),
        Range(start + 1, end - 1),
        Range(start, start + 1),
    ]

    assert merge_all_ranges(ranges) == [Range(start, end)]


# Property 11: Chains of adjacent ranges collapse to one
@given(integers(min_value=-10 ** 30, max_value=10 ** 30), lists(integers(min_value=0, max_value=10 ** 20), min_size=1, max_size=20))
def test_adjacent_chain_collapses(start, widths):
    ranges = []
    cursor = start
    for width in widths:
        ranges.append(Range(cursor, cursor + width))
        cursor += width + 1

    merged = merge_all_ranges(reversed(ranges))

    assert merged == [Range(start, cursor - 1)]


# Concrete test cases for edge cases
def test_empty_input():
    assert merge_all_ranges([]) == []


def test_adjacent_ranges_merge():
    """Adjacent ranges leave no integer between them, so they merge."""
    assert merge_all_ranges([Range(1, 5), Range(6, 10)]) == [Range(1, 10)]


def test_gap_of_one_does_not_merge():
    """6 is not covered, so [1,5] and [7,10] must stay apart."""
    assert merge_all_ranges([Range(1, 5), Range(7, 10)]) == [Range(1, 5), Range(7, 10)]


def test_touching_ranges():
    assert merge_all_ranges([Range(1, 5), Range(5, 10)]) == [Range(1, 10)]


def test_overlapping_chains():
    ranges = [Range(1, 3), Range(5, 7), Range(2, 6), Range(10, 15), Range(12, 20)]
    assert merge_all_ranges(ranges) == [Range(1, 7), Range(10, 20)]


def test_duplicate_ranges():
    assert merge_all_ranges([Range(1, 5), Range(1, 5), Range(1, 5)]) == [Range(1, 5)]


def test_negative_ranges():
    ranges = [Range(-10, -5), Range(-7, -3), Range(0, 5)]
    assert merge_all_ranges(ranges) == [Range(-10, -3), Range(0, 5)]


def test_single_point_ranges():
    ranges = [Range(1, 1), Range(2, 2), Range(3, 3), Range(5, 5)]
    assert merge_all_ranges(ranges) == [Range(1, 3), Range(5, 5)]


def test_contained_range_does_not_shrink():
    assert merge_all_ranges([Range(1, 100), Range(10, 20)]) == [Range(1, 100)]


def test_coverage_after_merge():
    merged = merge_all_ranges([Range(1, 5), Range(3, 8), Range(10, 12)])
    assert merged == [Range(1, 8), Range(10, 12)]
    assert total_coverage(merged) == 11


def test_large_magnitude_count():
    r = Range(10 ** 30, 10 ** 30 + 10 ** 20)
    assert r.count == 10 ** 20 + 1
    assert total_coverage(merge_all_ranges([r, Range(10 ** 30, 10 ** 30)])) == 10 ** 20 + 1


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
