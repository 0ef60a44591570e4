"""
Range Checker - coverage and membership queries

Read-only queries over a range sequence:
    total_coverage   distinct integers covered (exact on a merged set)
    contains         linear membership scan, works on any set
    contains_sorted  binary search, merged sets only
    classify         membership verdict for a list of candidate values

Coverage is computed in closed form from each range's count, never by
walking the members of a range.
"""

from typing import Iterable, Sequence

from range_engine.range_types import Classification, Range


def total_coverage(ranges: Iterable[Range]) -> int:
    """
    Sum of the counts of all ranges.

    Only equals the number of distinct integers covered when the ranges
    are merged first; overlapping input is counted twice.
    """
    total = 0
    for r in ranges:
        total += r.count
    return total


def contains(ranges: Iterable[Range], value: int) -> bool:
    """True if value falls inside any of the ranges. No ordering assumed."""
    return any(r.contains(value) for r in ranges)


def contains_sorted(ranges: Sequence[Range], value: int) -> bool:
    """
    Check if a value falls within any of the merged ranges using binary search.

    Args:
        ranges: Ranges sorted by start, non-overlapping
        value: Integer to check

    Returns:
        bool: True if value is in any range, False otherwise
    """
    left, right = 0, len(ranges) - 1

    while left <= right:
        mid = (left + right) // 2
        r = ranges[mid]

        if value < r.start:
            right = mid - 1
        elif value > r.end:
            # sorted and disjoint, so nothing to the left can hold value either
            left = mid + 1
        else:
            return True

    return False


def classify(ranges: Sequence[Range], values: Iterable[int]) -> Classification:
    """
    Test each candidate value against the ranges.

    Uses the linear scan, so ranges do not have to be merged.

    Returns:
        Classification with one (value, matched) pair per candidate, in
        input order
    """
    return Classification(tuple((value, contains(ranges, value)) for value in values))


def count_contained(ranges: Sequence[Range], values: Iterable[int]) -> int:
    """Count how many values fall within at least one range."""
    return classify(ranges, values).matched_count
