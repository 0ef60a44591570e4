"""
Range Merger - canonical disjoint range set

Folds an unordered collection of ranges into the minimal sorted list of
disjoint ranges. Overlapping AND adjacent ranges are merged, so [1, 5] and
[6, 10] become [1, 10] while [1, 5] and [7, 10] stay apart.
"""

from typing import Iterable, List, Sequence

from range_engine.range_types import Range


def merge_all_ranges(ranges: Iterable[Range]) -> List[Range]:
    """
    Merge all overlapping or adjacent ranges in a single pass.

    Args:
        ranges: Iterable of Range values, in any order

    Returns:
        list: New list of Range values, sorted by start, where consecutive
              ranges are separated by at least one uncovered integer

    Algorithm:
        1. Sort ranges by (start, end)
        2. Keep the last merged range as an accumulator
        3. If the next range starts at or before accumulator.end + 1, extend
           the accumulator to cover it
        4. Otherwise emit the accumulator and start a new one

    Time Complexity: O(n log n) where n is the number of ranges
    Space Complexity: O(n) for the output list
    """
    sorted_ranges = sorted(ranges)
    if not sorted_ranges:
        return []

    merged = [sorted_ranges[0]]

    for current in sorted_ranges[1:]:
        last = merged[-1]

        if last.touches(current):
            merged[-1] = last.union(current)
        else:
            merged.append(current)

    return merged


def is_canonical(ranges: Sequence[Range]) -> bool:
    """
    Check that ranges are sorted, disjoint and non-touching.

    This is exactly the shape merge_all_ranges() emits.
    """
    for i in range(len(ranges) - 1):
        if ranges[i + 1].start <= ranges[i].end + 1:
            return False
    return True
