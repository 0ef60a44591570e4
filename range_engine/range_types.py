"""
Value types shared by the range parser, merger and checker.

A Range is a closed interval [start, end] over Python ints, so bounds may
exceed any fixed machine width. Every type here is immutable; operations
build new values instead of editing existing ones.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# Python 3.11+ caps int <-> str conversion at 4300 digits; bounds are unbounded
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)


@dataclass(frozen=True, order=True)
class Range:
    """
    Closed interval [start, end] with start <= end.

    Ordering compares (start, end), which is the sort key used by the merger.
    """

    start: int
    end: int

    def __post_init__(self):
        for name in ("start", "end"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Range {name} must be an int, got {type(value).__name__}")
        if self.start > self.end:
            raise ValueError(f"Range start {self.start} is greater than end {self.end}")

    @property
    def count(self) -> int:
        """Number of integers covered (closed form, never enumerated)."""
        return self.end - self.start + 1

    def contains(self, value: int) -> bool:
        return self.start <= value <= self.end

    def touches(self, other: "Range") -> bool:
        """
        True if the two ranges overlap or are adjacent.

        [1, 5] touches [6, 10] since no integer lies between them;
        [1, 5] does not touch [7, 10].
        """
        return other.start <= self.end + 1 and self.start <= other.end + 1

    def union(self, other: "Range") -> "Range":
        """Smallest range covering both. Only meaningful when they touch."""
        return Range(min(self.start, other.start), max(self.end, other.end))

    def __str__(self):
        return f"{self.start}-{self.end}"


class ErrorKind(Enum):
    MALFORMED_SEGMENT = "malformed_segment"
    NON_NUMERIC_BOUND = "non_numeric_bound"
    INVERTED_BOUND = "inverted_bound"
    MISSING_SEPARATOR = "missing_separator"
    INVALID_VALUE = "invalid_value"
    EMPTY_RESULT = "empty_result"

    @property
    def fatal(self) -> bool:
        """Whole-batch conditions, as opposed to per-segment ones."""
        return self in (ErrorKind.MISSING_SEPARATOR, ErrorKind.EMPTY_RESULT)


@dataclass(frozen=True)
class ParseError:
    """One reportable problem found while reading input."""

    kind: ErrorKind
    message: str
    segment: Optional[str] = None

    def __str__(self):
        return self.message


@dataclass(frozen=True)
class ParseResult:
    """Ranges that parsed cleanly plus errors for the segments that did not."""

    ranges: Tuple[Range, ...] = ()
    errors: Tuple[ParseError, ...] = ()


@dataclass(frozen=True)
class BlockParseResult:
    """Result of two-block input: a ranges block and a candidate value block."""

    ranges: Tuple[Range, ...] = ()
    values: Tuple[int, ...] = ()
    errors: Tuple[ParseError, ...] = ()


@dataclass(frozen=True)
class Classification:
    """Membership verdict for each candidate, in input order."""

    items: Tuple[Tuple[int, bool], ...] = ()

    @property
    def matched_count(self) -> int:
        return sum(1 for _, matched in self.items if matched)

    @property
    def unmatched_count(self) -> int:
        return len(self.items) - self.matched_count
