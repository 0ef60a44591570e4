"""
Range Parser - text to validated ranges

Turns range expressions such as "10-20, 25-25" into Range values. Every
segment is validated on its own: a bad segment produces one ParseError and
is skipped, the rest of the batch is still parsed.

Two input shapes are supported:
    single line:  "11-22,95-115,998-1012"   (segments split by a delimiter)
    two blocks:   one range per line, a blank line, then one value per line

Validation order for a segment (first failure wins):
    1. blank after trimming      -> skipped silently
    2. not "<int> - <int>"       -> MALFORMED_SEGMENT
    3. a bound is not an integer -> NON_NUMERIC_BOUND
    4. start > end               -> INVERTED_BOUND
"""

import re
from typing import Iterable, List, Optional, Union

from range_engine.config import DEFAULT_DELIMITER, InputMode, ParserConfig
from range_engine.range_types import (
    BlockParseResult,
    ErrorKind,
    ParseError,
    ParseResult,
    Range,
)

_SIGNS = ("+", "-")
_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_integer(text: str) -> Optional[int]:
    """
    Parse an arbitrary-precision integer.

    Only an optional sign and ASCII digits are accepted; Python's int()
    would also take underscores and non-ASCII digits.

    Returns:
        The int value, or None if text is not an integer
    """
    text = text.strip()
    if not _INTEGER.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # digit limit of int() on interpreters where it could not be lifted
        return None


def split_segment(text: str):
    """
    Split a trimmed segment on its separating dash.

    The separator is the first dash after position 0, so a leading sign
    stays with the start bound: "-5--3" splits as ("-5", "-3") and
    "abc-5" as ("abc", "5").

    Returns:
        tuple: (start_text, end_text), or None if the segment is not two
               parts around one separator
    """
    separator = text.find("-", 1)
    if separator == -1:
        return None

    start = text[:separator].strip()
    end = text[separator + 1:].strip()
    if not start or not end or start in _SIGNS or end in _SIGNS:
        return None
    if "-" in end[1:]:
        return None
    return start, end


def parse_segment(segment: str) -> Union[Range, ParseError, None]:
    """
    Parse one range segment.

    Args:
        segment: Raw text of a single range, e.g. " 10-20 "

    Returns:
        Range on success, ParseError on failure, None for a blank segment
    """
    text = segment.strip()
    if not text:
        return None

    parts = split_segment(text)
    if parts is None:
        return ParseError(ErrorKind.MALFORMED_SEGMENT, f"Malformed range: '{text}'", text)

    start = parse_integer(parts[0])
    end = parse_integer(parts[1])
    if start is None or end is None:
        return ParseError(ErrorKind.NON_NUMERIC_BOUND, f"Non-numeric range bound: '{text}'", text)

    if start > end:
        return ParseError(ErrorKind.INVERTED_BOUND, f"Range start greater than end: '{text}'", text)

    return Range(start, end)


def _collect(segments: Iterable[str]) -> ParseResult:
    ranges: List[Range] = []
    errors: List[ParseError] = []

    for segment in segments:
        outcome = parse_segment(segment)
        if outcome is None:
            continue
        if isinstance(outcome, ParseError):
            errors.append(outcome)
        else:
            ranges.append(outcome)

    return ParseResult(tuple(ranges), tuple(errors))


def parse_ranges(raw_text: str, delimiter: str = DEFAULT_DELIMITER) -> ParseResult:
    """
    Parse single-line input where segments are separated by a delimiter.

    Args:
        raw_text: Input text, e.g. "10-20, 25-25, abc-5"
        delimiter: Segment separator (default ",")

    Returns:
        ParseResult with the valid ranges and one error per bad segment,
        both in input order
    """
    if not delimiter:
        raise ValueError("Segment delimiter must not be empty")
    return _collect(raw_text.split(delimiter))


def parse_range_block(lines: Iterable[str]) -> ParseResult:
    """Parse a block with one range per line."""
    return _collect(lines)


def parse_values(lines: Iterable[str]):
    """
    Parse a block of candidate values, one integer per line.

    Blank lines are skipped, anything else that is not an integer is
    reported as INVALID_VALUE.

    Returns:
        tuple: (values, errors)
    """
    values = []
    errors = []

    for line in lines:
        text = line.strip()
        if not text:
            continue
        value = parse_integer(text)
        if value is None:
            errors.append(ParseError(ErrorKind.INVALID_VALUE, f"Invalid candidate value: '{text}'", text))
        else:
            values.append(value)

    return tuple(values), tuple(errors)


def parse_blocks(raw_text: str) -> BlockParseResult:
    """
    Parse two-block input: ranges, a blank line, then candidate values.

    Leading blank lines are ignored. Without a blank line followed by a
    non-empty values block the whole input is rejected with a single
    MISSING_SEPARATOR error and no ranges are produced.
    """
    lines = raw_text.splitlines()

    first = 0
    while first < len(lines) and not lines[first].strip():
        first += 1

    separator = None
    for index in range(first, len(lines)):
        if not lines[index].strip():
            separator = index
            break

    if separator is None or not any(line.strip() for line in lines[separator + 1:]):
        error = ParseError(
            ErrorKind.MISSING_SEPARATOR,
            "Missing blank line separator between ranges and candidate values",
        )
        return BlockParseResult(errors=(error,))

    range_result = parse_range_block(lines[first:separator])
    values, value_errors = parse_values(lines[separator + 1:])

    return BlockParseResult(
        ranges=range_result.ranges,
        values=values,
        errors=range_result.errors + value_errors,
    )


def parse(raw_text: str, config: ParserConfig = ParserConfig()):
    """
    Parse input in the shape selected by config.

    Returns:
        ParseResult for InputMode.SINGLE_LINE, BlockParseResult for
        InputMode.TWO_BLOCK
    """
    if config.mode is InputMode.TWO_BLOCK:
        return parse_blocks(raw_text)
    return parse_ranges(raw_text, config.delimiter)
