"""
Use cases wiring parser -> merger -> checker.

Each call is one batch: parse the text, merge if the query needs it, run the
query. Errors are always returned next to whatever partial result exists.
When no usable input survives parsing the query is not run and an
EMPTY_RESULT error is appended instead.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from loguru import logger

from range_engine.config import ParserConfig
from range_engine.range_checker import classify, total_coverage
from range_engine.range_merger import merge_all_ranges
from range_engine.range_parser import parse, parse_blocks
from range_engine.range_types import Classification, ErrorKind, ParseError, Range


@dataclass(frozen=True)
class CoverageReport:
    ranges: Tuple[Range, ...] = ()
    merged: Tuple[Range, ...] = ()
    total: Optional[int] = None
    errors: Tuple[ParseError, ...] = ()

    @property
    def ok(self) -> bool:
        return self.total is not None


@dataclass(frozen=True)
class ClassificationReport:
    ranges: Tuple[Range, ...] = ()
    classification: Optional[Classification] = None
    errors: Tuple[ParseError, ...] = ()

    @property
    def ok(self) -> bool:
        return self.classification is not None


def _report_errors(errors):
    for error in errors:
        if error.kind.fatal:
            logger.error(str(error))
        else:
            logger.warning(str(error))


def _empty_result(message):
    return ParseError(ErrorKind.EMPTY_RESULT, message)


def compute_coverage(raw_text: str, config: ParserConfig = ParserConfig()) -> CoverageReport:
    """
    Count the distinct integers covered by the ranges in raw_text.

    In two-block mode only the ranges block is used; candidate values are
    ignored.
    """
    result = parse(raw_text, config)
    errors = result.errors
    ranges = result.ranges

    if not ranges:
        if not any(e.kind is ErrorKind.MISSING_SEPARATOR for e in errors):
            errors = errors + (_empty_result("No usable ranges - cannot compute coverage"),)
        _report_errors(errors)
        return CoverageReport(errors=errors)

    _report_errors(errors)
    logger.info(f"Validated {len(ranges)} ranges")

    merged = tuple(merge_all_ranges(ranges))
    logger.debug("Merged ranges:")
    for r in merged:
        logger.debug(f"  {r}")

    total = total_coverage(merged)
    logger.success(f"{len(merged)} merged ranges cover {total} distinct integers")

    return CoverageReport(ranges=ranges, merged=merged, total=total, errors=errors)


def classify_candidates(raw_text: str) -> ClassificationReport:
    """
    Classify each candidate value against the ranges of two-block input.

    Ranges are not merged; membership is tested against the raw set.
    """
    result = parse_blocks(raw_text)
    errors = result.errors

    if any(e.kind is ErrorKind.MISSING_SEPARATOR for e in errors):
        _report_errors(errors)
        return ClassificationReport(errors=errors)

    if not result.ranges:
        errors = errors + (_empty_result("No usable ranges - cannot classify values"),)
        _report_errors(errors)
        return ClassificationReport(errors=errors)

    if not result.values:
        errors = errors + (_empty_result("No candidate values to classify"),)
        _report_errors(errors)
        return ClassificationReport(ranges=result.ranges, errors=errors)

    _report_errors(errors)
    logger.info(f"Validated {len(result.ranges)} ranges and {len(result.values)} candidate values")

    classification = classify(result.ranges, result.values)
    logger.success(f"{classification.matched_count} of {len(classification.items)} values fall within a range")

    return ClassificationReport(ranges=result.ranges, classification=classification, errors=errors)

