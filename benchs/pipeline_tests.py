"""
End-to-end tests for the coverage and classification use cases.

Loads input from testcases/ and checks the full parse -> merge -> query
pipeline, including partial-failure reporting.

Usage:
    python3 -m pytest benchs/pipeline_tests.py
"""

from pathlib import Path

import pytest

from range_engine.config import InputMode, ParserConfig
from range_engine.log import configure_logging
from range_engine.pipeline import classify_candidates, compute_coverage
from range_engine.range_types import ErrorKind, Range

TESTCASES = Path(__file__).resolve().parent.parent / "testcases"

BIG = 10 ** 30


def read_testcase(name):
    return (TESTCASES / name).read_text()


@pytest.fixture
def log_lines():
    lines = []
    configure_logging(verbose=True, sink=lines.append)
    yield lines
    configure_logging()


def test_coverage_default_input():
    report = compute_coverage(read_testcase("default_input.txt"), ParserConfig(mode=InputMode.TWO_BLOCK))

    assert report.ok
    assert report.merged == (Range(3, 5), Range(10, 20))
    assert report.total == 14
    assert report.errors == ()


def test_coverage_id_ranges_single_line():
    report = compute_coverage(read_testcase("id_ranges.txt"))

    assert len(report.ranges) == 11
    assert len(report.merged) == 11
    assert report.total == 106
    assert report.errors == ()


def test_coverage_mixed_input_keeps_partial_results():
    report = compute_coverage(read_testcase("mixed_input.txt"), ParserConfig(mode=InputMode.TWO_BLOCK))

    assert report.ok
    assert report.merged == (Range(10, 20), Range(25, 25), Range(BIG, BIG + 10 ** 20))
    assert report.total == 11 + 1 + 10 ** 20 + 1
    # candidate value errors also surface, after the range errors
    assert [e.kind for e in report.errors] == [
        ErrorKind.NON_NUMERIC_BOUND,
        ErrorKind.INVERTED_BOUND,
        ErrorKind.INVALID_VALUE,
    ]


def test_coverage_single_line_partial_failure():
    report = compute_coverage("10-20, 25-25, abc-5, 30-20")

    assert report.ranges == (Range(10, 20), Range(25, 25))
    assert report.total == 12
    messages = [str(e).lower() for e in report.errors]
    assert len(messages) == 2
    assert "non-numeric" in messages[0]
    assert "start greater than end" in messages[1]


def test_coverage_no_usable_ranges():
    report = compute_coverage("abc-5, 30-20")

    assert not report.ok
    assert report.total is None
    assert report.merged == ()
    assert [e.kind for e in report.errors] == [
        ErrorKind.NON_NUMERIC_BOUND,
        ErrorKind.INVERTED_BOUND,
        ErrorKind.EMPTY_RESULT,
    ]


def test_coverage_empty_text():
    report = compute_coverage("")
    assert [e.kind for e in report.errors] == [ErrorKind.EMPTY_RESULT]


def test_coverage_missing_separator_not_reported_as_empty():
    report = compute_coverage(read_testcase("missing_separator.txt"), ParserConfig(mode=InputMode.TWO_BLOCK))

    assert not report.ok
    assert [e.kind for e in report.errors] == [ErrorKind.MISSING_SEPARATOR]


def test_classify_default_input():
    report = classify_candidates(read_testcase("default_input.txt"))

    assert report.ok
    assert report.classification.matched_count == 3
    assert [v for v, matched in report.classification.items if matched] == [5, 11, 17]


def test_classify_mixed_input():
    report = classify_candidates(read_testcase("mixed_input.txt"))

    assert report.ok
    assert report.classification.items == (
        (15, True),
        (24, False),
        (BIG + 5 * 10 ** 19, True),
        (21, False),
    )
    assert len(report.errors) == 3


def test_classify_missing_separator():
    report = classify_candidates(read_testcase("missing_separator.txt"))

    assert not report.ok
    assert report.ranges == ()
    assert [e.kind for e in report.errors] == [ErrorKind.MISSING_SEPARATOR]


def test_classify_no_values():
    report = classify_candidates("1-5\n\nfoo\n")

    assert not report.ok
    assert report.ranges == (Range(1, 5),)
    assert [e.kind for e in report.errors] == [ErrorKind.INVALID_VALUE, ErrorKind.EMPTY_RESULT]


def test_classify_no_ranges():
    report = classify_candidates("x-5\n\n3\n")

    assert not report.ok
    assert [e.kind for e in report.errors] == [ErrorKind.NON_NUMERIC_BOUND, ErrorKind.EMPTY_RESULT]


def test_coverage_bound_past_int_str_limit(log_lines):
    huge = "9" * 5000
    report = compute_coverage(f"0-{huge}, x-1, 5-{huge}")

    assert report.ok
    assert report.merged == (Range(0, 10 ** 5000 - 1),)
    assert report.total == 10 ** 5000
    assert [e.kind for e in report.errors] == [ErrorKind.NON_NUMERIC_BOUND]
    output = "".join(log_lines)
    assert f"0-{huge}" in output
    assert f"cover 1{'0' * 5000} distinct integers" in output


def test_classify_empty_value_block_is_missing_separator():
    report = classify_candidates("1-5\n\n")

    assert not report.ok
    assert [e.kind for e in report.errors] == [ErrorKind.MISSING_SEPARATOR]


def test_errors_are_logged(log_lines):
    compute_coverage("1-3, abc-5, 4-6")
    output = "".join(log_lines)

    assert "WARNING" in output
    assert "abc-5" in output
    assert "1-6" in output
    assert "SUCCESS" in output


def test_empty_result_logged_as_error(log_lines):
    compute_coverage("abc-5")
    assert any(line.startswith("ERROR") and "No usable ranges" in line for line in log_lines)


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
