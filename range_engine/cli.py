"""
Command-line interface for the range engine.

Usage:
    range-engine coverage [input_file] [--delimiter D] [--mode single|blocks] [-v]
    range-engine classify [input_file] [-v]

Diagnostics (parse errors, merged ranges with -v) go to stderr, the answer
goes to stdout.
"""

import argparse
import sys

from range_engine.config import DEFAULT_DELIMITER, InputMode, ParserConfig
from range_engine.log import configure_logging
from range_engine.pipeline import classify_candidates, compute_coverage


def build_parser():
    parser = argparse.ArgumentParser(
        prog="range-engine",
        description="Merge integer ranges and answer coverage/membership queries",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    coverage = subparsers.add_parser(
        "coverage", help="Count distinct integers covered by the ranges"
    )
    coverage.add_argument("--delimiter", "-d", default=DEFAULT_DELIMITER,
                          help="Segment delimiter for single-line input (default: ',')")
    coverage.add_argument("--mode", "-m", choices=[m.value for m in InputMode],
                          default=InputMode.SINGLE_LINE.value,
                          help="single: delimited ranges; blocks: ranges, blank line, values")

    subparsers.add_parser(
        "classify", help="Check candidate values against ranges (two-block input)"
    )

    for sub in subparsers.choices.values():
        sub.add_argument("input_file", nargs="?", type=argparse.FileType("r"),
                         default=sys.stdin,
                         help="Input file (default: stdin)")
        sub.add_argument("--verbose", "-v", action="store_true",
                         help="Log merged ranges and other details")

    return parser


def run_coverage(args) -> int:
    try:
        config = ParserConfig(delimiter=args.delimiter, mode=InputMode(args.mode))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    report = compute_coverage(args.input_file.read(), config)
    if not report.ok:
        return 1

    if args.verbose:
        for r in report.merged:
            print(r)
    print(f"Total coverage: {report.total}")
    return 0


def run_classify(args) -> int:
    report = classify_candidates(args.input_file.read())
    if not report.ok:
        return 1

    classification = report.classification
    print(f"Valid IDs count: {classification.matched_count}")
    for value, matched in classification.items:
        print(f"{value}: {'Fresh' if matched else 'Spoiled'}")
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.command == "coverage":
            return run_coverage(args)
        return run_classify(args)
    finally:
        if args.input_file is not sys.stdin:
            args.input_file.close()


if __name__ == "__main__":
    sys.exit(main())
