"""Command-line interface for chars."""

from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import NoReturn

import chars
from chars._utils import STDIN_ARG
from chars.classifier import StreamClassifier
from chars.enums import Outcome
from chars.policy import POLICY_COUNTERS, apply_policy
from chars.report import SORT_KEYS, render_json, render_table, sort_results
from chars.selector import iter_sources, scan_sources

EXIT_INVALID_REGEX = 3
EXIT_CONFLICTING_FLAGS = 4
EXIT_INVALID_SORT = 5
EXIT_FAILED = 100


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chars",
        description="Determine the end-of-line format, tabs, BOM, NUL and "
        "non-ASCII bytes of files.",
        epilog="Use - to read from standard input.  "
        "Also try: chars *  -or-  chars */*  -or-  chars '**/*.py'",
    )
    parser.add_argument(
        "files", nargs="*", help="File globs to examine (default: standard input)"
    )
    parser.add_argument(
        "-b", "--binary", action="store_true", help="Examine binary files"
    )
    parser.add_argument(
        "-e",
        "--exclude",
        metavar="REGEX",
        help="Exclude paths matching a regular expression; use .* instead of *",
    )
    parser.add_argument(
        "-f",
        "--fail",
        metavar="CHARS",
        help="Exit with status 100 if any of these characters exist, "
        f"e.g. crlf,nul,bom8 (choices: {','.join(POLICY_COUNTERS)})",
    )
    parser.add_argument(
        "-F",
        "--only-failed",
        action="store_true",
        help="With --fail, list only the files that failed",
    )
    parser.add_argument("-j", "--json", action="store_true", help="Output JSON")
    parser.add_argument(
        "-t", "--totals", action="store_true", help="Append a totals row"
    )
    parser.add_argument(
        "-c", "--comma", action="store_true", help="Use thousands separators"
    )
    parser.add_argument(
        "-l",
        "--max-length",
        type=int,
        default=0,
        metavar="N",
        help="Shorten file names to at most N characters",
    )
    parser.add_argument(
        "-s",
        "--sort",
        metavar="COLUMN",
        help=f"Sort by column (one of: {', '.join(SORT_KEYS)})",
    )
    parser.add_argument(
        "-i",
        "--ignore-case",
        action="store_true",
        help="Match file globs case-insensitively",
    )
    parser.add_argument(
        "-w",
        "--workers",
        type=int,
        default=1,
        metavar="N",
        help="Number of files to examine concurrently (default: 1)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug messages to stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"chars {chars.__version__}"
    )
    return parser


def _fail(message: str, code: int) -> NoReturn:
    print(f"chars: {message}", file=sys.stderr)
    sys.exit(code)


def _check_flags(args: argparse.Namespace) -> re.Pattern[str] | None:
    """Validate flag combinations; return the compiled exclude pattern."""
    if args.json and (args.totals or args.comma or args.max_length):
        _fail(
            "--json cannot be combined with --totals, --comma or --max-length",
            EXIT_CONFLICTING_FLAGS,
        )
    if args.only_failed and not args.fail:
        _fail("--only-failed requires --fail", EXIT_CONFLICTING_FLAGS)
    if args.sort is not None and args.sort.lower() not in SORT_KEYS:
        _fail(f"invalid sort column: {args.sort}", EXIT_INVALID_SORT)
    if not args.exclude:
        return None
    try:
        return re.compile(args.exclude)
    except re.error:
        _fail(
            f"invalid 'exclude' regular expression: {args.exclude}",
            EXIT_INVALID_REGEX,
        )


def main(argv: list[str] | None = None) -> None:
    """Run the ``chars`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )
    exclude = _check_flags(args)

    sources = list(
        iter_sources(
            args.files or [STDIN_ARG], exclude=exclude, ignore_case=args.ignore_case
        )
    )
    outcomes = scan_sources(
        sources,
        StreamClassifier(),
        examine_binary=args.binary,
        workers=args.workers,
    )

    results = []
    for outcome in outcomes:
        if outcome.kind is Outcome.OK:
            results.append(outcome.result)
        elif outcome.kind is Outcome.ERROR:
            print(f"chars: {outcome.source_name}: {outcome.reason}", file=sys.stderr)

    failed_total = apply_policy(results, args.fail) if args.fail else 0
    if args.only_failed:
        results = [r for r in results if r.failed]
    if args.sort is not None:
        results = sort_results(results, args.sort)

    if args.json:
        output = render_json(results)
    else:
        output = render_table(
            results,
            totals=args.totals,
            comma=args.comma,
            max_length=args.max_length,
        )
    if output:
        print(output)

    if failed_total > 0:
        sys.exit(EXIT_FAILED)


if __name__ == "__main__":
    main()
