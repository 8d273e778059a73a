"""Source selection: glob expansion, filtering and (optionally pooled) scanning."""

from __future__ import annotations

import concurrent.futures
import glob
import logging
import os
import re
from collections.abc import Iterable, Iterator

from chars._utils import STDIN_ARG
from chars.case import case_insensitive
from chars.classifier import StreamClassifier
from chars.pipeline import ScanOutcome

logger = logging.getLogger(__name__)


def expand_pattern(pattern: str, ignore_case: bool = False) -> list[str]:
    """Return the paths matching one glob *pattern*, sorted.

    Hidden files match wildcards like any other name.
    """
    if ignore_case:
        pattern = case_insensitive(pattern)
    matches = sorted(glob.glob(pattern, recursive=True, include_hidden=True))
    if not matches:
        logger.debug("no files matched: %s", pattern)
    return matches


def iter_sources(
    patterns: Iterable[str],
    exclude: re.Pattern[str] | None = None,
    ignore_case: bool = False,
) -> Iterator[str]:
    """Yield the sources named by command-line *patterns*, in order.

    ``"-"`` is passed through as-is and means standard input.  Every other
    pattern is glob-expanded; directories and paths matching *exclude*
    (``re.search`` semantics) are dropped.  A pattern that matches nothing
    but names a path literally (no wildcards, or an existing file such as
    ``data[1].txt``) is yielded as-is, to be counted or reported when opened.
    """
    for pattern in patterns:
        if pattern == STDIN_ARG:
            yield STDIN_ARG
            continue
        paths = expand_pattern(pattern, ignore_case=ignore_case)
        if not paths and (not glob.has_magic(pattern) or os.path.lexists(pattern)):
            paths = [pattern]
        for path in paths:
            if os.path.isdir(path):
                logger.debug("skipping directory: %s", path)
                continue
            if exclude is not None and exclude.search(path):
                logger.debug("excluding file: %s", path)
                continue
            yield path


def scan_sources(
    sources: Iterable[str],
    classifier: StreamClassifier,
    examine_binary: bool = False,
    workers: int = 1,
) -> list[ScanOutcome]:
    """Classify every source and return the outcomes in input order.

    :param sources: Paths, or ``"-"`` for standard input.
    :param classifier: Shared classifier; it holds no per-stream state.
    :param examine_binary: Count binary-looking sources instead of skipping them.
    :param workers: Number of threads to use.  ``1`` scans sequentially.
    """

    def scan(source: str) -> ScanOutcome:
        if source == STDIN_ARG:
            return classifier.classify_stdin(examine_binary=examine_binary)
        return classifier.classify_path(source, examine_binary=examine_binary)

    if workers <= 1:
        return [scan(source) for source in sources]
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(scan, sources))
