"""Failure policy: flag results that contain unwanted characters."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chars.pipeline import StreamResult

logger = logging.getLogger(__name__)

#: Counter names accepted by ``--fail``, mapped to :class:`StreamResult` fields.
POLICY_COUNTERS: dict[str, str] = {
    "crlf": "crlf_count",
    "lf": "lf_count",
    "tab": "tab_count",
    "nul": "nul_count",
    "bom8": "bom_utf8_count",
    "bom16": "bom_utf16_count",
    "nonascii": "non_ascii_count",
}


def parse_policy(names: str | Iterable[str]) -> tuple[str, ...]:
    """Normalise a comma-separated list of counter names.

    Unknown names are logged as warnings and dropped; duplicates are removed
    while keeping first-seen order.
    """
    if isinstance(names, str):
        names = names.split(",")
    selected: list[str] = []
    for raw in names:
        name = raw.strip().lower()
        if not name or name in selected:
            continue
        if name not in POLICY_COUNTERS:
            logger.warning("unknown failure character name: %s", raw.strip())
            continue
        selected.append(name)
    return tuple(selected)


def failure_sum(result: StreamResult, names: Iterable[str]) -> int:
    """Return the sum of the named counters of *result*."""
    return sum(getattr(result, POLICY_COUNTERS[name]) for name in names)


def apply_policy(results: Iterable[StreamResult], names: str | Iterable[str]) -> int:
    """Mark every result whose selected counters are non-zero as failed.

    :param results: Completed results; their ``failed`` flag is updated.
    :param names: Counter names, as a comma-separated string or an iterable.
    :returns: The total of all selected counters over the failed results.
    """
    selected = parse_policy(names)
    total = 0
    for result in results:
        found = failure_sum(result, selected)
        if found > 0:
            result.failed = True
            total += found
    return total
