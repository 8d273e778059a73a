"""Result ordering, totals and rendering (text table or JSON)."""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence

from chars.pipeline import COUNTER_FIELDS, StreamResult

#: Column headers of the text table, in order.
HEADERS: tuple[str, ...] = (
    "filename",
    "crlf",
    "lf",
    "tab",
    "nul",
    "bom8",
    "bom16",
    "non-ASCII",
    "max-consec-N-A",
    "bytesRead",
)

#: Accepted ``--sort`` columns, mapped to result attributes.
SORT_KEYS: dict[str, str] = {
    "filename": "source_name",
    "crlf": "crlf_count",
    "lf": "lf_count",
    "tab": "tab_count",
    "nul": "nul_count",
    "bom8": "bom_utf8_count",
    "bom16": "bom_utf16_count",
    "nonascii": "non_ascii_count",
    "maxconsec": "max_consecutive_non_ascii",
    "bytesread": "bytes_read",
}

TOTAL_LABEL = "TOTAL"
_ELLIPSIS = "..."


def _filename_key(result: StreamResult) -> str:
    return result.source_name.casefold()


def sort_results(
    results: Iterable[StreamResult], column: str = "filename"
) -> list[StreamResult]:
    """Return *results* sorted ascending by *column*.

    File names compare case-insensitively.  Counter columns break ties by
    file name.  An unknown *column* sorts by file name.
    """
    field = SORT_KEYS.get(column.lower(), "source_name")
    if field == "source_name":
        return sorted(results, key=_filename_key)
    return sorted(results, key=lambda r: (getattr(r, field), _filename_key(r)))


def compute_totals(results: Iterable[StreamResult]) -> StreamResult:
    """Sum every counter over *results*.

    ``max_consecutive_non_ascii`` is the maximum over all results rather
    than a sum.
    """
    total = StreamResult(source_name=TOTAL_LABEL)
    for result in results:
        for name in COUNTER_FIELDS:
            if name == "max_consecutive_non_ascii":
                total.max_consecutive_non_ascii = max(
                    total.max_consecutive_non_ascii, result.max_consecutive_non_ascii
                )
            else:
                setattr(total, name, getattr(total, name) + getattr(result, name))
        total.failed = total.failed or result.failed
    return total


def shorten(name: str, max_length: int) -> str:
    """Shorten *name* to *max_length* characters with a middle ellipsis.

    A *max_length* of 0 (or less) disables shortening.
    """
    if max_length <= 0 or len(name) <= max_length:
        return name
    if max_length <= len(_ELLIPSIS):
        return name[:max_length]
    keep = max_length - len(_ELLIPSIS)
    head = (keep + 1) // 2
    tail = keep - head
    return name[:head] + _ELLIPSIS + (name[-tail:] if tail else "")


def format_count(value: int, comma: bool = False) -> str:
    return f"{value:,}" if comma else str(value)


def _row(result: StreamResult, comma: bool, max_length: int) -> list[str]:
    name = shorten(result.source_name, max_length)
    return [name] + [format_count(v, comma) for v in result.counters().values()]


def render_table(
    results: Sequence[StreamResult],
    totals: bool = False,
    comma: bool = False,
    max_length: int = 0,
) -> str:
    """Render *results* as an ASCII-bordered table.

    :returns: The table text, or ``""`` when there are no results.
    """
    if not results:
        return ""
    rows = [_row(r, comma, max_length) for r in results]
    footer = _row(compute_totals(results), comma, 0) if totals else None

    widths = [len(h) for h in HEADERS]
    for row in rows + ([footer] if footer else []):
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    rule = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def line(cells: Sequence[str]) -> str:
        padded = [cells[0].ljust(widths[0])]
        padded += [cell.rjust(w) for cell, w in zip(cells[1:], widths[1:])]
        return "| " + " | ".join(padded) + " |"

    out = [rule, line(HEADERS), rule]
    out.extend(line(row) for row in rows)
    out.append(rule)
    if footer:
        out.extend([line(footer), rule])
    return "\n".join(out)


def render_json(results: Sequence[StreamResult]) -> str:
    """Render *results* as an indented JSON array, or ``""`` when empty."""
    if not results:
        return ""
    return json.dumps([r.to_dict() for r in results], indent=4)
