"""Stage 0: text/binary heuristic over a bounded prefix."""

from __future__ import annotations

from collections.abc import Iterator

from chars._utils import DEFAULT_BINARY_THRESHOLD

# Leading byte offsets that may hold a BOM and are never counted as evidence.
_BOM_WINDOW = 4

# Widest UTF-8 sequence.  A code point starting closer than this to the end
# of the window may be truncated and is not examined.
_MAX_SEQUENCE = 4

_REPLACEMENT_CHAR = 0xFFFD

# Control code points that ordinary text files contain: \t \n \f \r.
_TEXT_CONTROLS: frozenset[int] = frozenset({0x09, 0x0A, 0x0C, 0x0D})


def _sequence_length(byte: int) -> int:
    """Return the UTF-8 sequence length announced by a lead byte, or 0."""
    if 0xC2 <= byte <= 0xDF:
        return 2
    if 0xE0 <= byte <= 0xEF:
        return 3
    if 0xF0 <= byte <= 0xF4:
        return 4
    # Continuation bytes, overlong leads (0xC0, 0xC1) and 0xF5-0xFF
    return 0


def iter_code_points(data: bytes) -> Iterator[tuple[int, int]]:
    """Yield ``(offset, code_point)`` pairs for *data* decoded as UTF-8.

    Malformed input never stops the walk: each invalid byte is reported as
    U+FFFD and the walk resumes at the next byte.
    """
    i = 0
    length = len(data)
    while i < length:
        byte = data[i]
        if byte < 0x80:
            yield i, byte
            i += 1
            continue
        seq_len = _sequence_length(byte)
        if seq_len:
            try:
                char = data[i : i + seq_len].decode("utf-8")
            except UnicodeDecodeError:
                pass
            else:
                yield i, ord(char)
                i += seq_len
                continue
        yield i, _REPLACEMENT_CHAR
        i += 1


def count_binary_evidence(data: bytes) -> int:
    """Count code points in *data* that suggest binary content.

    Evidence is either a decoding error (or a literal U+FFFD) or a control
    code point below 0x20 other than tab, line feed, form feed and carriage
    return.  NUL counts as evidence.
    """
    length = len(data)
    evidence = 0
    for offset, code_point in iter_code_points(data):
        if offset < _BOM_WINDOW:
            continue
        if offset + _MAX_SEQUENCE > length:
            break
        if code_point == _REPLACEMENT_CHAR or (
            code_point < 0x20 and code_point not in _TEXT_CONTROLS
        ):
            evidence += 1
    return evidence


def is_text(data: bytes, threshold: float = DEFAULT_BINARY_THRESHOLD) -> bool:
    """Return True if the prefix *data* looks like text.

    :param data: The first bytes of a stream, at most one block long.  May
        be shorter than a block for short streams.
    :param threshold: Ratio of evidence to ``len(data)`` at or above which
        the prefix is classified as binary.
    :returns: ``True`` for text (including empty input), ``False`` for binary.
    """
    if not data:
        return True
    return count_binary_evidence(data) / len(data) < threshold
