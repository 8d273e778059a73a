"""Stage 0: BOM (Byte Order Mark) detection."""

from __future__ import annotations

from chars.enums import BomKind

#: Number of leading bytes needed to recognise any supported BOM.
BOM_PROBE_SIZE = 3

# Longest first so the three-byte UTF-8 mark wins over any two-byte prefix.
_BOMS: tuple[tuple[bytes, BomKind], ...] = (
    (b"\xef\xbb\xbf", BomKind.UTF8),
    (b"\xff\xfe", BomKind.UTF16),  # little-endian
    (b"\xfe\xff", BomKind.UTF16),  # big-endian
)


def detect_bom(data: bytes) -> BomKind:
    """Return the BOM found at the start of *data*.

    Only the first :data:`BOM_PROBE_SIZE` bytes are inspected; the caller's
    buffer is not modified.

    :param data: Leading bytes of a stream (any length, including empty).
    :returns: :attr:`BomKind.UTF8`, :attr:`BomKind.UTF16` or :attr:`BomKind.NONE`.
    """
    head = data[:BOM_PROBE_SIZE]
    for bom_bytes, kind in _BOMS:
        if head.startswith(bom_bytes):
            return kind
    return BomKind.NONE
