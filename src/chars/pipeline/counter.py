"""Stage 1: block-wise character-class tabulation.

A :class:`CharCounter` is fed consecutive blocks of one stream.  The only
state carried from one block to the next is the last byte seen (to pair a
trailing ``\\r`` with a leading ``\\n``) and the length of the non-ASCII
run still open at the end of the previous block.
"""

from __future__ import annotations

import re

from chars.enums import BomKind
from chars.pipeline import StreamResult

# Byte table for fast non-ASCII counting (C-speed via bytes.translate).
_HIGH_BYTES: bytes = bytes(range(0x80, 0x100))

_NON_ASCII_RUN = re.compile(rb"[\x80-\xff]+")

_CR = 0x0D
_LF = 0x0A


class CharCounter:
    """Incremental counter for one stream.

    Implements a feed/close pattern: call :meth:`feed` for every block in
    order, then :meth:`close` to obtain the :class:`StreamResult`.
    """

    def __init__(self, source_name: str, bom: BomKind = BomKind.NONE) -> None:
        self._source_name = source_name
        self._bom = bom
        self.reset()

    def reset(self) -> None:
        """Reset all counters and the carried block state."""
        self._crlf = 0
        self._lf = 0
        self._tab = 0
        self._nul = 0
        self._non_ascii = 0
        self._max_streak = 0
        self._bytes_read = 0
        self._blocks = 0
        self._last_byte: int | None = None
        self._streak = 0

    def feed(self, block: bytes | bytearray) -> None:
        """Tabulate the next *block* of the stream."""
        if not block:
            return
        self._blocks += 1
        self._bytes_read += len(block)
        self._nul += block.count(b"\x00")
        self._tab += block.count(b"\t")

        # A CRLF pair split across blocks is credited to this block.
        crlf = block.count(b"\r\n")
        if self._last_byte == _CR and block[0] == _LF:
            crlf += 1
        self._crlf += crlf
        self._lf += block.count(b"\n") - crlf

        self._non_ascii += len(block) - len(block.translate(None, _HIGH_BYTES))
        self._tally_streaks(block)
        self._last_byte = block[-1]

    def _tally_streaks(self, block: bytes | bytearray) -> None:
        streak = self._streak
        open_run = 0
        for match in _NON_ASCII_RUN.finditer(block):
            start, end = match.span()
            run = end - start
            if start == 0:
                run += streak
            if run > self._max_streak:
                self._max_streak = run
            open_run = run if end == len(block) else 0
        self._streak = open_run

    @property
    def bytes_read(self) -> int:
        """Total bytes fed so far."""
        return self._bytes_read

    @property
    def blocks(self) -> int:
        """Number of non-empty blocks fed so far."""
        return self._blocks

    def close(self) -> StreamResult:
        """Return the counts accumulated so far as a new :class:`StreamResult`."""
        return StreamResult(
            source_name=self._source_name,
            crlf_count=self._crlf,
            lf_count=self._lf,
            tab_count=self._tab,
            nul_count=self._nul,
            bom_utf8_count=int(self._bom is BomKind.UTF8),
            bom_utf16_count=int(self._bom is BomKind.UTF16),
            non_ascii_count=self._non_ascii,
            max_consecutive_non_ascii=self._max_streak,
            bytes_read=self._bytes_read,
        )
