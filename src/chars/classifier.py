"""StreamClassifier: single-pass character classification of byte streams."""

from __future__ import annotations

import io
import logging
import sys
from pathlib import Path
from typing import BinaryIO

from chars._utils import (
    DEFAULT_BINARY_THRESHOLD,
    DEFAULT_BLOCK_SIZE,
    STDIN_NAME,
    _validate_block_size,
    _validate_threshold,
)
from chars.pipeline import ScanOutcome
from chars.pipeline.binary import is_text
from chars.pipeline.bom import detect_bom
from chars.pipeline.counter import CharCounter

logger = logging.getLogger(__name__)


def _read_prefix(stream: BinaryIO, size: int) -> bytes:
    """Read up to *size* bytes, retrying short reads until EOF."""
    chunks: list[bytes] = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


class StreamClassifier:
    """Classify and count special bytes in a stream.

    The first block of the stream is read once and kept: BOM detection and
    the text/binary heuristic look at it, then it is replayed into the
    counter before the remaining blocks are read.  Streams therefore do not
    need to be seekable, so pipes and standard input work the same as files.

    One instance holds only configuration and may be shared between threads.
    """

    def __init__(
        self,
        block_size: int = DEFAULT_BLOCK_SIZE,
        binary_threshold: float = DEFAULT_BINARY_THRESHOLD,
    ) -> None:
        """Initialize the classifier.

        :param block_size: Size of the lookahead window and of every read.
        :param binary_threshold: Evidence ratio at or above which the
            lookahead window is treated as binary.
        """
        _validate_block_size(block_size)
        _validate_threshold(binary_threshold)
        self._block_size = block_size
        self._binary_threshold = binary_threshold

    @property
    def block_size(self) -> int:
        return self._block_size

    @property
    def binary_threshold(self) -> float:
        return self._binary_threshold

    def classify(
        self, stream: BinaryIO, source_name: str, examine_binary: bool = False
    ) -> ScanOutcome:
        """Classify an already-open binary *stream*.

        The stream is read to EOF but not closed.

        :param stream: Readable binary stream positioned at its start.
        :param source_name: Name recorded in the result.
        :param examine_binary: If ``False``, a stream whose first block looks
            binary is skipped instead of counted.
        :returns: A :class:`ScanOutcome` tagged OK, SKIPPED or ERROR.
        """
        try:
            prefix = _read_prefix(stream, self._block_size)
        except OSError as e:
            return ScanOutcome.error(
                source_name, f"unable to read beginning of stream: {e}"
            )

        bom = detect_bom(prefix)
        if not examine_binary and not is_text(prefix, self._binary_threshold):
            logger.debug("skipping binary content: %s", source_name)
            return ScanOutcome.skipped(source_name, "binary content")

        counter = CharCounter(source_name, bom)
        counter.feed(prefix)
        try:
            while True:
                block = stream.read(self._block_size)
                if not block:
                    break
                counter.feed(block)
        except OSError as e:
            return ScanOutcome.error(source_name, f"read failed: {e}")

        logger.debug(
            "%s: %d bytes in %d blocks",
            source_name,
            counter.bytes_read,
            counter.blocks,
        )
        return ScanOutcome.ok(counter.close())

    def classify_path(
        self, path: str | Path, examine_binary: bool = False
    ) -> ScanOutcome:
        """Open *path*, classify it and close it on every exit path."""
        name = str(path)
        try:
            with Path(path).open("rb") as f:
                return self.classify(f, name, examine_binary=examine_binary)
        except OSError as e:
            return ScanOutcome.error(name, f"unable to open file: {e}")

    def classify_stdin(self, examine_binary: bool = False) -> ScanOutcome:
        """Classify standard input until EOF.  Standard input is left open."""
        return self.classify(
            sys.stdin.buffer, STDIN_NAME, examine_binary=examine_binary
        )

    def classify_bytes(
        self,
        data: bytes | bytearray,
        source_name: str = "<bytes>",
        examine_binary: bool = False,
    ) -> ScanOutcome:
        """Classify an in-memory byte string."""
        with io.BytesIO(bytes(data)) as stream:
            return self.classify(stream, source_name, examine_binary=examine_binary)
