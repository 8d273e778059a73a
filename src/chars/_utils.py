"""Internal shared defaults and validators for chars."""

from __future__ import annotations

#: Default read/lookahead block size in bytes.
DEFAULT_BLOCK_SIZE: int = 1024

#: Fraction of suspicious code points at or above which a prefix is binary.
DEFAULT_BINARY_THRESHOLD: float = 0.02

#: Source name reported for standard input.
STDIN_NAME: str = "STDIN"

#: Command-line sentinel meaning "read one stream from standard input".
STDIN_ARG: str = "-"


def _validate_block_size(block_size: int) -> None:
    """Raise ValueError if *block_size* is not a positive integer."""
    if (
        isinstance(block_size, bool)
        or not isinstance(block_size, int)
        or block_size < 1
    ):
        msg = "block_size must be a positive integer"
        raise ValueError(msg)


def _validate_threshold(threshold: float) -> None:
    """Raise ValueError if *threshold* is not in the range (0, 1]."""
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        msg = "binary_threshold must be a number"
        raise ValueError(msg)
    if not 0 < threshold <= 1:
        msg = "binary_threshold must be greater than 0 and at most 1"
        raise ValueError(msg)
