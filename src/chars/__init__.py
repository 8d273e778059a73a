"""Count line endings, tabs, NULs, BOMs and non-ASCII bytes in files."""

from __future__ import annotations

from pathlib import Path

from chars.classifier import StreamClassifier
from chars.enums import BomKind, Outcome
from chars.pipeline import ScanOutcome, StreamResult
from chars.policy import apply_policy

__version__ = "2.0.0"
__all__ = [
    "BomKind",
    "Outcome",
    "ScanOutcome",
    "StreamClassifier",
    "StreamResult",
    "apply_policy",
    "classify_bytes",
    "classify_path",
]


def classify_bytes(
    data: bytes | bytearray,
    examine_binary: bool = False,
    source_name: str = "<bytes>",
) -> ScanOutcome:
    """Classify an in-memory byte string with the default settings."""
    return StreamClassifier().classify_bytes(
        data, source_name=source_name, examine_binary=examine_binary
    )


def classify_path(path: str | Path, examine_binary: bool = False) -> ScanOutcome:
    """Classify the file at *path* with the default settings."""
    return StreamClassifier().classify_path(path, examine_binary=examine_binary)
