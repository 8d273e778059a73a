# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path

import pytest


class TrickleStream(io.RawIOBase):
    """Raw stream that returns at most *step* bytes per read.

    If *fail_after* is set, reading past that many bytes raises OSError.
    """

    def __init__(
        self, data: bytes, step: int = 1, fail_after: int | None = None
    ) -> None:
        self._data = data
        self._pos = 0
        self._step = step
        self._fail_after = fail_after

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        if self._fail_after is not None and self._pos >= self._fail_after:
            raise OSError("simulated read failure")
        chunk = self._data[self._pos : self._pos + min(self._step, len(buffer))]
        buffer[: len(chunk)] = chunk
        self._pos += len(chunk)
        return len(chunk)


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Return a helper that writes *data* to ``tmp_path / name``."""

    def _write(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    return _write
