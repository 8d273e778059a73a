"""Thread-safety integration tests for concurrent classification."""

from __future__ import annotations

import threading

from chars.classifier import StreamClassifier

_SAMPLES: list[bytes] = [
    b"dos\r\nline\r\n" * 500,
    b"unix\nline\n\ttab\n" * 500,
    "non-ASCII: Größe café ☕\n".encode() * 500,
]


def _run_concurrent_classify(n_workers: int, iterations: int) -> list[str]:
    """Classify every sample from *n_workers* threads sharing one classifier.

    Returns a list of error strings (empty = success).
    """
    classifier = StreamClassifier(block_size=64)
    expected = [classifier.classify_bytes(data).result for data in _SAMPLES]
    errors: list[str] = []
    barrier = threading.Barrier(n_workers * len(_SAMPLES))

    def worker(data: bytes, want) -> None:
        barrier.wait()
        for _ in range(iterations):
            got = classifier.classify_bytes(data).result
            if got != want:
                errors.append(f"Expected {want!r}, got {got!r}")

    threads = []
    for _ in range(n_workers):
        for data, want in zip(_SAMPLES, expected):
            t = threading.Thread(target=worker, args=(data, want))
            threads.append(t)
            t.start()

    for t in threads:
        t.join()

    return errors


def test_concurrent_classify_no_corruption():
    """Threads sharing a classifier must not see each other's counts."""
    errors = _run_concurrent_classify(n_workers=3, iterations=10)
    assert not errors, "Thread-safety violations:\n" + "\n".join(errors[:10])


def test_concurrent_classify_high_concurrency():
    errors = _run_concurrent_classify(n_workers=8, iterations=5)
    assert not errors, "Thread-safety violations:\n" + "\n".join(errors[:10])
