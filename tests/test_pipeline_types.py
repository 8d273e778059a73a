# tests/test_pipeline_types.py
from __future__ import annotations

import dataclasses

import pytest

from chars.enums import Outcome
from chars.pipeline import COUNTER_FIELDS, ScanOutcome, StreamResult


def test_stream_result_defaults():
    r = StreamResult("a.txt")
    assert r.source_name == "a.txt"
    assert all(getattr(r, name) == 0 for name in COUNTER_FIELDS)
    assert r.failed is False


def test_stream_result_counters_order():
    r = StreamResult("a.txt", crlf_count=1, bytes_read=9)
    assert list(r.counters()) == list(COUNTER_FIELDS)
    assert r.counters()["crlf_count"] == 1
    assert r.counters()["bytes_read"] == 9


def test_stream_result_failed_is_mutable():
    r = StreamResult("a.txt")
    r.failed = True
    assert r.failed is True


def test_stream_result_to_dict_keys():
    assert list(StreamResult("a").to_dict()) == [
        "filename",
        "crlf",
        "lf",
        "tab",
        "nul",
        "bom8",
        "bom16",
        "nonAscii",
        "maxConsecutiveNonAscii",
        "bytesRead",
        "failed",
    ]


def test_scan_outcome_constructors():
    result = StreamResult("a.txt")
    ok = ScanOutcome.ok(result)
    assert (ok.kind, ok.source_name, ok.result, ok.reason) == (
        Outcome.OK,
        "a.txt",
        result,
        None,
    )
    skipped = ScanOutcome.skipped("b.bin", "binary content")
    assert skipped.kind is Outcome.SKIPPED
    assert skipped.result is None
    error = ScanOutcome.error("c.txt", "boom")
    assert error.kind is Outcome.ERROR
    assert error.reason == "boom"


def test_scan_outcome_is_frozen():
    outcome = ScanOutcome.skipped("b.bin", "binary content")
    with pytest.raises(dataclasses.FrozenInstanceError):
        outcome.kind = Outcome.OK


@pytest.mark.parametrize("name", ["ok", "skipped", "error"])
def test_scan_outcome_constructors_are_documented(name: str):
    assert getattr(ScanOutcome, name).__doc__
