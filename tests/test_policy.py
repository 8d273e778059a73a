# tests/test_policy.py
from __future__ import annotations

import logging

import pytest

from chars.pipeline import StreamResult
from chars.policy import POLICY_COUNTERS, apply_policy, failure_sum, parse_policy


def test_parse_policy():
    assert parse_policy("crlf,nul") == ("crlf", "nul")


def test_parse_policy_normalises_names():
    assert parse_policy(" CRLF , nul,,crlf ") == ("crlf", "nul")


def test_parse_policy_accepts_iterables():
    assert parse_policy(["bom8", "nonascii"]) == ("bom8", "nonascii")


def test_unknown_names_warn_and_are_dropped(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.WARNING, logger="chars.policy"):
        assert parse_policy("crlf,bogus") == ("crlf",)
    assert "bogus" in caplog.text


def test_every_policy_counter_is_a_result_field():
    result = StreamResult("x")
    for field in POLICY_COUNTERS.values():
        assert hasattr(result, field)


def test_failure_sum_and_flag():
    result = StreamResult("a.txt", crlf_count=2, nul_count=0, lf_count=5)
    assert failure_sum(result, ("crlf", "nul")) == 2
    assert apply_policy([result], "crlf,nul") == 2
    assert result.failed is True


def test_clean_result_is_not_failed():
    result = StreamResult("clean.txt", lf_count=10)
    assert apply_policy([result], "crlf,nul,bom8,nonascii") == 0
    assert result.failed is False


def test_total_over_several_results():
    results = [
        StreamResult("a", crlf_count=1, tab_count=4),
        StreamResult("b", lf_count=3),
        StreamResult("c", tab_count=2, bom_utf8_count=1),
    ]
    assert apply_policy(results, "tab,bom8") == 7
    assert [r.failed for r in results] == [True, False, True]


def test_only_unknown_names_fail_nothing(caplog: pytest.LogCaptureFixture):
    result = StreamResult("a", crlf_count=3)
    with caplog.at_level(logging.WARNING, logger="chars.policy"):
        assert apply_policy([result], "crfl") == 0
    assert result.failed is False
    assert "crfl" in caplog.text
