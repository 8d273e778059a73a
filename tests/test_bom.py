# tests/test_bom.py
from chars.enums import BomKind
from chars.pipeline.bom import detect_bom


def test_utf8_bom():
    assert detect_bom(b"\xef\xbb\xbfHello") is BomKind.UTF8


def test_utf8_bom_only():
    assert detect_bom(b"\xef\xbb\xbf") is BomKind.UTF8


def test_utf16_le_bom():
    assert detect_bom(b"\xff\xfeH\x00i\x00") is BomKind.UTF16


def test_utf16_be_bom():
    assert detect_bom(b"\xfe\xff\x00H\x00i") is BomKind.UTF16


def test_utf16_bom_only():
    assert detect_bom(b"\xff\xfe") is BomKind.UTF16
    assert detect_bom(b"\xfe\xff") is BomKind.UTF16


def test_no_bom():
    assert detect_bom(b"Hello, world!") is BomKind.NONE


def test_empty_input():
    assert detect_bom(b"") is BomKind.NONE


def test_too_short_for_bom():
    assert detect_bom(b"\xef") is BomKind.NONE
    assert detect_bom(b"\xef\xbb") is BomKind.NONE
    assert detect_bom(b"\xff") is BomKind.NONE


def test_bom_must_be_at_start():
    assert detect_bom(b"a\xef\xbb\xbf") is BomKind.NONE
    assert detect_bom(b" \xff\xfe") is BomKind.NONE


def test_input_is_not_modified():
    data = bytearray(b"\xef\xbb\xbfabc")
    detect_bom(data)
    assert data == bytearray(b"\xef\xbb\xbfabc")
