"""Unit tests for the Unicode helpers: decoding, classification, NFD and case mapping."""

import pytest

from berttok import _unicode as uni


# Decode / encode
# ---------------------------------------------------------------------------


def test_decode_valid_utf8():
    """Valid UTF-8 decodes to its codepoints."""
    assert uni.decode_utf8("héllo 世界".encode("utf-8")) == "héllo 世界"


@pytest.mark.parametrize(
    "data",
    [
        b"\xff",
        b"abc\xc3",  # truncated two-byte sequence
        b"\xc0\xaf",  # overlong "/"
        b"\xed\xa0\x80",  # encoded surrogate
    ],
)
def test_decode_invalid_utf8_returns_empty(data):
    """Any invalid byte sequence yields an empty string, not a partial decode."""
    assert uni.decode_utf8(data) == ""


def test_encode_lone_surrogate_returns_empty():
    """A lone surrogate cannot be encoded and yields empty bytes."""
    assert uni.encode_utf8("a\ud800b") == b""
    assert uni.encode_utf8("é") == b"\xc3\xa9"


def test_to_codepoints_accepts_str_and_bytes():
    """Both str and bytes inputs are accepted; invalid text becomes empty."""
    assert uni.to_codepoints("hello") == "hello"
    assert uni.to_codepoints(b"hello") == "hello"
    assert uni.to_codepoints(b"\xff") == ""
    assert uni.to_codepoints("x\udfffy") == ""


def test_astral_codepoint_is_single_unit():
    """Codepoints above the BMP are single elements, not surrogate pairs."""
    text = uni.to_codepoints("\U0001f600".encode("utf-8"))
    assert len(text) == 1
    assert ord(text) == 0x1F600


# Classification
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("ch", ["\x00", "\x07", "\x7f", "\u200b", "\u200d", "\ufeff"])
def test_is_control_true(ch):
    assert uni.is_control(ch)


@pytest.mark.parametrize("ch", ["\t", "\n", "\r", " ", "a", "\u0301"])
def test_is_control_false(ch):
    """Tab, newline and carriage return are whitespace, not control."""
    assert not uni.is_control(ch)


@pytest.mark.parametrize("ch", [" ", "\t", "\n", "\r", "\u00a0", "\u2003", "\u3000"])
def test_is_whitespace_true(ch):
    assert uni.is_whitespace(ch)


@pytest.mark.parametrize("ch", ["a", "\x0b", "\u200b", "-"])
def test_is_whitespace_false(ch):
    assert not uni.is_whitespace(ch)


@pytest.mark.parametrize(
    "ch", ["!", "$", "+", "^", "`", "~", "-", "'", "¿", "«", "»", "「", "—", "_"]
)
def test_is_punctuation_true(ch):
    """ASCII symbols count as punctuation even where Unicode calls them symbols."""
    assert uni.is_punctuation(ch)


@pytest.mark.parametrize("ch", ["a", "Z", "0", " ", "€", "中", "\u0301"])
def test_is_punctuation_false(ch):
    assert not uni.is_punctuation(ch)


def test_is_nonspacing_mark():
    assert uni.is_nonspacing_mark("\u0301")
    assert uni.is_nonspacing_mark("\u0308")
    assert not uni.is_nonspacing_mark("e")


@pytest.mark.parametrize("ch", ["中", "㐀", "\U00020000", "\U0002b740", "豈", "\U0002f800"])
def test_is_cjk_true(ch):
    assert uni.is_cjk(ch)


@pytest.mark.parametrize("ch", ["a", "あ", "ア", "한", "\u3000", "\U0002fa20"])
def test_is_cjk_false(ch):
    """Kana, Hangul and ideographic space are outside the CJK ideograph blocks."""
    assert not uni.is_cjk(ch)


def test_category():
    assert uni.category("a") == "Ll"
    assert uni.category("-") == "Pd"


# Normalization and case mapping
# ---------------------------------------------------------------------------


def test_normalize_nfd_decomposes_accents():
    assert uni.normalize_nfd("é") == "e\u0301"
    assert uni.normalize_nfd("Å") == "A\u030a"
    assert uni.normalize_nfd("abc") == "abc"


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("A", "a"),
        ("a", "a"),
        ("Σ", "σ"),
        ("Ä", "ä"),
        ("İ", "i"),  # full mapping would add U+0307
        ("ß", "ß"),
        ("1", "1"),
    ],
)
def test_to_lower_is_single_codepoint(ch, expected):
    lowered = uni.to_lower(ch)
    assert lowered == expected
    assert len(lowered) == 1
