"""
Unicode support for the tokenization pipeline.

Every function here is pure and works on single codepoints or on ``str``
values, which Python already stores as sequences of Unicode scalar values.
Invalid input follows one rule throughout: it produces an empty result
rather than an exception, so a single malformed string cannot abort a batch.
"""

import unicodedata

from .pattern import ASCII_PUNCT_RANGES, CJK_RANGES

_PUNCT_CATEGORIES = frozenset({"Pd", "Ps", "Pe", "Pc", "Po", "Pi", "Pf"})


def decode_utf8(data: bytes) -> str:
    """Decode UTF-8 ``data``; return ``""`` if any byte sequence is invalid."""
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError:
        return ""


def encode_utf8(text: str) -> bytes:
    """Encode ``text`` as UTF-8; return ``b""`` if it holds an unencodable codepoint."""
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError:
        return b""


def to_codepoints(text: str | bytes) -> str:
    """
    Return ``text`` as a validated codepoint sequence.

    Bytes are decoded as UTF-8. A ``str`` containing lone surrogates is not
    valid Unicode text and is treated like undecodable bytes.
    """
    if isinstance(text, (bytes, bytearray, memoryview)):
        return decode_utf8(text)
    if text.isascii() or encode_utf8(text):
        return text
    return ""


def category(ch: str) -> str:
    """Return the two-letter Unicode general category of ``ch``."""
    return unicodedata.category(ch)


def is_control(ch: str) -> bool:
    """Check whether ``ch`` is a control or format codepoint (Cc, Cf)."""
    # tab, newline and carriage return count as whitespace
    if ch in ("\t", "\n", "\r"):
        return False
    return unicodedata.category(ch) in ("Cc", "Cf")


def is_whitespace(ch: str) -> bool:
    """Check whether ``ch`` is whitespace (ASCII blanks or a space separator)."""
    if ch in (" ", "\t", "\n", "\r"):
        return True
    return unicodedata.category(ch) == "Zs"


def is_punctuation(ch: str) -> bool:
    """Check whether ``ch`` is punctuation, including all non-alphanumeric ASCII symbols."""
    cp = ord(ch)
    for lo, hi in ASCII_PUNCT_RANGES:
        if lo <= cp <= hi:
            return True
    return unicodedata.category(ch) in _PUNCT_CATEGORIES


def is_nonspacing_mark(ch: str) -> bool:
    return unicodedata.category(ch) == "Mn"


def is_cjk(ch: str) -> bool:
    """Check whether ``ch`` falls in a CJK ideograph block."""
    cp = ord(ch)
    for lo, hi in CJK_RANGES:
        if lo <= cp <= hi:
            return True
    return False


def normalize_nfd(text: str) -> str:
    """Return the canonical decomposition (NFD) of ``text``."""
    return unicodedata.normalize("NFD", text)


def to_lower(ch: str) -> str:
    """
    Map one codepoint to its simple lowercase form.

    ``str.lower`` applies full case mapping, which can expand a codepoint
    (U+0130 becomes "i" + U+0307). The simple mapping is the leading
    codepoint of that expansion.
    """
    lowered = ch.lower()
    if len(lowered) == 1:
        return lowered
    return lowered[0]


__all__ = [
    "decode_utf8",
    "encode_utf8",
    "to_codepoints",
    "category",
    "is_control",
    "is_whitespace",
    "is_punctuation",
    "is_nonspacing_mark",
    "is_cjk",
    "normalize_nfd",
    "to_lower",
]
