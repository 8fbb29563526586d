"""Character classes and compiled split patterns used by the tokenizers."""

from typing import Final

import regex as re


# codepoints treated as token delimiters and stripped from vocabulary lines
DEFAULT_DELIMITERS: Final[frozenset[str]] = frozenset(" \t\n\r\v\f")

# CJK Unified Ideographs, their extensions and compatibility ideographs.
# Hangul and kana are not included.
CJK_RANGES: Final[tuple[tuple[int, int], ...]] = (
    (0x4E00, 0x9FFF),
    (0x3400, 0x4DBF),
    (0x20000, 0x2A6DF),
    (0x2A700, 0x2B73F),
    (0x2B740, 0x2B81F),
    (0x2B820, 0x2CEAF),
    (0xF900, 0xFAFF),
    (0x2F800, 0x2FA1F),
)

# ASCII symbols BERT treats as punctuation even where Unicode says Sm/Sc/Sk
# (e.g. "$", "+", "^", "`")
ASCII_PUNCT_RANGES: Final[tuple[tuple[int, int], ...]] = (
    (33, 47),
    (58, 64),
    (91, 96),
    (123, 126),
)


def _ranges_to_class(ranges: tuple[tuple[int, int], ...]) -> str:
    """Render codepoint ranges as the body of a regex character class."""
    return "".join(f"\\U{lo:08x}-\\U{hi:08x}" for lo, hi in ranges)


CJK_PATTERN: Final[re.Pattern] = re.compile(f"[{_ranges_to_class(CJK_RANGES)}]")


def compile_delimiter_pattern(delimiters: frozenset[str]) -> re.Pattern:
    """
    Compile a pattern matching runs of ``delimiters``.

    :param delimiters: Set of single-codepoint delimiters; must contain " ".
    :raises ValueError: If ``delimiters`` is empty, lacks " " or holds multi-codepoint strings.
    """
    if not delimiters:
        raise ValueError("delimiter set must not be empty")
    # cleaning and CJK isolation both emit plain spaces as word breaks
    if " " not in delimiters:
        raise ValueError(f"delimiters must include ' ': {sorted(delimiters)!r}")
    if any(len(d) != 1 for d in delimiters):
        raise ValueError(f"delimiters must be single codepoints: {sorted(delimiters)!r}")
    # sorted so that equal sets always compile to the same pattern
    body = "".join(re.escape(d) for d in sorted(delimiters))
    return re.compile(f"[{body}]+")


__all__ = [
    "DEFAULT_DELIMITERS",
    "CJK_RANGES",
    "ASCII_PUNCT_RANGES",
    "CJK_PATTERN",
    "compile_delimiter_pattern",
]
