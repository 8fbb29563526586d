"""Tokenizer configuration and defaults."""

from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version
from typing import Final

from .pattern import DEFAULT_DELIMITERS

try:
    _version = version("berttok")
except PackageNotFoundError:
    _version = "dev"


VERSION: Final[str] = _version
VOCAB_FILE_NAME: Final[str] = "vocab.txt"
DEFAULT_UNK_TOKEN: Final[str] = "[UNK]"
DEFAULT_MAX_INPUT_CHARS_PER_WORD: Final[int] = 200
CONTINUATION_PREFIX: Final[str] = "##"


@dataclass(frozen=True)
class TokenizerConfig:
    """
    Options shared by the tokenizer pipeline.

    :param do_lower_case: Lowercase and strip accents before punctuation splitting.
    :param unk_token: Marker emitted for words that cannot be segmented.
    :param max_input_chars_per_word: Longer words map straight to ``unk_token``.
    :param delimiters: Codepoints that separate words and are stripped from vocab lines.
    :param stop_at_blank_line: Stop reading the vocabulary at the first blank line.
    :param oov_strategy: Name of the strategy used when an id lookup misses.
    """

    do_lower_case: bool = True
    unk_token: str = DEFAULT_UNK_TOKEN
    max_input_chars_per_word: int = DEFAULT_MAX_INPUT_CHARS_PER_WORD
    delimiters: frozenset[str] = DEFAULT_DELIMITERS
    stop_at_blank_line: bool = True
    oov_strategy: str = "raise"

    def __post_init__(self) -> None:
        if not self.unk_token:
            raise ValueError("unk_token must not be empty")
        if self.max_input_chars_per_word <= 0:
            raise ValueError(
                f"max_input_chars_per_word must be positive, got {self.max_input_chars_per_word}"
            )
        if not self.delimiters:
            raise ValueError("delimiters must not be empty")
        if " " not in self.delimiters:
            raise ValueError("delimiters must include ' '")
        # accept any iterable of codepoints, store the immutable form
        object.__setattr__(self, "delimiters", frozenset(self.delimiters))


__all__ = [
    "VERSION",
    "VOCAB_FILE_NAME",
    "DEFAULT_UNK_TOKEN",
    "DEFAULT_MAX_INPUT_CHARS_PER_WORD",
    "CONTINUATION_PREFIX",
    "TokenizerConfig",
]
