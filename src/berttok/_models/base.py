"""
Base tokenizer interface for the WordPiece pipeline.
"""

from abc import ABC, abstractmethod

import regex as re

from ..pattern import DEFAULT_DELIMITERS, compile_delimiter_pattern
from ..types import Token


class Tokenizer(ABC):
    """
    Abstract base class for tokenizers splitting text into string tokens.

    Holds the delimiter set and its compiled split pattern. The set is owned
    by the instance and never changes after construction.
    """

    TOKENIZER_TYPE: str = "base"

    def __init__(self, delimiters: frozenset[str] = DEFAULT_DELIMITERS) -> None:
        super().__init__()
        self.delimiters: frozenset[str] = frozenset(delimiters)
        self._split_pat: re.Pattern = compile_delimiter_pattern(self.delimiters)

    @abstractmethod
    def tokenize(self, text: str | bytes) -> list[Token]:
        """Split ``text`` into tokens; invalid UTF-8 yields an empty list."""
        ...

    def whitespace_tokenize(self, text: str) -> list[Token]:
        """Split ``text`` on this tokenizer's delimiters."""
        return whitespace_tokenize(text, self._split_pat)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


def whitespace_tokenize(
    text: str, pattern: re.Pattern | None = None
) -> list[Token]:
    """
    Split ``text`` on runs of delimiters, dropping empty fragments.

    :param text: Codepoint sequence to split.
    :param pattern: Compiled delimiter pattern; defaults to the standard delimiter set.
    """
    if pattern is None:
        pattern = _DEFAULT_SPLIT_PAT
    return [tok for tok in pattern.split(text) if tok]


_DEFAULT_SPLIT_PAT = compile_delimiter_pattern(DEFAULT_DELIMITERS)
