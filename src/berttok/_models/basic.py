"""Word-level BERT tokenizer: cleaning, CJK isolation, casing and punctuation splits."""

import logging
import sys

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from .base import Tokenizer
from .._unicode import (
    is_control,
    is_nonspacing_mark,
    is_punctuation,
    is_whitespace,
    normalize_nfd,
    to_codepoints,
    to_lower,
)
from ..pattern import CJK_PATTERN, DEFAULT_DELIMITERS
from ..types import Token

log = logging.getLogger(__name__)


class BasicTokenizer(Tokenizer):
    """
    Splits raw text into coarse word and punctuation tokens.

    The pipeline runs in this order:

    1. decode and clean the text (drop control codepoints, normalize whitespace)
    2. put spaces around CJK ideographs
    3. split on whitespace
    4. lowercase and strip accents when ``do_lower_case`` is set
    5. split every word on punctuation
    6. join and split on whitespace again

    Example:
        >>> BasicTokenizer(do_lower_case=True).tokenize("Héllo, 世界!")
        ['hello', ',', '世', '界', '!']
    """

    TOKENIZER_TYPE = "basic"

    def __init__(
        self,
        do_lower_case: bool = True,
        delimiters: frozenset[str] = DEFAULT_DELIMITERS,
    ) -> None:
        super().__init__(delimiters)
        self.do_lower_case = do_lower_case

    @override
    def tokenize(self, text: str | bytes) -> list[Token]:
        """
        Split text into word-level tokens.

        :param text: Text as ``str`` or UTF-8 ``bytes``.
        :returns: Tokens in input order; empty if ``text`` is not valid UTF-8.
        """
        text = to_codepoints(text)
        if not text:
            return []

        text = self.clean_text(text)
        text = self.tokenize_chinese_chars(text)

        split_tokens: list[Token] = []
        for token in self.whitespace_tokenize(text):
            if self.do_lower_case:
                token = self.strip_accents(self.lower(token))
            split_tokens.extend(self.split_on_punc(token))

        return self.whitespace_tokenize(" ".join(split_tokens))

    def clean_text(self, text: str) -> str:
        """Drop invalid and control codepoints and map whitespace to a plain space."""
        output = []
        for ch in text:
            if ch == "\x00" or ch == "\ufffd" or is_control(ch):
                continue
            if is_whitespace(ch):
                output.append(" ")
            else:
                output.append(ch)
        return "".join(output)

    def tokenize_chinese_chars(self, text: str) -> str:
        """Surround every CJK ideograph with spaces."""
        return CJK_PATTERN.sub(r" \g<0> ", text)

    def lower(self, text: str) -> str:
        return "".join(to_lower(ch) for ch in text)

    def strip_accents(self, text: str) -> str:
        """Decompose ``text`` (NFD) and drop the nonspacing marks."""
        return "".join(ch for ch in normalize_nfd(text) if not is_nonspacing_mark(ch))

    def split_on_punc(self, text: str) -> list[Token]:
        """Split ``text`` so that every punctuation codepoint is its own token."""
        output: list[list[str]] = []
        start_new_word = True
        for ch in text:
            if is_punctuation(ch):
                output.append([ch])
                start_new_word = True
            else:
                if start_new_word:
                    output.append([])
                start_new_word = False
                output[-1].append(ch)
        return ["".join(chars) for chars in output]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(do_lower_case={self.do_lower_case})"
