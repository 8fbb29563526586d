"""Subword tokenizer using greedy longest-match-first WordPiece segmentation."""

import logging
import sys

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from .base import Tokenizer
from .._unicode import to_codepoints
from ..config import (
    CONTINUATION_PREFIX,
    DEFAULT_MAX_INPUT_CHARS_PER_WORD,
    DEFAULT_UNK_TOKEN,
)
from ..pattern import DEFAULT_DELIMITERS
from ..types import Token, Vocab
from ..vocab import Vocabulary

log = logging.getLogger(__name__)


class WordpieceTokenizer(Tokenizer):
    """
    Splits words into vocabulary pieces.

    Non-initial pieces carry the ``##`` continuation prefix:

        >>> vocab = Vocabulary.from_tokens(["[UNK]", "un", "##aff", "##able"])
        >>> WordpieceTokenizer(vocab).tokenize("unaffable")
        ['un', '##aff', '##able']

    A word that cannot be covered completely becomes a single ``unk_token``,
    as does any word longer than ``max_input_chars_per_word`` codepoints.
    """

    TOKENIZER_TYPE = "wordpiece"

    def __init__(
        self,
        vocab: Vocabulary | Vocab,
        unk_token: Token = DEFAULT_UNK_TOKEN,
        max_input_chars_per_word: int = DEFAULT_MAX_INPUT_CHARS_PER_WORD,
        delimiters: frozenset[str] = DEFAULT_DELIMITERS,
    ) -> None:
        super().__init__(delimiters)
        self.vocab = vocab
        self.unk_token = unk_token
        self.max_input_chars_per_word = max_input_chars_per_word

    @override
    def tokenize(self, text: str | bytes) -> list[Token]:
        """
        Segment each whitespace-separated word of ``text``.

        Input is normally a single word already produced by
        :class:`BasicTokenizer`, but it is split on whitespace again.

        :param text: Text as ``str`` or UTF-8 ``bytes``.
        :returns: WordPiece tokens; empty if ``text`` is not valid UTF-8.
        """
        output_tokens: list[Token] = []
        for token in self.whitespace_tokenize(to_codepoints(text)):
            if len(token) > self.max_input_chars_per_word:
                log.debug(
                    f"word of {len(token)} chars exceeds {self.max_input_chars_per_word}, "
                    f"using {self.unk_token!r}"
                )
                output_tokens.append(self.unk_token)
                continue
            output_tokens.extend(self._segment(token))
        return output_tokens

    def _segment(self, token: Token) -> list[Token]:
        """Greedy longest-match-first split of one word."""
        sub_tokens: list[Token] = []
        start = 0
        while start < len(token):
            end = len(token)
            cur_substr = None
            while start < end:
                substr = token[start:end]
                if start > 0:
                    substr = CONTINUATION_PREFIX + substr
                if substr in self.vocab:
                    cur_substr = substr
                    break
                end -= 1
            # no piece at this position: the whole word is unknown
            if cur_substr is None:
                return [self.unk_token]
            sub_tokens.append(cur_substr)
            start = end
        return sub_tokens

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(vocab_size={len(self.vocab)}, "
            f"unk_token={self.unk_token!r}, "
            f"max_input_chars_per_word={self.max_input_chars_per_word})"
        )
