"""End-to-end BERT tokenizer: text -> WordPiece tokens -> vocabulary ids."""

import logging
from collections.abc import Iterable, Iterator, MutableSequence
from pathlib import Path
import sys

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from .base import Tokenizer
from .basic import BasicTokenizer
from .wordpiece import WordpieceTokenizer
from ..config import DEFAULT_MAX_INPUT_CHARS_PER_WORD, DEFAULT_UNK_TOKEN, TokenizerConfig
from ..errors import TokenizationError, VocabularyLoadError
from ..pattern import DEFAULT_DELIMITERS
from ..strategy import OovStrategy, get_strategy
from ..types import Token, TokenId
from ..vocab import Vocabulary

log = logging.getLogger(__name__)


class FullTokenizer(Tokenizer):
    """
    Runs basic tokenization followed by WordPiece and maps tokens to ids.

    The vocabulary is read once at construction and never modified, so one
    instance can be shared by several threads.

    :param vocab_file: Path to a newline-delimited vocabulary file.
    :param do_lower_case: Lowercase and strip accents before splitting.
    :param unk_token: Marker for words that cannot be segmented.
    :param max_input_chars_per_word: Longer words map straight to ``unk_token``.
    :param delimiters: Codepoints separating words.
    :param stop_at_blank_line: Stop reading the vocabulary at its first blank line.
    :param oov_strategy: "raise" (default) or "unk"; used when an id lookup misses.
    :param vocab: Ready vocabulary; mutually exclusive with ``vocab_file``.
    :raises VocabularyLoadError: If the vocabulary file cannot be read, or both
        ``vocab_file`` and ``vocab`` are given.

    Example:
        >>> tok = FullTokenizer("vocab.txt", do_lower_case=True)
        >>> tok.tokenize("Hello worlds")
        ['hello', 'world', '##s']
        >>> tok.tokenize_to_ids("Hello worlds", 2)
        [1, 2]
    """

    TOKENIZER_TYPE = "full"

    def __init__(
        self,
        vocab_file: str | Path | None = None,
        do_lower_case: bool = True,
        *,
        unk_token: Token = DEFAULT_UNK_TOKEN,
        max_input_chars_per_word: int = DEFAULT_MAX_INPUT_CHARS_PER_WORD,
        delimiters: frozenset[str] = DEFAULT_DELIMITERS,
        stop_at_blank_line: bool = True,
        oov_strategy: str = "raise",
        vocab: Vocabulary | None = None,
    ) -> None:
        self.config = TokenizerConfig(
            do_lower_case=do_lower_case,
            unk_token=unk_token,
            max_input_chars_per_word=max_input_chars_per_word,
            delimiters=delimiters,
            stop_at_blank_line=stop_at_blank_line,
            oov_strategy=oov_strategy,
        )
        super().__init__(self.config.delimiters)
        self._oov: OovStrategy = get_strategy(self.config.oov_strategy)

        if vocab is not None and vocab_file is not None:
            raise VocabularyLoadError(
                "pass either vocab_file or vocab, not both", vocab_path=str(vocab_file)
            )
        if vocab is not None:
            self.vocab = vocab
        elif vocab_file is not None:
            self.vocab = Vocabulary.from_file(
                vocab_file,
                delimiters=self.config.delimiters,
                stop_at_blank_line=self.config.stop_at_blank_line,
            )
        else:
            raise VocabularyLoadError("either vocab_file or vocab is required")

        if self.config.unk_token not in self.vocab:
            log.warning(
                f"unknown token {self.config.unk_token!r} is not in the vocabulary; "
                "id lookups for unsegmentable words will fail"
            )

        self.basic_tokenizer = BasicTokenizer(
            do_lower_case=self.config.do_lower_case,
            delimiters=self.config.delimiters,
        )
        self.wordpiece_tokenizer = WordpieceTokenizer(
            self.vocab,
            unk_token=self.config.unk_token,
            max_input_chars_per_word=self.config.max_input_chars_per_word,
            delimiters=self.config.delimiters,
        )
        log.debug(f"created {self!r}")

    @property
    def unk_token(self) -> Token:
        return self.config.unk_token

    @property
    def unk_token_id(self) -> TokenId | None:
        """Id of the unknown-token marker, ``None`` if the vocabulary lacks it."""
        return self.vocab.get(self.config.unk_token)

    def vocab_size(self) -> int:
        """Return the number of tokens in the vocabulary."""
        return len(self.vocab)

    @override
    def tokenize(self, text: str | bytes) -> list[Token]:
        """
        Split ``text`` into WordPiece tokens.

        :param text: Text as ``str`` or UTF-8 ``bytes``.
        :returns: Tokens in input order; empty if ``text`` is not valid UTF-8.
        """
        return list(self._iter_tokens(text))

    def convert_tokens_to_ids(self, tokens: Iterable[Token]) -> list[TokenId]:
        """
        Map each token to its id.

        :raises UnknownTokenError: If a token is missing and the strategy is "raise".
        """
        return [self.convert_token_to_id(token) for token in tokens]

    def convert_token_to_id(self, token: Token) -> TokenId:
        """
        Map one token to its id.

        :raises UnknownTokenError: If ``token`` is missing and the strategy is "raise".
        """
        token_id = self.vocab.get(token)
        if token_id is None:
            return self._oov.handle(token, self.vocab, self.config.unk_token)
        return token_id

    def convert_ids_to_tokens(self, ids: Iterable[TokenId]) -> list[Token]:
        """
        Map each id back to its token.

        :raises UnknownIdError: If an id has no token.
        """
        return [self.vocab.id_to_token(token_id) for token_id in ids]

    def convert_id_to_token(self, token_id: TokenId) -> Token:
        """
        Map one id back to its token.

        :raises UnknownIdError: If ``token_id`` has no token.
        """
        return self.vocab.id_to_token(token_id)

    def tokenize_to_ids(self, text: str | bytes, max_size: int) -> list[TokenId]:
        """
        Tokenize ``text`` and return at most ``max_size`` ids.

        Output is truncated, never rejected, once ``max_size`` ids exist;
        tokens past that point are not looked up.

        :raises UnknownTokenError: If a kept token is missing and the strategy is "raise".
        """
        ids: list[TokenId] = []
        if max_size <= 0:
            return ids
        for token_id in self._iter_ids(text):
            ids.append(token_id)
            if len(ids) == max_size:
                break
        return ids

    def tokenize_to_ids_into(
        self,
        text: str | bytes,
        ids_out: MutableSequence[int],
        mask_out: MutableSequence[int],
        capacity: int,
        start_offset: int = 0,
    ) -> int:
        """
        Write ids for ``text`` into caller-provided buffers.

        Positions ``start_offset`` up to ``capacity`` are filled with ids in
        ``ids_out`` and with 1 in ``mask_out``. Positions outside that range
        and past the last token are left untouched, which keeps any padding
        the caller put there.

        :param ids_out: Buffer receiving ids (list, ``array.array("q")``, NumPy array...).
        :param mask_out: Buffer receiving the attention mask.
        :param capacity: Maximum index (exclusive) that may be written.
        :param start_offset: First index to write, e.g. 1 to leave room for [CLS].
        :returns: Index after the last written position.
        :raises TokenizationError: If the offset or capacity do not fit the buffers.
        """
        if start_offset < 0:
            raise TokenizationError("start offset must not be negative", position=start_offset)
        if capacity > len(ids_out) or capacity > len(mask_out):
            raise TokenizationError(
                f"buffers of length {len(ids_out)} and {len(mask_out)} cannot hold capacity",
                capacity=capacity,
            )
        if start_offset > capacity:
            raise TokenizationError(
                "start offset exceeds capacity", position=start_offset, capacity=capacity
            )

        i = start_offset
        if i == capacity:
            return i
        for token_id in self._iter_ids(text):
            ids_out[i] = token_id
            mask_out[i] = 1
            i += 1
            if i == capacity:
                break
        return i

    def _iter_tokens(self, text: str | bytes) -> Iterator[Token]:
        for word in self.basic_tokenizer.tokenize(text):
            yield from self.wordpiece_tokenizer.tokenize(word)

    def _iter_ids(self, text: str | bytes) -> Iterator[TokenId]:
        for token in self._iter_tokens(text):
            yield self.convert_token_to_id(token)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(vocab_size={len(self.vocab)}, "
            f"do_lower_case={self.config.do_lower_case}, "
            f"unk_token={self.config.unk_token!r})"
        )
