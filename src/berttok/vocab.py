"""
Vocabulary loading and lookup.

A vocabulary file holds one token per line; the 0-based line number is the
token's id. Reading stops at the first blank line by default, matching the
reference BERT loaders that treat it as an end-of-vocabulary sentinel.
"""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from types import MappingProxyType

from ._decorators import measure_time
from ._sanitise import render_token
from ._unicode import decode_utf8
from .errors import UnknownIdError, UnknownTokenError, VocabularyLoadError
from .pattern import DEFAULT_DELIMITERS
from .types import InvVocab, Token, TokenId, Vocab

log = logging.getLogger(__name__)


class Vocabulary:
    """
    Immutable bijection between tokens and integer ids.

    Lookups never insert: a missing token or id raises instead of being
    silently mapped to a default id.
    """

    def __init__(self, vocab: dict[Token, TokenId]) -> None:
        self._vocab: dict[Token, TokenId] = dict(vocab)
        # token -> id is authoritative; duplicates leave holes in the inverse
        self._inv_vocab: dict[TokenId, Token] = {
            tok_id: tok for tok, tok_id in self._vocab.items()
        }
        log.debug(f"built vocabulary with {len(self._vocab)} tokens")

    @classmethod
    def from_tokens(cls, tokens: Iterable[Token]) -> "Vocabulary":
        """Build a vocabulary assigning ids in iteration order."""
        vocab: dict[Token, TokenId] = {}
        for index, token in enumerate(tokens):
            vocab[token] = index
        return cls(vocab)

    @classmethod
    def from_file(
        cls,
        vocab_file: str | Path,
        *,
        delimiters: frozenset[str] = DEFAULT_DELIMITERS,
        stop_at_blank_line: bool = True,
    ) -> "Vocabulary":
        """Load a vocabulary from a newline-delimited file; see :func:`load_vocab`."""
        return load_vocab(
            vocab_file, delimiters=delimiters, stop_at_blank_line=stop_at_blank_line
        )

    @property
    def vocab(self) -> Vocab:
        """Read-only token -> id view."""
        return MappingProxyType(self._vocab)

    @property
    def inv_vocab(self) -> InvVocab:
        """Read-only id -> token view."""
        return MappingProxyType(self._inv_vocab)

    def __len__(self) -> int:
        return len(self._vocab)

    def __contains__(self, token: object) -> bool:
        return token in self._vocab

    def __iter__(self) -> Iterator[Token]:
        return iter(self._vocab)

    def __getitem__(self, token: Token) -> TokenId:
        return self.token_to_id(token)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self._vocab)})"

    def get(self, token: Token, default: TokenId | None = None) -> TokenId | None:
        """Return the id of ``token`` or ``default`` when absent."""
        return self._vocab.get(token, default)

    def token_to_id(self, token: Token) -> TokenId:
        """
        Return the id of ``token``.

        :raises UnknownTokenError: If ``token`` is not in the vocabulary.
        """
        try:
            return self._vocab[token]
        except KeyError:
            raise UnknownTokenError("token not in vocabulary", token=token) from None

    def id_to_token(self, token_id: TokenId) -> Token:
        """
        Return the token assigned to ``token_id``.

        :raises UnknownIdError: If no token has that id.
        """
        try:
            return self._inv_vocab[token_id]
        except KeyError:
            raise UnknownIdError("id not in vocabulary", token_id=token_id) from None


def _strip_terminator(line: bytes) -> bytes:
    """Remove one trailing "\\n" or "\\r\\n"."""
    if line.endswith(b"\n"):
        line = line[:-1]
        if line.endswith(b"\r"):
            line = line[:-1]
    return line


@measure_time("vocabulary loaded")
def load_vocab(
    vocab_file: str | Path,
    *,
    delimiters: frozenset[str] = DEFAULT_DELIMITERS,
    stop_at_blank_line: bool = True,
) -> Vocabulary:
    """
    Load a vocabulary file into a :class:`Vocabulary`.

    Each line is decoded as UTF-8 and stripped of leading and trailing
    ``delimiters``; its position among the accepted lines becomes its id. A
    line that is empty, or is not valid UTF-8, counts as blank.

    :param vocab_file: Path to the vocabulary file (e.g. ``vocab.txt``).
    :param delimiters: Codepoints stripped from both ends of every line.
    :param stop_at_blank_line: Stop at the first blank line (the default); when
        ``False`` blank lines are skipped without consuming an id.
    :raises VocabularyLoadError: If the file is missing or cannot be read.
    """
    path = Path(vocab_file)
    strip_chars = "".join(sorted(delimiters))

    log.info(f"loading vocabulary from {path}")

    vocab: dict[Token, TokenId] = {}
    index = 0
    try:
        with path.open("rb") as f:
            for lineno, raw in enumerate(f, start=1):
                line = decode_utf8(_strip_terminator(raw))
                if not line:
                    if stop_at_blank_line:
                        ignored = sum(1 for rest in f if rest.strip())
                        if ignored:
                            log.warning(
                                f"vocabulary load stopped at blank line {lineno}; "
                                f"{ignored} non-blank lines after it were ignored"
                            )
                        break
                    log.debug(f"skipping blank or undecodable line {lineno}")
                    continue

                token = line.strip(strip_chars)
                if token in vocab:
                    log.warning(
                        f"duplicate vocabulary entry '{render_token(token)}' at line {lineno} "
                        f"replaces id {vocab[token]} with {index}"
                    )
                vocab[token] = index
                index += 1
    except FileNotFoundError as e:
        raise VocabularyLoadError(
            "vocabulary file does not exist", vocab_path=str(path)
        ) from e
    except OSError as e:
        raise VocabularyLoadError(
            f"failed to read vocabulary file: {e.strerror or e}", vocab_path=str(path)
        ) from e

    log.debug(f"read {index} vocabulary lines")
    return Vocabulary(vocab)


__all__ = ["Vocabulary", "load_vocab"]
