"""Factory functions for creating tokenizers."""

import logging
from pathlib import Path

from ._models.full import FullTokenizer
from .config import VOCAB_FILE_NAME

log = logging.getLogger(__name__)


def from_pretrained(
    path: str | Path, do_lower_case: bool = True, **kwargs
) -> FullTokenizer:
    """
    Load a tokenizer for a pretrained vocabulary.

    :param path: Vocabulary file, or a model directory containing ``vocab.txt``.
    :param do_lower_case: Lowercase and strip accents (``True`` for uncased models).
    :param kwargs: Extra options forwarded to :class:`FullTokenizer`.
    :return: Tokenizer bound to the loaded vocabulary.
    :raises VocabularyLoadError: If the vocabulary file cannot be read.

    .. code-block:: python

        tokenizer = from_pretrained("models/bert-base-uncased")
        ids = tokenizer.tokenize_to_ids("Hello world", 128)
    """
    vocab_path = Path(path)
    if vocab_path.is_dir():
        vocab_path = vocab_path / VOCAB_FILE_NAME
        log.debug(f"resolved model directory to {vocab_path}")
    return FullTokenizer(vocab_path, do_lower_case, **kwargs)


__all__ = ["from_pretrained"]
