"""Tokenizer implementations for BERT WordPiece text processing."""

from .base import Tokenizer, whitespace_tokenize
from .basic import BasicTokenizer
from .wordpiece import WordpieceTokenizer
from .full import FullTokenizer


__all__ = [
    "Tokenizer",
    "BasicTokenizer",
    "WordpieceTokenizer",
    "FullTokenizer",
    "whitespace_tokenize",
]
