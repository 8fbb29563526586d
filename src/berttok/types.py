"""
Core types for tokenization.
"""

from collections.abc import Mapping
from typing import TypeAlias

Token: TypeAlias = str
TokenId: TypeAlias = int
Vocab: TypeAlias = Mapping[Token, TokenId]
InvVocab: TypeAlias = Mapping[TokenId, Token]
