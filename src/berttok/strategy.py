"""Out-of-vocabulary handling for token -> id lookups."""

import sys
from typing import Final, Literal

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override
from abc import ABC, abstractmethod
import logging

from ._sanitise import render_token
from .errors import StrategyError, UnknownTokenError
from .types import Token, TokenId
from .vocab import Vocabulary

log = logging.getLogger(__name__)


class OovStrategy(ABC):
    """Base strategy for tokens missing from the vocabulary during id lookup."""

    @abstractmethod
    def handle(self, token: Token, vocab: Vocabulary, unk_token: Token) -> TokenId:
        """Return the id to use for ``token``, which is absent from ``vocab``."""


class RaiseStrategy(OovStrategy):
    """Strategy that reports every missing token as an error."""

    @override
    def handle(self, token: Token, vocab: Vocabulary, unk_token: Token) -> TokenId:
        raise UnknownTokenError("token not in vocabulary", token=token)


class UnkFallbackStrategy(OovStrategy):
    """Strategy that maps missing tokens to the unknown-token id and logs it."""

    @override
    def handle(self, token: Token, vocab: Vocabulary, unk_token: Token) -> TokenId:
        """
        Return the id of ``unk_token``.

        :raises UnknownTokenError: If ``unk_token`` itself is not in the vocabulary.
        """
        log.warning(
            f"token '{render_token(token)}' not in vocabulary, using {unk_token!r}"
        )
        return vocab.token_to_id(unk_token)


StrategyName = Literal["raise", "unk"]

_OOV_STRATEGIES: Final[dict[str, type[OovStrategy]]] = {
    "raise": RaiseStrategy,
    "unk": UnkFallbackStrategy,
}


def list_strategies() -> list[str]:
    """Return available out-of-vocabulary strategy names."""
    return list(_OOV_STRATEGIES.keys())


def get_strategy(name: StrategyName = "raise") -> OovStrategy:
    """
    Create an out-of-vocabulary strategy by name.

    :param name: Strategy identifier, "raise" or "unk".
    :raises StrategyError: If name is unknown.
    """
    if name not in _OOV_STRATEGIES:
        raise StrategyError(
            "unknown strategy name",
            invalid_name=name,
            available=list(_OOV_STRATEGIES.keys()),
        )
    return _OOV_STRATEGIES[name]()


__all__ = [
    "StrategyName",
    "OovStrategy",
    "RaiseStrategy",
    "UnkFallbackStrategy",
    "list_strategies",
    "get_strategy",
]
