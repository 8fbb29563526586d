"""Custom exception hierarchy for berttok tokenization errors."""

from ._sanitise import render_token


class BertTokError(Exception):
    """Base exception for all berttok errors."""


class VocabularyLoadError(BertTokError):
    """Raised when a vocabulary file cannot be read."""

    def __init__(self, message: str, *, vocab_path: str | None = None) -> None:
        """Initialize with optional vocab_path that gets appended to the message."""
        extra = " "
        if vocab_path:
            extra += f"(path: {vocab_path}) "
        super().__init__(message + extra)
        self.vocab_path = vocab_path


class UnknownTokenError(BertTokError):
    """Raised when a token is absent from the vocabulary during an id lookup."""

    def __init__(self, message: str, *, token: str | None = None) -> None:
        extra = " "
        if token is not None:
            extra += f"(token: '{render_token(token)}') "
        super().__init__(message + extra)
        self.token = token


class UnknownIdError(BertTokError):
    """Raised when an id has no token in the inverse vocabulary."""

    def __init__(self, message: str, *, token_id: int | None = None) -> None:
        extra = " "
        if token_id is not None:
            extra += f"(id: {token_id}) "
        super().__init__(message + extra)
        self.token_id = token_id


class TokenizationError(BertTokError):
    """Raised when tokenization arguments are invalid."""

    def __init__(
        self,
        message: str,
        *,
        position: int | None = None,
        capacity: int | None = None,
    ) -> None:
        extra = " "
        if position is not None:
            extra += f"(position: {position}) "
        if capacity is not None:
            extra += f"(capacity: {capacity}) "
        super().__init__(message + extra)
        self.position = position
        self.capacity = capacity


class StrategyError(BertTokError):
    """Raised when a strategy or tokenizer name cannot be resolved."""

    def __init__(
        self,
        message: str,
        *,
        invalid_name: str | None = None,
        available: list[str] | None = None,
    ) -> None:
        extra = " "
        if invalid_name:
            extra += f"(available: {available}) (got {invalid_name}) "
        super().__init__(message + extra)
        self.invalid_name = invalid_name
        self.available = available


__all__ = [
    "BertTokError",
    "VocabularyLoadError",
    "UnknownTokenError",
    "UnknownIdError",
    "TokenizationError",
    "StrategyError",
]
