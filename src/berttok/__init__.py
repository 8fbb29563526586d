"""BertTok: BERT WordPiece tokenization."""

from ._models.base import Tokenizer, whitespace_tokenize
from ._models.basic import BasicTokenizer
from ._models.wordpiece import WordpieceTokenizer
from ._models.full import FullTokenizer
from .config import VERSION, TokenizerConfig
from .errors import (
    BertTokError,
    StrategyError,
    TokenizationError,
    UnknownIdError,
    UnknownTokenError,
    VocabularyLoadError,
)
from .factory import from_pretrained
from .strategy import (
    OovStrategy,
    RaiseStrategy,
    UnkFallbackStrategy,
    get_strategy,
    list_strategies,
)
from .vocab import Vocabulary, load_vocab

__version__ = VERSION

__all__ = [
    "Tokenizer",
    "BasicTokenizer",
    "WordpieceTokenizer",
    "FullTokenizer",
    "TokenizerConfig",
    "Vocabulary",
    "OovStrategy",
    "RaiseStrategy",
    "UnkFallbackStrategy",
    "BertTokError",
    "VocabularyLoadError",
    "UnknownTokenError",
    "UnknownIdError",
    "TokenizationError",
    "StrategyError",
    "from_pretrained",
    "load_vocab",
    "get_strategy",
    "list_strategies",
    "whitespace_tokenize",
]
