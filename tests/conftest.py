"""Shared fixtures: vocabulary files written into a temporary directory."""

import pytest

import berttok as btok


@pytest.fixture
def write_vocab(tmp_path):
    """Return a helper writing one token per line to a vocab file."""

    def _write(tokens: list[str], name: str = "vocab.txt"):
        path = tmp_path / name
        path.write_text("\n".join(tokens) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def small_vocab_file(write_vocab):
    """Vocabulary with ids [UNK]=0, hello=1, world=2, ##s=3."""
    return write_vocab(["[UNK]", "hello", "world", "##s"])


@pytest.fixture
def bert_vocab_file(write_vocab):
    """A tiny BERT-style vocabulary with special tokens, punctuation and CJK."""
    return write_vocab(
        [
            "[PAD]",
            "[UNK]",
            "[CLS]",
            "[SEP]",
            "[MASK]",
            "hello",
            "world",
            "##s",
            "don",
            "'",
            "t",
            ",",
            "!",
            "a",
            "b",
            "中",
            "国",
            "un",
            "##aff",
            "##able",
            "cafe",
        ]
    )


@pytest.fixture
def small_tokenizer(small_vocab_file):
    """Uncased FullTokenizer over the small vocabulary."""
    return btok.FullTokenizer(small_vocab_file, do_lower_case=True)


@pytest.fixture
def bert_tokenizer(bert_vocab_file):
    """Uncased FullTokenizer over the BERT-style vocabulary."""
    return btok.FullTokenizer(bert_vocab_file, do_lower_case=True)
