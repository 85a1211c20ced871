from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass
from typing import Iterator, List

LOGGER = logging.getLogger(__name__)

WORD_CATEGORY_PREFIXES = ("L", "M")


@dataclass(frozen=True)
class TokenizerOptions:
    """Configuration for word tokenization."""

    min_token_length: int = 2


def is_word_character(char: str) -> bool:
    """Return True for Unicode letters and combining marks."""

    return unicodedata.category(char).startswith(WORD_CATEGORY_PREFIXES)


def iter_word_runs(text: str) -> Iterator[str]:
    """Yield maximal runs of letter/mark code points in order of appearance."""

    start = -1
    for index, char in enumerate(text):
        if is_word_character(char):
            if start < 0:
                start = index
        elif start >= 0:
            yield text[start:index]
            start = -1
    if start >= 0:
        yield text[start:]


def tokenize(text: str, options: TokenizerOptions | None = None) -> List[str]:
    """Split ``text`` into case-folded word tokens.

    Runs are folded with :meth:`str.casefold` before the length check, so the
    minimum length applies to the normalized token.
    """

    tokenizer_options = options or TokenizerOptions()
    if tokenizer_options.min_token_length < 1:
        raise ValueError(
            f"min_token_length must be at least 1, got {tokenizer_options.min_token_length}."
        )

    tokens = [
        folded
        for folded in (run.casefold() for run in iter_word_runs(text))
        if len(folded) >= tokenizer_options.min_token_length
    ]
    LOGGER.debug("Tokenized %d characters into %d tokens", len(text), len(tokens))
    return tokens
