from __future__ import annotations

from typing import Sequence

from .lexicon import Lexicon
from .models import DecomposedWord


class ExceptionDetector:
    """
    Skip filter for exception sequences.

    The exception list is expected to already spell out affixed variants, so
    tokens are compared whole and never decomposed.
    """

    def __init__(self, lexicon: Lexicon) -> None:
        self._exceptions = lexicon.exception_words

    def check(self, tokens: Sequence[str], i: int) -> int:
        """Return how many tokens starting at i form an exception (0 if none)."""
        return self._exceptions.longest_match_length(tokens, i)


class SuperlativeDetector:
    """Recognises the superlative postfix, fused or as the following token."""

    def __init__(self, lexicon: Lexicon) -> None:
        self.postfix = lexicon.superlative_postfix

    def check(self, tokens: Sequence[str], i: int) -> DecomposedWord | None:
        word = tokens[i]
        if word.endswith(self.postfix):
            return DecomposedWord(
                stem=(word[: -len(self.postfix)],),
                postfix=self.postfix,
                postfix_fused=True,
                consumed=1,
            )
        # The disconnected form must equal the whole next token.
        if i + 1 < len(tokens) and tokens[i + 1] == self.postfix:
            return DecomposedWord(stem=(word,), postfix=self.postfix, consumed=2)
        return None
