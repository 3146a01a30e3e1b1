from __future__ import annotations

from typing import List, Sequence

from .decomposition import DecompositionEngine
from .detectors import ExceptionDetector, SuperlativeDetector
from .diagnostics import Diagnostics
from .lexicon import Lexicon
from .models import DecomposedWord, SentenceResult
from .scoring import partition_matches


class SentenceScanner:
    """Walks a tokenized sentence and collects classified complexity words."""

    def __init__(self, lexicon: Lexicon) -> None:
        self.lexicon = lexicon
        self.exceptions = ExceptionDetector(lexicon)
        self.superlatives = SuperlativeDetector(lexicon)
        self.engine = DecompositionEngine(lexicon)

    def scan(self, tokens: Sequence[str]) -> List[DecomposedWord]:
        """Return raw matches in sentence order, before classification."""
        matches: List[DecomposedWord] = []
        i = 0
        while i < len(tokens):
            skipped = self.exceptions.check(tokens, i)
            if skipped > 0:
                i += skipped
                continue
            match = self.superlatives.check(tokens, i) or self.engine.check(tokens, i)
            if match is not None:
                matches.append(match)
                i += match.consumed
                continue
            i += 1
        return matches

    def analyse_sentence(
        self,
        original: str,
        tokens: Sequence[str],
        diagnostics: Diagnostics | None = None,
    ) -> SentenceResult:
        sink = diagnostics if diagnostics is not None else Diagnostics()
        token_tuple = tuple(tokens)
        low, high = partition_matches(self.scan(token_tuple), self.lexicon, sink)
        return SentenceResult(
            original=original, tokens=token_tuple, low=low, high=high, diagnostics=sink
        )
