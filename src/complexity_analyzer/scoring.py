from __future__ import annotations

from typing import Iterable, List, Mapping, Tuple

from .diagnostics import DiagnosticKind, Diagnostics
from .lexicon import Lexicon
from .models import Complexity, DecomposedWord


def complexity_of(
    word: DecomposedWord, lexicon: Lexicon, diagnostics: Diagnostics | None = None
) -> Complexity:
    """
    Classify a matched word as LOW, HIGH or UNSCORABLE.

    Superlatives are always LOW. Otherwise the classification is the sign of
    prefix * postfix * stem * negation, where only the stem factor can be 0.
    """
    if word.postfix == lexicon.superlative_postfix:
        return Complexity.LOW

    sink = diagnostics if diagnostics is not None else Diagnostics()
    product = (
        _affix_factor(
            word.prefix, lexicon.prefix_weights, DiagnosticKind.UNKNOWN_PREFIX, sink
        )
        * _affix_factor(
            word.postfix, lexicon.postfix_weights, DiagnosticKind.UNKNOWN_POSTFIX, sink
        )
        * _stem_factor(word.stem, lexicon, sink)
        * (-1 if word.negation else 1)
    )
    if product < 0:
        return Complexity.LOW
    if product > 0:
        return Complexity.HIGH
    return Complexity.UNSCORABLE


def partition_matches(
    matches: Iterable[DecomposedWord],
    lexicon: Lexicon,
    diagnostics: Diagnostics | None = None,
) -> Tuple[List[DecomposedWord], List[DecomposedWord]]:
    """Split matches into (low, high) lists, dropping unscorable ones."""
    low: List[DecomposedWord] = []
    high: List[DecomposedWord] = []
    for match in matches:
        result = complexity_of(match, lexicon, diagnostics)
        if result is Complexity.LOW:
            low.append(match)
        elif result is Complexity.HIGH:
            high.append(match)
    return low, high


def complexity_score(low_count: int, high_count: int) -> float:
    """Share of high-complexity words; NaN when nothing was classified."""
    total = low_count + high_count
    if total == 0:
        return float("nan")
    return high_count / total


def _affix_factor(
    affix: str | None,
    weights: Mapping[str, int],
    kind: DiagnosticKind,
    diagnostics: Diagnostics,
) -> int:
    if affix is None:
        return 1
    weight = weights.get(affix)
    if weight is None:
        diagnostics.report(kind, affix)
        return 1
    return weight


def _stem_factor(
    stem: Tuple[str, ...], lexicon: Lexicon, diagnostics: Diagnostics
) -> int:
    if stem in lexicon.low_complexity:
        return -1
    if stem in lexicon.high_complexity:
        return 1
    diagnostics.report(DiagnosticKind.UNSCORABLE_STEM, " ".join(stem))
    return 0
