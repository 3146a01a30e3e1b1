from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Sequence, Set, Tuple

from .trie import CharacterTrie, Direction, SequenceTrie

logger = logging.getLogger(__name__)

VALID_WEIGHTS = frozenset({-1, 1})


class LexiconError(ValueError):
    """Raised when lexicon data or rule files are malformed."""


@dataclass(slots=True, frozen=True)
class Lexicon:
    """
    Compiled lexicon shared read-only by every analysis of a run.

    Build it through LexiconBuilder; nothing mutates it afterwards.
    """

    complexity_words: SequenceTrie
    exception_words: SequenceTrie
    negating_verbs: SequenceTrie
    prefixes: CharacterTrie
    postfixes: CharacterTrie
    prefix_weights: Mapping[str, int]
    postfix_weights: Mapping[str, int]
    low_complexity: FrozenSet[Tuple[str, ...]]
    high_complexity: FrozenSet[Tuple[str, ...]]
    superlative_postfix: str

    def is_prefix(self, token: str) -> bool:
        return token in self.prefix_weights

    def is_postfix(self, token: str) -> bool:
        return token in self.postfix_weights


@dataclass(slots=True)
class LexiconBuilder:
    """
    Accumulates lexicon entries and compiles them into an immutable Lexicon.

    build() hands the accumulated tries over to the Lexicon and leaves the
    builder empty, so later additions never reach a built lexicon.
    """

    complexity_words: SequenceTrie = field(default_factory=SequenceTrie)
    exception_words: SequenceTrie = field(default_factory=SequenceTrie)
    negating_verbs: SequenceTrie = field(default_factory=SequenceTrie)
    prefixes: CharacterTrie = field(
        default_factory=lambda: CharacterTrie(Direction.FORWARD)
    )
    postfixes: CharacterTrie = field(
        default_factory=lambda: CharacterTrie(Direction.BACKWARD)
    )
    prefix_weights: Dict[str, int] = field(default_factory=dict)
    postfix_weights: Dict[str, int] = field(default_factory=dict)
    low_complexity: Set[Tuple[str, ...]] = field(default_factory=set)
    high_complexity: Set[Tuple[str, ...]] = field(default_factory=set)

    def add_low_complexity(self, sequence: Sequence[str]) -> "LexiconBuilder":
        entry = _as_entry(sequence)
        if entry:
            self.complexity_words.insert(entry)
            self.low_complexity.add(entry)
        return self

    def add_high_complexity(self, sequence: Sequence[str]) -> "LexiconBuilder":
        entry = _as_entry(sequence)
        if entry:
            self.complexity_words.insert(entry)
            self.high_complexity.add(entry)
        return self

    def add_exception(self, sequence: Sequence[str]) -> "LexiconBuilder":
        entry = _as_entry(sequence)
        if entry:
            self.exception_words.insert(entry)
        return self

    def add_negating_verbs(self, sequence: Sequence[str]) -> "LexiconBuilder":
        entry = _as_entry(sequence)
        if entry:
            self.negating_verbs.insert(entry)
        return self

    def add_prefix(self, text: str, weight: int) -> "LexiconBuilder":
        if _check_affix(text, weight, "prefix"):
            self.prefixes.insert(text)
            self.prefix_weights[text] = weight
        return self

    def add_postfix(self, text: str, weight: int) -> "LexiconBuilder":
        if _check_affix(text, weight, "postfix"):
            self.postfixes.insert(text)
            self.postfix_weights[text] = weight
        return self

    def build(self, superlative_postfix: str) -> Lexicon:
        if not superlative_postfix:
            raise LexiconError("The superlative postfix must be a non-empty string.")
        overlap = self.low_complexity & self.high_complexity
        if overlap:
            logger.warning(
                "%d sequences are listed as both low and high complexity; "
                "they will be scored as low complexity.",
                len(overlap),
            )
        lexicon = Lexicon(
            complexity_words=self.complexity_words,
            exception_words=self.exception_words,
            negating_verbs=self.negating_verbs,
            prefixes=self.prefixes,
            postfixes=self.postfixes,
            prefix_weights=MappingProxyType(dict(self.prefix_weights)),
            postfix_weights=MappingProxyType(dict(self.postfix_weights)),
            low_complexity=frozenset(self.low_complexity),
            high_complexity=frozenset(self.high_complexity),
            superlative_postfix=superlative_postfix,
        )
        # The tries now belong to the lexicon; start over with empty ones.
        for builder_field in fields(self):
            setattr(self, builder_field.name, builder_field.default_factory())
        return lexicon


def build_lexicon(
    *,
    low_complexity: Iterable[Sequence[str]] = (),
    high_complexity: Iterable[Sequence[str]] = (),
    prefixes: Mapping[str, int] | None = None,
    postfixes: Mapping[str, int] | None = None,
    negating_verbs: Iterable[Sequence[str]] = (),
    exceptions: Iterable[Sequence[str]] = (),
    superlative_postfix: str,
) -> Lexicon:
    """Convenience helper to compile a Lexicon from in-memory collections."""
    builder = LexiconBuilder()
    for sequence in low_complexity:
        builder.add_low_complexity(sequence)
    for sequence in high_complexity:
        builder.add_high_complexity(sequence)
    for text, weight in (prefixes or {}).items():
        builder.add_prefix(text, weight)
    for text, weight in (postfixes or {}).items():
        builder.add_postfix(text, weight)
    for sequence in negating_verbs:
        builder.add_negating_verbs(sequence)
    for sequence in exceptions:
        builder.add_exception(sequence)
    return builder.build(superlative_postfix)


def _as_entry(sequence: Sequence[str]) -> Tuple[str, ...]:
    entry = tuple(token for token in sequence if token)
    if not entry:
        logger.debug("Ignoring empty lexicon entry.")
    return entry


def _check_affix(text: str, weight: int, label: str) -> bool:
    if not text:
        logger.debug("Ignoring empty %s entry.", label)
        return False
    if weight not in VALID_WEIGHTS:
        raise LexiconError(f"Weight for {label} '{text}' must be -1 or 1, got {weight}.")
    return True
