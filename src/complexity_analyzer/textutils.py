from __future__ import annotations

import logging
import re
import string
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Iterable, List, Tuple

from .lexicon import LexiconError

logger = logging.getLogger(__name__)

ZERO_WIDTH_NON_JOINER = "\u200c"
HALF_SPACES = ("\u200b", "\u202f")
DIRECTIONAL_MARKS = ("\u202d", "\u202e", "\u202c")
PUNCTUATION_MAP = str.maketrans({"\u061b": ";", "\u061f": "?", "\u060c": ","})

BRACKETS_RE = re.compile(r"[()]")
PUNCTUATION_RE = re.compile(f"[{re.escape(string.punctuation)}]")
DELETE_MARKER = "DELETE"


@dataclass(slots=True)
class TextNormalizer:
    """Cleans lexicon entries and source text so both share identical tokens."""

    substitutions: List[Tuple[re.Pattern[str], str]] = field(default_factory=list)
    deletions: List[re.Pattern[str]] = field(default_factory=list)
    alphabet: FrozenSet[str] = frozenset()
    lowercase: bool = False

    def standardise_punctuation(self, text: str) -> str:
        """Map Arabic-script punctuation onto the ASCII marks sentences split on."""
        return text.translate(PUNCTUATION_MAP)

    def clean(self, text: str) -> str:
        text = self._substitute(text)
        text = self._delete(text)
        text = text.strip()
        if self.lowercase:
            text = text.lower()
        return text

    def unknown_characters(self, tokens: Iterable[str]) -> List[str]:
        """Characters outside the alphabet, in order of first appearance."""
        if not self.alphabet:
            return []
        unknown: dict[str, None] = {}
        for token in tokens:
            for char in token:
                if char not in self.alphabet:
                    unknown.setdefault(char, None)
        return list(unknown)

    def _substitute(self, text: str) -> str:
        text = text.replace(ZERO_WIDTH_NON_JOINER, " ")
        for half_space in HALF_SPACES:
            text = text.replace(half_space, " ")
        # Brackets become spaces so that neighbouring words stay apart.
        text = BRACKETS_RE.sub(" ", text)
        for pattern, replacement in self.substitutions:
            text = pattern.sub(replacement, text)
        return text

    def _delete(self, text: str) -> str:
        for mark in DIRECTIONAL_MARKS:
            text = text.replace(mark, "")
        text = PUNCTUATION_RE.sub("", text)
        for pattern in self.deletions:
            text = pattern.sub("", text)
        return text


def load_substitution_rules(
    path: Path,
) -> Tuple[List[Tuple[re.Pattern[str], str]], List[re.Pattern[str]]]:
    """
    Read tab-separated substitution rules.

    Each line holds a pattern and its replacement; a replacement of DELETE
    turns the line into a deletion rule. A missing file yields no rules.
    """
    substitutions: List[Tuple[re.Pattern[str], str]] = []
    deletions: List[re.Pattern[str]] = []
    if not path.exists():
        logger.info("No substitution file at %s; using built-in rules only.", path)
        return substitutions, deletions

    with path.open("r", encoding="utf-8") as handle:
        for line_no, raw in enumerate(handle, start=1):
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue
            parts = line.split("\t")
            if len(parts) != 2:
                raise LexiconError(f"Invalid substitution rule at {path}:{line_no}: {line!r}")
            lhs, rhs = parts
            try:
                pattern = re.compile(lhs)
            except re.error as exc:
                raise LexiconError(
                    f"Invalid substitution pattern at {path}:{line_no}: {lhs!r}"
                ) from exc
            if rhs == DELETE_MARKER:
                deletions.append(pattern)
            else:
                substitutions.append((pattern, rhs))
    return substitutions, deletions


def load_alphabet(path: Path) -> FrozenSet[str]:
    """Return every non-whitespace character in the alphabet file (empty if missing)."""
    if not path.exists():
        logger.info("No alphabet file at %s; character checks disabled.", path)
        return frozenset()
    text = path.read_text(encoding="utf-8")
    return frozenset(char for char in text if not char.isspace())


def build_normalizer(
    substitution_path: Path | None = None,
    alphabet_path: Path | None = None,
    *,
    lowercase: bool = False,
) -> TextNormalizer:
    substitutions, deletions = (
        load_substitution_rules(substitution_path) if substitution_path else ([], [])
    )
    alphabet = load_alphabet(alphabet_path) if alphabet_path else frozenset()
    return TextNormalizer(
        substitutions=substitutions,
        deletions=deletions,
        alphabet=alphabet,
        lowercase=lowercase,
    )
