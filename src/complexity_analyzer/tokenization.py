from __future__ import annotations

import re
from typing import List, Tuple

from .textutils import TextNormalizer

SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?;])\s*")
WHITESPACE_RE = re.compile(r"\s+")


def split_sentences(text: str) -> List[str]:
    """Split text after every sentence-ending mark, keeping the mark."""
    return [piece for piece in SENTENCE_SPLIT_RE.split(text) if piece.strip()]


def tokenize_sentence(sentence: str, normalizer: TextNormalizer) -> Tuple[str, ...]:
    """Clean a sentence and split it into whitespace-delimited tokens."""
    cleaned = normalizer.clean(sentence)
    return tuple(token for token in WHITESPACE_RE.split(cleaned) if token)
