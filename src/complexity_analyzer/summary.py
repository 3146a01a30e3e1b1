from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .models import DecomposedWord, SentenceResult
from .scoring import complexity_score


@dataclass(slots=True)
class FileSummary:
    """Per-file totals derived from its sentence results."""

    sentences: List[SentenceResult]
    token_count: int = 0
    low_count: int = 0
    high_count: int = 0
    score: float = float("nan")
    low_words: List[DecomposedWord] = field(default_factory=list)
    high_words: List[DecomposedWord] = field(default_factory=list)


@dataclass(slots=True)
class StemCounts:
    low: int = 0
    high: int = 0

    @property
    def influence(self) -> int:
        return self.high - self.low


@dataclass(slots=True)
class FileRow:
    name: str
    token_count: int
    low_count: int
    high_count: int
    score: float


@dataclass(slots=True)
class FolderSummary:
    """Aggregates file summaries; files without any classified word are listed but not totalled."""

    superlative_postfix: str
    max_file_name_length: int = 100
    files: List[FileRow] = field(default_factory=list)
    file_count: int = 0
    token_count: int = 0
    low_count: int = 0
    high_count: int = 0
    superlative_count: int = 0
    score_sum: float = 0.0
    stem_counts: Dict[Tuple[str, ...], StemCounts] = field(
        default_factory=lambda: defaultdict(StemCounts)
    )

    def add_file(self, file_name: str, summary: FileSummary) -> None:
        self.files.append(
            FileRow(
                name=crop_file_name(file_name, self.max_file_name_length),
                token_count=summary.token_count,
                low_count=summary.low_count,
                high_count=summary.high_count,
                score=summary.score,
            )
        )
        if math.isnan(summary.score):
            return
        self.file_count += 1
        self.token_count += summary.token_count
        self.low_count += summary.low_count
        self.high_count += summary.high_count
        self.score_sum += summary.score
        self._count_stems(summary.low_words, is_high=False)
        self._count_stems(summary.high_words, is_high=True)

    @property
    def score_from_totals(self) -> float:
        return complexity_score(self.low_count, self.high_count)

    @property
    def average_score(self) -> float:
        if self.file_count == 0:
            return float("nan")
        return self.score_sum / self.file_count

    def _count_stems(self, words: List[DecomposedWord], *, is_high: bool) -> None:
        for word in words:
            # Superlatives are tallied on their own, not by stem.
            if word.postfix == self.superlative_postfix:
                self.superlative_count += 1
                continue
            counts = self.stem_counts[word.stem]
            if is_high:
                counts.high += 1
            else:
                counts.low += 1


def summarize_sentences(sentences: List[SentenceResult]) -> FileSummary:
    """Compute file-level counts and the complexity score for sentence results."""
    summary = FileSummary(sentences=sentences)
    for sentence in sentences:
        summary.token_count += len(sentence.tokens)
        summary.low_count += sentence.low_count
        summary.high_count += sentence.high_count
        summary.low_words.extend(sentence.low)
        summary.high_words.extend(sentence.high)
    summary.score = complexity_score(summary.low_count, summary.high_count)
    return summary


def crop_file_name(file_name: str, max_length: int = 100) -> str:
    """Drop a .txt extension and shorten names longer than max_length with an ellipsis."""
    if file_name.lower().endswith(".txt"):
        file_name = file_name[:-4]
    if len(file_name) <= max_length:
        return file_name
    return file_name[: max_length - 3] + "..."
