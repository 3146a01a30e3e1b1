from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Dict, List, TypedDict

import pandas as pd

from .config import AnalyzerConfig
from .models import DecomposedWord, SentenceResult
from .summary import FileSummary, FolderSummary

LOGGER = logging.getLogger(__name__)


class WordPayload(TypedDict):
    prefix: str | None
    stem: List[str]
    postfix: str | None
    negation: List[str] | None
    text: str


class SentencePayload(TypedDict):
    original: str
    tokens: List[str]
    low: List[WordPayload]
    high: List[WordPayload]
    diagnostics: List[Dict[str, str]]


class FilePayload(TypedDict):
    file: str
    token_count: int
    low_count: int
    high_count: int
    score: float | None


class FolderPayload(TypedDict):
    file_count: int
    token_count: int
    low_count: int
    high_count: int
    score_from_totals: float | None
    average_score: float | None
    superlative_count: int


def word_payload(word: DecomposedWord) -> WordPayload:
    return {
        "prefix": word.prefix,
        "stem": list(word.stem),
        "postfix": word.postfix,
        "negation": list(word.negation) if word.negation else None,
        "text": str(word),
    }


def sentence_payload(result: SentenceResult) -> SentencePayload:
    return {
        "original": result.original,
        "tokens": list(result.tokens),
        "low": [word_payload(w) for w in result.low],
        "high": [word_payload(w) for w in result.high],
        "diagnostics": [
            {"kind": d.kind.value, "subject": d.subject} for d in result.diagnostics
        ],
    }


def file_payload(name: str, summary: FileSummary) -> FilePayload:
    return {
        "file": name,
        "token_count": summary.token_count,
        "low_count": summary.low_count,
        "high_count": summary.high_count,
        "score": _json_float(summary.score),
    }


def folder_payload(folder: FolderSummary) -> FolderPayload:
    return {
        "file_count": folder.file_count,
        "token_count": folder.token_count,
        "low_count": folder.low_count,
        "high_count": folder.high_count,
        "score_from_totals": _json_float(folder.score_from_totals),
        "average_score": _json_float(folder.average_score),
        "superlative_count": folder.superlative_count,
    }


def render_sentence(result: SentenceResult) -> str:
    return "\n".join(
        [
            f"Original     : {result.original}",
            f"Tokenised    : {' '.join(result.tokens)}",
            f"LC words ({result.low_count}) : {_words(result.low)}",
            f"HC words ({result.high_count}) : {_words(result.high)}",
        ]
    )


def render_file_report(summary: FileSummary) -> str:
    """Per-sentence breakdown followed by the file statistics table."""
    blocks = [render_sentence(sentence) + "\n" for sentence in summary.sentences]
    stats = pd.DataFrame(
        [
            {
                "Nr Tokens": summary.token_count,
                "Total LC Count": summary.low_count,
                "Total HC Count": summary.high_count,
                "Complexity Score": summary.score,
            }
        ]
    )
    blocks.append("\n---- STATISTICS ----\n\n")
    blocks.append(stats.to_string(index=False))
    return "\n".join(blocks) + "\n"


def render_folder_report(folder: FolderSummary) -> str:
    files = pd.DataFrame(
        [
            {
                "Nr Tokens": row.token_count,
                "LC Count": row.low_count,
                "HC Count": row.high_count,
                "Complexity Score": row.score,
                "File Name": row.name,
            }
            for row in folder.files
        ],
        columns=["Nr Tokens", "LC Count", "HC Count", "Complexity Score", "File Name"],
    ).sort_values("Complexity Score", kind="stable", na_position="last")

    stats = pd.DataFrame(
        [
            {
                "Nr Files": folder.file_count,
                "Total tokens": folder.token_count,
                "Total LC Count": folder.low_count,
                "Total HC Count": folder.high_count,
                "Complexity Score (totals)": folder.score_from_totals,
                "Complexity Score (average)": folder.average_score,
            }
        ]
    )

    stems = pd.DataFrame(
        [
            {
                "Counted as LC": counts.low,
                "Counted as HC": counts.high,
                "Influence (HC - LC)": counts.influence,
                "Complexity stem word": " ".join(stem),
            }
            for stem, counts in folder.stem_counts.items()
        ],
        columns=[
            "Counted as LC",
            "Counted as HC",
            "Influence (HC - LC)",
            "Complexity stem word",
        ],
    ).sort_values("Influence (HC - LC)", kind="stable")

    sections = [
        files.to_string(index=False),
        stats.to_string(index=False),
        stems.to_string(index=False),
        f"nrSuperlatives = {folder.superlative_count}",
    ]
    return "\n\n\n\n".join(sections) + "\n"


def write_reports(
    folder: Path,
    summaries: Dict[str, FileSummary],
    folder_summary: FolderSummary,
    config: AnalyzerConfig,
) -> Path:
    """Write one report per file plus the folder summary; returns the output directory."""
    output_dir = folder / config.output_folder_name
    output_dir.mkdir(parents=True, exist_ok=True)
    for name, summary in summaries.items():
        (output_dir / name).write_text(render_file_report(summary), encoding="utf-8")
    summary_path = output_dir / config.summary_file_name
    summary_path.write_text(render_folder_report(folder_summary), encoding="utf-8")
    LOGGER.info("Wrote %d file reports and %s", len(summaries), summary_path)
    return output_dir


def _words(words: List[DecomposedWord]) -> str:
    return "[" + ", ".join(str(word) for word in words) + "]"


def _json_float(value: float) -> float | None:
    return None if math.isnan(value) else value
