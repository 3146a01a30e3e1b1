from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict, List, Tuple

from .config import AnalyzerConfig
from .diagnostics import DiagnosticKind, Diagnostics
from .lexicon import Lexicon
from .lexicon_loader import load_lexicon
from .models import SentenceResult
from .scanner import SentenceScanner
from .summary import FileSummary, FolderSummary, summarize_sentences
from .textutils import TextNormalizer, build_normalizer
from .tokenization import split_sentences, tokenize_sentence

LOGGER = logging.getLogger(__name__)


def prepare_resources(config: AnalyzerConfig) -> Tuple[Lexicon, TextNormalizer]:
    """Build the normalizer from its rule files, then load the lexicon through it."""
    normalizer = build_normalizer(
        config.lexicon_path(config.substitution_file),
        config.lexicon_path(config.alphabet_file) if config.check_alphabet else None,
        lowercase=config.lowercase,
    )
    return load_lexicon(config, normalizer), normalizer


def analyze_text(
    text: str, lexicon: Lexicon, normalizer: TextNormalizer
) -> FileSummary:
    """Split text into sentences, scan each one and summarise the results."""
    scanner = SentenceScanner(lexicon)
    standardised = normalizer.standardise_punctuation(text)
    results: List[SentenceResult] = []
    for sentence in split_sentences(standardised):
        tokens = tokenize_sentence(sentence, normalizer)
        diagnostics = character_diagnostics(tokens, normalizer)
        results.append(scanner.analyse_sentence(sentence, tokens, diagnostics))
    return summarize_sentences(results)


def character_diagnostics(
    tokens: Tuple[str, ...], normalizer: TextNormalizer
) -> Diagnostics:
    """Report every character of tokens that is missing from the alphabet."""
    diagnostics = Diagnostics()
    for char in normalizer.unknown_characters(tokens):
        diagnostics.report(DiagnosticKind.UNKNOWN_CHARACTER, char)
    return diagnostics


def analyze_file(
    path: Path, lexicon: Lexicon, normalizer: TextNormalizer
) -> FileSummary:
    """Analyse a UTF-8 text file; line breaks are treated as spaces."""
    LOGGER.info("Analysing %s", path)
    with path.open("r", encoding="utf-8") as handle:
        text = " ".join(line.rstrip("\r\n") for line in handle)
    return analyze_text(text, lexicon, normalizer)


def analyze_folder(
    folder: Path,
    lexicon: Lexicon,
    normalizer: TextNormalizer,
    config: AnalyzerConfig,
) -> Tuple[Dict[str, FileSummary], FolderSummary]:
    """Analyse every .txt file directly inside folder and aggregate the results."""
    files = sorted(p for p in folder.iterdir() if p.is_file() and p.suffix == ".txt")
    workers = max(1, config.parallel_files)
    if workers > 1 and len(files) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            outcomes = list(
                pool.map(lambda p: _try_analyze(p, lexicon, normalizer), files)
            )
    else:
        outcomes = [_try_analyze(p, lexicon, normalizer) for p in files]

    summaries: Dict[str, FileSummary] = {}
    folder_summary = FolderSummary(
        superlative_postfix=lexicon.superlative_postfix,
        max_file_name_length=config.max_file_name_length,
    )
    for path, summary in zip(files, outcomes):
        if summary is None:
            continue
        summaries[path.name] = summary
        folder_summary.add_file(path.name, summary)
    return summaries, folder_summary


def _try_analyze(
    path: Path, lexicon: Lexicon, normalizer: TextNormalizer
) -> FileSummary | None:
    try:
        return analyze_file(path, lexicon, normalizer)
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.warning("Skipping %s as it could not be read: %s", path, exc)
        return None
