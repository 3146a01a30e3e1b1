from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Tuple

from .config import AnalyzerConfig
from .lexicon import Lexicon, LexiconBuilder, LexiconError
from .textutils import TextNormalizer

LOGGER = logging.getLogger(__name__)


def load_lexicon(config: AnalyzerConfig, normalizer: TextNormalizer) -> Lexicon:
    """
    Read every lexicon file named in config and compile them into a Lexicon.

    Parameters
    ----------
    config:
        Supplies the lexicon directory, the file names and the superlative postfix.
    normalizer:
        Applied to each entry so entries match cleaned source tokens.
    """
    builder = LexiconBuilder()

    for sequence in _read_sequences(config.lexicon_path(config.lc_file), normalizer):
        builder.add_low_complexity(sequence)
    for sequence in _read_sequences(config.lexicon_path(config.hc_file), normalizer):
        builder.add_high_complexity(sequence)
    for text, weight in _read_weights(config.lexicon_path(config.prefix_file), normalizer):
        builder.add_prefix(text, weight)
    for text, weight in _read_weights(config.lexicon_path(config.postfix_file), normalizer):
        builder.add_postfix(text, weight)
    for sequence in _read_sequences(
        config.lexicon_path(config.negating_verbs_file), normalizer
    ):
        builder.add_negating_verbs(sequence)
    for sequence in _read_sequences(
        config.lexicon_path(config.exception_words_file), normalizer
    ):
        builder.add_exception(sequence)

    lexicon = builder.build(normalizer.clean(config.superlative_postfix))
    LOGGER.info(
        "Lexicon ready: %d complexity words, %d prefixes, %d postfixes, "
        "%d negating sequences, %d exceptions",
        len(lexicon.complexity_words),
        len(lexicon.prefix_weights),
        len(lexicon.postfix_weights),
        len(lexicon.negating_verbs),
        len(lexicon.exception_words),
    )
    return lexicon


def _read_lines(path: Path) -> Iterator[str]:
    if not path.exists():
        raise LexiconError(f"Lexicon file not found: {path}")
    LOGGER.info("Reading %s", path)
    with path.open("r", encoding="utf-8") as handle:
        for raw in handle:
            line = raw.strip()
            if line:
                yield line


def _read_sequences(path: Path, normalizer: TextNormalizer) -> Iterator[List[str]]:
    for line in _read_lines(path):
        tokens = normalizer.clean(line).split()
        _warn_unknown(path, tokens, normalizer)
        yield tokens


def _read_weights(path: Path, normalizer: TextNormalizer) -> Iterator[Tuple[str, int]]:
    for line in _read_lines(path):
        parts = line.split()
        if len(parts) != 2:
            raise LexiconError(f"{line!r} in {path} is not a valid key-value pair.")
        key, raw_weight = parts
        try:
            weight = int(raw_weight)
        except ValueError as exc:
            raise LexiconError(
                f"{line!r} in {path} is not a valid key-value pair."
            ) from exc
        cleaned = normalizer.clean(key)
        _warn_unknown(path, [cleaned], normalizer)
        yield cleaned, weight


def _warn_unknown(path: Path, tokens: List[str], normalizer: TextNormalizer) -> None:
    for char in normalizer.unknown_characters(tokens):
        LOGGER.warning("Unknown character >%s< in %s", char, path.name)
