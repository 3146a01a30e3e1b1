from __future__ import annotations

import json

import click

from .config import AnalyzerConfig, load_config
from .lexicon import Lexicon, LexiconError
from .pipeline import prepare_resources

TRIE_NAMES = ("complexity", "exceptions", "negations", "prefixes", "postfixes")


@click.group(name="lexicon")
def lexicon_group() -> None:
    """Inspect compiled lexicon data."""


@lexicon_group.command("stats")
@click.option("--config", "config_path", type=click.Path(exists=True), default=None)
@click.option("--lexicon-dir", type=click.Path(file_okay=False), default=None)
def lexicon_stats(config_path: str | None, lexicon_dir: str | None) -> None:
    """Print entry counts for every lexicon table as JSON."""
    lexicon = _load(config_path, lexicon_dir)
    payload = {
        "complexity_words": len(lexicon.complexity_words),
        "low_complexity": len(lexicon.low_complexity),
        "high_complexity": len(lexicon.high_complexity),
        "prefixes": len(lexicon.prefix_weights),
        "postfixes": len(lexicon.postfix_weights),
        "negating_verbs": len(lexicon.negating_verbs),
        "exceptions": len(lexicon.exception_words),
        "superlative_postfix": lexicon.superlative_postfix,
    }
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@lexicon_group.command("show")
@click.argument("trie_name", type=click.Choice(TRIE_NAMES))
@click.option("--config", "config_path", type=click.Path(exists=True), default=None)
@click.option("--lexicon-dir", type=click.Path(file_okay=False), default=None)
def lexicon_show(
    trie_name: str, config_path: str | None, lexicon_dir: str | None
) -> None:
    """Print one lexicon trie as an indented outline; accepting nodes are parenthesised."""
    lexicon = _load(config_path, lexicon_dir)
    tries = {
        "complexity": lexicon.complexity_words,
        "exceptions": lexicon.exception_words,
        "negations": lexicon.negating_verbs,
        "prefixes": lexicon.prefixes,
        "postfixes": lexicon.postfixes,
    }
    click.echo(tries[trie_name].render())


def _load(config_path: str | None, lexicon_dir: str | None) -> Lexicon:
    cfg: AnalyzerConfig = load_config(config_path)
    if lexicon_dir:
        cfg.lexicon_dir = lexicon_dir
    try:
        lexicon, _ = prepare_resources(cfg)
    except LexiconError as exc:
        raise click.ClickException(str(exc)) from exc
    return lexicon
