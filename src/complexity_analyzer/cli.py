from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Tuple

import typer
import yaml

from .config import AnalyzerConfig, load_config
from .lexicon import Lexicon, LexiconError
from .pipeline import (
    analyze_file,
    analyze_folder,
    character_diagnostics,
    prepare_resources,
)
from .reporting import (
    file_payload,
    folder_payload,
    sentence_payload,
    write_reports,
)
from .scanner import SentenceScanner
from .summary import FolderSummary
from .textutils import TextNormalizer
from .tokenization import tokenize_sentence

app = typer.Typer(help="Conceptual complexity analyser CLI.", no_args_is_help=True)


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    lexicon_dir: Path | None = typer.Option(
        None, "--lexicon-dir", "-l", help="Directory holding the lexicon files."
    ),
    write: bool = typer.Option(
        False,
        "--write-reports/--no-write-reports",
        help="Write per-file reports and a folder summary next to the input.",
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
) -> None:
    """Analyse a text file or every .txt file in a folder and emit a JSON summary."""
    cfg = _load_with_overrides(config, lexicon_dir, log_level)
    lexicon, normalizer = _prepare(cfg)

    if input_path.is_file():
        try:
            summary = analyze_file(input_path, lexicon, normalizer)
        except (OSError, UnicodeDecodeError) as exc:
            raise typer.BadParameter(
                f"Could not read {input_path}: {exc}", param_hint="--input-path"
            ) from exc
        summaries = {input_path.name: summary}
        folder_summary = FolderSummary(
            superlative_postfix=lexicon.superlative_postfix,
            max_file_name_length=cfg.max_file_name_length,
        )
        folder_summary.add_file(input_path.name, summary)
        report_root = input_path.parent
    else:
        summaries, folder_summary = analyze_folder(input_path, lexicon, normalizer, cfg)
        report_root = input_path

    payload = {
        "files": [file_payload(name, s) for name, s in sorted(summaries.items())],
        "folder": folder_payload(folder_summary),
    }
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))

    if write:
        output_dir = write_reports(report_root, summaries, folder_summary, cfg)
        typer.echo(f"Wrote reports to {output_dir}", err=True)


@app.command()
def sentence(
    text: str = typer.Argument(..., help="Sentence to analyse."),
    config: Path | None = typer.Option(None, "--config", "-c"),
    lexicon_dir: Path | None = typer.Option(None, "--lexicon-dir", "-l"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
) -> None:
    """Analyse a single sentence and print its classified complexity words."""
    cfg = _load_with_overrides(config, lexicon_dir, log_level)
    lexicon, normalizer = _prepare(cfg)
    standardised = normalizer.standardise_punctuation(text)
    tokens = tokenize_sentence(standardised, normalizer)
    diagnostics = character_diagnostics(tokens, normalizer)
    result = SentenceScanner(lexicon).analyse_sentence(text, tokens, diagnostics)
    typer.echo(json.dumps(sentence_payload(result), indent=2, ensure_ascii=False))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = AnalyzerConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False, allow_unicode=True))


def main() -> None:
    app()


def _load_with_overrides(
    config_path: Path | None, lexicon_dir: Path | None, log_level: str | None
) -> AnalyzerConfig:
    """Load the configuration and apply CLI overrides when provided."""
    try:
        cfg = load_config(config_path)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    if lexicon_dir:
        cfg.lexicon_dir = str(lexicon_dir)
    if log_level:
        cfg.log_level = log_level
    _configure_logging(cfg.log_level)
    return cfg


def _prepare(cfg: AnalyzerConfig) -> Tuple[Lexicon, TextNormalizer]:
    try:
        return prepare_resources(cfg)
    except LexiconError as exc:
        raise typer.BadParameter(str(exc), param_hint="--lexicon-dir") from exc


def _configure_logging(level: str) -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise typer.BadParameter(f"Unknown log level '{level}'.", param_hint="--log-level")
    logging.basicConfig(level=numeric, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(numeric)


if __name__ == "__main__":
    main()
