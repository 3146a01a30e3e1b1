from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

DEFAULT_SUPERLATIVE_POSTFIX = "ترین"


@dataclass(slots=True)
class AnalyzerConfig:
    """Configuration options for lexicon loading, normalization and reporting."""

    lexicon_dir: str = "config"
    lc_file: str = "lc.txt"
    hc_file: str = "hc.txt"
    prefix_file: str = "prefixes.txt"
    postfix_file: str = "postfixes.txt"
    negating_verbs_file: str = "negatingVerbs.txt"
    exception_words_file: str = "exceptionWords.txt"
    substitution_file: str = "substitutions.txt"
    alphabet_file: str = "alphabet.txt"
    superlative_postfix: str = DEFAULT_SUPERLATIVE_POSTFIX
    lowercase: bool = False
    check_alphabet: bool = True
    output_folder_name: str = "ComplexityAnalyser"
    summary_file_name: str = "SUMMARY.txt"
    max_file_name_length: int = 100
    parallel_files: int = 1
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.max_file_name_length < 4:
            raise ValueError("max_file_name_length must be at least 4.")
        if not self.superlative_postfix:
            raise ValueError("superlative_postfix must not be empty.")

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))

    def lexicon_path(self, file_name: str) -> Path:
        return Path(self.lexicon_dir) / file_name


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(AnalyzerConfig)}
    return {key: data[key] for key in data if key in allowed}


def config_from_dict(data: Mapping[str, Any] | None) -> AnalyzerConfig:
    """Build an AnalyzerConfig from a dictionary-like input."""
    if data is None:
        return AnalyzerConfig()
    return AnalyzerConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> AnalyzerConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> AnalyzerConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return AnalyzerConfig()
    return config_from_yaml(path)
