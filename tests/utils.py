from __future__ import annotations

from pathlib import Path

from complexity_analyzer.lexicon import Lexicon, build_lexicon

LEXICON_FILES = {
    "lc.txt": "know\n",
    "hc.txt": "deep think\n",
    "prefixes.txt": "un -1\n",
    "postfixes.txt": "ly 1\n",
    "negatingVerbs.txt": "not\n",
    "exceptionWords.txt": "deep blue\n",
}


def example_lexicon(**overrides) -> Lexicon:
    """Build the small English lexicon used throughout the tests."""
    entries = dict(
        low_complexity=[["know"]],
        high_complexity=[["deep", "think"]],
        prefixes={"un": -1},
        postfixes={"ly": 1},
        negating_verbs=[["not"]],
        exceptions=[["deep", "blue"]],
        superlative_postfix="est",
    )
    entries.update(overrides)
    return build_lexicon(**entries)


def write_lexicon_dir(
    tmp_path: Path, files: dict[str, str] | None = None, alphabet: bool = False
) -> Path:
    """Write lexicon files under tmp_path/lexicon and return the directory."""
    lexicon_dir = tmp_path / "lexicon"
    lexicon_dir.mkdir()
    for name, body in {**LEXICON_FILES, **(files or {})}.items():
        (lexicon_dir / name).write_text(body, encoding="utf-8")
    if alphabet:
        (lexicon_dir / "alphabet.txt").write_text(
            "abcdefghijklmnopqrstuvwxyz\n", encoding="utf-8"
        )
    return lexicon_dir


def write_config(tmp_path: Path, lexicon_dir: Path, **extra: object) -> Path:
    """Write a YAML config pointing at lexicon_dir with an ASCII superlative."""
    lines = [f"lexicon_dir: '{lexicon_dir.as_posix()}'", "superlative_postfix: est"]
    lines.extend(f"{key}: {value}" for key, value in extra.items())
    config_path = tmp_path / "config.yaml"
    config_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return config_path
