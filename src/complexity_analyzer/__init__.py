"""
complexity_analyzer package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import AnalyzerConfig, config_from_dict, config_from_yaml, load_config
from .decomposition import DecompositionEngine
from .lexicon import Lexicon, LexiconBuilder, LexiconError, build_lexicon
from .models import Complexity, DecomposedWord, SentenceResult
from .pipeline import analyze_file, analyze_folder, analyze_text, prepare_resources
from .scanner import SentenceScanner

__all__ = [
    "AnalyzerConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "Complexity",
    "DecomposedWord",
    "SentenceResult",
    "Lexicon",
    "LexiconBuilder",
    "LexiconError",
    "build_lexicon",
    "DecompositionEngine",
    "SentenceScanner",
    "prepare_resources",
    "analyze_text",
    "analyze_file",
    "analyze_folder",
]

__version__ = "0.1.0"
