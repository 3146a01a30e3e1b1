import json
import math
from pathlib import Path

from complexity_analyzer.config import AnalyzerConfig
from complexity_analyzer.pipeline import analyze_text
from complexity_analyzer.reporting import (
    file_payload,
    folder_payload,
    render_folder_report,
    render_sentence,
    sentence_payload,
    write_reports,
)
from complexity_analyzer.scanner import SentenceScanner
from complexity_analyzer.summary import FolderSummary
from complexity_analyzer.textutils import TextNormalizer
from tests.utils import example_lexicon


def test_render_sentence_lists_words():
    """Sentence report lists original, tokens, LC and HC words."""
    result = SentenceScanner(example_lexicon()).analyse_sentence(
        "unknowly, know", ("unknowly", "know")
    )

    assert render_sentence(result).splitlines() == [
        "Original     : unknowly, know",
        "Tokenised    : unknowly know",
        "LC words (1) : [[know]]",
        "HC words (1) : [[un-know-ly]]",
    ]


def test_sentence_payload_is_json_ready():
    """Sentence payload serialises to JSON."""
    result = SentenceScanner(example_lexicon()).analyse_sentence(
        "know not", ("know", "not")
    )
    payload = sentence_payload(result)

    assert payload["high"][0]["negation"] == ["not"]
    assert payload["high"][0]["stem"] == ["know"]
    assert payload["low"] == []
    json.dumps(payload)


def test_nan_scores_become_null():
    """Files without classified words serialise their score as null."""
    summary = analyze_text("nothing here.", example_lexicon(), TextNormalizer())
    folder = FolderSummary(superlative_postfix="est")
    folder.add_file("empty.txt", summary)

    assert math.isnan(summary.score)
    assert file_payload("empty.txt", summary)["score"] is None
    assert folder_payload(folder)["score_from_totals"] is None
    assert folder_payload(folder)["file_count"] == 0


def test_folder_report_sections():
    """Folder report holds file, statistics and stem tables."""
    lexicon = example_lexicon()
    normalizer = TextNormalizer(lowercase=True)
    folder = FolderSummary(superlative_postfix="est")
    folder.add_file("a.txt", analyze_text("Deep think. I know.", lexicon, normalizer))
    folder.add_file("b.txt", analyze_text("Knowest.", lexicon, normalizer))

    report = render_folder_report(folder)

    assert "Complexity Score" in report
    assert "Complexity stem word" in report
    assert "deep think" in report
    assert report.rstrip().endswith("nrSuperlatives = 1")
    # Files are listed by ascending score.
    assert [line.split()[-1] for line in report.splitlines()[1:3]] == ["b", "a"]


def test_write_reports_creates_output_folder(tmp_path: Path):
    """Reports are written under the configured output folder."""
    lexicon = example_lexicon()
    summary = analyze_text("Deep think.", lexicon, TextNormalizer(lowercase=True))
    folder = FolderSummary(superlative_postfix="est")
    folder.add_file("doc.txt", summary)
    config = AnalyzerConfig(superlative_postfix="est")

    output_dir = write_reports(tmp_path, {"doc.txt": summary}, folder, config)

    assert output_dir == tmp_path / "ComplexityAnalyser"
    file_report = (output_dir / "doc.txt").read_text(encoding="utf-8")
    assert "HC words (1) : [[deep think]]" in file_report
    assert "---- STATISTICS ----" in file_report
    assert (output_dir / "SUMMARY.txt").exists()
