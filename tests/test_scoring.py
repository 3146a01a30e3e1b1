import math

import pytest

from complexity_analyzer.diagnostics import DiagnosticKind, Diagnostics
from complexity_analyzer.lexicon import LexiconBuilder, LexiconError, build_lexicon
from complexity_analyzer.models import Complexity, DecomposedWord
from complexity_analyzer.scoring import complexity_of, complexity_score, partition_matches
from tests.utils import example_lexicon


def test_superlative_postfix_is_always_low():
    """Superlatives score low whatever the stem."""
    lexicon = example_lexicon()
    word = DecomposedWord(stem=("deep", "think"), postfix="est", consumed=3)

    assert complexity_of(word, lexicon) is Complexity.LOW


def test_sign_is_product_of_factors():
    """Classification follows the sign of prefix, postfix, stem and negation."""
    lexicon = example_lexicon()
    cases = {
        DecomposedWord(stem=("know",), consumed=1): Complexity.LOW,
        DecomposedWord(stem=("know",), prefix="un", consumed=1): Complexity.HIGH,
        DecomposedWord(
            stem=("know",), prefix="un", negation=("not",), consumed=2
        ): Complexity.LOW,
        DecomposedWord(stem=("deep", "think"), postfix="ly", consumed=3): Complexity.HIGH,
    }
    for word, expected in cases.items():
        assert complexity_of(word, lexicon) is expected, str(word)


def test_unlisted_stem_is_unscorable_and_reported():
    """Unknown stems are unscorable and produce a diagnostic."""
    lexicon = example_lexicon()
    diagnostics = Diagnostics(log_reports=False)
    word = DecomposedWord(stem=("mystery",), consumed=1)

    assert complexity_of(word, lexicon, diagnostics) is Complexity.UNSCORABLE
    assert [d.kind for d in diagnostics] == [DiagnosticKind.UNSCORABLE_STEM]
    assert diagnostics.items[0].message() == "Could not assess the complexity of mystery"


def test_unknown_affix_counts_as_neutral():
    """Affixes without a weight count as +1 and are reported."""
    lexicon = example_lexicon()
    diagnostics = Diagnostics(log_reports=False)
    word = DecomposedWord(stem=("know",), prefix="re", postfix="ful", consumed=1)

    assert complexity_of(word, lexicon, diagnostics) is Complexity.LOW
    assert diagnostics.of_kind(DiagnosticKind.UNKNOWN_PREFIX)[0].subject == "re"
    assert diagnostics.of_kind(DiagnosticKind.UNKNOWN_POSTFIX)[0].subject == "ful"


def test_diagnostics_are_logged(caplog: pytest.LogCaptureFixture):
    lexicon = example_lexicon()
    word = DecomposedWord(stem=("mystery",), consumed=1)

    with caplog.at_level("WARNING"):
        complexity_of(word, lexicon, Diagnostics())

    assert "Could not assess the complexity of mystery" in caplog.text


def test_partition_drops_unscorable_words():
    """Unscorable matches appear in neither list."""
    lexicon = example_lexicon()
    matches = [
        DecomposedWord(stem=("know",), consumed=1),
        DecomposedWord(stem=("mystery",), consumed=1),
        DecomposedWord(stem=("deep", "think"), consumed=2),
    ]
    low, high = partition_matches(matches, lexicon, Diagnostics(log_reports=False))

    assert [w.stem for w in low] == [("know",)]
    assert [w.stem for w in high] == [("deep", "think")]


def test_complexity_score():
    assert complexity_score(1, 3) == pytest.approx(0.75)
    assert complexity_score(2, 0) == 0.0
    assert math.isnan(complexity_score(0, 0))


def test_sequence_in_both_sets_scores_low(caplog: pytest.LogCaptureFixture):
    """Sequences listed as both low and high warn and score low."""
    with caplog.at_level("WARNING"):
        lexicon = build_lexicon(
            low_complexity=[["know"]],
            high_complexity=[["know"]],
            superlative_postfix="est",
        )

    word = DecomposedWord(stem=("know",), consumed=1)
    assert complexity_of(word, lexicon) is Complexity.LOW
    assert "both low and high" in caplog.text


def test_invalid_affix_weight_is_rejected():
    """Weights outside -1 and +1 and an empty superlative are rejected."""
    with pytest.raises(LexiconError):
        build_lexicon(prefixes={"un": 2}, superlative_postfix="est")
    with pytest.raises(LexiconError):
        build_lexicon(superlative_postfix="")


def test_builder_additions_after_build_do_not_reach_the_lexicon():
    """build() hands its tries to the lexicon and leaves the builder empty."""
    builder = LexiconBuilder().add_low_complexity(["know"]).add_prefix("un", -1)
    lexicon = builder.build("est")

    builder.add_high_complexity(["deep", "think"]).add_postfix("ly", 1)

    assert len(lexicon.complexity_words) == 1
    assert lexicon.complexity_words.longest_match_length(("deep", "think"), 0) == 0
    assert len(lexicon.postfixes) == 0
    assert len(builder.complexity_words) == 1
    assert builder.low_complexity == set()
