from complexity_analyzer.textutils import TextNormalizer
from complexity_analyzer.tokenization import split_sentences, tokenize_sentence


def test_split_sentences_keeps_terminators():
    """Sentences end after each terminator, which is kept."""
    text = "I know. Do you think? Deep blue; the end!"

    assert split_sentences(text) == [
        "I know.",
        "Do you think?",
        "Deep blue;",
        "the end!",
    ]


def test_split_sentences_drops_blank_pieces():
    assert split_sentences("  ") == []
    assert split_sentences("no terminator") == ["no terminator"]


def test_tokenize_sentence_cleans_and_splits():
    """Tokens are cleaned and split on whitespace."""
    normalizer = TextNormalizer(lowercase=True)
    tokens = tokenize_sentence("Deep   (think), NOT!", normalizer)

    assert tokens == ("deep", "think", "not")
