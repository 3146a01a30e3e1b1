from complexity_analyzer.trie import CharacterTrie, Direction, SequenceTrie


def test_sequence_trie_returns_longest_accepted_prefix():
    """Longest accepted token run is returned, not the first."""
    trie = SequenceTrie([["deep"], ["deep", "think"], ["deep", "think", "tank"]])
    tokens = ("deep", "think", "about", "it")

    assert trie.longest_match_length(tokens, 0) == 2
    assert trie.longest_match_length(tokens, 1) == 0
    assert trie.longest_match_length(("deep",), 0) == 1


def test_sequence_trie_intermediate_nodes_are_not_accepted():
    """Paths through non-accepting nodes do not count as matches."""
    trie = SequenceTrie([["deep", "think"]])

    assert trie.longest_match_length(("deep", "blue"), 0) == 0
    assert not trie.is_single_accepted("deep")


def test_sequence_trie_head_override_leaves_tokens_untouched():
    """A head override stands in for the first token without changing the input."""
    trie = SequenceTrie([["know", "how"]])
    tokens = ("unknow", "how")

    assert trie.longest_match_length(tokens, 0, head="know") == 2
    assert tokens == ("unknow", "how")
    assert trie.longest_match_length(tokens, 0) == 0


def test_sequence_trie_out_of_range_start_is_no_match():
    trie = SequenceTrie([["know"]])

    assert trie.longest_match_length(("know",), 1) == 0
    assert trie.longest_match_length(("know",), -1) == 0
    assert trie.longest_match_length((), 0) == 0


def test_sequence_trie_ignores_empty_and_duplicate_entries():
    """Empty and repeated sequences are not counted."""
    trie = SequenceTrie()

    assert trie.insert(["know"])
    assert not trie.insert(["know"])
    assert not trie.insert([])
    assert len(trie) == 1


def test_character_trie_forward_lengths_ascend():
    """Forward tries report every accepted prefix length in ascending order."""
    trie = CharacterTrie(Direction.FORWARD, ["un", "under", "u"])

    assert trie.all_accepted_lengths("understand") == [1, 2, 5]
    assert trie.longest_accepted_length("understand") == 5
    assert trie.all_accepted_lengths("xunder") == []
    assert trie.all_accepted_lengths("xunder", start=1) == [1, 2, 5]


def test_character_trie_backward_reads_from_the_end():
    """Backward tries read postfixes from the end of the text."""
    trie = CharacterTrie(Direction.BACKWARD, ["ly", "ally"])

    assert trie.all_accepted_lengths("logically") == [2, 4]
    assert trie.all_accepted_lengths("badly") == [2]
    assert trie.all_accepted_lengths("badly", start=2) == []
    assert trie.longest_accepted_length("know") == 0


def test_render_marks_accepting_nodes():
    trie = SequenceTrie([["deep", "think"]])

    assert trie.render() == "deep\n  (think)"
    assert CharacterTrie(entries=["ab"]).render(indent="-") == "a\n-(b)"
