from __future__ import annotations

from functools import partial
from itertools import takewhile
from typing import Callable, Iterable, Iterator, Sequence

from .diagnostics import Diagnostics
from .lexicon import Lexicon
from .models import Complexity, DecomposedWord
from .scoring import complexity_of

Attempt = Callable[[], "DecomposedWord | None"]


def first_match(attempts: Iterable[Attempt]) -> DecomposedWord | None:
    """Run attempts in order and return the first non-None result."""
    for attempt in attempts:
        match = attempt()
        if match is not None:
            return match
    return None


def _leaving_room(lengths: Iterable[int], limit: int) -> Iterator[int]:
    # Lengths ascend, so the first one that leaves no stem ends the search.
    return takewhile(lambda length: length < limit, lengths)


class DecompositionEngine:
    """
    Finds the complexity word anchored at a token position.

    Words are tried as direct lexicon matches first, then with a fused postfix
    (optionally layered with a fused prefix), then with a fused prefix alone.
    Among competing affix lengths the shortest successful one wins. Stripped
    forms are passed down as explicit head overrides, so the caller's tokens
    are never modified.
    """

    def __init__(self, lexicon: Lexicon) -> None:
        self.lexicon = lexicon
        self._words = lexicon.complexity_words

    def check(self, tokens: Sequence[str], i: int) -> DecomposedWord | None:
        match = self._match_word(tokens, i)
        if match is None:
            return None
        after = i + match.consumed
        negation_length = self.lexicon.negating_verbs.longest_match_length(tokens, after)
        if negation_length > 0:
            match = match.with_negation(tuple(tokens[after : after + negation_length]))
        return match

    def complexity_of(
        self, word: DecomposedWord, diagnostics: Diagnostics | None = None
    ) -> Complexity:
        return complexity_of(word, self.lexicon, diagnostics)

    def _match_word(self, tokens: Sequence[str], i: int) -> DecomposedWord | None:
        length = self._words.longest_match_length(tokens, i)
        if length > 1:
            # Multi-token stems take no affixes.
            return DecomposedWord(stem=tuple(tokens[i : i + length]), consumed=length)
        if length == 1:
            postfix = self._disconnected_postfix(tokens, i + 1)
            return DecomposedWord(
                stem=(tokens[i],),
                prefix=self._disconnected_prefix(tokens, i),
                postfix=postfix,
                consumed=1 if postfix is None else 2,
            )
        return self._match_fused_affixes(tokens, i)

    def _match_fused_affixes(
        self, tokens: Sequence[str], i: int
    ) -> DecomposedWord | None:
        word = tokens[i]
        postfix_lengths = self.lexicon.postfixes.all_accepted_lengths(word)
        if postfix_lengths:
            return first_match(
                partial(self._with_postfix, tokens, i, length)
                for length in _leaving_room(postfix_lengths, len(word))
            )
        prefix_lengths = self.lexicon.prefixes.all_accepted_lengths(word)
        return first_match(
            partial(self._prefixed_match, tokens, i, word[:length], word[length:])
            for length in _leaving_room(prefix_lengths, len(word))
        )

    def _with_postfix(
        self, tokens: Sequence[str], i: int, postfix_length: int
    ) -> DecomposedWord | None:
        word = tokens[i]
        residual = word[:-postfix_length]
        postfix = word[-postfix_length:]
        if self._words.is_single_accepted(residual):
            return DecomposedWord(
                stem=(residual,),
                prefix=self._disconnected_prefix(tokens, i),
                postfix=postfix,
                postfix_fused=True,
                consumed=1,
            )
        prefix_lengths = self.lexicon.prefixes.all_accepted_lengths(residual)
        return first_match(
            partial(self._with_prefix_and_postfix, tokens, i, residual, postfix, length)
            for length in _leaving_room(prefix_lengths, len(residual))
        )

    def _with_prefix_and_postfix(
        self,
        tokens: Sequence[str],
        i: int,
        residual: str,
        postfix: str,
        prefix_length: int,
    ) -> DecomposedWord | None:
        prefix = residual[:prefix_length]
        core = residual[prefix_length:]
        if self._words.is_single_accepted(core):
            return DecomposedWord(
                stem=(core,),
                prefix=prefix,
                postfix=postfix,
                prefix_fused=True,
                postfix_fused=True,
                consumed=1,
            )
        # The postfix may belong to the stem after all: put it back and retry.
        return self._prefixed_match(tokens, i, prefix, core + postfix)

    def _prefixed_match(
        self, tokens: Sequence[str], i: int, prefix: str, head: str
    ) -> DecomposedWord | None:
        length = self._words.longest_match_length(tokens, i, head=head)
        if length == 0:
            return None
        postfix = self._disconnected_postfix(tokens, i + length)
        return DecomposedWord(
            stem=(head, *tokens[i + 1 : i + length]),
            prefix=prefix,
            prefix_fused=True,
            postfix=postfix,
            consumed=length if postfix is None else length + 1,
        )

    def _disconnected_prefix(self, tokens: Sequence[str], i: int) -> str | None:
        if i - 1 >= 0 and self.lexicon.is_prefix(tokens[i - 1]):
            return tokens[i - 1]
        return None

    def _disconnected_postfix(self, tokens: Sequence[str], j: int) -> str | None:
        if j < len(tokens) and self.lexicon.is_postfix(tokens[j]):
            return tokens[j]
        return None
