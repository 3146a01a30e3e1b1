from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Sequence


class Direction(str, Enum):
    """Reading direction used when inserting into or walking a CharacterTrie."""

    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass(slots=True)
class _TrieNode:
    children: Dict[str, "_TrieNode"] = field(default_factory=dict)
    accepting: bool = False


class SequenceTrie:
    """
    Trie over whole tokens.

    Each inserted sequence marks an accepting path; lookups walk the input by
    exact token equality.
    """

    def __init__(self, sequences: Iterable[Sequence[str]] = ()) -> None:
        self._root = _TrieNode()
        self._size = 0
        for sequence in sequences:
            self.insert(sequence)

    def __len__(self) -> int:
        return self._size

    def insert(self, sequence: Sequence[str]) -> bool:
        """Mark sequence as accepted. Returns False for empty or duplicate entries."""
        if not sequence:
            return False
        node = self._root
        for token in sequence:
            node = node.children.setdefault(token, _TrieNode())
        if node.accepting:
            return False
        node.accepting = True
        self._size += 1
        return True

    def is_single_accepted(self, token: str) -> bool:
        child = self._root.children.get(token)
        return child is not None and child.accepting

    def longest_match_length(
        self, tokens: Sequence[str], start: int, head: str | None = None
    ) -> int:
        """
        Return the longest accepted length of tokens[start:], or 0.

        When head is given it is read in place of tokens[start], which lets the
        caller probe a stripped form of a token without touching the sequence.
        """
        if start < 0 or start >= len(tokens):
            return 0
        node = self._root
        longest = 0
        for offset in range(len(tokens) - start):
            token = head if offset == 0 and head is not None else tokens[start + offset]
            node = node.children.get(token)
            if node is None:
                break
            if node.accepting:
                longest = offset + 1
        return longest

    def render(self, indent: str = "  ") -> str:
        """Render the trie as an indented outline; accepting nodes are parenthesised."""
        return "\n".join(_render_lines(self._root, indent, 0))


class CharacterTrie:
    """Trie over characters read in a direction fixed at construction."""

    def __init__(
        self, direction: Direction = Direction.FORWARD, entries: Iterable[str] = ()
    ) -> None:
        self.direction = Direction(direction)
        self._root = _TrieNode()
        self._size = 0
        for entry in entries:
            self.insert(entry)

    def __len__(self) -> int:
        return self._size

    def insert(self, text: str) -> bool:
        if not text:
            return False
        node = self._root
        chars = text if self.direction is Direction.FORWARD else reversed(text)
        for char in chars:
            node = node.children.setdefault(char, _TrieNode())
        if node.accepting:
            return False
        node.accepting = True
        self._size += 1
        return True

    def longest_accepted_length(self, text: str, start: int | None = None) -> int:
        lengths = self.all_accepted_lengths(text, start)
        return lengths[-1] if lengths else 0

    def all_accepted_lengths(self, text: str, start: int | None = None) -> List[int]:
        """
        Return every length, ascending, at which the walk from start reaches an
        accepting node.

        start defaults to the first character for forward tries and the last
        character for backward ones.
        """
        node = self._root
        lengths: List[int] = []
        for length, char in enumerate(self._walk(text, start), start=1):
            node = node.children.get(char)
            if node is None:
                break
            if node.accepting:
                lengths.append(length)
        return lengths

    def render(self, indent: str = "  ") -> str:
        return "\n".join(_render_lines(self._root, indent, 0))

    def _walk(self, text: str, start: int | None) -> Iterator[str]:
        if self.direction is Direction.FORWARD:
            begin = 0 if start is None else start
            if begin < 0:
                return iter(())
            return iter(text[begin:])
        end = len(text) - 1 if start is None else start
        if end >= len(text):
            return iter(())
        return (text[idx] for idx in range(end, -1, -1))


def _render_lines(node: _TrieNode, indent: str, depth: int) -> Iterator[str]:
    for label, child in node.children.items():
        shown = f"({label})" if child.accepting else label
        yield f"{indent * depth}{shown}"
        yield from _render_lines(child, indent, depth + 1)
