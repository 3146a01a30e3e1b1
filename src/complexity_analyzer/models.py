from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Tuple

from .diagnostics import Diagnostics


class Complexity(IntEnum):
    """Signed classification of a matched complexity word."""

    LOW = -1
    UNSCORABLE = 0
    HIGH = 1


@dataclass(slots=True, frozen=True)
class DecomposedWord:
    """A complexity word found in a sentence, split into its parts."""

    stem: Tuple[str, ...]
    consumed: int
    prefix: str | None = None
    postfix: str | None = None
    negation: Tuple[str, ...] | None = None
    prefix_fused: bool = False
    postfix_fused: bool = False

    def __post_init__(self) -> None:
        if not self.stem:
            raise ValueError("DecomposedWord requires at least one stem token.")
        if self.consumed < 1:
            raise ValueError("DecomposedWord must consume at least one token.")
        if self.negation is not None and not self.negation:
            raise ValueError("Trailing negation must be None or non-empty.")

    def with_negation(self, negation: Tuple[str, ...]) -> "DecomposedWord":
        """Return a copy with a trailing negation attached and counted as consumed."""
        return replace(
            self, negation=tuple(negation), consumed=self.consumed + len(negation)
        )

    def surface(self) -> str:
        """Rebuild the anchor token from the fused parts (disconnected affixes excluded)."""
        parts = [self.prefix if self.prefix_fused and self.prefix else ""]
        parts.append(self.stem[0])
        if self.postfix_fused and self.postfix and len(self.stem) == 1:
            parts.append(self.postfix)
        return "".join(parts)

    def __str__(self) -> str:
        prefix = f"{self.prefix}-" if self.prefix else ""
        postfix = f"-{self.postfix}" if self.postfix else ""
        negation = f" -> {' '.join(self.negation)}" if self.negation else ""
        return f"[{prefix}{' '.join(self.stem)}{postfix}{negation}]"


@dataclass(slots=True)
class SentenceResult:
    """Classified complexity words for a single sentence."""

    original: str
    tokens: Tuple[str, ...]
    low: list[DecomposedWord] = field(default_factory=list)
    high: list[DecomposedWord] = field(default_factory=list)
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    @property
    def low_count(self) -> int:
        return len(self.low)

    @property
    def high_count(self) -> int:
        return len(self.high)
