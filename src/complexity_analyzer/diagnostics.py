from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List

logger = logging.getLogger(__name__)


class DiagnosticKind(str, Enum):
    UNSCORABLE_STEM = "unscorable_stem"
    UNKNOWN_PREFIX = "unknown_prefix"
    UNKNOWN_POSTFIX = "unknown_postfix"
    UNKNOWN_CHARACTER = "unknown_character"


_MESSAGES = {
    DiagnosticKind.UNSCORABLE_STEM: "Could not assess the complexity of %s",
    DiagnosticKind.UNKNOWN_PREFIX: "Could not assess the prefix %s for complexity",
    DiagnosticKind.UNKNOWN_POSTFIX: "Could not assess the postfix %s for complexity",
    DiagnosticKind.UNKNOWN_CHARACTER: "Unknown character >%s<",
}


@dataclass(slots=True, frozen=True)
class Diagnostic:
    """A non-fatal condition raised while matching or scoring."""

    kind: DiagnosticKind
    subject: str

    def message(self) -> str:
        return _MESSAGES[self.kind] % self.subject


@dataclass(slots=True)
class Diagnostics:
    """
    Collects diagnostics so callers can inspect, count or silence them.

    Every reported diagnostic is also sent to the module logger unless
    log_reports is False.
    """

    log_reports: bool = True
    items: List[Diagnostic] = field(default_factory=list)

    def report(self, kind: DiagnosticKind, subject: str) -> Diagnostic:
        diagnostic = Diagnostic(kind=kind, subject=subject)
        self.items.append(diagnostic)
        if self.log_reports:
            logger.warning(_MESSAGES[kind], subject)
        return diagnostic

    def extend(self, other: "Diagnostics") -> None:
        self.items.extend(other.items)

    def of_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
        return [item for item in self.items if item.kind is kind]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
