"""Data structures that describe prefix extraction runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Final

# Identifier that designates the process's standard input.
STDIN_NAME: Final[str] = "-"


class HeaderPolicy(str, Enum):
    """Represent when a ``==> name <==`` banner precedes a source."""

    ALWAYS = "always"
    NEVER = "never"
    MULTIPLE_ONLY = "multiple"

    def wants_header(self, source_count: int) -> bool:
        """Return whether a run over ``source_count`` requested sources prints headers."""

        if self is HeaderPolicy.ALWAYS:
            return True
        if self is HeaderPolicy.NEVER:
            return False
        return source_count > 1


@dataclass(slots=True, frozen=True)
class SourceSize:
    """Measurements needed to resolve a negative count against a source."""

    byte_size: int
    total_lines: int

    @classmethod
    def unsized(cls) -> "SourceSize":
        """Sentinel used for streams that cannot be measured without buffering."""

        return cls(byte_size=0, total_lines=1)


@dataclass(slots=True, frozen=True)
class RunOutcome:
    """Capture the outcome of extracting a single source."""

    source: str
    bytes_emitted: int = 0
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None

    @classmethod
    def emitted(cls, source: str, bytes_emitted: int) -> "RunOutcome":
        return cls(source=source, bytes_emitted=bytes_emitted)

    @classmethod
    def failed(cls, source: str, reason: str) -> "RunOutcome":
        return cls(source=source, error=reason)


@dataclass(slots=True)
class RunReport:
    """Per-source outcomes of a run, in source order."""

    outcomes: list[RunOutcome] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True when every source was extracted."""

        return all(outcome.success for outcome in self.outcomes)

    @property
    def failures(self) -> list[RunOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.success]

    @property
    def bytes_emitted(self) -> int:
        return sum(outcome.bytes_emitted for outcome in self.outcomes)


__all__ = ["HeaderPolicy", "RunOutcome", "RunReport", "STDIN_NAME", "SourceSize"]
