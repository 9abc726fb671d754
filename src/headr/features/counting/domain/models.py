"""
Summary: Value objects describing resolved line and byte counts.
Why: Give the parser and the extractor one immutable vocabulary for counts.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CountUnit(str, Enum):
    """Unit a count is expressed in."""

    LINES = "lines"
    BYTES = "bytes"

    @property
    def label(self) -> str:
        """Singular noun used in user-facing messages."""

        return "line" if self is CountUnit.LINES else "byte"


class CountPolicy(str, Enum):
    """Which signed values a count literal may resolve to."""

    PERMISSIVE = "permissive"
    STRICT = "strict"

    @staticmethod
    def from_user_input(value: str) -> "CountPolicy":
        """Translate a configuration value into the matching policy."""

        normalized = value.strip().lower()
        for policy in CountPolicy:
            if policy.value == normalized:
                return policy
        valid = ", ".join(p.value for p in CountPolicy)
        msg = f"Unsupported count policy '{value}'. Valid options: {valid}"
        raise ValueError(msg)


@dataclass(slots=True, frozen=True)
class CountSpec:
    """A fully resolved count in its native unit.

    A negative ``magnitude`` selects everything except the trailing
    ``abs(magnitude)`` units of a source.
    """

    unit: CountUnit
    magnitude: int

    @property
    def is_negative(self) -> bool:
        """Return True when the count is relative to the end of the source."""

        return self.magnitude < 0


__all__ = ["CountPolicy", "CountSpec", "CountUnit"]
