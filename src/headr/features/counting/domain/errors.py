"""Errors raised while resolving count literals."""

from __future__ import annotations

from .models import CountUnit


class CountParseError(ValueError):
    """A count literal did not match the count grammar.

    ``str(error)`` is the offending literal, unmodified.
    """

    literal: str
    unit: CountUnit | None

    def __init__(self, literal: str, unit: CountUnit | None = None) -> None:
        super().__init__(literal)
        self.literal = literal
        self.unit = unit

    @property
    def message(self) -> str:
        """User-facing description, e.g. ``illegal line count -- foo``."""

        if self.unit is None:
            return f"illegal count -- {self.literal}"
        return f"illegal {self.unit.label} count -- {self.literal}"


__all__ = ["CountParseError"]
