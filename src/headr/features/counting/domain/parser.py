"""
Summary: Parse signed, suffix-aware count literals such as ``-5``, ``3k`` or ``2MB``.
Why: Resolve user-facing counts into plain integers before any source is touched.
"""

from __future__ import annotations

import re
from typing import ClassVar, Final, final

from .errors import CountParseError
from .models import CountPolicy, CountSpec, CountUnit

# Ordered unit letters; the position selects the power of the scale.
UNIT_LETTERS: Final[str] = "KMGTPEZY"

# Classic block size selected by a trailing ``b``.
BLOCK_SIZE: Final[int] = 512

# Scale selected by a lowercase ``kB`` suffix.
METRIC_KILO: Final[int] = 1000

_NUMBER: Final[re.Pattern[str]] = re.compile(r"(?P<sign>[+-]?)(?P<digits>[0-9]+)")


def _letter_index(letter: str) -> int:
    """Return the position of ``letter`` in ``UNIT_LETTERS`` or -1.

    Letters are uppercase; ``k`` is the only lowercase spelling accepted.
    """

    if len(letter) != 1:
        return -1
    if letter == "k":
        return 0
    return UNIT_LETTERS.find(letter)


def _split_suffix(raw: str) -> tuple[str, int]:
    """Strip the unit suffix from ``raw`` and return ``(body, scale)``.

    Raises:
        CountParseError: If a ``B`` suffix is not preceded by a unit letter.
    """

    last = raw[-1]

    if last == "b":
        return raw[:-1], BLOCK_SIZE

    if last == "B":
        letter = raw[-2:-1]
        if letter == "k":
            return raw[:-2], METRIC_KILO
        index = _letter_index(letter)
        if index < 0:
            raise CountParseError(raw)
        return raw[:-2], 10 ** (index + 1)

    index = _letter_index(last)
    if index >= 0:
        return raw[:-1], 1 << (10 * (index + 1))

    return raw, 1


def parse_count(raw: str, *, policy: CountPolicy = CountPolicy.PERMISSIVE) -> int:
    """Resolve a count literal into a signed integer.

    Args:
        raw: Literal as typed by the user, e.g. ``"10"``, ``"-3k"`` or ``"100b"``.
        policy: ``STRICT`` additionally rejects zero and negative results.

    Returns:
        int: ``sign * body * scale``.

    Raises:
        CountParseError: If ``raw`` does not follow the grammar or violates
            ``policy``. The error carries ``raw`` verbatim.
    """
    if not raw:
        raise CountParseError(raw)

    body, scale = _split_suffix(raw)
    match = _NUMBER.fullmatch(body)
    if match is None:
        raise CountParseError(raw)

    value = int(match.group("digits")) * scale
    if match.group("sign") == "-":
        value = -value

    if policy is CountPolicy.STRICT and value <= 0:
        raise CountParseError(raw)

    return value


@final
class CountSpecParser:
    """Build ``CountSpec`` values under a single, uniform count policy."""

    DEFAULT_LINE_SPEC: ClassVar[str] = "10"

    _policy: CountPolicy

    def __init__(self, policy: CountPolicy = CountPolicy.PERMISSIVE) -> None:
        self._policy = policy

    @property
    def policy(self) -> CountPolicy:
        """Policy applied to every literal parsed by this instance."""

        return self._policy

    def parse(self, raw: str, unit: CountUnit) -> CountSpec:
        """Parse ``raw`` as a count of ``unit``.

        Raises:
            CountParseError: Tagged with ``unit`` so callers can render
                ``illegal line count -- ...`` style messages.
        """
        try:
            magnitude = parse_count(raw, policy=self._policy)
        except CountParseError as exc:
            raise CountParseError(exc.literal, unit=unit) from None
        return CountSpec(unit=unit, magnitude=magnitude)

    def lines(self, raw: str) -> CountSpec:
        """Parse a line count."""

        return self.parse(raw, CountUnit.LINES)

    def bytes(self, raw: str) -> CountSpec:
        """Parse a byte count."""

        return self.parse(raw, CountUnit.BYTES)

    def resolve(self, line_spec: str | None, byte_spec: str | None) -> CountSpec:
        """Pick the active count for a run.

        The line literal is always validated; a byte literal, when present,
        takes precedence.
        """
        lines = self.lines(line_spec if line_spec is not None else self.DEFAULT_LINE_SPEC)
        if byte_spec is None:
            return lines
        return self.bytes(byte_spec)


__all__ = ["BLOCK_SIZE", "CountSpecParser", "UNIT_LETTERS", "parse_count"]
