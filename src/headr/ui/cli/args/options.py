"""Command line argument options."""

from dataclasses import dataclass
from typing import final

from headr.features.counting import CountSpec
from headr.features.extraction import HeaderPolicy


@final
@dataclass(slots=True)
class HeadArgs:
    """Validated command line arguments for a run."""

    sources: list[str]
    spec: CountSpec
    header_policy: HeaderPolicy
    debug: bool


__all__ = ["HeadArgs"]
