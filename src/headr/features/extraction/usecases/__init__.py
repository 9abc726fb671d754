"""Use cases for prefix extraction."""

from .prefix_extractor import DEFAULT_CHUNK_SIZE, PrefixExtractor, measure_stream
from .run_head import HeadRunner, OutcomeReporter

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "HeadRunner",
    "OutcomeReporter",
    "PrefixExtractor",
    "measure_stream",
]
