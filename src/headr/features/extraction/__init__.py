"""Public surface for the extraction feature."""

from .domain.errors import ExtractionError, SinkWriteError, SourceOpenError
from .domain.models import STDIN_NAME, HeaderPolicy, RunOutcome, RunReport, SourceSize
from .usecases.ports import InputSource, OutputSink
from .usecases.prefix_extractor import DEFAULT_CHUNK_SIZE, PrefixExtractor, measure_stream
from .usecases.run_head import HeadRunner

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "ExtractionError",
    "HeadRunner",
    "HeaderPolicy",
    "InputSource",
    "OutputSink",
    "PrefixExtractor",
    "RunOutcome",
    "RunReport",
    "STDIN_NAME",
    "SinkWriteError",
    "SourceOpenError",
    "SourceSize",
    "measure_stream",
]
