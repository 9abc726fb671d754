"""Application service that extracts prefixes from a list of sources."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from logging import Logger, getLogger
from typing import final

from headr.features.counting import CountSpec, CountUnit
from headr.features.extraction import (
    DEFAULT_CHUNK_SIZE,
    STDIN_NAME,
    HeaderPolicy,
    HeadRunner,
    InputSource,
    OutputSink,
    PrefixExtractor,
    RunReport,
)
from headr.features.extraction.adapters import StreamSink, open_source
from headr.features.extraction.usecases.run_head import OutcomeReporter

SourceFactory = Callable[[str], InputSource]


@dataclass(slots=True)
class HeadRequest:
    """Validated configuration of a single run."""

    sources: list[str] = field(default_factory=lambda: [STDIN_NAME])
    spec: CountSpec = field(default_factory=lambda: CountSpec(unit=CountUnit.LINES, magnitude=10))
    header_policy: HeaderPolicy = HeaderPolicy.MULTIPLE_ONLY
    chunk_size: int = DEFAULT_CHUNK_SIZE


@final
class HeadService:
    """Application façade wiring source and sink adapters into the runner."""

    _sink: OutputSink
    _source_factory: SourceFactory
    _logger: Logger

    def __init__(
        self,
        *,
        sink: OutputSink | None = None,
        source_factory: SourceFactory | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._sink = sink or StreamSink()
        self._source_factory = source_factory or open_source
        self._logger = logger or getLogger(__name__)

    def run(self, request: HeadRequest, *, reporter: OutcomeReporter | None = None) -> RunReport:
        """Extract the requested prefix from every source in order.

        Raises:
            SinkWriteError: If the output sink breaks mid-run.
        """
        identifiers = request.sources or [STDIN_NAME]
        sources = [self._source_factory(identifier) for identifier in identifiers]

        extractor = PrefixExtractor(self._sink, chunk_size=request.chunk_size)
        runner = HeadRunner(
            extractor=extractor,
            header_policy=request.header_policy,
            reporter=reporter,
            logger=self._logger,
        )
        return runner.run(sources, request.spec)
