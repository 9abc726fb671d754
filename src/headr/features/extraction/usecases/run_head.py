"""
Summary: Drive prefix extraction over every requested source in order.
Why: Isolate per-source failures while keeping header layout and sink ordering consistent.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from logging import Logger, getLogger

from headr.features.counting import CountSpec

from ..domain.errors import SourceOpenError, describe_os_error
from ..domain.models import HeaderPolicy, RunOutcome, RunReport, SourceSize
from .ports import InputSource
from .prefix_extractor import PrefixExtractor

OutcomeReporter = Callable[[RunOutcome], None]


class HeadRunner:
    """Run the measure-then-extract protocol for each source through injected ports."""

    _extractor: PrefixExtractor
    _header_policy: HeaderPolicy
    _reporter: OutcomeReporter | None
    _logger: Logger

    def __init__(
        self,
        *,
        extractor: PrefixExtractor,
        header_policy: HeaderPolicy = HeaderPolicy.MULTIPLE_ONLY,
        reporter: OutcomeReporter | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._extractor = extractor
        self._header_policy = header_policy
        self._reporter = reporter
        self._logger = logger or getLogger(__name__)

    def run(self, sources: Sequence[InputSource], spec: CountSpec) -> RunReport:
        """Extract ``spec`` from every source and return per-source outcomes.

        Raises:
            SinkWriteError: If the sink breaks; no further source is processed.
        """
        report = RunReport()
        total = len(sources)
        # Decided from the requested list so failed sources never change the layout.
        show_headers = self._header_policy.wants_header(total)
        header_written = False

        for sequence, source in enumerate(sources, start=1):
            self._logger.debug(
                "Extracting %s",
                source.name,
                extra={
                    "extraction_event": "extraction.source.start",
                    "source_name": source.name,
                    "sequence": sequence,
                    "total_sources": total,
                },
            )
            try:
                size = self._measure(source, spec)
                with source.open() as stream:
                    if show_headers:
                        self._extractor.write_header(source.name, first=not header_written)
                        header_written = True
                    emitted = self._extractor.extract(stream, spec, size)
            except SourceOpenError as exc:
                outcome = RunOutcome.failed(source.name, exc.reason)
            except OSError as exc:
                outcome = RunOutcome.failed(source.name, describe_os_error(exc))
            else:
                outcome = RunOutcome.emitted(source.name, emitted)

            self._extractor.flush()
            self._record(report, outcome, sequence=sequence, total=total)

        self._logger.debug(
            "Extraction finished",
            extra={
                "extraction_event": "extraction.run.complete",
                "processed": len(report.outcomes) - len(report.failures),
                "failed": len(report.failures),
                "bytes_emitted": report.bytes_emitted,
            },
        )
        return report

    def _measure(self, source: InputSource, spec: CountSpec) -> SourceSize | None:
        if not spec.is_negative:
            return None
        return source.measure(self._extractor.chunk_size)

    def _record(self, report: RunReport, outcome: RunOutcome, *, sequence: int, total: int) -> None:
        report.outcomes.append(outcome)
        if outcome.success:
            self._logger.debug(
                "Extracted %s",
                outcome.source,
                extra={
                    "extraction_event": "extraction.source.complete",
                    "source_name": outcome.source,
                    "sequence": sequence,
                    "total_sources": total,
                    "bytes_emitted": outcome.bytes_emitted,
                },
            )
        else:
            self._logger.info(
                "%s: %s",
                outcome.source,
                outcome.error,
                extra={
                    "extraction_event": "extraction.source.error",
                    "source_name": outcome.source,
                    "sequence": sequence,
                    "total_sources": total,
                    "error_message": outcome.error,
                },
            )
        if self._reporter is not None:
            self._reporter(outcome)


__all__ = ["HeadRunner", "OutcomeReporter"]
