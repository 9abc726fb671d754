"""Ports for the extraction feature."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import BinaryIO, Protocol

from ..domain.models import SourceSize


class InputSource(Protocol):
    """A readable source of bytes with an optional size measurement."""

    @property
    def name(self) -> str:
        """Identifier exactly as requested, used in headers and messages."""

        ...

    def open(self) -> AbstractContextManager[BinaryIO]:
        """Open the source for sequential binary reading.

        Raises:
            SourceOpenError: If the source cannot be opened.
        """

        ...

    def measure(self, chunk_size: int) -> SourceSize:
        """Return the byte size and line count of the source.

        Raises:
            SourceOpenError: If the source cannot be measured.
        """

        ...


class OutputSink(Protocol):
    """Destination shared by every source of a run."""

    def write(self, data: bytes) -> None:
        """Append ``data``; raises ``SinkWriteError`` when the sink is broken."""

        ...

    def flush(self) -> None:
        """Push buffered data to the destination."""

        ...
