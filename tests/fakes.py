"""In-memory sources and sinks shared by extraction tests."""

from __future__ import annotations

import io
from collections.abc import Iterator
from contextlib import contextmanager
from typing import BinaryIO

from headr.features.extraction import SinkWriteError, SourceOpenError, SourceSize, measure_stream


class MemorySink:
    """Sink collecting everything written to it."""

    def __init__(self) -> None:
        self.buffer = io.BytesIO()
        self.flushes = 0

    def write(self, data: bytes) -> None:
        _ = self.buffer.write(data)

    def flush(self) -> None:
        self.flushes += 1

    @property
    def data(self) -> bytes:
        return self.buffer.getvalue()


class BrokenSink:
    """Sink that rejects every write."""

    def write(self, data: bytes) -> None:
        raise SinkWriteError("Broken pipe")

    def flush(self) -> None:
        pass


class MemorySource:
    """In-memory source; ``size`` overrides the measurement when given."""

    def __init__(self, name: str, content: bytes, *, size: SourceSize | None = None) -> None:
        self.name = name
        self.content = content
        self.size = size
        self.measure_calls = 0

    @contextmanager
    def open(self) -> Iterator[BinaryIO]:
        yield io.BytesIO(self.content)

    def measure(self, chunk_size: int) -> SourceSize:
        self.measure_calls += 1
        if self.size is not None:
            return self.size
        return measure_stream(io.BytesIO(self.content), chunk_size)


class MissingSource:
    """Source whose open and measure always fail."""

    def __init__(self, name: str, reason: str = "No such file or directory") -> None:
        self.name = name
        self.reason = reason

    @contextmanager
    def open(self) -> Iterator[BinaryIO]:
        raise SourceOpenError(self.name, self.reason)
        yield io.BytesIO()  # pragma: no cover

    def measure(self, chunk_size: int) -> SourceSize:
        raise SourceOpenError(self.name, self.reason)


class FailingReadStream(io.BytesIO):
    """Stream that fails on the first read."""

    def read(self, size: int | None = -1) -> bytes:
        raise OSError(5, "Input/output error")

    def readline(self, size: int | None = -1) -> bytes:
        raise OSError(5, "Input/output error")


class UnreadableSource:
    """Source that opens but cannot be read."""

    def __init__(self, name: str) -> None:
        self.name = name

    @contextmanager
    def open(self) -> Iterator[BinaryIO]:
        yield FailingReadStream()

    def measure(self, chunk_size: int) -> SourceSize:
        return SourceSize.unsized()
