"""Standard input and filesystem adapters for the ``InputSource`` port."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, final

from ..domain.errors import SourceOpenError, describe_os_error
from ..domain.models import STDIN_NAME, SourceSize
from ..usecases.ports import InputSource
from ..usecases.prefix_extractor import DEFAULT_CHUNK_SIZE, measure_stream


@final
class StdinSource:
    """Standard input: sequential reads only, never measured or closed."""

    name: str
    _stream: BinaryIO | None

    def __init__(self, stream: BinaryIO | None = None, *, name: str = STDIN_NAME) -> None:
        self.name = name
        self._stream = stream

    @contextmanager
    def open(self) -> Iterator[BinaryIO]:
        yield self._stream if self._stream is not None else sys.stdin.buffer

    def measure(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> SourceSize:
        """Return the unsized sentinel; stdin cannot be re-read after counting."""

        _ = chunk_size
        return SourceSize.unsized()


@final
class FileSource:
    """A named file that supports size queries and a counting pass."""

    name: str
    path: Path

    def __init__(self, path: Path | str, *, name: str | None = None) -> None:
        self.path = Path(path)
        self.name = name if name is not None else str(path)

    @contextmanager
    def open(self) -> Iterator[BinaryIO]:
        try:
            handle = open(self.path, "rb")
        except OSError as exc:
            raise SourceOpenError(self.name, describe_os_error(exc)) from exc
        with handle:
            yield handle

    def measure(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> SourceSize:
        """Query the byte size from metadata and count lines in a dedicated pass."""

        try:
            byte_size = os.stat(self.path).st_size
            with open(self.path, "rb") as handle:
                counted = measure_stream(handle, chunk_size)
        except OSError as exc:
            raise SourceOpenError(self.name, describe_os_error(exc)) from exc
        return SourceSize(byte_size=byte_size, total_lines=counted.total_lines)


def open_source(identifier: str) -> InputSource:
    """Map a requested identifier onto a source adapter."""

    if identifier == STDIN_NAME:
        return StdinSource()
    return FileSource(identifier, name=identifier)


__all__ = ["FileSource", "StdinSource", "open_source"]
