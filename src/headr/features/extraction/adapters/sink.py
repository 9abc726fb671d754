"""Binary stream adapter for the ``OutputSink`` port."""

from __future__ import annotations

import sys
from typing import BinaryIO, final

from ..domain.errors import SinkWriteError, describe_os_error


@final
class StreamSink:
    """Write extracted bytes to a binary stream, standard output by default."""

    _stream: BinaryIO | None

    def __init__(self, stream: BinaryIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> BinaryIO:
        return self._stream if self._stream is not None else sys.stdout.buffer

    def write(self, data: bytes) -> None:
        try:
            _ = self.stream.write(data)
        except OSError as exc:
            raise SinkWriteError(describe_os_error(exc)) from exc

    def flush(self) -> None:
        try:
            self.stream.flush()
        except OSError as exc:
            raise SinkWriteError(describe_os_error(exc)) from exc


__all__ = ["StreamSink"]
