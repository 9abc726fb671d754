"""
Summary: Copy the leading lines or bytes of a binary stream into an output sink.
Why: Keep the bounded copy and negative-count resolution independent of how sources are opened.
"""

from __future__ import annotations

import codecs
import os
from typing import BinaryIO, Final, final

from headr.features.counting import CountSpec, CountUnit

from ..domain.models import SourceSize
from .ports import OutputSink

DEFAULT_CHUNK_SIZE: Final[int] = 64 * 1024

HEADER_PREFIX: Final[bytes] = b"==> "
HEADER_SUFFIX: Final[bytes] = b" <==\n"


def _lossy_decoder() -> codecs.IncrementalDecoder:
    """Return a UTF-8 decoder that replaces invalid sequences with U+FFFD."""

    return codecs.getincrementaldecoder("utf-8")(errors="replace")


def measure_stream(stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> SourceSize:
    """Count the bytes and ``\\n``-delimited records left in ``stream``.

    A non-empty final record without a terminator counts as a line.
    """
    byte_size = 0
    newlines = 0
    last = b""
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        byte_size += len(chunk)
        newlines += chunk.count(b"\n")
        last = chunk[-1:]

    unterminated = 1 if last and last != b"\n" else 0
    return SourceSize(byte_size=byte_size, total_lines=newlines + unterminated)


@final
class PrefixExtractor:
    """Emit bounded prefixes of sources onto a shared sink."""

    _sink: OutputSink
    _chunk_size: int

    def __init__(self, sink: OutputSink, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be a positive integer")
        self._sink = sink
        self._chunk_size = chunk_size

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    @staticmethod
    def resolve_limit(spec: CountSpec, size: SourceSize | None = None) -> int:
        """Translate ``spec`` into the number of units to emit.

        Args:
            spec: Active count.
            size: Measurement of the source; required when ``spec`` is negative.

        Returns:
            int: Units to emit, never below zero.

        Raises:
            ValueError: If ``spec`` is negative and no ``size`` was supplied.
        """
        if not spec.is_negative:
            return spec.magnitude
        if size is None:
            raise ValueError("a negative count requires a measured source size")

        total = size.byte_size if spec.unit is CountUnit.BYTES else size.total_lines
        return max(0, total + spec.magnitude)

    def write_header(self, name: str, *, first: bool) -> None:
        """Emit ``==> name <==``, preceded by a blank line unless ``first``."""

        separator = b"" if first else b"\n"
        self._sink.write(separator + HEADER_PREFIX + os.fsencode(name) + HEADER_SUFFIX)

    def extract(
        self,
        stream: BinaryIO,
        spec: CountSpec,
        size: SourceSize | None = None,
    ) -> int:
        """Copy the prefix selected by ``spec`` from ``stream`` into the sink.

        Args:
            stream: Binary stream positioned at the start of the source.
            spec: Active count.
            size: Pre-measured size, consulted only for negative counts.

        Returns:
            int: Number of source bytes emitted.
        """
        limit = self.resolve_limit(spec, size)
        if spec.unit is CountUnit.BYTES:
            return self._copy_bytes(stream, limit)
        return self._copy_lines(stream, limit)

    def flush(self) -> None:
        self._sink.flush()

    def _copy_bytes(self, stream: BinaryIO, limit: int) -> int:
        decoder = _lossy_decoder()
        remaining = limit
        while remaining > 0:
            chunk = stream.read(min(self._chunk_size, remaining))
            if not chunk:
                break
            remaining -= len(chunk)
            self._emit(decoder.decode(chunk))
        self._emit(decoder.decode(b"", final=True))
        return limit - remaining

    def _copy_lines(self, stream: BinaryIO, limit: int) -> int:
        decoder = _lossy_decoder()
        emitted = 0
        lines = 0
        while lines < limit:
            # Long lines arrive in several pieces; only a terminator ends a line.
            piece = stream.readline(self._chunk_size)
            if not piece:
                break
            emitted += len(piece)
            self._emit(decoder.decode(piece))
            if piece.endswith(b"\n"):
                lines += 1
        self._emit(decoder.decode(b"", final=True))
        return emitted

    def _emit(self, text: str) -> None:
        if text:
            self._sink.write(text.encode("utf-8"))


__all__ = ["DEFAULT_CHUNK_SIZE", "PrefixExtractor", "measure_stream"]
