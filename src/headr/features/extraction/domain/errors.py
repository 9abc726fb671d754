"""Errors raised while extracting prefixes."""

from __future__ import annotations


class ExtractionError(Exception):
    """Base class for extraction failures."""


class SourceOpenError(ExtractionError):
    """A source could not be opened or measured.

    Recoverable: the run records the failure and moves to the next source.
    """

    source: str
    reason: str

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason


class SinkWriteError(ExtractionError):
    """The output sink rejected a write; the whole run is aborted."""


def describe_os_error(error: OSError) -> str:
    """Return the OS-level reason for ``error`` without the filename."""

    return error.strerror or str(error) or error.__class__.__name__


__all__ = ["ExtractionError", "SinkWriteError", "SourceOpenError", "describe_os_error"]
