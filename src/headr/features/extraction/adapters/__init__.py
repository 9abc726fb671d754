"""Adapters wiring real streams into the extraction ports."""

from .sink import StreamSink
from .sources import FileSource, StdinSource, open_source

__all__ = ["FileSource", "StdinSource", "StreamSink", "open_source"]
