"""Tests for the stdin, file, and stream sink adapters."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from headr.features.extraction import SinkWriteError, SourceOpenError, SourceSize
from headr.features.extraction.adapters import FileSource, StdinSource, StreamSink, open_source


def test_file_source_measures_bytes_and_lines(tmp_path: Path) -> None:
    path = tmp_path / "sample.txt"
    _ = path.write_bytes(b"one\ntwo\nthree")

    source = FileSource(path)

    assert source.measure(4) == SourceSize(byte_size=13, total_lines=3)


def test_file_source_reads_from_the_start_after_measuring(tmp_path: Path) -> None:
    path = tmp_path / "sample.txt"
    _ = path.write_bytes(b"one\ntwo\n")
    source = FileSource(path)

    _ = source.measure(1024)
    with source.open() as stream:
        assert stream.read() == b"one\ntwo\n"


def test_file_source_keeps_identifier_verbatim(tmp_path: Path) -> None:
    identifier = f"{tmp_path}/./sample.txt"

    source = open_source(identifier)

    assert isinstance(source, FileSource)
    assert source.name == identifier


def test_missing_file_raises_source_open_error(tmp_path: Path) -> None:
    source = FileSource(tmp_path / "missing.txt", name="missing.txt")

    with pytest.raises(SourceOpenError) as open_error:
        with source.open():
            pass
    with pytest.raises(SourceOpenError) as measure_error:
        _ = source.measure(1024)

    assert open_error.value.reason == "No such file or directory"
    assert str(open_error.value) == "missing.txt: No such file or directory"
    assert measure_error.value.source == "missing.txt"


def test_directory_cannot_be_opened(tmp_path: Path) -> None:
    source = FileSource(tmp_path)

    with pytest.raises(SourceOpenError) as exc_info:
        with source.open():
            pass

    assert exc_info.value.reason == "Is a directory"


def test_stdin_source_is_unsized_and_not_closed() -> None:
    stream = io.BytesIO(b"piped\n")
    source = StdinSource(stream)

    assert source.name == "-"
    assert source.measure(1024) == SourceSize(byte_size=0, total_lines=1)
    with source.open() as opened:
        assert opened is stream
    assert not stream.closed


def test_open_source_maps_dash_to_stdin() -> None:
    assert isinstance(open_source("-"), StdinSource)


def test_stdin_source_defaults_to_process_stdin(mocker: MockerFixture) -> None:
    fake_stdin = mocker.Mock()
    fake_stdin.buffer = io.BytesIO(b"x")
    _ = mocker.patch("headr.features.extraction.adapters.sources.sys.stdin", fake_stdin)

    with StdinSource().open() as opened:
        assert opened is fake_stdin.buffer


def test_stream_sink_writes_and_flushes() -> None:
    buffer = io.BytesIO()
    sink = StreamSink(buffer)

    sink.write(b"abc")
    sink.flush()

    assert buffer.getvalue() == b"abc"


def test_stream_sink_translates_os_errors(mocker: MockerFixture) -> None:
    stream = mocker.Mock()
    stream.write.side_effect = BrokenPipeError(32, "Broken pipe")
    stream.flush.side_effect = BrokenPipeError(32, "Broken pipe")
    sink = StreamSink(stream)

    with pytest.raises(SinkWriteError, match="Broken pipe"):
        sink.write(b"abc")
    with pytest.raises(SinkWriteError):
        sink.flush()
