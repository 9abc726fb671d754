"""Tests for the application service that wires adapters into the runner.

Files come from ``tmp_path`` and output goes to an in-memory sink, so the
service runs end to end without touching the real stdout.
"""

from __future__ import annotations

from pathlib import Path

from fakes import MemorySink, MemorySource
from headr.application.services import HeadRequest, HeadService
from headr.features.counting import CountSpec, CountUnit
from headr.features.extraction import HeaderPolicy, InputSource, RunOutcome


def _write(tmp_path: Path, name: str, content: bytes) -> str:
    path = tmp_path / name
    _ = path.write_bytes(content)
    return str(path)


def test_run_reads_files_in_order(tmp_path: Path, sink: MemorySink) -> None:
    first = _write(tmp_path, "a.txt", b"1\n2\n3\n")
    second = _write(tmp_path, "b.txt", b"x\ny\n")

    report = HeadService(sink=sink).run(
        HeadRequest(sources=[first, second], spec=CountSpec(CountUnit.LINES, 1))
    )

    assert sink.data == f"==> {first} <==\n1\n\n==> {second} <==\nx\n".encode()
    assert report.success


def test_run_with_negative_lines_uses_file_measurement(tmp_path: Path, sink: MemorySink) -> None:
    path = _write(tmp_path, "a.txt", b"1\n2\n3\n4")

    _ = HeadService(sink=sink).run(
        HeadRequest(sources=[path], spec=CountSpec(CountUnit.LINES, -2))
    )

    assert sink.data == b"1\n2\n"


def test_run_with_negative_bytes(tmp_path: Path, sink: MemorySink) -> None:
    path = _write(tmp_path, "a.txt", b"hello\nworld\n")

    _ = HeadService(sink=sink).run(
        HeadRequest(sources=[path], spec=CountSpec(CountUnit.BYTES, -2))
    )

    assert sink.data == b"hello\nworl"


def test_missing_file_is_reported_and_other_files_print(tmp_path: Path, sink: MemorySink) -> None:
    missing = str(tmp_path / "missing.txt")
    present = _write(tmp_path, "ok.txt", b"ok\n")

    reported: list[RunOutcome] = []
    report = HeadService(sink=sink).run(
        HeadRequest(sources=[missing, present]),
        reporter=reported.append,
    )

    assert sink.data == f"==> {present} <==\nok\n".encode()
    assert not report.success
    assert report.outcomes[0] == RunOutcome.failed(missing, "No such file or directory")
    assert reported == report.outcomes


def test_empty_source_list_falls_back_to_stdin(sink: MemorySink) -> None:
    requested: list[str] = []

    def factory(identifier: str) -> InputSource:
        requested.append(identifier)
        return MemorySource(identifier, b"from stdin\n")

    report = HeadService(sink=sink, source_factory=factory).run(
        HeadRequest(sources=[], header_policy=HeaderPolicy.ALWAYS)
    )

    assert requested == ["-"]
    assert sink.data == b"==> - <==\nfrom stdin\n"
    assert report.outcomes == [RunOutcome.emitted("-", 11)]


def test_default_request_reads_ten_lines(sink: MemorySink) -> None:
    content = b"".join(f"{index}\n".encode() for index in range(20))

    _ = HeadService(
        sink=sink,
        source_factory=lambda identifier: MemorySource(identifier, content),
    ).run(HeadRequest())

    assert sink.data == content[: content.index(b"10\n")]
