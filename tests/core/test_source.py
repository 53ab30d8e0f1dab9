from __future__ import annotations

import gzip
import io
import sys
from pathlib import Path

import pytest

from ltsv_tool.core import ErrorKind, LineSource, LtsvError, open_file, parse_head


def test_read_line_keeps_terminator_and_signals_eof(tmp_path: Path, write_lines) -> None:
    path = tmp_path / "a.ltsv"
    write_lines(path, ["a:1", "b:2"])

    with open_file(str(path)) as source:
        assert source.read_line() == (4, "a:1\n")
        assert source.read_line() == (4, "b:2\n")
        assert source.read_line() == (0, "")


def test_iterating_a_source(tmp_path: Path, write_lines) -> None:
    path = tmp_path / "a.ltsv"
    write_lines(path, ["a:1", "", "b:2"])
    with open_file(str(path)) as source:
        assert list(source) == ["a:1\n", "\n", "b:2\n"]


def test_open_missing_file_is_io_error(tmp_path: Path) -> None:
    with pytest.raises(LtsvError) as excinfo:
        open_file(str(tmp_path / "missing.ltsv"))
    assert excinfo.value.kind is ErrorKind.IO
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_open_directory_is_io_error(tmp_path: Path) -> None:
    with pytest.raises(LtsvError) as excinfo:
        open_file(str(tmp_path))
    assert excinfo.value.kind is ErrorKind.IO


def test_open_dash_reads_stdin(fake_stdin) -> None:
    raw = fake_stdin(b"\na:1\tb:2\n")
    with open_file("-") as source:
        assert parse_head(source) == {"a": "1", "b": "2"}
    assert not raw.closed
    assert not sys.stdin.closed


def test_open_dash_applies_decode_errors(fake_stdin) -> None:
    fake_stdin(b"name:caf\xe9\n")
    with open_file("-") as source:
        assert parse_head(source) == {"name": "caf\ufffd"}

    fake_stdin(b"name:caf\xe9\n")
    with open_file("-", errors="strict") as source:
        with pytest.raises(LtsvError) as excinfo:
            source.read_line()
    assert excinfo.value.kind is ErrorKind.IO


def test_open_dash_applies_encoding(fake_stdin) -> None:
    fake_stdin(b"name:caf\xe9\n")
    with open_file("-", encoding="latin-1", errors="strict") as source:
        assert parse_head(source) == {"name": "caf\u00e9"}


def test_open_gzip(tmp_path: Path) -> None:
    path = tmp_path / "a.ltsv.gz"
    with gzip.open(path, "wt", encoding="utf-8") as f:
        f.write("a:1\tb:2\n")
    with open_file(str(path)) as source:
        assert parse_head(source) == {"a": "1", "b": "2"}


def test_from_stream_does_not_close_stream() -> None:
    stream = io.StringIO("a:1\n")
    with LineSource.from_stream(stream) as source:
        assert source.read_line() == (4, "a:1\n")
    assert not stream.closed


def test_read_failure_is_io_error() -> None:
    class Broken(io.StringIO):
        def readline(self, *args):  # type: ignore[override]
            raise OSError("device gone")

    source = LineSource.from_stream(Broken(), name="broken")
    with pytest.raises(LtsvError) as excinfo:
        source.read_line()
    assert excinfo.value.kind is ErrorKind.IO
    assert "broken" in str(excinfo.value)


def test_strict_decoding_failure_is_io_error(tmp_path: Path) -> None:
    path = tmp_path / "latin1.ltsv"
    path.write_bytes(b"name:caf\xe9\n")
    with open_file(str(path), errors="strict") as source:
        with pytest.raises(LtsvError) as excinfo:
            source.read_line()
    assert excinfo.value.kind is ErrorKind.IO


def test_replace_decoding_keeps_reading(tmp_path: Path) -> None:
    path = tmp_path / "latin1.ltsv"
    path.write_bytes(b"name:caf\xe9\n")
    with open_file(str(path)) as source:
        assert parse_head(source) == {"name": "caf\ufffd"}
