from __future__ import annotations

import io
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from ltsv_tool.core import LineSource


@pytest.fixture
def write_access_log() -> Callable[[Path], None]:
    def _write(path: Path) -> None:
        path.write_text(
            "\n".join(
                [
                    "status:200\tpath:/a",
                    "status:200\tpath:/b",
                    "status:404\tpath:/c",
                ]
            )
            + "\n",
            encoding="utf-8",
        )

    return _write


@pytest.fixture
def write_lines() -> Callable[[Path, list[str]], None]:
    def _write(path: Path, lines: list[str]) -> None:
        path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")

    return _write


@pytest.fixture
def source_of() -> Callable[[str], LineSource]:
    def _source(text: str) -> LineSource:
        return LineSource.from_stream(io.StringIO(text), name="test")

    return _source


@pytest.fixture
def fake_stdin(monkeypatch) -> Callable[[bytes], io.BytesIO]:
    def _install(data: bytes) -> io.BytesIO:
        raw = io.BytesIO(data)
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(raw, encoding="utf-8"))
        return raw

    return _install
