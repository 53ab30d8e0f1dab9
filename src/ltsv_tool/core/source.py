"""Line sources over stdin or files."""

from __future__ import annotations

import gzip
import io
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from .models import ErrorKind, LtsvError

LOGGER = logging.getLogger(__name__)

STDIN_NAME = "-"


class LineSource:
    """Sequential reader of raw lines (terminators kept).

    ``read_line`` returns ``(0, "")`` at end of stream.
    """

    def __init__(self, stream: TextIO, *, name: str, owned: bool = True, detach: bool = False) -> None:
        self._stream = stream
        self.name = name
        self._owned = owned
        self._detach = detach

    @classmethod
    def from_stream(cls, stream: TextIO, *, name: str = "<stream>") -> LineSource:
        """Wrap an already-open text stream; closing the source leaves it open."""
        return cls(stream, name=name, owned=False)

    def read_line(self) -> tuple[int, str]:
        try:
            line = self._stream.readline()
        except OSError as e:
            raise LtsvError.io(e, name=self.name) from e
        except UnicodeDecodeError as e:
            # only reachable with errors="strict"
            raise LtsvError(ErrorKind.IO, f"{self.name}: {e}") from e
        return len(line), line

    def __iter__(self) -> Iterator[str]:
        while True:
            n, line = self.read_line()
            if n == 0:
                return
            yield line

    def close(self) -> None:
        if self._detach:
            # leave the wrapped binary stream open
            self._stream.detach()
        elif self._owned:
            self._stream.close()

    def __enter__(self) -> LineSource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def open_file(name: str, *, encoding: str = "utf-8", errors: str = "replace") -> LineSource:
    """Open ``name`` for line reading; ``-`` selects standard input."""
    if name == STDIN_NAME:
        LOGGER.debug("Reading from stdin (encoding=%s)", encoding)
        stream = io.TextIOWrapper(sys.stdin.buffer, encoding=encoding, errors=errors)
        return LineSource(stream, name="<stdin>", owned=False, detach=True)

    path = Path(name)
    try:
        if path.suffix.lower() == ".gz":
            stream = gzip.open(path, mode="rt", encoding=encoding, errors=errors)
        else:
            stream = path.open(encoding=encoding, errors=errors)
    except OSError as e:
        raise LtsvError.io(e, name=name) from e

    LOGGER.debug("Opened %s (encoding=%s)", path, encoding)
    return LineSource(stream, name=name)
