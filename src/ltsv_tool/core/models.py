"""Core data models for LTSV processing."""

from __future__ import annotations

from enum import Enum

Record = dict[str, str]
GroupCounts = dict[str, int]


class ErrorKind(str, Enum):
    """Failure categories raised by the core."""

    IO = "io"
    PARSE = "parse"


class LtsvError(Exception):
    """Error raised by the LTSV core, tagged with its kind.

    PARSE errors carry the offending ``field`` and the ``line`` it came from.
    IO errors are chained from the underlying ``OSError``.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        field: str | None = None,
        line: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.field = field
        self.line = line

    @classmethod
    def io(cls, exc: OSError, *, name: str) -> LtsvError:
        reason = exc.strerror or str(exc)
        return cls(ErrorKind.IO, f"{name}: {reason}")

    @classmethod
    def parse(cls, field: str, *, line: str) -> LtsvError:
        return cls(ErrorKind.PARSE, f"invalid ltsv field: {field}", field=field, line=line)
