"""LTSV line parser."""

from __future__ import annotations

from .models import LtsvError, Record

FIELD_SEP = "\t"
LABEL_SEP = ":"


def split_field(field: str, *, line: str) -> tuple[str, str]:
    """Split one ``label:value`` field on its first colon."""
    label, sep, value = field.partition(LABEL_SEP)
    if not sep:
        raise LtsvError.parse(field, line=line)
    return label, value


def parse_line(line: str) -> Record:
    """Parse a non-empty LTSV line into a record.

    Duplicate labels are allowed; the last occurrence wins.
    """
    record: Record = {}
    for field in line.split(FIELD_SEP):
        label, value = split_field(field, line=line)
        record[label] = value
    return record


def line_to_record(line: str) -> Record | None:
    """Lenient variant of :func:`parse_line`: ``None`` for malformed lines."""
    try:
        return parse_line(line)
    except LtsvError:
        return None


def strip_terminator(line: str) -> str:
    """Drop exactly one trailing line terminator character, if present."""
    if line.endswith("\n"):
        return line[:-1]
    return line
