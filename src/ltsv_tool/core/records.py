"""Record iteration, grouping and ordering over a line source.

This module is the main integration point between a :class:`LineSource` and
callers that want records, group counts, or sorted lines.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from .models import GroupCounts, Record
from .parser import FIELD_SEP, line_to_record, parse_line, split_field, strip_terminator
from .source import LineSource

LOGGER = logging.getLogger(__name__)


def parse_head(source: LineSource) -> Record | None:
    """Parse the first usable line of ``source``.

    Lines that are empty or consist of a lone terminator are skipped.
    Returns ``None`` when the stream ends before a usable line is found.
    """
    while True:
        n, line = source.read_line()
        if n == 0:
            LOGGER.debug("No head record in %s", source.name)
            return None
        if n == 1:
            continue
        return parse_line(strip_terminator(line))


def _content_lines(source: LineSource) -> Iterator[str]:
    """Yield non-blank lines with one trailing terminator removed."""
    for raw in source:
        line = strip_terminator(raw)
        if not line:
            continue
        yield line


def iter_records(source: LineSource) -> Iterator[Record]:
    """Lazily parse each non-blank line; single pass, consumes ``source``."""
    for line in _content_lines(source):
        yield parse_line(line)


def each_record(source: LineSource, visitor: Callable[[Record], object]) -> None:
    """Call ``visitor`` with every record; stops at the first malformed line."""
    for record in iter_records(source):
        visitor(record)


def group_by(source: LineSource, label: str) -> GroupCounts:
    """Count occurrences of each value of ``label``.

    Every field is validated, including fields whose label does not match.
    """
    counts: GroupCounts = {}
    for line in _content_lines(source):
        for field in line.split(FIELD_SEP):
            name, value = split_field(field, line=line)
            if name != label:
                continue
            counts[value] = counts.get(value, 0) + 1

    LOGGER.debug("Grouped %s by %r into %d values", source.name, label, len(counts))
    return counts


def sort_key(line: str, label: str) -> str:
    """Value of ``label`` in ``line``; empty for malformed lines or a missing label."""
    record = line_to_record(strip_terminator(line))
    if record is None:
        return ""
    return record.get(label, "")


def order_by(source: LineSource, label: str) -> list[str]:
    """Return every line of ``source`` sorted by the value of ``label``.

    The whole input is buffered. Lines keep their terminators, and lines with
    equal keys keep their input order. Malformed lines sort with an empty key
    instead of failing.
    """
    lines = list(source)
    LOGGER.debug("Buffered %d lines from %s", len(lines), source.name)
    return sorted(lines, key=lambda line: sort_key(line, label))
