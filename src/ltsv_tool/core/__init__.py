"""LTSV core: line sources, the record parser and stream operations."""

from __future__ import annotations

from .models import ErrorKind, GroupCounts, LtsvError, Record
from .parser import line_to_record, parse_line
from .records import each_record, group_by, iter_records, order_by, parse_head
from .source import LineSource, open_file

__all__ = [
    "ErrorKind",
    "GroupCounts",
    "LineSource",
    "LtsvError",
    "Record",
    "each_record",
    "group_by",
    "iter_records",
    "line_to_record",
    "open_file",
    "order_by",
    "parse_head",
    "parse_line",
]
