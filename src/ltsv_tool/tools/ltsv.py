"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from itertools import islice
from pathlib import Path
from typing import Any

from ltsv_tool.config import Settings, load_settings
from ltsv_tool.core import LineSource, LtsvError, group_by, iter_records, open_file, order_by, parse_head
from ltsv_tool.core.parser import strip_terminator

from .models import GroupCount, GroupCountsResponse, HeadResponse, OrderResponse, RecordsResponse

LOGGER = logging.getLogger(__name__)

DEFAULT_LIMIT = 200
HARD_LIMIT = 5000


def base_dir(settings: Settings) -> Path:
    """Return the directory every tool and resource path must stay under."""
    return settings.base_dir or Path(os.getcwd()).resolve()


def resolve_input_path(path: str, settings: Settings) -> Path:
    """Resolve ``path`` under the base directory and require an existing file."""
    base = base_dir(settings)
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = base / p
    p = p.resolve()
    if base not in p.parents and p != base:
        raise ValueError("Path escapes base dir")
    if not p.is_file():
        raise FileNotFoundError(f"File not found: {p}")
    return p


def _resolve_limit(limit: int | None) -> int:
    if limit is None:
        return DEFAULT_LIMIT
    if limit <= 0:
        raise ValueError("limit must be > 0")
    return min(limit, HARD_LIMIT)


def _open(path: str) -> tuple[Path, LineSource]:
    settings = load_settings()
    resolved = resolve_input_path(path, settings)
    return resolved, open_file(str(resolved), encoding=settings.encoding, errors=settings.decode_errors)


def ltsv_head_impl(*, path: str) -> dict[str, Any]:
    """Implementation for the `ltsv_head` MCP tool."""
    try:
        resolved, source = _open(path)
        with source:
            record = parse_head(source)
    except LtsvError as e:
        raise ValueError(str(e)) from e

    if record is None:
        return HeadResponse(path=str(resolved), found=False).model_dump()
    return HeadResponse(
        path=str(resolved),
        found=True,
        labels=sorted(record),
        record=record,
    ).model_dump()


def ltsv_records_impl(
    *,
    path: str,
    labels: Sequence[str] | None = None,
    limit: int | None = None,
) -> dict[str, Any]:
    """Implementation for the `ltsv_records` MCP tool.

    Only the first ``limit`` records are parsed; later lines are not validated.
    """
    limit = _resolve_limit(limit)
    keep = [s.strip() for s in labels if s.strip()] if labels else None

    try:
        resolved, source = _open(path)
        with source:
            records = list(islice(iter_records(source), limit + 1))
    except LtsvError as e:
        raise ValueError(str(e)) from e

    truncated = len(records) > limit
    records = records[:limit]
    if keep is not None:
        records = [{k: r[k] for k in keep if k in r} for r in records]

    return RecordsResponse(
        path=str(resolved),
        count=len(records),
        truncated=truncated,
        records=records,
    ).model_dump()


def ltsv_group_by_impl(*, path: str, label: str) -> dict[str, Any]:
    """Implementation for the `ltsv_group_by` MCP tool."""
    if not label:
        raise ValueError("label must not be empty")

    try:
        resolved, source = _open(path)
        with source:
            counts = group_by(source, label)
    except LtsvError as e:
        raise ValueError(str(e)) from e

    groups = [
        GroupCount(value=value, count=count)
        for value, count in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    ]
    return GroupCountsResponse(
        path=str(resolved),
        label=label,
        total=sum(counts.values()),
        groups=groups,
    ).model_dump()


def ltsv_order_by_impl(
    *,
    path: str,
    label: str,
    reverse: bool = False,
    limit: int | None = None,
) -> dict[str, Any]:
    """Implementation for the `ltsv_order_by` MCP tool.

    Malformed lines are not rejected; they sort with an empty key.
    """
    if not label:
        raise ValueError("label must not be empty")
    limit = _resolve_limit(limit)

    try:
        resolved, source = _open(path)
        with source:
            lines = order_by(source, label)
    except LtsvError as e:
        raise ValueError(str(e)) from e

    if reverse:
        lines.reverse()
    LOGGER.debug("Ordered %d lines of %s by %r", len(lines), resolved, label)

    return OrderResponse(
        path=str(resolved),
        label=label,
        count=min(len(lines), limit),
        truncated=len(lines) > limit,
        lines=[strip_terminator(line) for line in lines[:limit]],
    ).model_dump()
