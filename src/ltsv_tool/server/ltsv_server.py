"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: callable actions (head, records, group_by, order_by over an LTSV file)
- Resources: addressable data blobs (help, sample data, schemas, raw files)

Run locally (stdio):
    python -m ltsv_tool.server.ltsv_server
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from ltsv_tool.config import configure_logging
from ltsv_tool.resources.registry import register_resources
from ltsv_tool.tools.ltsv import (
    ltsv_group_by_impl,
    ltsv_head_impl,
    ltsv_order_by_impl,
    ltsv_records_impl,
)

LOGGER = logging.getLogger(__name__)

mcp = FastMCP("ltsv", json_response=True)

register_resources(mcp)


@mcp.tool()
def ltsv_head(path: str) -> dict[str, Any]:
    """Return the first record of an LTSV file and its labels.

    Blank lines before the first record are skipped. ``found`` is false when
    the file has no record at all.
    """
    return ltsv_head_impl(path=path)


@mcp.tool()
def ltsv_records(
    path: str,
    labels: Sequence[str] | None = None,
    limit: int | None = None,
) -> dict[str, Any]:
    """Return parsed records from an LTSV file.

    Parameters
    ----------
    path:
        Path to a local LTSV file, relative to LTSV_BASE_DIR. Supports .gz.
    labels:
        Keep only these labels in each record (others are dropped).
    limit:
        Maximum number of records returned (hard-capped in the implementation).
    """
    return ltsv_records_impl(path=path, labels=labels, limit=limit)


@mcp.tool()
def ltsv_group_by(path: str, label: str) -> dict[str, Any]:
    """Count how often each value of ``label`` occurs in an LTSV file.

    Fails if any field in the file lacks a ``label:value`` colon.
    """
    return ltsv_group_by_impl(path=path, label=label)


@mcp.tool()
def ltsv_order_by(
    path: str,
    label: str,
    reverse: bool = False,
    limit: int | None = None,
) -> dict[str, Any]:
    """Return the lines of an LTSV file sorted by the value of ``label``.

    Lines without the label, or that do not parse, sort first with an empty key.
    Ties keep file order.
    """
    return ltsv_order_by_impl(path=path, label=label, reverse=reverse, limit=limit)


def main() -> None:
    """Start the MCP server over stdio."""
    configure_logging("INFO")
    LOGGER.debug("Starting MCP server (transport=stdio)")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
