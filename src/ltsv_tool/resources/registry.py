"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

import asyncio
import gzip
from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP

from ltsv_tool.config import load_settings
from ltsv_tool.tools.ltsv import base_dir, resolve_input_path
from ltsv_tool.tools.models import GroupCountsResponse

ALLOWED_FILE_SUFFIXES = {".ltsv", ".log", ".txt"}

SAMPLE_LTSV = (
    "time:2025-12-30T08:12:01Z\tstatus:200\tmethod:GET\tpath:/\n"
    "time:2025-12-30T08:12:03Z\tstatus:404\tmethod:GET\tpath:/missing\n"
    "time:2025-12-30T08:12:04Z\tstatus:200\tmethod:POST\tpath:/api/v1/items\n"
    "time:2025-12-30T08:12:05Z\tstatus:500\tmethod:GET\tpath:/api/v1/items\n"
)


def _allowed_suffix(path: Path) -> str:
    """Return the effective suffix for allowlist checks."""
    suffix = path.suffix.lower()
    if suffix == ".gz":
        suffix = path.with_suffix("").suffix.lower()
    return suffix


def resolve_resource_path(path: str) -> Path:
    """Resolve and validate a resource file path."""
    resolved = resolve_input_path(path, load_settings())
    if _allowed_suffix(resolved) not in ALLOWED_FILE_SUFFIXES:
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        raise ValueError(f"File type not allowed. Allowed: {allowed}.")
    return resolved


def read_text(path: Path) -> str:
    """Read text from a file, supporting optional gzip compression."""
    settings = load_settings()
    if path.suffix.lower() == ".gz":
        with gzip.open(path, mode="rt", encoding=settings.encoding, errors=settings.decode_errors) as f:
            return f.read()
    return path.read_text(encoding=settings.encoding, errors=settings.decode_errors)


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://ltsv/help")
    def help_resource() -> str:
        """Return a short list of available resource URIs."""
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        return (
            "Resources:\n"
            "- app://ltsv/help\n"
            "- app://ltsv/examples/sample\n"
            "- app://ltsv/schemas/group-counts\n"
            f"- ltsv://{{path}} (restricted to LTSV_BASE_DIR; allowed: {allowed}, .gz)\n"
            f"\nBase directory: {base_dir(load_settings())}\n"
        )

    @mcp.resource("app://ltsv/examples/sample")
    def sample() -> str:
        """Return a tiny LTSV access log for demos and tests."""
        return SAMPLE_LTSV

    @mcp.resource("app://ltsv/schemas/group-counts")
    def group_counts_schema() -> dict[str, Any]:
        """Return the JSON schema of the ltsv_group_by tool response."""
        return GroupCountsResponse.model_json_schema()

    @mcp.resource("ltsv://{path}")
    async def read_ltsv(path: str) -> str:
        """Return the raw contents of an LTSV file under LTSV_BASE_DIR."""
        p = resolve_resource_path(path)
        return await asyncio.to_thread(read_text, p)
