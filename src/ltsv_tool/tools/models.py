"""Response models returned by the MCP tools."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HeadResponse(BaseModel):
    path: str
    found: bool = Field(description="False when the input has no non-blank line.")
    labels: list[str] = Field(default_factory=list, description="Labels of the head record, sorted.")
    record: dict[str, str] = Field(default_factory=dict)


class RecordsResponse(BaseModel):
    path: str
    count: int
    truncated: bool = Field(description="True when more records exist beyond the limit.")
    records: list[dict[str, str]] = Field(default_factory=list)


class GroupCount(BaseModel):
    value: str
    count: int = Field(ge=1)


class GroupCountsResponse(BaseModel):
    path: str
    label: str
    total: int = Field(ge=0, description="Number of fields carrying the label.")
    groups: list[GroupCount] = Field(
        default_factory=list, description="Most frequent first, ties ordered by value."
    )


class OrderResponse(BaseModel):
    path: str
    label: str
    count: int
    truncated: bool
    lines: list[str] = Field(default_factory=list, description="Sorted lines with terminators removed.")
