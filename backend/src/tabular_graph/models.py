"""Pydantic models for API request/response."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class GraphRequest(BaseModel):
    rows: list[dict[str, Any]] = Field(default_factory=list)
    columns: list[str] | None = None
    edge_between: str
    node_attr: list[str] | str | None = None
    edge_attr: list[str] | str | None = None
    add_labels: bool = False
    include_dot: bool = True
    graph_name: str | None = None
    strict_rules: bool | None = None


class NodeOut(BaseModel):
    node_id: str
    origin_tag: str = ""
    label: str | None = None
    attrs: dict[str, str] = Field(default_factory=dict)


class EdgeOut(BaseModel):
    from_node: str
    to_node: str
    attrs: dict[str, str] = Field(default_factory=dict)


class GraphResponse(BaseModel):
    directed: bool
    nodes: list[NodeOut]
    edges: list[EdgeOut]
    dot: str | None = None
