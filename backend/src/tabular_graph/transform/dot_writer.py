"""DOT writer: node and edge tables to Graphviz statements."""

from __future__ import annotations

from typing import Mapping

from .graph import EdgeTable, NodeTable


def _quote(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n") + '"'


def _attr_list(attrs: Mapping[str, str]) -> str:
    items = [f"{k} = {_quote(v)}" for k, v in attrs.items() if v != ""]
    if not items:
        return ""
    return " [" + ", ".join(items) + "]"


def node_statements(nodes: NodeTable) -> list[str]:
    lines = []
    for node in nodes.records:
        attrs: dict[str, str] = {}
        if node.label is not None:
            attrs["label"] = node.label
        for name in nodes.attr_columns:
            # Explicit label attributes win over generated labels
            attrs[name] = node.attrs.get(name, "") or attrs.get(name, "")
        lines.append(f"  {_quote(node.node_id)}{_attr_list(attrs)}")
    return lines


def edge_statements(edges: EdgeTable, directed: bool) -> list[str]:
    op = "->" if directed else "--"
    return [
        f"  {_quote(e.from_node)} {op} {_quote(e.to_node)}"
        f"{_attr_list({name: e.attrs.get(name, '') for name in edges.attr_columns})}"
        for e in edges.records
    ]


def to_dot(
    nodes: NodeTable,
    edges: EdgeTable,
    directed: bool,
    graph_name: str | None = None,
    standalone: bool = True,
) -> str:
    """Render node statements, then edge statements.

    With standalone=False only the statement block is returned, for embedding
    in a larger graph document.
    """
    block = "\n".join(node_statements(nodes) + edge_statements(edges, directed))
    if not standalone:
        return block
    keyword = "digraph" if directed else "graph"
    header = f"{keyword} {_quote(graph_name)} {{" if graph_name else f"{keyword} {{"
    body = f"{block}\n" if block else ""
    return f"{header}\n{body}}}\n"
