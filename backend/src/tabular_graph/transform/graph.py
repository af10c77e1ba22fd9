"""Graph model for table-derived graphs - node and edge tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

T = TypeVar("T")


@dataclass
class NodeRecord:
    """One deduplicated node. member_of holds the rule tags that may target it."""

    node_id: str
    origin_tag: str = ""
    label: str | None = None
    attrs: dict[str, str] = field(default_factory=dict)
    member_of: frozenset[str] = field(default_factory=frozenset)


@dataclass
class EdgeRecord:
    """Edge derived from exactly one source row."""

    from_node: str
    to_node: str
    attrs: dict[str, str] = field(default_factory=dict)


class AttributeTable:
    """Shared column handling: an attribute column exists on every record."""

    records: list[Any]
    attr_columns: list[str]

    def __len__(self) -> int:
        return len(self.records)

    def add_column(self, name: str) -> None:
        if name in self.attr_columns:
            return
        self.attr_columns.append(name)
        for rec in self.records:
            rec.attrs[name] = ""

    def column(self, name: str) -> list[str]:
        return [rec.attrs.get(name, "") for rec in self.records]

    def set_column(self, name: str, values: list[str]) -> None:
        if len(values) != len(self.records):
            raise ValueError(
                f"Column {name!r} has {len(values)} values for {len(self.records)} rows"
            )
        self.add_column(name)
        for rec, value in zip(self.records, values):
            rec.attrs[name] = value


@dataclass
class NodeTable(AttributeTable):
    records: list[NodeRecord] = field(default_factory=list)
    attr_columns: list[str] = field(default_factory=list)
    has_labels: bool = False

    @property
    def node_ids(self) -> list[str]:
        return [n.node_id for n in self.records]

    def get_node(self, node_id: str) -> NodeRecord | None:
        for n in self.records:
            if n.node_id == node_id:
                return n
        return None


@dataclass
class EdgeTable(AttributeTable):
    records: list[EdgeRecord] = field(default_factory=list)
    attr_columns: list[str] = field(default_factory=list)


@dataclass
class GraphTables:
    """Final node table, edge table and directedness handed to a serializer."""

    nodes: NodeTable
    edges: EdgeTable
    directed: bool = False

    def serialize(self, serializer: Callable[[NodeTable, EdgeTable, bool], T]) -> T:
        return serializer(self.nodes, self.edges, self.directed)

    def to_dict(self) -> dict[str, Any]:
        return {
            "directed": self.directed,
            "nodes": [
                {
                    "node_id": n.node_id,
                    "origin_tag": n.origin_tag,
                    "label": n.label,
                    "attrs": dict(n.attrs),
                }
                for n in self.nodes.records
            ],
            "edges": [
                {"from_node": e.from_node, "to_node": e.to_node, "attrs": dict(e.attrs)}
                for e in self.edges.records
            ],
        }
