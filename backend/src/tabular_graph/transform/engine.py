"""Table-to-graph engine: descriptor and rules in, node and edge tables out."""

from __future__ import annotations

import logging
from typing import Callable, Sequence, TypeVar

from .descriptor import parse_descriptor
from .dot_writer import to_dot
from .edges import materialize_edges
from .graph import EdgeTable, GraphTables, NodeTable
from .identity import node_tags, resolve_nodes
from .merge import apply_edge_rules, apply_node_rules
from .rules import parse_rules, validate_node_rules
from .table import Table

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Serializer: (nodes, edges, directed) -> document
Serializer = Callable[[NodeTable, EdgeTable, bool], T]

RuleSpecs = str | Sequence[str] | None


def build_graph(
    table: Table,
    edge_between: str,
    node_attr: RuleSpecs = None,
    edge_attr: RuleSpecs = None,
    add_labels: bool = False,
    strict_rules: bool = False,
) -> GraphTables:
    """Derive node and edge tables from a table and a relationship descriptor.

    Every parse error is raised before any row is processed.
    """
    descriptor = parse_descriptor(edge_between, table.columns)
    node_rules = parse_rules(node_attr, strict=strict_rules)
    edge_rules = parse_rules(edge_attr, strict=strict_rules)
    validate_node_rules(node_rules, table.columns, node_tags(descriptor))

    nodes = resolve_nodes(table, descriptor, add_labels=add_labels)
    edges = materialize_edges(table, descriptor)
    apply_node_rules(nodes, node_rules)
    apply_edge_rules(edges, edge_rules)

    logger.info(
        "Built graph %r: %d rows -> %d nodes, %d edges (directed=%s)",
        edge_between,
        len(table),
        len(nodes),
        len(edges),
        descriptor.directed,
    )
    return GraphTables(nodes=nodes, edges=edges, directed=descriptor.directed)


def render_graph(
    table: Table,
    edge_between: str,
    node_attr: RuleSpecs = None,
    edge_attr: RuleSpecs = None,
    add_labels: bool = False,
    strict_rules: bool = False,
    serializer: Serializer = to_dot,
):
    """build_graph, then hand the result to serializer (DOT text by default)."""
    graph = build_graph(
        table,
        edge_between,
        node_attr=node_attr,
        edge_attr=edge_attr,
        add_labels=add_labels,
        strict_rules=strict_rules,
    )
    return graph.serialize(serializer)
