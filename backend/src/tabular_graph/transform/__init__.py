"""Table-to-graph transformation: descriptor and rule parsing, node/edge derivation, attribute merge."""

from .table import Table
from .graph import EdgeRecord, EdgeTable, GraphTables, NodeRecord, NodeTable
from .errors import GraphSpecError, InvalidDescriptor, MalformedAttributeRule, MissingColumn
from .descriptor import (
    BothComposite,
    LeftComposite,
    RelationshipDescriptor,
    RightComposite,
    Side,
    SimpleMode,
    parse_descriptor,
)
from .rules import AttributeRule, parse_rule, parse_rules
from .identity import OrderedUnique, resolve_nodes
from .edges import materialize_edges
from .merge import apply_edge_rules, apply_node_rules, overlay
from .dot_writer import to_dot
from .engine import Serializer, build_graph, render_graph

__all__ = [
    "Table",
    "NodeRecord",
    "EdgeRecord",
    "NodeTable",
    "EdgeTable",
    "GraphTables",
    "GraphSpecError",
    "InvalidDescriptor",
    "MissingColumn",
    "MalformedAttributeRule",
    "RelationshipDescriptor",
    "Side",
    "SimpleMode",
    "LeftComposite",
    "RightComposite",
    "BothComposite",
    "parse_descriptor",
    "AttributeRule",
    "parse_rule",
    "parse_rules",
    "OrderedUnique",
    "resolve_nodes",
    "materialize_edges",
    "overlay",
    "apply_node_rules",
    "apply_edge_rules",
    "to_dot",
    "Serializer",
    "build_graph",
    "render_graph",
]
