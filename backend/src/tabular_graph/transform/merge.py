"""Attribute merging onto node and edge tables."""

from __future__ import annotations

import logging
from typing import Sequence

from .graph import EdgeTable, NodeTable, AttributeTable
from .rules import AttributeRule

logger = logging.getLogger(__name__)


def overlay(existing: Sequence[str], candidate: Sequence[str]) -> list[str]:
    """Take the candidate value where it is non-empty, else keep the existing one."""
    if len(existing) != len(candidate):
        raise ValueError(f"Cannot overlay {len(candidate)} values onto {len(existing)}")
    return [new if new != "" else old for old, new in zip(existing, candidate)]


def _merge_column(table: AttributeTable, name: str, candidate: list[str]) -> None:
    table.add_column(name)
    table.set_column(name, overlay(table.column(name), candidate))


def apply_node_rules(nodes: NodeTable, rules: Sequence[AttributeRule]) -> NodeTable:
    """Each pair reaches only nodes whose member_of contains the rule's tag."""
    for rule in rules:
        matched = [rule.target_tag in n.member_of for n in nodes.records]
        logger.debug("Node rule %r matches %d/%d nodes", rule.target_tag, sum(matched), len(nodes))
        for name, value in rule.pairs:
            candidate = [value if hit else "" for hit in matched]
            _merge_column(nodes, name, candidate)
    return nodes


def apply_edge_rules(edges: EdgeTable, rules: Sequence[AttributeRule]) -> EdgeTable:
    """Edge rules are broadcast to every edge; the tag is not used for filtering."""
    for rule in rules:
        for name, value in rule.pairs:
            _merge_column(edges, name, [value] * len(edges))
    return edges
