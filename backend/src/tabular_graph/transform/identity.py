"""Node identity resolution: stable dedup of plain and synthetic node ids."""

from __future__ import annotations

import logging
from typing import Generic, Hashable, Iterable, Iterator, TypeVar

from .descriptor import (
    BothComposite,
    IdentityMode,
    LeftComposite,
    RelationshipDescriptor,
    RightComposite,
    Side,
    SimpleMode,
)
from .graph import NodeRecord, NodeTable
from .table import Table

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def sanitize_id(value: str) -> str:
    """Node ids and edge endpoints never carry a raw single quote."""
    return value.replace("'", "_")


def escape_label(value: str) -> str:
    return value.replace("'", "&#39;")


class OrderedUnique(Generic[K, V]):
    """Insertion-ordered set keyed on K; keeps the payload of the first occurrence."""

    def __init__(self) -> None:
        self._items: dict[K, V] = {}

    def add(self, key: K, payload: V) -> bool:
        if key in self._items:
            return False
        self._items[key] = payload
        return True

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[K]:
        return iter(self._items)

    def items(self) -> Iterable[tuple[K, V]]:
        return self._items.items()


def node_tags(descriptor: RelationshipDescriptor) -> list[str]:
    """Tags a node attribute rule can target for this descriptor."""
    tags = [descriptor.left.tag]
    if descriptor.right.tag not in tags:
        tags.append(descriptor.right.tag)
    return tags


def _side_values(table: Table, side: Side) -> list[str]:
    return [side.identity(row) for row in table.rows]


def _node_groups(mode: IdentityMode) -> list[tuple[Side, bool]]:
    """Sides in scan order, each flagged when its ids are synthetic."""
    if isinstance(mode, SimpleMode):
        return [(mode.left, False), (mode.right, False)]
    if isinstance(mode, LeftComposite):
        return [(mode.left, True), (mode.right, False)]
    if isinstance(mode, RightComposite):
        return [(mode.left, False), (mode.right, True)]
    if isinstance(mode, BothComposite):
        return [(mode.left, True), (mode.right, True)]
    raise TypeError(f"Unknown identity mode: {mode!r}")


def resolve_nodes(table: Table, descriptor: RelationshipDescriptor, add_labels: bool = False) -> NodeTable:
    """Deduplicated node table: left-side identities first, then right-side ones.

    A node keeps the tag of the side it was first seen under as origin_tag;
    member_of collects the tag of every side whose identities contain it, so a
    rule tagged with a side's name targets every node that side produced.
    """
    mode = descriptor.mode
    seen: OrderedUnique[str, tuple[str, str]] = OrderedUnique()
    members: dict[str, set[str]] = {}

    for side, synthetic in _node_groups(mode):
        before = len(seen)
        for raw in _side_values(table, side):
            node_id = sanitize_id(raw)
            seen.add(node_id, (raw, side.tag))
            members.setdefault(node_id, set()).add(side.tag)
        logger.debug(
            "Side %r added %d %s ids", side.tag, len(seen) - before, "synthetic" if synthetic else "plain"
        )

    records = [
        NodeRecord(
            node_id=node_id,
            origin_tag=origin,
            label=escape_label(raw) if add_labels else None,
            member_of=frozenset(members[node_id]),
        )
        for node_id, (raw, origin) in seen.items()
    ]
    logger.debug(
        "Resolved %d nodes from %d rows (%s)", len(records), len(table), type(mode).__name__
    )
    return NodeTable(records=records, has_labels=add_labels)
