"""Edge materialization: one edge per source row."""

from __future__ import annotations

from .descriptor import RelationshipDescriptor
from .graph import EdgeRecord, EdgeTable
from .identity import sanitize_id
from .table import Table


def materialize_edges(table: Table, descriptor: RelationshipDescriptor) -> EdgeTable:
    """Edges in source row order; duplicates are kept."""
    records = [
        EdgeRecord(
            from_node=sanitize_id(descriptor.left.identity(row)),
            to_node=sanitize_id(descriptor.right.identity(row)),
        )
        for row in table.rows
    ]
    return EdgeTable(records=records)
