"""Graph build service: request payload -> Table -> node/edge tables (+ DOT)."""

from __future__ import annotations

import logging
import time
from typing import Any

from .. import config
from ..models import GraphRequest
from ..transform import Table, build_graph, to_dot

logger = logging.getLogger(__name__)


class TooManyRows(ValueError):
    def __init__(self, count: int, limit: int) -> None:
        self.count = count
        self.limit = limit
        super().__init__(f"Table has {count} rows; limit is {limit}")


def table_from_request(body: GraphRequest) -> Table:
    if len(body.rows) > config.MAX_ROWS:
        raise TooManyRows(len(body.rows), config.MAX_ROWS)
    return Table.from_records(body.rows, columns=body.columns)


def run_build(body: GraphRequest) -> dict[str, Any]:
    """Build the graph for one request. Raises GraphSpecError on bad descriptor/rules."""
    started = time.perf_counter()
    table = table_from_request(body)
    strict = config.STRICT_RULES if body.strict_rules is None else body.strict_rules
    graph = build_graph(
        table,
        body.edge_between,
        node_attr=body.node_attr,
        edge_attr=body.edge_attr,
        add_labels=body.add_labels,
        strict_rules=strict,
    )
    result = graph.to_dict()
    if body.include_dot:
        result["dot"] = to_dot(graph.nodes, graph.edges, graph.directed, graph_name=body.graph_name)
    logger.info("Graph request %r done in %.1f ms", body.edge_between, (time.perf_counter() - started) * 1000)
    return result
