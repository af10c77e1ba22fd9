from tabular_graph.transform import (
    OrderedUnique,
    Table,
    materialize_edges,
    parse_descriptor,
    resolve_nodes,
)


def _resolve(table, text, add_labels=False):
    d = parse_descriptor(text, table.columns)
    return resolve_nodes(table, d, add_labels=add_labels), materialize_edges(table, d)


def test_ordered_unique_keeps_first_payload():
    u = OrderedUnique()
    assert u.add("b", 1)
    assert u.add("a", 2)
    assert not u.add("b", 3)
    assert list(u) == ["b", "a"]
    assert dict(u.items()) == {"b": 1, "a": 2}


def test_simple_mode_is_column_major(ab_table):
    nodes, edges = _resolve(ab_table, "A -> B")
    assert nodes.node_ids == ["a", "b", "x", "y"]
    assert [(e.from_node, e.to_node) for e in edges.records] == [("a", "x"), ("b", "y"), ("a", "y")]


def test_simple_mode_right_column_first_when_on_left():
    table = Table.from_records([{"A": "1", "B": "2"}, {"A": "3", "B": "1"}])
    nodes, _ = _resolve(table, "B -> A")
    assert nodes.node_ids == ["2", "1", "3"]


def test_simple_mode_membership_spans_columns():
    table = Table.from_records([{"A": "p", "B": "q"}, {"A": "q", "B": "r"}])
    nodes, _ = _resolve(table, "A -> B")
    q = nodes.get_node("q")
    assert q.origin_tag == "A"
    assert q.member_of == frozenset({"A", "B"})
    assert nodes.get_node("r").member_of == frozenset({"B"})


def test_left_composite():
    table = Table.from_records([{"A": "a", "B": "x"}, {"A": "b", "B": "y"}])
    nodes, edges = _resolve(table, "A+B -> A")
    assert nodes.node_ids == ["a__x", "b__y", "a", "b"]
    assert [n.origin_tag for n in nodes.records] == ["A+B", "A+B", "A", "A"]
    assert [(e.from_node, e.to_node) for e in edges.records] == [("a__x", "a"), ("b__y", "b")]


def test_right_composite_left_values_first():
    table = Table.from_records(
        [{"A": "a", "B": "x", "C": "1"}, {"A": "a", "B": "y", "C": "2"}]
    )
    nodes, edges = _resolve(table, "A -> B+C")
    assert nodes.node_ids == ["a", "x__1", "y__2"]
    assert [n.origin_tag for n in nodes.records] == ["A", "B+C", "B+C"]
    assert [(e.from_node, e.to_node) for e in edges.records] == [("a", "x__1"), ("a", "y__2")]


def test_both_composite_dedups_synthetic_ids():
    table = Table.from_records(
        [
            {"A": "a", "B": "x", "C": "1"},
            {"A": "a", "B": "x", "C": "2"},
        ]
    )
    nodes, edges = _resolve(table, "A+B -> B+C")
    assert nodes.node_ids == ["a__x", "x__1", "x__2"]
    assert len(edges) == 2
    assert all(n.member_of == frozenset({n.origin_tag}) for n in nodes.records)


def test_quote_sanitation_and_labels():
    table = Table.from_records([{"A": "O'Neil", "B": "x"}, {"A": "O_Neil", "B": "x"}])
    nodes, edges = _resolve(table, "A -> B", add_labels=True)
    assert nodes.node_ids == ["O_Neil", "x"]
    assert nodes.records[0].label == "O&#39;Neil"
    assert [e.from_node for e in edges.records] == ["O_Neil", "O_Neil"]


def test_composite_quote_sanitation():
    table = Table.from_records([{"A": "it's", "B": "x"}])
    nodes, edges = _resolve(table, "A+B -> B", add_labels=True)
    assert nodes.node_ids == ["it_s__x", "x"]
    assert nodes.records[0].label == "it&#39;s__x"
    assert edges.records[0].from_node == "it_s__x"


def test_labels_disabled_by_default(ab_table):
    nodes, _ = _resolve(ab_table, "A -> B")
    assert all(n.label is None for n in nodes.records)
    assert nodes.has_labels is False


def test_empty_table():
    table = Table(columns=["A", "B"], rows=[])
    nodes, edges = _resolve(table, "A -> B")
    assert len(nodes) == 0
    assert len(edges) == 0


def test_composite_collision_keeps_both_side_tags():
    table = Table.from_records([{"A": "a", "B": "x", "C": "a__x"}])
    nodes, edges = _resolve(table, "A+B -> C")
    assert nodes.node_ids == ["a__x"]
    node = nodes.records[0]
    assert node.origin_tag == "A+B"
    assert node.member_of == frozenset({"A+B", "C"})
    assert (edges.records[0].from_node, edges.records[0].to_node) == ("a__x", "a__x")


def test_table_from_columns():
    table = Table.from_columns({"A": ["a", None], "B": [1, "y"]})
    assert table.columns == ["A", "B"]
    assert table.rows == [{"A": "a", "B": "1"}, {"A": "", "B": "y"}]
