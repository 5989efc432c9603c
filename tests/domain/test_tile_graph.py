# tests/domain/test_tile_graph.py
import pytest

from gridgraph.app.protocols import Graph
from gridgraph.domain.entities.graph import Node
from gridgraph.domain.tile_graph import TileGraph, TileGraphParseError, generate_tile_graph

CORRIDOR = "▀  ▀\n▀▀ ▀\n▀▀ ▀\n▀▀ ▀"


@pytest.fixture
def corridor() -> TileGraph:
    return generate_tile_graph(CORRIDOR)


def test_new_tile_graph_renders_uniform_grid():
    tg = TileGraph(4, 4, passable=False)
    assert isinstance(tg, Graph)
    assert tg.shape == (4, 4)
    assert str(tg) == "▀▀▀▀\n▀▀▀▀\n▀▀▀▀\n▀▀▀▀"
    assert TileGraph(2, 3, passable=True).render() == "   \n   "


def test_set_passability_sequence():
    tg = TileGraph(4, 4, passable=False)
    steps = [
        ((0, 1, True), "▀ ▀▀\n▀▀▀▀\n▀▀▀▀\n▀▀▀▀"),
        ((0, 1, False), "▀▀▀▀\n▀▀▀▀\n▀▀▀▀\n▀▀▀▀"),
        ((0, 1, True), "▀ ▀▀\n▀▀▀▀\n▀▀▀▀\n▀▀▀▀"),
        ((0, 2, True), "▀  ▀\n▀▀▀▀\n▀▀▀▀\n▀▀▀▀"),
        ((1, 2, True), "▀  ▀\n▀▀ ▀\n▀▀▀▀\n▀▀▀▀"),
        ((2, 2, True), "▀  ▀\n▀▀ ▀\n▀▀ ▀\n▀▀▀▀"),
        ((3, 2, True), CORRIDOR),
    ]
    for (r, c, passable), expected in steps:
        tg.set_passability(r, c, passable)
        assert str(tg) == expected
    assert tg.is_passable(3, 2) and not tg.is_passable(3, 3)


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (4, 0), (0, 4)])
def test_out_of_range_coordinates_are_rejected(row, col):
    tg = TileGraph(4, 4, passable=True)
    with pytest.raises(IndexError):
        tg.set_passability(row, col, False)
    with pytest.raises(IndexError):
        tg.coords_to_id(row, col)
    assert tg.render() == "    \n    \n    \n    "


def test_non_positive_dimensions_are_rejected():
    with pytest.raises(ValueError):
        TileGraph(0, 3)


# ---------- Coordinates


def test_coords_to_id_corners():
    tg = TileGraph(4, 4)
    assert tg.coords_to_id(0, 0) == 0
    assert tg.coords_to_id(3, 3) == 15
    assert tg.coords_to_id(0, 3) == 3
    assert tg.coords_to_id(3, 0) == 12
    assert tg.id_to_coords(0) == (0, 0)
    assert tg.id_to_coords(15) == (3, 3)
    assert tg.id_to_coords(3) == (0, 3)
    assert tg.id_to_coords(12) == (3, 0)
    with pytest.raises(IndexError):
        tg.id_to_coords(16)


@pytest.mark.parametrize("rows,cols", [(1, 1), (3, 7), (6, 2)])
def test_coordinate_bijection(rows, cols):
    tg = TileGraph(rows, cols)
    ids = set()
    for r in range(rows):
        for c in range(cols):
            nid = tg.coords_to_id(r, c)
            assert tg.id_to_coords(nid) == (r, c)
            ids.add(nid)
    assert ids == set(range(rows * cols))


# ---------- Adjacency


def test_successors_and_degree(corridor: TileGraph):
    assert corridor.successors(Node(0)) == []
    assert {s.id for s in corridor.successors(Node(2))} == {1, 6}
    assert corridor.degree(Node(2)) == 4
    assert corridor.degree(Node(1)) == 2
    assert corridor.degree(Node(0)) == 0
    assert corridor.successors(Node(99)) == []


def test_adjacency_relations(corridor: TileGraph):
    assert corridor.is_successor(Node(2), Node(6))
    assert corridor.is_predecessor(Node(6), Node(2))
    assert corridor.is_adjacent(Node(1), Node(2))
    assert not corridor.is_successor(Node(1), Node(5))  # wall below
    assert not corridor.is_successor(Node(3), Node(2))  # exiting a wall
    assert not corridor.is_successor(Node(2), Node(10))  # not a neighbour
    assert corridor.cost(Node(2), Node(6)) == 1.0
    assert corridor.cost(Node(2), Node(3)) == 0.0
    assert not corridor.is_directed()


def test_edges_do_not_wrap_around_rows():
    tg = TileGraph(2, 3, passable=True)
    assert {s.id for s in tg.successors(Node(2))} == {1, 5}
    assert not tg.is_successor(Node(2), Node(3))


def test_node_and_edge_lists(corridor: TileGraph):
    assert len(corridor.node_list()) == 16
    pairs = {(e.head.id, e.tail.id) for e in corridor.edge_list()}
    assert pairs == {(1, 2), (2, 1), (2, 6), (6, 2), (6, 10), (10, 6), (10, 14), (14, 10)}


def test_passability_toggle_drops_and_restores_degree():
    tg = TileGraph(3, 3, passable=True)
    center = Node(tg.coords_to_id(1, 1))
    before = tg.degree(center)
    assert before == 8

    tg.set_passability(1, 1, False)
    assert tg.degree(center) == 0
    assert all(not tg.is_successor(n, center) for n in tg.node_list())

    tg.set_passability(1, 1, True)
    assert tg.degree(center) == before


def test_neighbour_scan_sees_passability_changes_made_after_a_query():
    tg = TileGraph(1, 3, passable=True)
    assert {s.id for s in tg.successors(Node(1))} == {0, 2}
    tg.set_passability(0, 2, False)
    assert [s.id for s in tg.successors(Node(1))] == [0]
    assert tg.successors(Node(2)) == []
    assert tg.render() == "  ▀"


# ---------- Text format


def test_parse_render_round_trip(corridor: TileGraph):
    assert corridor.render() == CORRIDOR
    again = generate_tile_graph(corridor.render())
    assert again.render() == CORRIDOR
    assert TileGraph.from_text(CORRIDOR).shape == (4, 4)


@pytest.mark.parametrize(
    "text,row,col",
    [
        ("▀  ▀\n▀▀ \n▀▀ ▀", 1, None),  # short row
        ("▀  ▀\n▀▀ ▀\n", 2, None),  # trailing newline makes an empty row
        ("▀  ▀\n▀x ▀", 1, 1),  # illegal glyph
    ],
)
def test_malformed_templates_name_the_offending_row(text, row, col):
    with pytest.raises(TileGraphParseError) as exc:
        generate_tile_graph(text)
    assert exc.value.row == row
    assert exc.value.col == col
    assert f"row {row}" in str(exc.value)


def test_empty_template_is_rejected():
    with pytest.raises(TileGraphParseError):
        generate_tile_graph("")


def test_path_string_overlays_path(corridor: TileGraph):
    path = [Node(i) for i in (1, 2, 6, 10, 14)]
    assert corridor.path_string(path) == "▀s♥▀\n▀▀♥▀\n▀▀♥▀\n▀▀g▀"
    assert corridor.path_string(None) == CORRIDOR
