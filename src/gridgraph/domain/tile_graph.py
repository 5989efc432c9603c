from collections.abc import Iterator, Sequence

import numpy as np

from gridgraph.app.protocols import Graph
from gridgraph.domain.entities.graph import Edge, Node

WALL = "▀"
OPEN = " "
ROW_SEP = "\n"

# path overlay glyphs used by path_string
PATH_START = "s"
PATH_GOAL = "g"
PATH_STEP = "♥"

# up, down, left, right
_NEIGHBOR_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class TileGraphParseError(ValueError):
    def __init__(self, msg: str, *, row: int | None = None, col: int | None = None):
        super().__init__(msg)
        self.row, self.col = row, col


class TileGraph(Graph):
    """
    Fixed-size grid of passable/impassable tiles, 4-connected and undirected.

    Adjacency is derived from passability on demand; nothing is stored per edge.
    Node ids are row-major: id = row * cols + col.
    """

    def __init__(self, rows: int, cols: int, passable: bool = False):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"tile graph needs positive dimensions, got {rows}x{cols}")
        self._rows, self._cols = rows, cols
        self._open = np.full((rows, cols), bool(passable), dtype=bool)
        self._cells: list[list[bool]] | None = None  # row lists read by neighbour scans

    @classmethod
    def from_text(cls, text: str) -> "TileGraph":
        return generate_tile_graph(text)

    # --------------- Grid & coordinates --------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def _check_coords(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"tile ({row}, {col}) outside {self.rows}x{self.cols} grid")

    def coords_to_id(self, row: int, col: int) -> int:
        self._check_coords(row, col)
        return row * self.cols + col

    def id_to_coords(self, nid: int) -> tuple[int, int]:
        if not 0 <= nid < self.rows * self.cols:
            raise IndexError(f"node id {nid} outside {self.rows}x{self.cols} grid")
        return divmod(nid, self.cols)

    def set_passability(self, row: int, col: int, passable: bool) -> None:
        self._check_coords(row, col)
        self._open[row, col] = passable
        self._cells = None

    def is_passable(self, row: int, col: int) -> bool:
        self._check_coords(row, col)
        return bool(self._open[row, col])

    def _open_node(self, node: Node) -> tuple[int, int] | None:
        """Coordinates of node if it exists and can be entered, else None."""
        if not self.node_exists(node):
            return None
        r, c = divmod(node.id, self.cols)
        return (r, c) if self._grid()[r][c] else None

    def _grid(self) -> list[list[bool]]:
        if self._cells is None:
            self._cells = self._open.tolist()
        return self._cells

    def _open_neighbors(self, r: int, c: int) -> Iterator[tuple[int, int]]:
        cells = self._grid()
        for dr, dc in _NEIGHBOR_STEPS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < self._rows and 0 <= nc < self._cols and cells[nr][nc]:
                yield nr, nc

    # --------------- Graph -------------------------------

    def successors(self, node: Node) -> list[Node]:
        rc = self._open_node(node)
        if rc is None:
            return []
        cols = self.cols
        return [Node(r * cols + c) for r, c in self._open_neighbors(*rc)]

    def predecessors(self, node: Node) -> list[Node]:
        # an edge exists iff both tiles are open, so the relation is symmetric
        return self.successors(node)

    def is_successor(self, node: Node, successor: Node) -> bool:
        a, b = self._open_node(node), self._open_node(successor)
        if a is None or b is None:
            return False
        return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1

    def is_predecessor(self, node: Node, predecessor: Node) -> bool:
        return self.is_successor(predecessor, node)

    def is_adjacent(self, node: Node, neighbor: Node) -> bool:
        return self.is_successor(node, neighbor)

    def node_exists(self, node: Node) -> bool:
        return 0 <= node.id < self.rows * self.cols

    def degree(self, node: Node) -> int:
        return len(self.successors(node)) + len(self.predecessors(node))

    def cost(self, node: Node, successor: Node) -> float:
        return 1.0 if self.is_successor(node, successor) else 0.0

    def is_directed(self) -> bool:
        return False

    def node_list(self) -> list[Node]:
        return [Node(i) for i in range(self.rows * self.cols)]

    def edge_list(self) -> list[Edge]:
        return [Edge(n, s) for n in self.node_list() for s in self.successors(n)]

    # --------------- Rendering -----------------------------

    def _glyph_rows(self) -> list[list[str]]:
        return [[OPEN if cell else WALL for cell in row] for row in self._grid()]

    def render(self) -> str:
        return ROW_SEP.join("".join(row) for row in self._glyph_rows())

    def __str__(self) -> str:
        return self.render()

    def path_string(self, path: Sequence[Node] | None) -> str:
        """Render the grid with path overlaid: s at the start, g at the goal, ♥ between."""
        grid = self._glyph_rows()
        if path:
            last = len(path) - 1
            for i, node in enumerate(path):
                r, c = self.id_to_coords(node.id)
                grid[r][c] = PATH_START if i == 0 else PATH_GOAL if i == last else PATH_STEP
        return ROW_SEP.join("".join(row) for row in grid)


def generate_tile_graph(text: str) -> TileGraph:
    """
    Parse the text rendering of a tile graph.

    One line per grid row, one glyph per tile: WALL is impassable, OPEN is passable.
    Every row must have the same width; anything else is rejected, never padded.
    """
    if not text:
        raise TileGraphParseError("empty tile graph template")
    lines = text.split(ROW_SEP)
    width = len(lines[0])
    if width == 0:
        raise TileGraphParseError("row 0 is empty", row=0)

    tg = TileGraph(len(lines), width, passable=False)
    for r, line in enumerate(lines):
        if len(line) != width:
            raise TileGraphParseError(
                f"row {r} has {len(line)} tiles, expected {width}", row=r
            )
        for c, ch in enumerate(line):
            if ch == OPEN:
                tg.set_passability(r, c, True)
            elif ch != WALL:
                raise TileGraphParseError(
                    f"illegal glyph {ch!r} at row {r}, column {c}", row=r, col=c
                )
    return tg
