from collections.abc import Iterable

from gridgraph.app.protocols import MutableGraph
from gridgraph.domain.entities.graph import Edge, Node


class ConcreteGraph(MutableGraph):
    """
    General graph with arbitrary topology, directed or undirected.

    Keeps a successor map AND a predecessor map (id -> {id: cost}) so both
    directions are O(1). A node exists iff its id is a key of both maps;
    every write goes through _ensure_node/_link/_unlink so the two stay mirrored.
    """

    def __init__(self, directed: bool = False):
        self._succ: dict[int, dict[int, float]] = {}
        self._pred: dict[int, dict[int, float]] = {}
        self._nodes: dict[int, Node] = {}
        self._directed = directed

    # --------------- Helpers -----------------------------

    def _ensure_node(self, node: Node) -> None:
        if node.id in self._succ:
            return
        self._nodes[node.id] = node
        self._succ[node.id] = {}
        self._pred[node.id] = {}

    def _link(self, a: int, b: int, cost: float) -> None:
        self._succ[a][b] = cost
        self._pred[b][a] = cost
        if not self._directed:
            self._succ[b][a] = cost
            self._pred[a][b] = cost

    def _unlink(self, a: int, b: int) -> None:
        self._succ[a].pop(b, None)
        self._pred[b].pop(a, None)
        if not self._directed:
            self._succ[b].pop(a, None)
            self._pred[a].pop(b, None)

    # --------------- Mutable graph -----------------------

    def add_node(self, node: Node, successors: Iterable[Node] = ()) -> None:
        if node.id in self._succ:
            return
        self._ensure_node(node)
        for s in successors:
            self._ensure_node(s)
            self._link(node.id, s.id, 1.0)

    def new_node(self, successors: Iterable[Node] = ()) -> Node:
        """Add a node under the lowest unused non-negative id and return it."""
        nid = 0
        while nid in self._succ:
            nid += 1
        node = Node(nid)
        self.add_node(node, successors)
        return node

    def add_edge(self, edge: Edge, cost: float = 1.0) -> None:
        if edge.head.id not in self._succ:
            return
        self._ensure_node(edge.tail)
        self._link(edge.head.id, edge.tail.id, cost)

    def set_edge_cost(self, edge: Edge, cost: float) -> None:
        a, b = edge.head.id, edge.tail.id
        if a not in self._succ or b not in self._succ[a]:
            return
        self._link(a, b, cost)

    def remove_node(self, node: Node) -> None:
        nid = node.id
        if nid not in self._succ:
            return
        for s in self._succ.pop(nid):
            if s != nid:
                self._pred[s].pop(nid, None)
        for p in self._pred.pop(nid):
            if p != nid:
                self._succ[p].pop(nid, None)
        del self._nodes[nid]

    def remove_edge(self, edge: Edge) -> None:
        a, b = edge.head.id, edge.tail.id
        if a not in self._succ or b not in self._succ:
            return
        self._unlink(a, b)

    def empty_graph(self) -> None:
        self._succ, self._pred, self._nodes = {}, {}, {}

    def set_directed(self, directed: bool) -> None:
        # directedness is fixed once the first node exists
        if self._succ:
            return
        self._directed = directed

    # --------------- Graph -------------------------------

    def successors(self, node: Node) -> list[Node]:
        return [self._nodes[s] for s in self._succ.get(node.id, ())]

    def predecessors(self, node: Node) -> list[Node]:
        return [self._nodes[p] for p in self._pred.get(node.id, ())]

    def is_successor(self, node: Node, successor: Node) -> bool:
        return successor.id in self._succ.get(node.id, ())

    def is_predecessor(self, node: Node, predecessor: Node) -> bool:
        return predecessor.id in self._pred.get(node.id, ())

    def is_adjacent(self, node: Node, neighbor: Node) -> bool:
        return self.is_successor(node, neighbor) or self.is_predecessor(node, neighbor)

    def node_exists(self, node: Node) -> bool:
        return node.id in self._succ

    def degree(self, node: Node) -> int:
        if node.id not in self._succ:
            return 0
        return len(self._succ[node.id]) + len(self._pred[node.id])

    def cost(self, node: Node, successor: Node) -> float:
        return self._succ.get(node.id, {}).get(successor.id, 0.0)

    def is_directed(self) -> bool:
        return self._directed

    def node_list(self) -> list[Node]:
        return list(self._nodes.values())

    def edge_list(self) -> list[Edge]:
        return [
            Edge(self._nodes[a], self._nodes[b]) for a, succ in self._succ.items() for b in succ
        ]

    def __len__(self) -> int:
        return len(self._nodes)
