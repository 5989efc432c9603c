from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from gridgraph.domain.entities.graph import Edge, Node


# ------------- Graph capabilities --------------------
@runtime_checkable
class Graph(Protocol):
    """
    Responsibilities:
      • Enumerate the successors of a node and answer adjacency queries.
      • Report the cost of an existing edge.
      • Tell whether a node belongs to the graph.
    Absent nodes are never an error: queries on them return empty/False/0.
    """

    def successors(self, node: Node) -> list[Node]: ...
    def predecessors(self, node: Node) -> list[Node]: ...
    def is_successor(self, node: Node, successor: Node) -> bool: ...
    def is_predecessor(self, node: Node, predecessor: Node) -> bool: ...
    def is_adjacent(self, node: Node, neighbor: Node) -> bool: ...
    def node_exists(self, node: Node) -> bool: ...
    def degree(self, node: Node) -> int: ...
    def cost(self, node: Node, successor: Node) -> float: ...
    def is_directed(self) -> bool: ...
    def node_list(self) -> list[Node]: ...
    def edge_list(self) -> list[Edge]: ...


@runtime_checkable
class MutableGraph(Graph, Protocol):
    """
    Responsibilities:
      • Add and remove nodes and edges, keeping both adjacency directions in sync.
      • Set edge costs in place.
      • Switch between directed and undirected while empty.
    Mutations on absent nodes/edges are silent no-ops.
    """

    def add_node(self, node: Node, successors: Iterable[Node] = ()) -> None: ...
    def add_edge(self, edge: Edge, cost: float = 1.0) -> None: ...
    def set_edge_cost(self, edge: Edge, cost: float) -> None: ...
    def remove_node(self, node: Node) -> None: ...
    def remove_edge(self, edge: Edge) -> None: ...
    def empty_graph(self) -> None: ...
    def set_directed(self, directed: bool) -> None: ...


# --------------- Search callbacks -------------------------


@runtime_checkable
class Heuristic(Protocol):
    """Non-negative estimate of the remaining cost from node to goal."""

    def __call__(self, node: Node, goal: Node) -> float: ...


@runtime_checkable
class CostFunction(Protocol):
    def __call__(self, node: Node, successor: Node) -> float: ...
