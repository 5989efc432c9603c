from collections.abc import Sequence

from gridgraph.app.protocols import CostFunction, Graph
from gridgraph.domain.entities.graph import Node


def is_path(path: Sequence[Node] | None, graph: Graph) -> bool:
    """True if each step follows a graph edge. None, empty and single-node paths are valid."""
    if not path or len(path) == 1:
        return True
    return all(graph.is_successor(a, b) for a, b in zip(path, path[1:]))


def path_cost(path: Sequence[Node] | None, graph: Graph, cost: CostFunction | None = None) -> float:
    if path is None:
        raise ValueError("no path to cost (search found none)")
    if not is_path(path, graph):
        raise ValueError("sequence is not a path in this graph")
    edge_cost = cost or graph.cost
    return sum((edge_cost(a, b) for a, b in zip(path, path[1:])), 0.0)
