import math

from gridgraph.app.protocols import Heuristic
from gridgraph.domain.entities.graph import Node
from gridgraph.domain.tile_graph import TileGraph


def zero_heuristic(node: Node, goal: Node) -> float:
    return 0.0


def manhattan(graph: TileGraph, weight: float = 1.0) -> Heuristic:
    """Grid distance on a 4-connected tile graph; admissible for weight <= 1."""

    def h(node: Node, goal: Node) -> float:
        r0, c0 = graph.id_to_coords(node.id)
        r1, c1 = graph.id_to_coords(goal.id)
        return weight * (abs(r1 - r0) + abs(c1 - c0))

    return h


def euclidean(graph: TileGraph, weight: float = 1.0) -> Heuristic:
    def h(node: Node, goal: Node) -> float:
        r0, c0 = graph.id_to_coords(node.id)
        r1, c1 = graph.id_to_coords(goal.id)
        return weight * math.hypot(r1 - r0, c1 - c0)

    return h
