# search/astar.py

import heapq
import math
import time

from gridgraph.app.protocols import CostFunction, Graph, Heuristic
from gridgraph.domain.entities.graph import Node

from .heuristics import zero_heuristic
from .hooks import NoopHooks, SearchHooks

SearchResult = tuple[list[Node] | None, float, int]


def _reconstruct(came_from: dict[int, Node], goal: Node) -> list[Node]:
    path = [goal]
    while path[-1].id in came_from:
        path.append(came_from[path[-1].id])
    path.reverse()
    return path


def a_star(
    start: Node,
    goal: Node,
    graph: Graph,
    heuristic: Heuristic | None = None,
    cost: CostFunction | None = None,
    *,
    hooks: SearchHooks | None = None,
) -> SearchResult:
    """
    Best-first search from start to goal over any Graph.

    Returns (path, total_cost, nodes_expanded). path is None when the goal is
    unreachable (or either endpoint is not in the graph) and total_cost is then inf.
    heuristic defaults to zero, which makes this Dijkstra; cost overrides graph.cost.
    Optimality needs an admissible, consistent heuristic; that is not checked.
    """
    h = heuristic or zero_heuristic
    edge_cost = cost or graph.cost
    hooks = hooks or NoopHooks()

    t0 = time.perf_counter()
    hooks.search_start(start=start, goal=goal)

    def finish(path: list[Node] | None, total: float, expanded: int) -> SearchResult:
        hooks.search_end(
            start=start,
            goal=goal,
            found=path is not None,
            cost=total,
            expanded=expanded,
            path_len=len(path) if path else 0,
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        return path, total, expanded

    if not graph.node_exists(start) or not graph.node_exists(goal):
        return finish(None, math.inf, 0)

    g: dict[int, float] = {start.id: 0.0}
    came_from: dict[int, Node] = {}
    closed: set[int] = set()
    # (estimated total, insertion seq, node); seq keeps equal estimates FIFO
    open_q: list[tuple[float, int, Node]] = [(h(start, goal), 0, start)]
    seq = 0
    expanded = 0

    while open_q:
        f, _, node = heapq.heappop(open_q)
        if node.id in closed:
            continue  # stale entry superseded by a cheaper push
        expanded += 1
        hooks.expand(node, g=g[node.id], f=f, open_size=len(open_q), expanded=expanded)
        if node.id == goal.id:
            return finish(_reconstruct(came_from, node), g[node.id], expanded)
        closed.add(node.id)

        for succ in graph.successors(node):
            if succ.id in closed:
                continue
            step = edge_cost(node, succ)
            if not step >= 0:  # negative or nan
                raise ValueError(f"invalid edge cost {step} on {node.id} -> {succ.id}")
            tentative = g[node.id] + step
            if tentative < g.get(succ.id, math.inf):
                g[succ.id] = tentative
                came_from[succ.id] = node
                seq += 1
                heapq.heappush(open_q, (tentative + h(succ, goal), seq, succ))

    return finish(None, math.inf, expanded)
