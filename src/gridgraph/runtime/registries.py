# runtime/registries.py
from collections.abc import Callable

from gridgraph.app.protocols import Graph, Heuristic
from gridgraph.config.models import (
    GeneralGraphModel,
    GraphUnion,
    HeuristicEuclideanModel,
    HeuristicManhattanModel,
    HeuristicUnion,
    HeuristicZeroModel,
    TileGridModel,
    TileTemplateModel,
)
from gridgraph.domain.concrete_graph import ConcreteGraph
from gridgraph.domain.entities.graph import Edge, Node
from gridgraph.domain.tile_graph import TileGraph, generate_tile_graph
from gridgraph.search.heuristics import euclidean, manhattan, zero_heuristic

GraphFactory = Callable[[GraphUnion], Graph]
HeuristicFactory = Callable[[HeuristicUnion, Graph], Heuristic]

_graph_registry: dict[str, GraphFactory] = {}
_heuristic_registry: dict[str, HeuristicFactory] = {}


# ------------------- Graphs ---------------------------


def register_graph(kind: str):
    def deco(fn: GraphFactory):
        _graph_registry[kind] = fn
        return fn

    return deco


def make_graph(cfg: GraphUnion) -> Graph:
    try:
        factory = _graph_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown graph kind {cfg.kind!r}") from None
    return factory(cfg)


@register_graph("tile")
def _make_tile(cfg: TileGridModel):
    tg = TileGraph(cfg.rows, cfg.cols, passable=cfg.passable)
    for r, c in cfg.toggle:
        tg.set_passability(r, c, not cfg.passable)
    return tg


@register_graph("tile_template")
def _make_tile_template(cfg: TileTemplateModel):
    return generate_tile_graph(cfg.template)


@register_graph("general")
def _make_general(cfg: GeneralGraphModel):
    g = ConcreteGraph(directed=cfg.directed)
    for nid in cfg.nodes:
        g.add_node(Node(nid))
    for e in cfg.edges:
        g.add_node(Node(e.head))
        g.add_edge(Edge(Node(e.head), Node(e.tail)), cost=e.cost)
    return g


# ------------------- Heuristics ---------------------------


def register_heuristic(kind: str):
    def deco(fn: HeuristicFactory):
        _heuristic_registry[kind] = fn
        return fn

    return deco


def make_heuristic(cfg: HeuristicUnion, *, graph: Graph) -> Heuristic:
    try:
        factory = _heuristic_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown heuristic kind {cfg.kind!r}") from None
    return factory(cfg, graph)


def _require_tiles(graph: Graph, kind: str) -> TileGraph:
    if not isinstance(graph, TileGraph):
        raise ValueError(f"{kind} heuristic needs a TileGraph, got {type(graph).__name__}")
    return graph


@register_heuristic("zero")
def _make_zero(cfg: HeuristicZeroModel, graph):
    return zero_heuristic


@register_heuristic("manhattan")
def _make_manhattan(cfg: HeuristicManhattanModel, graph):
    return manhattan(_require_tiles(graph, cfg.kind), weight=cfg.weight)


@register_heuristic("euclidean")
def _make_euclidean(cfg: HeuristicEuclideanModel, graph):
    return euclidean(_require_tiles(graph, cfg.kind), weight=cfg.weight)
