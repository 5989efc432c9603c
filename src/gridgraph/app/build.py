# gridgraph/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from gridgraph.app.protocols import Graph, Heuristic
from gridgraph.config.models import ScenarioModel
from gridgraph.domain.entities.graph import Node
from gridgraph.io.search_logging import SearchLogging  # JSON logs
from gridgraph.runtime.registries import make_graph, make_heuristic
from gridgraph.search.astar import SearchResult, a_star
from gridgraph.search.hooks import NoopHooks, SearchHooks


@dataclass
class App:
    graph: Graph
    heuristic: Heuristic
    hooks: SearchHooks
    start: Node
    goal: Node

    def solve(self) -> SearchResult:
        return a_star(self.start, self.goal, self.graph, self.heuristic, hooks=self.hooks)


def build(cfg: ScenarioModel | Mapping, *, use_logging: bool = True) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Graph & heuristic
    graph = make_graph(model.graph)
    heuristic = make_heuristic(model.search.heuristic, graph=graph)

    # 2) Hooks
    hooks = (
        SearchLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    return App(graph, heuristic, hooks, Node(model.search.start), Node(model.search.goal))
