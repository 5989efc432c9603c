# search/hooks.py
from typing import Protocol

from gridgraph.domain.entities.graph import Node


class SearchHooks(Protocol):
    def search_start(self, *, start: Node, goal: Node): ...
    def expand(self, node: Node, *, g, f, open_size, expanded): ...
    def search_end(self, *, start: Node, goal: Node, found, cost, expanded, path_len, wall_ms): ...


class NoopHooks:
    def search_start(self, **_):
        pass

    def expand(self, *_, **__):
        pass

    def search_end(self, **_):
        pass
