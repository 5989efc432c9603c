from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from gridgraph.domain.tile_graph import generate_tile_graph


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1000, ge=1)  # expand records


# ----------------- GRAPHS ---------------------


class TileGridModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["tile"] = "tile"
    rows: int = Field(gt=0)
    cols: int = Field(gt=0)
    passable: bool = True
    toggle: list[tuple[int, int]] = Field(default_factory=list)  # cells flipped from default

    @model_validator(mode="after")
    def _check_toggle(self):
        for r, c in self.toggle:
            if not (0 <= r < self.rows and 0 <= c < self.cols):
                raise ValueError(f"toggle cell ({r}, {c}) outside {self.rows}x{self.cols} grid")
        return self

    @property
    def node_count(self) -> int:
        return self.rows * self.cols


class TileTemplateModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["tile_template"] = "tile_template"
    template: str

    @field_validator("template")
    @classmethod
    def _parses(cls, v: str) -> str:
        generate_tile_graph(v)  # TileGraphParseError is a ValueError
        return v

    @property
    def node_count(self) -> int:
        lines = self.template.split("\n")
        return len(lines) * len(lines[0])


class EdgeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    head: int
    tail: int
    cost: float = 1.0

    @field_validator("cost")
    def _nonneg(cls, v: float, info: ValidationInfo) -> float:
        if not v >= 0:  # also rejects nan
            raise ValueError(f"{info.field_name} must be >= 0, got {v}")
        return v


class GeneralGraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["general"] = "general"
    directed: bool = False
    nodes: list[int] = Field(default_factory=list)  # isolated nodes; edge endpoints are implied
    edges: list[EdgeModel] = Field(default_factory=list)

    def node_ids(self) -> set[int]:
        return set(self.nodes) | {e.head for e in self.edges} | {e.tail for e in self.edges}


GraphUnion = Annotated[
    TileGridModel | TileTemplateModel | GeneralGraphModel,
    Field(discriminator="kind"),
]

# ----------------- HEURISTICS ---------------------


class HeuristicZeroModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["zero"] = "zero"


class HeuristicManhattanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["manhattan"] = "manhattan"
    weight: float = Field(default=1.0, ge=0.0)  # > 1 trades optimality for speed


class HeuristicEuclideanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["euclidean"] = "euclidean"
    weight: float = Field(default=1.0, ge=0.0)


HeuristicUnion = Annotated[
    HeuristicZeroModel | HeuristicManhattanModel | HeuristicEuclideanModel,
    Field(discriminator="kind"),
]


# ------------------------------------------------------------------


class SearchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    start: int = Field(ge=0)
    goal: int = Field(ge=0)
    heuristic: HeuristicUnion = Field(default_factory=HeuristicZeroModel)


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    graph: GraphUnion
    search: SearchModel
    log: LogModel = LogModel()

    @model_validator(mode="after")
    def _check_search(self):
        if isinstance(self.graph, GeneralGraphModel):
            if self.search.heuristic.kind != "zero":
                raise ValueError(
                    f"heuristic {self.search.heuristic.kind!r} needs a tile graph"
                )
            known = self.graph.node_ids()
        else:
            known = range(self.graph.node_count)
        for field_name in ("start", "goal"):
            nid = getattr(self.search, field_name)
            if nid not in known:
                raise ValueError(f"search.{field_name}={nid} is not a node of the graph")
        return self
