# io/search_logging.py
import json
import logging
import math
import sys

from gridgraph.search.hooks import NoopHooks


class JsonLineFormatter(logging.Formatter):
    """One JSON object per record; search fields ride in record.fields."""

    def format(self, record: logging.LogRecord) -> str:
        line = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "event": record.getMessage(),
            **getattr(record, "fields", {}),
        }
        return json.dumps(line, default=str)


def json_logger(name: str = "gridgraph", level: str = "INFO", stream=None) -> logging.Logger:
    logger = logging.getLogger(name)
    # configure once; later callers share the handler
    if not any(isinstance(h.formatter, JsonLineFormatter) for h in logger.handlers):
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(JsonLineFormatter())
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Structured JSON logs for search runs: one record at start and end, plus
    sampled expansion records when debug is on.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1000,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or json_logger(level=level)

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"fields": {**payload, **extra}})

    # --------------------------------------------------------

    def search_start(self, *, start, goal):
        self._emit("INFO", "search_start", start=start.id, goal=goal.id)

    def expand(self, node, *, g, f, open_size, expanded):
        if self.debug and (expanded % self.sample_every) == 0:
            self._emit("DEBUG", "expand", node=node.id, g=g, f=f, open_size=open_size, expanded=expanded)

    def search_end(self, *, start, goal, found, cost, expanded, path_len, wall_ms):
        self._emit(
            "INFO" if found else "WARNING",
            "search_end",
            start=start.id,
            goal=goal.id,
            found=found,
            cost=cost if math.isfinite(cost) else None,  # json has no inf
            expanded=expanded,
            path_len=path_len,
            wall_ms=round(wall_ms, 3),
        )
