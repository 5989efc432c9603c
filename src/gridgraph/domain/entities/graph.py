from dataclasses import dataclass


# Identity types shared by every graph implementation
@dataclass(frozen=True)
class Node:
    id: int  # unique within one graph instance


@dataclass(frozen=True)
class Edge:
    head: Node
    tail: Node  # arc runs head -> tail
