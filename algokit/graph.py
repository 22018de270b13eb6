"""An adjacency-list graph and a reader for its text form."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional, TextIO

MAXV = 100


@dataclass
class EdgeNode:
    """One entry of an adjacency list."""

    y: int
    weight: int = 0
    next: Optional["EdgeNode"] = None


class Graph:
    """A graph of at most ``MAXV`` vertices stored as linked adjacency lists.

    New edges are put at the front of a vertex's list, so neighbours come
    out in reverse insertion order.
    """

    def __init__(self, directed: bool = False) -> None:
        self.nvertices = 0
        self.nedges = 0
        self.directed = directed
        self.degree: list[int] = [0] * MAXV
        self.edges: list[Optional[EdgeNode]] = [None] * MAXV

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < MAXV:
            raise IndexError(f"vertex {vertex} out of range")

    def insert_edge(self, x: int, y: int, directed: Optional[bool] = None) -> None:
        """Add the edge ``(x, y)``; an undirected edge is stored in both lists."""
        if directed is None:
            directed = self.directed
        self._check_vertex(x)
        self._check_vertex(y)
        self.edges[x] = EdgeNode(y, 0, self.edges[x])
        self.degree[x] += 1
        if directed:
            self.nedges += 1
        else:
            self.insert_edge(y, x, True)

    def neighbours(self, x: int) -> Iterator[int]:
        """Yield the vertices adjacent to ``x``, most recently added first."""
        self._check_vertex(x)
        node = self.edges[x]
        while node is not None:
            yield node.y
            node = node.next

    def format(self) -> str:
        """Render one line per vertex ``1..nvertices`` listing its neighbours."""
        return "\n".join(
            f"{vertex}: " + "".join(f" {y}" for y in self.neighbours(vertex))
            for vertex in range(1, self.nvertices + 1)
        )


def read_graph(stream: TextIO, directed: bool = False) -> Graph:
    """Read a graph: vertex count, edge count, then one ``x y`` pair per edge."""
    tokens = iter(stream.read().split())

    def next_int(what: str) -> int:
        try:
            return int(next(tokens))
        except StopIteration:
            raise ValueError(f"unexpected end of input reading {what}") from None

    graph = Graph(directed)
    nvertices = next_int("vertex count")
    if not 0 <= nvertices < MAXV:
        raise ValueError(f"vertex count {nvertices} out of range")
    graph.nvertices = nvertices
    edge_count = next_int("edge count")
    for _ in range(edge_count):
        x = next_int("edge")
        y = next_int("edge")
        graph.insert_edge(x, y, directed)
    return graph