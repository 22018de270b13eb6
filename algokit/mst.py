"""Weighted adjacency-list graphs and Prim's minimum spanning tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

MAXV = 100
MAXINT = 1_000_000


@dataclass
class WeightedEdge:
    """One entry of a weighted adjacency list."""

    y: int
    weight: int
    next: Optional["WeightedEdge"] = None


@dataclass
class SpanningTree:
    """Tree edges as ``(parent, vertex)`` pairs in the order added, and their total weight."""

    edges: list[tuple[int, int]] = field(default_factory=list)
    weight: int = 0


class WeightedGraph:
    """A weighted graph on vertices ``1..nvertices``."""

    def __init__(self, nvertices: int, directed: bool = False) -> None:
        if not 0 <= nvertices <= MAXV:
            raise ValueError(f"vertex count {nvertices} out of range")
        self.nvertices = nvertices
        self.nedges = 0
        self.directed = directed
        self.edges: list[Optional[WeightedEdge]] = [None] * (MAXV + 1)

    def _check_vertex(self, vertex: int) -> None:
        if not 1 <= vertex <= self.nvertices:
            raise IndexError(f"vertex {vertex} out of range")

    def insert_edge(
        self, x: int, y: int, weight: int, directed: Optional[bool] = None
    ) -> None:
        """Add the edge ``(x, y)`` of the given weight."""
        if directed is None:
            directed = self.directed
        self._check_vertex(x)
        self._check_vertex(y)
        self.edges[x] = WeightedEdge(y, weight, self.edges[x])
        if directed:
            self.nedges += 1
        else:
            self.insert_edge(y, x, weight, True)

    def edges_from(self, x: int) -> Iterator[WeightedEdge]:
        """Yield the edges leaving ``x``, most recently added first."""
        self._check_vertex(x)
        edge = self.edges[x]
        while edge is not None:
            yield edge
            edge = edge.next


def prim(graph: WeightedGraph, start: int = 1) -> SpanningTree:
    """Grow a minimum spanning tree from ``start`` and return it.

    Vertices not reachable from ``start`` are left out of the tree.
    """
    if not 1 <= start <= graph.nvertices:
        raise IndexError(f"start vertex {start} out of range")
    vertices = range(1, graph.nvertices + 1)
    intree = {v: False for v in vertices}
    distance = {v: MAXINT for v in vertices}
    parent = {v: -1 for v in vertices}

    tree = SpanningTree()
    distance[start] = 0
    v = start
    while not intree[v]:
        intree[v] = True
        if v != start:
            tree.edges.append((parent[v], v))
            tree.weight += distance[v]
        for edge in graph.edges_from(v):
            w = edge.y
            if distance[w] > edge.weight and not intree[w]:
                distance[w] = edge.weight
                parent[w] = v
        best = MAXINT
        for candidate in vertices:
            if not intree[candidate] and best > distance[candidate]:
                best = distance[candidate]
                v = candidate
    return tree