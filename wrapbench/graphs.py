"""Shortest paths and minimum spanning trees on 64-bit weighted graphs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from wrapbench.uint64 import INT64_MAX, MASK, signed_less_than, to_signed, wrap

UNREACHABLE = MASK
NO_EDGE = MASK


@dataclass(frozen=True)
class Edge:
    """A directed edge from source to target with a 64-bit weight."""

    source: int
    target: int
    weight: int


class DisjointSet:
    """Union-find over the integers 0..size-1, without path compression."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.parent = list(range(size))

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, i: int) -> int:
        """Return the representative of the set holding i."""
        while self.parent[i] != i:
            i = self.parent[i]
        return i

    def union(self, i: int, j: int) -> None:
        """Merge the set holding i into the set holding j."""
        self.parent[self.find(i)] = self.find(j)


def _check_vertex(vertex: int, vertex_count: int, what: str) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"{what} {vertex} is not a vertex of a {vertex_count}-vertex graph")


def bellman_ford(
    edges: Iterable[Edge | tuple[int, int, int]], vertex_count: int, source: int = 0
) -> list[int]:
    """Distances from source, relaxing every edge vertex_count - 1 times.

    Distances start at INT64_MAX and are compared as signed 64-bit words.
    Sums wrap at 64 bits, so relaxing an edge that leaves a vertex not yet
    reached overflows into a negative distance.  The result is signed.
    """
    edge_list = [e if isinstance(e, Edge) else Edge(*e) for e in edges]
    _check_vertex(source, vertex_count, "source")
    for edge in edge_list:
        _check_vertex(edge.source, vertex_count, "edge source")
        _check_vertex(edge.target, vertex_count, "edge target")

    dist = [INT64_MAX] * vertex_count
    dist[source] = 0
    for _ in range(vertex_count - 1):
        for edge in edge_list:
            candidate = wrap(dist[edge.source] + wrap(edge.weight))
            if signed_less_than(candidate, dist[edge.target]):
                dist[edge.target] = candidate
    return [to_signed(d) for d in dist]


def min_distance(dist: Sequence[int], done: Sequence[bool]) -> int:
    """Index of the smallest distance not yet done; ties go to the later index."""
    best: int | None = None
    lowest = MASK
    for vertex, (distance, finished) in enumerate(zip(dist, done)):
        if not finished and wrap(distance) <= lowest:
            lowest = wrap(distance)
            best = vertex
    if best is None:
        raise ValueError("every vertex is already done")
    return best


def _square(matrix: Sequence[Sequence[int]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("the adjacency matrix must be square")
    return size


def dijkstra(matrix: Sequence[Sequence[int]], source: int = 0) -> list[int]:
    """Distances from source over an adjacency matrix where 0 means no edge.

    Unreached vertices keep the distance UNREACHABLE (all ones).
    """
    size = _square(matrix)
    _check_vertex(source, size, "source")
    dist = [UNREACHABLE] * size
    done = [False] * size
    dist[source] = 0
    for _ in range(size - 1):
        u = min_distance(dist, done)
        done[u] = True
        if dist[u] == UNREACHABLE:
            continue
        for v, weight in enumerate(matrix[u]):
            weight = wrap(weight)
            if done[v] or weight == 0:
                continue
            candidate = wrap(dist[u] + weight)
            if candidate < dist[v]:
                dist[v] = candidate
    return dist


def kruskal_mst(cost: Sequence[Sequence[int]]) -> int:
    """Total weight of a minimum spanning tree; NO_EDGE marks a missing edge.

    Each round takes the cheapest edge joining two different trees, the first
    one found on ties.  A graph that cannot be spanned is an error.
    """
    size = _square(cost)
    sets = DisjointSet(size)
    total = 0
    for _ in range(size - 1):
        cheapest = NO_EDGE
        pick: tuple[int, int] | None = None
        for i, row in enumerate(cost):
            for j, weight in enumerate(row):
                weight = wrap(weight)
                if sets.find(i) != sets.find(j) and weight < cheapest:
                    cheapest = weight
                    pick = (i, j)
        if pick is None:
            raise ValueError("the graph is not connected")
        sets.union(*pick)
        total = wrap(total + cheapest)
    return total