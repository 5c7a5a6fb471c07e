# state_search/problems/graph.py
# Undirected weighted graph plus vertex locations, used by the route-finding problems.
from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, List, Mapping, Tuple

Vertex = Hashable
Point = Tuple[float, float]


class VertexNotFoundError(KeyError):
    """A vertex has no recorded location; the graph map is misconfigured."""


class Graph:
    """Adjacency map vertex -> {neighbour: weight}."""
    def __init__(self, adjacency: Dict[Vertex, Dict[Vertex, float]] | None = None):
        self.adj: Dict[Vertex, Dict[Vertex, float]] = adjacency or {}

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[Vertex, Iterable[Tuple[Vertex, float]]]]) -> "Graph":
        """Build an undirected graph; every edge is inserted in both directions."""
        g = cls()
        for a, links in edges:
            for b, w in links:
                g.connect(a, b, w)
        return g

    def connect(self, a: Vertex, b: Vertex, weight: float) -> None:
        self.adj.setdefault(a, {})[b] = weight
        self.adj.setdefault(b, {})[a] = weight

    def neighbours(self, v: Vertex) -> List[Tuple[Vertex, float]]:
        return list(self.adj.get(v, {}).items())

    def vertices(self) -> List[Vertex]:
        return list(self.adj)

    def __contains__(self, v: Vertex) -> bool:
        return v in self.adj


@dataclass
class GraphMap:
    graph: Graph
    locations: Mapping[Vertex, Point] = field(default_factory=dict)

    def neighbours(self, v: Vertex) -> List[Tuple[Vertex, float]]:
        return self.graph.neighbours(v)

    def location(self, v: Vertex) -> Point:
        try:
            return self.locations[v]
        except KeyError:
            raise VertexNotFoundError(f"Vertex {v!r} not found in graph!") from None


def make_graph_map(connections, locations) -> GraphMap:
    """connections: [(vertex, [(neighbour, weight), ...]), ...]
    locations: [(vertex, (x, y)), ...] or a mapping."""
    return GraphMap(Graph.from_edges(connections), dict(locations))


def cost_from_to(graph_map: GraphMap, a: Vertex, b: Vertex) -> float:
    """Weight of the edge a-b, or +inf when they are not directly connected."""
    return float(graph_map.graph.adj.get(a, {}).get(b, math.inf))


def euclidean_distance(p: Point, q: Point) -> float:
    (x1, y1), (x2, y2) = p, q
    return math.hypot(x1 - x2, y1 - y2)
