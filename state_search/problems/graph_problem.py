# state_search/problems/graph_problem.py
# This code defines a route-finding problem over a GraphMap: states are vertices and each action names the next vertex.
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Iterable, Tuple
from ..core.node import Node
from ..core.problem import Problem, State, Action
from .graph import GraphMap, Vertex, cost_from_to, euclidean_distance, make_graph_map


@dataclass
class GraphProblem(Problem):
    graph_map: GraphMap
    start: Vertex
    target: Vertex

    def initial(self) -> State: return self.start
    def goal(self) -> State: return self.target

    def successor(self, s: State) -> Iterable[Tuple[Action, State]]:
        for v, _ in self.graph_map.neighbours(s):
            yield v, v

    def path_cost(self, c: float, s: State, a: Action, s2: State) -> float:
        return c + cost_from_to(self.graph_map, s, s2)


def make_heuristic(problem: GraphProblem) -> Callable[[Node], float]:
    """Straight-line distance from a node's vertex to the goal vertex."""
    gm = problem.graph_map
    def h(n: Node) -> float:
        return euclidean_distance(gm.location(n.state), gm.location(problem.target))
    return h


def sample_graph_map() -> GraphMap:
    return make_graph_map(
        [("A", [("B", 5), ("C", 3)]),
         ("B", [("D", 6)]),
         ("C", [("D", 4)])],
        [("A", (0, 0)), ("B", (1, 1)), ("C", (1, -1)), ("D", (2, 0))],
    )


def sample_graph_problem() -> GraphProblem:
    return GraphProblem(sample_graph_map(), "A", "D")
