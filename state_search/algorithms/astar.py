# state_search/algorithms/astar.py
from __future__ import annotations
from typing import Callable, Optional
from .best_first import best_first_graph_search
from ..core.node import Node
from ..core.problem import Problem


def a_star_search(h: Callable[[Node], float], problem: Problem) -> Optional[Node]:
    """Best-first graph search on f(n) = h(n) + g(n).

    The returned node has minimum path cost when h is admissible and
    consistent.
    """
    return best_first_graph_search(lambda n: h(n) + n.path_cost, problem)
