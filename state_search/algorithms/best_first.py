from __future__ import annotations
from typing import Callable, Optional
from ..core.frontiers import PriorityQueue
from ..core.node import Node
from ..core.problem import Problem
from .tree_search import graph_search, tree_search


def best_first_tree_search(f: Callable[[Node], float], problem: Problem) -> Optional[Node]:
    """Tree search that always pops the node minimising f(node)."""
    return tree_search(PriorityQueue(key=f), problem)


def best_first_graph_search(f: Callable[[Node], float], problem: Problem) -> Optional[Node]:
    """Graph search that always pops the node minimising f(node).

    Inherits graph_search's closed-set rule: optimal only when f never
    decreases along a path (e.g. path cost, or g + a consistent heuristic).
    """
    return graph_search(PriorityQueue(key=f), problem)
