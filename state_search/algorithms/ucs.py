# This code implements Uniform Cost Search (UCS) by reusing the generic best-first search function.
# state_search/algorithms/ucs.py
from __future__ import annotations
from typing import Optional
from .best_first import best_first_graph_search
from ..core.node import Node
from ..core.problem import Problem

def uniform_cost_search(problem: Problem) -> Optional[Node]:
    return best_first_graph_search(lambda n: n.path_cost, problem)
