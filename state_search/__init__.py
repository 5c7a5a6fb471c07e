# state_search/__init__.py
"""Generic state-space search: problems, search-tree nodes and interchangeable strategies."""
from .core.problem import Problem, CountingProblem
from .core.node import Node, root, expand, path
from .algorithms.tree_search import (
    tree_search,
    graph_search,
    depth_first_tree_search,
    breadth_first_tree_search,
    depth_first_graph_search,
    breadth_first_graph_search,
)
from .algorithms.depth_limited import DepthLimited, FAIL, CUTOFF, depth_limited_search
from .algorithms.ids import iterative_deepening_search
from .algorithms.best_first import best_first_tree_search, best_first_graph_search
from .algorithms.astar import a_star_search
from .algorithms.ucs import uniform_cost_search
from .algorithms.hill_climbing import hill_climbing_search

__all__ = [
    "Problem", "CountingProblem", "Node", "root", "expand", "path",
    "tree_search", "graph_search",
    "depth_first_tree_search", "breadth_first_tree_search",
    "depth_first_graph_search", "breadth_first_graph_search",
    "DepthLimited", "FAIL", "CUTOFF", "depth_limited_search",
    "iterative_deepening_search",
    "best_first_tree_search", "best_first_graph_search",
    "a_star_search", "uniform_cost_search", "hill_climbing_search",
]
