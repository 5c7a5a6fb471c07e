# state_search/algorithms/tree_search.py
# Generic tree and graph search drivers, parameterised by the fringe that orders pending nodes.
from __future__ import annotations
import logging
from typing import Optional, Set
from ..core.frontiers import FIFOQueue, LIFOStack
from ..core.node import Node
from ..core.problem import Problem

logger = logging.getLogger(__name__)


def tree_search(fringe, problem: Problem) -> Optional[Node]:
    """Search through the successors of a node to find a goal.

    ``fringe`` should be empty; its pop order decides the strategy. Repeated
    states are not detected, so this can run forever on a cyclic state space.
    Returns the goal node, or None once the fringe is exhausted.
    """
    fringe.push(Node.root(problem))
    while not fringe.empty():
        node = fringe.pop()
        if problem.goal_test(node.state):
            logger.debug("tree search: goal %r at depth %d", node.state, node.depth)
            return node
        fringe.extend(node.expand(problem))
    logger.debug("tree search: fringe exhausted")
    return None


def graph_search(fringe, problem: Problem) -> Optional[Node]:
    """Like tree_search, but each state is expanded at most once.

    A state is closed the first time a node for it is popped. Later nodes for
    a closed state are dropped whatever their cost, so the result is only
    cost-optimal when the fringe pops nodes in non-decreasing cost order
    (uniform-cost, or A* with a consistent heuristic). Cheaper paths to a
    state that is still waiting in the fringe are not merged either.
    States must be hashable.
    """
    closed: Set = set()
    fringe.push(Node.root(problem))
    while not fringe.empty():
        node = fringe.pop()
        if node.state in closed:
            continue
        closed.add(node.state)
        if problem.goal_test(node.state):
            logger.debug("graph search: goal %r at depth %d, %d states closed",
                         node.state, node.depth, len(closed))
            return node
        fringe.extend(node.expand(problem))
    logger.debug("graph search: fringe exhausted, %d states closed", len(closed))
    return None


def depth_first_tree_search(problem: Problem) -> Optional[Node]:
    """Search the deepest nodes in the search tree first."""
    return tree_search(LIFOStack(), problem)


def breadth_first_tree_search(problem: Problem) -> Optional[Node]:
    """Search the shallowest nodes in the search tree first."""
    return tree_search(FIFOQueue(), problem)


def depth_first_graph_search(problem: Problem) -> Optional[Node]:
    return graph_search(LIFOStack(), problem)


def breadth_first_graph_search(problem: Problem) -> Optional[Node]:
    return graph_search(FIFOQueue(), problem)
