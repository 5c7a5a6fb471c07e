# state_search/algorithms/hill_climbing.py
# Steepest-ascent hill climbing over the problem's optimization value.
from __future__ import annotations
import logging
from typing import Callable, Optional
from ..core.node import Node
from ..core.problem import Problem
from ..core.utils import argmax

logger = logging.getLogger(__name__)


def _rank(v: Optional[float]) -> float:
    # a missing value ranks below every real value
    return float("-inf") if v is None else v


def hill_climbing_search(problem: Problem,
                         value: Optional[Callable[[Node], Optional[float]]] = None) -> Node:
    """From the root, keep moving to the best-valued neighbour; stop when no
    neighbour is strictly better and return the current node (a local optimum).

    ``value`` scores a node; by default its ``value`` field, which Node.expand
    fills from the *parent's* state. Pass ``lambda n: problem.value(n.state)``
    to score each neighbour by its own state.

    Raises ValueError if a node on the way has no successors.
    """
    score = value or (lambda n: n.value)
    node = Node.root(problem)
    while True:
        children = list(node.expand(problem))
        if not children:
            raise ValueError(f"hill climbing: state {node.state!r} has no successors")
        neighbour = argmax(children, lambda n: _rank(score(n)))
        if _rank(score(neighbour)) <= _rank(score(node)):
            logger.debug("hill climbing: local optimum %r at depth %d", node.state, node.depth)
            return node
        node = neighbour
