from __future__ import annotations
import itertools
import logging
from typing import Optional
from ..core.node import Node
from ..core.problem import Problem
from .depth_limited import depth_limited_search

logger = logging.getLogger(__name__)


def iterative_deepening_search(problem: Problem, max_depth: Optional[int] = None) -> Optional[Node]:
    """
    Repeats depth-limited search with limits 1, 2, 3, ...

    Stops with the goal node on OK and with None on FAIL; a CUTOFF moves on to
    the next limit. Without ``max_depth`` this never returns on an infinite
    state space that has no goal. With it, the search gives up (returns None)
    once the limit ``max_depth`` still ends in a cutoff.
    """
    for limit in itertools.count(1):
        if max_depth is not None and limit > max_depth:
            logger.warning("iterative deepening: gave up, still cut off at depth %d", max_depth)
            return None
        result = depth_limited_search(limit, problem)
        logger.debug("iterative deepening: limit %d -> %s", limit, result.outcome.value)
        if result.is_ok:
            return result.node
        if result.is_fail:
            return None
