# state_search/core/metrics.py
# Timing, memory and expansion statistics for comparing search strategies.
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, List, Optional
import logging
import time, tracemalloc

from .node import Node
from .problem import CountingProblem, Problem
from .utils import reconstruct_path

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    algo: str
    success: bool
    actions: List[Any]
    cost: float
    nodes_expanded: int
    time_s: float
    peak_kb: int
    error: Optional[str] = None

    def to_row(self) -> Dict[str, Any]:
        """JSON-friendly dict; non-primitive actions are stored by repr."""
        row = asdict(self)
        row["actions"] = [a if isinstance(a, (str, int, float)) else repr(a) for a in self.actions]
        return row


class MeasuredRun:
    """
    Context manager for wall time and (approximate) peak traced memory.
    .elapsed and .peak_kb may be read inside or after the with-block.
    """
    def __init__(self) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0

    def __enter__(self) -> "MeasuredRun":
        tracemalloc.start()
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        _, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()
        self._peak_kb = max(self._peak_kb, peak // 1024)
        return False

    @property
    def elapsed(self) -> float:
        if self.t0 is None:
            return 0.0
        return (self.t1 if self.t1 is not None else time.perf_counter()) - self.t0

    @property
    def peak_kb(self) -> int:
        if self.t0 is not None and self.t1 is None:
            _, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb


def measure(name: str, search: Callable[[Problem], Optional[Node]], problem: Problem) -> SearchResult:
    """Run ``search(problem)`` and collect a SearchResult.

    Node expansions are counted through a CountingProblem wrapper, so the
    search functions themselves stay free of bookkeeping.
    """
    counted = CountingProblem(problem)
    with MeasuredRun() as meter:
        node = search(counted)
    if node is None:
        logger.debug("%s: no solution after %d expansions", name, counted.expansions)
        return SearchResult(name, False, [], float("inf"), counted.expansions,
                            meter.elapsed, meter.peak_kb)
    actions, cost = reconstruct_path(node)
    # local search returns a local optimum, which need not be a goal
    success = problem.goal_test(node.state)
    logger.debug("%s: %s node of cost %s after %d expansions",
                 name, "goal" if success else "non-goal", cost, counted.expansions)
    return SearchResult(name, success, actions, cost, counted.expansions, meter.elapsed, meter.peak_kb)
