# state_search/algorithms/depth_limited.py
# This code implements Depth-Limited Search (DLS): recursive depth-first search with a hard depth ceiling.
from __future__ import annotations
import enum
import logging
from dataclasses import dataclass
from typing import Optional
from ..core.node import Node
from ..core.problem import Problem

logger = logging.getLogger(__name__)


class Outcome(enum.Enum):
    FAIL = "fail"
    CUTOFF = "cutoff"
    OK = "ok"


@dataclass(frozen=True)
class DepthLimited:
    """Result of depth-limited search.

    FAIL: the subtree within the limit holds no goal and nothing was cut off.
    CUTOFF: no goal found, but the limit stopped at least one branch.
    OK: ``node`` is a goal.
    """
    outcome: Outcome
    node: Optional[Node] = None

    @classmethod
    def ok(cls, node: Node) -> "DepthLimited":
        return cls(Outcome.OK, node)

    @property
    def is_ok(self) -> bool:
        return self.outcome is Outcome.OK

    @property
    def is_cutoff(self) -> bool:
        return self.outcome is Outcome.CUTOFF

    @property
    def is_fail(self) -> bool:
        return self.outcome is Outcome.FAIL


FAIL = DepthLimited(Outcome.FAIL)
CUTOFF = DepthLimited(Outcome.CUTOFF)


def depth_limited_search(limit: int, problem: Problem) -> DepthLimited:
    if limit < 0:
        raise ValueError(f"depth limit must be non-negative, got {limit}")

    result = _search(Node.root(problem), limit, problem)
    logger.debug("depth-limited search (limit=%d): %s", limit, result.outcome.value)
    return result


class _Frame:
    """A node whose children are being explored, and whether any of them was cut off."""
    __slots__ = ("children", "cutoff")

    def __init__(self, node: Node, problem: Problem):
        self.children = node.expand(problem)
        self.cutoff = False


def _search(root: Node, limit: int, problem: Problem) -> DepthLimited:
    # Depth-first with an explicit stack, so deep limits don't hit the interpreter's recursion limit.
    if problem.goal_test(root.state):
        return DepthLimited.ok(root)
    if root.depth == limit:
        return CUTOFF
    stack = [_Frame(root, problem)]
    while stack:
        frame = stack[-1]
        child = next(frame.children, None)
        if child is None:
            stack.pop()
            if not stack:
                return CUTOFF if frame.cutoff else FAIL
            if frame.cutoff:
                stack[-1].cutoff = True
            continue
        if problem.goal_test(child.state):
            return DepthLimited.ok(child)  # remaining siblings are never generated
        if child.depth == limit:
            frame.cutoff = True
        else:
            stack.append(_Frame(child, problem))
    return FAIL
