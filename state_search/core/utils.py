# state_search/core/utils.py
# Helpers shared by the search algorithms: solution reconstruction and argmax.
from __future__ import annotations
from typing import Callable, Iterable, List, Tuple, TypeVar
from .node import Node

T = TypeVar("T")


def reconstruct_path(node: Node) -> Tuple[List, float]:
    actions = []
    cost = float(node.path_cost)
    cur = node
    while cur.parent is not None:
        actions.append(cur.action)
        cur = cur.parent
    actions.reverse()
    return actions, cost


def argmax(seq: Iterable[T], fn: Callable[[T], object]) -> T:
    """Element of ``seq`` with the largest fn(x); the last one wins ties.

    Raises ValueError on an empty sequence.
    """
    best, best_score, found = None, None, False
    for x in seq:
        score = fn(x)
        if not found or score >= best_score:
            best, best_score, found = x, score, True
    if not found:
        raise ValueError("argmax() of an empty sequence")
    return best
