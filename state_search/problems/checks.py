# state_search/problems/checks.py
from __future__ import annotations
from collections import deque
from ..core.problem import Problem


def sanity_check_problem(problem: Problem, max_states: int = 10_000) -> str:
    """Walks states breadth-first and checks path_cost never returns None or lowers the cost."""
    seen = set()
    q = deque([(problem.initial(), 0.0)])
    while q and len(seen) < max_states:
        s, c = q.popleft()
        if s in seen:
            continue
        seen.add(s)
        for a, s2 in problem.successor(s):
            c2 = problem.path_cost(c, s, a, s2)
            if c2 is None:
                raise AssertionError(f"path_cost is None for (s={s!r}, a={a!r}, s'={s2!r})")
            if c2 < c:
                raise AssertionError(
                    f"path_cost decreased from {c} to {c2} for (s={s!r}, a={a!r}, s'={s2!r})"
                )
            q.append((s2, c2))
    return f"OK: visited {len(seen)} states; costs never None or decreasing."
