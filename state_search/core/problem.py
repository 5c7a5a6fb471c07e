# Defines the standard interface for any search problem (initial state, successors, goal, costs, value).
# state_search/core/problem.py
from __future__ import annotations
from typing import Any, Iterable, Tuple, Optional, Hashable

Action = Any
State = Hashable


class Problem:
    """Abstract state-space search problem.

    A minimal subclass provides ``initial`` and ``successor`` plus one of
    ``goal`` or ``goal_test``. The remaining methods have defaults:

    - goal_test(s): s == goal()
    - path_cost(c, s, a, s2): c + 1 (unit-cost search)
    - value(s): None (the problem has no optimization value)
    """

    def initial(self) -> State:
        """The start state. Called once per search."""
        raise NotImplementedError(f"{type(self).__name__} must define initial()")

    def successor(self, state: State) -> Iterable[Tuple[Action, State]]:
        """(action, next_state) pairs reachable from ``state``.

        Searches may stop consuming this after a prefix, so implementations
        should yield lazily rather than build the whole collection when the
        state space is large or unbounded.
        """
        raise NotImplementedError(f"{type(self).__name__} must define successor()")

    def goal(self) -> State:
        """The single goal state, used by the default ``goal_test``."""
        raise NotImplementedError(
            f"{type(self).__name__} must define goal() or override goal_test()"
        )

    def goal_test(self, state: State) -> bool:
        return state == self.goal()

    def path_cost(self, c: float, state: State, action: Action, next_state: State) -> float:
        """Cost of a path arriving at ``next_state`` from ``state`` via ``action``,
        given the cost ``c`` accumulated so far. Must not have side effects."""
        return c + 1

    def value(self, state: State) -> Optional[float]:
        """Optimization value for local search; hill climbing maximises it."""
        return None


# Wraps a problem to collect statistics without changing its behaviour.
class CountingProblem(Problem):
    """Delegates the Problem contract to ``problem`` and counts calls.

    ``expansions`` is the number of ``successor`` calls (node expansions) and
    ``goal_tests`` the number of goal checks.
    """
    def __init__(self, problem: Problem):
        self.p = problem
        self.expansions = 0
        self.goal_tests = 0

    def initial(self) -> State:
        return self.p.initial()

    def successor(self, state: State) -> Iterable[Tuple[Action, State]]:
        self.expansions += 1
        return self.p.successor(state)

    def goal(self) -> State:
        return self.p.goal()

    def goal_test(self, state: State) -> bool:
        self.goal_tests += 1
        return self.p.goal_test(state)

    def path_cost(self, c: float, state: State, action: Action, next_state: State) -> float:
        return self.p.path_cost(c, state, action, next_state)

    def value(self, state: State) -> Optional[float]:
        return self.p.value(state)

    def __getattr__(self, name):
        # problem-specific attributes (e.g. graph_map for heuristics)
        if name == "p":
            # not set yet, e.g. while copy or pickle rebuilds the instance
            raise AttributeError(name)
        return getattr(self.p, name)
