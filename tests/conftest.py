"""Shared fixtures and small problems for the search tests."""

import pytest

from state_search.core.problem import Problem
from state_search.problems.graph_problem import sample_graph_problem
from state_search.problems.word import WordProblem, word_problem


class CountUp(Problem):
    """Integers from 0; successors n+1 and n+2. Unbounded, acyclic."""

    def __init__(self, target, values=None):
        self.target = target
        self.values = values or {}

    def initial(self):
        return 0

    def goal(self):
        return self.target

    def successor(self, s):
        yield "+1", s + 1
        yield "+2", s + 2

    def value(self, s):
        return self.values.get(s)


class Hill(Problem):
    """States 0..10 on a line; value peaks at ``peak``."""

    def __init__(self, peak, start=0):
        self.peak = peak
        self.start = start

    def initial(self):
        return self.start

    def goal_test(self, s):
        return s == self.peak

    def successor(self, s):
        if s > 0:
            yield "left", s - 1
        if s < 10:
            yield "right", s + 1

    def value(self, s):
        return -abs(s - self.peak)


class Infinite(Problem):
    """Every state has an endless stream of successors; the goal is 'goal'."""

    def __init__(self):
        self.generated = 0

    def initial(self):
        return ()

    def goal(self):
        return ("goal",)

    def successor(self, s):
        if s == ():
            self.generated += 1
            yield "g", ("goal",)
        n = 0
        while True:
            n += 1
            self.generated += 1
            yield n, s + (n,)


@pytest.fixture
def graph_problem():
    return sample_graph_problem()


@pytest.fixture
def abracad():
    return word_problem()


@pytest.fixture
def small_word():
    return WordProblem(start="", target="ba", chars="ab", max_len=3)


@pytest.fixture
def unreachable_word():
    return WordProblem(start="", target="zz", chars="ab", max_len=3)


class Chain(Problem):
    """0 -> 1 -> 2 -> ... with a single successor each; ends at ``end`` if given."""

    def __init__(self, target, end=None):
        self.target = target
        self.end = end

    def initial(self):
        return 0

    def goal(self):
        return self.target

    def successor(self, s):
        if self.end is None or s < self.end:
            yield "next", s + 1
