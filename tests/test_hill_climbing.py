"""Tests for hill climbing and argmax."""

import pytest

from state_search.algorithms.hill_climbing import hill_climbing_search
from state_search.core.problem import Problem
from state_search.core.utils import argmax

from conftest import CountUp, Hill


def own_value(problem):
    return lambda n: problem.value(n.state)


class TestHillClimbing:

    def test_default_scoring_stops_at_root(self):
        # children carry the parent's value, so every neighbour ties with the root
        problem = Hill(peak=7, start=2)
        node = hill_climbing_search(problem)

        assert node.state == 2
        assert node.depth == 0

    def test_climbs_to_peak_with_own_state_values(self):
        problem = Hill(peak=7, start=2)
        node = hill_climbing_search(problem, value=own_value(problem))

        assert node.state == 7
        assert node.depth == 5
        assert problem.goal_test(node.state)

    def test_result_is_local_optimum(self):
        problem = CountUp(target=99, values={0: 1, 1: 5, 2: 3, 3: 4, 4: 2, 5: 6})
        score = own_value(problem)
        node = hill_climbing_search(problem, value=score)

        assert node.state == 1
        for child in node.expand(problem):
            assert score(node) >= score(child)

    def test_tie_stops_at_current_node(self):
        problem = CountUp(target=99, values={0: 1, 1: 1, 2: 1})
        node = hill_climbing_search(problem, value=own_value(problem))

        assert node.state == 0

    def test_missing_values_stop_at_root(self):
        assert hill_climbing_search(CountUp(target=3)).state == 0

    def test_dead_end_raises(self):
        class Stuck(Problem):
            def initial(self):
                return "only"

            def successor(self, s):
                return iter(())

            def value(self, s):
                return 1.0

        with pytest.raises(ValueError, match="no successors"):
            hill_climbing_search(Stuck())


class TestArgmax:

    def test_picks_largest(self):
        assert argmax([3, 9, 4], lambda x: x) == 9

    def test_last_wins_ties(self):
        assert argmax(["a", "bb", "cc"], len) == "cc"

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            argmax([], lambda x: x)
