"""Tests for search-tree nodes: root, expand and path reconstruction."""

import pytest

from state_search.core.node import Node, expand, path, root
from state_search.problems.graph_problem import sample_graph_problem

from conftest import CountUp, Infinite


class TestRoot:
    """Root node construction."""

    def test_root_fields(self):
        problem = CountUp(target=3, values={0: 1.5})
        node = root(problem)

        assert node.state == 0
        assert node.parent is None
        assert node.action is None
        assert node.path_cost == 0.0
        assert node.depth == 0
        assert node.value == 1.5

    def test_root_value_defaults_to_none(self):
        assert Node.root(CountUp(target=3)).value is None


class TestExpand:
    """Child generation."""

    def test_children_follow_successor_order(self):
        children = list(expand(CountUp(target=3), root(CountUp(target=3))))

        assert [c.state for c in children] == [1, 2]
        assert [c.action for c in children] == ["+1", "+2"]

    def test_children_depth_and_unit_cost(self):
        problem = CountUp(target=3)
        child = next(root(problem).expand(problem))
        grandchild = next(child.expand(problem))

        assert child.depth == 1 and grandchild.depth == 2
        assert child.path_cost == 1.0 and grandchild.path_cost == 2.0
        assert grandchild.parent is child

    def test_graph_costs_accumulate(self):
        problem = sample_graph_problem()
        by_state = {c.state: c for c in root(problem).expand(problem)}

        assert by_state["B"].path_cost == 5.0
        assert by_state["C"].path_cost == 3.0
        d_via_c = {c.state: c for c in by_state["C"].expand(problem)}["D"]
        assert d_via_c.path_cost == 7.0

    def test_child_value_comes_from_parent_state(self):
        problem = CountUp(target=9, values={0: 10.0, 1: 20.0, 2: 30.0})
        children = list(root(problem).expand(problem))

        assert [c.value for c in children] == [10.0, 10.0]
        grandchildren = list(children[1].expand(problem))
        assert [c.value for c in grandchildren] == [30.0, 30.0]

    def test_expand_is_lazy(self):
        problem = Infinite()
        children = root(problem).expand(problem)

        assert problem.generated == 0
        first = next(children)
        assert first.state == ("goal",)
        assert problem.generated == 1

    def test_expand_twice_gives_identical_children(self):
        problem = sample_graph_problem()
        node = root(problem)
        first = [(c.state, c.action, c.path_cost, c.depth) for c in node.expand(problem)]
        second = [(c.state, c.action, c.path_cost, c.depth) for c in node.expand(problem)]

        assert first == second


class TestPath:
    """Parent-chain reconstruction."""

    @pytest.fixture
    def deep_node(self):
        problem = CountUp(target=99)
        node = root(problem)
        for _ in range(4):
            node = list(node.expand(problem))[-1]
        return node

    def test_path_length_is_depth_plus_one(self, deep_node):
        nodes = path(deep_node)

        assert len(nodes) == deep_node.depth + 1
        assert nodes[0] is deep_node
        assert nodes[-1].parent is None

    def test_path_depth_strictly_increases_towards_start(self, deep_node):
        depths = [n.depth for n in deep_node.path()]

        assert depths == sorted(depths, reverse=True)
        assert len(set(depths)) == len(depths)

    def test_root_path_is_itself(self):
        node = root(CountUp(target=1))
        assert node.path() == [node]

    def test_solution_lists_actions_from_root(self, deep_node):
        assert deep_node.solution() == ["+2", "+2", "+2", "+2"]
        assert deep_node.state == 8

    def test_repr(self):
        node = root(CountUp(target=1))
        assert repr(node) == "Node(state=0,action=None,cost=0.0,depth=0)"
