"""Tests for the weighted graph used by the route-finding problems."""

import math

import pytest

from state_search.core.node import Node
from state_search.problems.graph import (
    Graph,
    VertexNotFoundError,
    cost_from_to,
    euclidean_distance,
    make_graph_map,
)
from state_search.problems.graph_problem import make_heuristic, sample_graph_map
from state_search.problems.romania import romania_map


class TestGraph:

    def test_edges_are_undirected(self):
        g = Graph.from_edges([("A", [("B", 5)])])

        assert g.neighbours("A") == [("B", 5)]
        assert g.neighbours("B") == [("A", 5)]

    def test_unknown_vertex_has_no_neighbours(self):
        assert Graph.from_edges([("A", [("B", 5)])]).neighbours("Q") == []

    def test_sample_map_neighbours(self):
        gm = sample_graph_map()

        assert dict(gm.neighbours("D")) == {"B": 6, "C": 4}
        assert sorted(gm.graph.vertices()) == ["A", "B", "C", "D"]
        assert "A" in gm.graph

    def test_romania_is_symmetric(self):
        gm = romania_map()
        for a in gm.graph.vertices():
            for b, w in gm.neighbours(a):
                assert cost_from_to(gm, b, a) == w
        assert len(gm.graph.vertices()) == 20


class TestGraphMap:

    def test_cost_between_neighbours(self):
        assert cost_from_to(sample_graph_map(), "A", "C") == 3.0

    def test_cost_without_edge_is_infinite(self):
        gm = sample_graph_map()

        assert cost_from_to(gm, "A", "D") == math.inf
        assert cost_from_to(gm, "A", "nowhere") == math.inf

    def test_location(self):
        assert sample_graph_map().location("C") == (1, -1)

    def test_missing_location_is_fatal(self):
        gm = make_graph_map([("A", [("B", 1)])], [("A", (0, 0))])

        with pytest.raises(VertexNotFoundError, match="not found"):
            gm.location("B")
        assert issubclass(VertexNotFoundError, KeyError)

    def test_euclidean_distance(self):
        assert euclidean_distance((0, 0), (3, 4)) == 5.0

    def test_heuristic_is_straight_line_to_goal(self, graph_problem):
        h = make_heuristic(graph_problem)

        assert h(Node("A")) == 2.0
        assert h(Node("D")) == 0.0
        assert h(Node("B")) == pytest.approx(math.sqrt(2))

    def test_heuristic_admissible_on_romania(self):
        from state_search.problems.romania import romania_problem
        from state_search.algorithms.ucs import uniform_cost_search

        gm = romania_map()
        for city in ("Arad", "Timisoara", "Oradea", "Craiova", "Fagaras"):
            problem = romania_problem(city, "Bucharest")
            h = make_heuristic(problem)
            assert h(Node(city)) <= uniform_cost_search(problem).path_cost
        for a in gm.graph.vertices():
            for b, w in gm.neighbours(a):
                assert euclidean_distance(gm.location(a), gm.location(b)) <= w
