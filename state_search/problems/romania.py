# state_search/problems/romania.py
from __future__ import annotations
from typing import Dict, List, Tuple

from .graph import GraphMap, Point, make_graph_map
from .graph_problem import GraphProblem


# --- Data --------------------------------------------------------------------

# Road distances from AIMA Fig. 3.1, each road listed once (the map is undirected)
_ROADS: List[Tuple[str, List[Tuple[str, int]]]] = [
    ("Arad", [("Zerind", 75), ("Sibiu", 140), ("Timisoara", 118)]),
    ("Bucharest", [("Urziceni", 85), ("Pitesti", 101), ("Giurgiu", 90), ("Fagaras", 211)]),
    ("Craiova", [("Drobeta", 120), ("Rimnicu Vilcea", 146), ("Pitesti", 138)]),
    ("Drobeta", [("Mehadia", 75)]),
    ("Eforie", [("Hirsova", 86)]),
    ("Fagaras", [("Sibiu", 99)]),
    ("Hirsova", [("Urziceni", 98)]),
    ("Iasi", [("Vaslui", 92), ("Neamt", 87)]),
    ("Lugoj", [("Timisoara", 111), ("Mehadia", 70)]),
    ("Oradea", [("Zerind", 71), ("Sibiu", 151)]),
    ("Pitesti", [("Rimnicu Vilcea", 97)]),
    ("Rimnicu Vilcea", [("Sibiu", 80)]),
    ("Urziceni", [("Vaslui", 142)]),
]

# Map coordinates; straight-line distance between them never exceeds a road length
_LOCATIONS: Dict[str, Point] = {
    "Arad": (91, 492), "Bucharest": (400, 327), "Craiova": (253, 288),
    "Drobeta": (165, 299), "Eforie": (562, 293), "Fagaras": (305, 449),
    "Giurgiu": (375, 270), "Hirsova": (534, 350), "Iasi": (473, 506),
    "Lugoj": (165, 379), "Mehadia": (168, 339), "Neamt": (406, 537),
    "Oradea": (131, 571), "Pitesti": (320, 368), "Rimnicu Vilcea": (233, 410),
    "Sibiu": (207, 457), "Timisoara": (94, 410), "Urziceni": (456, 350),
    "Vaslui": (509, 444), "Zerind": (108, 531),
}


def romania_map() -> GraphMap:
    return make_graph_map(_ROADS, _LOCATIONS)


def romania_problem(start: str = "Arad", goal: str = "Bucharest") -> GraphProblem:
    """
    Factory for the standard AIMA Romania route-finding problem.
    States are city names; each action is the next city; step cost is road distance.
    """
    return GraphProblem(romania_map(), start, goal)
