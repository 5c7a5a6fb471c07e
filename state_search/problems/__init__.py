from .graph import Graph, GraphMap, VertexNotFoundError, make_graph_map, cost_from_to, euclidean_distance
from .graph_problem import GraphProblem, make_heuristic, sample_graph_map, sample_graph_problem
from .word import WordProblem, word_problem
from .romania import romania_map, romania_problem
from .checks import sanity_check_problem
