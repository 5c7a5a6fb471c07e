# state_search/core/node.py
# This code defines a Node class used in search algorithms (like BFS, DFS, A*, etc.) to represent points in a search tree.
from __future__ import annotations
from typing import Optional, Any, List, Iterator
from .problem import Problem


class Node:
    """A node in the search tree.

    Holds the state, a reference to its parent (the node it is a successor
    of), the action that produced it, the accumulated path cost and depth.
    A state reached by two paths yields two nodes with the same state.
    Nodes are not modified after creation.
    """
    def __init__(self, state, parent: Optional["Node"] = None, action=None,
                 path_cost: float = 0.0, depth: int = 0, value: Optional[float] = None):
        self.state = state
        self.parent = parent
        self.action = action
        self.path_cost = float(path_cost)
        self.depth = depth
        self.value = value

    @classmethod
    def root(cls, problem: Problem) -> "Node":
        """Node for problem.initial(): no parent, no action, zero cost, depth 0."""
        s = problem.initial()
        return cls(s, value=problem.value(s))

    def expand(self, problem: Problem) -> Iterator["Node"]:
        """Lazily generate child Nodes in the order problem.successor yields them.

        A child's value is computed from this node's state, not the child's.
        """
        s = self.state
        v = problem.value(s)
        for a, s2 in problem.successor(s):
            yield Node(
                state=s2,
                parent=self,
                action=a,
                path_cost=problem.path_cost(self.path_cost, s, a, s2),
                depth=self.depth + 1,
                value=v,
            )

    def path(self) -> List["Node"]:
        """[self, parent, grandparent, ..., root]."""
        nodes, cur = [], self
        while cur is not None:
            nodes.append(cur)
            cur = cur.parent
        return nodes

    def solution(self) -> List[Any]:
        """Actions from the root to this node."""
        return [n.action for n in reversed(self.path()[:-1])]

    def __repr__(self) -> str:
        return (f"Node(state={self.state!r},action={self.action!r},"
                f"cost={self.path_cost!r},depth={self.depth!r})")


def root(problem: Problem) -> Node:
    return Node.root(problem)


def expand(problem: Problem, node: Node) -> Iterator[Node]:
    return node.expand(problem)


def path(node: Node) -> List[Node]:
    return node.path()
