# state_search/problems/word.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple
from ..core.problem import Problem


@dataclass
class WordProblem(Problem):
    """
    Build a target word one character at a time.

    - State: the string built so far
    - successor(s): (c, c + s) for each c in chars, i.e. characters are *prepended*
    - goal(): target
    - No successors once len(s) == max_len
    """
    start: str
    target: str
    chars: str
    max_len: int

    def initial(self) -> str:
        return self.start

    def goal(self) -> str:
        return self.target

    def successor(self, s: str) -> Iterable[Tuple[str, str]]:
        if len(s) == self.max_len:
            return
        for c in self.chars:
            yield c, c + s


def word_problem() -> WordProblem:
    return WordProblem(start="", target="abracad", chars="abrcd", max_len=11)
