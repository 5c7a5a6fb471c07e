# state_search/benchmarks/run_all.py
from __future__ import annotations

import argparse
import json
import logging
import os
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..algorithms.astar import a_star_search
from ..algorithms.best_first import best_first_tree_search
from ..algorithms.depth_limited import depth_limited_search
from ..algorithms.hill_climbing import hill_climbing_search
from ..algorithms.ids import iterative_deepening_search
from ..algorithms.tree_search import (
    breadth_first_graph_search,
    breadth_first_tree_search,
    depth_first_graph_search,
    depth_first_tree_search,
)
from ..algorithms.ucs import uniform_cost_search
from ..core.metrics import SearchResult, measure
from ..core.problem import Problem
from ..problems.graph_problem import GraphProblem, make_heuristic, sample_graph_problem
from ..problems.romania import romania_problem
from ..problems.word import WordProblem, word_problem

logger = logging.getLogger(__name__)

# ---- Tunables (overridable via environment variables) -----------------------
DLS_LIMIT     = int(os.getenv("DLS_LIMIT", "12"))       # depth-limited search
IDS_MAX_DEPTH = int(os.getenv("IDS_MAX_DEPTH", "64"))   # iterative deepening ceiling

PROBLEMS = ("romania", "graph", "word")

Algo = Tuple[str, Callable[[Problem], Any]]


# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"


def _load_problem(name: str, start: Optional[str] = None, goal: Optional[str] = None) -> Problem:
    if name == "romania":
        return romania_problem(start or "Arad", goal or "Bucharest")
    if name == "graph":
        return sample_graph_problem()
    if name == "word":
        # max_len capped at the goal length so the depth-first strategies stay tractable
        p = word_problem()
        return WordProblem(p.start, p.target, p.chars, max_len=len(p.target))
    raise ValueError(f"unknown problem {name!r}; choose from {', '.join(PROBLEMS)}")


def _dls(limit: int):
    def search(p: Problem):
        result = depth_limited_search(limit, p)
        return result.node
    return search


def _load_algos(problem: Problem, dls_limit: int = DLS_LIMIT, ids_max_depth: int = IDS_MAX_DEPTH) -> List[Algo]:
    """
    Algorithms that make sense for ``problem``. Tree searches are left out for
    route-finding problems (their state graph is cyclic, so tree search may
    never terminate); the informed searches need vertex locations.
    """
    cyclic = isinstance(problem, GraphProblem)
    algos: List[Algo] = []

    # ---------------- Uninformed ----------------
    if not cyclic:
        algos.append(("BFS-tree", breadth_first_tree_search))
        algos.append(("DFS-tree", depth_first_tree_search))
    algos.append(("BFS-graph", breadth_first_graph_search))
    algos.append(("DFS-graph", depth_first_graph_search))
    algos.append((f"DLS(l={dls_limit})", _dls(dls_limit)))
    algos.append(("IDS", lambda p: iterative_deepening_search(p, max_depth=ids_max_depth)))
    algos.append(("UCS", uniform_cost_search))

    # ---------------- Informed ----------------
    if cyclic:
        h = make_heuristic(problem)
        algos.append(("A*", lambda p: a_star_search(h, p)))
    else:
        algos.append(("A*(h=0)", lambda p: a_star_search(lambda n: 0.0, p)))
        algos.append(("BestFirst-tree(depth)", lambda p: best_first_tree_search(lambda n: n.depth, p)))

    # ---------------- Local ----------------
    algos.append(("HillClimbing", hill_climbing_search))
    return algos


def run(problem: Problem, algos: List[Algo]) -> List[Dict[str, Any]]:
    rows = []
    for name, fn in algos:
        print(f"→ Running {name} ...")
        try:
            r = measure(name, fn, problem)
        except Exception as e:
            logger.exception("%s raised", name)
            print(f"  {name}: ERROR {e!r}")
            r = SearchResult(name, False, [], float("inf"), 0, 0.0, 0, error=repr(e))
        else:
            print(
                f"  {r.algo}: "
                f"{'OK' if r.success else 'FAIL'} "
                f"cost={r.cost} "
                f"expanded={r.nodes_expanded}, "
                f"time={_fmt_time(r.time_s)}s"
            )
        rows.append(r.to_row())
    return rows


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Compare search strategies on an example problem.")
    ap.add_argument("--problem", choices=PROBLEMS, default="romania")
    ap.add_argument("--start", default=None, help="start city (romania only)")
    ap.add_argument("--goal", default=None, help="goal city (romania only)")
    ap.add_argument("--dls-limit", type=int, default=DLS_LIMIT)
    ap.add_argument("--ids-max-depth", type=int, default=IDS_MAX_DEPTH)
    ap.add_argument("--output", type=Path, default=Path(__file__).with_name("results.json"))
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s")

    problem = _load_problem(args.problem, args.start, args.goal)
    algos = _load_algos(problem, args.dls_limit, args.ids_max_depth)
    rows = run(problem, algos)

    out = {"problem": args.problem, "results": rows, "ts": time.time()}
    text = json.dumps(out, indent=2)
    print(text)
    args.output.write_text(text)
    logger.info("wrote %s", args.output)
    return out


if __name__ == "__main__":
    main()
