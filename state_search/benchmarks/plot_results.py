# state_search/benchmarks/plot_results.py
from __future__ import annotations
import argparse
import io
import json
import math
from pathlib import Path
from typing import Any, Dict, List, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"

# (metric, title, ylabel, file name)
CHARTS = [
    ("nodes_expanded", "Nodes Expanded (lower is better)", "nodes", "nodes_expanded.png"),
    ("time_s", "Wall Time (lower is better)", "seconds", "time.png"),
    ("cost", "Path Cost (lower is better)", "cost", "cost.png"),
]


def _load_rows(path: Path = RESULTS_JSON) -> List[Dict[str, Any]]:
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m state_search.benchmarks.run_all")
    data = json.loads(path.read_text())
    # Keep only successful runs
    rows = [r for r in data.get("results", []) if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows


def _sorted(rows, key):
    def key_fn(r):
        v = r.get(key)
        return math.inf if v is None else v
    return sorted(rows, key=key_fn)


def _bar(ax, rows, metric, title, ylabel):
    algos = [r["algo"] for r in rows]
    vals = [r.get(metric) or 0 for r in rows]
    x = list(range(len(algos)))
    ax.bar(x, vals)
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(algos, rotation=20, ha="right")

    top = max(vals) or 1
    for xi, v in zip(x, vals):
        label = f"{v:.4f}" if isinstance(v, float) and v < 0.01 else (
            f"{v:.3f}" if isinstance(v, float) else f"{v}")
        ax.text(xi, v + 0.01 * top, label, ha="center", va="bottom", fontsize=8)


def _fmt_table(rows) -> str:
    lines = [
        "| Algorithm | Cost | Nodes Expanded | Time (s) | Peak KB |",
        "|---|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, bool) or not isinstance(x, (int, float)):
            return "n/a"
        return f"{x:.6f}" if isinstance(x, float) else f"{x}"
    for r in rows:
        lines.append(
            f"| {r['algo']} | {fnum(r.get('cost'))} | {fnum(r.get('nodes_expanded'))} | "
            f"{fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)


def fig_to_png_bytes(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    return buf.getvalue()


def main(argv: Optional[List[str]] = None) -> List[Path]:
    ap = argparse.ArgumentParser(description="Plot results written by run_all.")
    ap.add_argument("--results", type=Path, default=RESULTS_JSON)
    ap.add_argument("--out-dir", type=Path, default=None)
    args = ap.parse_args(argv)
    out_dir = args.out_dir or args.results.parent
    out_dir.mkdir(parents=True, exist_ok=True)

    rows = _load_rows(args.results)
    written = []

    md_path = out_dir / "results.md"
    md_path.write_text(_fmt_table(rows))
    written.append(md_path)
    print(f"Wrote {md_path}")

    for metric, title, ylabel, fname in CHARTS:
        fig, ax = plt.subplots(figsize=(6, 4))
        _bar(ax, _sorted(rows, metric), metric, title, ylabel)
        fig.tight_layout()
        path = out_dir / fname
        path.write_bytes(fig_to_png_bytes(fig))
        plt.close(fig)
        written.append(path)
        print(f"Wrote {path}")
    return written


if __name__ == "__main__":
    main()
