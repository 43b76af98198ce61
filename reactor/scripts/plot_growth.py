from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import matplotlib
import matplotlib.pyplot as plt
from matplotlib.lines import Line2D

from reactor.results.schema import per_step_rows
from reactor.results.writer import read_json


def plot_growth(run: Dict[str, Any], out_path: Optional[Path] = None, title: Optional[str] = None):
    """
    Cuboid count (left axis) and lit volume (right axis) after each step.

    With out_path the figure is saved and closed; otherwise it is shown.
    """
    rows: List[Dict[str, Any]] = per_step_rows(run)
    steps = [int(r["index"]) for r in rows]
    counts = [int(r["cuboid_count"]) for r in rows]
    volumes = [int(r["volume"]) for r in rows]
    on_steps = [int(r["index"]) for r in rows if r["turn_on"]]

    fig, ax = plt.subplots(figsize=(9, 4.5))
    ax.plot(steps, counts, color="steelblue", linewidth=1.5)
    ax.set_xlabel("instruction")
    ax.set_ylabel("cuboids in set", color="steelblue")
    ax.grid(True, alpha=0.3)

    ax2 = ax.twinx()
    ax2.plot(steps, volumes, color="tomato", linewidth=1.0, alpha=0.8)
    ax2.set_ylabel("lit points", color="tomato")

    # "on" steps marked along the bottom edge
    ax.plot(on_steps, [0] * len(on_steps), linestyle="", marker="|", color="darkgreen")

    legend = [
        Line2D([0], [0], color="steelblue", label="cuboid count"),
        Line2D([0], [0], color="tomato", label="volume"),
        Line2D([0], [0], color="darkgreen", marker="|", linestyle="", label="on"),
    ]
    ax.legend(handles=legend, loc="upper left")
    ax.set_title(title or run.get("run_id", "reactor run"))
    fig.tight_layout()

    if out_path is not None:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(out_path, dpi=120)
        plt.close(fig)
    else:
        plt.show()
    return fig


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Plot per-instruction growth from a reactor run record")
    parser.add_argument("record", help="Run record JSON written by reactor --report")
    parser.add_argument("--out", help="Save to this image file instead of showing a window")
    args = parser.parse_args(argv)

    if args.out:
        matplotlib.use("Agg")
    plot_growth(read_json(Path(args.record)), Path(args.out) if args.out else None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
