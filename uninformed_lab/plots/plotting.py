# uninformed_lab/plots/plotting.py
# Grouped bar chart: one group per problem domain, one bar per search strategy.
from __future__ import annotations
import io
from typing import Dict, List, Sequence

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np


def grouped_bars(rows: Sequence[Dict], metric: str, title: str, ylabel: str, log: bool = False):
    domains: List[str] = sorted({r["domain"] for r in rows})
    algos: List[str] = sorted({r["algo"] for r in rows})
    lookup = {(r["domain"], r["algo"]): r.get(metric) for r in rows}

    x = np.arange(len(domains))
    width = 0.8 / max(len(algos), 1)

    fig, ax = plt.subplots(figsize=(8, 4.5))
    for i, algo in enumerate(algos):
        vals = [lookup.get((d, algo)) for d in domains]
        heights = np.array([np.nan if v is None else float(v) for v in vals])
        ax.bar(x + (i - (len(algos) - 1) / 2) * width, heights, width, label=algo)

    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(domains)
    if log:
        ax.set_yscale("log")
    ax.legend(fontsize=8)
    fig.tight_layout()
    return fig


def fig_to_png_bytes(fig, dpi: int = 160) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=dpi)
    plt.close(fig)
    return buf.getvalue()
