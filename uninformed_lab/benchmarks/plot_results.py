# uninformed_lab/benchmarks/plot_results.py
from __future__ import annotations
import argparse
import json
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from ..plots.plotting import fig_to_png_bytes, grouped_bars

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"

# metric -> (file stem, title, y label, log scale)
_CHARTS = {
    "nodes_expanded": ("nodes_expanded", "Nodes Expanded (lower is better)", "expansions", True),
    "time_s": ("time", "Wall Time (lower is better)", "seconds", False),
    "cost": ("cost", "Solution Cost (lower is better)", "cost", False),
}


def load_rows(path: Path) -> List[Dict]:
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m uninformed_lab.benchmarks.run_all")
    data = json.loads(path.read_text())
    rows = [r for r in data.get("results", []) if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows


def fmt_table(rows: Sequence[Dict]) -> str:
    lines = [
        "| Domain | Algorithm | Steps | Cost | Nodes Expanded | Time (s) | Peak KB |",
        "|---|---|---:|---:|---:|---:|---:|",
    ]
    for r in rows:
        def fnum(x):
            if isinstance(x, (int, float)):
                return f"{x:.6f}" if isinstance(x, float) else f"{x}"
            return "n/a"
        lines.append(
            f"| {r['domain']} | {r['algo']} | {len(r.get('actions') or [])} | {fnum(r.get('cost'))} | "
            f"{fnum(r.get('nodes_expanded'))} | {fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Plot the JSON written by run_all.")
    ap.add_argument("--results", type=Path, default=RESULTS_JSON)
    ap.add_argument("--out-dir", type=Path, default=HERE)
    args = ap.parse_args(argv)

    rows = load_rows(args.results)
    args.out_dir.mkdir(parents=True, exist_ok=True)

    md_path = args.out_dir / "results.md"
    md_path.write_text(fmt_table(rows))
    print(f"Wrote {md_path}")

    for metric, (stem, title, ylabel, log) in _CHARTS.items():
        fig = grouped_bars(rows, metric, title, ylabel, log=log)
        png = args.out_dir / f"{stem}.png"
        png.write_bytes(fig_to_png_bytes(fig))
        print(f"Wrote {png}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
