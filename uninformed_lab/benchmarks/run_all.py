# uninformed_lab/benchmarks/run_all.py
from __future__ import annotations

import argparse
import json
import os
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from ..algorithms.registry import Strategy, make_strategies
from ..core.metrics import MeasuredRun, SearchResult
from ..core.utils import replay
from ..problems.checks import sanity_check_problem
from ..problems.eight_puzzle import make_eight_puzzle
from ..problems.hex_turn import make_hex_problem
from ..problems.jump import make_jump_problem

# ---- Tunables (overridable via environment variables) -----------------------
DLS_LIMIT       = int(os.getenv("DLS_LIMIT", "12"))        # depth-limited search
IDS_MAX_LIMIT   = os.getenv("IDS_MAX_LIMIT")                # unset = deepen forever
JUMP_LENGTH     = int(os.getenv("JUMP_LENGTH", "8"))        # momentum-jump course length
PUZZLE_SCRAMBLE = int(os.getenv("PUZZLE_SCRAMBLE", "10"))   # random blank moves from the goal
PUZZLE_SEED     = int(os.getenv("PUZZLE_SEED", "0"))
HEX_RADIUS      = int(os.getenv("HEX_RADIUS", "2"))

DEFAULT_OUT = Path(__file__).with_name("results.json")

# Which strategies run on each domain by default. Tree-search DFS has no useful
# bound on the 8-puzzle or the hex board, so it is only run on the jump course.
DEFAULT_STRATEGIES = {
    "jump": ["BFS", "DFS", "DLS", "IDS", "UCS"],
    "eight": ["BFS", "DLS", "IDS", "UCS"],
    "hex": ["BFS", "DLS", "IDS", "UCS"],
}


# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    return "n/a" if x is None else f"{float(x):.4f}"


def load_domains() -> Dict[str, Callable[[], object]]:
    return {
        "jump": lambda: make_jump_problem(JUMP_LENGTH),
        "eight": lambda: make_eight_puzzle(PUZZLE_SCRAMBLE, PUZZLE_SEED),
        "hex": lambda: make_hex_problem(HEX_RADIUS),
    }


def run_one(domain: str, name: str, fn: Strategy, problem) -> SearchResult:
    """Runs one strategy on one problem. Exceptions end up in the row, not in the caller."""
    start = problem.initial_state()
    try:
        with MeasuredRun() as meter:
            solution, expanded = fn(start, problem)
        if solution is None:
            return meter.stamp(SearchResult(name, domain, False, nodes_expanded=expanded))
        _, cost = replay(problem, start, solution)
        return meter.stamp(SearchResult(name, domain, True, solution, cost, expanded))
    except Exception as e:
        return SearchResult(name, domain, False, error=repr(e))


def run_all(
    domains: Sequence[str],
    strategies: Optional[Sequence[str]] = None,
    dls_limit: float = DLS_LIMIT,
    ids_max_limit: Optional[int] = None,
    check: bool = False,
) -> List[SearchResult]:
    available = make_strategies(dls_limit=dls_limit, ids_max_limit=ids_max_limit)
    factories = load_domains()
    rows: List[SearchResult] = []

    for domain in domains:
        problem = factories[domain]()
        if check:
            print(f"  {domain}: {sanity_check_problem(problem, problem.initial_state())}")
        names = strategies or DEFAULT_STRATEGIES[domain]
        for name in names:
            print(f"→ Running {name} on {domain} ...")
            r = run_one(domain, name, available[name], problem)
            if r.error:
                print(f"  {name}: ERROR {r.error}")
            else:
                print(
                    f"  {name}: "
                    f"{'OK' if r.success else 'FAIL'} "
                    f"cost={r.cost} "
                    f"expanded={r.nodes_expanded}, "
                    f"time={_fmt_time(r.time_s)}s"
                )
            rows.append(r)
    return rows


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Compare uninformed search strategies across problem domains.")
    ap.add_argument("--domains", nargs="+", choices=sorted(DEFAULT_STRATEGIES), default=list(DEFAULT_STRATEGIES))
    ap.add_argument("--strategies", nargs="+", choices=["BFS", "DFS", "DLS", "IDS", "UCS"],
                    help="run these on every domain instead of the per-domain defaults")
    ap.add_argument("--dls-limit", type=float, default=DLS_LIMIT)
    ap.add_argument("--ids-max-limit", type=int,
                    default=int(IDS_MAX_LIMIT) if IDS_MAX_LIMIT else None)
    ap.add_argument("--out", type=Path, default=DEFAULT_OUT, help="where to write the JSON results")
    ap.add_argument("--check", action="store_true", help="sanity-check each problem before searching")
    return ap.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    rows = run_all(args.domains, args.strategies, args.dls_limit, args.ids_max_limit, args.check)

    out = {"results": [r.as_row() for r in rows], "ts": time.time()}
    print(json.dumps(out, indent=2))
    args.out.write_text(json.dumps(out, indent=2))
    print(f"Wrote {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
