from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .errors import TricolorError
from .problem import Problem
from .solver import MAX_ITERATIONS, solve_problem
from .viz import write_plotly_html


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tricolor",
        description="Shortest button sequence for the tricolor ring of lights",
        epilog="Light glyphs: G/g green, R/r red, X/x/_/space off.",
    )
    parser.add_argument("states", nargs="*", metavar="START GOAL", help="Start and goal states, e.g. XXXXX RRGGX")
    parser.add_argument("--file", type=str, default=None, help="Read START and GOAL from a .txt or .json problem file")
    parser.add_argument("--max-states", type=int, default=MAX_ITERATIONS, help="Transition budget for the search")
    parser.add_argument("--out", type=str, default=None, help="Also render the solution to an HTML file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log search progress to stderr")

    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.file is not None and args.states:
        parser.error("give either START GOAL or --file, not both")
    if args.file is None and len(args.states) != 2:
        parser.error("expected exactly two arguments: START GOAL")
    if args.max_states < 0:
        parser.error("--max-states must be >= 0")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.file is not None:
            problem = Problem.from_file(args.file)
        else:
            problem = Problem.parse(args.states[0], args.states[1])
        print(f"Searching path from {problem.start.printable_state()} to {problem.goal.printable_state()}")
        res = solve_problem(problem, max_states=args.max_states)
    except (TricolorError, OSError, ValueError) as e:
        # OSError/ValueError: unreadable or malformed problem file
        print(f"error: {e}", file=sys.stderr)
        return 1

    print("Found solution!")
    for step in res.steps:
        print(step)

    if args.out is not None:
        out = write_plotly_html(res.path, out_path=args.out, title=f"{problem.start} -> {problem.goal}")
        print(f"Wrote solution visualization: {out}")
    return 0

