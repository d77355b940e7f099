"""Command line entry point: run one exercise on an input file or stdin."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from edjudge import list_problems, set_problems, stack_queue_problems, tree_problems

_SOLVERS: dict[int, Callable[[int, str], str]] = {
    **{number: list_problems.solve for number in range(1, 16)},
    **{
        number: stack_queue_problems.solve
        for number in (16, 17, 18, 19, 21, 22, 23, 24, 25, 27, 28)
    },
    **{number: tree_problems.solve for number in (29, 31, 38, 39, 41)},
    **{number: set_problems.solve for number in (43, 44, 46)},
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the exercise named on the command line; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="edjudge", description="Solve one judge exercise for the given input."
    )
    parser.add_argument("exercise", type=int, help="exercise number")
    parser.add_argument(
        "input", nargs="?", help="input file (standard input when omitted)"
    )
    args = parser.parse_args(argv)

    solver = _SOLVERS.get(args.exercise)
    if solver is None:
        parser.error(f"unknown exercise: {args.exercise}")

    try:
        text = Path(args.input).read_text() if args.input else sys.stdin.read()
    except OSError as exc:
        print(f"edjudge: {exc}", file=sys.stderr)
        return 1

    try:
        output = solver(args.exercise, text)
    except (ValueError, EOFError, IndexError, OverflowError) as exc:
        print(f"edjudge: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(output)
    return 0