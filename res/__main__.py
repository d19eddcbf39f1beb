"""
CLI entry point. Run as: res <clause> ...   or   python -m res <clause> ...

Prints "[ ]" when the empty clause is derived (unsatisfiable) and "[x]"
when it is not (satisfiable).
"""

import argparse
import sys
from contextlib import redirect_stdout

from .core.parser import ClauseParseError, parse_clause
from .core.state import ResolutionState
from .core.engine import saturate
from .core.proof import print_proof
from .visualization import print_state, print_history


UNSATISFIABLE = "[ ]"
SATISFIABLE = "[x]"

EPILOG = """\
Arguments:
  <clause>    A clause in the format: A,B,-C (comma-separated literals)
              Each literal is a single letter (A-Z) optionally prefixed with '-'

Output:
  [ ]         The clause set is unsatisfiable (contradiction found)
  [x]         The clause set is satisfiable (no contradiction found)

Examples:
  res a,-a
  res "a,b" "-a,c" "-b,c" "-c"
  res a,b,-c -a,b,c -b,c -c
  res -- -a,b,-c -a,b,c -b,c -c
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="res",
        description="A resolution theorem prover for propositional logic.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    # Everything from the first clause on is a clause, even if it starts with '-'
    parser.add_argument("clauses", nargs=argparse.REMAINDER, metavar="clause",
                        help="Clause to add to the set (use -- if the first one starts with '-')")
    parser.add_argument("--verbose", action="store_true",
                        help="Trace each pass and the proof on stderr")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    texts = args.clauses
    if texts and texts[0] == "--":
        texts = texts[1:]
    if not texts:
        parser.print_help(sys.stderr)
        return 0

    clauses = []
    for text in texts:
        try:
            clauses.append(parse_clause(text))
        except ClauseParseError as exc:
            print(f'Error parsing clause "{text}": {exc}', file=sys.stderr)
            return 1

    state = ResolutionState.from_clauses(clauses)
    if args.verbose:
        # stdout carries only the verdict
        with redirect_stdout(sys.stderr):
            print_state(state)
            state = saturate(state, verbose=True)
            print_state(state)
            print_history(state)
            if state.refuted:
                print_proof(state)
    else:
        state = saturate(state)

    print(UNSATISFIABLE if state.refuted else SATISFIABLE)
    return 0


if __name__ == "__main__":
    sys.exit(main())
