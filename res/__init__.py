"""
res: propositional resolution refutation.

Clauses are sets of literals over the variables A..Z. The driver closes a
clause set under single-pair resolution and reports whether the empty
clause -- the contradiction -- can be derived.

Usage:
    res A,B -A,B A,-B -A,-B        -> [ ]   (unsatisfiable)
    res A,B -A,C B,-C              -> [x]   (satisfiable)
    res -- -A,B A                  clauses starting with '-' go after --
    python -m res --verbose A -A   trace passes and proof on stderr
"""

from .core.literal import NUM_VARIABLES, ERROR_LITERAL, encode, decode
from .core.state import Clause, ResolutionState
from .core.parser import ClauseParseError, parse_clause, parse_clauses
from .core.engine import resolution_pass, saturate, res, is_unsatisfiable
from .core.proof import found_empty_clause, extract_proof, print_proof
from .utils import unsigned_sort
from .visualization import print_state, print_history

__all__ = [
    "NUM_VARIABLES", "ERROR_LITERAL", "encode", "decode",
    "Clause", "ResolutionState",
    "ClauseParseError", "parse_clause", "parse_clauses",
    "resolution_pass", "saturate", "res", "is_unsatisfiable",
    "found_empty_clause", "extract_proof", "print_proof",
    "unsigned_sort",
    "print_state", "print_history",
]
