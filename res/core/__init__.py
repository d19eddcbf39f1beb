from .literal import (
    NUM_VARIABLES, ERROR_LITERAL,
    encode, decode, is_valid, variable, bit,
)
from .state import (
    Clause, ResolutionState,
    SCANNING, EXTENDED, SATURATED, REFUTED,
)
from .parser import (
    ClauseParseError, parse_clause, parse_clauses,
    EMPTY_INPUT, MALFORMED_ITEM, UNKNOWN_SYMBOL,
)
from .engine import resolution_pass, saturate, res, is_unsatisfiable
from .proof import found_empty_clause, extract_proof, print_proof

__all__ = [
    "NUM_VARIABLES", "ERROR_LITERAL",
    "encode", "decode", "is_valid", "variable", "bit",
    "Clause", "ResolutionState",
    "SCANNING", "EXTENDED", "SATURATED", "REFUTED",
    "ClauseParseError", "parse_clause", "parse_clauses",
    "EMPTY_INPUT", "MALFORMED_ITEM", "UNKNOWN_SYMBOL",
    "resolution_pass", "saturate", "res", "is_unsatisfiable",
    "found_empty_clause", "extract_proof", "print_proof",
]
