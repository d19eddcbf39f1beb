"""
Clause parser.

    "A,B,-C"      -> {A, B, -C}
    " a , -b "    -> {A, -B}
    "A,-A,B"      -> {B}        (contradictory items cancel on insert)

Items are comma-separated, whitespace-trimmed, one letter each with an
optional leading '-'. Anything else raises ClauseParseError naming the
offending item.
"""

from .literal import ERROR_LITERAL, encode
from .state import Clause


EMPTY_INPUT = "empty-input"
MALFORMED_ITEM = "malformed-item"
UNKNOWN_SYMBOL = "unknown-symbol"


class ClauseParseError(ValueError):
    """A clause string could not be parsed. kind is one of the three constants above."""

    def __init__(self, kind: str, item: str, message: str):
        super().__init__(message)
        self.kind = kind
        self.item = item


def parse_clause(text: str, label=None) -> Clause:
    """
    Parse one clause string.

    The clause's label defaults to the text it was parsed from.
    """
    if not text:
        raise ClauseParseError(EMPTY_INPUT, "", "input is empty")
    clause = Clause(label=text if label is None else label)
    for item in text.split(","):
        item = item.strip()
        if (not item or len(item) > 2 or item in ("-", "--")
                or (len(item) == 2 and item[0] != "-")):
            raise ClauseParseError(MALFORMED_ITEM, item, f'wrong clause format: "{item}"')
        lit = encode(item)
        if lit == ERROR_LITERAL:
            raise ClauseParseError(UNKNOWN_SYMBOL, item, f'unknown symbol: "{item}"')
        clause.insert(lit)
    return clause


def parse_clauses(texts) -> list:
    """Parse several clause strings, stopping at the first bad one."""
    return [parse_clause(text) for text in texts]
