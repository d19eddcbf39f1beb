"""
Literal codec.

External names are single letters, optionally negated:
    "A" .. "Z"     (lowercase accepted, folded to upper)
    "-A" .. "-Z"

Internally a literal is a signed int: A=1 .. Z=26, negation is -k.
0 is the error literal -- returned by encode() on malformed input,
never a member of any clause.
"""

NUM_VARIABLES = 26
ERROR_LITERAL = 0

LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
# ASCII letters only; str.upper() also maps non-ASCII letters such as
# dotless i or the Kelvin sign onto A..Z.
_CODES = {letter: i + 1 for i, letter in enumerate(LETTERS)}
_CODES.update({letter.lower(): code for letter, code in list(_CODES.items())})


def is_valid(lit) -> bool:
    """A literal is valid if it names one of the 26 variables, either sign."""
    return (isinstance(lit, int) and not isinstance(lit, bool)
            and 1 <= abs(lit) <= NUM_VARIABLES)


def variable(lit: int) -> int:
    """The variable a literal talks about, ignoring its sign."""
    return abs(lit)


def bit(lit: int) -> int:
    """Single-bit mask for the literal's variable: A -> 1, B -> 2, C -> 4, ..."""
    return 1 << (abs(lit) - 1)


def encode(name: str) -> int:
    """
    External name -> literal code.

    "A" -> 1, "z" -> 26, "-b" -> -2.
    Anything else ("", "AB", "1", "A-", "--A", "-") -> ERROR_LITERAL.
    """
    if not isinstance(name, str) or not 1 <= len(name) <= 2:
        return ERROR_LITERAL
    sign = 1
    if len(name) == 2:
        if name[0] != "-":
            return ERROR_LITERAL
        sign = -1
        name = name[1:]
    code = _CODES.get(name)
    if code is None:
        return ERROR_LITERAL
    return sign * code


def decode(lit: int) -> str:
    """Literal code -> external name. Out-of-range codes and 0 decode to '?'."""
    if not is_valid(lit):
        return "?"
    sign = "-" if lit < 0 else ""
    return sign + LETTERS[abs(lit) - 1]
