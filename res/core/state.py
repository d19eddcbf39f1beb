"""
Core data structures: Clause, ResolutionState.

Nothing in here depends on parsing, printing policy or the driver.

Literals are signed ints (see literal.py). A Clause is a set of literals
read as their disjunction, stored as two bitmaps over the 26 variables:

    pos  bit k-1 set  <=>  literal  k  is a member
    neg  bit k-1 set  <=>  literal -k  is a member

pos & neg is always 0: a clause never holds a literal and its negation.
The empty clause {} is the contradiction -> refutation found.
"""

from dataclasses import dataclass, field

from .literal import NUM_VARIABLES, is_valid, bit, decode
from ..utils import unsigned_sort


# Driver states. scanning -> extended -> scanning ... -> saturated | refuted
SCANNING = "scanning"
EXTENDED = "extended"
SATURATED = "saturated"
REFUTED = "refuted"


def _popcount(mask: int) -> int:
    return bin(mask).count("1")


@dataclass
class Clause:
    """
    A disjunction of propositional literals over A..Z.

    Equality and hashing look only at membership; source, step and label
    are bookkeeping for proof extraction and display. source holds the
    positions of the two parents in the driver's clause list, step the
    pass that derived the clause.
    """
    pos: int = 0
    neg: int = 0
    source: tuple = ()
    step: int = 0
    label: str = ""

    @classmethod
    def from_literals(cls, literals, **kwargs) -> "Clause":
        """Build a clause by inserting each literal in order."""
        clause = cls(**kwargs)
        for lit in literals:
            clause.insert(lit)
        return clause

    @property
    def key(self) -> tuple:
        return (self.pos, self.neg)

    @property
    def literals(self) -> frozenset:
        return frozenset(self)

    @property
    def is_empty(self) -> bool:
        return self.pos == 0 and self.neg == 0

    @property
    def name(self) -> str:
        """Set notation, alphabetical by variable: {-A, B, C}."""
        return "{" + ", ".join(decode(lit) for lit in unsigned_sort(self.literals)) + "}"

    def size(self) -> int:
        return _popcount(self.pos) + _popcount(self.neg)

    def contains(self, lit: int) -> bool:
        if not is_valid(lit):
            return False
        mask = self.pos if lit > 0 else self.neg
        return bool(mask & bit(lit))

    def insert(self, lit: int) -> bool:
        """
        Add a literal. Returns True only if the clause grew.

        If the complement is present, it is removed instead and nothing is
        added (complementary collapse). If the literal is already present,
        nothing changes.
        """
        if not is_valid(lit):
            raise ValueError(f"invalid literal: {lit!r}")
        b = bit(lit)
        if lit > 0:
            if self.neg & b:
                self.neg &= ~b
                return False
            if self.pos & b:
                return False
            self.pos |= b
        else:
            if self.pos & b:
                self.pos &= ~b
                return False
            if self.neg & b:
                return False
            self.neg |= b
        return True

    def equals(self, other: "Clause") -> bool:
        return self.pos == other.pos and self.neg == other.neg

    def copy(self) -> "Clause":
        return Clause(self.pos, self.neg, self.source, self.step, self.label)

    def resolve(self, other: "Clause") -> tuple:
        """
        One resolution step between this clause and other.

        Returns (resolvent, resolved):
            exactly one complementary pair  -> (union minus the pair, True)
            no complementary pair           -> (plain union, False)
            two or more pairs               -> (None, False)

        More than one pair would leave a tautology, which is useless for
        refutation. Neither input is modified.
        """
        collapse = (self.pos & other.neg) | (self.neg & other.pos)
        pairs = _popcount(collapse)
        if pairs > 1:
            return None, False
        pos = (self.pos | other.pos) & ~collapse
        neg = (self.neg | other.neg) & ~collapse
        return Clause(pos, neg), pairs == 1

    def __iter__(self):
        for k in range(NUM_VARIABLES):
            b = 1 << k
            if self.pos & b:
                yield k + 1
            if self.neg & b:
                yield -(k + 1)

    def __contains__(self, lit):
        return self.contains(lit)

    def __len__(self):
        return self.size()

    def __hash__(self):
        return hash(self.key)

    def __eq__(self, other):
        return isinstance(other, Clause) and self.equals(other)

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"Clause({self.name})"


@dataclass
class ResolutionState:
    """
    Full state of the saturation driver.

    clauses:   append-only, de-duplicated by membership (after the inputs)
    frontier:  index where the clauses added by the previous pass begin;
               a pass only tries pairs whose second member is at or past it
    passes:    number of passes run
    history:   one entry per pass
    status:    scanning | extended | saturated | refuted
    seen:      membership keys of every clause, for constant-time dedup
    """
    clauses: list = field(default_factory=list)
    frontier: int = 0
    passes: int = 0
    history: list = field(default_factory=list)
    status: str = SCANNING
    halt_reason: str = ""
    seen: set = field(default_factory=set)

    def __post_init__(self):
        if self.frontier < 0:
            raise ValueError(f"frontier must be >= 0, got {self.frontier}")

    @classmethod
    def from_clauses(cls, clauses, frontier: int = 0) -> "ResolutionState":
        """Start from copies of the given clauses, so the caller's list is left alone."""
        state = cls(frontier=frontier)
        for clause in clauses:
            state.clauses.append(clause.copy())
            state.seen.add(clause.key)
        return state

    @property
    def halted(self) -> bool:
        return self.status in (SATURATED, REFUTED)

    @property
    def refuted(self) -> bool:
        return self.status == REFUTED

    def knows(self, clause: Clause) -> bool:
        return clause.key in self.seen

    def add(self, clause: Clause) -> bool:
        """Append clause unless a set-equal one is already present."""
        if self.knows(clause):
            return False
        self.clauses.append(clause)
        self.seen.add(clause.key)
        return True
