"""
Proof extraction and display.

Every derived clause records the list positions of its two parents, and
parents always sit before their resolvent. The refutation is therefore
the set of positions reachable from the empty clause, listed in order.
"""

from .state import ResolutionState


def found_empty_clause(state: ResolutionState) -> bool:
    """Has the empty clause (contradiction) been derived or given?"""
    return any(c.is_empty for c in state.clauses)


def extract_proof(state: ResolutionState) -> list:
    """
    The clauses the refutation uses, as (position, clause) pairs in list
    order: input clauses first, the empty clause last. [] if not refuted.
    """
    empty = next((i for i, c in enumerate(state.clauses) if c.is_empty), None)
    if empty is None:
        return []

    used = {empty}
    pending = [empty]
    while pending:
        for parent in state.clauses[pending.pop()].source:
            if parent not in used:
                used.add(parent)
                pending.append(parent)

    return [(i, state.clauses[i]) for i in sorted(used)]


def print_proof(state: ResolutionState):
    """Print the refutation one clause per line, tagged with the pass that derived it."""
    proof = extract_proof(state)
    if not proof:
        print("No proof found.")
        return
    width = max(len(clause.name) for _, clause in proof)
    print(f"\n{'='*60}")
    print("PROOF (refutation)")
    print(f"{'='*60}")
    for i, clause in proof:
        if clause.source:
            left, right = clause.source
            how = f"pass {clause.step}: resolve #{left} + #{right}"
        else:
            how = f"input {clause.label}" if clause.label else "input"
        print(f"  #{i:<3d} {clause.name:<{width}}  [{how}]")
    print(f"{'='*60}")
    print(f"  {len(proof)} clauses, empty clause reached in pass {proof[-1][1].step}.")
