"""
The saturation driver.

Close a clause set under single-pair resolution until the empty clause
appears (unsatisfiable) or a pass adds nothing new (satisfiable).

Each pass tries every ordered pair (i, k), i != k, whose second member
sits at or beyond the frontier -- i.e. at least one member is new since
the previous pass. Pairs of two old clauses were already tried.

Terminates: there are finitely many clauses over 26 variables and the
clause list only grows by clauses it does not already contain.
"""

from typing import Optional

from .state import ResolutionState, SCANNING, EXTENDED, SATURATED, REFUTED


def _halt(state: ResolutionState, status: str, reason: str, verbose: bool):
    state.status = status
    state.halt_reason = reason
    if verbose:
        print(f"  [{status}] {reason}")


def resolution_pass(state: ResolutionState, verbose: bool = False) -> ResolutionState:
    """
    Run one pass of the driver over state.

    Indices are scanned from the end down, as the reference driver does.
    The inner range is re-read for every i, so clauses appended earlier in
    the same pass are paired too.
    """
    if state.halted:
        return state

    state.status = SCANNING
    if any(c.is_empty for c in state.clauses):
        _halt(state, REFUTED, "empty clause present", verbose)
        return state

    state.passes += 1
    size = len(state.clauses)
    frontier = state.frontier
    if verbose:
        print(f"\n--- Pass {state.passes}: frontier {frontier}, size {size} ---")

    produced = []
    examined = 0
    refuted = False

    for i in range(size - 1, -1, -1):
        for k in range(len(state.clauses) - 1, frontier - 1, -1):
            if i == k:
                continue
            examined += 1
            left, right = state.clauses[i], state.clauses[k]
            resolvent, resolved = left.resolve(right)
            if not resolved or not state.add(resolvent):
                continue
            resolvent.source = (i, k)
            resolvent.step = state.passes
            produced.append(resolvent)
            if verbose:
                print(f"  [new] {resolvent.name} (from {left.name} + {right.name})")
            if resolvent.is_empty:
                refuted = True
                break
        if refuted:
            break

    state.history.append({
        "pass": state.passes,
        "frontier": frontier,
        "examined": examined,
        "produced": [c.name for c in produced],
        "size": len(state.clauses),
    })

    if refuted:
        _halt(state, REFUTED, "empty clause derived", verbose)
    elif not produced:
        _halt(state, SATURATED, "no new resolvents", verbose)
    else:
        state.frontier = size
        state.status = EXTENDED
        if verbose:
            print(f"  Clauses: {len(state.clauses)} | New this pass: {len(produced)}")
    return state


def saturate(
    state: ResolutionState,
    max_passes: Optional[int] = None,
    verbose: bool = False,
) -> ResolutionState:
    """
    Run passes until the state is refuted or saturated.

    Args:
        state:       initial state
        max_passes:  optional cap; None (the default) runs to completion
        verbose:     print progress
    """
    passes = 0
    while not state.halted:
        if max_passes is not None and passes >= max_passes:
            state.halt_reason = f"max_passes reached ({max_passes})"
            break
        state = resolution_pass(state, verbose=verbose)
        passes += 1
    return state


def res(clauses, frontier: int = 0, verbose: bool = False) -> bool:
    """
    True if the clauses are unsatisfiable (the empty clause is derivable).

    The caller's list and clauses are not modified.
    """
    state = ResolutionState.from_clauses(clauses, frontier=frontier)
    return saturate(state, verbose=verbose).refuted


def is_unsatisfiable(clauses, verbose: bool = False) -> bool:
    return res(clauses, verbose=verbose)
