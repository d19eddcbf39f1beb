"""
Reporting utilities for a driver state.
"""

from .core.state import ResolutionState


def print_state(state: ResolutionState):
    """Print a summary of the current driver state."""
    print(f"\n{'='*60}")
    print(f"Pass: {state.passes}  Status: {state.status}  Frontier: {state.frontier}")
    print(f"Clauses ({len(state.clauses)}):")
    for i, clause in enumerate(state.clauses):
        marker = "*" if i >= state.frontier else " "
        src = f" (from #{clause.source[0]} + #{clause.source[1]})" if clause.source else ""
        print(f" {marker}{i:3d}. {clause.name}{src}")
    print(f"{'='*60}")


def print_history(state: ResolutionState):
    """Print what each pass produced."""
    print(f"\n{'='*60}")
    print("Pass history:")
    print(f"{'='*60}")
    for entry in state.history:
        produced = ", ".join(entry["produced"]) if entry["produced"] else "(nothing new)"
        print(f"  Pass {entry['pass']} (frontier {entry['frontier']}, "
              f"{entry['examined']} pairs): {produced}")
