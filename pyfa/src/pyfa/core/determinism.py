from __future__ import annotations

from pyfa.core.table import TransitionTable


def is_deterministic(table: TransitionTable) -> bool:
    return all(len(dests) <= 1 for _, dests in table.items())


def first_ambiguity(table: TransitionTable) -> tuple[str, str, tuple[str, ...]] | None:
    """Return the first (state, symbol, destinations) with more than one destination."""
    for (state, symbol), dests in table.items():
        if len(dests) > 1:
            return state, symbol, tuple(sorted(dests))
    return None
