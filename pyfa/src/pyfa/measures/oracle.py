"""
Brute-force nondeterministic acceptance.

Tracks the full set of reachable source states as a 0/1 vector and advances
it through the per-symbol incidence matrices. Works on any automaton, so it
serves as the reference for checking subset construction.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from pyfa.core.automaton import Automaton
from pyfa.core.matrix import build_incidence, state_index


def reachable_states(automaton: Automaton, symbols: Iterable[str]) -> frozenset[str]:
    states = automaton.states
    incidence = build_incidence(automaton.table, states)
    index = state_index(states)

    current = np.zeros(len(states), dtype=np.float64)
    current[index[automaton.initial]] = 1.0

    for symbol in symbols:
        matrix = incidence.get(symbol)
        if matrix is None:
            return frozenset()
        current = (matrix.T @ current > 0).astype(np.float64)
        if not current.any():
            return frozenset()

    return frozenset(states[idx] for idx in np.flatnonzero(current))


def nfa_accepts(automaton: Automaton, symbols: Iterable[str]) -> bool:
    return not reachable_states(automaton, symbols).isdisjoint(automaton.finals)
