from __future__ import annotations

import numpy as np
from numpy.random import Generator

from pyfa.core.automaton import Automaton
from pyfa.core.rng import SeedLike, make_rng, spawn_rngs
from pyfa.core.table import TransitionTable
from pyfa.core.types import FINAL_TAG, NORMAL_TAG


def _random_edges(
    n_states: int,
    density: float,
    rng: Generator,
) -> tuple[np.ndarray, np.ndarray]:
    total = n_states * n_states
    n_edges = int(rng.binomial(total, density))
    if n_edges == 0:
        empty = np.array([], dtype=np.int64)
        return empty, empty

    flat_indices = rng.choice(total, size=n_edges, replace=False)
    return flat_indices // n_states, flat_indices % n_states


def random_automaton(
    n_states: int,
    alphabet: tuple[str, ...],
    density: float,
    final_fraction: float,
    rng: SeedLike = None,
) -> Automaton:
    """
    Random automaton with independent edges per symbol.

    Each (source, symbol, dest) triple is present with probability `density`;
    each state is final with probability `final_fraction`. State 0 is initial.
    Names follow the record grammar, so final states are tagged 'f'.
    `rng` is a seed or a Generator; the same seed gives the same automaton.
    """
    if n_states <= 0:
        raise ValueError("n_states must be > 0")
    if not alphabet:
        raise ValueError("alphabet must not be empty")
    if not (0.0 <= density <= 1.0):
        raise ValueError("density must be in [0, 1]")
    if not (0.0 <= final_fraction <= 1.0):
        raise ValueError("final_fraction must be in [0, 1]")

    rng = make_rng(rng)
    is_final = rng.random(n_states) < final_fraction
    names = tuple(
        f"{FINAL_TAG if is_final[idx] else NORMAL_TAG}{idx}" for idx in range(n_states)
    )

    table = TransitionTable()
    for symbol in alphabet:
        rows, cols = _random_edges(n_states, density, rng)
        for row, col in zip(rows, cols):
            table.add(names[row], symbol, names[col])

    return Automaton(
        table=table,
        initial=names[0],
        finals=frozenset(name for idx, name in enumerate(names) if is_final[idx]),
        states=names,
    )


def random_automata(
    count: int,
    n_states: int,
    alphabet: tuple[str, ...],
    density: float,
    final_fraction: float,
    seed: SeedLike = None,
) -> list[Automaton]:
    """`count` independent random automata drawn from child streams of `seed`."""
    return [
        random_automaton(n_states, alphabet, density, final_fraction, rng)
        for rng in spawn_rngs(seed, count)
    ]
