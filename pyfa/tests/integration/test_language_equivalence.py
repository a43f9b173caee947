from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from pyfa.core.rng import make_rng, spawn_rngs
from pyfa.measures.equivalence import enumerate_strings, languages_agree
from pyfa.measures.oracle import nfa_accepts
from pyfa.tasks.library import make_div3_automaton, make_ends_with_nfa, make_nth_from_last_nfa
from pyfa.tasks.random_nfa import random_automata, random_automaton

ALPHABET = ("a", "b")
MAX_LENGTH = 6


def _random_nfas(n: int, seed: int):
    for rng in spawn_rngs(make_rng(seed), n):
        n_states = int(rng.integers(1, 7))
        density = float(rng.uniform(0.05, 0.5))
        yield random_automaton(n_states, ALPHABET, density, 0.3, rng)


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_determinized_run_matches_oracle(seed: int) -> None:
    strings = enumerate_strings(ALPHABET, MAX_LENGTH)

    for nfa in _random_nfas(10, seed):
        dfa, _ = nfa.determinize()
        for s in strings:
            assert dfa.run(s).accepted == nfa_accepts(nfa, s), (nfa.listing(), s)


def test_determinized_tables_are_deterministic() -> None:
    for nfa in _random_nfas(25, 99):
        dfa, _ = nfa.determinize()
        assert dfa.is_deterministic()
        assert all(len(dests) == 1 for _, dests in dfa.table.items())


def test_determinizing_a_dfa_preserves_language() -> None:
    div3 = make_div3_automaton()
    dfa, _ = div3.determinize()

    strings = enumerate_strings(("0", "1"), 8)
    assert all(dfa.run(s).accepted == div3.run(s).accepted for s in strings)


def test_determinize_is_idempotent_on_language() -> None:
    for nfa in _random_nfas(10, 7):
        once, _ = nfa.determinize()
        twice, _ = once.determinize()
        assert languages_agree(once, twice, MAX_LENGTH)


@pytest.mark.parametrize("nfa_factory", [
    lambda: make_ends_with_nfa("aba"),
    lambda: make_nth_from_last_nfa(3),
])
def test_classic_families(nfa_factory) -> None:
    nfa = nfa_factory()
    dfa, _ = nfa.determinize()
    assert languages_agree(nfa, dfa, MAX_LENGTH)


def test_independent_automata_determinize_in_parallel() -> None:
    nfas = random_automata(16, 6, ALPHABET, 0.3, 0.3, seed=2024)
    sequential = [nfa.determinize() for nfa in nfas]

    with ThreadPoolExecutor(max_workers=4) as pool:
        parallel = list(pool.map(lambda nfa: nfa.determinize(), nfas))

    for (seq_dfa, seq_listing), (par_dfa, par_listing) in zip(sequential, parallel):
        assert par_listing == seq_listing
        assert par_dfa == seq_dfa
        assert par_dfa.state_sets == seq_dfa.state_sets
