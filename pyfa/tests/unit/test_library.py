from __future__ import annotations

import pytest

from pyfa.core.rng import make_rng
from pyfa.tasks.library import (
    make_ab_nfa,
    make_div3_automaton,
    make_ends_with_nfa,
    make_nth_from_last_nfa,
)
from pyfa.tasks.random_nfa import random_automata, random_automaton


def test_div3_structure() -> None:
    dfa = make_div3_automaton()

    assert dfa.initial == "f0"
    assert dfa.finals == frozenset({"f0"})
    assert dfa.alphabet == ("0", "1")
    assert dfa.table.lookup("q1", "1") == frozenset({"f0"})
    assert dfa.is_deterministic()


def test_ab_nfa_structure() -> None:
    nfa = make_ab_nfa()
    assert nfa.initial == "q0"
    assert nfa.table.lookup("q0", "a") == frozenset({"q1", "f1"})


def test_ends_with() -> None:
    nfa = make_ends_with_nfa("ab")
    assert nfa.accepts("bbab")
    assert not nfa.accepts("aba")


def test_ends_with_validation() -> None:
    with pytest.raises(ValueError, match="suffix"):
        make_ends_with_nfa("")
    with pytest.raises(ValueError, match="alphabet"):
        make_ends_with_nfa("ac")


def test_nth_from_last() -> None:
    nfa = make_nth_from_last_nfa(2)
    assert nfa.accepts("bab")
    assert nfa.accepts("aa")
    assert not nfa.accepts("abb")
    assert not nfa.accepts("a")


def test_random_automaton_is_reproducible() -> None:
    a = random_automaton(6, ("a", "b"), 0.3, 0.3, make_rng(3))
    b = random_automaton(6, ("a", "b"), 0.3, 0.3, make_rng(3))
    assert a == b


def test_random_automaton_accepts_int_seed() -> None:
    a = random_automaton(5, ("a", "b"), 0.4, 0.3, rng=21)
    b = random_automaton(5, ("a", "b"), 0.4, 0.3, rng=make_rng(21))
    assert a == b


def test_random_automata_batch() -> None:
    batch = random_automata(6, 4, ("a", "b"), 0.3, 0.3, seed=5)

    assert len(batch) == 6
    assert batch == random_automata(6, 4, ("a", "b"), 0.3, 0.3, seed=5)
    assert len({automaton.listing() for automaton in batch}) > 1


def test_random_automaton_names_follow_tags() -> None:
    automaton = random_automaton(8, ("a", "b"), 0.2, 0.5, make_rng(11))

    assert len(automaton.states) == 8
    assert automaton.initial in ("q0", "f0")
    for state in automaton.states:
        assert (state in automaton.finals) == state.startswith("f")


def test_random_automaton_density_extremes() -> None:
    empty = random_automaton(4, ("a",), 0.0, 0.0, make_rng(0))
    full = random_automaton(4, ("a",), 1.0, 0.0, make_rng(0))

    assert empty.table.edge_count() == 0
    assert full.table.edge_count() == 16


@pytest.mark.parametrize(
    "kwargs, match",
    [
        ({"n_states": 0}, "n_states"),
        ({"alphabet": ()}, "alphabet"),
        ({"density": 1.5}, "density"),
        ({"final_fraction": -0.1}, "final_fraction"),
    ],
)
def test_random_automaton_validation(kwargs, match) -> None:
    params = {"n_states": 3, "alphabet": ("a",), "density": 0.5, "final_fraction": 0.5}
    params.update(kwargs)
    with pytest.raises(ValueError, match=match):
        random_automaton(rng=make_rng(0), **params)
