"""
Pytest configuration and fixtures for pyfa tests.

Provides deterministic RNG and sample automata for unit and integration tests.
"""

import pytest


@pytest.fixture
def deterministic_rng():
    """
    Create a deterministic RNG seeded with 12345.

    Used for random automata so property tests are reproducible.
    """
    from pyfa.core.rng import make_rng
    return make_rng(12345)


@pytest.fixture
def ab_nfa():
    """
    q0,a=q1 / q0,a=f1 / q1,b=f1: nondeterministic on 'a' from q0.
    """
    from pyfa.tasks.library import make_ab_nfa
    return make_ab_nfa()


@pytest.fixture
def ab_dfa(ab_nfa):
    """Determinized form of ab_nfa."""
    dfa, _ = ab_nfa.determinize()
    return dfa


@pytest.fixture
def div3_automaton():
    """Deterministic automaton for binary multiples of 3."""
    from pyfa.tasks.library import make_div3_automaton
    return make_div3_automaton()
