"""
Bounded-length language comparison between automata.

Enumerates every string over an alphabet up to a maximum length and compares
acceptance verdicts as boolean vectors.
"""

from __future__ import annotations

import itertools
from typing import Callable, Optional

import numpy as np

from pyfa.core.automaton import Automaton
from pyfa.measures.oracle import nfa_accepts


def enumerate_strings(alphabet: tuple[str, ...], max_length: int) -> list[str]:
    if max_length < 0:
        raise ValueError("max_length must be >= 0")

    strings = [""]
    for length in range(1, max_length + 1):
        strings.extend("".join(chars) for chars in itertools.product(alphabet, repeat=length))
    return strings


def acceptance_vector(accepts: Callable[[str], bool], strings: list[str]) -> np.ndarray:
    return np.fromiter((accepts(s) for s in strings), dtype=np.bool_, count=len(strings))


def _shared_strings(a: Automaton, b: Automaton, max_length: int) -> list[str]:
    alphabet = tuple(sorted(set(a.alphabet) | set(b.alphabet)))
    return enumerate_strings(alphabet, max_length)


def agreement_rate(a: Automaton, b: Automaton, max_length: int) -> float:
    """Fraction of strings up to max_length on which a and b agree."""
    strings = _shared_strings(a, b, max_length)
    vec_a = acceptance_vector(lambda s: nfa_accepts(a, s), strings)
    vec_b = acceptance_vector(lambda s: nfa_accepts(b, s), strings)
    return float(np.mean(vec_a == vec_b))


def find_counterexample(a: Automaton, b: Automaton, max_length: int) -> Optional[str]:
    """Shortest string up to max_length accepted by exactly one of a and b."""
    for s in _shared_strings(a, b, max_length):
        if nfa_accepts(a, s) != nfa_accepts(b, s):
            return s
    return None


def languages_agree(a: Automaton, b: Automaton, max_length: int) -> bool:
    return find_counterexample(a, b, max_length) is None
