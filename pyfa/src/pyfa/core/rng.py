"""
Seeding for random automata.

Everything random in pyfa takes a `SeedLike` and turns it into a Generator
here, so a single int reproduces a whole batch of automata.
"""

from __future__ import annotations

from typing import Union

import numpy as np
from numpy.random import Generator, SeedSequence

SeedLike = Union[int, np.integer, SeedSequence, Generator, None]


def make_rng(seed: SeedLike = None) -> Generator:
    """
    Generator for `seed`. A Generator passes through unchanged, so callers
    can hand either a seed or an rng they already own.

    Raises:
        TypeError: seed is none of int, SeedSequence, Generator or None.
    """
    if isinstance(seed, Generator):
        return seed
    if seed is not None and not isinstance(seed, (int, np.integer, SeedSequence)):
        raise TypeError(f"seed must be int, SeedSequence, Generator or None, got {type(seed)}")
    return Generator(np.random.PCG64(seed))


def spawn_rngs(parent: SeedLike, n: int) -> list[Generator]:
    """n independent child Generators, one per random automaton in a batch."""
    if n < 0:
        raise ValueError("n must be >= 0")
    if isinstance(parent, (int, np.integer)) or parent is None:
        parent = SeedSequence(parent)
    if isinstance(parent, Generator):
        parent = parent.bit_generator.seed_seq
    if not isinstance(parent, SeedSequence):
        raise TypeError(f"parent must be int, SeedSequence, Generator or None, got {type(parent)}")
    return [Generator(np.random.PCG64(child)) for child in parent.spawn(n)]
