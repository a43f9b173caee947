"""
Subset (powerset) construction: nondeterministic table -> deterministic table.

Breadth-first over StateSets. A registry keyed by StateSet value guarantees
each distinct set is named and expanded exactly once, so the worklist drains
after at most 2^|states| iterations. SubsetSpec.max_states caps that bound.

Fresh names are `f<n>` for sets that intersect the source finals and `q<n>`
otherwise, where n is the discovery ordinal. The resulting listing therefore
reads back with the same finals under tag-based classification.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional

from pyfa.core.errors import AutomatonTooLarge
from pyfa.core.table import TransitionTable
from pyfa.core.types import FINAL_TAG, NORMAL_TAG, StateSet, SubsetSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubsetResult:
    table: TransitionTable
    initial: str
    finals: frozenset[str]
    state_sets: dict[str, StateSet]


def _fresh_name(ordinal: int, is_final: bool) -> str:
    return f"{FINAL_TAG if is_final else NORMAL_TAG}{ordinal}"


def _step(table: TransitionTable, current: StateSet, symbol: str) -> StateSet:
    reached: set[str] = set()
    for state in current:
        reached.update(table.lookup(state, symbol))
    return StateSet.of(reached)


def determinize(
    table: TransitionTable,
    initial: str,
    finals: Iterable[str],
    spec: Optional[SubsetSpec] = None,
) -> SubsetResult:
    """
    Build the deterministic equivalent of `table` reachable from `initial`.

    Args:
        table: Source transitions, deterministic or not.
        initial: Source initial state.
        finals: Source final states.
        spec: Construction limits. Defaults to SubsetSpec().

    Returns:
        SubsetResult with the new table, initial name, finals and the
        StateSet each new name stands for.

    Raises:
        AutomatonTooLarge: More than spec.max_states StateSets were discovered.
    """
    spec = spec if spec is not None else SubsetSpec()
    source_finals = frozenset(finals)
    alphabet = table.alphabet()

    names: dict[StateSet, str] = {}
    dfa_finals: set[str] = set()
    dfa = TransitionTable()

    def register(state_set: StateSet) -> str:
        if len(names) >= spec.max_states:
            raise AutomatonTooLarge(spec.max_states)
        is_final = state_set.intersects(source_finals)
        name = _fresh_name(len(names), is_final)
        names[state_set] = name
        if is_final:
            dfa_finals.add(name)
        worklist.append(state_set)
        return name

    worklist: deque[StateSet] = deque()
    start = StateSet.of([initial])
    start_name = register(start)

    while worklist:
        current = worklist.popleft()
        current_name = names[current]
        logger.debug("expanding %s = %s", current_name, current)

        for symbol in alphabet:
            target = _step(table, current, symbol)
            if not target:
                continue
            target_name = names.get(target)
            if target_name is None:
                target_name = register(target)
            dfa.add(current_name, symbol, target_name)

    logger.info(
        "subset construction: %d source states -> %d deterministic states (%d final)",
        len(table.states()),
        len(names),
        len(dfa_finals),
    )

    return SubsetResult(
        table=dfa.frozen_copy(),
        initial=start_name,
        finals=frozenset(dfa_finals),
        state_sets={name: state_set for state_set, name in names.items()},
    )
