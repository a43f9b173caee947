"""
Automaton: initial state, state set, final states and transition table.

Built once from parsed records and never mutated afterwards. Determinization
returns a new Automaton; the source value is left as it was.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from pyfa.core.determinism import is_deterministic
from pyfa.core.errors import AutomatonError
from pyfa.core.simulate import run
from pyfa.core.subset import determinize
from pyfa.core.table import TransitionTable
from pyfa.core.types import FINAL_TAG, NORMAL_TAG, StateSet, SubsetSpec, TransitionRecord, Verdict

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Automaton:
    table: TransitionTable
    initial: str
    finals: frozenset[str]
    states: tuple[str, ...] = ()
    # Provenance of determinized states; empty for loaded automata.
    state_sets: dict[str, StateSet] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        if not self.initial:
            raise AutomatonError("initial state must not be empty")

        # Later edits to the caller's table must not reach this value.
        object.__setattr__(self, "table", self.table.frozen_copy())

        # A state with no edges (e.g. a lone initial state) is still a state.
        states = list(dict.fromkeys((self.initial, *self.states, *self.table.states())))
        object.__setattr__(self, "states", tuple(states))
        object.__setattr__(self, "finals", frozenset(self.finals))

        if not self.finals.issubset(self.states):
            unknown = sorted(self.finals - set(self.states))
            raise AutomatonError(f"final states not in states: {unknown}")

    @classmethod
    def from_records(
        cls,
        records: Iterable[TransitionRecord],
        initial: Optional[str] = None,
        finals: Optional[Iterable[str]] = None,
    ) -> Automaton:
        """
        Build an automaton from parsed transition records.

        Args:
            records: Parsed transitions.
            initial: Initial state name. Defaults to the first normal-tagged
                state encountered, or the first state if none is normal.
            finals: Final state names. Defaults to every state tagged final.

        Raises:
            AutomatonError: No records were given, or initial/finals refer to
                unknown states.
        """
        records = list(records)
        if not records:
            raise AutomatonError("no transitions to build an automaton from")

        table = TransitionTable.from_records(records)
        seen = [state for record in records for state in (record.source, record.dest)]

        if initial is None:
            normal = [state for state in seen if state.tag == NORMAL_TAG]
            initial = (normal[0] if normal else seen[0]).name
        if finals is None:
            finals = {state.name for state in seen if state.tag == FINAL_TAG}

        # Initial must already be a state of the table.
        if initial not in table.states():
            raise AutomatonError(f"initial state {initial!r} does not occur in any transition")

        return cls(table=table, initial=initial, finals=frozenset(finals))

    @property
    def alphabet(self) -> tuple[str, ...]:
        return self.table.alphabet()

    def is_deterministic(self) -> bool:
        return is_deterministic(self.table)

    def determinize(self, spec: Optional[SubsetSpec] = None) -> tuple[Automaton, str]:
        result = determinize(self.table, self.initial, self.finals, spec)
        dfa = Automaton(
            table=result.table,
            initial=result.initial,
            finals=result.finals,
            state_sets=result.state_sets,
        )
        return dfa, dfa.listing()

    def run(self, symbols: Iterable[str]) -> Verdict:
        return run(self, symbols)

    def accepts(self, symbols: Iterable[str], spec: Optional[SubsetSpec] = None) -> bool:
        """Acceptance for any automaton; determinizes first when needed."""
        automaton = self
        if not self.is_deterministic():
            logger.info("automaton is nondeterministic; determinizing before the run")
            automaton, _ = self.determinize(spec)
        return automaton.run(symbols).accepted

    def listing(self) -> str:
        lines = []
        for (source, symbol), dests in self.table.items():
            for dest in sorted(dests):
                lines.append(f"{source},{symbol}={dest}")
        return "\n".join(lines)
