from __future__ import annotations

from typing import Iterable, Iterator

from pyfa.core.types import TransitionRecord


class TransitionTable:
    """
    Mapping from (state, symbol) to a set of destination states.

    Destinations are sets, so adding the same edge twice leaves the table
    unchanged. Keys and states keep first-insertion order.

    A frozen copy (see `frozen_copy`) rejects further `add` calls; automata
    hold only frozen tables.
    """

    def __init__(self):
        self._edges: dict[tuple[str, str], set[str]] = {}
        self._states: dict[str, None] = {}
        self._frozen = False

    @classmethod
    def from_records(cls, records: Iterable[TransitionRecord]) -> TransitionTable:
        table = cls()
        for record in records:
            table.add(record.source.name, record.symbol, record.dest.name)
        return table

    @property
    def frozen(self) -> bool:
        return self._frozen

    def frozen_copy(self) -> TransitionTable:
        if self._frozen:
            return self
        table = TransitionTable()
        table._edges = {key: set(dests) for key, dests in self._edges.items()}
        table._states = dict(self._states)
        table._frozen = True
        return table

    def add(self, source: str, symbol: str, dest: str) -> None:
        if self._frozen:
            raise TypeError("transition table is frozen")
        self._edges.setdefault((source, symbol), set()).add(dest)
        self._states.setdefault(source, None)
        self._states.setdefault(dest, None)

    def lookup(self, state: str, symbol: str) -> frozenset[str]:
        return frozenset(self._edges.get((state, symbol), ()))

    def alphabet(self) -> tuple[str, ...]:
        return tuple(sorted({symbol for _, symbol in self._edges}))

    def states(self) -> tuple[str, ...]:
        return tuple(self._states)

    def keys(self) -> list[tuple[str, str]]:
        return list(self._edges)

    def items(self) -> Iterator[tuple[tuple[str, str], frozenset[str]]]:
        for key, dests in self._edges.items():
            yield key, frozenset(dests)

    def edge_count(self) -> int:
        return sum(len(dests) for dests in self._edges.values())

    def __len__(self) -> int:
        return len(self._edges)

    def __contains__(self, key: object) -> bool:
        return key in self._edges

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransitionTable):
            return NotImplemented
        return self._edges == other._edges

    def __hash__(self) -> int:
        if not self._frozen:
            raise TypeError("unhashable type: mutable 'TransitionTable'; use frozen_copy()")
        return hash(frozenset((key, frozenset(dests)) for key, dests in self._edges.items()))

    def __repr__(self) -> str:
        return f"TransitionTable(keys={len(self._edges)}, edges={self.edge_count()})"
