"""
Core types for pyfa: State, TransitionRecord, StateSet, SubsetSpec and verdicts.

Pure data containers with validation. No behavior logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

NORMAL_TAG = "q"
FINAL_TAG = "f"


@dataclass(frozen=True)
class State:
    """A named automaton state: tag ('q' normal, 'f' final) plus digit suffix."""

    tag: str
    digits: str

    def __post_init__(self):
        """Validate State constraints."""
        if self.tag not in (NORMAL_TAG, FINAL_TAG):
            raise ValueError(f"tag must be '{NORMAL_TAG}' or '{FINAL_TAG}'")
        if not self.digits or not self.digits.isdigit():
            raise ValueError("digits must be a non-empty decimal string")

    @property
    def name(self) -> str:
        return self.tag + self.digits

    @property
    def is_final(self) -> bool:
        return self.tag == FINAL_TAG

    @classmethod
    def from_name(cls, name: str) -> State:
        if not name:
            raise ValueError("state name must not be empty")
        return cls(tag=name[0], digits=name[1:])


@dataclass(frozen=True)
class TransitionRecord:
    """One parsed `<tag><digits>,<symbol>=<tag><digits>` line."""

    source: State
    symbol: str
    dest: State

    def __post_init__(self):
        """Validate TransitionRecord constraints."""
        if len(self.symbol) != 1 or not self.symbol.isascii() or not self.symbol.isalnum():
            raise ValueError("symbol must be a single alphanumeric character")

    def __str__(self) -> str:
        return f"{self.source.name},{self.symbol}={self.dest.name}"


@dataclass(frozen=True)
class StateSet:
    """
    StateSet: an unordered group of source-automaton states.

    Immutable: members are deduplicated and sorted, so two StateSets compare
    and hash equal iff they hold the same states.
    """

    members: tuple[str, ...]

    def __post_init__(self):
        """Deduplicate and sort members."""
        # Use object.__setattr__ because this is frozen dataclass
        object.__setattr__(self, "members", tuple(sorted(set(self.members))))

    @classmethod
    def of(cls, states: Iterable[str]) -> StateSet:
        return cls(members=tuple(states))

    def __iter__(self):
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def __bool__(self) -> bool:
        return bool(self.members)

    def intersects(self, states: Iterable[str]) -> bool:
        return not set(self.members).isdisjoint(states)

    def __str__(self) -> str:
        return "{" + ", ".join(self.members) + "}"


@dataclass(frozen=True)
class SubsetSpec:
    """Configuration for subset construction."""

    max_states: int = 4096

    def __post_init__(self):
        """Validate SubsetSpec constraints."""
        if self.max_states <= 0:
            raise ValueError("max_states must be > 0")


@dataclass(frozen=True)
class Accepted:
    """Input consumed and the run ended in a final state."""

    path: tuple[str, ...]

    @property
    def accepted(self) -> bool:
        return True

    @property
    def final_state(self) -> str:
        return self.path[-1]


@dataclass(frozen=True)
class Rejected:
    """Input consumed but the run ended in a non-final state."""

    path: tuple[str, ...]

    @property
    def accepted(self) -> bool:
        return False

    @property
    def final_state(self) -> str:
        return self.path[-1]


@dataclass(frozen=True)
class Stuck:
    """No outgoing edge for `symbol` from `state`; the rest of the input is unread."""

    state: str
    symbol: str
    path: tuple[str, ...]

    @property
    def accepted(self) -> bool:
        return False

    @property
    def final_state(self) -> str:
        return self.state


Verdict = Union[Accepted, Rejected, Stuck]
