"""
Error kinds raised by the automaton engine.

Structural problems are distinct exception types so callers can branch on
kind. Parse problems are recovered and reported as ParseWarning values.
"""

from __future__ import annotations

from dataclasses import dataclass


class AutomatonError(ValueError):
    """Base class for structural automaton errors."""


class NotDeterministic(AutomatonError):
    """Simulation was attempted on a table with a multi-destination key."""

    def __init__(self, state: str, symbol: str, destinations: tuple[str, ...]):
        self.state = state
        self.symbol = symbol
        self.destinations = destinations
        super().__init__(
            f"transition ({state}, {symbol!r}) has {len(destinations)} destinations "
            f"{list(destinations)}; determinize the automaton first"
        )


class AutomatonTooLarge(AutomatonError):
    """Subset construction discovered more state sets than allowed."""

    def __init__(self, max_states: int):
        self.max_states = max_states
        super().__init__(f"subset construction exceeded max_states={max_states}")


@dataclass(frozen=True)
class ParseWarning:
    """A malformed transition line that was skipped."""

    line_no: int
    line: str
    reason: str

    def __str__(self) -> str:
        return f"line {self.line_no}: {self.reason}: {self.line!r}"
