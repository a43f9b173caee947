from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from pyfa.core.determinism import first_ambiguity
from pyfa.core.errors import NotDeterministic
from pyfa.core.types import Accepted, Rejected, Stuck, Verdict

if TYPE_CHECKING:
    from pyfa.core.automaton import Automaton


def run(automaton: Automaton, symbols: Iterable[str]) -> Verdict:
    """
    Walk a deterministic automaton over `symbols` from its initial state.

    Args:
        automaton: Automaton whose table has at most one destination per key.
        symbols: Input string or any iterable of single-character symbols.

    Returns:
        Accepted or Rejected once all input is consumed, or Stuck at the
        first (state, symbol) without an outgoing edge.

    Raises:
        NotDeterministic: Some key of the table has several destinations.
    """
    ambiguity = first_ambiguity(automaton.table)
    if ambiguity is not None:
        raise NotDeterministic(*ambiguity)

    current = automaton.initial
    path = [current]

    for symbol in symbols:
        dests = automaton.table.lookup(current, symbol)
        if not dests:
            return Stuck(state=current, symbol=symbol, path=tuple(path))
        (current,) = dests
        path.append(current)

    if current in automaton.finals:
        return Accepted(path=tuple(path))
    return Rejected(path=tuple(path))
