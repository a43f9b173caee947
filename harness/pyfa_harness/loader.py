"""Transition file loading."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from pyfa.core.automaton import Automaton
from pyfa.core.errors import ParseWarning
from pyfa.core.records import parse_records

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    automaton: Automaton
    warnings: list[ParseWarning] = field(default_factory=list)


def load_automaton(path: str, initial: Optional[str] = None) -> LoadResult:
    """Load an automaton from a file of transition lines.

    Malformed lines are skipped with a warning; the rest are loaded.

    Args:
        path: File with one `<tag><digits>,<symbol>=<tag><digits>` per line
        initial: Initial state; defaults to the first normal-tagged state

    Returns:
        LoadResult with the automaton and the skipped-line warnings

    Raises:
        FileNotFoundError: If path does not exist
        AutomatonError: If no valid transition remains
    """
    if not Path(path).exists():
        raise FileNotFoundError(f"Transition file not found: {path}")

    # Undecodable bytes become U+FFFD so the line fails the grammar like any other.
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        outcome = parse_records(f)

    automaton = Automaton.from_records(outcome.records, initial=initial)
    logger.info(
        "loaded %d transitions over %d states from %s (%d skipped)",
        len(outcome.records),
        len(automaton.states),
        path,
        len(outcome.warnings),
    )
    return LoadResult(automaton=automaton, warnings=outcome.warnings)
