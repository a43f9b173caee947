"""Automaton serialization module (save/load via pickle, listing export)."""

import pickle
from pathlib import Path

from pyfa.core.automaton import Automaton


def save_automaton(automaton: Automaton, path: str) -> None:
    """Save automaton to file using pickle.

    Captures the full value: table, initial state, finals and StateSet
    provenance of determinized states.

    Args:
        automaton: Automaton instance to save
        path: File path where pickle will be written
    """
    with open(path, "wb") as f:
        pickle.dump(automaton, f, protocol=pickle.HIGHEST_PROTOCOL)


def load_automaton_pickle(path: str) -> Automaton:
    """Load automaton from pickle file.

    Args:
        path: File path to load from

    Returns:
        Restored Automaton instance

    Raises:
        FileNotFoundError: If path does not exist
        TypeError: If the file holds something other than an Automaton
    """
    if not Path(path).exists():
        raise FileNotFoundError(f"Automaton file not found: {path}")

    with open(path, "rb") as f:
        automaton = pickle.load(f)

    if not isinstance(automaton, Automaton):
        raise TypeError(f"expected Automaton in {path}, got {type(automaton).__name__}")
    return automaton


def save_listing(automaton: Automaton, path: str) -> None:
    """Write the transition listing, readable again by load_automaton."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(automaton.listing())
        f.write("\n")
