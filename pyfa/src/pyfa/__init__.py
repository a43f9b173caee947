"""pyfa: finite automata determinization and simulation."""

__version__ = "0.1.0"
