"""Harness utilities for pyfa.

This package contains the file loader, the command-line driver, automaton
serialization and run artifacts. These are not part of the core pyfa
library package.
"""
