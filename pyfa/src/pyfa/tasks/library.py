from __future__ import annotations

from pyfa.core.automaton import Automaton
from pyfa.core.records import parse_record


def _from_lines(lines: list[str], initial: str | None = None) -> Automaton:
    return Automaton.from_records([parse_record(line) for line in lines], initial=initial)


def make_div3_automaton() -> Automaton:
    """Binary numbers divisible by 3, most significant bit first."""
    return _from_lines(
        [
            "f0,0=f0",
            "f0,1=q1",
            "q1,0=q2",
            "q1,1=f0",
            "q2,0=q1",
            "q2,1=q2",
        ],
        initial="f0",
    )


def make_ab_nfa() -> Automaton:
    """Nondeterministic on 'a' from q0; accepts exactly 'a' and 'ab'."""
    return _from_lines(["q0,a=q1", "q0,a=f1", "q1,b=f1"])


def make_ends_with_nfa(suffix: str, alphabet: str = "ab") -> Automaton:
    """Strings over `alphabet` that end with `suffix`."""
    if not suffix:
        raise ValueError("suffix must not be empty")
    if not set(suffix) <= set(alphabet):
        raise ValueError("suffix must be drawn from alphabet")

    lines = [f"q0,{symbol}=q0" for symbol in alphabet]
    for i, symbol in enumerate(suffix):
        dest = f"f{i + 1}" if i + 1 == len(suffix) else f"q{i + 1}"
        lines.append(f"q{i},{symbol}={dest}")
    return _from_lines(lines, initial="q0")


def make_nth_from_last_nfa(n: int, alphabet: str = "ab") -> Automaton:
    """
    Strings whose n-th symbol from the end is alphabet[0].

    The minimal deterministic equivalent has 2**n states.
    """
    if n <= 0:
        raise ValueError("n must be > 0")

    marker = alphabet[0]
    lines = [f"q0,{symbol}=q0" for symbol in alphabet]
    lines.append(f"q0,{marker}={'f1' if n == 1 else 'q1'}")
    for i in range(1, n):
        dest = f"f{i + 1}" if i + 1 == n else f"q{i + 1}"
        lines.extend(f"q{i},{symbol}={dest}" for symbol in alphabet)
    return _from_lines(lines, initial="q0")
