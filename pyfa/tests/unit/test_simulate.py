"""
Tests for the deterministic simulator.
"""

import pytest

from pyfa.core.automaton import Automaton
from pyfa.core.errors import AutomatonError, NotDeterministic
from pyfa.core.records import parse_record
from pyfa.core.simulate import run
from pyfa.core.types import Accepted, Rejected, Stuck


class TestScenario:
    """After determinizing q0,a=q1 / q0,a=f1 / q1,b=f1."""

    def test_ab_accepted(self, ab_dfa):
        assert run(ab_dfa, "ab") == Accepted(path=("q0", "f1", "f2"))

    def test_a_accepted(self, ab_dfa):
        assert run(ab_dfa, "a").accepted

    def test_b_stuck(self, ab_dfa):
        assert run(ab_dfa, "b") == Stuck(state="q0", symbol="b", path=("q0",))

    def test_stuck_after_progress(self, ab_dfa):
        verdict = run(ab_dfa, "aab")
        assert isinstance(verdict, Stuck)
        assert verdict.state == "f1"
        assert verdict.symbol == "a"
        assert verdict.path == ("q0", "f1")

    def test_unknown_symbol_stuck(self, ab_dfa):
        verdict = run(ab_dfa, "z")
        assert isinstance(verdict, Stuck)
        assert verdict.symbol == "z"


class TestEmptyInput:
    def test_non_final_initial_rejected(self, ab_dfa):
        assert run(ab_dfa, "") == Rejected(path=("q0",))

    def test_final_initial_accepted(self):
        automaton = Automaton.from_records([parse_record("f0,a=q1")], initial="f0")
        assert run(automaton, "") == Accepted(path=("f0",))


class TestDiv3:
    @pytest.mark.parametrize("bits", ["0", "11", "110", "1001", "1111"])
    def test_multiples_of_three_accepted(self, div3_automaton, bits):
        assert run(div3_automaton, bits).accepted

    @pytest.mark.parametrize("bits", ["1", "10", "100", "101", "111"])
    def test_others_rejected(self, div3_automaton, bits):
        assert isinstance(run(div3_automaton, bits), Rejected)

    def test_accepts_list_of_symbols(self, div3_automaton):
        assert run(div3_automaton, ["1", "1"]).accepted


class TestNotDeterministic:
    def test_run_on_nfa_raises(self, ab_nfa):
        with pytest.raises(NotDeterministic) as exc_info:
            run(ab_nfa, "ab")
        assert exc_info.value.state == "q0"
        assert exc_info.value.symbol == "a"
        assert exc_info.value.destinations == ("f1", "q1")

    def test_raises_even_if_ambiguity_not_reached(self, ab_nfa):
        """The check covers the whole table, not just the walked path."""
        with pytest.raises(NotDeterministic):
            run(ab_nfa, "")

    def test_is_an_automaton_error(self):
        assert issubclass(NotDeterministic, AutomatonError)
