"""
Tests for prebuilt automata.
"""

import pytest

from rollback_dfa.core.automaton import DFAConfig
from rollback_dfa.core.position import Live
from rollback_dfa.domains.character_classes import (
    alphabetic_automaton,
    numeric_automaton,
    string_automaton,
    single_character_automaton,
    keyword_automaton,
)


class TestAlphabetic:
    """Tests for the identifier automaton."""

    def test_accepts_words(self):
        dfa = alphabetic_automaton()
        inputs = [
            "aaaaaab",
            "lkjasdlkjehasdljhasdljhaskdjh",
            "hello",
            "world",
        ]
        for text in inputs:
            for c in text:
                dfa.step(c)
            assert dfa.is_accepted(), text
            dfa.reset()

    def test_rejects(self):
        dfa = alphabetic_automaton()
        assert not dfa.accepts("")
        assert not dfa.accepts("abc1")
        assert not dfa.accepts("Hello")

    def test_custom_letters(self):
        dfa = alphabetic_automaton(letters="AB")
        assert dfa.accepts("ABBA")
        assert not dfa.accepts("abba")


class TestNumeric:
    """Tests for the number automaton."""

    def test_accepts_numbers(self):
        dfa = numeric_automaton()
        for text in ["1234", "123455677", "0123"]:
            for c in text:
                dfa.step(c)
            assert dfa.is_accepted(), text
            dfa.reset()

    def test_rejects(self):
        dfa = numeric_automaton()
        assert not dfa.accepts("12a")
        assert not dfa.accepts("-1")

    def test_config_is_passed(self):
        dfa = numeric_automaton(config=DFAConfig(history_limit=3))
        dfa.feed("123456")
        assert dfa.depth == 3


class TestString:
    """Tests for the quoted string automaton."""

    def test_accepts_string(self):
        dfa = string_automaton()
        assert dfa.accepts('"aaaaaab"')
        assert dfa.accepts('""')
        assert dfa.accepts("\"it's 42\"")

    def test_unterminated(self):
        dfa = string_automaton()
        assert not dfa.accepts('"abc')
        assert not dfa.is_trapped()

    def test_nothing_after_closing_quote(self):
        dfa = string_automaton()
        assert not dfa.accepts('"a"b')
        assert dfa.is_trapped()
        dfa.rollback()
        assert dfa.is_accepted()

    def test_custom_quote(self):
        dfa = string_automaton(quote="'", body="abc")
        assert dfa.accepts("'abc'")

    def test_quote_in_body_rejected(self):
        with pytest.raises(ValueError):
            string_automaton(body='ab"')


class TestSingleCharacter:
    """Tests for single character automata."""

    @pytest.mark.parametrize("char", ["(", ")", " ", ">"])
    def test_accepts_exactly_one(self, char):
        dfa = single_character_automaton(char)
        assert dfa.accepts(char)
        assert not dfa.accepts(char * 2)
        assert not dfa.accepts("")


class TestKeyword:
    """Tests for keyword automata."""

    def test_if(self):
        dfa = keyword_automaton("if")
        assert dfa.step("i") is False
        assert dfa.step("f") is True
        assert dfa.position == Live(2)
        assert dfa.step("a") is False
        assert dfa.is_trapped()

    def test_prefix_not_accepted(self):
        dfa = keyword_automaton("define")
        assert not dfa.accepts("def")
        assert dfa.accepts("define")

    def test_repeated_letters(self):
        dfa = keyword_automaton("loop")
        assert dfa.accepts("loop")
        assert not dfa.accepts("lop")

    def test_empty_keyword(self):
        with pytest.raises(ValueError):
            keyword_automaton("")


class TestIndependence:
    """Each factory call returns a separate engine."""

    def test_fresh_instances(self):
        a = alphabetic_automaton()
        b = alphabetic_automaton()
        a.feed("abc")
        assert b.depth == 0
        assert a is not b


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
