"""Prebuilt automata for common lexical categories."""

from rollback_dfa.domains.character_classes import (
    alphabetic_automaton,
    numeric_automaton,
    string_automaton,
    single_character_automaton,
    keyword_automaton,
)

__all__ = [
    "alphabetic_automaton",
    "numeric_automaton",
    "string_automaton",
    "single_character_automaton",
    "keyword_automaton",
]
