"""
Character-class automata.

Small ready-made DFAs for the lexical categories of an s-expression language:
identifiers, numbers, quoted strings, single punctuation characters and
keywords. Each factory returns a fresh engine, so callers can own it exclusively.
"""

import string
from typing import List, Optional

from rollback_dfa.core.automaton import DFA, DFAConfig
from rollback_dfa.core.transition import Triple

LOWERCASE = string.ascii_lowercase
DIGITS = string.digits
STRING_BODY = LOWERCASE + DIGITS + " '"


def _one_or_more(chars: str) -> List[Triple]:
    """δ(0, c) = 1, δ(1, c) = 1 for every c in chars."""
    delta = []
    for c in chars:
        delta.extend([(0, c, 1), (1, c, 1)])
    return delta


def alphabetic_automaton(
    letters: str = LOWERCASE,
    config: Optional[DFAConfig] = None
) -> DFA:
    """One or more letters."""
    return DFA(_one_or_more(letters), [1], config)


def numeric_automaton(
    digits: str = DIGITS,
    config: Optional[DFAConfig] = None
) -> DFA:
    """One or more digits. Leading zeros are allowed."""
    return DFA(_one_or_more(digits), [1], config)


def string_automaton(
    body: str = STRING_BODY,
    quote: str = '"',
    config: Optional[DFAConfig] = None
) -> DFA:
    """
    Quoted string literal.

    δ(0, quote) = 1
    δ(1, c) = 1 for c in body
    δ(1, quote) = 2, F = {2}
    """
    if quote in body:
        raise ValueError(f"Quote character {quote!r} cannot appear in the string body")
    delta = [(0, quote, 1), (1, quote, 2)]
    delta.extend((1, c, 1) for c in body)
    return DFA(delta, [2], config)


def single_character_automaton(char: str, config: Optional[DFAConfig] = None) -> DFA:
    """Exactly one occurrence of `char`."""
    return DFA([(0, char, 1)], [1], config)


def keyword_automaton(word: str, config: Optional[DFAConfig] = None) -> DFA:
    """Exactly `word`: a chain 0 -> 1 -> ... -> len(word)."""
    if not word:
        raise ValueError("Keyword must not be empty")
    delta = [(i, c, i + 1) for i, c in enumerate(word)]
    return DFA(delta, [len(word)], config)
