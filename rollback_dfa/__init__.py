"""
rollback-dfa: Deterministic Finite Automata with Stepwise Rollback

This package provides:
- DFA: an automaton simulated one symbol at a time, with exact undo and reset
- TransitionTable: (state, symbol) -> destination table built from flat triples
- Prebuilt automata for identifiers, numbers, strings and keywords
- LongestMatchLexer: tokenization by running several automata in lockstep
"""

from rollback_dfa.core.position import Live, Trapped, TRAPPED
from rollback_dfa.core.transition import AmbiguousTransitionError, TransitionTable, UNDEFINED
from rollback_dfa.core.automaton import DFA, DFAConfig
from rollback_dfa.lexer.longest_match import LongestMatchLexer, LexerConfig, Token

__version__ = "0.1.0"

__all__ = [
    "Live",
    "Trapped",
    "TRAPPED",
    "AmbiguousTransitionError",
    "TransitionTable",
    "UNDEFINED",
    "DFA",
    "DFAConfig",
    "LongestMatchLexer",
    "LexerConfig",
    "Token",
]
