"""Longest-match lexing on top of DFA engines."""

from rollback_dfa.lexer.longest_match import (
    NO_MATCH,
    LexError,
    LexerConfig,
    LongestMatchLexer,
    Pattern,
    Token,
    lisp_lexer,
)

__all__ = [
    "NO_MATCH",
    "LexError",
    "LexerConfig",
    "LongestMatchLexer",
    "Pattern",
    "Token",
    "lisp_lexer",
]
