#!/usr/bin/env python3
"""
Lisp Lexer Demo for rollback-dfa.

This example demonstrates:
1. Stepping a DFA symbol by symbol, trapping, and rolling back
2. Recovering the longest accepted prefix after a trap
3. Tokenizing s-expressions with several automata run in lockstep
"""

from tqdm import tqdm

from rollback_dfa.core.automaton import DFA
from rollback_dfa.domains.character_classes import alphabetic_automaton, keyword_automaton
from rollback_dfa.lexer.longest_match import LexerConfig, LongestMatchLexer, lisp_lexer


def demo_engine():
    """Demonstrate stepping, trapping and rollback on a*b."""
    print("=" * 60)
    print("DFA Engine Demo")
    print("=" * 60)

    dfa = DFA([(0, "a", 0), (0, "b", 1)], [1])
    print(dfa)

    print("\n--- Stepping through 'aaabb' ---")
    for c in "aaabb":
        accepted = dfa.step(c)
        print(f"After {c!r}: position={dfa.position!r}, accepted={accepted}")

    print("\n--- Rolling back to the longest accepted prefix ---")
    while not dfa.is_accepted():
        dfa.rollback()
        print(dfa.describe_position())

    print(f"Valid symbols from here: {sorted(dfa.valid_symbols())}")
    print(f"Transition matrix (alphabet {dfa.table.alphabet}):")
    print(dfa.table.to_matrix())


def demo_longest_match():
    """Demonstrate keyword vs identifier resolution."""
    print("\n" + "=" * 60)
    print("Longest Match Demo")
    print("=" * 60)

    lexer = LongestMatchLexer([
        ("IF", keyword_automaton("if")),
        ("ID", alphabetic_automaton()),
    ])
    for text in ["if", "ifa", "if x", "x1"]:
        print(f"{text!r:8} -> {lexer.match(text)}")


def demo_tokenize():
    """Tokenize a small corpus of s-expressions."""
    print("\n" + "=" * 60)
    print("Tokenizer Demo")
    print("=" * 60)

    corpus = [
        "(define (myfn x y) (if (> x y) x y))",
        "(print \"hello world\")",
        "(myfn 10 20)",
    ] * 100

    lexer = lisp_lexer(LexerConfig(skip_categories={"SPACE"}))

    total = 0
    for line in tqdm(corpus, desc="Lexing"):
        total += sum(1 for _ in lexer.tokenize(line))

    print(f"\n{len(corpus)} lines, {total} tokens")
    print("\nTokens of the first line:")
    for token in lexer.tokenize(corpus[0]):
        print(f"  {token.offset:3d}  {token.category:9s} {token.lexeme!r}")


if __name__ == "__main__":
    demo_engine()
    demo_longest_match()
    demo_tokenize()
