"""Core components for rollback-dfa."""

from rollback_dfa.core.position import Live, Position, Trapped, TRAPPED
from rollback_dfa.core.transition import (
    AmbiguousTransitionError,
    TransitionTable,
    UNDEFINED,
)
from rollback_dfa.core.automaton import DFA, DFAConfig

__all__ = [
    "Live",
    "Position",
    "Trapped",
    "TRAPPED",
    "AmbiguousTransitionError",
    "TransitionTable",
    "UNDEFINED",
    "DFA",
    "DFAConfig",
]
