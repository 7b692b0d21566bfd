"""
Automaton positions.

A position is where the automaton currently sits while consuming input:
- Live(q): a concrete state q
- TRAPPED: the absorbing failure position reached through an undefined transition

Positions are immutable values, so the rollback history can store them directly.
"""

from dataclasses import dataclass
from typing import Union


class Trapped:
    """Singleton for the absorbing trap position."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "Trapped"

    def __reduce__(self):
        return (Trapped, ())


TRAPPED = Trapped()


@dataclass(frozen=True)
class Live:
    """A live position at a concrete state identifier."""

    state: int

    def __repr__(self):
        return f"Live({self.state})"


Position = Union[Live, Trapped]

START = Live(0)
