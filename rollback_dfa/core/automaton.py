"""
Deterministic finite automaton with stepwise rollback.

M = (Q, Σ, δ, 0, F) simulated one symbol at a time:
1. step(c) moves Live(q) to Live(δ(q, c)), or to TRAPPED when δ(q, c) = ⊥
2. every step pushes the previous position, so rollback() undoes it exactly
3. reset() returns to Live(0) without rebuilding the table

Stepping while trapped still records history. A group of automata fed the same
input therefore stays in lockstep when the whole group rolls back.
"""

from collections import deque
from dataclasses import dataclass
from typing import Deque, FrozenSet, Iterable, Optional, Set, Tuple, Union
import logging

import numpy as np

from rollback_dfa.core.position import Live, Position, START, TRAPPED
from rollback_dfa.core.transition import TransitionTable, Triple, UNDEFINED

logger = logging.getLogger(__name__)


@dataclass
class DFAConfig:
    """Configuration for a DFA engine."""

    # Maximum number of undoable steps kept; None keeps everything
    history_limit: Optional[int] = None

    # Reject ambiguous tables at construction instead of at lookup
    eager_validation: bool = False

    def __post_init__(self):
        if self.history_limit is not None and self.history_limit < 0:
            raise ValueError(f"history_limit must be >= 0, got {self.history_limit}")


class DFA:
    """
    DFA engine: transition table, accepting set, current position and history.

    Example:
        >>> dfa = DFA([(0, "a", 0), (0, "b", 1)], [1])
        >>> dfa.feed("aab")
        True
        >>> dfa.step("b")
        False
        >>> dfa.rollback()
        >>> dfa.is_accepted()
        True
    """

    def __init__(
        self,
        transitions: Union[TransitionTable, Iterable[Triple]],
        accepting_states: Iterable[int],
        config: Optional[DFAConfig] = None
    ):
        """
        Initialize the engine at Live(0) with empty history.

        Args:
            transitions: (source, symbol, destination) triples or a built table
            accepting_states: State ids in F; duplicates collapse
            config: Engine configuration
        """
        self.config = config or DFAConfig()

        if isinstance(transitions, TransitionTable):
            self._table = transitions
        else:
            self._table = TransitionTable(transitions)
        self._accepting: FrozenSet[int] = frozenset(accepting_states)

        if self.config.eager_validation:
            self._table.validate()

        self._position: Position = START
        self._history: Deque[Position] = deque(maxlen=self.config.history_limit)

    def step(self, symbol: str) -> bool:
        """
        Consume one input symbol.

        Returns:
            Whether the position after the step is accepting.

        Raises:
            AmbiguousTransitionError: if (q, symbol) has several destinations.
                Position and history are left as they were.
        """
        position = self._position

        if isinstance(position, Live):
            next_state = self._table.transition(position.state, symbol)
            if next_state is UNDEFINED:
                logger.debug(f"Trapped on {symbol!r} from state {position.state}")
                self._position = TRAPPED
            else:
                self._position = Live(next_state)

        self._history.append(position)
        return self.is_accepted()

    def feed(self, symbols: Iterable[str]) -> bool:
        """Step through every symbol in order and return the final acceptance."""
        for symbol in symbols:
            self.step(symbol)
        return self.is_accepted()

    def accepts(self, text: Iterable[str]) -> bool:
        """Reset, then feed the whole text."""
        self.reset()
        return self.feed(text)

    def rollback(self, steps: int = 1) -> None:
        """
        Undo the most recent step(s).

        Rolling back past the oldest retained step is a no-op.
        """
        if steps < 0:
            raise ValueError(f"Cannot roll back a negative number of steps: {steps}")

        previous = self._position
        for _ in range(steps):
            if not self._history:
                break
            self._position = self._history.pop()

        if self._position != previous:
            logger.debug("Rolled back to %r (%d steps left)", self._position, len(self._history))

    def is_accepted(self) -> bool:
        """TRAPPED is never accepting; Live(q) is accepting iff q ∈ F."""
        position = self._position
        if isinstance(position, Live):
            return position.state in self._accepting
        return False

    def is_trapped(self) -> bool:
        return self._position is TRAPPED

    def reset(self) -> None:
        """Return to Live(0) and forget all history."""
        self._position = START
        self._history.clear()
        logger.debug("Automaton reset")

    def clone(self) -> "DFA":
        """Independent engine sharing the (immutable) table, at the same position."""
        other = DFA(self._table, self._accepting, self.config)
        other._position = self._position
        other._history.extend(self._history)
        return other

    def valid_symbols(self) -> Set[str]:
        """Symbols with a defined transition from the current position."""
        if isinstance(self._position, Live):
            return set(self._table.valid_actions(self._position.state))
        return set()

    def valid_symbol_mask(self) -> np.ndarray:
        """Boolean mask over `table.alphabet` for the current position."""
        if isinstance(self._position, Live):
            return self._table.valid_action_mask(self._position.state)
        return np.zeros(len(self._table.alphabet), dtype=bool)

    @property
    def position(self) -> Position:
        return self._position

    @property
    def history(self) -> Tuple[Position, ...]:
        """Previous positions, oldest first."""
        return tuple(self._history)

    @property
    def depth(self) -> int:
        """Number of steps that can currently be rolled back."""
        return len(self._history)

    @property
    def accepting_states(self) -> FrozenSet[int]:
        return self._accepting

    @property
    def table(self) -> TransitionTable:
        return self._table

    def describe_position(self) -> str:
        """Current and previous positions, one per line."""
        return (
            f"state:          {self._position!r}\n"
            f"previous state: {list(self._history)!r}\n"
        )

    def __str__(self) -> str:
        lines = [
            "AUTOMATON",
            "=========",
            f"F: {sorted(self._accepting)}",
            "Delta",
        ]
        for (state, symbol), dests in self._table.items():
            lines.append(f"({state}, {symbol!r}) -> {list(dests)}")
        lines.append("=========")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"DFA(position={self._position!r}, depth={len(self._history)}, "
            f"accepting={sorted(self._accepting)})"
        )
