"""
Transition table for deterministic automata.

δ: Q × Σ ⇀ Q (partial function)
where δ(q, c) = ⊥ means the automaton falls into the trap.

The table is built from flat (source, symbol, destination) triples. Triples that
share a key accumulate instead of overwriting, so a table describing an NFA can
be built; it only fails when an ambiguous key is actually looked up.
"""

from typing import Dict, FrozenSet, Iterable, Iterator, List, Set, Tuple, Union

import numpy as np

Key = Tuple[int, str]
Triple = Tuple[int, str, int]


class UndefinedTransition:
    """Sentinel class representing δ(q, c) = ⊥ (undefined transition)."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "⊥"

    def __bool__(self):
        return False


UNDEFINED = UndefinedTransition()


class AmbiguousTransitionError(RuntimeError):
    """A (state, symbol) key maps to more than one destination.

    The table describes a nondeterministic automaton, which the engine does not
    simulate. This is a bug in whoever built the table.
    """

    def __init__(self, state: int, symbol: str, destinations: Tuple[int, ...]):
        self.state = state
        self.symbol = symbol
        self.destinations = destinations
        super().__init__(
            f"Expected a single next state (DFA) for ({state}, {symbol!r}), "
            f"but found {list(destinations)}"
        )


class TransitionTable:
    """
    Grouped transition table.

    Maps each (state, symbol) key to the tuple of destinations declared for it,
    in declaration order.
    """

    def __init__(self, triples: Iterable[Triple] = ()):
        """
        Build the table.

        Args:
            triples: Iterable of (source_state, symbol, destination_state)
        """
        grouped: Dict[Key, List[int]] = {}
        for state, symbol, next_state in triples:
            grouped.setdefault((state, symbol), []).append(next_state)

        self._delta: Dict[Key, Tuple[int, ...]] = {
            key: tuple(dests) for key, dests in grouped.items()
        }
        self._alphabet: Tuple[str, ...] = tuple(sorted({s for _, s in self._delta}))
        self._symbol_to_idx = {s: i for i, s in enumerate(self._alphabet)}

        states: Set[int] = {0}
        for (state, _), dests in self._delta.items():
            states.add(state)
            states.update(dests)
        self._states: Tuple[int, ...] = tuple(sorted(states))

        # Cache for valid action sets: state -> symbols with a transition
        self._action_cache: Dict[int, FrozenSet[str]] = {}

    @classmethod
    def from_triples(cls, triples: Iterable[Triple]) -> "TransitionTable":
        return cls(triples)

    def destinations(self, state: int, symbol: str) -> Tuple[int, ...]:
        """All destinations declared for (state, symbol); empty if none."""
        return self._delta.get((state, symbol), ())

    def transition(self, state: int, symbol: str) -> Union[int, UndefinedTransition]:
        """
        Compute δ(q, c).

        Returns:
            The destination state, or UNDEFINED if no transition exists.

        Raises:
            AmbiguousTransitionError: if the key has several destinations.
        """
        dests = self._delta.get((state, symbol))
        if dests is None:
            return UNDEFINED
        if len(dests) != 1:
            raise AmbiguousTransitionError(state, symbol, dests)
        return dests[0]

    def ambiguous_keys(self) -> List[Key]:
        """Keys that map to more than one destination, sorted."""
        return sorted(key for key, dests in self._delta.items() if len(dests) > 1)

    def validate(self) -> None:
        """Raise AmbiguousTransitionError for the first ambiguous key, if any."""
        for state, symbol in self.ambiguous_keys():
            raise AmbiguousTransitionError(state, symbol, self._delta[(state, symbol)])

    @property
    def is_deterministic(self) -> bool:
        return not self.ambiguous_keys()

    def valid_actions(self, state: int, use_cache: bool = True) -> FrozenSet[str]:
        """
        Compute A(q) = {c ∈ Σ | δ(q, c) ≠ ⊥}.

        Ambiguous keys count as defined here; they only fail when stepped.
        """
        if use_cache and state in self._action_cache:
            return self._action_cache[state]

        valid = frozenset(symbol for (source, symbol) in self._delta if source == state)

        if use_cache:
            self._action_cache[state] = valid

        return valid

    def valid_action_mask(self, state: int, use_cache: bool = True) -> np.ndarray:
        """Boolean mask over `alphabet`, True where a transition is defined."""
        valid = self.valid_actions(state, use_cache)
        return np.array([symbol in valid for symbol in self._alphabet], dtype=bool)

    def to_matrix(self) -> np.ndarray:
        """
        Dense transition matrix.

        Row i is `states[i]`, column j is `alphabet[j]`; undefined entries are -1.
        """
        self.validate()
        row = {state: i for i, state in enumerate(self._states)}
        matrix = np.full((len(self._states), len(self._alphabet)), -1, dtype=np.int64)
        for (state, symbol), dests in self._delta.items():
            matrix[row[state], self._symbol_to_idx[symbol]] = dests[0]
        return matrix

    def clear_cache(self) -> None:
        """Clear the valid action cache."""
        self._action_cache.clear()

    @property
    def alphabet(self) -> Tuple[str, ...]:
        return self._alphabet

    @property
    def states(self) -> Tuple[int, ...]:
        return self._states

    def symbol_to_idx(self, symbol: str) -> int:
        """Convert symbol to alphabet index."""
        return self._symbol_to_idx.get(symbol, -1)

    def idx_to_symbol(self, idx: int) -> str:
        """Convert alphabet index to symbol."""
        if 0 <= idx < len(self._alphabet):
            return self._alphabet[idx]
        raise IndexError(f"Index {idx} out of alphabet range")

    def items(self) -> List[Tuple[Key, Tuple[int, ...]]]:
        """Sorted (key, destinations) pairs."""
        return sorted(self._delta.items())

    def __len__(self) -> int:
        return len(self._delta)

    def __contains__(self, key: object) -> bool:
        return key in self._delta

    def __iter__(self) -> Iterator[Key]:
        return iter(sorted(self._delta))

    def __repr__(self) -> str:
        return f"TransitionTable(keys={len(self._delta)}, states={len(self._states)})"
