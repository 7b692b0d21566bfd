"""
Longest-match lexer over independent DFA engines.

Every pattern owns its own engine. For each lexeme:
1. Feed the same character to all engines, remembering the longest prefix
   some engine accepted and the first pattern that accepted it
2. Stop once every engine is trapped (or the input ends)
3. Roll all engines back in lockstep to the end of that prefix

The longest accepted prefix wins; ties go to the pattern listed first.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Iterator, List, Optional, Sequence, Tuple, Union
import logging

from rollback_dfa.core.automaton import DFA
from rollback_dfa.domains.character_classes import (
    alphabetic_automaton,
    numeric_automaton,
    single_character_automaton,
    string_automaton,
)

logger = logging.getLogger(__name__)

NO_MATCH = "NO_MATCH"


@dataclass
class Pattern:
    """A lexical category and the automaton recognising it."""

    category: str
    automaton: DFA


@dataclass(frozen=True)
class Token:
    """A lexeme with its category and offset (in characters) in the source."""

    category: str
    lexeme: str
    offset: int


class LexError(ValueError):
    """No pattern accepts any prefix of the remaining input."""

    def __init__(self, offset: int, text: str):
        self.offset = offset
        self.text = text
        snippet = text[offset:offset + 20]
        super().__init__(f"No pattern matches input at offset {offset}: {snippet!r}")


@dataclass
class LexerConfig:
    """Configuration for tokenization."""

    # Categories matched and consumed but not yielded (e.g. whitespace)
    skip_categories: FrozenSet[str] = field(default_factory=frozenset)

    # When False, an unmatched character becomes a NO_MATCH token instead
    raise_on_no_match: bool = True

    def __post_init__(self):
        self.skip_categories = frozenset(self.skip_categories)


class LongestMatchLexer:
    """
    Tokenizer built from several DFAs run in parallel.

    Example:
        >>> from rollback_dfa.domains import alphabetic_automaton, keyword_automaton
        >>> lexer = LongestMatchLexer([
        ...     ("IF", keyword_automaton("if")),
        ...     ("ID", alphabetic_automaton()),
        ... ])
        >>> lexer.match("ifa")
        ('ID', 'ifa')
        >>> lexer.match("if")
        ('IF', 'if')
    """

    def __init__(
        self,
        patterns: Sequence[Union[Pattern, Tuple[str, DFA]]],
        config: Optional[LexerConfig] = None
    ):
        """
        Initialize lexer.

        Args:
            patterns: Patterns in priority order, or (category, automaton) pairs
            config: Lexer configuration
        """
        if not patterns:
            raise ValueError("At least one pattern is required")

        self._patterns: List[Pattern] = [
            p if isinstance(p, Pattern) else Pattern(*p) for p in patterns
        ]

        seen = set()
        for p in self._patterns:
            if id(p.automaton) in seen:
                raise ValueError(f"Pattern {p.category!r} shares its automaton with another pattern")
            seen.add(id(p.automaton))

        self.config = config or LexerConfig()

    def match(self, text: Iterable[str]) -> Tuple[str, str]:
        """
        Find the longest prefix of `text` accepted by any pattern.

        Returns:
            (category, lexeme), or (NO_MATCH, "") if no prefix is accepted.
        """
        automata = [p.automaton for p in self._patterns]
        for automaton in automata:
            automaton.reset()

        lexeme: List[str] = []
        best: Optional[Tuple[str, int]] = None

        for char in text:
            lexeme.append(char)

            trapped = True
            accepted_by: Optional[str] = None
            for p in self._patterns:
                if p.automaton.step(char) and accepted_by is None:
                    accepted_by = p.category
                trapped = trapped and p.automaton.is_trapped()

            if accepted_by is not None:
                best = (accepted_by, len(lexeme))

            if trapped:
                break

        if best is None:
            return NO_MATCH, ""

        # Leave the group at the end of the winning lexeme
        category, length = best
        for automaton in automata:
            automaton.rollback(len(lexeme) - length)

        return category, "".join(lexeme[:length])

    def tokenize(self, source: str) -> Iterator[Token]:
        """
        Split the whole source into tokens.

        Raises:
            LexError: on unmatched input, unless `raise_on_no_match` is off.
        """
        offset = 0
        while offset < len(source):
            category, lexeme = self.match(source[offset:])

            if category == NO_MATCH:
                if self.config.raise_on_no_match:
                    raise LexError(offset, source)
                lexeme = source[offset]
                logger.warning(f"Unmatched character {lexeme!r} at offset {offset}")

            if category not in self.config.skip_categories:
                logger.debug(f"{category} {lexeme!r} at {offset}")
                yield Token(category, lexeme, offset)

            offset += len(lexeme)

    @property
    def categories(self) -> List[str]:
        return [p.category for p in self._patterns]

    @property
    def patterns(self) -> List[Pattern]:
        return list(self._patterns)


def lisp_lexer(config: Optional[LexerConfig] = None) -> LongestMatchLexer:
    """
    Lexer for a small s-expression language.

    Categories: ID, NUMBER, STRING, PAROPEN, PARCLOSE, SPACE, OPREL.
    """
    return LongestMatchLexer(
        [
            ("ID", alphabetic_automaton()),
            ("NUMBER", numeric_automaton()),
            ("STRING", string_automaton()),
            ("PAROPEN", single_character_automaton("(")),
            ("PARCLOSE", single_character_automaton(")")),
            ("SPACE", single_character_automaton(" ")),
            ("OPREL", single_character_automaton(">")),
        ],
        config,
    )
