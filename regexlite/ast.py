"""Syntax tree for parsed patterns."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_ASCII_DIGITS = frozenset("0123456789")

# Characters carrying the Unicode White_Space property.
_WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def _is_ascii_alpha(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


@dataclass(frozen=True)
class Empty:
    """Matches the empty string."""


@dataclass(frozen=True)
class Literal:
    """A single literal character."""

    char: str


@dataclass(frozen=True)
class Dot:
    """Matches any single character."""


@dataclass(frozen=True)
class Sequence:
    """Patterns matched one after another."""

    patterns: tuple[Pattern, ...]

    def simplify(self) -> Pattern:
        """Collapse a sequence of zero or one patterns."""
        if not self.patterns:
            return Literal(" ")
        if len(self.patterns) == 1:
            return self.patterns[0]
        return self


@dataclass(frozen=True)
class Alternation:
    """Any one of several alternative patterns."""

    patterns: tuple[Pattern, ...]

    def simplify(self) -> Pattern:
        """Collapse an alternation of zero or one patterns."""
        if not self.patterns:
            return Empty()
        if len(self.patterns) == 1:
            return self.patterns[0]
        return self


@dataclass(frozen=True)
class Group:
    """A parenthesised sub-pattern."""

    pattern: Pattern


@dataclass(frozen=True)
class CharacterClass:
    """A bracketed set of inclusive character ranges."""

    ranges: tuple[tuple[str, str], ...]
    negated: bool = False

    def contains(self, char: str) -> bool:
        """Whether the class accepts the character."""
        inside = any(start <= char <= end for start, end in self.ranges)
        return inside != self.negated


class PerlClassKind(enum.Enum):
    """The shorthand classes \\w, \\d and \\s."""

    WORD = "w"
    DIGIT = "d"
    SPACE = "s"


@dataclass(frozen=True)
class PerlClass:
    """A shorthand class such as \\w or \\D."""

    kind: PerlClassKind
    negated: bool = False

    def contains(self, char: str) -> bool:
        """Whether the class accepts the character."""
        if self.kind is PerlClassKind.DIGIT:
            inside = char in _ASCII_DIGITS
        elif self.kind is PerlClassKind.WORD:
            inside = _is_ascii_alpha(char) or char == "_"
        else:
            inside = char in _WHITESPACE
        return inside != self.negated


class RepetitionKind(enum.Enum):
    """How often a repeated pattern may occur."""

    ZERO_OR_MORE = "*"
    ONE_OR_MORE = "+"
    OPTIONAL = "?"
    RANGE = "{}"


@dataclass(frozen=True)
class Repetition:
    """A pattern followed by a quantifier."""

    pattern: Pattern
    kind: RepetitionKind
    minimum: int | None = None
    maximum: int | None = None
    greedy: bool = True

    def bounds(self) -> tuple[int, int | None]:
        """Lower and upper repeat counts; an upper bound of None is unbounded."""
        if self.kind is RepetitionKind.ZERO_OR_MORE:
            return 0, None
        if self.kind is RepetitionKind.ONE_OR_MORE:
            return 1, None
        if self.kind is RepetitionKind.OPTIONAL:
            return 0, 1
        return (self.minimum if self.minimum is not None else 0), self.maximum


Pattern = (
    Empty
    | Literal
    | Dot
    | Sequence
    | Alternation
    | Group
    | CharacterClass
    | PerlClass
    | Repetition
)