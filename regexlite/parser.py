"""Recursive-descent parser turning pattern text into a syntax tree."""

from __future__ import annotations

from .ast import (
    Alternation,
    CharacterClass,
    Dot,
    Empty,
    Group,
    Literal,
    Pattern,
    PerlClass,
    PerlClassKind,
    Repetition,
    RepetitionKind,
    Sequence,
)

_DIGITS = "0123456789"
_ESCAPABLE = "\\[]-.*+(){}"
_PERL_ESCAPES = "wWdDsS"
_METACHARACTERS = "*+?)|{"
_QUANTIFIERS = "*+?{"
_MAX_NUMBER = 2**64 - 1

_PERL_CLASSES = {
    "w": (PerlClassKind.WORD, False),
    "W": (PerlClassKind.WORD, True),
    "d": (PerlClassKind.DIGIT, False),
    "D": (PerlClassKind.DIGIT, True),
    "s": (PerlClassKind.SPACE, False),
    "S": (PerlClassKind.SPACE, True),
}

_SIMPLE_QUANTIFIERS = {
    "*": RepetitionKind.ZERO_OR_MORE,
    "+": RepetitionKind.ONE_OR_MORE,
    "?": RepetitionKind.OPTIONAL,
}


class PatternError(ValueError):
    """Raised when pattern text cannot be parsed."""


class _Parser:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def peek(self) -> str | None:
        return self._text[self._pos] if self._pos < len(self._text) else None

    def advance(self) -> str | None:
        char = self.peek()
        if char is not None:
            self._pos += 1
        return char

    def rest(self) -> str:
        return self._text[self._pos:]

    # pattern = term ('|' term)*
    def pattern(self) -> Pattern:
        alternates: list[Pattern] = []

        if self.peek() == "|":
            alternates.append(Empty())
        else:
            try:
                alternates.append(self.term())
            except PatternError:
                pass

        while self.peek() == "|":
            self.advance()
            if self.peek() == "|":
                alternates.append(Empty())
                self.advance()
            elif self.peek() is None:
                alternates.append(Empty())
                break
            else:
                try:
                    alternates.append(self.term())
                except PatternError:
                    alternates.append(Empty())

        return Alternation(tuple(alternates)).simplify()

    # term = factor+
    def term(self) -> Pattern:
        factors: list[Pattern] = []
        while (char := self.peek()) is not None and char not in ")|":
            factors.append(self.factor())

        if not factors:
            raise PatternError("Expected at least one factor")
        if len(factors) == 1:
            return factors[0]
        return Sequence(tuple(factors)).simplify()

    # factor = base quantifier?
    def factor(self) -> Pattern:
        base = self.base()
        char = self.peek()
        if char is None or char not in _QUANTIFIERS:
            return base
        self.advance()
        if char == "{":
            return self.repetition(base)
        return Repetition(base, _SIMPLE_QUANTIFIERS[char])

    # repetition = '{n}' | '{n,m}' | '{n,}' | '{,m}'
    def repetition(self, base: Pattern) -> Pattern:
        char = self.peek()
        if char is not None and char in _DIGITS:
            minimum: int | None = self.number()
            after = self.peek()
            if after == ",":
                self.advance()
                after = self.peek()
                if after is not None and after in _DIGITS:
                    maximum = self.number()
                    self.expect_closing_brace()
                elif after == "}":
                    self.advance()
                    maximum = None
                else:
                    raise PatternError("Expected number or closing '}'")
            elif after is not None:
                maximum = minimum
                self.expect_closing_brace()
            else:
                raise PatternError("Unexpected end of input")
        elif char == ",":
            self.advance()
            after = self.peek()
            if after is None or after not in _DIGITS:
                raise PatternError("Expected number after ','")
            minimum = None
            maximum = self.number()
            self.expect_closing_brace()
        else:
            raise PatternError("Expected a number or ',' after '{'")

        if minimum is not None and maximum is not None and minimum > maximum:
            raise PatternError(
                f"Invalid repetition range: min {minimum} > max {maximum}"
            )
        return Repetition(base, RepetitionKind.RANGE, minimum, maximum)

    def expect_closing_brace(self) -> None:
        if self.advance() != "}":
            raise PatternError("Expected closing '}'")

    def number(self) -> int:
        digits = []
        while (char := self.peek()) is not None and char in _DIGITS:
            digits.append(char)
            self.advance()
        if not digits or int("".join(digits)) > _MAX_NUMBER:
            raise PatternError("Invalid number")
        return int("".join(digits))

    # base = literal | '.' | '(' pattern ')' | character_class
    def base(self) -> Pattern:
        if self.peek() is None:
            raise PatternError("Unexpected end of pattern")
        char, escaped = self.escaped_char()
        if escaped:
            if char in _PERL_CLASSES:
                kind, negated = _PERL_CLASSES[char]
                return PerlClass(kind, negated)
            return Literal(char)
        if char == ".":
            return Dot()
        if char == "(":
            return self.group()
        if char == "[":
            return self.character_class()
        if char in _METACHARACTERS:
            raise PatternError(f"Unexpected metacharacter '{char}'")
        return Literal(char)

    def group(self) -> Pattern:
        inner = self.pattern()
        if self.advance() != ")":
            raise PatternError("Unmatched parentheses")
        return Group(inner)

    # character_class = '[' '^'? ']'? class_item+ ']'
    def character_class(self) -> Pattern:
        ranges: list[tuple[str, str]] = []
        negated = self.peek() == "^"
        if negated:
            self.advance()

        prev: str | None = None
        while self.peek() is not None:
            char, escaped = self.escaped_char()
            if char == "]":
                if prev is not None:
                    ranges.append((prev, prev))
                if not ranges or escaped:
                    ranges.append(("]", "]"))
                else:
                    return CharacterClass(tuple(ranges), negated)
            elif char == "-":
                start, prev = prev, None
                if start is None:
                    prev = "-"
                    continue
                following = self.peek()
                if following is None:
                    raise PatternError("Unexpected end after '-' in character class")
                if following == "]" or escaped:
                    ranges.append((start, start))
                    prev = "-"
                else:
                    end, _ = self.escaped_char()
                    if start > end:
                        raise PatternError(f"Invalid range {start}-{following}")
                    ranges.append((start, end))
            else:
                if prev is not None:
                    ranges.append((prev, prev))
                prev = char

        raise PatternError("Unclosed character class")

    def escaped_char(self) -> tuple[str, bool]:
        char = self.advance()
        if char is None:
            raise PatternError("Unexpected end of input")
        if char != "\\":
            return char, False
        escaped = self.advance()
        if escaped is None:
            raise PatternError("Unexpected end after backslash")
        if escaped in _ESCAPABLE or escaped in _PERL_ESCAPES:
            return escaped, True
        raise PatternError(f"Invalid escape sequence: \\{escaped}")


def parse(text: str) -> Pattern:
    """Parse pattern text into a syntax tree."""
    parser = _Parser(text)
    pattern = parser.pattern()
    rest = parser.rest()
    if rest:
        raise PatternError(f"Unexpected characters after pattern: {rest}")
    return pattern