"""Backtracking matcher that evaluates a syntax tree against text."""

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
    Repetition,
    Sequence,
)
from .parser import parse


def _unique(positions: list[int]) -> list[int]:
    return list(dict.fromkeys(positions))


def _ends(pattern: Pattern, text: str, pos: int) -> list[int]:
    """Positions in ``text`` at which a match of ``pattern`` starting at ``pos`` can end."""
    match pattern:
        case Empty():
            return [pos]
        case Literal(char=char):
            if pos < len(text) and text[pos] == char:
                return [pos + 1]
            return []
        case Dot():
            return [pos + 1] if pos < len(text) else []
        case Sequence(patterns=parts):
            return _sequence_ends(parts, text, pos)
        case Alternation(patterns=options):
            return _unique(
                [end for option in options for end in _ends(option, text, pos)]
            )
        case Group(pattern=inner):
            return _ends(inner, text, pos)
        case CharacterClass() | PerlClass():
            if pos < len(text) and pattern.contains(text[pos]):
                return [pos + 1]
            return []
        case Repetition():
            return _repetition_ends(pattern, text, pos)
    raise TypeError(f"Unknown pattern node: {pattern!r}")


def _sequence_ends(parts: tuple[Pattern, ...], text: str, pos: int) -> list[int]:
    positions = [pos]
    for part in parts:
        positions = _unique(
            [end for start in positions for end in _ends(part, text, start)]
        )
        if not positions:
            break
    return positions


def _repetition_ends(rep: Repetition, text: str, pos: int) -> list[int]:
    low, high = rep.bounds()
    results: dict[int, None] = {}
    seen: set[tuple[int, int]] = set()
    stack = [(pos, 0)]

    while stack:
        current, count = stack.pop()
        # Past the lower bound an unbounded repetition behaves the same at any count.
        key = (current, min(count, low) if high is None else count)
        if key in seen:
            continue
        seen.add(key)

        if count >= low:
            results[current] = None
        if high is None or count < high:
            stack.extend((end, count + 1) for end in _ends(rep.pattern, text, current))

    return list(results)


def suffixes(pattern: Pattern, text: str) -> list[str]:
    """Every remainder of ``text`` left after ``pattern`` matches a prefix of it."""
    return [text[end:] for end in _ends(pattern, text, 0)]


def match_pattern(pattern: str, text: str) -> bool:
    """Whether the pattern text matches the whole of ``text``.

    Raises PatternError if the pattern cannot be parsed.
    """
    tree = parse(pattern)
    return len(text) in _ends(tree, text, 0)