"""Command-line entry point: match one pattern against one input."""

from __future__ import annotations

import argparse

from .matcher import match_pattern
from .parser import PatternError

_DEFAULT_PATTERN = r"\w+\d"
_DEFAULT_INPUT = "abcd2"


def main(argv: list[str] | None = None) -> int:
    """Report whether the pattern matches the whole input."""
    parser = argparse.ArgumentParser(
        prog="regexlite", description="Match a pattern against an input string."
    )
    parser.add_argument("pattern", nargs="?", default=_DEFAULT_PATTERN)
    parser.add_argument("input", nargs="?", default=_DEFAULT_INPUT)
    args = parser.parse_args(argv)

    print(f"Pattern: {args.pattern}")
    print(f"Input: {args.input}")
    try:
        result = match_pattern(args.pattern, args.input)
    except PatternError as error:
        print(f"Error: {error}")
    else:
        print(f"Pattern matches: {str(result).lower()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())