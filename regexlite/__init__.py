"""A small backtracking regular expression engine for whole-string matching."""

__version__ = "0.1.0"
__all__ = ["ast", "parser", "matcher", "cli"]