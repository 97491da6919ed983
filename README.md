# regexlite

regexlite is a small regular expression engine. It parses a pattern into a
syntax tree. It then reports whether the pattern matches the **whole** input
string, using backtracking.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install .[test]
pytest
```

## Usage

```python
from regexlite.matcher import match_pattern

match_pattern(r"\w+\d", "abcd2")      # True
match_pattern("a{2,4}", "aaaaa")      # False
match_pattern("[a-z-]", "-")          # True
match_pattern("(a|)", "")             # True
```

A malformed pattern raises `regexlite.parser.PatternError`, which is a subclass
of `ValueError`. Some examples are an unclosed class `[ab`, an inverted range
`a{4,2}`, an unknown escape `\q`, and trailing text such as the `)` in `a)`.

### Working with the syntax tree

`regexlite.parser.parse(text)` returns the tree. The tree is built from the
frozen dataclasses in `regexlite.ast`:

- `Empty`, `Literal`, `Dot`
- `Sequence`, `Alternation`, `Group`
- `CharacterClass`: its `ranges` are `(start, end)` pairs, and it has a `negated` flag.
- `PerlClass`: it has a `kind`, which is a `PerlClassKind`, and a `negated` flag.
- `Repetition`: it has a `kind` (a `RepetitionKind`), an optional `minimum` and
  an optional `maximum`.

`CharacterClass.contains(char)` and `PerlClass.contains(char)` test a single
character. `Repetition.bounds()` returns `(low, high)`. Here `high` is `None`
when there is no upper bound.

`regexlite.matcher.suffixes(tree, text)` takes a parsed tree. It returns every
remainder of `text` that can be left over after the pattern matches a prefix of
`text`, and each remainder appears once. An empty string in the result means
that the pattern matched the whole text.

```python
from regexlite.parser import parse
from regexlite.matcher import suffixes

suffixes(parse("a*"), "aab")   # contains "aab", "ab" and "b"
```

## Supported syntax

| Syntax                      | Meaning                                                  |
|-----------------------------|----------------------------------------------------------|
| `a`                         | a literal character                                      |
| `.`                         | any single character                                     |
| `ab`                        | a sequence                                               |
| `a\|b`                      | alternation; an empty branch matches the empty string   |
| `(...)`                     | a group                                                  |
| `[abc]`, `[a-z]`            | a character class                                        |
| `[^a-z]`                    | a negated character class                                |
| `\d` / `\D`                 | an ASCII digit / any other character                     |
| `\w` / `\W`                 | an ASCII letter or `_` / any other character (digits are not included) |
| `\s` / `\S`                 | a Unicode whitespace character / any other character     |
| `*` `+` `?`                 | zero or more, one or more, optional                      |
| `{n}` `{n,m}` `{n,}` `{,m}` | counted repetition                                       |

Backslash escapes are accepted only for `\ [ ] - . * + ( ) { }` and for the
class shorthands above. Any other escape raises `PatternError`, including `\?`
and `\|`.

Inside a class, a `]` placed first is a literal. A `-` placed first or last is
also a literal. The escapes `\]` and `\-` are literals too. Ranges may span any
characters, emoji included.

## Limitations

- Matching is always against the whole string. The package has no search,
  find-all or substitution.
- Groups do not capture. The package has no anchors (`^` and `$` are ordinary
  characters), no backreferences and no lookaround.
- All quantifiers are greedy. Lazy forms such as `*?` are rejected.

## Command line

```
regexlite [PATTERN [INPUT]]
```

The command prints the pattern, the input, and `Pattern matches: true` or
`Pattern matches: false`. When the pattern is malformed it prints
`Error: <message>` instead. Without arguments it uses the pattern `\w+\d` and
the input `abcd2`.