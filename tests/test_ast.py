import pytest

from regexlite.ast import (
    Alternation,
    CharacterClass,
    Dot,
    Empty,
    Group,
    Literal,
    PerlClass,
    PerlClassKind,
    Repetition,
    RepetitionKind,
    Sequence,
)


def test_sequence_simplify_empty_gives_space_literal():
    assert Sequence(()).simplify() == Literal(" ")


def test_sequence_simplify_single_element():
    assert Sequence((Dot(),)).simplify() == Dot()


def test_sequence_simplify_keeps_many():
    seq = Sequence((Literal("a"), Literal("b")))
    assert seq.simplify() is seq


def test_alternation_simplify_empty():
    assert Alternation(()).simplify() == Empty()


def test_alternation_simplify_single_and_many():
    assert Alternation((Group(Literal("x")),)).simplify() == Group(Literal("x"))
    alt = Alternation((Empty(), Literal("x")))
    assert alt.simplify() is alt


def test_character_class_range_membership():
    cls = CharacterClass((("a", "z"),))
    assert cls.contains("a")
    assert cls.contains("z")
    assert cls.contains("g")
    assert not cls.contains("Z")


@pytest.mark.parametrize("char", ["a", "g", "z", "A", "0", "-", "😀"])
def test_negated_class_is_complement(char):
    ranges = (("a", "z"), ("😀", "🙏"))
    plain = CharacterClass(ranges)
    negated = CharacterClass(ranges, negated=True)
    assert plain.contains(char) != negated.contains(char)


def test_character_class_unicode_range():
    cls = CharacterClass((("😀", "🙏"),))
    assert cls.contains("😁")
    assert cls.contains("🙏")


def test_perl_digit_accepts_ascii_digits():
    digit = PerlClass(PerlClassKind.DIGIT)
    assert all(digit.contains(c) for c in "0123456789")
    assert not digit.contains("a")


def test_perl_word_accepts_letters_and_underscore():
    word = PerlClass(PerlClassKind.WORD)
    assert word.contains("_")
    assert word.contains("a")
    assert word.contains("Z")
    assert not word.contains(" ")


def test_perl_space_accepts_unicode_whitespace():
    space = PerlClass(PerlClassKind.SPACE)
    assert space.contains(" ")
    assert space.contains("\t")
    assert space.contains("\u3000")
    assert not space.contains("a")


@pytest.mark.parametrize("kind", list(PerlClassKind))
@pytest.mark.parametrize("char", ["a", "_", "7", " ", "\n", "é", "😀"])
def test_negated_perl_class_is_complement(kind, char):
    assert PerlClass(kind).contains(char) != PerlClass(kind, negated=True).contains(char)


def test_repetition_bounds_for_quantifiers():
    base = Literal("a")
    assert Repetition(base, RepetitionKind.ZERO_OR_MORE).bounds() == (0, None)
    assert Repetition(base, RepetitionKind.ONE_OR_MORE).bounds() == (1, None)
    assert Repetition(base, RepetitionKind.OPTIONAL).bounds() == (0, 1)


def test_repetition_bounds_for_ranges():
    base = Literal("c")
    assert Repetition(base, RepetitionKind.RANGE, None, 3).bounds() == (0, 3)
    assert Repetition(base, RepetitionKind.RANGE, 2, None).bounds() == (2, None)
    assert Repetition(base, RepetitionKind.RANGE, 2, 4).bounds() == (2, 4)


def test_nodes_compare_by_value():
    first = Group(Alternation((Literal("a"), Empty())))
    second = Group(Alternation((Literal("a"), Empty())))
    assert first == second
    assert hash(first) == hash(second)