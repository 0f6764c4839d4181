import pytest

from fzfkit.algo.scheme import (
    BONUS_BOUNDARY,
    BONUS_CAMEL123,
    BONUS_CONSECUTIVE,
    BONUS_FIRST_CHAR_MULTIPLIER,
    BONUS_NON_WORD,
    SCORE_GAP_EXTENSION,
    SCORE_GAP_START,
    SCORE_MATCH,
    CharClass,
    MatchResult,
    ScoringScheme,
    calculate_score,
    default_scheme,
    lower_rune,
)


def test_unknown_scheme_raises():
    with pytest.raises(ValueError):
        ScoringScheme.from_name("nonsense")


def test_default_scheme_parameters():
    scheme = ScoringScheme.from_name("default")
    assert scheme.bonus_boundary_white == BONUS_BOUNDARY + 2
    assert scheme.bonus_boundary_delimiter == BONUS_BOUNDARY + 1
    assert scheme.initial_char_class == CharClass.WHITE


def test_path_scheme_parameters():
    scheme = ScoringScheme.from_name("path")
    assert scheme.bonus_boundary_white == BONUS_BOUNDARY
    assert scheme.bonus_boundary_delimiter == BONUS_BOUNDARY + 1
    assert scheme.initial_char_class == CharClass.DELIMITER
    assert scheme.char_class_of("/") == CharClass.DELIMITER
    assert scheme.char_class_of(",") == CharClass.NON_WORD


def test_history_scheme_parameters():
    scheme = ScoringScheme.from_name("history")
    assert scheme.bonus_boundary_white == BONUS_BOUNDARY
    assert scheme.bonus_boundary_delimiter == BONUS_BOUNDARY


def test_default_scheme_is_shared():
    assert default_scheme() is default_scheme()
    assert default_scheme() == ScoringScheme.from_name("default")


@pytest.mark.parametrize(
    "char, expected",
    [
        ("a", CharClass.LOWER),
        ("Z", CharClass.UPPER),
        ("7", CharClass.NUMBER),
        (" ", CharClass.WHITE),
        ("\t", CharClass.WHITE),
        ("/", CharClass.DELIMITER),
        (",", CharClass.DELIMITER),
        ("-", CharClass.NON_WORD),
        ("é", CharClass.LOWER),
        ("É", CharClass.UPPER),
        ("中", CharClass.LETTER),
        ("\u3000", CharClass.WHITE),
        ("٣", CharClass.NUMBER),
    ],
)
def test_char_class_of(char, expected):
    assert default_scheme().char_class_of(char) == expected


@pytest.mark.parametrize(
    "prev, cls, expected",
    [
        (CharClass.WHITE, CharClass.LOWER, BONUS_BOUNDARY + 2),
        (CharClass.DELIMITER, CharClass.LOWER, BONUS_BOUNDARY + 1),
        (CharClass.NON_WORD, CharClass.UPPER, BONUS_BOUNDARY),
        (CharClass.LOWER, CharClass.UPPER, BONUS_CAMEL123),
        (CharClass.LOWER, CharClass.NUMBER, BONUS_CAMEL123),
        (CharClass.NUMBER, CharClass.NUMBER, 0),
        (CharClass.LOWER, CharClass.LOWER, 0),
        (CharClass.LOWER, CharClass.NON_WORD, BONUS_NON_WORD),
        (CharClass.LOWER, CharClass.WHITE, BONUS_BOUNDARY + 2),
    ],
)
def test_bonus_for(prev, cls, expected):
    scheme = default_scheme()
    assert scheme.bonus_for(prev, cls) == expected
    assert scheme.bonus_matrix[prev][cls] == expected


def test_bonus_at():
    scheme = default_scheme()
    assert scheme.bonus_at("foo bar", 0) == scheme.bonus_boundary_white
    assert scheme.bonus_at("foo bar", 4) == scheme.bonus_boundary_white
    assert scheme.bonus_at("fooBar", 3) == BONUS_CAMEL123
    assert scheme.bonus_at("foobar", 3) == 0


def test_lower_rune():
    assert lower_rune("A") == "a"
    assert lower_rune("É") == "é"
    assert lower_rune("İ") == "i"
    assert lower_rune("-") == "-"


def test_calculate_score_camel_with_gap():
    score, pos = calculate_score(False, False, "fooBarbaz1", "obz", 2, 9, True)
    assert score == SCORE_MATCH * 3 + BONUS_CAMEL123 + SCORE_GAP_START + SCORE_GAP_EXTENSION * 3
    assert pos == [2, 3, 8]


def test_calculate_score_consecutive_update():
    score, pos = calculate_score(True, False, "foo-bar", "o-ba", 2, 6, False)
    assert score == SCORE_MATCH * 4 + BONUS_BOUNDARY * 3
    assert pos is None


def test_calculate_score_word_boundaries():
    scheme = default_scheme()
    score, pos = calculate_score(False, False, "foo bar baz", "fbb", 0, 9, True)
    expected = (
        SCORE_MATCH * 3
        + scheme.bonus_boundary_white * BONUS_FIRST_CHAR_MULTIPLIER
        + scheme.bonus_boundary_white * 2
        + 2 * SCORE_GAP_START
        + 4 * SCORE_GAP_EXTENSION
    )
    assert score == expected
    assert pos == [0, 4, 8]


def test_calculate_score_consecutive_digits():
    score, _ = calculate_score(False, False, "ab0123 456", "12356", 3, 10, False)
    assert score == SCORE_MATCH * 5 + BONUS_CONSECUTIVE * 3 + SCORE_GAP_START + SCORE_GAP_EXTENSION


def test_calculate_score_normalized():
    score, pos = calculate_score(False, True, "Só Danço Samba", "sodc", 0, 7, True)
    assert score == 97
    assert pos == [0, 1, 3, 6]


def test_match_result_equality():
    assert MatchResult(1, 2, 3) == MatchResult(1, 2, 3)
    assert MatchResult(1, 2, 3) != MatchResult(1, 2, 4)