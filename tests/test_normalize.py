import pytest

from fzfkit.algo.normalize import NORMALIZED, normalize_rune, normalize_runes


@pytest.mark.parametrize(
    "char, expected",
    [
        ("\u00e1", "a"),
        ("\u00e7", "c"),
        ("\u2184", "c"),
        ("\u00df", "s"),
        ("\u00c1", "A"),
        ("\u1d22", "Z"),
        ("ậ", "a"),
        ("Ợ", "O"),
        ("ự", "u"),
    ],
)
def test_normalize_rune_known_mappings(char, expected):
    assert normalize_rune(char) == expected


@pytest.mark.parametrize("char", ["a", "Z", "0", " ", "\u00bf", "\u2185", "椙", "\u00d7"])
def test_normalize_rune_leaves_unmapped_characters(char):
    assert normalize_rune(char) == char


def test_every_mapping_targets_an_ascii_letter():
    for variant, base in NORMALIZED.items():
        assert len(base) == 1
        assert base.isascii() and base.isalpha()
        assert 0x00C0 <= ord(variant) <= 0x2184


def test_characters_in_range_fold_to_self_or_ascii_letter():
    for code in range(0x00C0, 0x2185):
        char = chr(code)
        result = normalize_rune(char)
        assert result == char or (result.isascii() and result.isalpha())


def test_normalize_runes_matches_source_example():
    assert normalize_runes("Danço").lower() == "danco"


def test_normalize_runes_preserves_length_and_ascii():
    text = "Só Danço Samba"
    result = normalize_runes(text)
    assert len(result) == len(text)
    assert result.isascii()
    for original, folded in zip(text, result):
        if original.isascii():
            assert folded == original


def test_normalize_runes_is_idempotent():
    text = "Ắ ệ ø ß \u2071 plain 椙"
    once = normalize_runes(text)
    assert normalize_runes(once) == once


def test_normalize_runes_empty():
    assert normalize_runes("") == ""


def test_normalize_runes_agrees_with_normalize_rune():
    text = "".join(NORMALIZED) + "xyz椙"
    assert normalize_runes(text) == "".join(normalize_rune(c) for c in text)