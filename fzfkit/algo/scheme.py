"""Character classes, bonus tables and the shared scoring routine."""

from __future__ import annotations

import os
import unicodedata
from dataclasses import dataclass, field
from enum import IntEnum
from functools import lru_cache

from fzfkit.algo.normalize import normalize_rune

SCORE_MATCH = 16
SCORE_GAP_START = -3
SCORE_GAP_EXTENSION = -1

# Bonus for matching at the start of a word; cancelled by a gap of about
# eight characters so that long acronym matches do not always win.
BONUS_BOUNDARY = SCORE_MATCH // 2

# Bonus for non-word characters, used for consecutive chunks starting with one.
BONUS_NON_WORD = SCORE_MATCH // 2

# Edge-triggered bonus for camelCase and letter123 transitions.
BONUS_CAMEL123 = BONUS_BOUNDARY + SCORE_GAP_EXTENSION

# Minimum bonus given to characters in consecutive chunks.
BONUS_CONSECUTIVE = -(SCORE_GAP_START + SCORE_GAP_EXTENSION)

# The first pattern character weighs more than the rest.
BONUS_FIRST_CHAR_MULTIPLIER = 2

_WHITE_CHARS = " \t\n\v\f\r\x85\xa0"
_DEFAULT_DELIMITERS = "/,:;|"


class CharClass(IntEnum):
    """Classes of characters that decide where bonus points are given."""

    WHITE = 0
    NON_WORD = 1
    DELIMITER = 2
    LOWER = 3
    UPPER = 4
    LETTER = 5
    NUMBER = 6


@dataclass(frozen=True)
class MatchResult:
    """Span and score of a match; a miss is (-1, -1, 0)."""

    start: int
    end: int
    score: int


NO_MATCH = MatchResult(-1, -1, 0)


def lower_rune(char: str) -> str:
    """Return the single-character lower case form of *char*."""
    lowered = char.lower()
    return lowered[0] if lowered else char


@dataclass(frozen=True)
class ScoringScheme:
    """Bonus parameters and precomputed lookup tables for one scoring scheme."""

    bonus_boundary_white: int = BONUS_BOUNDARY + 2
    bonus_boundary_delimiter: int = BONUS_BOUNDARY + 1
    delimiter_chars: str = _DEFAULT_DELIMITERS
    initial_char_class: CharClass = CharClass.WHITE
    ascii_char_classes: tuple = field(init=False, repr=False, compare=False)
    bonus_matrix: tuple = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        classes = tuple(self._classify_ascii(chr(code)) for code in range(128))
        object.__setattr__(self, "ascii_char_classes", classes)
        matrix = tuple(
            tuple(self.bonus_for(prev, cls) for cls in CharClass) for prev in CharClass
        )
        object.__setattr__(self, "bonus_matrix", matrix)

    @classmethod
    def from_name(cls, name: str) -> ScoringScheme:
        """Build the scheme called *name*: default, path or history."""
        if name == "default":
            return cls()
        if name == "path":
            delimiters = "/" if os.sep == "/" else os.sep + "/"
            return cls(
                bonus_boundary_white=BONUS_BOUNDARY,
                bonus_boundary_delimiter=BONUS_BOUNDARY + 1,
                delimiter_chars=delimiters,
                initial_char_class=CharClass.DELIMITER,
            )
        if name == "history":
            return cls(
                bonus_boundary_white=BONUS_BOUNDARY,
                bonus_boundary_delimiter=BONUS_BOUNDARY,
            )
        raise ValueError(f"invalid scoring scheme: {name}")

    def _classify_ascii(self, char: str) -> CharClass:
        if "a" <= char <= "z":
            return CharClass.LOWER
        if "A" <= char <= "Z":
            return CharClass.UPPER
        if "0" <= char <= "9":
            return CharClass.NUMBER
        if char in _WHITE_CHARS:
            return CharClass.WHITE
        if char in self.delimiter_chars:
            return CharClass.DELIMITER
        return CharClass.NON_WORD

    def _classify_non_ascii(self, char: str) -> CharClass:
        category = unicodedata.category(char)
        if category == "Ll":
            return CharClass.LOWER
        if category == "Lu":
            return CharClass.UPPER
        if category.startswith("N"):
            return CharClass.NUMBER
        if category.startswith("L"):
            return CharClass.LETTER
        if char.isspace():
            return CharClass.WHITE
        if char in self.delimiter_chars:
            return CharClass.DELIMITER
        return CharClass.NON_WORD

    def char_class_of(self, char: str) -> CharClass:
        """Return the class of a single character."""
        code = ord(char)
        if code < 128:
            return self.ascii_char_classes[code]
        return self._classify_non_ascii(char)

    def bonus_for(self, prev_class: CharClass, char_class: CharClass) -> int:
        """Return the bonus for a character of *char_class* after one of *prev_class*."""
        if char_class > CharClass.NON_WORD:
            if prev_class == CharClass.WHITE:
                return self.bonus_boundary_white
            if prev_class == CharClass.DELIMITER:
                return self.bonus_boundary_delimiter
            if prev_class == CharClass.NON_WORD:
                return BONUS_BOUNDARY

        if (prev_class == CharClass.LOWER and char_class == CharClass.UPPER) or (
            prev_class != CharClass.NUMBER and char_class == CharClass.NUMBER
        ):
            return BONUS_CAMEL123

        if char_class in (CharClass.NON_WORD, CharClass.DELIMITER):
            return BONUS_NON_WORD
        if char_class == CharClass.WHITE:
            return self.bonus_boundary_white
        return 0

    def bonus_at(self, text: str, index: int) -> int:
        """Return the positional bonus of ``text[index]``."""
        if index == 0:
            return self.bonus_boundary_white
        prev = self.char_class_of(text[index - 1])
        return self.bonus_matrix[prev][self.char_class_of(text[index])]


@lru_cache(maxsize=None)
def default_scheme() -> ScoringScheme:
    """Return the shared default scoring scheme."""
    return ScoringScheme.from_name("default")


def calculate_score(
    case_sensitive: bool,
    normalize: bool,
    text: str,
    pattern: str,
    sidx: int,
    eidx: int,
    with_pos: bool = False,
    scheme: ScoringScheme | None = None,
) -> tuple[int, list[int] | None]:
    """Score the greedy alignment of *pattern* within ``text[sidx:eidx]``."""
    scheme = scheme or default_scheme()
    pidx = 0
    score = 0
    in_gap = False
    consecutive = 0
    first_bonus = 0
    positions: list[int] | None = [] if with_pos else None
    prev_class = scheme.initial_char_class
    if sidx > 0:
        prev_class = scheme.char_class_of(text[sidx - 1])

    for idx in range(sidx, eidx):
        char = text[idx]
        char_class = scheme.char_class_of(char)
        if not case_sensitive:
            char = lower_rune(char)
        if normalize:
            char = normalize_rune(char)
        if char == pattern[pidx]:
            if positions is not None:
                positions.append(idx)
            score += SCORE_MATCH
            bonus = scheme.bonus_matrix[prev_class][char_class]
            if consecutive == 0:
                first_bonus = bonus
            else:
                if bonus >= BONUS_BOUNDARY and bonus > first_bonus:
                    first_bonus = bonus
                bonus = max(bonus, first_bonus, BONUS_CONSECUTIVE)
            if pidx == 0:
                score += bonus * BONUS_FIRST_CHAR_MULTIPLIER
            else:
                score += bonus
            in_gap = False
            consecutive += 1
            pidx += 1
        else:
            score += SCORE_GAP_EXTENSION if in_gap else SCORE_GAP_START
            in_gap = True
            consecutive = 0
            first_bonus = 0
        prev_class = char_class
    return score, positions