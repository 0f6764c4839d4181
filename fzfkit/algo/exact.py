"""Exact, boundary, prefix, suffix and whole-string matching.

Patterns must be lower case when matching is case-insensitive and already
normalized when normalization is on.
"""

from __future__ import annotations

from fzfkit.algo.fuzzy import ascii_fuzzy_index
from fzfkit.algo.normalize import normalize_rune
from fzfkit.algo.scheme import (
    BONUS_BOUNDARY,
    BONUS_FIRST_CHAR_MULTIPLIER,
    NO_MATCH,
    SCORE_MATCH,
    CharClass,
    MatchResult,
    ScoringScheme,
    calculate_score,
    default_scheme,
    lower_rune,
)

# Characters that Python treats as space but the matcher does not.
_NOT_SPACE = "\x1c\x1d\x1e\x1f"


def _is_space(char: str) -> bool:
    return char.isspace() and char not in _NOT_SPACE


def _leading_whitespaces(text: str) -> int:
    count = 0
    for char in text:
        if not _is_space(char):
            break
        count += 1
    return count


def _trailing_whitespaces(text: str) -> int:
    count = 0
    for char in reversed(text):
        if not _is_space(char):
            break
        count += 1
    return count


def _index_at(index: int, length: int, forward: bool) -> int:
    return index if forward else length - index - 1


def _fold(char: str, case_sensitive: bool, normalize: bool) -> str:
    if not case_sensitive:
        char = lower_rune(char)
    if normalize:
        char = normalize_rune(char)
    return char


def _exact_match(
    case_sensitive: bool,
    normalize: bool,
    forward: bool,
    boundary_check: bool,
    text: str,
    pattern: str,
    scheme: ScoringScheme,
) -> tuple[MatchResult, list[int] | None]:
    if not pattern:
        return MatchResult(0, 0, 0), None

    length = len(text)
    pattern_length = len(pattern)
    if length < pattern_length:
        return NO_MATCH, None

    idx, _ = ascii_fuzzy_index(text, pattern, case_sensitive)
    if idx < 0:
        return NO_MATCH, None

    # Only the bonus at the first pattern character is considered
    pidx = 0
    best_pos, bonus, best_bonus = -1, 0, -1
    index = 0
    while index < length:
        text_idx = _index_at(index, length, forward)
        char = _fold(text[text_idx], case_sensitive, normalize)
        pattern_idx = _index_at(pidx, pattern_length, forward)
        ok = pattern[pattern_idx] == char
        if ok:
            if pattern_idx == 0:
                bonus = scheme.bonus_at(text, text_idx)
            if boundary_check:
                ok = bonus >= BONUS_BOUNDARY
                if ok and pattern_idx == 0:
                    ok = (
                        text_idx == 0
                        or scheme.char_class_of(text[text_idx - 1]) <= CharClass.DELIMITER
                    )
                if ok and pattern_idx == pattern_length - 1:
                    ok = (
                        text_idx == length - 1
                        or scheme.char_class_of(text[text_idx + 1]) <= CharClass.DELIMITER
                    )
        if ok:
            pidx += 1
            if pidx == pattern_length:
                if bonus > best_bonus:
                    best_pos, best_bonus = index, bonus
                if bonus >= BONUS_BOUNDARY:
                    break
                index -= pidx - 1
                pidx, bonus = 0, 0
        else:
            index -= pidx
            pidx, bonus = 0, 0
        index += 1

    if best_pos < 0:
        return NO_MATCH, None

    if forward:
        sidx = best_pos - pattern_length + 1
        eidx = best_pos + 1
    else:
        sidx = length - (best_pos + 1)
        eidx = length - (best_pos - pattern_length + 1)

    if boundary_check:
        # Underscore boundaries rank lower than the other kinds of boundaries
        score = bonus
        deduct = bonus - BONUS_BOUNDARY + 1
        if sidx > 0 and text[sidx - 1] == "_":
            score -= deduct + 1
            deduct = 1
        if eidx < length and text[eidx] == "_":
            score -= deduct
        # Base score so that this competes with other kinds of matches
        score += SCORE_MATCH * pattern_length + scheme.bonus_boundary_white * (pattern_length + 1)
    else:
        score, _ = calculate_score(
            case_sensitive, normalize, text, pattern, sidx, eidx, False, scheme
        )
    return MatchResult(sidx, eidx, score), None


def exact_match_naive(
    case_sensitive: bool,
    normalize: bool,
    forward: bool,
    text: str,
    pattern: str,
    with_pos: bool = False,
    scheme: ScoringScheme | None = None,
) -> tuple[MatchResult, list[int] | None]:
    """Find the occurrence of *pattern* as a substring with the best starting bonus."""
    return _exact_match(
        case_sensitive, normalize, forward, False, text, pattern, scheme or default_scheme()
    )


def exact_match_boundary(
    case_sensitive: bool,
    normalize: bool,
    forward: bool,
    text: str,
    pattern: str,
    with_pos: bool = False,
    scheme: ScoringScheme | None = None,
) -> tuple[MatchResult, list[int] | None]:
    """Find *pattern* as a substring that starts and ends on word boundaries."""
    return _exact_match(
        case_sensitive, normalize, forward, True, text, pattern, scheme or default_scheme()
    )


def prefix_match(
    case_sensitive: bool,
    normalize: bool,
    forward: bool,
    text: str,
    pattern: str,
    with_pos: bool = False,
    scheme: ScoringScheme | None = None,
) -> tuple[MatchResult, list[int] | None]:
    """Match *pattern* at the start of *text*, ignoring leading whitespace."""
    scheme = scheme or default_scheme()
    if not pattern:
        return MatchResult(0, 0, 0), None

    trimmed = 0
    if not _is_space(pattern[0]):
        trimmed = _leading_whitespaces(text)

    if len(text) - trimmed < len(pattern):
        return NO_MATCH, None

    for offset, pchar in enumerate(pattern):
        if _fold(text[trimmed + offset], case_sensitive, normalize) != pchar:
            return NO_MATCH, None

    end = trimmed + len(pattern)
    score, _ = calculate_score(case_sensitive, normalize, text, pattern, trimmed, end, False, scheme)
    return MatchResult(trimmed, end, score), None


def suffix_match(
    case_sensitive: bool,
    normalize: bool,
    forward: bool,
    text: str,
    pattern: str,
    with_pos: bool = False,
    scheme: ScoringScheme | None = None,
) -> tuple[MatchResult, list[int] | None]:
    """Match *pattern* at the end of *text*, ignoring trailing whitespace."""
    scheme = scheme or default_scheme()
    trimmed = len(text)
    if not pattern or not _is_space(pattern[-1]):
        trimmed -= _trailing_whitespaces(text)
    if not pattern:
        return MatchResult(trimmed, trimmed, 0), None

    diff = trimmed - len(pattern)
    if diff < 0:
        return NO_MATCH, None

    for offset, pchar in enumerate(pattern):
        if _fold(text[diff + offset], case_sensitive, normalize) != pchar:
            return NO_MATCH, None

    score, _ = calculate_score(case_sensitive, normalize, text, pattern, diff, trimmed, False, scheme)
    return MatchResult(diff, trimmed, score), None


def equal_match(
    case_sensitive: bool,
    normalize: bool,
    forward: bool,
    text: str,
    pattern: str,
    with_pos: bool = False,
    scheme: ScoringScheme | None = None,
) -> tuple[MatchResult, list[int] | None]:
    """Match when *text*, stripped of surrounding whitespace, equals *pattern*."""
    scheme = scheme or default_scheme()
    pattern_length = len(pattern)
    if pattern_length == 0:
        return NO_MATCH, None

    trimmed = 0
    if not _is_space(pattern[0]):
        trimmed = _leading_whitespaces(text)

    trimmed_end = 0
    if not _is_space(pattern[-1]):
        trimmed_end = _trailing_whitespaces(text)

    if len(text) - trimmed - trimmed_end != pattern_length:
        return NO_MATCH, None

    if normalize:
        matched = True
        for offset, pchar in enumerate(pattern):
            char = text[trimmed + offset]
            if not case_sensitive:
                char = lower_rune(char)
            if normalize_rune(pchar) != normalize_rune(char):
                matched = False
                break
    else:
        body = text[trimmed : len(text) - trimmed_end]
        if not case_sensitive:
            body = body.lower()
        matched = body == pattern

    if not matched:
        return NO_MATCH, None
    white = scheme.bonus_boundary_white
    score = (SCORE_MATCH + white) * pattern_length + (BONUS_FIRST_CHAR_MULTIPLIER - 1) * white
    return MatchResult(trimmed, trimmed + pattern_length, score), None