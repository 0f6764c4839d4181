"""Fuzzy matching: a greedy linear scan and an optimal Smith-Waterman variant.

The greedy scan finds the first occurrence of the pattern and then walks back
to find a shorter match ending at the same place. The optimal algorithm
examines every alignment and picks the one with the highest score. Patterns
must be lower case when matching is case-insensitive and already normalized
when normalization is on.
"""

from __future__ import annotations

from fzfkit.algo.normalize import normalize_rune
from fzfkit.algo.scheme import (
    BONUS_BOUNDARY,
    BONUS_CONSECUTIVE,
    BONUS_FIRST_CHAR_MULTIPLIER,
    NO_MATCH,
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


def _index_at(index: int, length: int, forward: bool) -> int:
    return index if forward else length - index - 1


def _try_skip(text: str, case_sensitive: bool, char: str, start: int) -> int:
    idx = text.find(char, start)
    if idx == start:
        return start
    if not case_sensitive and "a" <= char <= "z":
        end = idx if idx >= 0 else len(text)
        upper_idx = text.find(char.upper(), start, end)
        if upper_idx >= 0:
            idx = upper_idx
    return idx


def ascii_fuzzy_index(text: str, pattern: str, case_sensitive: bool) -> tuple[int, int]:
    """Return the range of *text* worth scanning, or (-1, -1) if no match is possible."""
    if not text.isascii():
        return 0, len(text)
    if not pattern.isascii():
        return -1, -1
    if not pattern:
        return 0, len(text)

    first_idx = idx = last_idx = 0
    char = pattern[0]
    for pidx, char in enumerate(pattern):
        idx = _try_skip(text, case_sensitive, char, idx)
        if idx < 0:
            return -1, -1
        if pidx == 0 and idx > 0:
            # Step back to see the character that decides the first bonus
            first_idx = idx - 1
        last_idx = idx
        idx += 1

    upper = char.upper() if not case_sensitive and "a" <= char <= "z" else char
    last = max(text.rfind(char, last_idx + 1), text.rfind(upper, last_idx + 1))
    if last > last_idx:
        return first_idx, last + 1
    return first_idx, last_idx + 1


def fuzzy_match_v2(
    case_sensitive: bool,
    normalize: bool,
    forward: bool,
    text: str,
    pattern: str,
    with_pos: bool = False,
    scheme: ScoringScheme | None = None,
) -> tuple[MatchResult, list[int] | None]:
    """Find the highest scoring fuzzy occurrence of *pattern* in *text*."""
    scheme = scheme or default_scheme()
    m = len(pattern)
    if m == 0:
        return MatchResult(0, 0, 0), ([] if with_pos else None)
    if m > len(text):
        return NO_MATCH, None

    min_idx, max_idx = ascii_fuzzy_index(text, pattern, case_sensitive)
    if min_idx < 0:
        return NO_MATCH, None
    n = max_idx - min_idx

    h0 = [0] * n
    c0 = [0] * n
    bonuses = [0] * n
    first = [0] * m
    chars = list(text[min_idx:max_idx])

    # Phase 1: bonus at each position and first occurrence of each pattern char
    max_score, max_score_pos = 0, 0
    pidx, last_idx = 0, 0
    pchar0 = pchar = pattern[0]
    prev_h0 = 0
    prev_class = scheme.initial_char_class
    in_gap = False
    for off, char in enumerate(chars):
        code = ord(char)
        if code < 128:
            char_class = scheme.ascii_char_classes[code]
            if not case_sensitive and char_class == CharClass.UPPER:
                char = chr(code + 32)
                chars[off] = char
        else:
            char_class = scheme.char_class_of(char)
            if not case_sensitive and char_class == CharClass.UPPER:
                char = lower_rune(char)
            if normalize:
                char = normalize_rune(char)
            chars[off] = char

        bonus = scheme.bonus_matrix[prev_class][char_class]
        bonuses[off] = bonus
        prev_class = char_class

        if char == pchar:
            if pidx < m:
                first[pidx] = off
                pidx += 1
                pchar = pattern[min(pidx, m - 1)]
            last_idx = off

        if char == pchar0:
            score = SCORE_MATCH + bonus * BONUS_FIRST_CHAR_MULTIPLIER
            h0[off] = score
            c0[off] = 1
            if m == 1 and (forward and score > max_score or not forward and score >= max_score):
                max_score, max_score_pos = score, off
                if forward and bonus >= BONUS_BOUNDARY:
                    break
            in_gap = False
        else:
            gap = SCORE_GAP_EXTENSION if in_gap else SCORE_GAP_START
            h0[off] = max(prev_h0 + gap, 0)
            c0[off] = 0
            in_gap = True
        prev_h0 = h0[off]

    if pidx != m:
        return NO_MATCH, None
    if m == 1:
        result = MatchResult(min_idx + max_score_pos, min_idx + max_score_pos + 1, max_score)
        return result, ([min_idx + max_score_pos] if with_pos else None)

    # Phase 2: fill in the score matrix; omissions are not allowed
    f0 = first[0]
    width = last_idx - f0 + 1
    scores = [0] * (width * m)
    scores[:width] = h0[f0 : last_idx + 1]
    runs = [0] * (width * m)
    runs[:width] = c0[f0 : last_idx + 1]

    for pidx in range(1, m):
        f = first[pidx]
        pchar = pattern[pidx]
        row = pidx * width
        in_gap = False
        scores[row + f - f0 - 1] = 0
        for col in range(f, last_idx + 1):
            cell = row + col - f0
            s2 = scores[cell - 1] + (SCORE_GAP_EXTENSION if in_gap else SCORE_GAP_START)
            s1 = 0
            consecutive = 0
            if pchar == chars[col]:
                s1 = scores[cell - 1 - width] + SCORE_MATCH
                bonus = bonuses[col]
                consecutive = runs[cell - 1 - width] + 1
                if consecutive > 1:
                    first_bonus = bonuses[col - consecutive + 1]
                    # Break the consecutive chunk
                    if bonus >= BONUS_BOUNDARY and bonus > first_bonus:
                        consecutive = 1
                    else:
                        bonus = max(bonus, BONUS_CONSECUTIVE, first_bonus)
                if s1 + bonus < s2:
                    s1 += bonuses[col]
                    consecutive = 0
                else:
                    s1 += bonus
            runs[cell] = consecutive

            in_gap = s1 < s2
            score = max(s1, s2, 0)
            if pidx == m - 1 and (forward and score > max_score or not forward and score >= max_score):
                max_score, max_score_pos = score, col
            scores[cell] = score

    # Phase 3: backtrace to find character positions
    positions: list[int] | None = None
    j = f0
    if with_pos:
        positions = []
        i = m - 1
        j = max_score_pos
        prefer_match = True
        while True:
            row = i * width
            j0 = j - f0
            s = scores[row + j0]
            s1 = s2 = 0
            if i > 0 and j >= first[i]:
                s1 = scores[row - width + j0 - 1]
            if j > first[i]:
                s2 = scores[row + j0 - 1]

            if s > s1 and (s > s2 or s == s2 and prefer_match):
                positions.append(j + min_idx)
                if i == 0:
                    break
                i -= 1
            below = row + width + j0 + 1
            prefer_match = runs[row + j0] > 1 or (below < len(runs) and runs[below] > 0)
            j -= 1

    # The start offset is only exact when positions were traced
    return MatchResult(min_idx + j, min_idx + max_score_pos + 1, max_score), positions


def fuzzy_match_v1(
    case_sensitive: bool,
    normalize: bool,
    forward: bool,
    text: str,
    pattern: str,
    with_pos: bool = False,
    scheme: ScoringScheme | None = None,
) -> tuple[MatchResult, list[int] | None]:
    """Find the first fuzzy occurrence of *pattern* and shorten it from the end."""
    scheme = scheme or default_scheme()
    if not pattern:
        return MatchResult(0, 0, 0), None
    idx, _ = ascii_fuzzy_index(text, pattern, case_sensitive)
    if idx < 0:
        return NO_MATCH, None

    pidx = 0
    sidx = eidx = -1
    length = len(text)
    pattern_length = len(pattern)

    for index in range(length):
        char = text[_index_at(index, length, forward)]
        if not case_sensitive:
            char = lower_rune(char)
        if normalize:
            char = normalize_rune(char)
        if char == pattern[_index_at(pidx, pattern_length, forward)]:
            if sidx < 0:
                sidx = index
            pidx += 1
            if pidx == pattern_length:
                eidx = index + 1
                break

    if sidx < 0 or eidx < 0:
        return NO_MATCH, None

    pidx -= 1
    for index in range(eidx - 1, sidx - 1, -1):
        char = text[_index_at(index, length, forward)]
        if not case_sensitive:
            char = lower_rune(char)
        if char == pattern[_index_at(pidx, pattern_length, forward)]:
            pidx -= 1
            if pidx < 0:
                sidx = index
                break

    if not forward:
        sidx, eidx = length - eidx, length - sidx

    score, positions = calculate_score(
        case_sensitive, normalize, text, pattern, sidx, eidx, with_pos, scheme
    )
    return MatchResult(sidx, eidx, score), positions