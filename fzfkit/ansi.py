"""Parsing of ANSI escape sequences and extraction of color spans from text."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import IntFlag
from typing import Callable, Optional


class Attr(IntFlag):
    """Text attributes carried by SGR sequences."""

    NONE = 0
    BOLD = 1 << 0
    DIM = 1 << 1
    ITALIC = 1 << 2
    UNDERLINE = 1 << 3
    BLINK = 1 << 4
    REVERSE = 1 << 5
    STRIKE_THROUGH = 1 << 6


@dataclass(frozen=True, eq=False)
class Url:
    """Target and parameters of an OSC 8 hyperlink; compared by identity."""

    uri: str
    params: str


@dataclass(frozen=True)
class AnsiState:
    """Colors and attributes in effect at some point of the text.

    A color of -1 means the terminal default; colors from 0 to 255 are palette
    entries and colors with bit 24 set are 24-bit RGB values.
    """

    fg: int = -1
    bg: int = -1
    attr: Attr = Attr.NONE
    lbg: int = -1
    url: Optional[Url] = None

    def colored(self) -> bool:
        """Return True if the state differs from the terminal default."""
        return (
            self.fg != -1
            or self.bg != -1
            or self.attr > 0
            or self.lbg >= 0
            or self.url is not None
        )

    def to_string(self) -> str:
        """Return the escape sequence that reproduces this state."""
        if not self.colored():
            return ""
        codes = [
            code
            for flag, code in _ATTR_CODES
            if self.attr & flag
        ]
        body = "".join(code + ";" for code in codes)
        body += _color_code(self.fg, 30) + _color_code(self.bg, 40)
        if body.endswith(";"):
            body = body[:-1]
        sequence = "\x1b[" + body + "m"
        if self.url is not None:
            sequence = (
                f"\x1b]8;{self.url.params};{self.url.uri}\x1b\\{sequence}\x1b]8;;\x1b"
            )
        return sequence


@dataclass
class AnsiOffset:
    """A span of characters, from start to end, drawn with one color state."""

    start: int
    end: int
    color: AnsiState


_ATTR_CODES = (
    (Attr.BOLD, "1"),
    (Attr.DIM, "2"),
    (Attr.ITALIC, "3"),
    (Attr.UNDERLINE, "4"),
    (Attr.BLINK, "5"),
    (Attr.REVERSE, "7"),
    (Attr.STRIKE_THROUGH, "9"),
)

_SPECIAL = re.compile("[\x0e\x0f\x1b\x08]")


def _color_code(color: int, offset: int) -> str:
    if color == -1:
        code = str(offset + 9)
    elif color < 8:
        code = str(offset + color)
    elif color < 16:
        code = str(offset - 30 + 90 + color - 8)
    elif color < 256:
        code = f"{offset + 8};5;{color}"
    elif color >= 1 << 24:
        red = (color >> 16) & 0xFF
        green = (color >> 8) & 0xFF
        blue = color & 0xFF
        code = f"{offset + 8};2;{red};{green};{blue}"
    else:
        code = ""
    return code + ";"


def _is_print(char: str) -> bool:
    return "\x20" <= char <= "\x7e"


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _match_control_sequence(text: str, start: int) -> int:
    # \x1b[\[()][0-9;:?]*[a-zA-Z@], prefix already checked
    for i in range(start + 2, len(text)):
        char = text[i]
        if _is_digit(char) or char in ";:?":
            continue
        if "a" <= char <= "z" or "A" <= char <= "Z" or char == "@":
            return i + 1
        return -1
    return -1


def _match_operating_system_command(text: str, start: int) -> int:
    # \x1b][0-9][;:][[:print:]]+(?:\x1b\\|\x07), prefix already checked
    n = len(text)
    i = start + 5
    while i < n and _is_print(text[i]):
        i += 1
    if i < n:
        if text[i] == "\x07":
            return i + 1
        if text[i] == "\x1b" and i < n - 1 and text[i + 1] == "\\":
            return i + 2
    # Closing part of a hyperlink: \x1b]8;;\x1b
    if i < n and text[start : i + 1] == "\x1b]8;;\x1b":
        return i + 1
    return -1


def _find_escape(text: str, pos: int) -> tuple[int, int]:
    n = len(text)
    for found in _SPECIAL.finditer(text, pos):
        i = found.start()
        char = text[i]
        if char == "\x08":
            if i > pos and text[i - 1] != "\n":
                return i - 1, i + 1
        elif char == "\x1b":
            if i + 2 < n and text[i + 1] in "\\[()":
                end = _match_control_sequence(text, i)
                if end != -1:
                    return i, end
            if (
                i + 5 < n
                and text[i + 1] == "]"
                and _is_digit(text[i + 2])
                and text[i + 3] in ";:"
                and _is_print(text[i + 4])
            ):
                end = _match_operating_system_command(text, i)
                if end != -1:
                    return i, end
            if i + 1 < n and text[i + 1] != "\n":
                return i, i + 2
        else:
            return i, i + 1
    return -1, -1


def next_ansi_escape_sequence(text: str) -> tuple[int, int]:
    """Return the span of the first escape sequence in *text*, or (-1, -1).

    Equivalent to searching for the regular expression
    ``\\x1b[\\[()][0-9;:?]*[a-zA-Z@]|\\x1b][0-9][;:][[:print:]]+(?:\\x1b\\\\|\\x07)
    |\\x1b.|[\\x0e\\x0f]|.\\x08``.
    """
    return _find_escape(text, 0)


def parse_ansi_code(text: str, delimiter: str = "") -> tuple[int, str, str]:
    """Split off the first numeric parameter of an SGR sequence.

    Returns the number (-1 if it is missing or not a number), the delimiter
    found and the remaining text.
    """
    remaining = ""
    if not delimiter:
        i = text.find(";")
        if i < 0:
            i = text.find(":")
    else:
        i = text.find(delimiter)
    if i >= 0:
        delimiter = text[i]
        remaining = text[i + 1 :]
        text = text[:i]

    if not text or not all(_is_digit(char) for char in text):
        return -1, delimiter, remaining
    return int(text), delimiter, remaining


def interpret_code(code: str, prev_state: Optional[AnsiState]) -> AnsiState:
    """Return the state that results from applying *code* to *prev_state*."""
    state = prev_state if prev_state is not None else AnsiState()

    if not (code.startswith("\x1b[") and code.endswith("m")):
        if prev_state is not None and code.endswith("0K"):
            return replace(state, lbg=prev_state.bg)
        if code == "\x1b]8;;\x1b\\":
            return replace(state, url=None)
        if code.startswith("\x1b]8;") and code.endswith("\x1b\\"):
            params_end = code.find(";", 4)
            if params_end >= 0:
                url = Url(uri=code[params_end + 1 : -2], params=code[4:params_end])
                return replace(state, url=url)
        return state

    if len(code) <= 3:
        return replace(state, fg=-1, bg=-1, attr=Attr.NONE)

    body = code[2:-1]
    colors = {"fg": state.fg, "bg": state.bg}
    attr = state.attr
    target = "fg"
    state256 = 0
    delimiter = ""
    count = 0
    while body:
        num, delimiter, body = parse_ansi_code(body, delimiter)
        if num == -1:
            continue
        count += 1
        if state256 == 0:
            if num == 38:
                target = "fg"
                state256 = 1
            elif num == 48:
                target = "bg"
                state256 = 1
            elif num == 39:
                colors["fg"] = -1
            elif num == 49:
                colors["bg"] = -1
            elif num == 1:
                attr |= Attr.BOLD
            elif num == 2:
                attr |= Attr.DIM
            elif num == 3:
                attr |= Attr.ITALIC
            elif num == 4:
                attr |= Attr.UNDERLINE
            elif num == 5:
                attr |= Attr.BLINK
            elif num == 7:
                attr |= Attr.REVERSE
            elif num == 9:
                attr |= Attr.STRIKE_THROUGH
            elif num == 22:
                attr &= ~(Attr.BOLD | Attr.DIM)
            elif num == 23:
                attr &= ~Attr.ITALIC
            elif num == 24:
                attr &= ~Attr.UNDERLINE
            elif num == 25:
                attr &= ~Attr.BLINK
            elif num == 27:
                attr &= ~Attr.REVERSE
            elif num == 29:
                attr &= ~Attr.STRIKE_THROUGH
            elif num == 0:
                colors["fg"] = -1
                colors["bg"] = -1
                attr = Attr.NONE
            elif 30 <= num <= 37:
                colors["fg"] = num - 30
            elif 40 <= num <= 47:
                colors["bg"] = num - 40
            elif 90 <= num <= 97:
                colors["fg"] = num - 90 + 8
            elif 100 <= num <= 107:
                colors["bg"] = num - 100 + 8
        elif state256 == 1:
            if num == 2:
                state256 = 10
            elif num == 5:
                state256 = 2
            else:
                state256 = 0
        elif state256 == 2:
            colors[target] = num
            state256 = 0
        elif state256 == 10:
            colors[target] = (1 << 24) | (num << 16)
            state256 = 11
        elif state256 == 11:
            colors[target] |= num << 8
            state256 = 12
        elif state256 == 12:
            colors[target] |= num
            state256 = 0

    if count == 0:
        colors["fg"] = -1
        colors["bg"] = -1
        attr = Attr.NONE

    if state256 > 0:
        colors[target] = -1

    return replace(state, fg=colors["fg"], bg=colors["bg"], attr=Attr(attr))


def _same_state(new: AnsiState, old: Optional[AnsiState]) -> bool:
    if old is None:
        return not new.colored()
    return new == old


def extract_color(
    text: str,
    state: Optional[AnsiState] = None,
    proc: Optional[Callable[[str, Optional[AnsiState]], bool]] = None,
) -> tuple[str, Optional[list[AnsiOffset]], Optional[AnsiState]]:
    """Strip escape sequences from *text* and collect the colored spans.

    Returns the plain text, the list of color offsets (None if there are none)
    and the state in effect at the end. *proc*, if given, is called with each
    plain piece and the state it is drawn with; when it returns False the
    extraction stops and ("", None, None) is returned.
    """
    offsets: list[AnsiOffset] = []
    if state is not None:
        offsets.append(AnsiOffset(0, 0, state))

    output: list[str] = []
    prev_idx = 0
    rune_count = 0
    idx = 0
    while idx < len(text):
        start, end = _find_escape(text, idx)
        if start == -1:
            break
        idx = end

        prev = text[prev_idx:start]
        if proc is not None and not proc(prev, state):
            return "", None, None
        prev_idx = idx

        if prev:
            rune_count += len(prev)
            output.append(prev)

        new_state = interpret_code(text[start:idx], state)
        if not _same_state(new_state, state):
            if state is not None:
                offsets[-1].end = rune_count
            if new_state.colored():
                state = new_state
                offsets.append(AnsiOffset(rune_count, rune_count, new_state))
            else:
                state = None

    if prev_idx == 0:
        rest = text
        trimmed = text
    else:
        rest = text[prev_idx:]
        output.append(rest)
        trimmed = "".join(output)

    if proc is not None:
        proc(rest, state)

    if offsets:
        if rest and state is not None:
            rune_count += len(rest)
            offsets[-1].end = rune_count
        return trimmed, offsets, state
    return trimmed, None, state