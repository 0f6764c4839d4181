"""Input lines as seen by the matcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fzfkit.ansi import AnsiOffset, extract_color


@dataclass
class Item:
    """One input line: the text to match, its ordinal and its colors.

    ``orig_text`` holds the line as it was read when the matched text was
    derived from it, for example by selecting fields.
    """

    text: str
    index: int = 0
    orig_text: Optional[str] = None
    colors: Optional[list[AnsiOffset]] = None
    transformed: Optional[list] = None

    @property
    def ansi_offsets(self) -> list[AnsiOffset]:
        """Return the color spans of the item, empty if it has none."""
        return list(self.colors) if self.colors is not None else []

    def as_string(self, strip_ansi: bool) -> str:
        """Return the original line, without escape sequences if *strip_ansi*."""
        if self.orig_text is not None:
            if strip_ansi:
                trimmed, _, _ = extract_color(self.orig_text, None, None)
                return trimmed
            return self.orig_text
        return self.text


MIN_ITEM = Item(text="", index=-(2**31))