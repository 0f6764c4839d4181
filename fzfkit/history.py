"""Query history backed by a file."""

from __future__ import annotations

import os


class History:
    """Lines of past queries with a cursor for browsing them.

    The last line is always an empty entry for the query being typed. Edits
    made while browsing are kept in memory and never written to the file.
    """

    def __init__(self, path: str, max_size: int) -> None:
        self.path = path
        self.max_size = max_size
        try:
            with open(path, encoding="utf-8") as handle:
                data = handle.read()
        except FileNotFoundError:
            data = ""
            try:
                self._write(data)
            except OSError as err:
                raise self._error(err) from err
        except OSError as err:
            raise self._error(err) from err

        lines = data.strip("\n").split("\n")
        if lines[-1]:
            lines.append("")
        self.lines: list[str] = lines
        self.modified: dict[int, str] = {}
        self.cursor = len(lines) - 1

    def _error(self, err: OSError) -> Exception:
        if isinstance(err, PermissionError):
            return PermissionError(f"permission denied: {self.path}")
        return ValueError(f"invalid history file: {err}")

    def _write(self, content: str) -> None:
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)

    def append(self, line: str) -> None:
        """Add *line* to the history and save it; empty lines are ignored."""
        if not line:
            return
        lines = self.lines[:-1] + [line]
        if len(lines) > self.max_size:
            lines = lines[len(lines) - self.max_size :]
        self.lines = lines + [""]
        self._write("\n".join(self.lines))

    def override(self, text: str) -> None:
        """Replace the entry under the cursor in memory only."""
        if self.cursor == len(self.lines) - 1:
            self.lines[self.cursor] = text
        elif self.cursor < len(self.lines) - 1:
            self.modified[self.cursor] = text

    def current(self) -> str:
        """Return the entry under the cursor."""
        return self.modified.get(self.cursor, self.lines[self.cursor])

    def previous(self) -> str:
        """Move to the older entry, if any, and return it."""
        if self.cursor > 0:
            self.cursor -= 1
        return self.current()

    def next(self) -> str:
        """Move to the newer entry, if any, and return it."""
        if self.cursor < len(self.lines) - 1:
            self.cursor += 1
        return self.current()