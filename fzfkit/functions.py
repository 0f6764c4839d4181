"""Small helpers for temporary files."""

from __future__ import annotations

import os
import tempfile
from typing import Iterable, Optional


def write_temporary_file(data: Iterable[str], print_sep: str) -> Optional[str]:
    """Write *data* joined and terminated by *print_sep* to a new temporary file.

    Returns the path of the file, or None if it could not be created.
    """
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="",
            prefix="fzf-temp-",
            delete=False,
        ) as handle:
            handle.write(print_sep.join(data))
            handle.write(print_sep)
            return handle.name
    except OSError:
        return None


def remove_files(files: Iterable[str]) -> None:
    """Remove each file, ignoring any that cannot be removed."""
    for filename in files:
        try:
            os.remove(filename)
        except OSError:
            pass