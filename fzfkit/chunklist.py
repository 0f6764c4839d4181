"""Append-only storage of items in fixed-size chunks with cheap snapshots."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence

from fzfkit.cache import ChunkCache
from fzfkit.constants import CHUNK_SIZE
from fzfkit.item import Item

ItemBuilder = Callable[[Any], Optional[Item]]
"""Turns raw input into an item, or returns None to leave it out."""


@dataclass(eq=False)
class Chunk:
    """Up to CHUNK_SIZE items; chunks compare and hash by identity."""

    items: list[Item] = field(default_factory=list)

    @property
    def count(self) -> int:
        """Number of items held."""
        return len(self.items)

    def is_full(self) -> bool:
        """Return True if no more items fit."""
        return len(self.items) == CHUNK_SIZE

    def push(self, builder: ItemBuilder, data: Any) -> bool:
        """Build an item from *data* and add it; return False if the builder declined."""
        if self.is_full():
            raise ValueError("chunk is full")
        item = builder(data)
        if item is None:
            return False
        self.items.append(item)
        return True

    def _copy(self, items: Optional[list[Item]] = None) -> Chunk:
        return Chunk(items=list(self.items if items is None else items))


def count_items(chunks: Sequence[Chunk]) -> int:
    """Return the total number of items in *chunks*.

    Only the first and the last chunk may be partially filled.
    """
    if not chunks:
        return 0
    if len(chunks) == 1:
        return chunks[0].count
    return chunks[0].count + CHUNK_SIZE * (len(chunks) - 2) + chunks[-1].count


class ChunkList:
    """A thread-safe list of chunks fed one input record at a time."""

    def __init__(self, cache: ChunkCache, builder: ItemBuilder) -> None:
        self._chunks: list[Chunk] = []
        self._lock = threading.Lock()
        self.builder = builder
        self.cache = cache

    def push(self, data: Any) -> bool:
        """Build an item from *data* and append it; return False if it was left out."""
        with self._lock:
            if not self._chunks or self._chunks[-1].is_full():
                self._chunks.append(Chunk())
            return self._chunks[-1].push(self.builder, data)

    def clear(self) -> None:
        """Remove every item."""
        with self._lock:
            self._chunks = []

    def snapshot(self, tail: int = 0) -> tuple[list[Chunk], int, bool]:
        """Return an immutable view of the chunks, the item count and whether it shrank.

        With a positive *tail* only the last *tail* items are kept, and the
        rest are dropped from the list for good.
        """
        with self._lock:
            changed = False
            if tail > 0 and count_items(self._chunks) > tail:
                changed = True
                kept = 0
                left = tail
                for chunk in reversed(self._chunks):
                    if left <= 0:
                        break
                    kept += 1
                    left -= chunk.count

                min_index = len(self._chunks) - kept
                self.cache.retire(*self._chunks[:min_index])
                kept_chunks = self._chunks[min_index:]

                left = tail
                for i in range(len(kept_chunks) - 1, -1, -1):
                    chunk = kept_chunks[i]
                    if chunk.count > left:
                        kept_chunks[i] = chunk._copy(chunk.items[chunk.count - left :])
                        self.cache.retire(chunk)
                        break
                    left -= chunk.count
                self._chunks = kept_chunks

            view = list(self._chunks)
            if view:
                if tail > 0 and len(view) > 1:
                    view[0] = view[0]._copy()
                view[-1] = view[-1]._copy()

        return view, count_items(view), changed