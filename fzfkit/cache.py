"""Per-chunk cache of match results keyed by query string."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any, Optional

from fzfkit.constants import QUERY_CACHE_MAX

if TYPE_CHECKING:
    from fzfkit.chunklist import Chunk


class ChunkCache:
    """Maps a full chunk and a query string to the results found for it."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._cache: dict[Chunk, dict[str, list[Any]]] = {}

    def clear(self) -> None:
        """Drop every cached entry."""
        with self._lock:
            self._cache = {}

    def retire(self, *args: Chunk) -> None:
        """Drop the entries of the given chunks."""
        with self._lock:
            for chunk in args:
                self._cache.pop(chunk, None)

    def add(self, chunk: Chunk, key: str, results: list[Any]) -> None:
        """Remember *results* for *key* on *chunk*.

        Nothing is stored for an empty key, a chunk that is not full, or a
        result list too large to be worth caching.
        """
        if not key or not chunk.is_full() or len(results) > QUERY_CACHE_MAX:
            return
        with self._lock:
            self._cache.setdefault(chunk, {})[key] = results

    def lookup(self, chunk: Chunk, key: str) -> Optional[list[Any]]:
        """Return the results cached for exactly *key*, or None."""
        if not key or not chunk.is_full():
            return None
        with self._lock:
            queries = self._cache.get(chunk)
            if queries is None:
                return None
            return queries.get(key)

    def search(self, chunk: Chunk, key: str) -> Optional[list[Any]]:
        """Return cached results of the longest prefix or suffix of *key*, or None."""
        if not key or not chunk.is_full():
            return None
        with self._lock:
            queries = self._cache.get(chunk)
            if queries is None:
                return None
            for cut in range(1, len(key)):
                for part in (key[: len(key) - cut], key[cut:]):
                    cached = queries.get(part)
                    if cached is not None:
                        return cached
        return None