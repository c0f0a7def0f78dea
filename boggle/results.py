from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, Iterator


class ResultSet:
    """Sorted, duplicate-free collection of found words."""

    def __init__(self, words: Iterable[str] = ()):
        self._words: list[str] = []
        self.update(words)

    def add_if_absent(self, word: str) -> bool:
        idx = bisect_left(self._words, word)
        if idx < len(self._words) and self._words[idx] == word:
            return False
        self._words.insert(idx, word)
        return True

    def update(self, words: Iterable[str]) -> int:
        """Add every word not already present; returns how many were new."""
        return sum(1 for w in words if self.add_if_absent(w))

    @property
    def words(self) -> list[str]:
        return list(self._words)

    def __contains__(self, word) -> bool:
        idx = bisect_left(self._words, word)
        return idx < len(self._words) and self._words[idx] == word

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"ResultSet({self._words!r})"
