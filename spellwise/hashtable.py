"""Open-addressing hash table of strings using a letter-sum hash."""

from __future__ import annotations

from typing import Optional


def fold(key: str) -> int:
    """Sum the character codes of the ASCII letters in ``key``, lower-cased."""
    return sum(ord(ch.lower()) for ch in key if ch.isascii() and ch.isalpha())


class HashTable:
    """Linear-probing string set with twice ``size`` slots.

    Duplicates are not checked on insertion.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self._slots: list[Optional[str]] = [None] * (size * 2)

    def _probe(self, key: str):
        count = len(self._slots)
        start = fold(key) % count
        for step in range(count):
            yield (start + step) % count

    def insert(self, key: str) -> None:
        """Store ``key`` in the first free slot from its home position."""
        for index in self._probe(key):
            if self._slots[index] is None:
                self._slots[index] = key
                return
        raise OverflowError("hash table is full")

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        for index in self._probe(key):
            stored = self._slots[index]
            if stored is None:
                return False
            if stored == key:
                return True
        return False

    def find(self, key: str) -> bool:
        """Return whether ``key`` has been inserted."""
        return key in self