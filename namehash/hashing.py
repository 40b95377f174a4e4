"""Hash functions for names and the interface shared by the hash-table strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from namehash.pair import MAX_NAME_LENGTH, Pair

HashFunction = Callable[[str, int], int]
"""A hash function takes a name and a table size and returns a bucket index."""

_MASK = 0xFFFFFFFF
_FNV_PRIME = 0x01000193
_FNV_OFFSET = 0x811C9DC5
_DJB2_SEED = 5381


def _chars(text: str) -> str:
    """The part of ``text`` before the first NUL character."""
    return text.split("\0", 1)[0]


class HashMapStrategy(ABC):
    """A hash table mapping names to integer counts."""

    @abstractmethod
    def insert(self, count: int, name: str) -> bool:
        """Store ``count`` under ``name``; report whether it went in as a new entry."""

    def insert_pair(self, pair: Pair) -> bool:
        """Store a Pair's count under its name."""
        return self.insert(pair.key, pair.val)

    @abstractmethod
    def remove(self, name: str) -> bool:
        """Remove ``name`` from the table."""

    @abstractmethod
    def get_val(self, name: str) -> int:
        """The count stored under ``name``."""

    @abstractmethod
    def search(self, name: str) -> int:
        """The position at which ``name`` is stored."""

    @abstractmethod
    def size(self) -> int:
        """The number of slots or buckets in the table."""


def constant_hash(text: str, n: int) -> int:
    """Always 1; sends every name to the same place."""
    return 1


def modulo_hash(text: str, n: int) -> int:
    """Sum of the character codes, each reduced modulo a fraction of ``n``.

    Only the first ``MAX_NAME_LENGTH + 1`` characters are read.
    """
    divisor = n // 13 if n > 50 else n
    total = 0
    for char in _chars(text[: MAX_NAME_LENGTH + 1]):
        total = (total + ord(char) % divisor) & _MASK
    return total % n


def xor_hash(text: str, n: int) -> int:
    """Multiply by 227 and xor in each character code."""
    value = 0
    for char in _chars(text):
        value = ((value * 227) & _MASK) ^ ord(char)
    return value % n


def fnv_1(text: str, n: int) -> int:
    """32-bit FNV hash (xor, then multiply) reduced modulo ``n``."""
    value = _FNV_OFFSET
    for char in _chars(text):
        value ^= ord(char)
        value = (value * _FNV_PRIME) & _MASK
    return value % n


def djb2(text: str, n: int) -> int:
    """32-bit djb2 hash (``hash * 33 + c``) reduced modulo ``n``."""
    value = _DJB2_SEED
    for char in _chars(text):
        value = ((value << 5) + value + ord(char)) & _MASK
    return value % n