"""Open-addressing hash table with linear probing and tombstones."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from namehash.hashing import HashFunction, HashMapStrategy
from namehash.pair import Pair

_log = logging.getLogger(__name__)

_MAX_LOAD = 0.7


@dataclass(eq=False)
class Slot:
    """A table cell: a pair plus occupied and deleted (tombstone) flags."""

    pair: Pair = field(default_factory=Pair)
    occupied: bool = False
    deleted: bool = False

    @property
    def key(self) -> int:
        return self.pair.key

    @property
    def val(self) -> str:
        return self.pair.val

    def set(self, key: int, val: str) -> None:
        """Fill the slot with a new pair and mark it live."""
        self.pair.key = key
        self.pair.val = val
        self.occupied = True
        self.deleted = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Slot):
            return NotImplemented
        return self.pair == other.pair

    __hash__ = None

    def __str__(self) -> str:
        return f"({int(self.occupied)}|{int(self.deleted)}){self.pair}"


def _is_live(slot: Slot) -> bool:
    return slot.occupied and not slot.deleted


class LinearStrategy(HashMapStrategy):
    """Linear probing; the table doubles once 70% of its slots are taken."""

    def __init__(self, hash_fun: HashFunction, size: int = 2) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self._hash = hash_fun
        self._slots = [Slot() for _ in range(size)]
        self._occupied = 0

    def _rehash(self) -> None:
        _log.debug("rehashing %d slots", len(self._slots))
        old = self._slots
        width = len(old) * 2
        self._slots = [Slot() for _ in range(width)]
        self._occupied = 0
        for slot in old:
            if not slot.occupied:
                continue
            index = start = self._hash(slot.val, width)
            while _is_live(self._slots[index]):
                index = (index + 1) % width
                if index == start:
                    raise RuntimeError("no free slot found while rehashing")
            self._slots[index].set(slot.key, slot.val)
            self._occupied += 1

    def insert(self, count: int, name: str) -> bool:
        """Store ``count`` under ``name``.

        Returns False when an existing entry was overwritten or the table
        is full, True otherwise.
        """
        width = len(self._slots)
        index = start = self._hash(name, width)
        fresh = True
        while _is_live(self._slots[index]):
            index = (index + 1) % width
            if index == start:
                return False
            if self._slots[index].val == name:
                fresh = False
                break
        self._slots[index].set(count, name)
        self._occupied += 1
        if self._occupied / len(self._slots) >= _MAX_LOAD:
            self._rehash()
        return fresh

    def insert_pair(self, pair: Pair) -> bool:
        return self.insert(pair.key, pair.val)

    def remove(self, name: str) -> bool:
        slot = self._slots[self.search(name)]
        self._occupied -= 1
        slot.deleted = True
        slot.occupied = False
        return True

    def get_val(self, name: str) -> int:
        return self._slots[self.search(name)].key

    def search(self, name: str) -> int:
        """Index of the slot holding ``name``; KeyError when absent."""
        width = len(self._slots)
        index = start = self._hash(name, width)
        while True:
            slot = self._slots[index]
            if _is_live(slot) and slot.val == name:
                return index
            index = (index + 1) % width
            if index == start:
                break
        raise KeyError(f"no such key: {name}")

    def size(self) -> int:
        return len(self._slots)

    def __str__(self) -> str:
        return "[" + "; ".join(str(slot) for slot in self._slots) + "]"