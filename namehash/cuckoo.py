"""Cuckoo hash table over two half-tables with their own hash functions."""

from __future__ import annotations

import logging

from namehash.hashing import HashFunction, HashMapStrategy
from namehash.linear import Slot
from namehash.pair import Pair

_log = logging.getLogger(__name__)


class CuckooStrategy(HashMapStrategy):
    """One logical table of ``size`` slots split into two equal halves.

    An odd size is rounded up. Positions returned by ``search`` below
    ``size()`` are in the first half; the second half's positions are
    reported as ``size()`` plus the index within it.
    """

    def __init__(
        self, hash_fun1: HashFunction, hash_fun2: HashFunction, size: int = 2
    ) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        if size % 2:
            size += 1
        half = size // 2
        self._hashes = (hash_fun1, hash_fun2)
        self._tables = ([Slot() for _ in range(half)], [Slot() for _ in range(half)])
        self._count = 0

    def insert(self, count: int, name: str) -> bool:
        """Place the entry, evicting residents to their other table.

        Returns False once the number of evictions reaches twice the size;
        the entry displaced last is then dropped.
        """
        half = self.size() // 2
        entry = Slot(Pair(count, name), True, False)
        side = 0
        index = self._hashes[side](name, half)
        budget = self.size() * 2
        while self._tables[side][index].occupied and not self._tables[side][index].deleted:
            table = self._tables[side]
            table[index], entry = entry, table[index]
            side ^= 1
            index = self._hashes[side](entry.val, half)
            budget -= 1
            if budget <= 0:
                _log.debug("eviction cycle while inserting %s", name)
                return False
        self._tables[side][index] = entry
        self._count += 1
        return True

    def insert_pair(self, pair: Pair) -> bool:
        return self.insert(pair.key, pair.val)

    def _slot(self, position: int) -> Slot:
        table = self._tables[1] if position >= self.size() else self._tables[0]
        return table[position % (self.size() // 2)]

    def remove(self, name: str) -> bool:
        slot = self._slot(self.search(name))
        self._count -= 1
        slot.deleted = True
        slot.occupied = False
        return True

    def get_val(self, name: str) -> int:
        return self._slot(self.search(name)).key

    def search(self, name: str) -> int:
        """Position of ``name``; KeyError when it is in neither table."""
        half = self.size() // 2
        first, second = self._tables
        index = self._hashes[0](name, half)
        if first[index].occupied and first[index].val == name:
            return index
        index = self._hashes[1](name, half)
        if second[index].occupied and second[index].val == name:
            return self.size() + index
        raise KeyError(f"no such key: {name}")

    def size(self) -> int:
        return 2 * len(self._tables[0])

    def __str__(self) -> str:
        return "\n".join(
            "[" + "; ".join(str(slot) for slot in table) + "]" for table in self._tables
        )