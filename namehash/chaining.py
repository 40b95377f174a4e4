"""Hash table with separate chaining in linked-list buckets."""

from __future__ import annotations

import logging

from namehash.hashing import HashFunction, HashMapStrategy
from namehash.linked_list import LinkedList
from namehash.pair import Pair

_log = logging.getLogger(__name__)

_MAX_LOAD = 0.7


class LinkStrategy(HashMapStrategy):
    """Buckets of linked lists; doubles once 70% of the buckets were ever filled.

    The filled-bucket count only grows: it is not lowered by removals or
    recomputed after a rehash.
    """

    def __init__(self, hash_fun: HashFunction) -> None:
        self._hash = hash_fun
        self._buckets: list[LinkedList[Pair]] = [LinkedList(), LinkedList()]
        self._filled = 0

    def _rehash(self) -> None:
        width = len(self._buckets)
        _log.debug("rehashing %d buckets", width)
        self._buckets.extend(LinkedList() for _ in range(width))
        for bucket in self._buckets[:width]:
            for _ in range(len(bucket)):
                pair = bucket.remove_front()
                self._buckets[self._hash(pair.val, width * 2)].push_back(pair)

    def insert(self, count: int, name: str) -> bool:
        """Append the entry to its bucket; duplicates are kept. Always True."""
        width = len(self._buckets)
        bucket = self._buckets[self._hash(name, width)]
        if not bucket:
            self._filled += 1
        bucket.push_back(Pair(count, name))
        if self._filled / width >= _MAX_LOAD:
            self._rehash()
        return True

    def insert_pair(self, pair: Pair) -> bool:
        return self.insert(pair.key, pair.val)

    def _bucket(self, name: str) -> LinkedList[Pair]:
        index = self._hash(name, len(self._buckets))
        if index >= len(self._buckets):
            raise KeyError(f"no such key: {name}")
        return self._buckets[index]

    def remove(self, name: str) -> bool:
        """Remove the first entry for ``name``; False when its bucket lacks it."""
        bucket = self._bucket(name)
        index = self.search(name)
        if index < len(bucket):
            bucket.remove_at(index)
            return True
        return False

    def get_val(self, name: str) -> int:
        bucket = self._bucket(name)
        if not bucket:
            raise KeyError(f"no such key: {name}")
        index = self.search(name)
        if index < len(bucket):
            return bucket.at_position(index).value.key
        raise KeyError(f"no such key: {name}")

    def search(self, name: str) -> int:
        """Position of ``name`` within its bucket.

        Returns the bucket's length when the name is absent from a non-empty
        bucket; raises KeyError when the bucket is empty.
        """
        bucket = self._bucket(name)
        if not bucket:
            raise KeyError(f"bucket for {name} is empty")
        return bucket.find_index(Pair(0, name))

    def size(self) -> int:
        return len(self._buckets)

    def __str__(self) -> str:
        return "[" + "; ".join(str(bucket) for bucket in self._buckets) + "]"