"""A binary max-heap of Pairs, ordered by name."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from namehash.pair import Pair


class Heap:
    """Max-heap of Pairs; the greatest name sits at the root.

    Stored pairs are copies of the ones handed in.
    """

    def __init__(self, items: Iterable[Pair] = ()) -> None:
        self._data: list[Pair] = []
        self.build(items)

    def _sift_up(self, index: int) -> None:
        data = self._data
        while index > 0:
            parent = (index - 1) // 2
            if data[index] <= data[parent]:
                break
            data[index], data[parent] = data[parent], data[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        data = self._data
        size = len(data)
        while True:
            largest = index
            left, right = 2 * index + 1, 2 * index + 2
            if left < size and data[left] > data[largest]:
                largest = left
            if right < size and data[right] > data[largest]:
                largest = right
            if largest == index:
                return
            data[index], data[largest] = data[largest], data[index]
            index = largest

    def insert(self, pair: Pair) -> None:
        self._data.append(Pair(pair.key, pair.val))
        self._sift_up(len(self._data) - 1)

    def extract_max(self) -> Pair:
        data = self._data
        if not data:
            raise IndexError("heap is empty")
        data[0], data[-1] = data[-1], data[0]
        top = data.pop()
        if data:
            self._sift_down(0)
        return top

    def find_max(self) -> Pair:
        if not self._data:
            raise IndexError("heap is empty")
        return self._data[0]

    def find(self, val: str) -> Optional[Pair]:
        """The stored pair with name ``val``, or None."""
        return next((pair for pair in self._data if pair.val == val), None)

    def decrease_key(self, val: str, amount: int = 1) -> None:
        pair = self.find(val)
        if pair is not None:
            pair.key -= amount

    def increase_key(self, val: str, amount: int = 1) -> None:
        self.decrease_key(val, -amount)

    def modify_key(self, val: str, key: int) -> None:
        for index, pair in enumerate(self._data):
            if pair.val == val:
                old = pair.key
                pair.key = key
                if key > old:
                    self._sift_up(index)
                else:
                    self._sift_down(index)
                return

    def build(self, items: Iterable[Pair]) -> None:
        """Replace the contents with ``items`` and restore the heap order."""
        self._data = [Pair(pair.key, pair.val) for pair in items]
        for index in range(len(self._data) // 2 - 1, -1, -1):
            self._sift_down(index)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Pair]:
        return iter(self._data)

    def __str__(self) -> str:
        return "[" + "; ".join(str(pair) for pair in self._data) + "]"