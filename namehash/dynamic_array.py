"""A growable array that doubles its capacity when full and halves it when sparse."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class DynamicArray(Generic[T]):
    """Sequence with explicit capacity management.

    Capacity doubles (starting at 1) when an insertion finds the array full,
    and halves after a removal that leaves fewer elements than half of it.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        self._capacity = 0
        for item in items:
            self.push_back(item)

    def _grow(self) -> None:
        if len(self._items) == self._capacity:
            self._capacity = self._capacity * 2 or 1

    def _shrink(self) -> None:
        if self._capacity > 0 and len(self._items) < self._capacity // 2:
            self._capacity //= 2

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def push_back(self, value: T) -> None:
        self._grow()
        self._items.append(value)

    def push_front(self, value: T) -> None:
        self._grow()
        self._items.insert(0, value)

    def push_at(self, index: int, value: T) -> None:
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range")
        self._grow()
        self._items.insert(index, value)

    def remove_back(self) -> T:
        if not self._items:
            raise IndexError("array is empty")
        value = self._items.pop()
        self._shrink()
        return value

    def remove_front(self) -> T:
        if not self._items:
            raise IndexError("array is empty")
        value = self._items.pop(0)
        self._shrink()
        return value

    def remove_at(self, index: int) -> T:
        self._check_index(index)
        value = self._items.pop(index)
        self._shrink()
        return value

    def find(self, value: T) -> int:
        """Index of the first element equal to ``value``, or -1."""
        for index, item in enumerate(self._items):
            if item == value:
                return index
        return -1

    def at_position(self, index: int) -> T:
        self._check_index(index)
        return self._items[index]

    def resize(self, capacity: int) -> None:
        """Set the capacity, dropping elements that no longer fit."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        del self._items[capacity:]
        self._capacity = capacity

    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._check_index(index)
        self._items[index] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return "[" + "; ".join(str(item) for item in self._items) + "]"

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r})"