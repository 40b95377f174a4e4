"""A doubly linked list."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """One element of a LinkedList with links to its neighbours."""

    __slots__ = ("value", "prev", "next")

    def __init__(
        self,
        value: T,
        prev: Optional[Node[T]] = None,
        next: Optional[Node[T]] = None,
    ) -> None:
        self.value = value
        self.prev = prev
        self.next = next

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class LinkedList(Generic[T]):
    """Doubly linked list with head and tail pointers."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def _node_at(self, index: int) -> Node[T]:
        """Walk from whichever end is nearer to the node at ``index``."""
        if index < self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def push_back(self, value: T) -> None:
        node = Node(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def push_front(self, value: T) -> None:
        node = Node(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_at(self, index: int, value: T) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} out of range")
        if index == 0:
            self.push_front(value)
        elif index == self._size:
            self.push_back(value)
        else:
            before = self._node_at(index - 1)
            node = Node(value, before, before.next)
            before.next.prev = node
            before.next = node
            self._size += 1

    def remove_back(self) -> T:
        if self._tail is None:
            raise IndexError("list is empty")
        node = self._tail
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._size -= 1
        return node.value

    def remove_front(self) -> T:
        if self._head is None:
            raise IndexError("list is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return node.value

    def remove_at(self, index: int) -> T:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        if index == 0:
            return self.remove_front()
        if index == self._size - 1:
            return self.remove_back()
        node = self._node_at(index)
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.value

    def _nodes(self) -> Iterator[Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def find(self, value: T) -> Optional[Node[T]]:
        """First node holding a value equal to ``value``, or None."""
        return next((node for node in self._nodes() if node.value == value), None)

    def find_index(self, value: T) -> int:
        """Position of the first equal value, or ``len(self)`` when absent."""
        for index, node in enumerate(self._nodes()):
            if node.value == value:
                return index
        return self._size

    def at_position(self, index: int) -> Node[T]:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        return self._node_at(index)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.value

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "/0"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"