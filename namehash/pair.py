"""A name paired with an integer count, ordered and compared by name."""

from __future__ import annotations

from functools import total_ordering

MAX_NAME_LENGTH = 20
"""Longest name a pair keeps; longer names are cut to this many characters."""


def _clip(text: str) -> str:
    """Cut a name at the first NUL character and at MAX_NAME_LENGTH."""
    return text.split("\0", 1)[0][:MAX_NAME_LENGTH]


@total_ordering
class Pair:
    """A count (``key``) and a name (``val``).

    Equality and ordering look at the name only; the count is ignored.
    """

    __slots__ = ("key", "_val")

    def __init__(self, key: int = 0, val: str = "") -> None:
        self.key = key
        self.val = val

    @property
    def val(self) -> str:
        return self._val

    @val.setter
    def val(self, text: str) -> None:
        self._val = _clip(text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return self._val == other._val

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return self._val < other._val

    __hash__ = None  # mutable, compared by name

    def __str__(self) -> str:
        return f"({self.key}|{self._val})"

    def __repr__(self) -> str:
        return f"Pair({self.key!r}, {self._val!r})"