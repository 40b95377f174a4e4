"""Reading name counts from CSV files."""

from __future__ import annotations

import re
from os import PathLike
from typing import Union

from namehash.pair import Pair

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_count(text: str) -> int:
    """Read the integer at the start of ``text``, ignoring what follows."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group(1))


def load_csv(path: Union[str, PathLike]) -> list[Pair]:
    """Read ``name,sex,count`` rows after a header line into Pairs.

    Raises FileNotFoundError for a missing file and ValueError for an empty
    file or a row whose count is not a number.
    """
    with open(path, encoding="utf-8") as handle:
        if not handle.readline():
            raise ValueError(f"file is empty: {path}")
        pairs = []
        for line in handle:
            fields = line.rstrip("\n").split(",")
            name = fields[0]
            count = fields[2] if len(fields) > 2 else ""
            pairs.append(Pair(_parse_count(count), name))
    return pairs