"""Load name counts, store them in a cuckoo table and look some of them up."""

from __future__ import annotations

import argparse
import sys
from itertools import islice
from typing import Optional, Sequence

from namehash.cuckoo import CuckooStrategy
from namehash.hashing import djb2, fnv_1
from namehash.loader import load_csv


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="namehash", description=__doc__)
    parser.add_argument("male", nargs="?", default="./dane/meskie.csv")
    parser.add_argument("female", nargs="?", default="./dane/zenskie.csv")
    parser.add_argument("--size", type=int, default=100000, help="table size")
    parser.add_argument("--count", type=int, default=10000, help="names to insert")
    parser.add_argument("--missing", default="Arrur", help="a name to look for that is absent")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        people = load_csv(args.male) + load_csv(args.female)
    except (OSError, ValueError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    print(f"Merged {len(people)} records")
    if people:
        print(people[0])

    table = CuckooStrategy(fnv_1, djb2, args.size)
    for pair in islice(people, args.count):
        table.insert_pair(pair)

    for pair in people[40:45]:
        print(f"Looking up {pair}")
        print(f"Position: {table.search(pair.val)}")
        print(f"There are {table.get_val(pair.val)} people named {pair}")

    try:
        print(f"Position: {table.search(args.missing)}")
    except KeyError as err:
        print(f"Error: {err.args[0]}")
    try:
        print(f"There are {table.get_val(args.missing)} people named {args.missing}")
    except KeyError as err:
        print(f"Error: {err.args[0]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())