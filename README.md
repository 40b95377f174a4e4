# namehash

Small, dependency-free data structures for storing first names together with
how many people carry them: three hash-table strategies and the containers
they rest on.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

- `namehash.pair.Pair`: a count (`key`) and a name (`val`). A name is cut
  at its first NUL character and kept to at most 20 characters. Pairs
  compare and order by name only. `str(pair)` gives `(count|name)`.
- `namehash.dynamic_array.DynamicArray`: a growable array. Its capacity
  doubles, starting from 1, when it is full. It halves after a removal leaves
  fewer elements than half of it. Out-of-range positions raise `IndexError`.
- `namehash.linked_list.LinkedList`: a doubly linked list of `Node`s. It
  supports `push_*`, `remove_*`, `find`, `find_index`, `at_position`, forward
  iteration and `reversed()`.
- `namehash.heap.Heap`: a max-heap of pairs, ordered by name. It stores
  copies of the pairs it is given.
- `namehash.hashing`: the common `HashMapStrategy` interface and the hash
  functions, each taking a name and the table size:
  - `fnv_1`
  - `djb2`
  - `xor_hash`
  - `modulo_hash`
  - `constant_hash`, which always returns 1
- `namehash.linear.LinearStrategy`: open addressing with linear probing and
  tombstones (`Slot`s). The table doubles once 70% of its slots are taken.
- `namehash.chaining.LinkStrategy`: separate chaining with linked lists. It
  starts with two buckets and doubles once 70% of them have ever been filled.
  Duplicate names are kept.
- `namehash.cuckoo.CuckooStrategy`: cuckoo hashing over two halves of one
  table, with one hash function for each half. An odd size is rounded up.
- `namehash.loader.load_csv`: reads a CSV file into a list of pairs. The file
  has a header line followed by `name,gender,count` rows. A missing file
  raises `FileNotFoundError`. An empty file, or a row whose count is not a
  number, raises `ValueError`.

## Using a hash table

```python
from namehash.cuckoo import CuckooStrategy
from namehash.hashing import djb2, fnv_1

table = CuckooStrategy(fnv_1, djb2, 100)
table.insert(1200, "Anna")
table.insert(800, "Jan")

table.get_val("Anna")   # 1200
table.search("Jan")     # position of "Jan" in the table
table.remove("Jan")

try:
    table.get_val("Arrur")
except KeyError as err:
    print("Not found:", err)
```

Every strategy offers the same operations:

- `insert(count, name)`
- `insert_pair(pair)`
- `remove(name)`
- `get_val(name)`
- `search(name)`
- `size()`

`get_val` raises `KeyError` for a name that is not stored.

`search` works differently depending on the strategy:

- `LinearStrategy` and `CuckooStrategy` raise `KeyError` for a missing name.
- `LinkStrategy` returns the position within the name's bucket. For a missing
  name it raises `KeyError` if that bucket is empty, and otherwise returns the
  bucket's length.

What `insert` returns also depends on the strategy:

- `LinearStrategy` returns `False` when it overwrote an existing entry or
  found the table full.
- `CuckooStrategy` returns `False` when eviction runs too long. The entry
  displaced last is then dropped.
- `LinkStrategy` always returns `True`.

```python
from namehash.hashing import fnv_1
from namehash.linear import LinearStrategy
from namehash.chaining import LinkStrategy

linear = LinearStrategy(fnv_1, 16)
chained = LinkStrategy(fnv_1)
for table in (linear, chained):
    table.insert(5, "Zofia")
    assert table.get_val("Zofia") == 5
```

## Using the heap

```python
from namehash.heap import Heap
from namehash.pair import Pair

heap = Heap([Pair(3, "Adam"), Pair(7, "Ewa"), Pair(1, "Piotr")])
heap.insert(Pair(4, "Bartosz"))
print(heap.extract_max())   # the pair whose name sorts last: (1|Piotr)
heap.increase_key("Ewa", 2)
```

## Command line

```
namehash [male.csv] [female.csv] [--size N] [--count N] [--missing NAME]
```

The command does the following:

1. Reads the two name lists. They default to `./dane/meskie.csv` and
   `./dane/zenskie.csv`.
2. Merges them and prints the number of records and the first one.
3. Puts the first `--count` names into a cuckoo table of `--size` slots,
   hashed with `fnv_1` and `djb2`. The defaults are 10000 names and 100000
   slots.
4. Prints the position and count of the records at positions 40 to 44.
5. Shows the error reported for the absent name `--missing`, which defaults
   to `Arrur`.

If a file cannot be read, the command prints the error and exits with
status 1.

The name lists themselves are not shipped with the package; supply your own
CSV files.