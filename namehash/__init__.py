"""Hash tables (linear probing, chaining, cuckoo), a heap, lists and a CSV loader for name counts."""

__version__ = "0.1.0"