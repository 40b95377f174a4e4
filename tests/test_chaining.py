import pytest

from namehash.chaining import LinkStrategy
from namehash.hashing import constant_hash, fnv_1
from namehash.pair import Pair

NAMES = [f"Imie{i}" for i in range(50)]


def test_new_table_shows_two_empty_buckets():
    assert str(LinkStrategy(fnv_1)) == "[/0; /0]"


def test_insert_and_get():
    table = LinkStrategy(fnv_1)
    assert table.insert(12, "Anna") is True
    assert table.get_val("Anna") == 12


def test_insert_pair():
    table = LinkStrategy(fnv_1)
    table.insert_pair(Pair(3, "Jan"))
    assert table.get_val("Jan") == 3


def test_empty_bucket_raises():
    table = LinkStrategy(constant_hash)
    with pytest.raises(KeyError):
        table.search("x")
    with pytest.raises(KeyError):
        table.get_val("x")


def test_positions_within_shared_bucket():
    table = LinkStrategy(constant_hash)
    table.insert(1, "a")
    table.insert(2, "b")
    assert table.search("a") == 0
    assert table.search("b") == 1
    assert table.size() == 2


def test_absent_name_in_filled_bucket():
    table = LinkStrategy(constant_hash)
    table.insert(1, "a")
    table.insert(2, "b")
    assert table.search("zzz") == 2
    assert table.remove("zzz") is False
    with pytest.raises(KeyError):
        table.get_val("zzz")


def test_remove_shifts_bucket():
    table = LinkStrategy(constant_hash)
    table.insert(1, "a")
    table.insert(2, "b")
    assert table.remove("a") is True
    assert table.search("b") == 0
    assert table.get_val("b") == 2


def test_duplicates_kept_first_wins():
    table = LinkStrategy(constant_hash)
    table.insert(1, "a")
    table.insert(2, "a")
    assert table.get_val("a") == 1
    table.remove("a")
    assert table.get_val("a") == 2


def test_grows_and_keeps_everything():
    table = LinkStrategy(fnv_1)
    for count, name in enumerate(NAMES):
        table.insert(count, name)
    assert table.size() > 2
    assert [table.get_val(name) for name in NAMES] == list(range(len(NAMES)))


def test_str_holds_every_entry():
    table = LinkStrategy(fnv_1)
    for count, name in enumerate(NAMES[:5]):
        table.insert(count, name)
    text = str(table)
    assert all(f"({count}|{name})->" in text for count, name in enumerate(NAMES[:5]))