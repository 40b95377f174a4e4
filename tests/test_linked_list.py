import pytest

from namehash.linked_list import LinkedList
from namehash.pair import Pair


def _consistent(ll):
    forward = list(ll)
    assert list(reversed(ll)) == forward[::-1]
    assert len(forward) == len(ll)
    return forward


def test_push_back_and_front():
    ll = LinkedList()
    ll.push_back(2)
    ll.push_back(3)
    ll.push_front(1)
    assert _consistent(ll) == [1, 2, 3]


def test_init_from_items():
    assert _consistent(LinkedList("abc")) == ["a", "b", "c"]


@pytest.mark.parametrize("index", [0, 1, 2, 3, 4, 5])
def test_push_at_every_position(index):
    items = [0, 1, 2, 3, 4]
    ll = LinkedList(items)
    ll.push_at(index, "x")
    expected = list(items)
    expected.insert(index, "x")
    assert _consistent(ll) == expected


def test_push_at_out_of_range():
    ll = LinkedList([1, 2])
    with pytest.raises(IndexError):
        ll.push_at(3, 9)
    with pytest.raises(IndexError):
        ll.push_at(-1, 9)


@pytest.mark.parametrize("index", [0, 1, 2, 3, 4])
def test_remove_at_every_position(index):
    items = [10, 11, 12, 13, 14]
    ll = LinkedList(items)
    assert ll.remove_at(index) == items[index]
    expected = list(items)
    del expected[index]
    assert _consistent(ll) == expected


def test_remove_at_out_of_range():
    ll = LinkedList([1])
    with pytest.raises(IndexError):
        ll.remove_at(1)


def test_remove_back_and_front_until_empty():
    ll = LinkedList([1, 2, 3])
    assert ll.remove_back() == 3
    assert ll.remove_front() == 1
    assert ll.remove_back() == 2
    assert _consistent(ll) == []
    with pytest.raises(IndexError):
        ll.remove_back()
    with pytest.raises(IndexError):
        ll.remove_front()


def test_find_returns_node():
    ll = LinkedList([Pair(1, "Anna"), Pair(5, "Ola")])
    node = ll.find(Pair(0, "Ola"))
    assert node.value.key == 5
    assert ll.find(Pair(0, "Ewa")) is None


def test_find_index_missing_returns_length():
    ll = LinkedList(["a", "b", "c"])
    assert ll.find_index("b") == 1
    assert ll.find_index("z") == len(ll)
    assert LinkedList().find_index("a") == 0


def test_at_position():
    ll = LinkedList(["a", "b", "c", "d"])
    assert [ll.at_position(i).value for i in range(4)] == ["a", "b", "c", "d"]
    with pytest.raises(IndexError):
        ll.at_position(4)


def test_str():
    assert str(LinkedList([1, 2])) == "1->2->/0"
    assert str(LinkedList()) == "/0"