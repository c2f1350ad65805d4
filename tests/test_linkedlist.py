import pytest

from ftkit.linkedlist import LinkedList, Node


def test_construct_and_iterate():
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_push_front_and_back():
    lst = LinkedList()
    lst.push_back(2)
    lst.push_front(1)
    lst.push_back(3)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_push_returns_node():
    lst = LinkedList()
    node = lst.push_back("x")
    assert isinstance(node, Node)
    assert node.content == "x"
    assert lst.head is node


def test_last():
    lst = LinkedList([4, 5, 6])
    assert lst.last().content == 6
    assert lst.last().next is None


def test_clear_calls_delete_in_order():
    seen = []
    lst = LinkedList([1, 2, 3])
    lst.clear(seen.append)
    assert seen == [1, 2, 3]
    assert len(lst) == 0
    assert list(lst) == []


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_for_each():
    seen = []
    LinkedList(["p", "q"]).for_each(seen.append)
    assert seen == ["p", "q"]


def test_map_builds_new_list():
    source = LinkedList([1, 2, 3])
    mapped = source.map(str)
    assert list(mapped) == ["1", "2", "3"]
    assert list(source) == [1, 2, 3]


def test_map_failure_deletes_partial_results():
    deleted = []

    def f(x):
        if x == 3:
            raise RuntimeError("boom")
        return x * 10

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3]).map(f, deleted.append)
    assert deleted == [10, 20]


def test_push_to_moves_head():
    a = LinkedList([1, 2])
    b = LinkedList([3])
    a.push_to(b)
    assert list(a) == [2]
    assert list(b) == [1, 3]
    assert len(a) == 1 and len(b) == 2


def test_push_to_from_empty_does_nothing():
    a = LinkedList()
    b = LinkedList([7])
    a.push_to(b)
    assert list(b) == [7]
    assert len(a) == 0


def test_push_to_self_does_nothing():
    a = LinkedList([1, 2])
    a.push_to(a)
    assert list(a) == [1, 2]


def test_rotate():
    lst = LinkedList([1, 2, 3])
    lst.rotate()
    assert list(lst) == [2, 3, 1]
    assert lst.last().content == 1


def test_reverse_rotate():
    lst = LinkedList([1, 2, 3])
    lst.reverse_rotate()
    assert list(lst) == [3, 1, 2]
    assert lst.last().content == 2


@pytest.mark.parametrize("items", [[], [1], [1, 2], list(range(6))])
def test_rotate_round_trip(items):
    lst = LinkedList(items)
    lst.rotate()
    lst.reverse_rotate()
    assert list(lst) == items
    assert len(lst) == len(items)


@pytest.mark.parametrize("items", [[], ["only"]])
def test_moves_on_short_lists_are_no_ops(items):
    lst = LinkedList(items)
    lst.rotate()
    lst.reverse_rotate()
    lst.swap()
    assert list(lst) == items


def test_swap():
    lst = LinkedList(["a", "b", "c"])
    lst.swap()
    assert list(lst) == ["b", "a", "c"]
    lst.swap()
    assert list(lst) == ["a", "b", "c"]