import pytest

from ftfmt.linked_list import LinkedList, Node


def test_init_keeps_order():
    lst = LinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert list(lst) == []
    assert len(lst) == 0
    assert lst.last() is None
    assert lst.head is None


def test_add_front_prepends():
    lst = LinkedList([1, 2])
    node = lst.add_front(0)
    assert lst.head is node
    assert list(lst) == [0, 1, 2]


def test_add_back_appends():
    lst = LinkedList()
    lst.add_back("a")
    node = lst.add_back("b")
    assert list(lst) == ["a", "b"]
    assert lst.last() is node
    assert node.next is None


def test_last_returns_tail_node():
    lst = LinkedList(["x", "y", "z"])
    tail = lst.last()
    assert isinstance(tail, Node)
    assert tail.content == "z"
    assert tail.next is None


def test_len_counts_every_node():
    lst = LinkedList(range(10))
    lst.add_front(-1)
    lst.add_back(10)
    assert len(lst) == 12


def test_clear_calls_delete_in_order():
    deleted = []
    lst = LinkedList(["a", "b", "c"])
    lst.clear(deleted.append)
    assert deleted == ["a", "b", "c"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_iterate_visits_every_content():
    seen = []
    LinkedList([3, 1, 2]).iterate(seen.append)
    assert seen == [3, 1, 2]


def test_iterate_with_none_does_nothing():
    lst = LinkedList([1])
    lst.iterate(None)
    assert list(lst) == [1]


def test_map_builds_new_list():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda x: x * 10)
    assert list(mapped) == [x * 10 for x in original]
    assert list(original) == [1, 2, 3]
    assert mapped.head is not original.head


def test_map_of_empty_list_is_empty():
    assert len(LinkedList().map(str)) == 0


def test_map_failure_deletes_made_contents():
    deleted = []

    def func(x):
        if x == 3:
            raise ValueError("bad")
        return x + 100

    with pytest.raises(ValueError):
        LinkedList([1, 2, 3, 4]).map(func, deleted.append)
    assert deleted == [101, 102]


def test_map_needs_function():
    with pytest.raises(TypeError):
        LinkedList([1]).map(None)