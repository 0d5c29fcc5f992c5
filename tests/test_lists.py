import pytest

from pushswap.lists import LinkedList, Node


def test_init_keeps_order():
    items = ["a", "b", "c"]
    assert list(LinkedList(items)) == items


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_add_front_prepends():
    lst = LinkedList(["a"])
    node = lst.add_front("b")
    assert lst.head is node
    assert list(lst) == ["b", "a"]


def test_add_back_appends():
    lst = LinkedList(["a"])
    node = lst.add_back("b")
    assert lst.last() is node
    assert list(lst) == ["a", "b"]


def test_add_back_on_empty_sets_head():
    lst = LinkedList()
    node = lst.add_back(1)
    assert lst.head is node
    assert lst.last() is node


def test_last_returns_final_node():
    lst = LinkedList([1, 2, 3])
    tail = lst.last()
    assert isinstance(tail, Node)
    assert tail.content == 3
    assert tail.next is None


def test_len_counts_nodes():
    lst = LinkedList(range(7))
    assert len(lst) == len(range(7))
    lst.add_front(-1)
    assert len(lst) == len(range(7)) + 1


def test_for_each_visits_in_order():
    seen = []
    items = [3, 1, 2]
    LinkedList(items).for_each(seen.append)
    assert seen == items


def test_map_builds_new_list():
    original = LinkedList([1, 2, 3])
    mapped = original.map(str)
    assert list(mapped) == ["1", "2", "3"]
    assert list(original) == [1, 2, 3]
    assert mapped.head is not original.head


def test_map_failure_deletes_produced_contents():
    deleted = []
    lst = LinkedList([1, 2, 3])

    def half_or_none(value):
        return None if value == 3 else value * 10

    with pytest.raises(ValueError):
        lst.map(half_or_none, deleted.append)
    assert deleted == [half_or_none(1), half_or_none(2)]


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str)) == 0


def test_clear_calls_delete_for_each():
    deleted = []
    lst = LinkedList(["x", "y"])
    lst.clear(deleted.append)
    assert deleted == ["x", "y"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []