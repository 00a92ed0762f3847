import pytest

from xpmkit.linked import LinkedList, Node


def test_init_keeps_order():
    items = ["a", "b", "c"]
    assert list(LinkedList(items)) == items


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_push_front_prepends():
    lst = LinkedList([2, 3])
    node = lst.push_front(1)
    assert list(lst) == [1, 2, 3]
    assert lst.head is node


def test_push_back_appends():
    lst = LinkedList()
    lst.push_back("x")
    node = lst.push_back("y")
    assert list(lst) == ["x", "y"]
    assert lst.last() is node


def test_last_returns_tail_node():
    lst = LinkedList([1, 2, 3])
    tail = lst.last()
    assert isinstance(tail, Node)
    assert tail.value == 3
    assert tail.next is None


def test_len_counts_nodes():
    items = list(range(7))
    lst = LinkedList(items)
    assert len(lst) == len(items)


def test_clear_deletes_from_last_to_first():
    items = [1, 2, 3]
    lst = LinkedList(items)
    deleted = []
    lst.clear(deleted.append)
    assert deleted == items[::-1]
    assert len(lst) == 0


def test_clear_without_delete_empties():
    lst = LinkedList("abc")
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_in_order():
    items = ["p", "q", "r"]
    seen = []
    LinkedList(items).for_each(seen.append)
    assert seen == items


def test_map_builds_new_list():
    items = ["a", "bb", "ccc"]
    lst = LinkedList(items)
    mapped = lst.map(str.upper)
    assert list(mapped) == [item.upper() for item in items]
    assert list(lst) == items
    assert mapped is not lst and len(mapped) == len(lst)


def test_map_failure_deletes_produced_values():
    deleted = []

    def func(value):
        if value == 3:
            raise RuntimeError("stop")
        return value

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(func, deleted.append)
    assert deleted == [2, 1]


def test_map_of_empty_is_empty():
    assert list(LinkedList().map(str)) == []