import pytest
from hypothesis import given, strategies as st

from libft.linkedlist import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.head is None
    assert lst.last() is None
    assert list(lst) == []


def test_init_keeps_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_prepends():
    lst = LinkedList([2, 3])
    node = lst.push_front(1)
    assert lst.head is node
    assert node.next.content == 2
    assert list(lst) == [1, 2, 3]


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.push_front("x")
    assert lst.last() is node
    assert lst.head is node


def test_push_back_appends():
    lst = LinkedList([1])
    node = lst.push_back(2)
    assert lst.last() is node
    assert node.next is None
    assert list(lst) == [1, 2]


def test_push_back_after_push_front():
    lst = LinkedList()
    lst.push_front("b")
    lst.push_front("a")
    lst.push_back("c")
    assert list(lst) == ["a", "b", "c"]
    assert lst.last().content == "c"


def test_node_defaults():
    node = Node("content")
    assert node.content == "content"
    assert node.next is None


def test_iter_applies_function_in_order():
    seen = []
    LinkedList([1, 2, 3]).iter(seen.append)
    assert seen == [1, 2, 3]


def test_clear_calls_delete_and_empties():
    deleted = []
    lst = LinkedList(["a", "b"])
    lst.clear(deleted.append)
    assert deleted == ["a", "b"]
    assert len(lst) == 0
    assert lst.head is None
    assert lst.last() is None


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_list_usable_after_clear():
    lst = LinkedList([1, 2])
    lst.clear()
    lst.push_back(3)
    assert list(lst) == [3]


def test_map_returns_new_list():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda x: x * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]
    assert mapped.head is not original.head


def test_map_empty():
    assert list(LinkedList().map(str)) == []


def test_map_failure_deletes_partial_results():
    deleted = []

    def convert(x):
        if x == 3:
            raise ValueError("bad item")
        return x * 2

    original = LinkedList([1, 2, 3, 4])
    with pytest.raises(ValueError):
        original.map(convert, deleted.append)
    assert deleted == [2, 4]
    assert list(original) == [1, 2, 3, 4]


@given(st.lists(st.integers()))
def test_len_and_iteration_match_input(items):
    lst = LinkedList(items)
    assert len(lst) == len(items)
    assert list(lst) == items
    if items:
        assert lst.last().content == items[-1]
        assert lst.head.content == items[0]