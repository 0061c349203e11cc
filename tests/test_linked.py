import pytest

from cubcaster.linked import LinkedList, Node


def test_build_and_iterate():
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_push_front_and_back():
    lst = LinkedList()
    lst.push_back(2)
    lst.push_front(1)
    node = lst.push_back(3)
    assert list(lst) == [1, 2, 3]
    assert lst.last() is node
    assert isinstance(node, Node) and node.next is None


def test_last_content():
    lst = LinkedList(["x", "y"])
    assert lst.last().content == "y"


def test_clear_calls_delete_in_order():
    seen = []
    lst = LinkedList([1, 2, 3])
    lst.clear(seen.append)
    assert seen == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_for_each_visits_all():
    seen = []
    LinkedList("abc").for_each(seen.append)
    assert seen == ["a", "b", "c"]


def test_map_returns_new_list():
    lst = LinkedList([1, 2, 3])
    mapped = lst.map(str, None)
    assert list(mapped) == ["1", "2", "3"]
    assert list(lst) == [1, 2, 3]


def test_map_of_empty():
    assert len(LinkedList().map(str, None)) == 0


def test_map_failure_deletes_partial_results():
    deleted = []

    def f(x):
        if x == 3:
            raise RuntimeError("boom")
        return x * 10

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(f, deleted.append)
    assert deleted == [10, 20]


@pytest.mark.parametrize("items", [[], [1], [1, 2], list("abcde")])
def test_reverse(items):
    lst = LinkedList(items)
    lst.reverse()
    assert list(lst) == items[::-1]
    lst.reverse()
    assert list(lst) == items