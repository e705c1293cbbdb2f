import pytest

from pipex.linked import Content, LinkedList


def _contents(n):
    return [Content(nb=i, index=i, order=i) for i in range(n)]


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_construct_from_items_keeps_order():
    items = _contents(4)
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == 4


def test_push_front_prepends():
    lst = LinkedList()
    for item in ["a", "b", "c"]:
        lst.push_front(item)
    assert list(lst) == ["c", "b", "a"]
    assert lst.head.content == "c"


def test_push_back_appends():
    lst = LinkedList()
    for item in ["a", "b", "c"]:
        lst.push_back(item)
    assert list(lst) == ["a", "b", "c"]
    assert lst.last().content == "c"


def test_last_returns_tail_node():
    lst = LinkedList([1, 2, 3])
    node = lst.push_back(4)
    assert lst.last() is node


@pytest.mark.parametrize("builder", ["front", "back"])
def test_prev_links_mirror_next_links(builder):
    lst = LinkedList()
    for i in range(5):
        if builder == "front":
            lst.push_front(i)
        else:
            lst.push_back(i)
    node = lst.head
    assert node.prev is None
    while node.next is not None:
        assert node.next.prev is node
        node = node.next
    assert node is lst.last()


def test_clear_calls_delete_in_order_and_empties():
    items = _contents(3)
    lst = LinkedList(items)
    deleted = []
    lst.clear(deleted.append)
    assert deleted == items
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_every_content():
    items = _contents(3)
    lst = LinkedList(items)

    def bump(content):
        content.order += 10

    lst.for_each(bump)
    assert [c.order for c in lst] == [c.index + 10 for c in items]


def test_map_builds_new_list_and_keeps_original():
    lst = LinkedList([1, 2, 3])
    mapped = lst.map(lambda x: x * 2)
    assert list(mapped) == [2, 4, 6]
    assert list(lst) == [1, 2, 3]
    assert mapped.head is not lst.head


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str)) == 0


def test_content_defaults_are_zero():
    content = Content()
    assert (content.nb, content.index, content.order) == (0, 0, 0)