import pytest

from dsprimer.circular_list import CircularDoublyList, CircularSinglyList


def _fill(lst, values):
    tail = lst.head
    nodes = []
    for value in values:
        tail = lst.insert_after(tail, value)
        nodes.append(tail)
    return nodes


def test_singly_empty_ring_points_to_itself():
    lst = CircularSinglyList()
    assert lst.is_empty()
    assert lst.head.next is lst.head
    assert lst.is_tail(lst.head)
    assert list(lst) == []


def test_singly_insert_and_iterate():
    lst = CircularSinglyList()
    nodes = _fill(lst, [1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert not lst.is_empty()
    assert lst.is_tail(nodes[-1])
    assert not lst.is_tail(nodes[0])
    assert nodes[-1].next is lst.head


def test_singly_insert_missing_node_rejected():
    lst = CircularSinglyList()
    with pytest.raises(ValueError):
        lst.insert_after(None, 1)


def test_doubly_empty_ring():
    lst = CircularDoublyList()
    assert lst.is_empty()
    assert lst.head.next is lst.head
    assert lst.head.prior is lst.head
    assert list(lst) == []


def test_doubly_links_are_consistent():
    lst = CircularDoublyList()
    nodes = _fill(lst, ["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert lst.head.prior is nodes[-1]
    assert lst.is_tail(nodes[-1])
    node = lst.head
    for _ in range(4):
        assert node.next.prior is node
        node = node.next
    assert node is lst.head


def test_doubly_delete_after():
    lst = CircularDoublyList()
    nodes = _fill(lst, ["a", "b", "c"])
    assert lst.delete_after(nodes[0]) == "b"
    assert list(lst) == ["a", "c"]
    assert nodes[2].prior is nodes[0]


def test_doubly_delete_from_empty_rejected():
    lst = CircularDoublyList()
    with pytest.raises(IndexError):
        lst.delete_after(lst.head)


def test_doubly_delete_after_tail_rejected():
    lst = CircularDoublyList()
    nodes = _fill(lst, ["a"])
    with pytest.raises(IndexError):
        lst.delete_after(nodes[0])
    assert list(lst) == ["a"]


def test_doubly_delete_all_restores_empty():
    lst = CircularDoublyList()
    _fill(lst, range(4))
    removed = [lst.delete_after(lst.head) for _ in range(4)]
    assert removed == [0, 1, 2, 3]
    assert lst.is_empty()