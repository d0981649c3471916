import pytest

from stormlib.linked_list import AFTER, BEFORE, Link, LinkedList, LinkedNode


class Node(LinkedNode):
    def __init__(self, index=0):
        super().__init__()
        self.index = index


class Dual:
    def __init__(self, index=0):
        self.index = index
        self.first = Link(self)
        self.second = Link(self)


def test_constructs_empty():
    lst = LinkedList()
    assert lst.head() is None


def test_tail_of_empty_list_is_none():
    assert LinkedList().tail() is None


def test_link_to_head_single():
    lst = LinkedList()
    node = Node()
    lst.link_to_head(node)
    assert lst.head() is node


def test_link_multiple_to_head():
    lst = LinkedList()
    node1, node2 = Node(1), Node(2)
    lst.link_to_head(node1)
    lst.link_to_head(node2)
    assert lst.head() is node2
    assert lst.tail() is node1


def test_link_to_head_after_tail():
    lst = LinkedList()
    node1, node2 = Node(1), Node(2)
    lst.link_to_tail(node1)
    lst.link_to_head(node2)
    assert lst.head() is node2
    assert lst.tail() is node1


def test_link_to_tail_single():
    lst = LinkedList()
    node = Node()
    lst.link_to_tail(node)
    assert lst.tail() is node


def test_link_multiple_to_tail():
    lst = LinkedList()
    node1, node2 = Node(1), Node(2)
    lst.link_to_tail(node1)
    lst.link_to_tail(node2)
    assert lst.head() is node1
    assert lst.tail() is node2


def test_link_to_tail_after_head():
    lst = LinkedList()
    node1, node2 = Node(1), Node(2)
    lst.link_to_head(node1)
    lst.link_to_tail(node2)
    assert lst.head() is node1
    assert lst.tail() is node2


def test_iteration_order():
    lst = LinkedList()
    nodes = [Node(i) for i in range(4)]
    for node in nodes:
        lst.link_to_tail(node)
    assert [n.index for n in lst] == [0, 1, 2, 3]


def test_link_node_relative_to_existing():
    lst = LinkedList()
    a, b, c = Node(1), Node(2), Node(3)
    lst.link_to_tail(a)
    lst.link_to_tail(c)
    lst.link_node(b, AFTER, a)
    assert [n.index for n in lst] == [1, 2, 3]
    d = Node(4)
    lst.link_node(d, BEFORE, a)
    assert [n.index for n in lst] == [4, 1, 2, 3]


def test_relinking_moves_node():
    lst = LinkedList()
    a, b = Node(1), Node(2)
    lst.link_to_tail(a)
    lst.link_to_tail(b)
    lst.link_to_tail(a)
    assert [n.index for n in lst] == [2, 1]


def test_invalid_link_type():
    lst = LinkedList()
    with pytest.raises(ValueError):
        lst.link_node(Node(), 3, None)


def test_node_navigation_and_unlink():
    lst = LinkedList()
    a, b, c = Node(1), Node(2), Node(3)
    for node in (a, b, c):
        lst.link_to_tail(node)
    assert b.next() is c
    assert b.prev() is a
    assert a.prev() is None
    assert c.next() is None
    b.unlink()
    assert [n.index for n in lst] == [1, 3]
    assert not lst.is_linked(b)
    assert a.next() is c


def test_next_of_none_is_head():
    lst = LinkedList()
    a = Node(1)
    lst.link_to_tail(a)
    assert lst.next(None) is a
    assert lst.next(a) is None


def test_delete_node_returns_following():
    lst = LinkedList()
    a, b = Node(1), Node(2)
    lst.link_to_tail(a)
    lst.link_to_tail(b)
    assert lst.delete_node(a) is b
    assert lst.head() is b


def test_delete_all_and_unlink_all():
    lst = LinkedList()
    nodes = [Node(i) for i in range(3)]
    for node in nodes:
        lst.link_to_tail(node)
    lst.delete_all()
    assert lst.head() is None
    assert all(not lst.is_linked(n) for n in nodes)

    for node in nodes:
        lst.link_to_tail(node)
    lst.unlink_all()
    assert list(lst) == []


def test_new_node_linked_at_location():
    lst = LinkedList()
    first = lst.new_node(Node, BEFORE)
    second = lst.new_node(Node, AFTER)
    loose = lst.new_node(Node)
    assert lst.head() is second
    assert lst.tail() is first
    assert not lst.is_linked(loose)


def test_explicit_link_attributes_are_independent():
    one = LinkedList("first")
    two = LinkedList("second")
    x, y = Dual(1), Dual(2)
    one.link_to_tail(x)
    one.link_to_tail(y)
    two.link_to_head(x)
    two.link_to_head(y)
    assert [n.index for n in one] == [1, 2]
    assert [n.index for n in two] == [2, 1]


def test_change_link_attr_empties_list():
    lst = LinkedList("first")
    x = Dual(1)
    lst.link_to_tail(x)
    lst.change_link_attr("second")
    assert lst.head() is None
    assert not x.first.is_linked()
    lst.link_to_tail(x)
    assert x.second.is_linked()
    assert lst.head() is x