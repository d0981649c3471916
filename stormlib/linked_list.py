"""Intrusive doubly linked lists whose nodes carry their own links."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

AFTER = 1
"""Link a node after the existing node (or at the head when there is none)."""

BEFORE = 2
"""Link a node before the existing node (or at the tail when there is none)."""


class Link:
    """One node's place in a list: the links before and after it.

    ``owner`` is the node the link belongs to; a list's terminator has none.
    """

    __slots__ = ("owner", "_prev", "_next")

    def __init__(self, owner: Any = None) -> None:
        self.owner = owner
        self._prev: Link | None = None
        self._next: Link | None = None

    def __repr__(self) -> str:
        return f"Link(owner={self.owner!r}, linked={self.is_linked()})"

    def is_linked(self) -> bool:
        return self._next is not None

    def next(self):
        """The node after this one, or None at the end of the list."""
        nxt = self._next
        return None if nxt is None else nxt.owner

    def prev(self):
        """The node before this one, or None at the start of the list."""
        prv = self._prev
        return None if prv is None else prv.owner

    def unlink(self) -> None:
        """Take this link out of its list, if it is in one."""
        if self._prev is not None:
            self._next._prev = self._prev
            self._prev._next = self._next
            self._prev = None
            self._next = None


class LinkedNode:
    """A node holding a single link in attribute ``link``."""

    def __init__(self) -> None:
        self.link = Link(self)

    def next(self):
        return self.link.next()

    def prev(self):
        return self.link.prev()

    def unlink(self) -> None:
        self.link.unlink()


class LinkedList:
    """A list of nodes linked through the :class:`Link` in attribute ``link_attr``."""

    def __init__(self, link_attr: str = "link") -> None:
        self.link_attr = link_attr
        self._terminator = Link()
        self._reset()

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _reset(self) -> None:
        self._terminator._prev = self._terminator
        self._terminator._next = self._terminator

    def _link(self, node) -> Link:
        if node is None:
            return self._terminator
        return getattr(node, self.link_attr)

    def __iter__(self) -> Iterator[Any]:
        node = self.head()
        while node is not None:
            following = self.next(node)
            yield node
            node = following

    def change_link_attr(self, link_attr: str) -> None:
        """Link nodes through another attribute; the list is emptied first."""
        if link_attr != self.link_attr:
            self.unlink_all()
            self.link_attr = link_attr
            self._reset()

    def delete_all(self) -> None:
        """Remove every node from the list."""
        while (node := self.head()) is not None:
            self.delete_node(node)

    def delete_node(self, node):
        """Remove ``node`` from the list and return the node that followed it."""
        following = self.next(node)
        self._link(node).unlink()
        return following

    def head(self):
        """The first node, or None when the list is empty."""
        return self._terminator.next()

    def is_linked(self, node) -> bool:
        return self._link(node).is_linked()

    def link_node(self, node, linktype: int, existing=None) -> None:
        """Link ``node`` after (:data:`AFTER`) or before (:data:`BEFORE`) ``existing``.

        With no ``existing`` node, AFTER links at the head and BEFORE at the tail.
        """
        if linktype not in (AFTER, BEFORE):
            raise ValueError(f"unknown link type {linktype!r}")

        link = self._link(node)
        if link._prev is not None:
            link.unlink()

        anchor = self._link(existing)
        if linktype == AFTER:
            link._prev = anchor
            link._next = anchor._next
            anchor._next._prev = link
            anchor._next = link
        else:
            before = anchor._prev
            link._prev = before
            link._next = anchor
            before._next = link
            anchor._prev = link

    def link_to_head(self, node) -> None:
        self.link_node(node, AFTER, None)

    def link_to_tail(self, node) -> None:
        self.link_node(node, BEFORE, None)

    def new_node(self, factory: Callable[[], Any], location: int = 0):
        """Make a node with ``factory`` and link it at ``location``; 0 leaves it unlinked."""
        node = factory()
        if location:
            self.link_node(node, location, None)
        return node

    def next(self, node):
        """The node after ``node``; after None, the head."""
        return self._link(node).next()

    def tail(self):
        """The last node, or None when the list is empty."""
        return self._terminator.prev()

    def unlink_all(self) -> None:
        while (node := self.head()) is not None:
            self.unlink_node(node)

    def unlink_node(self, node) -> None:
        self._link(node).unlink()