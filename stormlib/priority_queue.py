"""A binary-heap priority queue whose items carry their own heap link."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BasePriority(ABC):
    """The heap link held by a queued item: its queue and its position in it."""

    def __init__(self) -> None:
        self.queue: PriorityQueue | None = None
        self.index = 0

    @abstractmethod
    def compare(self, other: BasePriority) -> bool:
        """True when this link may stay above ``other`` in the heap."""

    def unlink(self) -> None:
        """Remove the item from its queue, if it is in one."""
        queue = self.queue
        if queue is None:
            return

        index = self.index
        self.queue = None
        self.index = 0

        last = queue.top()
        new_count = len(queue) - 1
        queue._resize(new_count)
        if index == new_count:
            return

        high = new_count - 1
        low = (new_count - 2) >> 1
        last_link = queue._link_of(last)

        if index < high and index <= low >> 1:
            while True:
                child = 2 * index + 1
                if child < high and queue.link(child + 1).compare(queue.link(child)):
                    child += 1
                if last_link.compare(queue.link(child)):
                    break
                queue._place(index, queue._items[child])
                index = child
                if child > low:
                    break

        queue._place(index, last)

    def relink(self) -> None:
        """Move the item up to its place after its priority has risen."""
        queue = self.queue
        if queue is None:
            return
        item = queue._items[self.index]
        self.unlink()
        queue.enqueue(item)


class TimerPriority(BasePriority):
    """A priority ordered by ``value``, smallest first."""

    def __init__(self, value: Any = 0) -> None:
        super().__init__()
        self.value = value

    def __repr__(self) -> str:
        return f"TimerPriority({self.value!r})"

    def compare(self, other: BasePriority) -> bool:
        return self.value - other.value <= 0


class PriorityQueue:
    """A heap of items, each holding a :class:`BasePriority` in attribute ``link_attr``."""

    def __init__(self, link_attr: str) -> None:
        self.link_attr = link_attr
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int):
        if not 0 <= index < len(self._items):
            raise IndexError(f"queue index {index} out of range")
        return self._items[index]

    def _link_of(self, item) -> BasePriority:
        return getattr(item, self.link_attr)

    def _resize(self, count: int) -> None:
        if count < len(self._items):
            del self._items[count:]
        else:
            self._items.extend([None] * (count - len(self._items)))

    def _place(self, index: int, item) -> None:
        self._items[index] = item
        link = self._link_of(item)
        link.index = index
        link.queue = self

    def link(self, index: int) -> BasePriority:
        """The heap link of the item at ``index``."""
        return self._link_of(self[index])

    def enqueue(self, item) -> None:
        """Add ``item`` to the queue."""
        item_link = self._link_of(item)
        pos = len(self._items)
        self._resize(pos + 1)
        while pos:
            parent = (pos - 1) >> 1
            if self.link(parent).compare(item_link):
                break
            self._place(pos, self._items[parent])
            pos = parent
        self._place(pos, item)

    def dequeue(self):
        """Remove and return the first item, or None when the queue is empty."""
        if not self._items:
            return None
        first = self._items[0]
        self.remove(0)
        return first

    def remove(self, index: int) -> None:
        """Remove the item at ``index``."""
        self.link(index).unlink()

    def top(self):
        """The item in the last heap slot, or None when the queue is empty."""
        return self._items[-1] if self._items else None