"""Hash tables of intrusively linked objects keyed by strings or references."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from .linked_list import AFTER, Link, LinkedList
from .strings import str_cmp, str_cmp_i, str_hash_ht, str_lower

_MASK = 0xFFFFFFFF
_SLOT_ATTR = "link_to_slot"
_FULL_ATTR = "link_to_full"


class HashKeyNone:
    """A key with no data; any two such keys match."""

    def __init__(self, value: Any = None) -> None:
        pass

    def __repr__(self) -> str:
        return "HashKeyNone()"

    def __eq__(self, other):
        if isinstance(other, HashKeyNone):
            return True
        return NotImplemented

    def __hash__(self) -> int:
        return 0


class HashKeyPtr:
    """A key that matches the very same object."""

    def __init__(self, key: Any = None) -> None:
        self.key = key

    def __repr__(self) -> str:
        return f"HashKeyPtr({self.key!r})"

    def __eq__(self, other) -> bool:
        target = other.key if isinstance(other, HashKeyPtr) else other
        return self.key is target

    def __hash__(self) -> int:
        return id(self.key)


class HashKeyStr:
    """A case-sensitive string key."""

    def __init__(self, value: str | None = None) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    @staticmethod
    def _compare(a: str, b: str) -> int:
        return str_cmp(a, b)

    def __eq__(self, other):
        if isinstance(other, HashKeyStr):
            value = other.value
        elif isinstance(other, str) or other is None:
            value = other
        else:
            return NotImplemented
        if self.value is None or value is None:
            return self.value is value
        return self._compare(self.value, value) == 0

    def __hash__(self) -> int:
        return hash(self.value)


class HashKeyStrI(HashKeyStr):
    """A string key compared without regard to ASCII letter case."""

    @staticmethod
    def _compare(a: str, b: str) -> int:
        return str_cmp_i(a, b)

    def __hash__(self) -> int:
        return hash(None if self.value is None else str_lower(self.value))


class HashObject:
    """An entry of a :class:`HashTable`: its hash value, key and two list links."""

    def __init__(self) -> None:
        self.hashval = 0
        self.link_to_slot = Link(self)
        self.link_to_full = Link(self)
        self.key: Any = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r}, hashval={self.hashval:#010x})"


class HashTable:
    """Objects made by ``factory`` kept in hash slots and in insertion order."""

    def __init__(
        self,
        factory: Callable[[], Any] = HashObject,
        key_type: type = HashKeyStrI,
    ) -> None:
        self.factory = factory
        self.key_type = key_type
        self._full = LinkedList(_FULL_ATTR)
        self._slots: list[LinkedList] = []
        self._slotmask = -1

    def __iter__(self) -> Iterator[Any]:
        return iter(self._full)

    def _initialize(self) -> None:
        self._slotmask = 3
        self._slots = [LinkedList(_SLOT_ATTR) for _ in range(4)]

    def _slot_list(self, hashval: int) -> LinkedList:
        if not self.initialized():
            self._initialize()
        return self._slots[self.compute_slot(hashval)]

    def _make_key(self, key):
        return key if isinstance(key, self.key_type) else self.key_type(key)

    @staticmethod
    def _hash_for(key) -> int:
        if isinstance(key, HashKeyStr):
            key = key.value
        if isinstance(key, (str, bytes)):
            return str_hash_ht(key)
        raise TypeError("a hash value is required for keys that are not strings")

    def clear(self) -> None:
        """Remove every object from the table."""
        self._full.unlink_all()
        for slot in self._slots:
            slot.unlink_all()

    def compute_slot(self, hashval: int) -> int:
        return hashval & self._slotmask

    def head(self):
        """The first object in insertion order, or None when the table is empty."""
        return self._full.head()

    def initialized(self) -> bool:
        return self._slotmask != -1

    def insert(self, obj, hashval: int, key) -> None:
        """Add an existing object under ``hashval`` and ``key``."""
        hashval &= _MASK
        self._slot_list(hashval).link_to_tail(obj)
        self._full.link_to_tail(obj)
        obj.hashval = hashval
        obj.key = self._make_key(key)

    def new(self, key, hashval: int | None = None):
        """Make, add and return a new object for ``key``.

        The hash value defaults to the string hash of ``key``.
        """
        if hashval is None:
            hashval = self._hash_for(key)
        hashval &= _MASK
        obj = self._slot_list(hashval).new_node(self.factory, AFTER)
        self._full.link_to_tail(obj)
        obj.hashval = hashval
        obj.key = self._make_key(key)
        return obj

    def next(self, obj):
        """The object added after ``obj``, or None."""
        return self._full.next(obj)

    def ptr(self, key, hashval: int | None = None):
        """The object stored for ``key``, or None."""
        if not self.initialized():
            return None
        if hashval is None:
            hashval = self._hash_for(key)
        hashval &= _MASK
        for obj in self._slots[self.compute_slot(hashval)]:
            if obj.hashval == hashval and obj.key == key:
                return obj
        return None

    def unlink(self, obj) -> None:
        """Take ``obj`` out of the table."""
        if obj.link_to_slot.is_linked():
            obj.link_to_slot.unlink()
            obj.link_to_full.unlink()