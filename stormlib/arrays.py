"""Bounds-checked arrays of fixed and growable size."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any


class FixedArray:
    """An array whose elements are made by ``factory`` when it is resized."""

    def __init__(self, factory: Callable[[], Any] = int) -> None:
        self.factory = factory
        self._items: list[Any] = []
        self.alloc = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def _check_bounds(self, index: int) -> None:
        count = len(self._items)
        if not 0 <= index < count:
            raise IndexError(
                f"index (0x{index & 0xFFFFFFFF:08X}), array size (0x{count:08X})"
            )

    def __getitem__(self, index: int):
        self._check_bounds(index)
        return self._items[index]

    def __setitem__(self, index: int, value) -> None:
        self._check_bounds(index)
        self._items[index] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def mem_file_name(self) -> str:
        """Name of the element type, used to label the array's storage."""
        name = getattr(self.factory, "__qualname__", None)
        return name or type(self.factory).__name__

    def mem_line_no(self) -> int:
        return -2

    def clear(self) -> None:
        """Drop every element and release the storage."""
        self._items.clear()
        self.alloc = 0

    def set(self, items: Iterable[Any]) -> None:
        """Replace the contents with ``items``."""
        self._items = list(items)
        self.alloc = len(self._items)

    def _realloc_data(self, count: int) -> None:
        del self._items[count:]
        self.alloc = count

    def set_count(self, count: int) -> None:
        """Resize to ``count`` elements, making new ones with the factory."""
        if count < 0:
            raise ValueError("count must not be negative")
        if count == len(self._items):
            return
        if not count:
            self.clear()
            return
        self._realloc_data(count)
        self._items.extend(self.factory() for _ in range(count - len(self._items)))

    def top(self):
        """The last element, or None when the array is empty."""
        return self._items[-1] if self._items else None


class GrowableArray(FixedArray):
    """A fixed array that reserves storage in chunks as it grows."""

    # Elements are references, so a 256-byte chunk holds this many of them.
    _MAX_CHUNK = 32
    chunk = 0

    def add(self, items: Iterable[Any]) -> int:
        """Append ``items`` and return the index of the first of them."""
        new = list(items)
        self.reserve(len(new), True)
        self._items.extend(new)
        return len(self._items) - len(new)

    def calc_chunk_size(self, count: int) -> int:
        """Chunk to grow by for ``count`` elements: the highest power of two not above it."""
        if count >= self._MAX_CHUNK:
            self.chunk = self._MAX_CHUNK
            return self._MAX_CHUNK
        if count < 1:
            return 1
        return 1 << (count.bit_length() - 1)

    def grow_to_fit(self, index: int, zero: bool) -> None:
        """Extend so that ``index`` is valid; new slots are made by the factory when ``zero``."""
        count = len(self._items)
        if index < count:
            return
        extra = index - count + 1
        self.reserve(extra, True)
        if zero:
            self._items.extend(self.factory() for _ in range(extra))
        else:
            self._items.extend([None] * extra)

    def new(self):
        """Append a new element made by the factory and return it."""
        self.reserve(1, True)
        element = self.factory()
        self._items.append(element)
        return element

    def reserve(self, count: int, round: bool) -> None:
        """Make room for ``count`` more elements, rounded up to the chunk when ``round``."""
        size = len(self._items)
        if count + size <= self.alloc:
            return
        if round:
            chunk = self.chunk or self.calc_chunk_size(count + size)
            count = self.round_to_chunk(count, chunk)
        self.alloc = count + size

    def round_to_chunk(self, count: int, chunk: int) -> int:
        remainder = count % chunk
        return count + chunk - remainder if remainder else count

    def set_count(self, count: int) -> None:
        """Resize to ``count`` elements without giving back reserved storage."""
        if count < 0:
            raise ValueError("count must not be negative")
        size = len(self._items)
        if count > size:
            self.reserve(count - size, True)
            self._items.extend(self.factory() for _ in range(count - size))
        else:
            del self._items[count:]