"""Word buffers and scratch stacks for arbitrary-precision arithmetic."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF


class BigBuffer:
    """Little-endian sequence of unsigned 32-bit words seen through a base offset.

    Index 0 is the word at ``offset`` in the underlying storage. Reading past
    the used words yields zero; writing past them grows the buffer with zeros.
    """

    __slots__ = ("_data", "offset")

    def __init__(self, words=()) -> None:
        self._data: list[int] = [word & _MASK32 for word in words]
        self.offset = 0

    def __repr__(self) -> str:
        return f"BigBuffer({self.words()!r}, offset={self.offset})"

    @staticmethod
    def _check_index(index: int) -> None:
        if index < 0:
            raise IndexError("big buffer index must not be negative")

    def __getitem__(self, index: int) -> int:
        self._check_index(index)
        if self.is_used(index):
            return self._data[self.offset + index]
        return 0

    def __setitem__(self, index: int, value: int) -> None:
        self._check_index(index)
        self.grow_to_fit(index)
        self._data[self.offset + index] = value & _MASK32

    def __len__(self) -> int:
        return max(0, len(self._data) - self.offset)

    def clear(self) -> None:
        """Drop every word at or above the offset."""
        self.set_count(0)

    def copy_from(self, other: BigBuffer) -> None:
        """Make this buffer an independent copy of ``other``, offset included."""
        self._data = list(other._data)
        self.offset = other.offset

    def grow_to_fit(self, index: int) -> None:
        """Grow with zero words so that ``index`` is in use."""
        needed = self.offset + index + 1
        if needed > len(self._data):
            self._data.extend([0] * (needed - len(self._data)))

    def is_used(self, index: int) -> bool:
        return index + self.offset < len(self._data)

    def set_count(self, count: int) -> None:
        """Truncate, or extend with zeros, to ``count`` words above the offset."""
        target = self.offset + count
        if target < len(self._data):
            del self._data[target:]
        else:
            self._data.extend([0] * (target - len(self._data)))

    def set_offset(self, offset: int) -> None:
        """Move the base; the storage is grown to reach at least ``offset`` words."""
        self.offset = offset
        if offset and len(self._data) < offset:
            self._data.extend([0] * (offset - len(self._data)))

    def trim(self) -> None:
        """Remove high zero words."""
        while len(self) and self._data[-1] == 0:
            self._data.pop()

    def words(self) -> list[int]:
        """The used words above the offset, least significant first."""
        return list(self._data[self.offset:])


class BigStack:
    """A fixed pool of scratch buffers handed out and returned in stack order."""

    SIZE = 16

    def __init__(self) -> None:
        self._buffers = [BigBuffer() for _ in range(self.SIZE)]
        self.used = 0

    def alloc(self) -> BigBuffer:
        """Take the next scratch buffer; its previous contents are kept."""
        if self.used >= self.SIZE:
            raise OverflowError("big number scratch stack is exhausted")
        buffer = self._buffers[self.used]
        self.used += 1
        return buffer

    def free(self, count: int) -> None:
        """Return the ``count`` most recently taken buffers."""
        if count < 0 or count > self.used:
            raise ValueError(f"cannot free {count} of {self.used} scratch buffers")
        self.used -= count

    def make_distinct(self, orig: BigBuffer, required: bool) -> BigBuffer:
        """A scratch buffer when ``required``, otherwise ``orig`` itself."""
        return self.alloc() if required else orig

    def unmake_distinct(self, orig: BigBuffer, distinct: BigBuffer) -> None:
        """Copy a scratch result back into ``orig`` and release the scratch buffer."""
        if distinct is not orig:
            orig.copy_from(distinct)
            self.free(1)