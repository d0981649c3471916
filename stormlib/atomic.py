"""A thread-safe signed 32-bit counter."""

from __future__ import annotations

import threading


def _wrap_int32(value: int) -> int:
    return ((value + 0x80000000) & 0xFFFFFFFF) - 0x80000000


class AtomicInt32:
    """A signed 32-bit integer whose increment and decrement are atomic."""

    def __init__(self, value: int = 0) -> None:
        self._value = _wrap_int32(value)
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"AtomicInt32({self.value})"

    @property
    def value(self) -> int:
        return self._value

    def increment(self) -> int:
        """Add one and return the new value."""
        with self._lock:
            self._value = _wrap_int32(self._value + 1)
            return self._value

    def decrement(self) -> int:
        """Subtract one and return the new value."""
        with self._lock:
            self._value = _wrap_int32(self._value - 1)
            return self._value