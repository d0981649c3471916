"""Waitable synchronisation objects: events, semaphores, critical sections and reader-writer locks."""

from __future__ import annotations

import threading
import time
from enum import IntEnum

INFINITE = 0xFFFFFFFF
"""Timeout that waits without limit."""


class WaitResult(IntEnum):
    """Outcome of :meth:`SyncObject.wait`."""

    OBJECT_0 = 0x00000000
    TIMEOUT = 0x00000102
    FAILED = 0xFFFFFFFF


class _Kind(IntEnum):
    MANUAL_EVENT = 1
    AUTO_EVENT = 2
    SIGNALED = 3
    SEMAPHORE = 4
    THREAD = 5
    INVALID = 6


class SyncObject:
    """An object a thread can wait on until it is signalled.

    A bare sync object is not valid; waiting on it fails.
    """

    def __init__(self) -> None:
        self._kind = _Kind.INVALID
        self._value = 0
        self._maximum = 0
        self._cond = threading.Condition(threading.Lock())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self._kind.name}, value={self._value})"

    def _set_state(self, kind: _Kind, value: int) -> None:
        with self._cond:
            self._kind = kind
            self._value = value

    def _signal(self, value: int = 1, wake_all: bool = False) -> None:
        with self._cond:
            self._value = value
            if wake_all:
                self._cond.notify_all()
            else:
                self._cond.notify()

    def close(self) -> None:
        """Release the object; later waits fail."""
        with self._cond:
            self._kind = _Kind.INVALID
            self._cond.notify_all()

    def valid(self) -> bool:
        return self._kind != _Kind.INVALID

    def wait(self, timeout_ms: int = INFINITE) -> WaitResult:
        """Wait up to ``timeout_ms`` milliseconds (or forever with :data:`INFINITE`)."""
        if timeout_ms < 0:
            raise ValueError("timeout must not be negative")
        if self._kind == _Kind.INVALID:
            return WaitResult.FAILED

        if timeout_ms == INFINITE:
            deadline = None
            self._cond.acquire()
        else:
            deadline = time.monotonic() + timeout_ms / 1000
            acquired = (
                self._cond.acquire(blocking=False)
                if timeout_ms == 0
                else self._cond.acquire(timeout=timeout_ms / 1000)
            )
            if not acquired:
                return WaitResult.TIMEOUT

        try:
            if self._kind == _Kind.SIGNALED:
                return WaitResult.OBJECT_0

            remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
            ready = self._cond.wait_for(
                lambda: self._value or self._kind == _Kind.INVALID, remaining
            )
            if self._kind == _Kind.INVALID:
                return WaitResult.FAILED
            if not ready:
                return WaitResult.TIMEOUT

            if self._kind == _Kind.AUTO_EVENT:
                self._value = 0
            elif self._kind == _Kind.SEMAPHORE:
                self._value -= 1
            return WaitResult.OBJECT_0
        finally:
            self._cond.release()


class Event(SyncObject):
    """An event that stays set until reset (manual) or until one wait succeeds (automatic)."""

    def __init__(self, manual_reset: bool = False, initial_value: bool = False) -> None:
        super().__init__()
        self._manual = bool(manual_reset)
        self._kind = _Kind.MANUAL_EVENT if self._manual else _Kind.AUTO_EVENT
        self._value = 1 if initial_value else 0

    def reset(self) -> bool:
        """Clear the event."""
        with self._cond:
            self._value = 0
        return True

    def set(self) -> bool:
        """Set the event and wake waiters."""
        self._signal(1, wake_all=self._manual)
        return True


class Semaphore(SyncObject):
    """A counting semaphore with an upper limit."""

    def __init__(self, initial_count: int = 0, maximum_count: int = 1) -> None:
        super().__init__()
        if initial_count < 0 or maximum_count < 0:
            raise ValueError("semaphore counts must not be negative")
        self._kind = _Kind.SEMAPHORE
        self._value = initial_count
        self._maximum = maximum_count

    def signal(self, count: int = 1) -> bool:
        """Raise the count by ``count``; False when that would pass the maximum."""
        if count < 0:
            raise ValueError("count must not be negative")
        with self._cond:
            if self._value + count > self._maximum:
                return False
            self._value += count
            if count <= 1:
                self._cond.notify()
            else:
                self._cond.notify_all()
        return True


class CritSect:
    """A recursive mutual-exclusion lock."""

    def __init__(self) -> None:
        self._lock = threading.RLock()

    def enter(self) -> None:
        self._lock.acquire()

    def leave(self) -> None:
        """Release one level of ownership; raises RuntimeError when not held."""
        self._lock.release()

    def __enter__(self) -> CritSect:
        self.enter()
        return self

    def __exit__(self, *exc) -> None:
        self.leave()


class RWLock:
    """A lock shared by many readers or held by one writer."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._readers = 0
        self._writer = False

    def enter(self, forwriting: bool = False) -> None:
        with self._cond:
            if forwriting:
                self._cond.wait_for(lambda: not self._writer and not self._readers)
                self._writer = True
            else:
                self._cond.wait_for(lambda: not self._writer)
                self._readers += 1

    def leave(self, fromwriting: bool = False) -> None:
        """Release a hold taken by :meth:`enter` with the same mode."""
        with self._cond:
            if fromwriting:
                if not self._writer:
                    raise RuntimeError("lock is not held for writing")
                self._writer = False
            else:
                if not self._readers:
                    raise RuntimeError("lock is not held for reading")
                self._readers -= 1
            self._cond.notify_all()