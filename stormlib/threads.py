"""Thread creation with completion signalling and a registry of started threads."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .strings import str_copy
from .sync import SyncObject, _Kind

MAX_THREADS = 1024
_NAME_SIZE = 16


@dataclass
class ThreadRecord:
    """Bookkeeping kept for each thread the registry knows of."""

    suspended: bool
    live: bool
    thread_id: int
    name: str


_lock = threading.Lock()
_records: list[ThreadRecord] = []
_next_id = 0


def _take_id() -> int:
    global _next_id
    thread_id = _next_id
    _next_id += 1
    return thread_id


def _launch(thread_proc: Callable[[Any], Any], param: Any, sync_object: SyncObject | None) -> None:
    try:
        thread_proc(param)
    finally:
        if sync_object is not None:
            sync_object._signal(1, wake_all=True)


def create_thread(
    thread_proc: Callable[[Any], Any],
    param: Any = None,
    sync_object: SyncObject | None = None,
    thread_name: str | None = None,
) -> threading.Thread:
    """Start ``thread_proc(param)`` on a new thread and return its handle.

    When ``sync_object`` is given it becomes signalled once the procedure returns.
    """
    name = str_copy(thread_name or "", _NAME_SIZE)

    with _lock:
        if not _records:
            _records.append(ThreadRecord(False, True, _take_id(), "main"))
        if len(_records) >= MAX_THREADS:
            raise RuntimeError(f"no more than {MAX_THREADS} threads can be tracked")

        thread_id = _take_id()
        if sync_object is not None:
            with sync_object._cond:
                sync_object._value = 0

        handle = threading.Thread(
            target=_launch,
            args=(thread_proc, param, sync_object),
            name=name or None,
            daemon=True,
        )
        handle.start()
        _records.append(ThreadRecord(False, True, thread_id, name))

    return handle


class SThread(SyncObject):
    """A thread whose completion can be waited on."""

    def __init__(self) -> None:
        super().__init__()
        self.handle: threading.Thread | None = None

    def start(
        self,
        thread_proc: Callable[[Any], Any],
        param: Any = None,
        thread_name: str | None = None,
    ) -> bool:
        """Run ``thread_proc(param)`` on a new thread; True when it was started."""
        self._set_state(_Kind.THREAD, 0)
        self.handle = create_thread(thread_proc, param, self, thread_name)
        return self.handle is not None


def get_current_thread_id() -> int:
    """Identifier of the calling thread."""
    return threading.get_ident()


def thread_records() -> tuple[ThreadRecord, ...]:
    """Snapshot of the threads registered so far, the main thread first."""
    with _lock:
        return tuple(
            ThreadRecord(r.suspended, r.live, r.thread_id, r.name) for r in _records
        )