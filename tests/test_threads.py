import threading

from stormlib.sync import INFINITE, WaitResult
from stormlib.threads import (
    SThread,
    create_thread,
    get_current_thread_id,
    thread_records,
)


def thread_proc(param):
    return 0


def test_get_current_thread_id_is_positive():
    assert get_current_thread_id() > 0


def test_thread_ids_differ_between_threads():
    seen = []
    worker = threading.Thread(target=lambda: seen.append(get_current_thread_id()))
    worker.start()
    worker.join()
    main_id = get_current_thread_id()
    assert main_id == get_current_thread_id()
    assert seen[0] > 0
    assert len({seen[0], main_id}) == 2


def test_sthread_start_creates_new_thread():
    thread = SThread()
    assert thread.start(thread_proc, bytearray(16), "TestThread") is True
    assert thread.wait(INFINITE) == WaitResult.OBJECT_0


def test_sthread_runs_procedure_with_param_and_signals():
    received = []
    release = threading.Event()

    def proc(param):
        release.wait(2)
        received.append(param)

    thread = SThread()
    assert thread.start(proc, "payload") is True
    assert thread.wait(0) == WaitResult.TIMEOUT
    release.set()
    assert thread.wait(2000) == WaitResult.OBJECT_0
    assert received == ["payload"]
    # A finished thread stays signalled.
    assert thread.wait(0) == WaitResult.OBJECT_0


def test_records_start_with_main_and_include_new_thread():
    handle = create_thread(thread_proc, None, None, "TestThread")
    handle.join(2)
    records = thread_records()
    assert records[0].name == "main"
    assert records[-1].name == "TestThread"
    assert records[-1].live is True
    assert records[-1].suspended is False


def test_record_names_are_truncated():
    handle = create_thread(thread_proc, None, None, "AVeryLongThreadNameIndeed")
    handle.join(2)
    assert thread_records()[-1].name == "AVeryLongThread"


def test_record_ids_are_unique_and_increasing():
    create_thread(thread_proc).join(2)
    create_thread(thread_proc).join(2)
    ids = [record.thread_id for record in thread_records()]
    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)