# stormlib

A library of small building blocks: C-style string helpers, a 32-bit string
hash, single-character UTF-8 coding, arbitrary-precision unsigned integers,
bounds-checked arrays, intrusive lists, hash tables and priority queues, and
thread synchronisation objects. It has no dependencies beyond the standard
library.

## Modules

- `stormlib.bjhash`: `bjhash(data, initval=0)`, Bob Jenkins' 32-bit lookup hash
  of a bytes-like object.
- `stormlib.utf8`: `get_utf8(data)` decodes the first character and returns
  `(code, consumed)`. It gives `END` when a zero byte or the end of input comes
  first and `INVALID` for a malformed sequence. `put_utf8(code)` encodes one
  code point as bytes.
- `stormlib.strings`: `str_chr`, `str_chr_r` and `str_str` return an index or
  `None`. `str_cmp` and `str_cmp_i` compare strings, the second ignoring ASCII
  case. The module also has `str_copy`, `str_pack`, `str_lower`, `str_upper`,
  `str_printf` (printf-style `%` formatting truncated to a buffer size),
  `str_tokenize` (returns a `Token` with `text`, `rest` and `quoted`),
  `str_to_int` (signed 32-bit result) and `str_to_float` (32-bit float result).
  `str_hash_ht` is a hash that ignores case and treats `/` as `\`.
- `stormlib.bigbuffer`: `BigBuffer`, a little-endian list of 32-bit words with a
  base offset, and `BigStack`, a pool of 16 scratch buffers.
- `stormlib.ops`: arithmetic on `BigBuffer`s. It has `add`, `add_small`, `sub`
  (raises `ValueError` on a negative result), `mul`, `mul_small`, `square`,
  `div`, `div_small`, `mul_mod`, `pow_mod`, `shl`, `shr`, `compare` and
  `high_bit_pos`. It also has `from_binary`, `from_unsigned` and `to_binary`,
  and 64-bit word helpers such as `extract_low_part` and `make_large`.
- `stormlib.big`: `BigData`, an unsigned big integer. Each operation stores its
  result in the instance it is called on.
- `stormlib.arrays`: `FixedArray` and `GrowableArray`. Both are bounds-checked,
  and both build new elements with a factory. `GrowableArray` reserves storage
  in chunks.
- `stormlib.priority_queue`: `PriorityQueue`, a binary heap. Each item carries
  its own heap link, a `BasePriority` subclass such as `TimerPriority`, in a
  named attribute.
- `stormlib.linked_list`: `LinkedList`, an intrusive doubly linked list whose
  nodes hold a `Link`. `LinkedNode` is a ready-made node.
- `stormlib.hashtable`: `HashTable` of `HashObject`s, kept both in hash slots and
  in insertion order. Keys are `HashKeyStrI` (case-insensitive) by default;
  `HashKeyStr`, `HashKeyPtr` and `HashKeyNone` are the other key types.
- `stormlib.sync`: `Event` (manual or automatic reset) and `Semaphore`, both of
  which can be waited on. `SyncObject.wait(timeout_ms)` returns a `WaitResult`.
  The module also has `CritSect`, a recursive lock that works as a context
  manager, and `RWLock`, a reader-writer lock.
- `stormlib.threads`: `create_thread`, and `SThread`, a thread whose completion
  can be waited on. `thread_records()` returns a snapshot of the threads started
  so far. `get_current_thread_id()` returns the calling thread's identifier.
- `stormlib.errors`: `format_error` and `display_error`, which print an error
  report and raise `StormFatalError` when the error is not recoverable. Also
  `display_app_fatal`, and `set_last_error` / `get_last_error`.
- `stormlib.atomic`: `AtomicInt32`, a thread-safe, wrapping signed 32-bit counter.

## Installation

```
pip install .
```

## Examples

Big integers:

```python
from stormlib.big import BigData

base, exp, mod, result = BigData(), BigData(), BigData(), BigData()
base.from_unsigned(256)
exp.from_unsigned(8)
mod.from_unsigned(999)
result.pow_mod(base, exp, mod)
result.to_binary(4)   # b'\xa0'  (160)
```

Strings and UTF-8:

```python
from stormlib.strings import str_hash_ht, str_to_float, str_tokenize
from stormlib.utf8 import get_utf8, put_utf8

str_hash_ht("foo/bar") == str_hash_ht("FOO\\BAR")   # True
str_to_float("1.5e3")                               # 1500.0
str_tokenize("foo,bar,baz", " ,").text              # 'foo'

get_utf8(b"\xf0\x9f\x99\x82")   # (128578, 4)
put_utf8(0x1F642)               # b'\xf0\x9f\x99\x82'
```

Containers:

```python
from stormlib.hashtable import HashTable
from stormlib.linked_list import LinkedList, LinkedNode

table = HashTable()
entry = table.new("Interface\\Glue")
table.ptr("INTERFACE\\GLUE") is entry   # True

items = LinkedList()
first, second = LinkedNode(), LinkedNode()
items.link_to_tail(first)
items.link_to_head(second)
list(items) == [second, first]          # True
```

Synchronisation and threads:

```python
from stormlib.sync import Event, Semaphore, WaitResult
from stormlib.threads import SThread

event = Event(manual_reset=True)
event.set()
event.wait(0) is WaitResult.OBJECT_0    # True

Semaphore(0, 2).signal(3)               # False: would pass the maximum

worker = SThread()
worker.start(lambda param: None, thread_name="worker")
worker.wait() is WaitResult.OBJECT_0    # True once the thread has finished
```

## Limits

- `HashTable` always uses four hash slots; it does not grow as entries are added.
- `display_error` and `display_app_fatal` print to standard output and raise an
  exception. They show no dialog and do not end the process themselves.
- The package provides no command-line program; it is used as a library only.

## Running the tests

```
pip install .[test]
pytest
```