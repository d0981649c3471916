import pytest

from stormlib.bigbuffer import BigBuffer, BigStack


def test_new_buffer_is_empty():
    buf = BigBuffer()
    assert len(buf) == 0
    assert buf.words() == []


def test_read_past_end_is_zero_and_does_not_grow():
    buf = BigBuffer([9])
    assert buf[5] == 0
    assert len(buf) == 1


def test_write_grows_with_zeros():
    buf = BigBuffer()
    buf[3] = 7
    assert len(buf) == 3 + 1
    assert buf.words() == [0, 0, 0, 7]


def test_write_keeps_low_32_bits():
    buf = BigBuffer()
    buf[0] = (1 << 32) + 5
    assert buf[0] == 5


def test_negative_index_rejected():
    buf = BigBuffer([1])
    with pytest.raises(IndexError):
        buf[-1]
    with pytest.raises(IndexError):
        buf[-1] = 2
    assert buf.words() == [1]
    assert len(buf) == 1


def test_trim_removes_high_zero_words():
    buf = BigBuffer([1, 0, 2, 0, 0])
    buf.trim()
    assert buf.words() == [1, 0, 2]


def test_trim_of_zero_leaves_nothing():
    buf = BigBuffer([0, 0])
    buf.trim()
    assert len(buf) == 0


def test_set_count_truncates_and_extends():
    buf = BigBuffer([1, 2, 3])
    buf.set_count(1)
    assert buf.words() == [1]
    buf.set_count(3)
    assert buf.words() == [1, 0, 0]


def test_is_used_matches_length():
    buf = BigBuffer([1, 2])
    assert buf.is_used(1)
    assert not buf.is_used(2)


def test_offset_shifts_indexing():
    buf = BigBuffer([1, 2, 3, 4])
    buf.set_offset(2)
    assert len(buf) == 2
    assert buf[0] == 3
    buf[0] = 30
    buf.set_offset(0)
    assert buf.words() == [1, 2, 30, 4]


def test_offset_grows_storage_to_reach_it():
    buf = BigBuffer()
    buf.set_offset(3)
    assert len(buf) == 0
    assert not buf.is_used(0)
    buf.set_offset(0)
    assert buf.words() == [0, 0, 0]


def test_clear_keeps_words_below_offset():
    buf = BigBuffer([1, 2, 3])
    buf.set_offset(1)
    buf.clear()
    assert len(buf) == 0
    buf.set_offset(0)
    assert buf.words() == [1]


def test_copy_from_is_independent():
    src = BigBuffer([5, 6])
    dst = BigBuffer([1])
    dst.copy_from(src)
    assert dst.words() == [5, 6]
    src[0] = 9
    assert dst[0] == 5


def test_stack_alloc_until_exhausted():
    stack = BigStack()
    buffers = [stack.alloc() for _ in range(BigStack.SIZE)]
    assert len({id(b) for b in buffers}) == BigStack.SIZE
    assert stack.used == BigStack.SIZE
    with pytest.raises(OverflowError):
        stack.alloc()


def test_stack_free_returns_same_buffer():
    stack = BigStack()
    first = stack.alloc()
    stack.free(1)
    assert stack.used == 0
    assert stack.alloc() is first


def test_stack_free_too_many_rejected():
    stack = BigStack()
    stack.alloc()
    with pytest.raises(ValueError):
        stack.free(2)


def test_make_distinct_without_requirement_returns_orig():
    stack = BigStack()
    orig = BigBuffer([1])
    assert stack.make_distinct(orig, False) is orig
    assert stack.used == 0


def test_unmake_distinct_copies_back_and_frees():
    stack = BigStack()
    orig = BigBuffer([1])
    scratch = stack.make_distinct(orig, True)
    assert scratch is not orig
    scratch.set_count(0)
    scratch[0] = 42
    stack.unmake_distinct(orig, scratch)
    assert orig.words() == [42]
    assert stack.used == 0