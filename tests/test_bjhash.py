import pytest

from stormlib.bjhash import bjhash


def test_hash_of_uppercase_name_matches_known_value():
    assert bjhash(b"FOO", 0) == 1371562358


def test_hash_of_backslash_path_matches_known_value():
    assert bjhash(b"FOO\\BAR", 0) == 2270424393


def test_default_initval_is_zero():
    assert bjhash(b"FOO") == bjhash(b"FOO", 0)


def test_result_is_unsigned_32_bit():
    for size in range(40):
        value = bjhash(bytes(range(size)), 0)
        assert 0 <= value <= 0xFFFFFFFF


def test_initval_changes_result():
    data = b"some key"
    assert bjhash(data, 0) != bjhash(data, 1)


def test_accepts_any_bytes_like():
    data = b"abcdefghijklmnopq"
    assert bjhash(bytearray(data)) == bjhash(data)
    assert bjhash(memoryview(data)) == bjhash(data)


def test_length_participates_in_hash():
    hashes = {bjhash(b"\0" * size) for size in range(30)}
    assert len(hashes) == 30


@pytest.mark.parametrize("size", [1, 11, 12, 13, 24, 25, 37])
def test_every_byte_affects_result(size):
    base = bytes(size)
    original = bjhash(base)
    for index in range(size):
        changed = bytearray(base)
        changed[index] = 1
        assert bjhash(bytes(changed)) != original