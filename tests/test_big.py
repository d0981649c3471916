import pytest

from stormlib.big import BigData


def u32(value):
    num = BigData()
    num.from_unsigned(value)
    return num


def u64(value):
    num = BigData()
    num.from_binary(value.to_bytes(8, "little"))
    return num


def trimmed(num):
    num.primary.trim()
    return num.primary.words()


@pytest.mark.parametrize(
    "b, c, expected",
    [
        (0, 1, [1]),
        (1, 2, [3]),
        (0x12345678, 0x23456789, [0x3579BE01]),
        (0xFFFFFFFF, 0xF0F0F0F0, [0xF0F0F0EF, 0x1]),
    ],
)
def test_add(b, c, expected):
    a = BigData()
    a.add(u32(b), u32(c))
    assert a.primary.words() == expected


@pytest.mark.parametrize(
    "num, expected",
    [
        (u32(1), 1),
        (u32(5), 3),
        (u32(0xFFFF), 16),
        (u32(0xFFFFFFFF), 32),
        (u64(0x22222222AAAAAAAA), 62),
    ],
)
def test_bit_len(num, expected):
    assert num.bit_len() == expected


def test_compare():
    assert u32(10).compare(u32(1)) == 1


def test_from_binary():
    assert u64(0).primary.words() == [0, 0]
    num = BigData()
    num.from_binary((0).to_bytes(4, "little"))
    assert num.primary.words() == [0]
    assert u64(0x123456789ABCDEF0).primary.words() == [0x9ABCDEF0, 0x12345678]


def test_from_unsigned():
    assert u32(0).primary.words() == [0]
    assert u32(0x12345678).primary.words() == [0x12345678]


def test_mod_7_by_4():
    a = BigData()
    a.mod(u32(7), u32(4))
    assert trimmed(a) == [3]
    assert a.stack.used == 0


def test_mod_twice_into_same_result():
    a = BigData()
    a.mod(u32(7), u32(4))
    assert trimmed(a) == [3]
    a.mod(u32(9), u32(5))
    assert trimmed(a) == [4]


def test_mod_two_words_by_one_word():
    a = BigData()
    a.mod(u64(0x9999444488885555), u32(0xFFFFFFFF))
    assert trimmed(a) == [0x2221999A]


def test_mod_by_zero_raises():
    a = BigData()
    with pytest.raises(ZeroDivisionError):
        a.mod(u32(7), u32(0))
    assert a.stack.used == 0


@pytest.mark.parametrize(
    "b, c, expected",
    [
        (0, 1, []),
        (2, 4, [8]),
        (0xFFFFFFFF, 0x100, [0xFFFFFF00, 0xFF]),
        (0xFFFFFF, 0x11223344, [0x32DDCCBC, 0x112233]),
    ],
)
def test_mul(b, c, expected):
    a = BigData()
    a.mul(u32(b), u32(c))
    assert trimmed(a) == expected


def test_pow_mod():
    a = BigData()
    a.pow_mod(u32(256), u32(8), u32(999))
    assert trimmed(a) == [160]
    assert a.stack.used == 0


def test_shl():
    a = BigData()
    a.shl(u32(256), 7)
    assert trimmed(a) == [32768]


def test_shr():
    a = BigData()
    a.shr(u32(256), 7)
    assert trimmed(a) == [2]


def test_square():
    a = BigData()
    a.square(u32(0xFFFFFFFF))
    assert trimmed(a) == [0x1, 0xFFFFFFFE]


def test_sub():
    a = BigData()
    a.sub(u32(2), u32(1))
    assert trimmed(a) == [1]


def test_sub_negative_raises():
    with pytest.raises(ValueError):
        BigData().sub(u32(1), u32(2))


def test_to_binary_of_zero():
    assert u32(0).to_binary(4) == b""


def test_to_binary_one_word():
    out = u32(0x12345678).to_binary(4)
    assert len(out) == 4
    assert int.from_bytes(out, "little") == 0x12345678


def test_to_binary_two_words():
    out = u64(0x123456789ABCDEF0).to_binary(8)
    assert len(out) == 8
    assert int.from_bytes(out, "little") == 0x123456789ABCDEF0


def test_to_binary_is_limited_to_max_bytes():
    value = 0x123456789ABCDEF0
    out = u64(value).to_binary(2)
    assert out == value.to_bytes(8, "little")[:2]