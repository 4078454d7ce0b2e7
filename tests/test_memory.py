import pytest

from pushswap.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_bzero_clears_prefix_only():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf == bytearray(b"\0\0\0def")


def test_bzero_zero_count_leaves_buffer():
    buf = bytearray(b"xyz")
    bzero(buf, 0)
    assert buf == bytearray(b"xyz")


def test_bzero_past_end_raises():
    with pytest.raises(ValueError):
        bzero(bytearray(2), 3)


def test_calloc_is_zero_filled():
    buf = calloc(4, 3)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_zero_count():
    assert calloc(0, 10) == bytearray()


def test_calloc_overflow_raises():
    with pytest.raises(OverflowError):
        calloc(2**33, 2**33)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memset_uses_low_byte_and_returns_buffer():
    buf = bytearray(b"hello")
    result = memset(buf, 0x141, 2)
    assert result is buf
    assert buf == bytearray(b"AAllo")


def test_memset_past_end_raises():
    with pytest.raises(ValueError):
        memset(bytearray(1), 0, 2)


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"abcdef", 4)
    assert result is dest
    assert dest == bytearray(b"abcd..")


def test_memcpy_both_missing_returns_none():
    assert memcpy(None, None, 5) is None


def test_memcpy_one_missing_raises():
    with pytest.raises(TypeError):
        memcpy(bytearray(3), None, 1)


def test_memcpy_short_source_raises():
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"ab", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_memmove_out_of_range_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first():
    data = b"banana"
    assert memchr(data, ord("n"), len(data)) == data.index(b"n")


def test_memchr_respects_limit():
    assert memchr(b"banana", ord("n"), 2) is None


def test_memchr_uses_low_byte():
    data = b"xyz"
    assert memchr(data, 0x100 + ord("z"), 3) == 2


@pytest.mark.parametrize("data", [b"", b"abc", b"\x00\xff\x10"])
def test_memcmp_equal_is_zero(data):
    assert memcmp(data, bytes(data), len(data)) == 0


def test_memcmp_sign_and_magnitude():
    assert memcmp(b"abc", b"abd", 3) == b"c"[0] - b"d"[0]
    assert memcmp(b"abd", b"abc", 3) == b"d"[0] - b"c"[0]


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_limit_ignores_later_bytes():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_past_end_raises():
    with pytest.raises(ValueError):
        memcmp(b"a", b"ab", 2)