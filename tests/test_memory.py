import pytest

from fractol.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxdef")


def test_memset_takes_value_modulo_256():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytearray(b"AAAA")


def test_memset_past_end_raises():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_memset_negative_length_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, -1)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcdefghi")
    bzero(buf, len(buf))
    assert buf == bytearray(len(buf))


def test_bzero_partial():
    buf = bytearray(b"abcd")
    bzero(buf, 2)
    assert buf == bytearray(b"\0\0cd")


def test_memcpy_copies_n_bytes():
    dst = bytearray(b"......")
    result = memcpy(dst, b"hello", 5)
    assert result is dst
    assert dst == bytearray(b"hello.")


def test_memcpy_zero_leaves_buffer():
    dst = bytearray(b"keep")
    memcpy(dst, b"", 0)
    assert dst == bytearray(b"keep")


def test_memcpy_source_too_short_raises():
    with pytest.raises(IndexError):
        memcpy(bytearray(10), b"abc", 5)


def test_memmove_forward_overlap():
    buf = bytearray(b"123456789")
    memmove(buf, 2, 0, 5)
    assert buf == bytearray(b"121234589")


def test_memmove_backward_overlap():
    buf = bytearray(b"123456789")
    memmove(buf, 0, 2, 5)
    assert buf == bytearray(b"345676789")


def test_memmove_same_offset_is_identity():
    buf = bytearray(b"abc")
    memmove(buf, 1, 1, 2)
    assert buf == bytearray(b"abc")


def test_memmove_out_of_range_raises():
    with pytest.raises(IndexError):
        memmove(bytearray(b"abc"), 2, 0, 2)


def test_memchr_finds_first():
    data = b"abcabc"
    assert memchr(data, ord("c"), len(data)) == data.index(b"c")


def test_memchr_respects_limit():
    assert memchr(b"abcabc", ord("c"), 2) is None


def test_memchr_wraps_value():
    data = b"xAy"
    assert memchr(data, 0x100 + ord("A"), 3) == data.index(b"A")


def test_memcmp_equal_is_zero():
    assert memcmp(b"abc", b"abc", 3) == 0


def test_memcmp_ignores_beyond_n():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_sign_follows_bytes():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_compares_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_calloc_is_zeroed_with_product_size():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert not any(buf)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)