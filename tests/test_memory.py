import pytest
from hypothesis import given
from hypothesis import strategies as st

from libft.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset

SAMPLE = b"Hello, World!"


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(SAMPLE)
    result = memset(buf, 0, 3)
    assert result is buf
    assert buf[:3] == bytes(3)
    assert buf[3:] == SAMPLE[3:]


def test_memset_uses_low_byte_of_value():
    buf = bytearray(4)
    memset(buf, -1, 4)
    assert buf == bytes([0xFF] * 4)


def test_memset_zero_length_changes_nothing():
    buf = bytearray(SAMPLE)
    memset(buf, ord("x"), 0)
    assert buf == SAMPLE


def test_memset_works_on_memoryview():
    raw = bytearray(SAMPLE)
    memset(memoryview(raw), ord("*"), 5)
    assert raw[:5] == b"*" * 5
    assert raw[5:] == SAMPLE[5:]


@pytest.mark.parametrize("length", [-1, len(SAMPLE) + 1])
def test_memset_rejects_bad_length(length):
    with pytest.raises(ValueError):
        memset(bytearray(SAMPLE), 0, length)


def test_bzero_clears_prefix():
    buf = bytearray(SAMPLE)
    assert bzero(buf, 5) is None
    assert buf[:5] == bytes(5)
    assert buf[5:] == SAMPLE[5:]


@given(st.integers(0, 64), st.integers(0, 64))
def test_calloc_size_and_zeroed(count, size):
    block = calloc(count, size)
    assert len(block) == count * size
    assert not any(block)


def test_calloc_overflow_raises():
    with pytest.raises(OverflowError):
        calloc(2**63, 4)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-5, 1)


def test_memchr_finds_first_occurrence():
    assert memchr(SAMPLE, ord("W"), len(SAMPLE)) == SAMPLE.index(b"W")
    assert memchr(SAMPLE, ord("o"), len(SAMPLE)) == SAMPLE.index(b"o")


def test_memchr_missing_returns_none():
    assert memchr(SAMPLE, ord("z"), len(SAMPLE)) is None


def test_memchr_limited_by_size():
    position = SAMPLE.index(b"W")
    assert memchr(SAMPLE, ord("W"), position) is None
    assert memchr(SAMPLE, ord("W"), position + 1) == position


def test_memchr_value_truncated_to_byte():
    assert memchr(SAMPLE, ord("W") + 256, len(SAMPLE)) == SAMPLE.index(b"W")


@given(st.binary(max_size=50), st.integers(0, 255))
def test_memchr_agrees_with_bytes_find(data, value):
    found = data.find(bytes([value]))
    assert memchr(data, value, len(data)) == (None if found < 0 else found)


def test_memchr_size_too_large():
    with pytest.raises(ValueError):
        memchr(SAMPLE, 0, len(SAMPLE) + 1)


def test_memcmp_equal_and_different():
    assert memcmp(b"Hello", b"Hello", 5) == 0
    assert memcmp(b"Hello", b"Hella", 5) > 0
    assert memcmp(b"Hella", b"Hello", 5) < 0


def test_memcmp_stops_at_size():
    assert memcmp(b"Hello", b"Hella", 4) == 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


@given(st.binary(min_size=8, max_size=8), st.binary(min_size=8, max_size=8))
def test_memcmp_antisymmetric_and_consistent(a, b):
    assert memcmp(a, b, 8) == -memcmp(b, a, 8)
    assert (memcmp(a, b, 8) == 0) == (a == b)
    assert (memcmp(a, b, 8) < 0) == (a < b)


def test_memcmp_size_too_large():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_memcpy_copies_and_returns_dest():
    dest = bytearray(20)
    result = memcpy(dest, SAMPLE, len(SAMPLE))
    assert result is dest
    assert dest[:len(SAMPLE)] == SAMPLE
    assert dest[len(SAMPLE):] == bytes(20 - len(SAMPLE))


def test_memcpy_rejects_small_destination():
    with pytest.raises(ValueError):
        memcpy(bytearray(3), SAMPLE, len(SAMPLE))


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


@given(st.data())
def test_memmove_invariants(data):
    original = data.draw(st.binary(min_size=1, max_size=40))
    n = len(original)
    size = data.draw(st.integers(0, n))
    dest = data.draw(st.integers(0, n - size))
    src = data.draw(st.integers(0, n - size))
    buf = bytearray(original)
    result = memmove(buf, dest, src, size)
    assert result is buf
    assert len(buf) == n
    assert buf[dest:dest + size] == original[src:src + size]
    assert buf[:dest] == original[:dest]
    assert buf[dest + size:] == original[dest + size:]


def test_memmove_backward_overlap_on_memoryview():
    raw = bytearray(b"abcdef")
    memmove(memoryview(raw), 0, 2, 4)
    assert raw[:4] == b"abcdef"[2:6]
    assert raw[4:] == b"ef"


@pytest.mark.parametrize("dest, src, size", [(-1, 0, 1), (0, 5, 2), (5, 0, 2)])
def test_memmove_rejects_out_of_range(dest, src, size):
    with pytest.raises(ValueError):
        memmove(bytearray(b"abcdef"), dest, src, size)