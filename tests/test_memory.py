import pytest

from basekit import memory


def test_bzero_clears_prefix_only():
    buf = bytearray(b"abcdef")
    memory.bzero(buf, 3)
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"def"


def test_bzero_too_long():
    with pytest.raises(ValueError):
        memory.bzero(bytearray(2), 5)


def test_calloc_is_zeroed():
    buf = memory.calloc(4, 8)
    assert len(buf) == 32
    assert buf == bytes(32)


def test_calloc_zero_size():
    assert memory.calloc(0, 10) == bytearray()


@pytest.mark.parametrize(
    "nmemb,size",
    [(2147483647, 1), (1, 2147483647), (65536, 65536)],
)
def test_calloc_refuses_huge(nmemb, size):
    with pytest.raises(MemoryError):
        memory.calloc(nmemb, size)


def test_calloc_negative():
    with pytest.raises(ValueError):
        memory.calloc(-1, 4)


def test_memchr_finds_first():
    data = b"hello world"
    assert memory.memchr(data, ord("o"), len(data)) == data.index(b"o")


def test_memchr_respects_limit():
    data = b"hello world"
    assert memory.memchr(data, ord("w"), 5) is None


def test_memchr_truncates_value():
    data = b"xyzA"
    assert memory.memchr(data, ord("A") + 256, len(data)) == data.index(b"A")


def test_memcmp_equal_and_ordered():
    assert memory.memcmp(b"abc", b"abc", 3) == 0
    assert memory.memcmp(b"abc", b"abd", 3) < 0
    assert memory.memcmp(b"abd", b"abc", 3) > 0
    assert memory.memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_antisymmetric():
    a, b = b"\x01\xff\x10", b"\x01\x00\x20"
    assert memory.memcmp(a, b, 3) == -memory.memcmp(b, a, 3)


def test_memcpy_copies_prefix():
    dest = bytearray(b"--------")
    result = memory.memcpy(dest, b"abcdef", 4)
    assert result is dest
    assert dest[:4] == b"abcd"
    assert dest[4:] == b"----"


def test_memcpy_source_too_short():
    with pytest.raises(ValueError):
        memory.memcpy(bytearray(8), b"ab", 4)


def test_memmove_forward_overlap():
    original = b"abcdefgh"
    buf = bytearray(original)
    memory.memmove(buf, 2, 0, 5)
    assert buf[2:7] == original[0:5]
    assert buf[:2] == original[:2]
    assert buf[7:] == original[7:]


def test_memmove_backward_overlap():
    original = b"abcdefgh"
    buf = bytearray(original)
    memory.memmove(buf, 0, 3, 5)
    assert buf[0:5] == original[3:8]
    assert buf[5:] == original[5:]


def test_memmove_out_of_bounds():
    with pytest.raises(ValueError):
        memory.memmove(bytearray(4), 2, 0, 3)


def test_memset_fills_prefix():
    buf = bytearray(b"abcdef")
    result = memory.memset(buf, ord("z"), 4)
    assert result is buf
    assert buf[:4] == b"z" * 4
    assert buf[4:] == b"ef"


def test_memset_truncates_value():
    buf = bytearray(3)
    memory.memset(buf, 0x141, 3)
    assert buf == b"AAA"


def test_memset_negative_length():
    with pytest.raises(ValueError):
        memory.memset(bytearray(3), 1, -1)