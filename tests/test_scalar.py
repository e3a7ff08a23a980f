import pytest

from bytekit.scalar import (
    forward_search_bytes,
    inv_memchr,
    inv_memrchr,
    reverse_search_bytes,
)

# search string, search byte, inv_memchr result, inv_memrchr result
BASE_CASES = [
    (b"z", ord("a"), 0, 0),
    (b"zz", ord("a"), 0, 1),
    (b"aza", ord("a"), 1, 1),
    (b"zaz", ord("a"), 0, 2),
    (b"zza", ord("a"), 0, 1),
    (b"zaa", ord("a"), 0, 0),
    (b"zzz", ord("a"), 0, 2),
]


def _build_cases(search, byte, fwd, rev):
    yield search, (fwd, rev)
    pad = bytes((byte,))
    for count in range(1, 515):
        run = pad * count
        yield search + run, (fwd, rev)
        yield run + search, (fwd + count, rev + count)
        yield run + search + run, (fwd + count, rev + count)


def _check(haystack, byte, matching):
    expected_fwd = matching[0] if matching else None
    expected_rev = matching[1] if matching else None
    assert inv_memchr(byte, haystack) == expected_fwd
    assert inv_memrchr(byte, haystack) == expected_rev
    for offset in range(1, 130):
        if offset >= len(haystack):
            break
        if matching is not None and (offset > matching[0] or offset > matching[1]):
            break
        realigned = haystack[offset:]
        fwd = matching[0] - offset if matching else None
        rev = matching[1] - offset if matching else None
        assert inv_memchr(byte, realigned) == fwd
        assert inv_memrchr(byte, realigned) == rev


@pytest.mark.parametrize("search,byte,fwd,rev", BASE_CASES)
def test_inv_memchr_expanded(search, byte, fwd, rev):
    for haystack, matching in _build_cases(search, byte, fwd, rev):
        _check(haystack, byte, matching)


def test_inv_memchr_non_matching_sizes():
    for size in range(515):
        haystack = b"\0" * size
        _check(haystack, 0, None)


def test_inv_memchr_accepts_memoryview_and_bytearray():
    assert inv_memchr(ord("a"), memoryview(b"aaab")) == 3
    assert inv_memrchr(ord("a"), bytearray(b"baaa")) == 0


def test_forward_search_bytes():
    assert forward_search_bytes(b"abcdef", lambda b: b > ord("c")) == 3
    assert forward_search_bytes(b"abc", lambda b: b > ord("z")) is None
    assert forward_search_bytes(b"", lambda b: True) is None


def test_reverse_search_bytes():
    assert reverse_search_bytes(b"abcdef", lambda b: b < ord("c")) == 1
    assert reverse_search_bytes(b"abc", lambda b: b > ord("z")) is None
    assert reverse_search_bytes(b"", lambda b: True) is None
    assert reverse_search_bytes(b"xax", lambda b: b == ord("x")) == 2