# bytekit

Small, dependency-free helpers for working with byte strings that may not be
valid UTF-8. The package is a library only. It has no command-line tools.

## Installation

From a checkout of the package:

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

### ASCII scanning: `bytekit.ascii`

`first_non_ascii_byte(data)` returns the index of the first byte above `0x7F`
in a `bytes`, `bytearray` or `memoryview`. If every byte is ASCII, it returns
`len(data)`.

```python
from bytekit.ascii import first_non_ascii_byte

first_non_ascii_byte(b"hello")               # 5
first_non_ascii_byte("ab☃".encode("utf-8"))  # 2
```

### Byte-set searching: `bytekit.byteset`

Each of these functions takes a haystack and a set of bytes, given as a
bytes-like object. Each returns an index, or `None` when nothing matches.

- `find(haystack, byteset)`: the first byte that is in `byteset`
- `rfind(haystack, byteset)`: the last byte that is in `byteset`
- `find_not(haystack, byteset)`: the first byte that is not in `byteset`
- `rfind_not(haystack, byteset)`: the last byte that is not in `byteset`

With an empty `byteset`, `find` and `rfind` return `None`. For a non-empty
haystack, `find_not` then returns `0` and `rfind_not` returns the last index.
All four return `None` for an empty haystack.

```python
from bytekit.byteset import find, rfind, find_not, rfind_not

find(b"hello, world", b",!")     # 5
rfind(b"hello, world", b"lo")    # 10
find_not(b"   text  ", b" ")     # 3
rfind_not(b"   text  ", b" ")    # 6
find(b"abc", b"")                # None
```

### Lower-level scanning: `bytekit.scalar`

- `inv_memchr(needle, haystack)` and `inv_memrchr(needle, haystack)` return
  the index of the first or last byte that differs from the integer `needle`.
  They return `None` if there is no such byte.
- `forward_search_bytes(data, confirm)` and `reverse_search_bytes(data, confirm)`
  return the index of the first or last byte for which the predicate `confirm`
  returns true. They return `None` if there is no such byte.

```python
from bytekit.scalar import inv_memchr, inv_memrchr, forward_search_bytes

inv_memchr(ord("a"), b"aaza")                        # 2
inv_memrchr(ord("a"), b"zaa")                        # 0
forward_search_bytes(b"abc1", lambda b: b < 0x60)    # 3
```

### Copy-on-write bytes: `bytekit.cow`

`CowBytes` holds a byte string that is either borrowed or owned.

- `CowBytes(data)` borrows `data` through a read-only `memoryview`. If `data`
  is a `bytearray`, later changes to it show through the `CowBytes`. A `str`
  is encoded as UTF-8 first.
- `CowBytes.new_owned(data)` makes an owned value that holds its own
  immutable `bytes` copy.
- `as_slice()` returns the contents without copying. A borrowed value returns
  a `memoryview` and an owned value returns `bytes`.
- `into_owned()` returns an owned version. It copies only when the value is
  borrowed. An owned value returns itself.
- `is_owned` tells which kind the value is.

A `CowBytes` supports `len()`, iteration over its byte values, indexing and
slicing (a slice comes back as `bytes`), and `bytes()`. It compares equal to
another `CowBytes` or to any bytes-like object with the same contents. It is
not hashable.

```python
from bytekit.cow import CowBytes

buffer = bytearray(b"abc")
borrowed = CowBytes(buffer)
buffer[0] = ord("x")
borrowed == b"xbc"             # True

owned = borrowed.into_owned()
owned.is_owned                 # True
owned.as_slice()               # b"xbc"
```

## What it does not do

bytekit only scans and searches at the byte level. It does not decode
characters, split text into graphemes, words, sentences or lines, change
case, or read from streams.