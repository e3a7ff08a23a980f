"""A byte string that is either borrowed from a buffer or owned outright."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


class CowBytes:
    """A copy-on-write byte string.

    Constructing one directly borrows the given buffer: changes to a mutable
    buffer remain visible through it. ``new_owned`` and ``into_owned`` give an
    instance holding its own immutable copy.
    """

    __slots__ = ("_data", "_owned")

    def __init__(self, data: BytesLike | str) -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._data: memoryview | bytes = memoryview(data).cast("B").toreadonly()
        self._owned = False

    @classmethod
    def new_owned(cls, data: BytesLike | str) -> CowBytes:
        """Create an owned byte string holding a copy of ``data``."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        instance = cls.__new__(cls)
        instance._data = bytes(data)
        instance._owned = True
        return instance

    @property
    def is_owned(self) -> bool:
        """Whether this byte string owns its contents."""
        return self._owned

    def as_slice(self) -> memoryview | bytes:
        """Return the contents without copying, whether borrowed or owned."""
        return self._data

    def into_owned(self) -> CowBytes:
        """Return an owned version; borrowed contents are copied."""
        if self._owned:
            return self
        return CowBytes.new_owned(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __getitem__(self, index):
        item = self._data[index]
        if isinstance(item, memoryview):
            return bytes(item)
        return item

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CowBytes):
            return bytes(self._data) == bytes(other._data)
        if isinstance(other, (bytes, bytearray, memoryview)):
            return bytes(self._data) == bytes(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        kind = "owned" if self._owned else "borrowed"
        return f"CowBytes({bytes(self._data)!r}, {kind})"