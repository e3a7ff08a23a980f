"""Scalar searches for the first or last byte that satisfies a predicate."""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, bytes):
        return data
    return bytes(data)


def inv_memchr(needle: int, haystack: BytesLike) -> Optional[int]:
    """Return the index of the first byte in ``haystack`` not equal to ``needle``.

    Returns ``None`` when every byte equals ``needle`` or ``haystack`` is empty.
    """
    data = _as_bytes(haystack)
    skipped = len(data) - len(data.lstrip(bytes((needle,))))
    return skipped if skipped < len(data) else None


def inv_memrchr(needle: int, haystack: BytesLike) -> Optional[int]:
    """Return the index of the last byte in ``haystack`` not equal to ``needle``.

    Returns ``None`` when every byte equals ``needle`` or ``haystack`` is empty.
    """
    remaining = _as_bytes(haystack).rstrip(bytes((needle,)))
    return len(remaining) - 1 if remaining else None


def forward_search_bytes(
    data: BytesLike, confirm: Callable[[int], bool]
) -> Optional[int]:
    """Return the index of the first byte for which ``confirm`` is true."""
    return next(
        (index for index, byte in enumerate(_as_bytes(data)) if confirm(byte)),
        None,
    )


def reverse_search_bytes(
    data: BytesLike, confirm: Callable[[int], bool]
) -> Optional[int]:
    """Return the index of the last byte for which ``confirm`` is true."""
    buffer = _as_bytes(data)
    last = len(buffer) - 1
    return next(
        (last - offset for offset, byte in enumerate(reversed(buffer)) if confirm(byte)),
        None,
    )