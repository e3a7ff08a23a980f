"""Searching a byte string for bytes that are, or are not, in a set."""

from __future__ import annotations

from typing import Optional, Union

from bytekit.scalar import (
    forward_search_bytes,
    inv_memchr,
    inv_memrchr,
    reverse_search_bytes,
)

BytesLike = Union[bytes, bytearray, memoryview]


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, bytes):
        return data
    return bytes(data)


def find(haystack: BytesLike, byteset: BytesLike) -> Optional[int]:
    """Return the index of the first byte of ``haystack`` that is in ``byteset``."""
    needles = _as_bytes(byteset)
    if not needles:
        return None
    data = _as_bytes(haystack)
    if len(needles) == 1:
        index = data.find(needles[0])
        return index if index >= 0 else None
    members = frozenset(needles)
    return forward_search_bytes(data, members.__contains__)


def rfind(haystack: BytesLike, byteset: BytesLike) -> Optional[int]:
    """Return the index of the last byte of ``haystack`` that is in ``byteset``."""
    needles = _as_bytes(byteset)
    if not needles:
        return None
    data = _as_bytes(haystack)
    if len(needles) == 1:
        index = data.rfind(needles[0])
        return index if index >= 0 else None
    members = frozenset(needles)
    return reverse_search_bytes(data, members.__contains__)


def find_not(haystack: BytesLike, byteset: BytesLike) -> Optional[int]:
    """Return the index of the first byte of ``haystack`` not in ``byteset``."""
    data = _as_bytes(haystack)
    if not data:
        return None
    needles = _as_bytes(byteset)
    if not needles:
        return 0
    if len(needles) == 1:
        return inv_memchr(needles[0], data)
    members = frozenset(needles)
    return forward_search_bytes(data, lambda byte: byte not in members)


def rfind_not(haystack: BytesLike, byteset: BytesLike) -> Optional[int]:
    """Return the index of the last byte of ``haystack`` not in ``byteset``."""
    data = _as_bytes(haystack)
    if not data:
        return None
    needles = _as_bytes(byteset)
    if not needles:
        return len(data) - 1
    if len(needles) == 1:
        return inv_memrchr(needles[0], data)
    members = frozenset(needles)
    return reverse_search_bytes(data, lambda byte: byte not in members)