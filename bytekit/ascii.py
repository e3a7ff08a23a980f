"""Locating the first non-ASCII byte in a byte sequence."""

from __future__ import annotations

import re

_NON_ASCII = re.compile(rb"[\x80-\xff]")


def first_non_ascii_byte(data: bytes | bytearray | memoryview) -> int:
    """Return the index of the first byte above 0x7F in ``data``.

    If every byte is ASCII, the length of ``data`` is returned.
    """
    match = _NON_ASCII.search(data)
    if match is None:
        return len(data)
    return match.start()