"""Byte string helpers: ASCII scanning, byte-set searching and copy-on-write bytes."""

__version__ = "0.1.0"
__all__ = ["ascii", "byteset", "cow", "scalar"]