"""Item key helpers.

The filter hashes raw bytes. This module turns the accepted item types into the
bytes fed to the hasher.
"""
from __future__ import annotations

from typing import Union

# Items accepted by insert/contains; str is encoded as UTF-8.
ItemKey = Union[bytes, bytearray, memoryview, str]


def normalize_key(item: ItemKey) -> bytes:
    """Return the byte content of an item, encoding str as UTF-8."""
    if isinstance(item, bytes):
        return item
    if isinstance(item, (bytearray, memoryview)):
        return bytes(item)
    if isinstance(item, str):
        return item.encode("utf-8")
    raise TypeError(f"unsupported item type: {type(item).__name__}")
