"""MurmurHash3 x86_32 hasher backed by mmh3."""
from __future__ import annotations

import mmh3

from seedbloom.hashing.hasher import UINT32_MASK, BloomHasher


class Murmur3(BloomHasher):
    def hash(self, seed: int, data: bytes) -> int:
        """Hash data with MurmurHash3 x86_32 using seed as the salt."""
        return mmh3.hash(data, seed & UINT32_MASK, signed=False)

    def __repr__(self) -> str:
        return "Murmur3()"
