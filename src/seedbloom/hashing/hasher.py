"""Hashing capability consumed by the bloom filter."""
from __future__ import annotations

from abc import ABC, abstractmethod

UINT32_MASK = 0xFFFFFFFF


class BloomHasher(ABC):
    """Maps (seed, bytes) to an unsigned 32-bit value.

    Implementations must be pure: the same seed and bytes always give the same
    result. The filter re-derives positions on every query, so a hasher that
    breaks this loses the no-false-negative guarantee. Cryptographic strength
    is not required. The filter only calls `hash`, so subclassing is optional:
    any object with a matching method works.
    """

    @abstractmethod
    def hash(self, seed: int, data: bytes) -> int:
        """Return the hash of data salted with seed, in [0, 2**32)."""
