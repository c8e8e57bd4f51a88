"""Seeded Bloom filter over byte items.

Each operation runs k hash rounds through a single hasher, using the round
index as the seed, and reduces every hash modulo the bit-array length.

Items cannot be removed. The filter is not synchronized: callers must not run
insert concurrently with any other operation on the same instance.
"""
from __future__ import annotations

from typing import Iterable, Iterator

from bitarray import bitarray
from loguru import logger

from seedbloom.bloom.bloom_params import (
    DEFAULT_ERROR_RATE,
    BloomParams,
    false_positive_rate,
)
from seedbloom.hashing.hasher import BloomHasher
from seedbloom.types.item_types import ItemKey, normalize_key


class BloomFilter:
    def __init__(self, hasher: BloomHasher, k: int, array_size: int) -> None:
        """Create a filter with k hash rounds over array_size bits, all unset."""
        self._k = int(k)
        self._m = int(array_size)
        if self._m <= 0:
            raise ValueError("array_size must be positive")
        if self._k <= 0:
            raise ValueError("k must be positive")
        self._hasher = hasher
        self._bits = bitarray(self._m)
        self._bits.setall(0)
        self._inserted = 0
        logger.debug(
            f"BloomFilter init: m={self._m:,} bits (~{self._m / 8 / 1024:.1f} KB), "
            f"k={self._k}, hasher={hasher!r}"
        )

    @classmethod
    def optimal(
        cls, hasher: BloomHasher, max_elements: int, error_rate: float = DEFAULT_ERROR_RATE
    ) -> "BloomFilter":
        """Create a filter sized for max_elements items at the target error_rate."""
        params = BloomParams.for_capacity(max_elements, error_rate)
        logger.debug(
            f"BloomFilter optimal: max_elements={max_elements:,}, error_rate={error_rate}, "
            f"m={params.m_bits:,}, k={params.k_hash}"
        )
        return cls.from_params(hasher, params)

    @classmethod
    def from_params(cls, hasher: BloomHasher, params: BloomParams) -> "BloomFilter":
        return cls(hasher, params.k_hash, params.m_bits)

    @classmethod
    def from_iterable(
        cls, hasher: BloomHasher, items: Iterable[ItemKey], error_rate: float = DEFAULT_ERROR_RATE
    ) -> "BloomFilter":
        """Build an optimally sized filter holding every item of items."""
        keys = [normalize_key(item) for item in items]
        bloom = cls.optimal(hasher, len(keys), error_rate)
        bloom.insert_all(keys)
        return bloom

    def insert(self, item: ItemKey) -> None:
        """Set the k bits of item; every call counts, duplicates included."""
        for pos in self._positions(normalize_key(item)):
            self._bits[pos] = 1
        self._inserted += 1

    def insert_all(self, items: Iterable[ItemKey]) -> None:
        """Insert items in order."""
        for item in items:
            self.insert(item)

    def contains(self, item: ItemKey) -> bool:
        """Return False if item was surely never inserted, True if it may have been."""
        for pos in self._positions(normalize_key(item)):
            if not self._bits[pos]:
                return False
        return True

    def __contains__(self, item: ItemKey) -> bool:
        return self.contains(item)

    def false_positive_rate(self) -> float:
        """Estimated false-positive rate for the current insert count."""
        return false_positive_rate(self._inserted, self._m, self._k)

    def remove(self, item: ItemKey) -> None:
        raise NotImplementedError("Bloom filter doesn't support delete operation")

    def discard(self, item: ItemKey) -> None:
        raise NotImplementedError("Bloom filter doesn't support delete operation")

    @property
    def hasher(self) -> BloomHasher:
        return self._hasher

    def get_inserted_count(self) -> int:
        """Number of insert calls so far (not deduplicated)."""
        return self._inserted

    def m_bits(self) -> int:
        return self._m

    def k_hash(self) -> int:
        return self._k

    def bit_count(self) -> int:
        """Number of bits currently set."""
        return self._bits.count(1)

    def __len__(self) -> int:
        return self._inserted

    def __repr__(self) -> str:
        return (
            f"BloomFilter(m={self._m:,} bits, k={self._k}, "
            f"inserted={self._inserted:,}, fpr≈{self.false_positive_rate():.4%})"
        )

    # Internal helpers
    def _positions(self, data: bytes) -> Iterator[int]:
        """Yield the bit position of each hash round, seeds 0..k-1."""
        hash_fn = self._hasher.hash
        m = self._m
        for seed in range(self._k):
            yield hash_fn(seed, data) % m
