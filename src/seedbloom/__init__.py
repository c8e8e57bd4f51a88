"""Seeded Bloom filter with a pluggable 32-bit hasher.

Log records are disabled by default; call ``logger.enable("seedbloom")`` to see them.
"""
from loguru import logger

from seedbloom.bloom import (
    DEFAULT_ERROR_RATE,
    BloomFilter,
    BloomParams,
    false_positive_rate,
    optimal_bit_size,
    optimal_hash_count,
)
from seedbloom.hashing import BloomHasher, Murmur3
from seedbloom.types import ItemKey, normalize_key

logger.disable("seedbloom")

__all__ = [
    "DEFAULT_ERROR_RATE",
    "BloomFilter",
    "BloomHasher",
    "BloomParams",
    "ItemKey",
    "Murmur3",
    "false_positive_rate",
    "normalize_key",
    "optimal_bit_size",
    "optimal_hash_count",
]
