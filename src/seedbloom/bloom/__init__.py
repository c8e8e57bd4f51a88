from seedbloom.bloom.bloom_filter import BloomFilter
from seedbloom.bloom.bloom_params import (
    DEFAULT_ERROR_RATE,
    BloomParams,
    false_positive_rate,
    optimal_bit_size,
    optimal_hash_count,
)

__all__ = [
    "DEFAULT_ERROR_RATE",
    "BloomFilter",
    "BloomParams",
    "false_positive_rate",
    "optimal_bit_size",
    "optimal_hash_count",
]
