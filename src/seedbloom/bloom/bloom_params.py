"""Bloom filter parameter math."""
from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_ERROR_RATE = 0.01


def optimal_bit_size(n: int, p: float) -> int:
    """Smallest bit-array length m reaching rate p for n items: ceil(-n ln p / ln2^2)."""
    return int(math.ceil(-(n * math.log(p)) / (math.log(2) ** 2)))


def optimal_hash_count(m: int, n: int) -> int:
    """Hash rounds for m bits and n items: max(1, ceil(m / n * ln2))."""
    return max(1, int(math.ceil(m / n * math.log(2))))


def false_positive_rate(n: int, m: int, k: int) -> float:
    """Estimated false-positive rate (1 - e^(-n*m/k))^k for n inserts."""
    return (1.0 - math.exp(-float(n) * m / k)) ** k


def validate_capacity(expected_items: int, target_fpr: float) -> None:
    """Reject capacities and rates the formulas above cannot use."""
    if not (0 < target_fpr < 1):
        raise ValueError("error_rate must be in (0,1)")
    if expected_items <= 0:
        raise ValueError("max_elements must be positive")


@dataclass(frozen=True)
class BloomParams:
    m_bits: int
    k_hash: int

    @staticmethod
    def for_capacity(expected_items: int, target_fpr: float = DEFAULT_ERROR_RATE) -> "BloomParams":
        """Compute optimal m (bits) and k (hash rounds) for a capacity and target rate."""
        validate_capacity(expected_items, target_fpr)
        m_bits = optimal_bit_size(expected_items, target_fpr)
        k_hash = optimal_hash_count(m_bits, expected_items)
        return BloomParams(m_bits=m_bits, k_hash=k_hash)
