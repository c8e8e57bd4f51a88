# -*- coding: utf-8 -*-
"""Shared fixtures: word list and stub hashers."""

import random
import zlib
from pathlib import Path

import pytest

from seedbloom import BloomHasher, Murmur3

RESOURCES = Path(__file__).parent / "resources"


class Crc32Hasher(BloomHasher):
    """Deterministic stub: crc32 of the bytes, started from the seed."""

    def hash(self, seed: int, data: bytes) -> int:
        return zlib.crc32(data, seed) & 0xFFFFFFFF


class SeedOnlyHasher(BloomHasher):
    """Every item collides: round i always maps to position i."""

    def hash(self, seed: int, data: bytes) -> int:
        return seed


class RandomHasher(BloomHasher):
    """Violates purity on purpose."""

    def __init__(self, rng_seed: int = 1234) -> None:
        self._rng = random.Random(rng_seed)

    def hash(self, seed: int, data: bytes) -> int:
        return self._rng.getrandbits(32)


@pytest.fixture
def words() -> list[str]:
    with open(RESOURCES / "1000.txt", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


@pytest.fixture
def murmur() -> Murmur3:
    return Murmur3()


@pytest.fixture
def crc_hasher() -> Crc32Hasher:
    return Crc32Hasher()


@pytest.fixture
def colliding_hasher() -> SeedOnlyHasher:
    return SeedOnlyHasher()


@pytest.fixture
def random_hasher() -> RandomHasher:
    return RandomHasher()
