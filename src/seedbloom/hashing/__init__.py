from seedbloom.hashing.hasher import UINT32_MASK, BloomHasher
from seedbloom.hashing.murmur3 import Murmur3

__all__ = ["UINT32_MASK", "BloomHasher", "Murmur3"]
