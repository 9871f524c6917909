"""The full dataset: items derived from the cache by register mixing."""

from __future__ import annotations

import struct
from typing import List, Optional

from rxhash.cache import CACHE_ITEMS, Cache
from rxhash.primitives.blake2b import blake2b_512

DATASET_SIZE = 2080 * 1024 * 1024
ITEM_SIZE = 64
DATASET_ITEMS = DATASET_SIZE // ITEM_SIZE

_MASK64 = 0xFFFFFFFFFFFFFFFF
_ITEM_ITERATIONS = 8
_WORDS = struct.Struct("<8Q")


def mix_register(val: int, iteration: int) -> int:
    """Scramble a 64-bit register value with the iteration number."""
    val = (val ^ iteration) & _MASK64
    val = (val * 0x9E3779B97F4A7C15) & _MASK64
    val ^= val >> 33
    val = (val * 0xBF58476D1CE4E5B9) & _MASK64
    val ^= val >> 29
    return val


def hash_blake2b(data: bytes) -> bytes:
    """Return the 64-byte Blake2b digest of data."""
    return blake2b_512(data)


class Dataset:
    """All dataset items, generated eagerly from a cache.

    The number of items is the class attribute item_count.
    """

    item_count: int = DATASET_ITEMS
    data: Optional[bytearray]

    def __init__(self, cache: Cache) -> None:
        if cache is None or not cache.data:
            raise ValueError("invalid cache")
        data = bytearray(self.item_count * ITEM_SIZE)
        for item in range(self.item_count):
            offset = item * ITEM_SIZE
            data[offset : offset + ITEM_SIZE] = self.generate_item(cache, item)
        self.data = data

    def generate_item(self, cache: Cache, item_number: int) -> bytes:
        """Derive the 64-byte item item_number from the cache."""
        registers: List[int] = [item_number & _MASK64] + [0] * 7
        for i in range(_ITEM_ITERATIONS):
            words = _WORDS.unpack(cache.get_item(registers[0] % CACHE_ITEMS))
            registers = [
                mix_register(reg ^ word, i) for reg, word in zip(registers, words)
            ]
        return _WORDS.pack(*registers)

    def release(self) -> None:
        """Drop the dataset memory; calling it again does nothing."""
        self.data = None

    def get_item(self, index: int) -> bytes:
        """Return the 64-byte item at index, wrapping past the end."""
        if self.data is None:
            raise RuntimeError("dataset has been released")
        if index < 0:
            raise ValueError(f"item index must not be negative, got {index}")
        offset = (index % self.item_count) * ITEM_SIZE
        return bytes(self.data[offset : offset + ITEM_SIZE])

    def __enter__(self) -> "Dataset":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()