"""The RandomX cache: Argon2d memory addressed as 64-byte items."""

from __future__ import annotations

from typing import Optional

from rxhash.argon2d.hashing import argon2d_cache
from rxhash.memory import zero_bytes

CACHE_SIZE = 262144 * 1024
ITEM_SIZE = 64
CACHE_ITEMS = CACHE_SIZE // ITEM_SIZE


class Cache:
    """Cache memory generated from a seed, read as wrapping 64-byte items."""

    key: Optional[bytes]
    data: Optional[bytearray]

    def __init__(self, seed: bytes) -> None:
        seed = bytes(seed)
        if not seed:
            raise ValueError("cache seed must not be empty")
        data = argon2d_cache(seed)
        if len(data) != CACHE_SIZE:
            raise ValueError(
                f"argon2 output size mismatch: got {len(data)}, want {CACHE_SIZE}"
            )
        self.key = seed
        self.data = bytearray(data)

    @classmethod
    def from_data(cls, key: bytes, data: bytes) -> "Cache":
        """Build a cache from already generated memory.

        The data must be a non-empty whole number of items; indices wrap at
        the number of items it holds.
        """
        key = bytes(key)
        if not key:
            raise ValueError("cache seed must not be empty")
        if not data or len(data) % ITEM_SIZE:
            raise ValueError(
                f"cache data must be a non-empty multiple of {ITEM_SIZE} bytes"
            )
        cache = cls.__new__(cls)
        cache.key = key
        cache.data = bytearray(data)
        return cache

    @property
    def item_count(self) -> int:
        """Number of 64-byte items held, zero once released."""
        return len(self.data) // ITEM_SIZE if self.data is not None else 0

    def release(self) -> None:
        """Wipe and drop the cache memory; calling it again does nothing."""
        if self.data is not None:
            zero_bytes(self.data)
            self.data = None
        self.key = None

    def get_item(self, index: int) -> bytes:
        """Return the 64-byte item at index, wrapping past the end."""
        if self.data is None:
            raise RuntimeError("cache has been released")
        if index < 0:
            raise ValueError(f"item index must not be negative, got {index}")
        offset = (index % self.item_count) * ITEM_SIZE
        return bytes(self.data[offset : offset + ITEM_SIZE])

    def __enter__(self) -> "Cache":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()