"""Blake2b hashing helpers: one-shot digests of any size and a streaming hasher."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Blake2bConfig:
    """Output size in bytes and an optional key for keyed hashing."""

    output_size: int = 64
    key: bytes = b""


def _new_hasher(size: int, key: Optional[bytes]) -> "hashlib._Hash":
    return hashlib.blake2b(digest_size=size, key=bytes(key or b""))


def blake2b_hash(data: bytes, config: Blake2bConfig) -> bytes:
    """Hash data with the size and key given by config.

    Raises ValueError for an output size outside 1..64 or a key over 64 bytes.
    """
    hasher = _new_hasher(config.output_size, config.key)
    hasher.update(bytes(data))
    return hasher.digest()


def blake2b_256(data: bytes) -> bytes:
    """Return the 32-byte Blake2b digest of data."""
    return hashlib.blake2b(bytes(data), digest_size=32).digest()


def blake2b_512(data: bytes) -> bytes:
    """Return the 64-byte Blake2b digest of data."""
    return hashlib.blake2b(bytes(data), digest_size=64).digest()


class Blake2bStream:
    """Incremental Blake2b hashing with a fixed output size and optional key."""

    def __init__(self, size: int, key: Optional[bytes] = None) -> None:
        self._size = size
        self._key = bytes(key or b"")
        self._hasher = _new_hasher(size, self._key)

    def write(self, data: bytes) -> int:
        """Add data to the hash and return the number of bytes taken."""
        data = bytes(data)
        self._hasher.update(data)
        return len(data)

    def digest(self) -> bytes:
        """Return the hash of everything written so far."""
        return self._hasher.copy().digest()

    def reset(self) -> None:
        """Forget everything written so far."""
        self._hasher = _new_hasher(self._size, self._key)