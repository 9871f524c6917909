"""A deterministic byte stream produced by repeated Blake2b-512 hashing."""

from __future__ import annotations

from rxhash.primitives.blake2b import blake2b_512

_STATE_SIZE = 64


class Blake2Generator:
    """Pseudo-random bytes from a seed, rehashing its 64-byte state when exhausted."""

    def __init__(self, seed: bytes) -> None:
        self._data = blake2b_512(seed)
        self._pos = _STATE_SIZE

    def _generate(self) -> None:
        self._data = blake2b_512(self._data)
        self._pos = 0

    def get_byte(self) -> int:
        """Return the next byte."""
        if self._pos >= _STATE_SIZE:
            self._generate()
        value = self._data[self._pos]
        self._pos += 1
        return value

    def get_uint32(self) -> int:
        """Return the next four bytes as a little-endian unsigned 32-bit value."""
        return int.from_bytes(bytes(self.get_byte() for _ in range(4)), "little")