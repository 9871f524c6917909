"""Argon2 memory blocks: 1024 bytes viewed as 128 little-endian 64-bit words."""

from __future__ import annotations

import struct
from typing import Iterable, Iterator, Optional

BLOCK_SIZE = 1024
QWORDS_IN_BLOCK = 128

_MASK64 = 0xFFFFFFFFFFFFFFFF
_LAYOUT = struct.Struct("<128Q")


class InvalidBlockSizeError(ValueError):
    """Raised when a block is loaded from data that is not exactly BLOCK_SIZE bytes."""

    def __init__(self, got: int, want: int = BLOCK_SIZE) -> None:
        self.got = got
        self.want = want
        super().__init__(f"invalid block size: got {got} bytes, want {want} bytes")


class Block:
    """A mutable Argon2 memory block of 128 unsigned 64-bit words."""

    __slots__ = ("words",)

    def __init__(self, words: Optional[Iterable[int]] = None) -> None:
        if words is None:
            self.words = [0] * QWORDS_IN_BLOCK
            return
        values = list(words)
        if len(values) != QWORDS_IN_BLOCK:
            raise ValueError(
                f"a block holds {QWORDS_IN_BLOCK} words, got {len(values)}"
            )
        self.words = [value & _MASK64 for value in values]

    def __getitem__(self, index):
        return self.words[index]

    def __setitem__(self, index, value) -> None:
        self.words[index] = value

    def __len__(self) -> int:
        return QWORDS_IN_BLOCK

    def __iter__(self) -> Iterator[int]:
        return iter(self.words)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Block):
            return NotImplemented
        return self.words == other.words

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Block(words[0]=0x{self.words[0]:016x}, ...)"

    def copy(self) -> "Block":
        """Return an independent copy of this block."""
        clone = Block.__new__(Block)
        clone.words = self.words.copy()
        return clone

    def xor(self, other: "Block") -> None:
        """XOR another block into this one, word by word."""
        self.words = [a ^ b for a, b in zip(self.words, other.words)]

    def copy_from(self, other: "Block") -> None:
        """Overwrite this block with the contents of another."""
        self.words[:] = other.words

    def zero(self) -> None:
        """Clear every word of the block."""
        self.words[:] = [0] * QWORDS_IN_BLOCK

    @classmethod
    def from_bytes(cls, data: bytes) -> "Block":
        """Build a block from exactly BLOCK_SIZE bytes of little-endian words."""
        if len(data) != BLOCK_SIZE:
            raise InvalidBlockSizeError(len(data), BLOCK_SIZE)
        block = cls.__new__(cls)
        block.words = list(_LAYOUT.unpack(bytes(data)))
        return block

    def to_bytes(self) -> bytes:
        """Encode the block as BLOCK_SIZE bytes of little-endian words."""
        return _LAYOUT.pack(*self.words)