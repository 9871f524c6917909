"""Argon2d hashing and the RandomX cache built from its memory."""

from __future__ import annotations

import hashlib
import struct
from typing import List, Optional

from rxhash.argon2d.blake2b_long import blake2b_long
from rxhash.argon2d.block import BLOCK_SIZE, Block
from rxhash.argon2d.core import fill_memory

ARGON2_VERSION = 0x13
ARGON2_TYPE_D = 0
DEFAULT_TAG_LENGTH = 32

RANDOMX_SALT = b"RandomX\x03"
RANDOMX_MEMORY_KB = 262144
RANDOMX_TIME_COST = 3
RANDOMX_LANES = 1


def _with_length(value: Optional[bytes]) -> bytes:
    value = bytes(value or b"")
    return struct.pack("<I", len(value)) + value


def initial_hash(
    lanes: int,
    tag_length: int,
    memory: int,
    time_cost: int,
    password: bytes,
    salt: bytes,
    secret: Optional[bytes],
    data: Optional[bytes],
) -> bytes:
    """Compute H0, the 64-byte Blake2b seed of an Argon2d run."""
    header = struct.pack(
        "<6I", lanes, tag_length, memory, time_cost, ARGON2_VERSION, ARGON2_TYPE_D
    )
    message = b"".join(
        (
            header,
            _with_length(password),
            _with_length(salt),
            _with_length(secret),
            _with_length(data),
        )
    )
    return hashlib.blake2b(message, digest_size=64).digest()


def _check_lanes(lanes: int) -> None:
    if lanes < 1:
        raise ValueError(f"lanes must be at least 1, got {lanes}")


def initialize_memory(memory: List[Block], lanes: int, h0: bytes) -> None:
    """Fill the first two blocks of every lane from H0."""
    _check_lanes(lanes)
    if len(h0) != 64:
        raise ValueError(f"H0 must be 64 bytes, got {len(h0)}")
    lane_length = len(memory) // lanes
    for lane in range(lanes):
        start = lane * lane_length
        for block_index in (0, 1):
            seed = bytes(h0) + struct.pack("<II", block_index, lane)
            memory[start + block_index].copy_from(
                Block.from_bytes(blake2b_long(seed, BLOCK_SIZE))
            )


def finalize_hash(memory: List[Block], lanes: int, tag_length: int) -> bytes:
    """XOR the blocks of the first lane together and hash them to tag_length bytes."""
    _check_lanes(lanes)
    lane_length = len(memory) // lanes
    final = memory[0].copy()
    for block in memory[1:lane_length]:
        final.xor(block)
    return blake2b_long(final.to_bytes(), tag_length)


def _filled_memory(
    password: bytes,
    salt: bytes,
    time_cost: int,
    memory_size_kb: int,
    lanes: int,
    tag_length: int,
) -> List[Block]:
    h0 = initial_hash(
        lanes, tag_length, memory_size_kb, time_cost, password, salt, None, None
    )
    memory = [Block() for _ in range(memory_size_kb)]
    initialize_memory(memory, lanes, h0)
    fill_memory(memory, time_cost, lanes)
    return memory


def argon2d(
    password: bytes,
    salt: bytes,
    time_cost: int,
    memory_size_kb: int,
    lanes: int,
    tag_length: int,
) -> bytes:
    """Compute an Argon2d hash of tag_length bytes."""
    _check_lanes(lanes)
    memory = _filled_memory(password, salt, time_cost, memory_size_kb, lanes, tag_length)
    return finalize_hash(memory, lanes, tag_length)


def argon2d_cache(key: bytes) -> bytes:
    """Return the whole 256 MB Argon2d memory used as the RandomX cache."""
    memory = _filled_memory(
        key, RANDOMX_SALT, RANDOMX_TIME_COST, RANDOMX_MEMORY_KB, RANDOMX_LANES, 0
    )
    return b"".join(block.to_bytes() for block in memory)