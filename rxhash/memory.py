"""Scratchpad pooling and small byte-buffer helpers."""

from __future__ import annotations

import threading
from typing import List, MutableSequence, Optional, Sequence

CACHE_LINE_SIZE = 64

SCRATCHPAD_L1_SIZE = 16384
SCRATCHPAD_L2_SIZE = 262144
SCRATCHPAD_L3_SIZE = 2097152

SCRATCHPAD_L1_MASK = (SCRATCHPAD_L1_SIZE - 1) & ~7
SCRATCHPAD_L2_MASK = (SCRATCHPAD_L2_SIZE - 1) & ~7
SCRATCHPAD_L3_MASK = (SCRATCHPAD_L3_SIZE - 1) & ~7

_pool: List[bytearray] = []
_pool_lock = threading.Lock()


def allocate_scratchpad() -> bytearray:
    """Take a zeroed scratchpad from the pool, or make a new one."""
    with _pool_lock:
        if _pool:
            return _pool.pop()
    return bytearray(SCRATCHPAD_L3_SIZE)


def release_scratchpad(pad: Optional[bytearray]) -> None:
    """Wipe a full-size scratchpad and return it to the pool; ignore anything else."""
    if pad is None or len(pad) != SCRATCHPAD_L3_SIZE:
        return
    zero_bytes(pad)
    with _pool_lock:
        _pool.append(pad)


def allocate_aligned_dataset(size: int) -> bytearray:
    """Return a zero-filled buffer of size bytes for dataset storage."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return bytearray(size)


def copy_bytes(dst: MutableSequence[int], src: Sequence[int]) -> int:
    """Copy as much of src into the start of dst as fits; return the count."""
    n = min(len(dst), len(src))
    dst[:n] = src[:n]
    return n


def zero_bytes(buf: MutableSequence[int]) -> None:
    """Overwrite every byte of buf with zero."""
    buf[:] = bytes(len(buf))