"""Argon2 block compression built on the Blake2b round permutation."""

from __future__ import annotations

from typing import List, MutableSequence

from rxhash.argon2d.block import Block
from rxhash.argon2d.g import g_round

_COLUMN_GROUPS = tuple(tuple(range(16 * i, 16 * i + 16)) for i in range(8))
_ROW_GROUPS = tuple(
    tuple(2 * i + base + offset for base in range(0, 128, 16) for offset in (0, 1))
    for i in range(8)
)
_GROUPS = _COLUMN_GROUPS + _ROW_GROUPS


def _permute(words: MutableSequence[int]) -> None:
    """Apply permutation P to 128 words in place: columns first, then rows."""
    for group in _GROUPS:
        v: List[int] = [words[k] for k in group]
        g_round(v)
        for k, value in zip(group, v):
            words[k] = value


def apply_blake2b_round(block: Block) -> None:
    """Apply the Argon2 permutation P to a block in place."""
    _permute(block.words)


def fill_block(
    prev_block: Block, ref_block: Block, next_block: Block, with_xor: bool
) -> None:
    """Compress prev_block and ref_block into next_block.

    With with_xor set, the result is also XORed with next_block's old content,
    as in every pass after the first.
    """
    r = [a ^ b for a, b in zip(ref_block.words, prev_block.words)]
    q = r.copy()
    _permute(r)
    if with_xor:
        result = [x ^ y ^ z for x, y, z in zip(r, q, next_block.words)]
    else:
        result = [x ^ y for x, y in zip(r, q)]
    next_block.words[:] = result