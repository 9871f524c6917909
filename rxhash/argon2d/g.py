"""The Blake2b-style G mixing function with Argon2's fBlaMka multiplication."""

from __future__ import annotations

from typing import MutableSequence, Tuple

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

_COLUMNS = ((0, 4, 8, 12), (1, 5, 9, 13), (2, 6, 10, 14), (3, 7, 11, 15))
_DIAGONALS = ((0, 5, 10, 15), (1, 6, 11, 12), (2, 7, 8, 13), (3, 4, 9, 14))


def rotr64(x: int, n: int) -> int:
    """Rotate a 64-bit value right by n bits."""
    return ((x >> n) | (x << (64 - n))) & _MASK64


def _fblamka(x: int, y: int) -> int:
    return (x + y + 2 * (x & _MASK32) * (y & _MASK32)) & _MASK64


def g(a: int, b: int, c: int, d: int) -> Tuple[int, int, int, int]:
    """Mix four 64-bit words and return the new values."""
    a = _fblamka(a, b)
    d = rotr64(d ^ a, 32)
    c = _fblamka(c, d)
    b = rotr64(b ^ c, 24)

    a = _fblamka(a, b)
    d = rotr64(d ^ a, 16)
    c = _fblamka(c, d)
    b = rotr64(b ^ c, 63)
    return a, b, c, d


def g_round(v: MutableSequence[int]) -> None:
    """Apply G to the columns, then the diagonals, of 16 words in place."""
    for i, j, k, m in _COLUMNS + _DIAGONALS:
        v[i], v[j], v[k], v[m] = g(v[i], v[j], v[k], v[m])