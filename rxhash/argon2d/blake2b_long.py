"""Variable-length Blake2b output as defined by Argon2 (H')."""

from __future__ import annotations

import hashlib
import struct

_MAX_OUTLEN = 0xFFFFFFFF


def blake2b_long(data: bytes, outlen: int) -> bytes:
    """Return exactly outlen bytes derived from data with Blake2b.

    The output length is always prefixed to the input as a little-endian
    32-bit value. Longer outputs chain 64-byte hashes and take 32 bytes from
    each until at most 64 bytes remain, which come from one final hash.
    """
    if not 0 <= outlen <= _MAX_OUTLEN:
        raise ValueError(f"output length out of range: {outlen}")
    if outlen == 0:
        return b""

    prefixed = struct.pack("<I", outlen) + bytes(data)
    if outlen <= 64:
        return hashlib.blake2b(prefixed, digest_size=outlen).digest()

    block = hashlib.blake2b(prefixed, digest_size=64).digest()
    parts = [block[:32]]
    produced = 32
    while produced < outlen:
        remaining = outlen - produced
        if remaining > 64:
            block = hashlib.blake2b(block, digest_size=64).digest()
            parts.append(block[:32])
            produced += 32
        else:
            block = hashlib.blake2b(block, digest_size=remaining).digest()
            parts.append(block)
            produced += remaining
    return b"".join(parts)