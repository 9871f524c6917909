"""AES-based generators and the scratchpad fingerprint hash."""

from __future__ import annotations

from typing import Callable, Sequence, Tuple

from rxhash.primitives.aes import AESEncryptor

STATE_SIZE = 64
COLUMN_SIZE = 16

AES_GENERATOR_1R_KEYS: Tuple[bytes, ...] = tuple(
    bytes.fromhex(h)
    for h in (
        "53a5ac6d096671622b55b5db1749f4b4",
        "07af7c6d0d716a8478d325174edca10d",
        "f162123fc67e949f4f79c0f445e3203e",
        "3581ef6a7c31bab1884c311654911649",
    )
)

AES_GENERATOR_4R_KEYS: Tuple[bytes, ...] = tuple(
    bytes.fromhex(h)
    for h in (
        "ddaa2164db3d83d12b6d542f3fd2e599",
        "50340eb2553f91b6539df706e5cddfa5",
        "04d93e5caf7b5e519f67a40abf021c17",
        "63376285085d8fe7853767cd91d2ded8",
        "736f82b5a6a7d6e36d8b513db4ff9e22",
        "f36b56c7d9b3109c4e4d02e9d2b772b2",
        "e7c973f28ba365f70a66a92ba7ef3bf6",
        "09d67c7ade395891fdd1060c2d76b0c0",
    )
)

_ColumnOp = Callable[[bytes], bytes]


def _check_seed(seed: bytes, who: str) -> bytes:
    seed = bytes(seed)
    if len(seed) != STATE_SIZE:
        raise ValueError(f"{who}: seed must be {STATE_SIZE} bytes, got {len(seed)}")
    return seed


def _chain(ops: Sequence[_ColumnOp]) -> _ColumnOp:
    def run(block: bytes) -> bytes:
        for op in ops:
            block = op(block)
        return block

    return run


def _apply_columns(state: bytes, ops: Sequence[_ColumnOp]) -> bytes:
    return b"".join(
        op(state[i * COLUMN_SIZE : (i + 1) * COLUMN_SIZE]) for i, op in enumerate(ops)
    )


def _one_round_ops() -> Tuple[_ColumnOp, ...]:
    ciphers = [AESEncryptor(key) for key in AES_GENERATOR_1R_KEYS]
    return (
        ciphers[0].decrypt,
        ciphers[1].encrypt,
        ciphers[2].decrypt,
        ciphers[3].encrypt,
    )


def _four_round_ops() -> Tuple[_ColumnOp, ...]:
    ciphers = [AESEncryptor(key) for key in AES_GENERATOR_4R_KEYS]
    low, high = ciphers[:4], ciphers[4:]
    return (
        _chain([c.decrypt for c in low]),
        _chain([c.encrypt for c in low]),
        _chain([c.decrypt for c in high]),
        _chain([c.encrypt for c in high]),
    )


class _ColumnState:
    """A 64-byte state advanced column by column with AES when it runs out."""

    def __init__(self, seed: bytes, ops: Sequence[_ColumnOp]) -> None:
        self._state = seed
        self._ops = tuple(ops)
        self._pos = STATE_SIZE

    def _advance(self) -> None:
        self._state = _apply_columns(self._state, self._ops)
        self._pos = 0

    def _next_byte(self) -> int:
        if self._pos >= STATE_SIZE:
            self._advance()
        value = self._state[self._pos]
        self._pos += 1
        return value

    def _next_bytes(self, n: int) -> bytes:
        if n < 0:
            raise ValueError(f"byte count must not be negative, got {n}")
        out = bytearray()
        while len(out) < n:
            if self._pos >= STATE_SIZE:
                self._advance()
            take = min(n - len(out), STATE_SIZE - self._pos)
            out += self._state[self._pos : self._pos + take]
            self._pos += take
        return bytes(out)

    def _next_uint32(self) -> int:
        # A value never spans two states: a short tail is discarded.
        if self._pos + 4 > STATE_SIZE:
            self._advance()
        value = int.from_bytes(self._state[self._pos : self._pos + 4], "little")
        self._pos += 4
        return value


class AesGenerator1R(_ColumnState):
    """Pseudo-random bytes from one AES round per 16-byte column."""

    def __init__(self, seed: bytes) -> None:
        super().__init__(_check_seed(seed, "AesGenerator1R"), _one_round_ops())

    def generate(self) -> None:
        """Advance the state to the next 64 bytes and rewind the read position."""
        self._advance()

    def get_byte(self) -> int:
        """Return the next byte."""
        return self._next_byte()

    def get_bytes(self, n: int) -> bytes:
        """Return the next n bytes."""
        return self._next_bytes(n)

    def get_uint32(self) -> int:
        """Return a little-endian 32-bit value; it never spans two states."""
        return self._next_uint32()


class AesGenerator4R(_ColumnState):
    """Pseudo-random bytes from four AES rounds per 16-byte column."""

    def __init__(self, seed: bytes) -> None:
        super().__init__(_check_seed(seed, "AesGenerator4R"), _four_round_ops())

    def generate(self) -> None:
        """Advance the state to the next 64 bytes and rewind the read position."""
        self._advance()

    def get_byte(self) -> int:
        """Return the next byte."""
        return self._next_byte()

    def get_bytes(self, n: int) -> bytes:
        """Return the next n bytes."""
        return self._next_bytes(n)

    def get_uint32(self) -> int:
        """Return a little-endian 32-bit value; it never spans two states."""
        return self._next_uint32()

    def set_state(self, seed: bytes) -> None:
        """Replace the state; the next read generates from it."""
        self._state = _check_seed(seed, "AesGenerator4R.set_state")
        self._pos = STATE_SIZE


class AesHash1R:
    """Fingerprint of a scratchpad: 64-byte chunks XORed in and mixed with AES."""

    def __init__(self) -> None:
        self._ops = _one_round_ops()

    def hash(self, scratchpad: bytes) -> bytes:
        """Return the 64-byte fingerprint of scratchpad.

        A final chunk shorter than 64 bytes is XORed into the start of the state.
        """
        scratchpad = bytes(scratchpad)
        state = bytes(STATE_SIZE)
        for offset in range(0, len(scratchpad), STATE_SIZE):
            chunk = scratchpad[offset : offset + STATE_SIZE].ljust(STATE_SIZE, b"\0")
            mixed = int.from_bytes(state, "little") ^ int.from_bytes(chunk, "little")
            state = _apply_columns(mixed.to_bytes(STATE_SIZE, "little"), self._ops)
        return state