"""Single-block AES encryption helpers."""

from __future__ import annotations

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

BLOCK_SIZE = 16
_KEY_SIZES = (16, 24, 32)


def _check_block(data: bytes) -> bytes:
    data = bytes(data)
    if len(data) != BLOCK_SIZE:
        raise ValueError(f"AES works on {BLOCK_SIZE}-byte blocks, got {len(data)} bytes")
    return data


class AESEncryptor:
    """AES-128, AES-192 or AES-256 applied to independent 16-byte blocks."""

    def __init__(self, key: bytes) -> None:
        key = bytes(key)
        if len(key) not in _KEY_SIZES:
            raise ValueError(f"invalid AES key size {len(key)}")
        self._cipher = Cipher(algorithms.AES(key), modes.ECB())

    def encrypt(self, src: bytes) -> bytes:
        """Encrypt one 16-byte block."""
        encryptor = self._cipher.encryptor()
        return encryptor.update(_check_block(src)) + encryptor.finalize()

    def decrypt(self, src: bytes) -> bytes:
        """Decrypt one 16-byte block."""
        decryptor = self._cipher.decryptor()
        return decryptor.update(_check_block(src)) + decryptor.finalize()

    def encrypt_blocks(self, src: bytes) -> bytes:
        """Encrypt each 16-byte block of src independently."""
        src = bytes(src)
        if len(src) % BLOCK_SIZE:
            raise ValueError("aes: input not full blocks")
        encryptor = self._cipher.encryptor()
        return encryptor.update(src) + encryptor.finalize()


def aes_1r(src: bytes, key: bytes) -> bytes:
    """Encrypt one block with a single key."""
    return AESEncryptor(key).encrypt(src)


def aes_4r(state: bytes, key1: bytes, key2: bytes, key3: bytes, key4: bytes) -> bytes:
    """Encrypt one block successively under four keys and return the result."""
    block = _check_block(state)
    for key in (key1, key2, key3, key4):
        block = AESEncryptor(key).encrypt(block)
    return block