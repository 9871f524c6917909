"""Argon2d parameter sets and entry points for cache generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from rxhash.argon2d import hashing


@dataclass
class Argon2Config:
    """Argon2 parameters: passes, memory in KB, lanes, output length and salt."""

    time: int
    memory: int
    threads: int
    output_len: int
    salt: Optional[bytes] = None


def default_randomx_argon2_config(salt: Optional[bytes]) -> Argon2Config:
    """Return the parameters RandomX uses, with the given salt."""
    return Argon2Config(time=3, memory=262144, threads=1, output_len=262144, salt=salt)


def argon2d(password: bytes, config: Argon2Config) -> bytes:
    """Compute an Argon2d hash with the given configuration."""
    salt = config.salt if config.salt is not None else b""
    return hashing.argon2d(
        password, salt, config.time, config.memory, config.threads, config.output_len
    )


def argon2d_cache(key: bytes) -> bytes:
    """Return the 256 MB RandomX cache memory derived from key."""
    return hashing.argon2d_cache(key)