"""Argon2d, the data-dependent Argon2 variant used to build the RandomX cache."""

__all__ = ["block", "g", "indexing", "blake2b_long", "compression", "core", "hashing"]