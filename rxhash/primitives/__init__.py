"""Blake2b, AES and Argon2 helpers shared by the RandomX components."""

__all__ = ["blake2b", "aes", "argon2"]