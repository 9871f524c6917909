"""Building blocks for the RandomX proof-of-work hash: Argon2d, generators, programs, cache and dataset."""

__version__ = "0.1.0"