[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rxhash"
version = "0.1.0"
description = "Pure-Python building blocks for the RandomX proof-of-work hash: Argon2d cache generation, Blake2b and AES generators, program decoding and dataset items."
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = [
    "randomx",
    "argon2d",
    "blake2b",
    "proof-of-work",
    "hashing",
    "aes",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["rxhash"]

[tool.hatch.build.targets.sdist]
include = [
    "rxhash",
    "tests",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
