# rxhash

Pure-Python building blocks for the RandomX proof-of-work hash: Argon2d
cache generation, Blake2b and AES based generators, program decoding,
instruction-type lookup and dataset items.

Its only runtime dependency is `cryptography`, used for AES.

## Argon2d

`rxhash.argon2d.hashing.argon2d(password, salt, time_cost, memory_size_kb, lanes, tag_length)`
computes an Argon2d tag. The memory size is in KiB, one 1024-byte block per KiB.

```python
from rxhash.argon2d.hashing import argon2d

password = b"password"
tag = argon2d(password, b"somesalt", 1, 256, 1, 32)
assert len(tag) == 32
```

`argon2d_cache(key)` runs Argon2d with the RandomX parameters (262144 KiB,
three passes, one lane, salt `b"RandomX\x03"`) and returns the whole filled
memory, 256 MiB, instead of a finalised tag. In pure Python this is slow and
memory-hungry.

The same module exposes the steps on their own: `initial_hash` (the 64-byte
H0), `initialize_memory` (the first two blocks of each lane from H0) and
`finalize_hash` (XOR of the first lane's blocks, hashed to the tag length).

### Lower-level pieces

- `rxhash.argon2d.block`: `Block`, 128 unsigned 64-bit words with `xor`,
  `copy_from`, `copy`, `zero`, `from_bytes` and `to_bytes`.
  `Block.from_bytes` raises `InvalidBlockSizeError` (a `ValueError`) for
  anything but exactly 1024 bytes.
- `rxhash.argon2d.g`: `g`, `rotr64` and `g_round`, the Blake2b mixing with
  the fBlaMka multiplication.
- `rxhash.argon2d.indexing`: `Position` and `index_alpha`, the
  data-dependent choice of reference block; `SYNC_POINTS` is 4.
- `rxhash.argon2d.blake2b_long`: `blake2b_long(data, outlen)`, Blake2b output
  of any length; `outlen` 0 gives `b""`.
- `rxhash.argon2d.compression`: `fill_block` and `apply_blake2b_round`.
- `rxhash.argon2d.core`: `fill_memory` and `fill_segment`.

```python
from rxhash.argon2d.block import Block
from rxhash.argon2d.blake2b_long import blake2b_long
from rxhash.argon2d.g import rotr64

block = Block.from_bytes(blake2b_long(b"seed", 1024))
assert len(block.to_bytes()) == 1024
assert rotr64(0x123456789ABCDEF0, 8) == 0xF0123456789ABCDE
```

## Primitives

- `rxhash.primitives.blake2b`: `blake2b_256`, `blake2b_512`,
  `blake2b_hash(data, Blake2bConfig(output_size, key))` and the streaming
  `Blake2bStream(size, key)` with `write`, `digest` and `reset`.
- `rxhash.primitives.aes`: `AESEncryptor(key)` for 16, 24 or 32-byte keys,
  with `encrypt`, `decrypt` (one 16-byte block) and `encrypt_blocks`
  (independent blocks); `aes_1r` and `aes_4r` encrypt one block under one or
  four keys.
- `rxhash.primitives.argon2`: `Argon2Config`, `default_randomx_argon2_config`,
  `argon2d(password, config)` and `argon2d_cache(key)`.

```python
from rxhash.primitives.blake2b import blake2b_512, Blake2bStream
from rxhash.primitives.aes import AESEncryptor

digest = blake2b_512(b"data")           # 64 bytes

stream = Blake2bStream(32, b"")
stream.write(b"da")
stream.write(b"ta")
short_digest = stream.digest()          # 32 bytes

enc = AESEncryptor(bytes(16))
block = enc.encrypt(bytes(16))
assert enc.decrypt(block) == bytes(16)
```

## Generators

```python
from rxhash.blake2_generator import Blake2Generator
from rxhash.aes_generator import AesGenerator1R, AesGenerator4R, AesHash1R

gen = Blake2Generator(b"seed")
value = gen.get_uint32()

aes_gen = AesGenerator1R(bytes(64))     # the seed must be 64 bytes
chunk = aes_gen.get_bytes(128)

fingerprint = AesHash1R().hash(chunk)   # 64 bytes
```

`AesGenerator1R` and `AesGenerator4R` offer `get_byte`, `get_bytes`,
`get_uint32` and `generate`; `AesGenerator4R.set_state` replaces the state.
A `get_uint32` never spans two states: a tail shorter than four bytes is
skipped. A seed that is not 64 bytes raises `ValueError`. All generators are
deterministic.

## Programs and instructions

```python
from rxhash.program import generate_program, decode_instruction
from rxhash.instructions import get_instruction_type, InstructionType

program = generate_program(b"input")    # 256 instructions
instr = decode_instruction(bytes(8))
assert get_instruction_type(instr.opcode) is InstructionType.IADD_RS
```

`rxhash.instructions` also provides `int128mul` (signed high half of a
64×64-bit product), `reciprocal_approx` and `mask_float`.

## Cache and dataset

`Cache(seed)` builds the 256 MiB cache from a non-empty seed (an empty seed
raises `ValueError`); `Cache.from_data(key, data)` wraps memory you already
have. `get_item(index)` returns a 64-byte item, wrapping indices past the end.
`Dataset(cache)` expands a cache into all 2080 MiB of dataset items, and
`Dataset.generate_item` derives a single one. Both support `with` blocks and
`release()`.

`rxhash.memory` holds a pool of 2 MiB scratchpads (`allocate_scratchpad`,
`release_scratchpad`) and the helpers `allocate_aligned_dataset`,
`copy_bytes` and `zero_bytes`.

## What it does not do

There is no virtual machine here: `Program.execute` only hands each
instruction to an object you supply that has an `execute_instruction`
method, and the package has no instruction interpreter of its own. It
therefore does not compute a final RandomX hash, and it has no command-line
tool.