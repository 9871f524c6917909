"""VM programs decoded from Blake2b entropy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Tuple

from rxhash.primitives.blake2b import blake2b_512

PROGRAM_LENGTH = 256
INSTRUCTION_SIZE = 8
PROGRAM_SIZE = PROGRAM_LENGTH * INSTRUCTION_SIZE


@dataclass(frozen=True)
class Instruction:
    """One VM instruction: opcode, destination and source registers, modifier, immediate."""

    opcode: int
    dst: int
    src: int
    mod: int
    imm: int


@dataclass(frozen=True)
class Program:
    """A fixed-length sequence of instructions."""

    instructions: Tuple[Instruction, ...]

    def __post_init__(self) -> None:
        if len(self.instructions) != PROGRAM_LENGTH:
            raise ValueError(
                f"a program holds {PROGRAM_LENGTH} instructions, "
                f"got {len(self.instructions)}"
            )

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __len__(self) -> int:
        return len(self.instructions)

    def execute(self, vm: Any) -> None:
        """Run every instruction, in order, on a VM with an execute_instruction method."""
        for instruction in self.instructions:
            vm.execute_instruction(instruction)


def hash_program_entropy(data: bytes) -> bytes:
    """Return PROGRAM_SIZE bytes: Blake2b-512 of data, then repeated rehashes of it."""
    block = blake2b_512(data)
    parts = [block]
    while len(parts) * len(block) < PROGRAM_SIZE:
        block = blake2b_512(block)
        parts.append(block)
    return b"".join(parts)[:PROGRAM_SIZE]


def decode_instruction(data: bytes) -> Instruction:
    """Decode the first 8 bytes of data, read as a little-endian word, into an instruction."""
    data = bytes(data)
    if len(data) < INSTRUCTION_SIZE:
        raise ValueError(
            f"an instruction needs {INSTRUCTION_SIZE} bytes, got {len(data)}"
        )
    raw = int.from_bytes(data[:INSTRUCTION_SIZE], "little")
    return Instruction(
        opcode=raw & 0xFF,
        dst=(raw >> 8) & 0x07,
        src=(raw >> 16) & 0x07,
        mod=(raw >> 24) & 0xFF,
        imm=raw >> 32,
    )


def generate_program(data: bytes) -> Program:
    """Generate the program determined by data."""
    entropy = hash_program_entropy(data)
    return Program(
        tuple(
            decode_instruction(entropy[offset : offset + INSTRUCTION_SIZE])
            for offset in range(0, PROGRAM_SIZE, INSTRUCTION_SIZE)
        )
    )