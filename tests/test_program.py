import hashlib

import pytest

from rxhash.program import (
    PROGRAM_LENGTH,
    PROGRAM_SIZE,
    Instruction,
    Program,
    decode_instruction,
    generate_program,
    hash_program_entropy,
)


class _RecordingVM:
    def __init__(self):
        self.seen = []

    def execute_instruction(self, instruction):
        self.seen.append(instruction)


def test_decode_fields():
    instr = decode_instruction(bytes([1, 2, 3, 4, 5, 6, 7, 8]))
    assert instr == Instruction(opcode=1, dst=2, src=3, mod=4, imm=0x08070605)


def test_decode_masks_registers():
    instr = decode_instruction(bytes([0xAB, 0xFF, 0xFE, 0xCD, 0, 0, 0, 0]))
    assert instr.opcode == 0xAB
    assert instr.dst == 0xFF & 7
    assert instr.src == 0xFE & 7
    assert instr.mod == 0xCD
    assert instr.imm == 0


def test_decode_uses_first_eight_bytes():
    raw = bytes([9, 1, 2, 3, 4, 5, 6, 7])
    assert decode_instruction(raw + b"\xff\xff") == decode_instruction(raw)


def test_decode_short_input_rejected():
    with pytest.raises(ValueError):
        decode_instruction(bytes(7))


def test_entropy_chain():
    data = b"program input"
    entropy = hash_program_entropy(data)
    assert len(entropy) == PROGRAM_SIZE
    assert entropy[:64] == hashlib.blake2b(data, digest_size=64).digest()
    for offset in range(64, PROGRAM_SIZE, 64):
        previous = entropy[offset - 64 : offset]
        assert entropy[offset : offset + 64] == hashlib.blake2b(
            previous, digest_size=64
        ).digest()


def test_generate_program_decodes_entropy():
    data = b"program input"
    program = generate_program(data)
    entropy = hash_program_entropy(data)
    assert len(program) == PROGRAM_LENGTH
    for i, instr in enumerate(program):
        assert instr == decode_instruction(entropy[8 * i : 8 * i + 8])


def test_generate_program_deterministic_and_input_sensitive():
    assert generate_program(b"a") == generate_program(b"a")
    assert generate_program(b"a").instructions != generate_program(b"b").instructions
    assert len(generate_program(b"b")) == PROGRAM_LENGTH


def test_instruction_fields_in_range():
    for instr in generate_program(b"range check"):
        assert 0 <= instr.opcode < 256
        assert 0 <= instr.dst < 8
        assert 0 <= instr.src < 8
        assert 0 <= instr.mod < 256
        assert 0 <= instr.imm < 2**32


def test_execute_runs_every_instruction_in_order():
    program = generate_program(b"run me")
    vm = _RecordingVM()
    program.execute(vm)
    assert vm.seen == list(program.instructions)


def test_program_length_checked():
    instr = Instruction(0, 0, 0, 0, 0)
    with pytest.raises(ValueError):
        Program((instr,) * (PROGRAM_LENGTH - 1))