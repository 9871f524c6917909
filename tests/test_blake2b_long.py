import hashlib

import pytest

from rxhash.argon2d.blake2b_long import blake2b_long


@pytest.mark.parametrize(
    "data, outlen",
    [
        (b"", 32),
        (b"test", 64),
        (b"RandomX", 16),
        (b"a", 1),
        (b"test", 65),
        (b"RandomX", 128),
        (b"Monero", 256),
        (b"test key 000", 1024),
        (b"test", 63),
    ],
)
def test_output_length(data, outlen):
    assert len(blake2b_long(data, outlen)) == outlen


def test_zero_length_gives_empty_output():
    assert blake2b_long(b"test", 0) == b""


def test_deterministic():
    data = b"test key 000"
    first = blake2b_long(data, 128)
    expected_head = hashlib.blake2b(b"\x80\x00\x00\x00" + data).digest()[:32]
    assert first[:32] == expected_head
    assert blake2b_long(data, 128) == first


def test_different_inputs_differ():
    assert blake2b_long(b"input1", 64) != blake2b_long(b"input2", 64)


def test_length_prefix_changes_initial_bytes():
    assert blake2b_long(b"test", 128)[:32] != blake2b_long(b"test", 256)[:32]


def test_block_sized_output_starts_with_first_hash_half():
    data = b"test key 000"
    result = blake2b_long(data, 1024)
    expected_head = hashlib.blake2b(b"\x00\x04\x00\x00" + data).digest()[:32]
    assert result[:32] == expected_head


def test_short_output_is_blake2b_of_length_prefixed_input():
    expected = hashlib.blake2b(b"\x20\x00\x00\x00", digest_size=32).digest()
    assert blake2b_long(b"", 32) == expected


def test_long_output_does_not_repeat_chunks():
    result = blake2b_long(b"test", 1024)
    chunks = {result[i:i + 32] for i in range(0, 1024, 32)}
    assert len(chunks) == 32


@pytest.mark.parametrize("outlen", [-1, 1 << 32])
def test_rejects_out_of_range_length(outlen):
    with pytest.raises(ValueError):
        blake2b_long(b"test", outlen)