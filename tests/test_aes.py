import pytest

from rxhash.primitives.aes import AESEncryptor, aes_1r, aes_4r

KEY = bytes(range(16))
PLAIN = bytes.fromhex("00112233445566778899aabbccddeeff")


def test_fips197_aes128_vector():
    assert AESEncryptor(KEY).encrypt(PLAIN).hex() == "69c4e0d86a7b0430d8cdb78070b4c55a"


@pytest.mark.parametrize("size", [16, 24, 32])
def test_round_trip(size):
    enc = AESEncryptor(bytes(range(size)))
    assert enc.decrypt(enc.encrypt(PLAIN)) == PLAIN


@pytest.mark.parametrize("size", [0, 15, 17, 64])
def test_invalid_key_size(size):
    with pytest.raises(ValueError):
        AESEncryptor(bytes(size))


def test_encrypt_requires_full_block():
    with pytest.raises(ValueError):
        AESEncryptor(KEY).encrypt(b"short")


def test_encrypt_blocks_matches_single_blocks():
    enc = AESEncryptor(KEY)
    second = bytes(range(100, 116))
    assert enc.encrypt_blocks(PLAIN + second) == enc.encrypt(PLAIN) + enc.encrypt(second)


def test_encrypt_blocks_rejects_partial():
    with pytest.raises(ValueError):
        AESEncryptor(KEY).encrypt_blocks(bytes(20))


def test_aes_1r_matches_encryptor():
    assert aes_1r(PLAIN, KEY) == AESEncryptor(KEY).encrypt(PLAIN)


def test_aes_4r_inverted_by_reverse_decryption():
    keys = [bytes([i]) * 16 for i in range(1, 5)]
    out = aes_4r(PLAIN, *keys)
    assert out != PLAIN
    for key in reversed(keys):
        out = AESEncryptor(key).decrypt(out)
    assert out == PLAIN


def test_aes_4r_bad_key_raises():
    with pytest.raises(ValueError):
        aes_4r(PLAIN, KEY, KEY, KEY, b"bad")