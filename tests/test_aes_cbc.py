import os

import pytest

from samkit.aes_cbc import AesCbc

KEY128 = bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c")
KEY256 = bytes.fromhex(
    "603deb1015ca71be2b73aef0857d77811f352c073b6108d72d9810a30914dff4"
)
IV = bytes(range(16))
PLAIN = bytes.fromhex(
    "6bc1bee22e409f96e93d7e117393172a" "ae2d8a571e03ac9c9eb76fac45af8e51"
)


def test_aes128_cbc_known_vector():
    ct = AesCbc(KEY128, IV).encrypt(PLAIN)
    assert ct == bytes.fromhex(
        "7649abac8119b246cee98e9b12e9197d" "5086cb9b507219ee95db113a917678b2"
    )


def test_aes256_cbc_known_vector_first_block():
    ct = AesCbc(KEY256, IV).encrypt(PLAIN[:16])
    assert ct == bytes.fromhex("f58c4c04d6e5f1ba779eabfb5f7bfbd6")


@pytest.mark.parametrize("key", [KEY128, KEY256])
def test_round_trip(key):
    data = os.urandom(16 * 5)
    ct = AesCbc(key, IV, encrypt=True).encrypt(data)
    assert ct != data
    assert AesCbc(key, IV, encrypt=False).decrypt(ct) == data


def test_chaining_across_calls_matches_single_call():
    data = os.urandom(64)
    whole = AesCbc(KEY128, IV).encrypt(data)
    ctx = AesCbc(KEY128, IV)
    pieces = ctx.encrypt(data[:16]) + ctx.encrypt(data[16:48]) + ctx.encrypt(data[48:])
    assert pieces == whole
    assert ctx.iv == whole[-16:]


def test_decrypt_chaining_across_calls():
    data = os.urandom(48)
    ct = AesCbc(KEY256, IV).encrypt(data)
    ctx = AesCbc(KEY256, IV)
    assert ctx.decrypt(ct[:32]) + ctx.decrypt(ct[32:]) == data


def test_decrypt_ignores_trailing_partial_block():
    ct = AesCbc(KEY128, IV).encrypt(PLAIN)
    assert AesCbc(KEY128, IV).decrypt(ct + b"xyz") == PLAIN


def test_empty_input():
    assert AesCbc(KEY128, IV).encrypt(b"") == b""
    assert AesCbc(KEY128, IV).decrypt(b"") == b""


def test_encrypt_misaligned_raises():
    with pytest.raises(ValueError):
        AesCbc(KEY128, IV).encrypt(b"x" * 17)


@pytest.mark.parametrize("key", [b"", bytes(24), bytes(15)])
def test_bad_key_length(key):
    with pytest.raises(ValueError):
        AesCbc(key, IV)


def test_bad_iv_length():
    with pytest.raises(ValueError):
        AesCbc(KEY128, bytes(8))


def test_missing_key_or_iv():
    with pytest.raises(ValueError):
        AesCbc(None, IV)
    with pytest.raises(ValueError):
        AesCbc(KEY128, None)


def test_direction_enforced():
    with pytest.raises(PermissionError):
        AesCbc(KEY128, IV, encrypt=True).decrypt(bytes(16))
    with pytest.raises(PermissionError):
        AesCbc(KEY128, IV, encrypt=False).encrypt(bytes(16))


def test_key_bits():
    assert AesCbc(KEY128, IV).key_bits == 128
    assert AesCbc(KEY256, IV).key_bits == 256