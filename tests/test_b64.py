import os

import pytest

from samkit.b64 import decode, decoded_len, encode, encoded_len


def test_rfc_vector():
    assert encode(b"foobar") == "Zm9vYmFy"
    assert decode("Zm9vYmFy") == b"foobar"


def test_padding_one_byte():
    assert encode(b"f") == "Zg=="


@pytest.mark.parametrize("size", range(0, 20))
def test_round_trip(size):
    data = os.urandom(size)
    assert decode(encode(data)) == data
    assert decode(encode(data, url_safe=True)) == data


@pytest.mark.parametrize("size", range(0, 20))
def test_encoded_len_matches(size):
    data = bytes(range(size))
    text = encode(data)
    assert len(text) == encoded_len(size)
    assert decoded_len(len(text)) >= size
    assert decoded_len(len(text)) - size < 3


def test_url_safe_alphabet():
    data = b"\xfb\xff\xfe"
    standard = encode(data)
    url = encode(data, url_safe=True)
    assert "+" in standard or "/" in standard
    assert "+" not in url and "/" not in url
    assert url == standard.replace("+", "-").replace("/", "_")


def test_decode_accepts_mixed_alphabets():
    data = b"\xfb\xff\xfe\xfb\xef"
    assert decode(encode(data).replace("/", "_")) == data


def test_decode_bytes_input():
    assert decode(encode(b"hello").encode("ascii")) == b"hello"


def test_trailing_partial_block_ignored():
    data = b"abcdef"
    assert decode(encode(data) + "QU") == data


def test_invalid_character():
    with pytest.raises(ValueError):
        decode("ab*d")


def test_leading_padding_is_invalid():
    with pytest.raises(ValueError):
        decode("=abc")