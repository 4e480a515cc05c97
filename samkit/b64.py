"""Base64 per RFC 4648.

Encodes with the standard or the URL-safe alphabet, always padded; decoding
accepts either alphabet.
"""

from __future__ import annotations

import base64

_PAD = "="

_REVERSE = {ch: i for i, ch in enumerate(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
)}
_REVERSE["-"] = 62
_REVERSE["_"] = 63


def encode(data: bytes, url_safe: bool = False) -> str:
    """Encode data to padded base64 text."""
    data = bytes(data)
    encoded = base64.urlsafe_b64encode(data) if url_safe else base64.b64encode(data)
    return encoded.decode("ascii")


def _decode_block(block: str) -> bytes:
    values: list[int] = []
    for ch in block:
        if ch == _PAD:
            break
        try:
            values.append(_REVERSE[ch])
        except KeyError:
            raise ValueError(f"invalid base64 character {ch!r}") from None
    if len(values) < 2:
        raise ValueError(f"invalid base64 block {block!r}")
    out = bytearray([((values[0] << 2) & 0xFC) | ((values[1] >> 4) & 0x03)])
    if len(values) > 2:
        out.append(((values[1] << 4) & 0xF0) | ((values[2] >> 2) & 0x0F))
    if len(values) > 3:
        out.append(((values[2] << 6) & 0xC0) | (values[3] & 0x3F))
    return bytes(out)


def decode(text: str | bytes) -> bytes:
    """Decode base64 text in either alphabet.

    Only whole 4-character blocks are decoded; trailing characters are
    ignored. Raises ValueError on invalid input.
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("latin-1")
    whole = len(text) - len(text) % 4
    return b"".join(_decode_block(text[start:start + 4]) for start in range(0, whole, 4))


def encoded_len(length: int) -> int:
    """Return the encoded length of ``length`` input bytes."""
    return (length + 2) // 3 * 4


def decoded_len(length: int) -> int:
    """Return the largest decoded length of ``length`` encoded characters."""
    return length // 4 * 3