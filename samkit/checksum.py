"""Internet checksum (RFC 1071)."""

from __future__ import annotations


def chksum16(data: bytes) -> int:
    """Return the 16-bit one's complement checksum of data.

    Words are read little-endian; a trailing odd byte counts as a word with
    a zero high byte. The sum is folded once, which suits buffers up to 64k.
    Storing the result little-endian gives the checksum in network order.
    """
    data = bytes(data)
    if len(data) % 2:
        data += b"\x00"
    total = sum(int.from_bytes(data[i:i + 2], "little") for i in range(0, len(data), 2))
    shift = total >> 16
    if shift:
        total = (total & 0xFFFF) + shift
    return ~total & 0xFFFF