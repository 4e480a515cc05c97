"""Hex dumps of binary data: offset, 16 hex bytes, then printable text."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

_BYTES_PER_LINE = 16


def _printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte < 0x7F else "."


def dump_lines(data: bytes) -> Iterator[str]:
    """Yield the dump of data one line at a time, without newlines."""
    data = bytes(data)
    width = 4 if len(data) <= 0x10000 else 8
    for addr in range(0, len(data), _BYTES_PER_LINE):
        chunk = data[addr:addr + _BYTES_PER_LINE]
        hex_part = "".join(f"{b:02x} " for b in chunk)
        padding = "   " * (_BYTES_PER_LINE - len(chunk))
        text = "".join(_printable(b) for b in chunk)
        yield f"{addr:>{width}x}: {hex_part}{padding} {text}"


def binary_dump(data: bytes, out: TextIO | None = None) -> None:
    """Write the dump of data to out, standard output by default."""
    stream = sys.stdout if out is None else out
    for line in dump_lines(data):
        stream.write(line + "\n")