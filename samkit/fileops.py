"""File helpers."""

from __future__ import annotations

import os
from functools import partial

_CHUNK = 65536
_O_BINARY = getattr(os, "O_BINARY", 0)


def copy_file(source: str | os.PathLike[str], target: str | os.PathLike[str]) -> int:
    """Copy source to target and return the number of bytes copied.

    A new target gets the source's permission bits (subject to the umask);
    an existing target is truncated. OSError is raised when either file
    cannot be opened or the copy fails.
    """
    in_fd = os.open(source, os.O_RDONLY | _O_BINARY)
    with open(in_fd, "rb") as src:
        mode = os.fstat(src.fileno()).st_mode & 0o7777
        out_fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC | _O_BINARY, mode)
        copied = 0
        with open(out_fd, "wb") as dst:
            for chunk in iter(partial(src.read, _CHUNK), b""):
                dst.write(chunk)
                copied += len(chunk)
    return copied