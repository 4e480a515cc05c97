"""Parsing and pretty-printing of durations, memory sizes and large numbers."""

from __future__ import annotations

import re

ONE_MINUTE = 60
ONE_HOUR = 60 * ONE_MINUTE
ONE_DAY = 24 * ONE_HOUR

_UINT64_MASK = (1 << 64) - 1

_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")

# Each duration unit multiplies step by step down to seconds.
_DURATION_FACTORS = {
    "d": (24.0, 60.0, 60.0),
    "h": (60.0, 60.0),
    "m": (60.0,),
    "s": (),
    "": (),
}

_MEM_SHIFTS = {"t": 40, "g": 30, "m": 20, "k": 10, "b": 0, "": 0}


def get_duration(text: str) -> int:
    """Return a duration in whole seconds.

    The number may be fractional and may be followed by one of the units
    d, h, m or s (either case); no unit means seconds.
    """
    match = _FLOAT_PREFIX.match(text)
    if match:
        value = float(match.group())
        rest = text[match.end():]
    else:
        value = 0.0
        rest = text
    suffix = rest[:1]
    try:
        factors = _DURATION_FACTORS[suffix.lower()]
    except KeyError:
        raise ValueError(f"Invalid size {rest}") from None
    for factor in factors:
        value *= factor
    if value < 0:
        raise ValueError(f"Negative duration {text}")
    return int(value)


def nice_duration(seconds: int) -> str:
    """Format seconds as days, hours, minutes and seconds, e.g. ``1h5s``."""
    if seconds < 0:
        raise ValueError("duration must not be negative")
    parts: list[str] = []
    for unit, letter in ((ONE_DAY, "d"), (ONE_HOUR, "h"), (ONE_MINUTE, "m")):
        if seconds >= unit:
            count, seconds = divmod(seconds, unit)
            parts.append(f"{count}{letter}")
    if seconds or not parts:
        parts.append(f"{seconds}s")
    return "".join(parts)


def _parse_unsigned(text: str) -> tuple[int, str]:
    match = _INT_PREFIX.match(text)
    if not match:
        return 0, text
    sign, digits = match.groups()
    if digits[:2].lower() == "0x":
        value = int(digits[2:], 16)
    elif digits.startswith("0"):
        value = int(digits, 8) if len(digits) > 1 else 0
    else:
        value = int(digits, 10)
    value = min(value, _UINT64_MASK)
    if sign == "-":
        value = -value & _UINT64_MASK
    return value, text[match.end():]


def get_mem_len(text: str) -> int:
    """Return a memory length in bytes.

    The number may be decimal, octal (leading 0) or hex (leading 0x), and
    may be followed by one of the units t, g, m, k or b (either case).
    """
    value, rest = _parse_unsigned(text)
    try:
        shift = _MEM_SHIFTS[rest[:1].lower()]
    except KeyError:
        raise ValueError(f"Invalid size {rest}") from None
    return (value << shift) & _UINT64_MASK


def nice_mem_len(size: int) -> tuple[int, str]:
    """Return ``(value, unit)`` using the largest unit that divides size exactly.

    The unit is one of T, G, M, K, or a space when no unit applies.
    """
    if size:
        for shift, letter in ((40, "T"), (30, "G"), (20, "M"), (10, "K")):
            if size & ((1 << shift) - 1) == 0:
                return size >> shift, letter
    return size, " "


def nicer_mem_len(size: int) -> str:
    """Format size with a G, M or K unit, using one decimal when not exact."""
    for shift, letter in ((30, "G"), (20, "M"), (10, "K")):
        if size >= 1 << shift:
            if size & ((1 << shift) - 1) == 0:
                return f"{size >> shift}{letter}"
            return f"{size / (1 << shift):.1f}{letter}"
    return str(size)


def nice_number(number: int) -> str:
    """Format an integer with commas between groups of three digits."""
    return format(number, ",")