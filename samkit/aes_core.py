"""AES block primitives: key schedule and single-block encryption/decryption.

Supports 128-bit and 256-bit keys. A state block is 16 bytes laid out
column by column, as in the AES specification.
"""

from __future__ import annotations

from typing import Sequence

BLOCK_SIZE = 16

_ROUNDS_BY_KEY_LEN = {16: 10, 32: 14}


def _xtime(value: int) -> int:
    value <<= 1
    if value & 0x100:
        value ^= 0x11B
    return value & 0xFF


def _gmul(a: int, b: int) -> int:
    result = 0
    while b:
        if b & 1:
            result ^= a
        a = _xtime(a)
        b >>= 1
    return result


def _build_sboxes() -> tuple[bytes, bytes]:
    inverse = [0] * 256
    for a in range(1, 256):
        for b in range(1, 256):
            if _gmul(a, b) == 1:
                inverse[a] = b
                break
    sbox = bytearray(256)
    for x in range(256):
        v = inverse[x]
        s = v
        for shift in range(1, 5):
            s ^= ((v << shift) | (v >> (8 - shift))) & 0xFF
        sbox[x] = s ^ 0x63
    inv_sbox = bytearray(256)
    for x, s in enumerate(sbox):
        inv_sbox[s] = x
    return bytes(sbox), bytes(inv_sbox)


_SBOX, _INV_SBOX = _build_sboxes()
_MUL = {c: bytes(_gmul(x, c) for x in range(256)) for c in (2, 3, 9, 11, 13, 14)}

_RCON = (0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1B, 0x36,
         0x6C, 0xD8, 0xAB, 0x4D, 0x9A)


def _sub_word(word: int) -> int:
    return int.from_bytes(bytes(_SBOX[b] for b in word.to_bytes(4, "big")), "big")


def _rot_word(word: int) -> int:
    return ((word << 8) | (word >> 24)) & 0xFFFFFFFF


def expand_key(key: bytes) -> tuple[bytes, ...]:
    """Return the round keys for a 16- or 32-byte key, one 16-byte block per round."""
    key = bytes(key)
    try:
        rounds = _ROUNDS_BY_KEY_LEN[len(key)]
    except KeyError:
        raise ValueError(f"key must be 16 or 32 bytes, got {len(key)}") from None
    nk = len(key) // 4
    words = [int.from_bytes(key[4 * i:4 * i + 4], "big") for i in range(nk)]
    for idx in range(nk, 4 * (rounds + 1)):
        temp = words[idx - 1]
        if idx % nk == 0:
            temp = _sub_word(_rot_word(temp)) ^ (_RCON[(idx - 1) // nk] << 24)
        elif nk > 6 and idx % nk == 4:
            temp = _sub_word(temp)
        words.append(words[idx - nk] ^ temp)
    return tuple(
        b"".join(w.to_bytes(4, "big") for w in words[4 * r:4 * r + 4])
        for r in range(rounds + 1)
    )


def _check(block: bytes, round_keys: Sequence[bytes]) -> None:
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(block)}")
    if len(round_keys) - 1 not in _ROUNDS_BY_KEY_LEN.values():
        raise ValueError("round keys must come from a 128- or 256-bit key schedule")


def _add_round_key(state: list[int], round_key: bytes) -> list[int]:
    return [s ^ k for s, k in zip(state, round_key)]


def _shift_rows(state: list[int]) -> list[int]:
    return [state[((c + r) % 4) * 4 + r] for c in range(4) for r in range(4)]


def _inv_shift_rows(state: list[int]) -> list[int]:
    return [state[((c - r) % 4) * 4 + r] for c in range(4) for r in range(4)]


def _mix_columns(state: list[int]) -> list[int]:
    m2, m3 = _MUL[2], _MUL[3]
    out: list[int] = []
    for c in range(4):
        a0, a1, a2, a3 = state[4 * c:4 * c + 4]
        out += [
            m2[a0] ^ m3[a1] ^ a2 ^ a3,
            a0 ^ m2[a1] ^ m3[a2] ^ a3,
            a0 ^ a1 ^ m2[a2] ^ m3[a3],
            m3[a0] ^ a1 ^ a2 ^ m2[a3],
        ]
    return out


def _inv_mix_columns(state: list[int]) -> list[int]:
    m9, m11, m13, m14 = _MUL[9], _MUL[11], _MUL[13], _MUL[14]
    out: list[int] = []
    for c in range(4):
        a0, a1, a2, a3 = state[4 * c:4 * c + 4]
        out += [
            m14[a0] ^ m11[a1] ^ m13[a2] ^ m9[a3],
            m9[a0] ^ m14[a1] ^ m11[a2] ^ m13[a3],
            m13[a0] ^ m9[a1] ^ m14[a2] ^ m11[a3],
            m11[a0] ^ m13[a1] ^ m9[a2] ^ m14[a3],
        ]
    return out


def encrypt_block(block: bytes, round_keys: Sequence[bytes]) -> bytes:
    """Encrypt one 16-byte block with the given round keys."""
    block = bytes(block)
    _check(block, round_keys)
    state = _add_round_key(list(block), round_keys[0])
    for round_key in round_keys[1:-1]:
        state = [_SBOX[b] for b in state]
        state = _mix_columns(_shift_rows(state))
        state = _add_round_key(state, round_key)
    state = _shift_rows([_SBOX[b] for b in state])
    return bytes(_add_round_key(state, round_keys[-1]))


def decrypt_block(block: bytes, round_keys: Sequence[bytes]) -> bytes:
    """Decrypt one 16-byte block with the given round keys."""
    block = bytes(block)
    _check(block, round_keys)
    state = _add_round_key(list(block), round_keys[-1])
    for round_key in reversed(round_keys[1:-1]):
        state = [_INV_SBOX[b] for b in _inv_shift_rows(state)]
        state = _inv_mix_columns(_add_round_key(state, round_key))
    state = [_INV_SBOX[b] for b in _inv_shift_rows(state)]
    return bytes(_add_round_key(state, round_keys[0]))