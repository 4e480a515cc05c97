"""AES-128 in ECB mode.

ECB encrypts each 16-byte block on its own, so equal plaintext blocks give
equal ciphertext blocks. Use it only for small buffers, such as single
blocks or keys.
"""

from __future__ import annotations

from samkit.aes_core import BLOCK_SIZE, decrypt_block, encrypt_block, expand_key

KEY_SIZE = 16
EXPANDED_KEY_SIZE = 176


def expand_key_128(key: bytes) -> bytes:
    """Return the 176-byte expanded key (11 round keys) for a 16-byte key."""
    if key is None:
        raise ValueError("key is required")
    key = bytes(key)
    if len(key) != KEY_SIZE:
        raise ValueError(f"key must be {KEY_SIZE} bytes, got {len(key)}")
    return b"".join(expand_key(key))


class Aes128Ecb:
    """An AES-128 context that encrypts and decrypts single blocks."""

    def __init__(self, key: bytes) -> None:
        expanded = expand_key_128(key)
        self._expanded = expanded
        self._round_keys = tuple(
            expanded[start:start + BLOCK_SIZE]
            for start in range(0, EXPANDED_KEY_SIZE, BLOCK_SIZE)
        )

    @property
    def expanded_key(self) -> bytes:
        """The 176-byte key schedule."""
        return self._expanded

    def encrypt_block(self, block: bytes) -> bytes:
        """Encrypt one 16-byte block."""
        return encrypt_block(bytes(block), self._round_keys)

    def decrypt_block(self, block: bytes) -> bytes:
        """Decrypt one 16-byte block."""
        return decrypt_block(bytes(block), self._round_keys)