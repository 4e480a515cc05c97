"""AES in CBC mode for 128-bit and 256-bit keys."""

from __future__ import annotations

from samkit.aes_core import BLOCK_SIZE, decrypt_block, encrypt_block, expand_key


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


class AesCbc:
    """A CBC cipher context.

    The chaining value carries over between calls, so a long message may be
    processed in several pieces. ``encrypt`` restricts the context to one
    direction: True for encryption only, False for decryption only, None for
    either.
    """

    def __init__(self, key: bytes, iv: bytes, encrypt: bool | None = None) -> None:
        if key is None or iv is None:
            raise ValueError("key and iv are required")
        iv = bytes(iv)
        if len(iv) != BLOCK_SIZE:
            raise ValueError(f"iv must be {BLOCK_SIZE} bytes, got {len(iv)}")
        self._round_keys = expand_key(bytes(key))
        self._direction = encrypt
        self._ivec = iv

    @property
    def iv(self) -> bytes:
        """The current chaining value."""
        return self._ivec

    @property
    def key_bits(self) -> int:
        """The key size in bits."""
        return 128 if len(self._round_keys) == 11 else 256

    def encrypt(self, data: bytes) -> bytes:
        """Encrypt data whose length is a multiple of the block size."""
        if self._direction is False:
            raise PermissionError("context was set up for decryption")
        data = bytes(data)
        if len(data) % BLOCK_SIZE:
            raise ValueError(f"data length must be a multiple of {BLOCK_SIZE}")
        out = bytearray()
        feedback = self._ivec
        for start in range(0, len(data), BLOCK_SIZE):
            block = data[start:start + BLOCK_SIZE]
            feedback = encrypt_block(_xor(block, feedback), self._round_keys)
            out += feedback
        self._ivec = feedback
        return bytes(out)

    def decrypt(self, data: bytes) -> bytes:
        """Decrypt the whole blocks of data; a trailing partial block is ignored."""
        if self._direction is True:
            raise PermissionError("context was set up for encryption")
        data = bytes(data)
        whole = len(data) - len(data) % BLOCK_SIZE
        out = bytearray()
        feedback = self._ivec
        for start in range(0, whole, BLOCK_SIZE):
            block = data[start:start + BLOCK_SIZE]
            out += _xor(decrypt_block(block, self._round_keys), feedback)
            feedback = block
        self._ivec = feedback
        return bytes(out)