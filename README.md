# samkit

A small collection of helpers in pure Python with no dependencies.

## Modules

- `samkit.aes_core`: the AES block primitives for 128- and 256-bit keys.
  `expand_key(key)` returns the round keys (one 16-byte block per round) for a
  16- or 32-byte key; `encrypt_block(block, round_keys)` and
  `decrypt_block(block, round_keys)` work on one 16-byte block. Wrong key or
  block lengths raise `ValueError`. `BLOCK_SIZE` is 16.
- `samkit.aes_cbc`: `AesCbc(key, iv, encrypt=None)`, an AES-CBC context. The
  chaining value carries over between calls, so a long message can be processed
  in several pieces; the current value is available as `iv`, and the key size
  as `key_bits`. `encrypt=True` allows only encryption, `False` only decryption,
  `None` either; calling the other direction raises `PermissionError`.
  `encrypt(data)` requires a whole number of blocks (`ValueError` otherwise);
  `decrypt(data)` decrypts the whole blocks and ignores a trailing partial one.
- `samkit.ecb`: `Aes128Ecb(key)` with `encrypt_block` and `decrypt_block` for
  single 16-byte AES-128 blocks, and its 176-byte schedule as `expanded_key`.
  `expand_key_128(key)` returns that schedule for a 16-byte key. ECB gives
  equal ciphertext for equal plaintext blocks; use it for small buffers only.
- `samkit.b64`: `encode(data, url_safe=False)` returns padded base64 text in the
  standard or URL-safe alphabet; `decode(text)` accepts either alphabet, decodes
  whole 4-character blocks, ignores trailing characters and raises `ValueError`
  on invalid input. `encoded_len(length)` and `decoded_len(length)` give sizes.
- `samkit.checksum`: `chksum16(data)`, the 16-bit Internet checksum (RFC 1071),
  folded once, which suits buffers up to 64k.
- `samkit.sizes`:
  - `get_duration(text)`: seconds from text like `"90"`, `"1.5h"` or `"2d"`
    (units d, h, m, s in either case).
  - `nice_duration(seconds)`: e.g. `"1h2m5s"`.
  - `get_mem_len(text)`: bytes from decimal, octal or hex text with an optional
    t, g, m, k or b unit.
  - `nice_mem_len(size)`: `(value, unit)` with the largest of T, G, M, K that
    divides the size exactly, or `" "`.
  - `nicer_mem_len(size)`: text like `"4K"` or `"1.5M"`.
  - `nice_number(number)`: adds thousands separators.

  Unknown units raise `ValueError`.
- `samkit.hexdump`: `dump_lines(data)` yields lines of offset, 16 hex bytes and
  printable text; `binary_dump(data, out=None)` writes them to `out` or
  standard output.
- `samkit.fileops`: `copy_file(source, target)` copies a file, gives a new
  target the source's permission bits and returns the number of bytes copied.
  It raises `OSError` when a file cannot be opened or the copy fails.

## Install

```
pip install .
```

## Examples

```python
from samkit.aes_cbc import AesCbc
from samkit import b64, sizes

key = bytes(16)
iv = bytes(16)
ciphertext = AesCbc(key, iv, encrypt=True).encrypt(b"sixteen byte msg")
plaintext = AesCbc(key, iv, encrypt=False).decrypt(ciphertext)

b64.encode(b"hello")                   # 'aGVsbG8='
sizes.get_mem_len("4k")                # 4096
sizes.nice_duration(3725)              # '1h2m5s'
sizes.nice_number(1234567)             # '1,234,567'
```

## What it does not do

- It does not pad messages. CBC and ECB input must be a whole number of
  16-byte blocks, and padding is left to the caller.
- It has no AES-192 and no other cipher modes than CBC and ECB.
- It is written for correctness, not speed, and uses no hardware AES support.
- It installs no command-line programs; everything is used from Python.

## Tests

```
pip install .[test]
pytest
```