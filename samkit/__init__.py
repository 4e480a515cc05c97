"""Small utilities: AES (CBC and ECB), base64, the Internet checksum, size and duration helpers, hex dumps and file copying."""

__version__ = "0.1.0"