# ============================================================================
# HASHING
# ============================================================================
# STATUS: Crypto - SHA-256 digests and hex commitments
# PURPOSE: Deterministic commitments over arbitrary payloads
# CREATED: 19 OCT 2026
# ============================================================================
"""
Hashing helpers.

Pure functions; str input is hashed as its UTF-8 encoding.
"""

import hashlib
from typing import Union


def sha256(data: Union[bytes, bytearray, str]) -> bytes:
    """Compute the 32-byte SHA-256 digest of data."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(bytes(data)).digest()


def to_hex(data: bytes) -> str:
    """Lowercase hex encoding."""
    return bytes(data).hex()


def hash_commitment(data: Union[bytes, bytearray, str]) -> str:
    """Hash and hex encode."""
    return to_hex(sha256(data))


__all__ = ["sha256", "to_hex", "hash_commitment"]
