# ============================================================================
# KEY MATERIAL
# ============================================================================
# STATUS: Crypto - Seed / key handling
# PURPOSE: Turn caller-supplied seeds or keys into 32-byte AES keys
# CREATED: 19 OCT 2026
# ============================================================================
"""
Key Material

Callers hand the SDK either a seed (to be hashed into a key) or a ready
32-byte key. Raw bytes are ambiguous: a 32-byte seed looks exactly like a
key. Wrap the value to say which one it is:

    Seed(b"my-passphrase")       -> always hashed
    SymmetricKey(key_bytes)      -> used as-is, must be 32 bytes
    b"..."                       -> legacy: used as-is when 32 bytes long,
                                    hashed otherwise

derive_key_from_seed is a single SHA-256 pass, not a real KDF. It is kept
for compatibility with existing commitments and should be replaced with
HKDF (salt + context) before handling production secrets.
"""

from dataclasses import dataclass
from typing import Union

from zkprime.core.errors import CryptoError
from zkprime.crypto.hashing import sha256

KEY_SIZE = 32  # AES-256


@dataclass(frozen=True)
class Seed:
    """Seed material that must be hashed into a key."""
    material: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.material, (bytes, bytearray)):
            raise CryptoError("Seed material must be bytes")


@dataclass(frozen=True)
class SymmetricKey:
    """A ready-to-use 32-byte AES key."""
    material: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.material, (bytes, bytearray)):
            raise CryptoError("Key material must be bytes")
        if len(self.material) != KEY_SIZE:
            raise CryptoError(f"Key must be {KEY_SIZE} bytes (256 bits)")


KeyMaterial = Union[Seed, SymmetricKey, bytes, bytearray]


def derive_key_from_seed(seed: Union[bytes, bytearray]) -> bytes:
    """Derive a 32-byte key as SHA-256(seed)."""
    if not isinstance(seed, (bytes, bytearray)):
        raise CryptoError("Seed must be bytes")
    return sha256(seed)


def normalize_key(seed_or_key: KeyMaterial) -> bytes:
    """
    Resolve caller key material to a 32-byte AES key.

    Args:
        seed_or_key: Seed, SymmetricKey, or raw bytes (legacy length rule)

    Returns:
        32-byte key

    Raises:
        CryptoError for unsupported input types
    """
    if isinstance(seed_or_key, SymmetricKey):
        return bytes(seed_or_key.material)
    if isinstance(seed_or_key, Seed):
        return derive_key_from_seed(seed_or_key.material)
    if isinstance(seed_or_key, (bytes, bytearray)):
        if len(seed_or_key) == KEY_SIZE:
            return bytes(seed_or_key)
        return derive_key_from_seed(seed_or_key)
    raise CryptoError("seed_or_key must be bytes, Seed or SymmetricKey")


__all__ = [
    "KEY_SIZE",
    "Seed",
    "SymmetricKey",
    "KeyMaterial",
    "derive_key_from_seed",
    "normalize_key",
]
