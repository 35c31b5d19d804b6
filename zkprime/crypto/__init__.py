# ============================================================================
# CRYPTO MODULE
# ============================================================================
# STATUS: Crypto module initialization
# PURPOSE: Export hashing, key handling and envelope codec
# CREATED: 19 OCT 2026
# ============================================================================

from zkprime.crypto.hashing import sha256, to_hex, hash_commitment
from zkprime.crypto.keys import (
    KEY_SIZE,
    Seed,
    SymmetricKey,
    KeyMaterial,
    derive_key_from_seed,
    normalize_key,
)
from zkprime.crypto.encryption import encrypt_payload, decrypt_payload

__all__ = [
    "sha256",
    "to_hex",
    "hash_commitment",
    "KEY_SIZE",
    "Seed",
    "SymmetricKey",
    "KeyMaterial",
    "derive_key_from_seed",
    "normalize_key",
    "encrypt_payload",
    "decrypt_payload",
]
