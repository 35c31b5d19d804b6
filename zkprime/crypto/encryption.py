# ============================================================================
# PAYLOAD ENCRYPTION
# ============================================================================
# STATUS: Crypto - AES-256-GCM envelope codec
# PURPOSE: Encrypt structured values into authenticated envelopes
# CREATED: 19 OCT 2026
# ============================================================================
"""
Payload Encryption

AES-256-GCM wrapper helpers.

Values are serialized as compact JSON, UTF-8 encoded, then sealed with a
fresh random 96-bit nonce per call. The AEAD output is split into
ciphertext and the trailing 128-bit tag so both can travel separately.

Keys are supplied by the caller (32 bytes). The SDK never persists or
generates long-term keys.
"""

import json
import os
from typing import Any

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from zkprime.core.contracts import ENVELOPE_ALGORITHM
from zkprime.core.errors import CryptoError
from zkprime.core.models import EncryptedPayload
from zkprime.crypto.keys import KEY_SIZE


NONCE_SIZE = 12  # 96 bits, recommended for GCM
TAG_SIZE = 16    # 128 bits


def _ensure_key(key: bytes) -> None:
    if not isinstance(key, (bytes, bytearray)):
        raise CryptoError("Key must be bytes")
    if len(key) != KEY_SIZE:
        raise CryptoError(f"Key must be {KEY_SIZE} bytes (256 bits)")


def encrypt_payload(data: Any, key: bytes) -> EncryptedPayload:
    """
    Encrypt a JSON-serializable value.

    Args:
        data: Any JSON-serializable value
        key: 32-byte AES key

    Returns:
        EncryptedPayload with a fresh nonce

    Raises:
        CryptoError on bad key or unserializable data
    """
    _ensure_key(key)
    try:
        plaintext = json.dumps(data, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise CryptoError(f"encrypt_payload failed: {e}") from e

    iv = os.urandom(NONCE_SIZE)
    sealed = AESGCM(bytes(key)).encrypt(iv, plaintext, None)

    return EncryptedPayload(
        alg=ENVELOPE_ALGORITHM,
        iv=iv,
        ciphertext=sealed[:-TAG_SIZE],
        tag=sealed[-TAG_SIZE:],
    )


def decrypt_payload(payload: EncryptedPayload, key: bytes) -> Any:
    """
    Decrypt an envelope back to the original value.

    Args:
        payload: Envelope produced by encrypt_payload
        key: 32-byte AES key

    Returns:
        The deserialized value

    Raises:
        CryptoError on bad key, unsupported algorithm, tampering,
        or undecodable plaintext
    """
    _ensure_key(key)
    if payload.alg != ENVELOPE_ALGORITHM:
        raise CryptoError(f"Unsupported algorithm: {payload.alg}")

    try:
        plaintext = AESGCM(bytes(key)).decrypt(
            payload.iv, payload.ciphertext + payload.tag, None
        )
    except InvalidTag as e:
        raise CryptoError("decrypt_payload failed: authentication tag mismatch") from e
    except ValueError as e:
        # Raised for an unusable nonce (e.g. empty)
        raise CryptoError(f"decrypt_payload failed: {e}") from e

    try:
        return json.loads(plaintext.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise CryptoError(f"decrypt_payload failed: {e}") from e


__all__ = ["encrypt_payload", "decrypt_payload", "NONCE_SIZE", "TAG_SIZE"]
