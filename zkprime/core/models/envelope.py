# ============================================================================
# ENCRYPTED ENVELOPE MODEL
# ============================================================================
# STATUS: Core model - Authenticated ciphertext bundle
# PURPOSE: Carry nonce, ciphertext and tag between encrypt and decrypt
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: EncryptedPayload
# DEPENDENCIES: pydantic
# ============================================================================
"""
Encrypted Envelope Model

An EncryptedPayload is immutable once produced by encrypt_payload().

The coordinator exchanges envelopes as JSON with base64 fields:

    {"iv": "...", "ciphertext": "...", "tag": "..."}

to_wire() / from_wire() convert between the two forms.
"""

import base64
import binascii
from typing import Any, Dict

from pydantic import BaseModel, Field

from zkprime.core.contracts import ENVELOPE_ALGORITHM
from zkprime.core.errors import CryptoError


class EncryptedPayload(BaseModel):
    """AEAD output: 96-bit nonce, ciphertext, 128-bit authentication tag."""

    alg: str = Field(default=ENVELOPE_ALGORITHM, description="Algorithm tag")
    iv: bytes = Field(..., description="Nonce (12 bytes for AES-GCM)")
    ciphertext: bytes = Field(..., description="Encrypted bytes without the tag")
    tag: bytes = Field(..., description="Authentication tag (16 bytes)")

    model_config = {"frozen": True}

    def to_wire(self) -> Dict[str, str]:
        """Base64 form used in coordinator requests and mock result refs."""
        return {
            "iv": base64.b64encode(self.iv).decode("ascii"),
            "tag": base64.b64encode(self.tag).decode("ascii"),
            "ciphertext": base64.b64encode(self.ciphertext).decode("ascii"),
        }

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "EncryptedPayload":
        """
        Build an envelope from its base64 JSON form.

        Raises:
            CryptoError if a field is missing or not valid base64
        """
        try:
            return cls(
                alg=ENVELOPE_ALGORITHM,
                iv=base64.b64decode(data["iv"], validate=True),
                ciphertext=base64.b64decode(data["ciphertext"], validate=True),
                tag=base64.b64decode(data["tag"], validate=True),
            )
        except (KeyError, TypeError, binascii.Error) as e:
            raise CryptoError(f"Malformed envelope: {e}") from e


__all__ = ["EncryptedPayload"]
