# ============================================================================
# SDK EXCEPTIONS
# ============================================================================
# STATUS: Foundation - Typed error taxonomy
# PURPOSE: One exception class per failure family callers must handle
# CREATED: 19 OCT 2026
# ============================================================================
"""
SDK Exceptions

Every error raised on purpose by zkprime derives from ZkPrimeError, so
callers can catch the whole family or a single branch:

    ZkPrimeError
    ├── ConfigError        missing / invalid configuration
    ├── SchemaError        malformed schema or job-type registration
    ├── CryptoError        bad key, unsupported algorithm, auth failure
    ├── NotFoundError      missing schema, job type, job or result
    ├── RPCError           chain submission precondition or send failure
    └── CoordinatorError   coordinator answered with a non-success status
"""

from typing import Optional


class ZkPrimeError(Exception):
    """Base exception for all SDK errors."""
    pass


class ConfigError(ZkPrimeError):
    """Raised when required configuration is missing or invalid."""

    def __init__(self, message: str, option: Optional[str] = None):
        self.option = option
        super().__init__(message)


class SchemaError(ZkPrimeError):
    """Raised when a schema or job definition is malformed."""
    pass


class CryptoError(ZkPrimeError):
    """Raised on key length, algorithm or authentication failures."""
    pass


class NotFoundError(ZkPrimeError):
    """Raised when a referenced schema, job type, job or result is absent."""

    def __init__(self, message: str, entity_id: Optional[str] = None):
        self.entity_id = entity_id
        super().__init__(message)


class RPCError(ZkPrimeError):
    """Raised when a transaction cannot be signed or sent."""
    pass


class CoordinatorError(ZkPrimeError):
    """Raised when the coordinator returns a non-success response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


__all__ = [
    "ZkPrimeError",
    "ConfigError",
    "SchemaError",
    "CryptoError",
    "NotFoundError",
    "RPCError",
    "CoordinatorError",
]
