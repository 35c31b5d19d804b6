# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# STATUS: Core - SDK configuration and defaults
# PURPOSE: Endpoint, program and coordinator settings with env overrides
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Defaults

Loads SDK configuration from keyword overrides or environment variables
with sensible defaults.

Design:
- Plain dataclass, one instance per client
- Environment variable overrides via from_env()
- Overrides merged onto defaults via merge_config()
- No global singleton: every ZkPrimeClient owns its config
"""

import os
from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any, Optional

from zkprime.core.errors import ConfigError

if TYPE_CHECKING:
    from zkprime.infrastructure.solana.wallet import WalletAdapter


DEFAULT_RPC_ENDPOINT = "https://api.mainnet-beta.solana.com"
DEFAULT_COORDINATOR_TIMEOUT_SECONDS = 30.0


def _optional_env(name: str) -> Optional[str]:
    """Read an env var, treating empty strings as unset."""
    value = os.environ.get(name, "").strip()
    return value or None


@dataclass
class ZkPrimeConfig:
    """Configuration for one SDK client."""

    # Solana RPC endpoint (required)
    rpc_endpoint: str = DEFAULT_RPC_ENDPOINT

    # Private-state program address
    program_id: Optional[str] = None

    # Confidential-compute program address
    compute_program_id: Optional[str] = None

    # Coordinator / prover base URL
    proving_service_url: Optional[str] = None

    # Default signer used when a call does not pass its own adapter
    wallet_adapter: Optional["WalletAdapter"] = None

    # Coordinator HTTP timeout
    coordinator_timeout_seconds: float = DEFAULT_COORDINATOR_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if not self.rpc_endpoint:
            raise ConfigError("rpc_endpoint required", option="rpc_endpoint")
        if self.proving_service_url:
            self.proving_service_url = self.proving_service_url.rstrip("/")

    @classmethod
    def from_env(cls) -> "ZkPrimeConfig":
        """Load configuration from environment variables."""
        raw_timeout = os.environ.get("ZKPRIME_COORDINATOR_TIMEOUT", DEFAULT_COORDINATOR_TIMEOUT_SECONDS)
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ConfigError(
                f"ZKPRIME_COORDINATOR_TIMEOUT must be a number, got {raw_timeout!r}",
                option="coordinator_timeout_seconds",
            ) from e

        return cls(
            rpc_endpoint=os.environ.get("ZKPRIME_RPC_ENDPOINT", DEFAULT_RPC_ENDPOINT),
            program_id=_optional_env("ZKPRIME_PROGRAM_ID"),
            compute_program_id=_optional_env("ZKPRIME_COMPUTE_PROGRAM_ID"),
            proving_service_url=_optional_env("ZKPRIME_PROVING_SERVICE_URL"),
            coordinator_timeout_seconds=timeout,
        )

    @property
    def has_program(self) -> bool:
        """Check if the private-state program is configured."""
        return bool(self.program_id)

    @property
    def has_compute_program(self) -> bool:
        """Check if the confidential-compute program is configured."""
        return bool(self.compute_program_id)

    @property
    def has_coordinator(self) -> bool:
        """Check if a coordinator URL is configured."""
        return bool(self.proving_service_url)


def merge_config(base: Optional[ZkPrimeConfig] = None, **overrides: Any) -> ZkPrimeConfig:
    """
    Merge keyword overrides onto a base config.

    Args:
        base: Starting config (defaults when None)
        **overrides: ZkPrimeConfig field values; None values are ignored

    Returns:
        New ZkPrimeConfig

    Raises:
        ConfigError if an override names an unknown option
    """
    known = {f.name for f in fields(ZkPrimeConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise ConfigError(f"Unknown config option(s): {', '.join(sorted(unknown))}")

    changes = {k: v for k, v in overrides.items() if v is not None}
    if base is None:
        return ZkPrimeConfig(**changes)
    return replace(base, **changes)


__all__ = [
    "ZkPrimeConfig",
    "merge_config",
    "DEFAULT_RPC_ENDPOINT",
    "DEFAULT_COORDINATOR_TIMEOUT_SECONDS",
]
