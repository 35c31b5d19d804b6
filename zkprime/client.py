# ============================================================================
# ZKPRIME CLIENT
# ============================================================================
# STATUS: Entry point - High-level SDK client
# PURPOSE: Wire config, registries, connections and services together
# CREATED: 19 OCT 2026
# ============================================================================
"""
ZkPrime Client

Usage:
    async with ZkPrimeClient(rpc_endpoint="http://localhost:8899") as client:
        client.private_state.define_schema({...})
        result = await client.private_state.create_state(...)

Each client owns its registries (schemas, job types, mock jobs), its RPC
connections and its coordinator client. aclose() tears all of them down.
"""

import logging
from typing import Any, Optional

import httpx

from zkprime.core.config import ZkPrimeConfig, merge_config
from zkprime.infrastructure.coordinator import CoordinatorClient
from zkprime.infrastructure.solana import ConnectionCache
from zkprime.repositories import ClientRegistry
from zkprime.services import ConfidentialComputeService, PrivateStateService

logger = logging.getLogger(__name__)


class ZkPrimeClient:
    """High-level SDK client."""

    def __init__(
        self,
        config: Optional[ZkPrimeConfig] = None,
        *,
        coordinator_transport: Optional[httpx.AsyncBaseTransport] = None,
        **overrides: Any,
    ):
        """
        Initialize the client.

        Args:
            config: Full config; keyword overrides are merged on top
            coordinator_transport: Optional httpx transport for the coordinator
            **overrides: ZkPrimeConfig fields (rpc_endpoint, program_id, ...)

        Raises:
            ConfigError on unknown or invalid options
        """
        self.config = merge_config(config, **overrides)
        self.registry = ClientRegistry()
        self.connections = ConnectionCache()

        self.coordinator: Optional[CoordinatorClient] = None
        if self.config.has_coordinator:
            self.coordinator = CoordinatorClient(
                self.config.proving_service_url,
                timeout=httpx.Timeout(self.config.coordinator_timeout_seconds),
                transport=coordinator_transport,
            )

        self.private_state = PrivateStateService(
            self.config, self.registry, self.connections, self.coordinator
        )
        self.confidential_compute = ConfidentialComputeService(
            self.config, self.registry, self.connections, self.coordinator
        )
        self._closed = False

        logger.debug(
            f"ZkPrimeClient ready: rpc={self.config.rpc_endpoint} "
            f"program={self.config.has_program} compute={self.config.has_compute_program} "
            f"coordinator={self.config.has_coordinator}"
        )

    @classmethod
    def from_env(cls, **overrides: Any) -> "ZkPrimeClient":
        """Create a client from ZKPRIME_* environment variables."""
        return cls(ZkPrimeConfig.from_env(), **overrides)

    @property
    def closed(self) -> bool:
        return self._closed

    async def aclose(self) -> None:
        """Clear registries and close RPC connections."""
        if self._closed:
            return
        self._closed = True
        self.registry.clear()
        await self.connections.close()

    async def __aenter__(self) -> "ZkPrimeClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


__all__ = ["ZkPrimeClient"]
