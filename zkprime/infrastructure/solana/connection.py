# ============================================================================
# RPC CONNECTION CACHE
# ============================================================================
# STATUS: Infrastructure - Solana RPC client reuse
# PURPOSE: One AsyncClient per endpoint, owned by a client instance
# CREATED: 19 OCT 2026
# ============================================================================
"""
RPC Connection Cache

Creates or reuses a solana-py AsyncClient per endpoint. The cache belongs
to a ZkPrimeClient and is closed with it; there is no module-level cache.
"""

import logging
from typing import Dict

from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Confirmed

logger = logging.getLogger(__name__)


class ConnectionCache:
    """Endpoint -> AsyncClient cache."""

    def __init__(self):
        self._clients: Dict[str, AsyncClient] = {}

    def get(self, rpc_endpoint: str) -> AsyncClient:
        """Create or reuse a connection for the endpoint."""
        existing = self._clients.get(rpc_endpoint)
        if existing is not None:
            return existing
        client = AsyncClient(rpc_endpoint, commitment=Confirmed)
        self._clients[rpc_endpoint] = client
        logger.debug(f"Opened RPC connection to {rpc_endpoint}")
        return client

    def __len__(self) -> int:
        return len(self._clients)

    async def close(self) -> None:
        """Close every cached connection."""
        clients = list(self._clients.items())
        self._clients.clear()
        for endpoint, client in clients:
            await client.close()
            logger.debug(f"Closed RPC connection to {endpoint}")


__all__ = ["ConnectionCache"]
