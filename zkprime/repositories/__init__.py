# ============================================================================
# REPOSITORIES MODULE
# ============================================================================
# STATUS: Core - In-memory storage layer
# PURPOSE: Registries owned by a client instance
# CREATED: 19 OCT 2026
# ============================================================================
"""
Repositories Module

Usage:
    from zkprime.repositories import ClientRegistry

    registry = ClientRegistry()
    registry.put_schema(schema)
"""

from .registry import ClientRegistry

__all__ = ["ClientRegistry"]
