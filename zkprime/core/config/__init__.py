# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Module

Provides the per-client configuration dataclass and merge helper.
"""

from zkprime.core.config.defaults import (
    ZkPrimeConfig,
    merge_config,
    DEFAULT_RPC_ENDPOINT,
    DEFAULT_COORDINATOR_TIMEOUT_SECONDS,
)

__all__ = [
    "ZkPrimeConfig",
    "merge_config",
    "DEFAULT_RPC_ENDPOINT",
    "DEFAULT_COORDINATOR_TIMEOUT_SECONDS",
]
