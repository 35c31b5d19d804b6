# ============================================================================
# INFRASTRUCTURE MODULE
# ============================================================================
# STATUS: Infrastructure - External service boundaries
# PURPOSE: Coordinator HTTP client and Solana helpers
# CREATED: 19 OCT 2026
# ============================================================================

from .coordinator import CoordinatorClient, is_success
from .solana import (
    ConnectionCache,
    WalletAdapter,
    KeypairWalletAdapter,
    build_and_send_transaction,
)

__all__ = [
    "CoordinatorClient",
    "is_success",
    "ConnectionCache",
    "WalletAdapter",
    "KeypairWalletAdapter",
    "build_and_send_transaction",
]
