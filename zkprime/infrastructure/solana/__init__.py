# ============================================================================
# SOLANA MODULE
# ============================================================================
# STATUS: Infrastructure - Chain submission boundary
# PURPOSE: Export connection cache, wallet adapters and transaction helpers
# CREATED: 19 OCT 2026
# ============================================================================

from .connection import ConnectionCache
from .wallet import WalletAdapter, KeypairWalletAdapter
from .transactions import (
    encode_instruction_data,
    create_instruction,
    create_signer_instruction,
    build_and_send_transaction,
)

__all__ = [
    "ConnectionCache",
    "WalletAdapter",
    "KeypairWalletAdapter",
    "encode_instruction_data",
    "create_instruction",
    "create_signer_instruction",
    "build_and_send_transaction",
]
