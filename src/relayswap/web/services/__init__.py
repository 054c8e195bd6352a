"""Services preparing unsigned swap transactions for client-side signing."""

from relayswap.web.services.transaction_builder import SwapTransactionBuilder

__all__ = ["SwapTransactionBuilder"]
