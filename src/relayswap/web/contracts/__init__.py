"""Request and response contracts for swap transaction building."""

from relayswap.web.contracts.transactions import SwapRequest, UnsignedTransaction

__all__ = ["SwapRequest", "UnsignedTransaction"]
