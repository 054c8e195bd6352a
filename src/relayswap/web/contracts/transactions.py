"""Transaction contracts for swap building.

These contracts define unsigned transactions that clients sign locally.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from relayswap.swap_builder.types import RwaAuthorizationData, SwapInfo, SwapType


class UnsignedTransaction(BaseModel):
    """An unsigned swap transaction for client-side signing."""

    chain_id: int = Field(..., description="EVM chain ID")
    to: str = Field(..., description="Vault or relayer address")
    value: str = Field(default="0", description="Native value in wei (decimal string)")
    data: str = Field(default="0x", description="ABI-encoded call data (hex)")
    function_name: str = Field(..., description="Contract function being called")
    attributes: dict[str, Any] = Field(
        default_factory=dict,
        description="Call arguments keyed by parameter name, in call order",
    )

    # Additional context for client
    description: Optional[str] = Field(None, description="Human-readable description")
    warnings: list[str] = Field(default_factory=list, description="Any warnings")


class SwapRequest(BaseModel):
    """Request to prepare a swap transaction from a router result."""

    user_address: str = Field(..., description="Sender of the swap")
    recipient: Optional[str] = Field(None, description="Receiver (defaults to sender)")
    swap_info: SwapInfo = Field(..., description="Route from the smart order router")
    kind: SwapType = Field(default=SwapType.EXACT_IN, description="Which amount is fixed")
    deadline: int = Field(..., description="Block timestamp after which the swap reverts")
    max_slippage_bps: Optional[int] = Field(
        None,
        ge=0,
        le=10_000,
        description="Slippage tolerance in bps (settings default when omitted)",
    )
    authorization: Optional[RwaAuthorizationData] = Field(
        None, description="Pre-signed authorization for restricted assets"
    )
