"""Builders for multi-hop ``batchSwap`` and ``rwaBatchSwap`` calls.

Batch limits: https://docs.balancer.fi/reference/swaps/batch-swaps.html
"""

import logging
from typing import Optional

from relayswap.swap_builder.core import RWA_STEPS, SwapBuilderBase
from relayswap.swap_builder.types import OutputReference, RwaAuthorizationData

logger = logging.getLogger(__name__)

# kind, swaps, assets, funds, limits, deadline
BATCH_SWAP_INPUTS = 6


def _batch_attributes(builder: SwapBuilderBase) -> dict:
    builder.assembler.require_ready()
    return {
        "kind": builder.kind,
        "swaps": builder.swap_info.swaps,
        "assets": builder.swap_info.token_addresses,
        "funds": builder.funds,
        "limits": builder.assembler.limits,
        "deadline": builder.deadline,
    }


def _append_relayer_params(builder: SwapBuilderBase, attrs: dict) -> dict:
    # VaultActions.batchSwap on relayers: ..., value, outputReferences
    if builder.assembler.needs_extra_params(builder.function_name, BATCH_SWAP_INPUTS):
        output_references: list[OutputReference] = []
        attrs["value"] = "0"
        attrs["outputReferences"] = output_references
    logger.debug(f"Assembled {builder.function_name} attributes: {list(attrs)}")
    return attrs


class BatchSwapBuilder(SwapBuilderBase):
    """Assemble and encode a vault (or relayer) batch swap."""

    function_name = "batchSwap"

    @property
    def limits(self) -> Optional[list[str]]:
        return self.assembler.limits

    def compute_limits(self, max_slippage: int) -> list[str]:
        """Calculate per-asset limits.

        The maximum amount to send is positive, the minimum amount to receive
        is negative, and the vault reverts if the trade needs more than
        ``limits[i]`` of asset ``i``.
        """
        return self.assembler.batch_limits(max_slippage)

    def assemble_attributes(self) -> dict:
        """Positional arguments of the call, keyed by parameter name.

        Raises:
            UninitializedArgumentsError: If funds, limits or deadline are unset
        """
        return _append_relayer_params(self, _batch_attributes(self))


class RwaBatchSwapBuilder(SwapBuilderBase):
    """Batch swap through the RWA relayer, carrying an authorization.

    ``rwaBatchSwap`` takes the authorization right after the vault's batch
    inputs, followed by the relayer's ``value`` and ``outputReferences``.
    """

    function_name = "rwaBatchSwap"
    required_steps = RWA_STEPS

    @property
    def limits(self) -> Optional[list[str]]:
        return self.assembler.limits

    @property
    def authorization(self) -> Optional[RwaAuthorizationData]:
        return self.assembler.authorization

    def set_authorization(self, authorization: Optional[RwaAuthorizationData]) -> None:
        """Store the pre-signed authorization, replacing any previous one."""
        self.assembler.set_authorization(authorization)

    def compute_limits(self, max_slippage: int) -> list[str]:
        return self.assembler.batch_limits(max_slippage)

    def assemble_attributes(self) -> dict:
        """Positional arguments of ``rwaBatchSwap``.

        Raises:
            UninitializedArgumentsError: If funds, limits, deadline or
                authorization are unset
        """
        attrs = _batch_attributes(self)
        attrs["authorization"] = self.authorization
        return _append_relayer_params(self, attrs)
