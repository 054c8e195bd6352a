"""Builders for single-hop ``swap`` and ``rwaSwap`` calls."""

import logging
from typing import Optional

from relayswap.swap_builder.core import RWA_STEPS, SwapBuilderBase
from relayswap.swap_builder.types import RwaAuthorizationData, SingleSwap

logger = logging.getLogger(__name__)


class SingleSwapBuilder(SwapBuilderBase):
    """Assemble and encode a vault (or relayer) single swap.

    Example:
        builder = SingleSwapBuilder(swap_info, SwapType.EXACT_IN, 1)
        builder.set_funds(user)
        builder.set_deadline(deadline)
        builder.set_limits(50)
        data = builder.encode_data()
    """

    function_name = "swap"
    # singleSwap, funds, limit, deadline
    extra_params_threshold = 4

    @property
    def limit(self) -> Optional[str]:
        return self.assembler.limits

    @property
    def single_swap(self) -> SingleSwap:
        return self.assembler.single_swap()

    def compute_limits(self, max_slippage: int) -> str:
        return self.assembler.single_limit(max_slippage)

    def assemble_attributes(self) -> dict:
        """Positional arguments of the call, keyed by parameter name.

        Relayers taking chained references get ``value`` and
        ``outputReference`` appended.

        Raises:
            UninitializedArgumentsError: If funds, limits or deadline are unset
        """
        self.assembler.require_ready()
        attrs = {
            "request": self.single_swap,
            "funds": self.funds,
            "limit": self.limit,
            "deadline": self.deadline,
        }
        if self.assembler.needs_extra_params(self.function_name, self.extra_params_threshold):
            attrs["value"] = "0"
            attrs["outputReference"] = "0"
        logger.debug(f"Assembled {self.function_name} attributes: {list(attrs)}")
        return attrs


class RwaSingleSwapBuilder(SwapBuilderBase):
    """Single swap through the RWA relayer, carrying an authorization."""

    function_name = "rwaSwap"
    required_steps = RWA_STEPS

    @property
    def limit(self) -> Optional[str]:
        return self.assembler.limits

    @property
    def authorization(self) -> Optional[RwaAuthorizationData]:
        return self.assembler.authorization

    def set_authorization(self, authorization: Optional[RwaAuthorizationData]) -> None:
        """Store the pre-signed authorization, replacing any previous one."""
        self.assembler.set_authorization(authorization)

    @property
    def single_swap(self) -> SingleSwap:
        return self.assembler.single_swap()

    def compute_limits(self, max_slippage: int) -> str:
        return self.assembler.single_limit(max_slippage)

    def assemble_attributes(self) -> dict:
        """Positional arguments of ``rwaSwap``.

        No relayer bookkeeping parameters are appended here, unlike
        ``rwaBatchSwap``.

        Raises:
            UninitializedArgumentsError: If funds, limits, deadline or
                authorization are unset
        """
        self.assembler.require_ready()
        attrs = {
            "request": self.single_swap,
            "funds": self.funds,
            "limit": self.limit,
            "deadline": self.deadline,
            "authorization": self.authorization,
        }
        logger.debug(f"Assembled {self.function_name} attributes: {list(attrs)}")
        return attrs
