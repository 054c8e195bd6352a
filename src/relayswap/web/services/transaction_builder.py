"""Transaction builder for preparing unsigned swap transactions.

Turns a router result into ``to``/``value``/``data`` for the vault or one of
its relayers. NO signing or broadcasting happens here.
"""

import logging
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel

from relayswap.config import Settings, get_settings
from relayswap.swap_builder.batch_swap_builder import BatchSwapBuilder, RwaBatchSwapBuilder
from relayswap.swap_builder.networks import get_network
from relayswap.swap_builder.single_swap_builder import RwaSingleSwapBuilder, SingleSwapBuilder
from relayswap.swap_builder.types import SwapInfo, SwapType
from relayswap.web.contracts.transactions import SwapRequest, UnsignedTransaction

logger = logging.getLogger(__name__)

Builder = Union[SingleSwapBuilder, BatchSwapBuilder, RwaSingleSwapBuilder, RwaBatchSwapBuilder]


def _jsonable(value: Any) -> Any:
    """Convert assembled attributes into JSON-friendly values."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


def _funded_input_tokens(swap_info: SwapInfo) -> set[str]:
    """Tokens paid into the route by hops that do not chain a previous output.

    A hop amount of zero means "use the previous hop's output".
    """
    return {
        swap_info.token_addresses[swap.asset_in_index].lower()
        for swap in swap_info.swaps
        if swap.amount != "0"
    }


class SwapTransactionBuilder:
    """Builds unsigned swap transactions for client-side signing.

    This service NEVER:
    - Accesses private keys
    - Signs transactions
    - Broadcasts transactions
    """

    def __init__(self, chain_id: int, settings: Optional[Settings] = None):
        """Initialize the builder.

        Args:
            chain_id: EVM chain ID the swaps target

        Raises:
            UnsupportedNetworkError: If the chain has no vault deployment
        """
        self.chain_id = chain_id
        self.settings = settings or get_settings()
        self.network = get_network(chain_id)

    def _slippage(self, request: SwapRequest) -> int:
        if request.max_slippage_bps is None:
            return self.settings.default_slippage_bps
        return request.max_slippage_bps

    def _prepare(self, builder: Builder, request: SwapRequest, max_slippage: int) -> Builder:
        builder.set_funds(request.user_address, request.recipient)
        builder.set_deadline(request.deadline)
        builder.set_limits(max_slippage)
        return builder

    def _to_transaction(self, builder: Builder, max_slippage: int) -> UnsignedTransaction:
        attributes = builder.assemble_attributes()
        data = builder.encode_data()
        value = builder.value(max_slippage)

        warnings = []
        funded = _funded_input_tokens(builder.swap_info.swap_info)
        if len(funded) > 1:
            warnings.append("Route funds several input tokens; only the route input is limited")
            logger.warning(f"Route funds {len(funded)} input tokens, limits cover one")

        tx = UnsignedTransaction(
            chain_id=self.chain_id,
            to=builder.to(),
            value=str(value),
            data=data,
            function_name=builder.function_name,
            attributes=_jsonable(attributes),
            description=(
                f"{builder.function_name} on {self.network.name} via {builder.relayer.id.value}"
            ),
            warnings=warnings,
        )
        logger.info(
            f"Built {tx.function_name} tx to {tx.to} on chain {self.chain_id} (value={tx.value})"
        )
        return tx

    def build_swap(self, request: SwapRequest) -> UnsignedTransaction:
        """Build a vault swap from a router result.

        Multi-hop routes use ``batchSwap``, single hops use ``swap``.

        Raises:
            ValueError: If the route is empty
        """
        if not request.swap_info.swaps:
            raise ValueError("Route has no swaps")

        max_slippage = self._slippage(request)
        if len(request.swap_info.swaps) > 1:
            builder: Builder = BatchSwapBuilder(
                request.swap_info, request.kind, self.chain_id, settings=self.settings
            )
        else:
            builder = SingleSwapBuilder(
                request.swap_info, request.kind, self.chain_id, settings=self.settings
            )
        return self._to_transaction(self._prepare(builder, request, max_slippage), max_slippage)

    def build_rwa_swap(self, request: SwapRequest) -> UnsignedTransaction:
        """Build a restricted-asset swap through the RWA relayer.

        Raises:
            ValueError: If the route is empty or no authorization is given
            FragmentNotFoundError: If the pair does not resolve to the RWA relayer
        """
        if not request.swap_info.swaps:
            raise ValueError("Route has no swaps")
        if request.authorization is None:
            raise ValueError("RWA swaps require an authorization")

        max_slippage = self._slippage(request)
        if len(request.swap_info.swaps) > 1:
            builder: Builder = RwaBatchSwapBuilder(
                request.swap_info, request.kind, self.chain_id, settings=self.settings
            )
        else:
            builder = RwaSingleSwapBuilder(
                request.swap_info, request.kind, self.chain_id, settings=self.settings
            )
        builder.set_authorization(request.authorization)
        return self._to_transaction(self._prepare(builder, request, max_slippage), max_slippage)

    def get_limits_for_slippage(
        self,
        swap_info: SwapInfo,
        kind: SwapType,
        max_slippage: int,
    ) -> list[str]:
        """Batch limits for a route without building a transaction."""
        builder = BatchSwapBuilder(swap_info, kind, self.chain_id, settings=self.settings)
        builder.set_limits(max_slippage)
        return builder.limits

