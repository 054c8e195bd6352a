"""Route decoration: slippage-bounded amounts and the tokens used by the vault."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from relayswap.swap_builder.types import SwapInfo, SwapType

logger = logging.getLogger(__name__)

BPS = Decimal(10_000)

Amount = Union[int, Decimal]


@dataclass(frozen=True)
class AmountForLimit:
    """An amount and its worst-case bounds for a slippage in basis points.

    Bounds are exact; callers truncate when formatting for the contract.
    """

    amount: Amount

    def min(self, slippage_bps: int) -> Decimal:
        return Decimal(self.amount) * (BPS - slippage_bps) / BPS

    def max(self, slippage_bps: int) -> Decimal:
        return Decimal(self.amount) * (BPS + slippage_bps) / BPS


@dataclass(frozen=True)
class DecoratedSwapInfo:
    """Router output with per-direction amounts attached."""

    swap_info: SwapInfo
    amount_in: int
    amount_out: int
    amount_in_for_limits: AmountForLimit
    amount_out_for_limits: AmountForLimit
    token_in_for_swaps: str
    token_out_from_swaps: str

    @property
    def token_in(self) -> str:
        return self.swap_info.token_in

    @property
    def token_out(self) -> str:
        return self.swap_info.token_out

    @property
    def token_addresses(self) -> list[str]:
        return self.swap_info.token_addresses

    @property
    def swaps(self):
        return self.swap_info.swaps


def _positive_or(value, fallback):
    """``value`` when it is a positive amount, else ``fallback``."""
    if value is not None and value > 0:
        return value
    return fallback


def decorate_swap_info(swap_info: SwapInfo, kind: SwapType) -> DecoratedSwapInfo:
    """Attach limit amounts and vault-facing token addresses to a route.

    For EXACT_IN the swap amount is the input and the return amount the
    output, EXACT_OUT reverses the roles. Limits prefer the amounts the vault
    actually sees (``*ForSwaps``/``*FromSwaps``), which differ from the user
    facing amounts when a token is wrapped by a relayer.
    """
    swap_amount_for_swaps = _positive_or(swap_info.swap_amount_for_swaps, swap_info.swap_amount)
    return_amount_from_swaps = _positive_or(
        swap_info.return_amount_from_swaps, swap_info.return_amount
    )

    if kind == SwapType.EXACT_IN:
        amount_in = swap_info.swap_amount
        amount_out = swap_info.return_amount
        in_for_limits = swap_amount_for_swaps
        out_for_limits = return_amount_from_swaps
    else:
        amount_in = swap_info.return_amount
        amount_out = swap_info.swap_amount
        in_for_limits = return_amount_from_swaps
        out_for_limits = swap_amount_for_swaps

    decorated = DecoratedSwapInfo(
        swap_info=swap_info,
        amount_in=amount_in,
        amount_out=amount_out,
        amount_in_for_limits=AmountForLimit(in_for_limits),
        amount_out_for_limits=AmountForLimit(out_for_limits),
        token_in_for_swaps=swap_info.token_in_for_swaps or swap_info.token_in,
        token_out_from_swaps=swap_info.token_out_from_swaps or swap_info.token_out,
    )
    logger.debug(
        f"Decorated route {decorated.token_in} -> {decorated.token_out} "
        f"({kind.name}): in={amount_in} out={amount_out}"
    )
    return decorated
