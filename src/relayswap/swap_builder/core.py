"""Shared swap assembly used by every builder.

A builder owns one ``SwapAssembler`` for one logical swap. The assembler
decorates the route, resolves the relayer and holds the values set up
for assembly; a required value that is absent or empty is reported as a
missing step.
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from enum import Enum
from typing import Iterable, Optional, Union

from relayswap.config import Settings
from relayswap.swap_builder.abi import FunctionInterface
from relayswap.swap_builder.errors import UninitializedArgumentsError
from relayswap.swap_builder.relayer import SwapRelayer, resolve_relayer, swap_fragment
from relayswap.swap_builder.swap_info import Amount, DecoratedSwapInfo, decorate_swap_info
from relayswap.swap_builder.types import (
    ADDRESS_ZERO,
    FundManagement,
    RwaAuthorizationData,
    SingleSwap,
    SwapInfo,
    SwapType,
)

logger = logging.getLogger(__name__)


class BuildStep(str, Enum):
    """Setup steps a builder may require before assembly."""
    FUNDS = "funds"
    LIMITS = "limits"
    DEADLINE = "deadline"
    AUTHORIZATION = "authorization"


class BuilderState(str, Enum):
    """Progress of a builder towards assembly."""
    EMPTY = "empty"
    PARTIAL = "partial"
    READY = "ready"


PLAIN_STEPS = (BuildStep.FUNDS, BuildStep.LIMITS, BuildStep.DEADLINE)
RWA_STEPS = PLAIN_STEPS + (BuildStep.AUTHORIZATION,)


def format_limit(amount: Amount) -> str:
    """Integer string for a limit, dropping any fraction (toward zero)."""
    return str(int(Decimal(amount)))


def compute_batch_limits(
    swap_info: DecoratedSwapInfo,
    max_amount_in: Amount,
    min_amount_out: Amount,
) -> list[str]:
    """Signed per-asset limits for a batch swap, in route asset order.

    The vault takes at most ``limits[i]`` of asset ``i`` from the sender, so
    the input slot holds the positive maximum paid and the output slot the
    negated minimum received. Other assets net to zero.

    Only a single input token is supported: every slot equal to the route's
    input token gets the full maximum.
    """
    token_in = swap_info.token_in_for_swaps.lower()
    token_out = swap_info.token_out_from_swaps.lower()

    limits = []
    for token in swap_info.token_addresses:
        amount: Amount = 0
        if token.lower() == token_in:
            amount = max_amount_in
        if token.lower() == token_out:
            amount = -Decimal(min_amount_out)
        limits.append(format_limit(amount))
    return limits


class SwapAssembler:
    """Route, relayer and setup state for a single swap."""

    def __init__(
        self,
        swap_info: SwapInfo,
        kind: SwapType,
        chain_id: int,
        required_steps: Iterable[BuildStep] = PLAIN_STEPS,
        relayer: Optional[SwapRelayer] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize the assembler.

        Args:
            swap_info: Route from the smart order router
            kind: Which amount is fixed
            chain_id: EVM chain ID
            required_steps: Steps that must run before assembly
            relayer: Explicit swap target (resolved from the pair if omitted)
            settings: Settings used for relayer resolution
        """
        self.kind = SwapType(kind)
        self.chain_id = chain_id
        self.swap_info = decorate_swap_info(swap_info, self.kind)
        self.relayer = relayer or resolve_relayer(
            self.swap_info.token_in,
            self.swap_info.token_out,
            chain_id,
            settings=settings,
        )
        self.required_steps = tuple(required_steps)
        self.funds: Optional[FundManagement] = None
        self.limits: Optional[Union[str, list[str]]] = None
        self.deadline: Optional[str] = None
        self.authorization: Optional[RwaAuthorizationData] = None

    # ----------------------
    # Setup
    # ----------------------

    def set_funds(self, sender: str, recipient: Optional[str] = None) -> None:
        self.funds = FundManagement(
            sender=sender,
            recipient=recipient or sender,
            from_internal_balance=False,
            to_internal_balance=False,
        )

    def set_deadline(self, deadline) -> None:
        """Store the block timestamp after which the swap reverts."""
        self.deadline = str(deadline) if deadline else None

    def set_authorization(self, authorization: Optional[RwaAuthorizationData]) -> None:
        self.authorization = authorization

    # ----------------------
    # State
    # ----------------------

    def missing_steps(self) -> list[BuildStep]:
        """Required steps whose stored value is absent or empty."""
        values = {
            BuildStep.FUNDS: self.funds,
            BuildStep.LIMITS: self.limits,
            BuildStep.DEADLINE: self.deadline,
            BuildStep.AUTHORIZATION: self.authorization,
        }
        return [step for step in self.required_steps if not values[step]]

    @property
    def state(self) -> BuilderState:
        missing = self.missing_steps()
        if not missing:
            return BuilderState.READY
        if len(missing) == len(self.required_steps):
            return BuilderState.EMPTY
        return BuilderState.PARTIAL

    def require_ready(self) -> None:
        """Raise unless every required value is set.

        Raises:
            UninitializedArgumentsError: Naming each missing step
        """
        missing = self.missing_steps()
        if missing:
            logger.debug(f"Assembly blocked, missing steps: {[s.value for s in missing]}")
            raise UninitializedArgumentsError(step.value for step in missing)

    # ----------------------
    # Amounts
    # ----------------------

    def min_amount_out(self, max_slippage: int) -> Amount:
        """Given IN, the minimum accepted output. Given OUT, the fixed output."""
        if self.kind == SwapType.EXACT_IN:
            return self.swap_info.amount_out_for_limits.min(max_slippage)
        return self.swap_info.amount_out_for_limits.amount

    def max_amount_in(self, max_slippage: int) -> Amount:
        """Given OUT, the maximum accepted input. Given IN, the fixed input."""
        if self.kind == SwapType.EXACT_OUT:
            return self.swap_info.amount_in_for_limits.max(max_slippage)
        return self.swap_info.amount_in_for_limits.amount

    def single_limit(self, max_slippage: int) -> str:
        """Limit of a single swap: min output for EXACT_IN, max input for EXACT_OUT."""
        if self.kind == SwapType.EXACT_IN:
            return format_limit(self.min_amount_out(max_slippage))
        return format_limit(self.max_amount_in(max_slippage))

    def batch_limits(self, max_slippage: int) -> list[str]:
        return compute_batch_limits(
            self.swap_info,
            self.max_amount_in(max_slippage),
            self.min_amount_out(max_slippage),
        )

    def single_swap(self) -> SingleSwap:
        """Single swap request for the first hop of the route.

        The fixed amount is the output for EXACT_OUT and the input otherwise.
        """
        swaps = self.swap_info.swaps
        if not swaps:
            raise ValueError("Route has no swaps")
        if self.kind == SwapType.EXACT_OUT:
            amount = self.swap_info.amount_out_for_limits.amount
        else:
            amount = self.swap_info.amount_in_for_limits.amount
        return SingleSwap(
            pool_id=swaps[0].pool_id,
            kind=self.kind,
            asset_in=self.swap_info.token_in_for_swaps,
            asset_out=self.swap_info.token_out_from_swaps,
            amount=format_limit(amount),
            user_data="0x",
        )

    def value(self, max_slippage: int) -> int:
        """Native currency to attach: the max input when swapping from the native asset."""
        if self.swap_info.token_in.lower() == ADDRESS_ZERO:
            return int(self.max_amount_in(max_slippage))
        return 0

    # ----------------------
    # Fragments
    # ----------------------

    def fragment(self, function_name: str) -> list[dict]:
        """The relayer's fragments filtered to one function name."""
        return [f for f in swap_fragment(self.relayer) if f.get("name") == function_name]

    def needs_extra_params(self, function_name: str, threshold: int) -> bool:
        """Whether the target function takes relayer bookkeeping parameters.

        Relayer variants of the vault calls declare ``value`` and output
        references after the vault's own inputs.
        """
        fragment = self.fragment(function_name)
        return bool(fragment) and len(fragment[0].get("inputs", [])) > threshold


class SwapBuilderBase(ABC):
    """Caller-facing operations shared by the single and batch builders.

    Subclasses set ``function_name`` and ``required_steps`` and implement
    ``compute_limits`` and ``assemble_attributes``. All swap state lives on
    ``self.assembler``.
    """

    function_name: str = ""
    required_steps: tuple[BuildStep, ...] = PLAIN_STEPS

    def __init__(
        self,
        swap_info: SwapInfo,
        kind: SwapType,
        chain_id: int,
        relayer: Optional[SwapRelayer] = None,
        settings: Optional[Settings] = None,
    ):
        self.assembler = SwapAssembler(
            swap_info,
            kind,
            chain_id,
            required_steps=self.required_steps,
            relayer=relayer,
            settings=settings,
        )

    @property
    def kind(self) -> SwapType:
        return self.assembler.kind

    @property
    def chain_id(self) -> int:
        return self.assembler.chain_id

    @property
    def swap_info(self) -> DecoratedSwapInfo:
        return self.assembler.swap_info

    @property
    def relayer(self) -> SwapRelayer:
        return self.assembler.relayer

    @property
    def funds(self) -> Optional[FundManagement]:
        return self.assembler.funds

    @property
    def deadline(self) -> Optional[str]:
        return self.assembler.deadline

    @property
    def state(self) -> BuilderState:
        return self.assembler.state

    def missing_steps(self) -> list[BuildStep]:
        return self.assembler.missing_steps()

    def set_funds(self, sender: str, recipient: Optional[str] = None) -> None:
        self.assembler.set_funds(sender, recipient)

    def set_deadline(self, deadline) -> None:
        self.assembler.set_deadline(deadline)

    def set_limits(self, max_slippage: int) -> None:
        """Set limits from a slippage tolerance in bps (1 == 0.01%, 100 == 1%)."""
        self.assembler.limits = self.compute_limits(max_slippage)

    def min_amount_out(self, max_slippage: int) -> Amount:
        return self.assembler.min_amount_out(max_slippage)

    def max_amount_in(self, max_slippage: int) -> Amount:
        return self.assembler.max_amount_in(max_slippage)

    def value(self, max_slippage: int) -> int:
        return self.assembler.value(max_slippage)

    def to(self) -> str:
        return self.assembler.relayer.address

    def fragment(self) -> list[dict]:
        return self.assembler.fragment(self.function_name)

    @abstractmethod
    def compute_limits(self, max_slippage: int) -> Union[str, list[str]]:
        """Limit value(s) passed to the contract for a slippage in bps."""

    @abstractmethod
    def assemble_attributes(self) -> dict:
        """Positional arguments of ``function_name``, keyed by parameter name."""

    def encode_data(self) -> str:
        """ABI-encode the assembled attributes as a call to ``function_name``.

        Raises:
            UninitializedArgumentsError: If a required value is unset
            FragmentNotFoundError: If the relayer does not expose the function
            AbiEncodingError: If an attribute does not match its declared type
        """
        attributes = self.assemble_attributes()
        interface = FunctionInterface(self.fragment())
        return interface.encode_function_data(self.function_name, list(attributes.values()))
