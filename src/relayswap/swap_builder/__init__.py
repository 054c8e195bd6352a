"""Swap call builders for the vault and its relayers."""

from relayswap.swap_builder.batch_swap_builder import BatchSwapBuilder, RwaBatchSwapBuilder
from relayswap.swap_builder.core import BuilderState, BuildStep, SwapAssembler
from relayswap.swap_builder.errors import (
    AbiEncodingError,
    FragmentNotFoundError,
    SwapBuilderError,
    UninitializedArgumentsError,
    UnsupportedNetworkError,
)
from relayswap.swap_builder.single_swap_builder import RwaSingleSwapBuilder, SingleSwapBuilder
from relayswap.swap_builder.types import (
    FundManagement,
    RwaAuthorizationData,
    SwapInfo,
    SwapType,
)

__all__ = [
    "AbiEncodingError",
    "BatchSwapBuilder",
    "BuildStep",
    "BuilderState",
    "FragmentNotFoundError",
    "FundManagement",
    "RwaAuthorizationData",
    "RwaBatchSwapBuilder",
    "RwaSingleSwapBuilder",
    "SingleSwapBuilder",
    "SwapAssembler",
    "SwapBuilderError",
    "SwapInfo",
    "SwapType",
    "UninitializedArgumentsError",
    "UnsupportedNetworkError",
]
