"""Pytest configuration and fixtures."""

import os

import pytest
from web3 import Web3

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DEBUG"] = "true"
os.environ.pop("RWA_RELAYER_ADDRESSES", None)
os.environ.pop("RWA_TOKENS", None)

from relayswap.config import Settings, get_settings
from relayswap.swap_builder.types import RwaAuthorizationData, SwapInfo

DAI = "0x6b175474e89094c44da98b954eedeac495271d0f"
WETH = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"
USDC = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
STETH = "0xae7ab96520de3a18e5e111b5eaab095312d7fe84"
NATIVE = "0x0000000000000000000000000000000000000000"
RWA_TOKEN = "0x1111111111111111111111111111111111111111"
RWA_RELAYER = "0x2222222222222222222222222222222222222222"
USER = "0x3333333333333333333333333333333333333333"
RECIPIENT = "0x4444444444444444444444444444444444444444"

POOL_1 = "0x" + "aa" * 32
POOL_2 = "0x" + "bb" * 32

DEADLINE = 1_700_000_000


def make_route(
    token_addresses: list[str],
    swap_amount: int = 100,
    return_amount: int = 95,
    **extra,
) -> SwapInfo:
    """Route chaining one hop per consecutive token pair."""
    swaps = []
    for i in range(len(token_addresses) - 1):
        swaps.append(
            {
                "poolId": POOL_1 if i % 2 == 0 else POOL_2,
                "assetInIndex": i,
                "assetOutIndex": i + 1,
                "amount": str(swap_amount) if i == 0 else "0",
                "userData": "0x",
            }
        )
    payload = {
        "tokenAddresses": token_addresses,
        "swaps": swaps,
        "swapAmount": swap_amount,
        "returnAmount": return_amount,
        "tokenIn": token_addresses[0],
        "tokenOut": token_addresses[-1],
    }
    payload.update(extra)
    return SwapInfo.model_validate(payload)


def decode_call(abi: list[dict], data: str) -> tuple[str, dict]:
    """Decode call data with web3 into (function name, named arguments)."""
    function, params = Web3().eth.contract(abi=abi).decode_function_input(data)
    return function.fn_name, params


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset cached settings between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings with an RWA relayer on mainnet."""
    return Settings(
        rwa_relayer_addresses={1: RWA_RELAYER},
        rwa_tokens={1: [RWA_TOKEN]},
    )


@pytest.fixture
def two_hop_route() -> SwapInfo:
    """DAI -> WETH -> USDC, 100 in, 95 out."""
    return make_route([DAI, WETH, USDC])


@pytest.fixture
def single_hop_route() -> SwapInfo:
    """DAI -> USDC through one pool."""
    return make_route([DAI, USDC])


@pytest.fixture
def rwa_two_hop_route() -> SwapInfo:
    """DAI -> WETH -> restricted token."""
    return make_route([DAI, WETH, RWA_TOKEN])


@pytest.fixture
def rwa_single_hop_route() -> SwapInfo:
    """DAI -> restricted token through one pool."""
    return make_route([DAI, RWA_TOKEN])


@pytest.fixture
def authorization() -> RwaAuthorizationData:
    """A pre-signed restricted-asset authorization."""
    return RwaAuthorizationData(
        user=USER,
        deadline=DEADLINE,
        v=27,
        r="0x" + "01" * 32,
        s="0x" + "02" * 32,
    )
