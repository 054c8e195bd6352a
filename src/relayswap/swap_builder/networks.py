"""Vault and relayer deployments per chain.

Public deployment addresses only. RWA relayers are configured through
settings (see ``relayswap.config``).
"""

import logging
from typing import Optional

from pydantic import BaseModel, Field

from relayswap.swap_builder.errors import UnsupportedNetworkError

logger = logging.getLogger(__name__)

BALANCER_VAULT = "0xBA12222222228d8Ba445958a75a0704d566BF2C8"


class NetworkInfo(BaseModel):
    """Swap-related deployments on a chain."""

    id: str = Field(..., description="Network identifier (mainnet, polygon, etc.)")
    name: str = Field(..., description="Network display name")
    chain_id: int = Field(..., description="EVM chain ID")
    native_asset: str = Field(..., description="Native asset symbol")
    vault: str = Field(default=BALANCER_VAULT, description="Vault address")
    lido_relayer: Optional[str] = Field(None, description="Lido relayer address")
    steth: Optional[str] = Field(None, description="stETH token address")
    wsteth: Optional[str] = Field(None, description="wstETH token address")
    is_testnet: bool = Field(default=False, description="Whether this is a testnet")


SUPPORTED_NETWORKS = {
    1: NetworkInfo(
        id="mainnet",
        name="Ethereum",
        chain_id=1,
        native_asset="ETH",
        lido_relayer="0xdcdbf71A870cc60C6F9B621E28a7D3Ffd6Dd4965",
        steth="0xae7ab96520de3a18e5e111b5eaab095312d7fe84",
        wsteth="0x7f39c581f595b53c5cb19bd0b3f8da6c935e2ca0",
    ),
    10: NetworkInfo(
        id="optimism",
        name="Optimism",
        chain_id=10,
        native_asset="ETH",
    ),
    100: NetworkInfo(
        id="gnosis",
        name="Gnosis Chain",
        chain_id=100,
        native_asset="XDAI",
    ),
    137: NetworkInfo(
        id="polygon",
        name="Polygon",
        chain_id=137,
        native_asset="MATIC",
    ),
    8453: NetworkInfo(
        id="base",
        name="Base",
        chain_id=8453,
        native_asset="ETH",
    ),
    42161: NetworkInfo(
        id="arbitrum",
        name="Arbitrum One",
        chain_id=42161,
        native_asset="ETH",
    ),
    43114: NetworkInfo(
        id="avalanche",
        name="Avalanche C-Chain",
        chain_id=43114,
        native_asset="AVAX",
    ),
    11155111: NetworkInfo(
        id="sepolia",
        name="Sepolia",
        chain_id=11155111,
        native_asset="ETH",
        is_testnet=True,
    ),
}


def get_network(chain_id: int) -> NetworkInfo:
    """Get deployments for a chain.

    Raises:
        UnsupportedNetworkError: If no vault is known for the chain
    """
    network = SUPPORTED_NETWORKS.get(chain_id)
    if network is None:
        raise UnsupportedNetworkError(chain_id)
    return network
