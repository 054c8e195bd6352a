"""Resolve which contract receives a swap, and the functions it exposes."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from relayswap.config import Settings, get_settings
from relayswap.swap_builder.abis import (
    LIDO_RELAYER_SWAP_ABI,
    RWA_RELAYER_SWAP_ABI,
    VAULT_SWAP_ABI,
)
from relayswap.swap_builder.networks import get_network

logger = logging.getLogger(__name__)


class RelayerType(str, Enum):
    """Contracts a swap can be sent to."""
    VAULT = "vault"
    LIDO = "lido"
    RWA = "rwa"


@dataclass(frozen=True)
class SwapRelayer:
    """A resolved swap target."""

    id: RelayerType
    address: str


SWAP_FRAGMENTS = {
    RelayerType.VAULT: VAULT_SWAP_ABI,
    RelayerType.LIDO: LIDO_RELAYER_SWAP_ABI,
    RelayerType.RWA: RWA_RELAYER_SWAP_ABI,
}


def resolve_relayer(
    token_in: str,
    token_out: str,
    chain_id: int,
    settings: Optional[Settings] = None,
) -> SwapRelayer:
    """Pick the swap target for a token pair on a chain.

    Restricted assets go through the chain's RWA relayer, stETH through the
    Lido relayer, everything else straight to the vault.

    Raises:
        UnsupportedNetworkError: If the chain has no vault deployment
    """
    settings = settings or get_settings()
    network = get_network(chain_id)
    pair = {token_in.lower(), token_out.lower()}

    rwa_relayer = settings.get_rwa_relayer(chain_id)
    if rwa_relayer and pair & settings.get_rwa_tokens(chain_id):
        relayer = SwapRelayer(id=RelayerType.RWA, address=rwa_relayer)
    elif network.lido_relayer and network.steth and network.steth.lower() in pair:
        relayer = SwapRelayer(id=RelayerType.LIDO, address=network.lido_relayer)
    else:
        relayer = SwapRelayer(id=RelayerType.VAULT, address=network.vault)

    logger.debug(f"Resolved {relayer.id.value} relayer {relayer.address} on chain {chain_id}")
    return relayer


def swap_fragment(relayer: SwapRelayer) -> list[dict]:
    """Get the swap function fragments exposed by a relayer."""
    return SWAP_FRAGMENTS[relayer.id]
