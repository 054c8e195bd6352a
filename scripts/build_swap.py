#!/usr/bin/env python3
"""Build an unsigned swap transaction from a router result.

Usage:
    python scripts/build_swap.py route.json --sender 0x... --deadline 1700000000

Options:
    --chain-id       Target chain (default: 1)
    --kind           exact-in or exact-out (default: exact-in)
    --slippage       Slippage tolerance in bps (default: from settings)
    --recipient      Receiver of the output (default: sender)
    --authorization  JSON file with a pre-signed RWA authorization
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from relayswap.config import configure_logging, get_settings
from relayswap.swap_builder.types import RwaAuthorizationData, SwapInfo, SwapType
from relayswap.web.contracts.transactions import SwapRequest
from relayswap.web.services.transaction_builder import SwapTransactionBuilder

logger = logging.getLogger(__name__)

KINDS = {
    "exact-in": SwapType.EXACT_IN,
    "exact-out": SwapType.EXACT_OUT,
}


def load_json(path: str) -> dict:
    """Read a JSON document from a file."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def main() -> int:
    parser = argparse.ArgumentParser(description="Build an unsigned swap transaction")
    parser.add_argument("route", type=str, help="Router result JSON file")
    parser.add_argument("--sender", type=str, required=True, help="Sender address")
    parser.add_argument("--deadline", type=int, required=True, help="Deadline block timestamp")
    parser.add_argument("--chain-id", type=int, default=1, help="EVM chain ID")
    parser.add_argument("--kind", choices=sorted(KINDS), default="exact-in", help="Swap kind")
    parser.add_argument("--slippage", type=int, default=None, help="Slippage in bps")
    parser.add_argument("--recipient", type=str, default=None, help="Recipient address")
    parser.add_argument("--authorization", type=str, default=None, help="RWA authorization JSON file")

    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings)

    try:
        authorization = None
        if args.authorization:
            authorization = RwaAuthorizationData.model_validate(load_json(args.authorization))

        request = SwapRequest(
            user_address=args.sender,
            recipient=args.recipient,
            swap_info=SwapInfo.model_validate(load_json(args.route)),
            kind=KINDS[args.kind],
            deadline=args.deadline,
            max_slippage_bps=args.slippage,
            authorization=authorization,
        )

        builder = SwapTransactionBuilder(args.chain_id, settings=settings)
        if authorization is not None:
            tx = builder.build_rwa_swap(request)
        else:
            tx = builder.build_swap(request)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to build swap: {e}")
        return 1

    print(tx.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
