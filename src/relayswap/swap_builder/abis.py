"""Static ABI fragments for the swap entry points of each relayer type."""

SINGLE_SWAP_COMPONENTS = [
    {"internalType": "bytes32", "name": "poolId", "type": "bytes32"},
    {"internalType": "enum IVault.SwapKind", "name": "kind", "type": "uint8"},
    {"internalType": "contract IAsset", "name": "assetIn", "type": "address"},
    {"internalType": "contract IAsset", "name": "assetOut", "type": "address"},
    {"internalType": "uint256", "name": "amount", "type": "uint256"},
    {"internalType": "bytes", "name": "userData", "type": "bytes"},
]

BATCH_SWAP_STEP_COMPONENTS = [
    {"internalType": "bytes32", "name": "poolId", "type": "bytes32"},
    {"internalType": "uint256", "name": "assetInIndex", "type": "uint256"},
    {"internalType": "uint256", "name": "assetOutIndex", "type": "uint256"},
    {"internalType": "uint256", "name": "amount", "type": "uint256"},
    {"internalType": "bytes", "name": "userData", "type": "bytes"},
]

FUND_MANAGEMENT_COMPONENTS = [
    {"internalType": "address", "name": "sender", "type": "address"},
    {"internalType": "bool", "name": "fromInternalBalance", "type": "bool"},
    {"internalType": "address payable", "name": "recipient", "type": "address"},
    {"internalType": "bool", "name": "toInternalBalance", "type": "bool"},
]

OUTPUT_REFERENCE_COMPONENTS = [
    {"internalType": "uint256", "name": "index", "type": "uint256"},
    {"internalType": "uint256", "name": "key", "type": "uint256"},
]

RWA_AUTHORIZATION_COMPONENTS = [
    {"internalType": "address", "name": "user", "type": "address"},
    {"internalType": "uint256", "name": "deadline", "type": "uint256"},
    {"internalType": "uint8", "name": "v", "type": "uint8"},
    {"internalType": "bytes32", "name": "r", "type": "bytes32"},
    {"internalType": "bytes32", "name": "s", "type": "bytes32"},
]


def _single_swap_input():
    return {
        "components": SINGLE_SWAP_COMPONENTS,
        "internalType": "struct IVault.SingleSwap",
        "name": "singleSwap",
        "type": "tuple",
    }


def _funds_input():
    return {
        "components": FUND_MANAGEMENT_COMPONENTS,
        "internalType": "struct IVault.FundManagement",
        "name": "funds",
        "type": "tuple",
    }


def _batch_inputs():
    return [
        {"internalType": "enum IVault.SwapKind", "name": "kind", "type": "uint8"},
        {
            "components": BATCH_SWAP_STEP_COMPONENTS,
            "internalType": "struct IVault.BatchSwapStep[]",
            "name": "swaps",
            "type": "tuple[]",
        },
        {"internalType": "contract IAsset[]", "name": "assets", "type": "address[]"},
        _funds_input(),
        {"internalType": "int256[]", "name": "limits", "type": "int256[]"},
        {"internalType": "uint256", "name": "deadline", "type": "uint256"},
    ]


def _authorization_input():
    return {
        "components": RWA_AUTHORIZATION_COMPONENTS,
        "internalType": "struct IRwaRelayer.Authorization",
        "name": "authorization",
        "type": "tuple",
    }


_VALUE_INPUT = {"internalType": "uint256", "name": "value", "type": "uint256"}
_OUTPUT_REFERENCES_INPUT = {
    "components": OUTPUT_REFERENCE_COMPONENTS,
    "internalType": "struct IVaultActions.OutputReference[]",
    "name": "outputReferences",
    "type": "tuple[]",
}


VAULT_SWAP_ABI = [
    {
        "inputs": [
            _single_swap_input(),
            _funds_input(),
            {"internalType": "uint256", "name": "limit", "type": "uint256"},
            {"internalType": "uint256", "name": "deadline", "type": "uint256"},
        ],
        "name": "swap",
        "outputs": [{"internalType": "uint256", "name": "amountCalculated", "type": "uint256"}],
        "stateMutability": "payable",
        "type": "function",
    },
    {
        "inputs": _batch_inputs(),
        "name": "batchSwap",
        "outputs": [{"internalType": "int256[]", "name": "assetDeltas", "type": "int256[]"}],
        "stateMutability": "payable",
        "type": "function",
    },
]

LIDO_RELAYER_SWAP_ABI = [
    {
        "inputs": [
            _single_swap_input(),
            _funds_input(),
            {"internalType": "uint256", "name": "limit", "type": "uint256"},
            {"internalType": "uint256", "name": "deadline", "type": "uint256"},
            dict(_VALUE_INPUT),
            {"internalType": "uint256", "name": "outputReference", "type": "uint256"},
        ],
        "name": "swap",
        "outputs": [{"internalType": "uint256", "name": "swapAmount", "type": "uint256"}],
        "stateMutability": "payable",
        "type": "function",
    },
    {
        "inputs": _batch_inputs() + [dict(_VALUE_INPUT), dict(_OUTPUT_REFERENCES_INPUT)],
        "name": "batchSwap",
        "outputs": [{"internalType": "int256[]", "name": "", "type": "int256[]"}],
        "stateMutability": "payable",
        "type": "function",
    },
]

RWA_RELAYER_SWAP_ABI = [
    {
        "inputs": [
            _single_swap_input(),
            _funds_input(),
            {"internalType": "uint256", "name": "limit", "type": "uint256"},
            {"internalType": "uint256", "name": "deadline", "type": "uint256"},
            _authorization_input(),
        ],
        "name": "rwaSwap",
        "outputs": [{"internalType": "uint256", "name": "amountCalculated", "type": "uint256"}],
        "stateMutability": "payable",
        "type": "function",
    },
    {
        "inputs": _batch_inputs()
        + [_authorization_input(), dict(_VALUE_INPUT), dict(_OUTPUT_REFERENCES_INPUT)],
        "name": "rwaBatchSwap",
        "outputs": [{"internalType": "int256[]", "name": "assetDeltas", "type": "int256[]"}],
        "stateMutability": "payable",
        "type": "function",
    },
]
