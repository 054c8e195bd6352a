"""Swap data types shared by the builders.

Struct models use the contract's component names as aliases, so
``model_dump(by_alias=True)`` yields the mapping the ABI layer orders by
fragment components.
"""

from enum import IntEnum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

ADDRESS_ZERO = "0x0000000000000000000000000000000000000000"


class SwapType(IntEnum):
    """Which side of the swap is fixed (vault ``SwapKind``)."""

    EXACT_IN = 0
    EXACT_OUT = 1


def parse_amount(value: Any) -> int:
    """Parse a router amount into an integer of base units.

    Accepts ints, decimal or ``0x`` hex strings, and serialized BigNumbers
    (``{"type": "BigNumber", "hex": "0x..."}``).
    """
    if isinstance(value, bool):
        raise ValueError("Boolean is not an amount")
    if isinstance(value, int):
        return value
    if isinstance(value, dict) and "hex" in value:
        value = value["hex"]
    if isinstance(value, str):
        text = value.strip()
        if text.lower().startswith(("0x", "-0x")):
            return int(text, 16)
        return int(text)
    raise ValueError(f"Invalid amount: {value!r}")


class _ContractStruct(BaseModel):
    """Base for models that mirror a contract struct or router payload."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class SwapV2(_ContractStruct):
    """One hop of a routed swap (vault ``BatchSwapStep``)."""

    pool_id: str
    asset_in_index: int
    asset_out_index: int
    amount: str
    user_data: str = "0x"

    @field_validator("amount", mode="before")
    @classmethod
    def _amount_to_str(cls, value: Any) -> str:
        return str(parse_amount(value))


class SwapInfo(_ContractStruct):
    """Route returned by the smart order router."""

    token_addresses: list[str]
    swaps: list[SwapV2]
    swap_amount: int
    swap_amount_for_swaps: Optional[int] = None
    return_amount: int
    return_amount_from_swaps: Optional[int] = None
    return_amount_considering_fees: Optional[int] = None
    token_in: str
    token_in_for_swaps: Optional[str] = None
    token_out: str
    token_out_from_swaps: Optional[str] = None
    market_sp: Optional[str] = None

    @field_validator(
        "swap_amount",
        "swap_amount_for_swaps",
        "return_amount",
        "return_amount_from_swaps",
        "return_amount_considering_fees",
        mode="before",
    )
    @classmethod
    def _parse_amounts(cls, value: Any) -> Optional[int]:
        if value is None:
            return None
        return parse_amount(value)


class FundManagement(_ContractStruct):
    """Who pays and who receives, and whether vault internal balances are used."""

    sender: str
    recipient: str
    from_internal_balance: bool = False
    to_internal_balance: bool = False


class SingleSwap(_ContractStruct):
    """Request struct of the vault's single ``swap`` call."""

    pool_id: str
    kind: SwapType
    asset_in: str
    asset_out: str
    amount: str
    user_data: str = "0x"


class OutputReference(_ContractStruct):
    """Relayer chained-reference slot."""

    index: int
    key: int


class RwaAuthorizationData(_ContractStruct):
    """Pre-signed authorization for moving a restricted asset.

    The payload is opaque to this package and is passed through as signed.
    """

    user: str
    deadline: int = Field(..., description="Authorization expiry timestamp")
    v: int
    r: str
    s: str

    @field_validator("deadline", mode="before")
    @classmethod
    def _parse_deadline(cls, value: Any) -> int:
        return parse_amount(value)
