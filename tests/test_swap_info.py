"""Tests for route parsing and decoration."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from conftest import DAI, USDC, WETH, make_route
from relayswap.swap_builder.core import compute_batch_limits, format_limit
from relayswap.swap_builder.swap_info import AmountForLimit, decorate_swap_info
from relayswap.swap_builder.types import SwapInfo, SwapType, parse_amount


class TestSwapInfoParsing:
    """Tests for parsing router output."""

    def test_camel_case_payload(self):
        """Test router JSON with camelCase keys."""
        info = SwapInfo.model_validate(
            {
                "tokenAddresses": [DAI, USDC],
                "swaps": [
                    {
                        "poolId": "0x" + "aa" * 32,
                        "assetInIndex": 0,
                        "assetOutIndex": 1,
                        "amount": "1000",
                        "userData": "0x",
                    }
                ],
                "swapAmount": "1000",
                "returnAmount": "990",
                "tokenIn": DAI,
                "tokenOut": USDC,
                "marketSp": "1.01",
            }
        )

        assert info.token_addresses == [DAI, USDC]
        assert info.swaps[0].asset_out_index == 1
        assert info.swap_amount == 1000
        assert info.return_amount == 990
        assert info.token_in_for_swaps is None

    def test_big_number_amounts(self):
        """Test serialized BigNumber amounts are accepted."""
        info = make_route(
            [DAI, USDC],
            swapAmount={"type": "BigNumber", "hex": "0x64"},
            returnAmount="0x5f",
        )

        assert info.swap_amount == 100
        assert info.return_amount == 95

    def test_invalid_amount_rejected(self):
        """Test non-numeric amounts fail validation."""
        with pytest.raises(ValidationError):
            make_route([DAI, USDC], swapAmount="lots")

    def test_parse_amount_rejects_bool(self):
        """Test booleans are not treated as amounts."""
        with pytest.raises(ValueError):
            parse_amount(True)


class TestAmountForLimit:
    """Tests for slippage bounds."""

    def test_min_and_max(self):
        """Test bounds at 1% slippage."""
        amount = AmountForLimit(1000)

        assert amount.min(100) == Decimal("990")
        assert amount.max(100) == Decimal("1010")

    def test_zero_slippage(self):
        """Test zero slippage leaves the amount unchanged."""
        amount = AmountForLimit(95)

        assert amount.min(0) == Decimal("95")
        assert amount.max(0) == Decimal("95")

    def test_bounds_are_exact(self):
        """Test bounds keep fractions until formatting."""
        assert AmountForLimit(1001).min(1) == Decimal("1000.8999")


class TestDecorateSwapInfo:
    """Tests for route decoration."""

    def test_exact_in_roles(self):
        """Test EXACT_IN: swap amount is the input."""
        decorated = decorate_swap_info(make_route([DAI, WETH, USDC]), SwapType.EXACT_IN)

        assert decorated.amount_in == 100
        assert decorated.amount_out == 95
        assert decorated.amount_in_for_limits.amount == 100
        assert decorated.amount_out_for_limits.amount == 95

    def test_exact_out_roles(self):
        """Test EXACT_OUT: swap amount is the output."""
        decorated = decorate_swap_info(
            make_route([DAI, WETH, USDC], swap_amount=95, return_amount=100),
            SwapType.EXACT_OUT,
        )

        assert decorated.amount_in == 100
        assert decorated.amount_out == 95

    def test_limits_prefer_vault_amounts(self):
        """Test *ForSwaps amounts drive limits when present."""
        decorated = decorate_swap_info(
            make_route(
                [DAI, USDC],
                swapAmountForSwaps=80,
                returnAmountFromSwaps=76,
            ),
            SwapType.EXACT_IN,
        )

        assert decorated.amount_in == 100
        assert decorated.amount_in_for_limits.amount == 80
        assert decorated.amount_out_for_limits.amount == 76

    def test_zero_vault_amounts_fall_back(self):
        """Test zero *ForSwaps amounts are ignored in favour of the route amounts."""
        decorated = decorate_swap_info(
            make_route(
                [DAI, USDC],
                swapAmountForSwaps=0,
                returnAmountFromSwaps="0",
            ),
            SwapType.EXACT_IN,
        )

        assert decorated.amount_in_for_limits.amount == 100
        assert decorated.amount_out_for_limits.amount == 95

    def test_tokens_for_swaps_fallback(self):
        """Test vault-facing tokens default to the route tokens."""
        decorated = decorate_swap_info(make_route([DAI, USDC]), SwapType.EXACT_IN)

        assert decorated.token_in_for_swaps == DAI
        assert decorated.token_out_from_swaps == USDC

    def test_tokens_for_swaps_override(self):
        """Test wrapped tokens replace the route tokens for the vault."""
        decorated = decorate_swap_info(
            make_route([WETH, USDC], tokenIn=DAI, tokenInForSwaps=WETH),
            SwapType.EXACT_IN,
        )

        assert decorated.token_in == DAI
        assert decorated.token_in_for_swaps == WETH


class TestLimits:
    """Tests for limit formatting and batch limit computation."""

    def test_format_truncates(self):
        """Test fractions are dropped, not rounded."""
        assert format_limit(Decimal("12.9999")) == "12"
        assert format_limit(Decimal("-12.9999")) == "-12"
        assert format_limit(7) == "7"

    def test_two_hop_limits(self):
        """Test A -> B -> C: max in at A, negated min out at C, zero at B."""
        decorated = decorate_swap_info(make_route([DAI, WETH, USDC]), SwapType.EXACT_IN)

        limits = compute_batch_limits(decorated, 100, 95)

        assert limits == ["100", "0", "-95"]

    def test_limits_follow_route_order(self):
        """Test slots follow the route's asset order, not hop order."""
        info = make_route([USDC, WETH, DAI], tokenIn=DAI, tokenOut=USDC)
        decorated = decorate_swap_info(info, SwapType.EXACT_IN)

        limits = compute_batch_limits(decorated, 100, 95)

        assert limits == ["-95", "0", "100"]

    def test_limits_case_insensitive(self):
        """Test token matching ignores address checksum casing."""
        info = make_route([DAI, WETH, USDC], tokenIn=DAI.upper().replace("0X", "0x"))
        decorated = decorate_swap_info(info, SwapType.EXACT_IN)

        assert compute_batch_limits(decorated, 100, 95)[0] == "100"

    def test_fractional_limits_truncated(self):
        """Test fractional bounds are truncated per slot."""
        decorated = decorate_swap_info(make_route([DAI, USDC]), SwapType.EXACT_IN)

        limits = compute_batch_limits(decorated, Decimal("100.7"), Decimal("94.9999"))

        assert limits == ["100", "-94"]
