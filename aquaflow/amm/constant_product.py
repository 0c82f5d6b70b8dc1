"""Constant-product (x * y = k) AMM math.

Fees are deducted from the input before the product formula:

    net = amount_in * (10000 - fee_bps) // 10000
    amount_out = reserve_out * net // (reserve_in + net)

All settlement math is integer-only with truncating division, matching
on-chain semantics. Price impact is reported as a Decimal percentage
derived from exact integer cross-products.
"""

from __future__ import annotations

import decimal
from decimal import Decimal

import structlog

from aquaflow.amm.base import SwapResult
from aquaflow.constants import BPS_DENOMINATOR, IMPACT_FEE_BPS, SWAP_GAS_COST
from aquaflow.models.pool import Pool
from aquaflow.safe_int import S

logger = structlog.get_logger()

MAX_PRICE_IMPACT = Decimal(100)

# Enough digits for reserves far beyond uint256
_IMPACT_CONTEXT = decimal.Context(prec=90)


def swap_output(amount_in: int, reserve_in: int, reserve_out: int, fee_bps: int) -> int:
    """Calculate output amount for an exact input.

    Args:
        amount_in: Input token amount
        reserve_in: Reserve of input token in pool
        reserve_out: Reserve of output token in pool
        fee_bps: Pool fee in basis points (0-10000)

    Returns:
        Output token amount; always in [0, reserve_out)
    """
    if amount_in <= 0:
        return 0
    if reserve_in <= 0 or reserve_out <= 0:
        return 0

    amount_in_net = (S(amount_in) * S(BPS_DENOMINATOR - fee_bps)) // S(BPS_DENOMINATOR)
    numerator = S(reserve_out) * amount_in_net
    denominator = S(reserve_in) + amount_in_net

    return (numerator // denominator).value


def swap_input(amount_out: int, reserve_in: int, reserve_out: int, fee_bps: int) -> int | None:
    """Calculate the smallest input whose swap_output covers amount_out.

    Args:
        amount_out: Desired output token amount
        reserve_in: Reserve of input token in pool
        reserve_out: Reserve of output token in pool
        fee_bps: Pool fee in basis points (0-10000)

    Returns:
        Required input amount, or None if the pool cannot deliver amount_out
    """
    if amount_out <= 0:
        return 0
    if reserve_in <= 0 or reserve_out <= 0:
        return None
    if amount_out >= reserve_out:
        # Can't extract the whole reserve
        return None
    fee_multiplier = BPS_DENOMINATOR - fee_bps
    if fee_multiplier <= 0:
        return None

    # Smallest net input with reserve_out * net >= amount_out * (reserve_in + net)
    net_needed = (S(amount_out) * S(reserve_in)).ceiling_div(S(reserve_out) - S(amount_out))
    # Smallest gross input with gross * fee_multiplier // 10000 >= net_needed
    return (net_needed * S(BPS_DENOMINATOR)).ceiling_div(fee_multiplier).value


def price_impact(amount_in: int, reserve_in: int, reserve_out: int) -> Decimal:
    """Estimate the percentage move in marginal price caused by a trade.

    Compares reserve_out / reserve_in before the trade with the post-trade
    ratio, where the output is simulated with a nominal 0.3% fee.

    Args:
        amount_in: Input token amount
        reserve_in: Reserve of input token in pool
        reserve_out: Reserve of output token in pool

    Returns:
        Impact in percent, capped at 100
    """
    if reserve_in <= 0 or reserve_out <= 0:
        return MAX_PRICE_IMPACT
    if amount_in <= 0:
        return Decimal(0)

    amount_out = swap_output(amount_in, reserve_in, reserve_out, IMPACT_FEE_BPS)
    new_reserve_in = S(reserve_in) + S(amount_in)
    new_reserve_out = S(reserve_out) - S(amount_out)
    if new_reserve_out <= 0:
        return MAX_PRICE_IMPACT

    # |after/before - 1| with after = new_out/new_in and before = out/in
    before = S(reserve_out) * new_reserve_in
    after = new_reserve_out * S(reserve_in)
    difference = abs(before.value - after.value)

    with decimal.localcontext(_IMPACT_CONTEXT):
        impact = Decimal(difference * 100) / Decimal(before.value)
    return min(impact, MAX_PRICE_IMPACT)


class ConstantProductAMM:
    """Simulates swaps through constant-product pools.

    Stateless; a single shared instance is safe to use everywhere.
    """

    SWAP_GAS = SWAP_GAS_COST

    def simulate_swap(self, pool: Pool, token_in: str, amount_in: int) -> SwapResult | None:
        """Simulate an exact-input swap.

        Args:
            pool: The liquidity pool
            token_in: Input token symbol
            amount_in: Amount of input token

        Returns:
            SwapResult, or None if the pool yields nothing for this input
        """
        reserve_in, reserve_out = pool.get_reserves(token_in)
        amount_out = swap_output(amount_in, reserve_in, reserve_out, pool.fee_bps)
        if amount_out <= 0:
            logger.debug(
                "swap_yields_nothing",
                pool_id=pool.id,
                token_in=token_in,
                amount_in=amount_in,
            )
            return None

        return SwapResult(
            amount_in=amount_in,
            amount_out=amount_out,
            pool_id=pool.id,
            token_in=pool.get_token(token_in),
            token_out=pool.get_token_out(token_in),
            price_impact=price_impact(amount_in, reserve_in, reserve_out),
            gas_estimate=self.SWAP_GAS,
        )

    def simulate_swap_exact_output(
        self, pool: Pool, token_in: str, amount_out: int
    ) -> SwapResult | None:
        """Simulate a swap sized to deliver exactly amount_out.

        Args:
            pool: The liquidity pool
            token_in: Input token symbol
            amount_out: Desired output amount

        Returns:
            SwapResult with the required input, or None if the pool is too shallow
        """
        reserve_in, reserve_out = pool.get_reserves(token_in)
        amount_in = swap_input(amount_out, reserve_in, reserve_out, pool.fee_bps)
        if amount_in is None or amount_out <= 0:
            logger.debug(
                "exact_output_infeasible",
                pool_id=pool.id,
                token_in=token_in,
                amount_out=amount_out,
                reserve_out=reserve_out,
            )
            return None

        return SwapResult(
            amount_in=amount_in,
            amount_out=amount_out,
            pool_id=pool.id,
            token_in=pool.get_token(token_in),
            token_out=pool.get_token_out(token_in),
            price_impact=price_impact(amount_in, reserve_in, reserve_out),
            gas_estimate=self.SWAP_GAS,
        )


# Default instance
constant_product = ConstantProductAMM()
