"""AMM pricing.

Pure constant-product math plus a simulator that orients pool reserves by
token symbol.
"""

from aquaflow.amm.base import SwapResult
from aquaflow.amm.constant_product import (
    ConstantProductAMM,
    constant_product,
    price_impact,
    swap_input,
    swap_output,
)

__all__ = [
    "ConstantProductAMM",
    "SwapResult",
    "constant_product",
    "price_impact",
    "swap_input",
    "swap_output",
]
