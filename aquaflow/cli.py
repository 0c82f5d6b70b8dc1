"""Resolve a free-text intent from the command line.

Usage:
    aquaflow "swap 100 USDC to USDT"

    aquaflow "buy 1 ETH with USDC" --max-price-impact 1 --verbose

    AQUAFLOW_POOLS_URL=https://pools.example.org aquaflow "swap 5 ARB to USDT"
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation

import structlog

from aquaflow.config import Settings
from aquaflow.errors import ProviderUnavailableError
from aquaflow.log import configure_logging
from aquaflow.models import RouteOptions
from aquaflow.routing import from_base_units
from aquaflow.solver import Resolution, create_solver

logger = structlog.get_logger()


def format_resolution(resolution: Resolution) -> str:
    """Render a resolution as human-readable lines."""
    intent = resolution.intent
    lines = [
        f"Intent:     {intent.action.value} {intent.amount} {intent.token_in} → "
        f"{intent.token_out} ({intent.amount_type.value}, confidence {intent.confidence:.2f})",
    ]
    if resolution.route is None:
        error = resolution.error.value if resolution.error else "no_route"
        lines.append(f"Result:     {error}")
        lines.extend(f"  - {message}" for message in resolution.messages)
        return "\n".join(lines)

    route = resolution.route
    amount_in = from_base_units(route.amount_in, route.token_in.decimals)
    amount_out = from_base_units(route.total_amount_out, route.token_out.decimals)
    lines.extend(
        [
            f"Route:      {' → '.join(route.path)}",
            f"Amount in:  {amount_in} {route.token_in.symbol}",
            f"Amount out: {amount_out} {route.token_out.symbol}",
            f"Impact:     {route.total_price_impact:.4f}%",
            f"Gas:        {route.total_gas_estimate}",
            f"Confidence: {resolution.confidence:.2f}",
        ]
    )
    for index, step in enumerate(route.steps, start=1):
        lines.append(
            f"  {index}. {step.pool_id}: {step.amount_in} {step.token_in.symbol} → "
            f"{step.amount_out} {step.token_out.symbol}"
        )
    return "\n".join(lines)


def _percent(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation as err:
        raise argparse.ArgumentTypeError(f"not a number: '{value}'") from err


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Resolve a free-text swap intent into a route",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("text", help='Intent text, e.g. "swap 100 USDC to USDT"')
    parser.add_argument("--max-hops", type=int, default=3, help="Maximum route length")
    parser.add_argument(
        "--max-price-impact",
        type=_percent,
        default=Decimal("5.0"),
        help="Discard routes above this price impact (percent)",
    )
    parser.add_argument(
        "--prioritize-gas",
        action="store_true",
        help="Weight gas cost more heavily when ranking routes",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logs")

    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        options = RouteOptions(
            max_hops=args.max_hops,
            max_price_impact=args.max_price_impact,
            prioritize_gas=args.prioritize_gas,
        )
    except ValueError as err:
        parser.error(str(err))

    solver = create_solver(Settings.from_env())
    try:
        resolution = solver.solve(args.text, options)
    except ProviderUnavailableError as err:
        logger.error("pool_data_unavailable", error=str(err))
        print(f"Pool data unavailable: {err}", file=sys.stderr)
        return 2
    finally:
        solver.close()

    print(format_resolution(resolution))
    return 0 if resolution.success else 1


if __name__ == "__main__":
    sys.exit(main())
