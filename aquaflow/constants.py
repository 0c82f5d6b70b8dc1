"""Protocol and routing constants for the AquaFlow engine.

Centralizes chain identifiers and the flat cost model used when ranking
candidate routes.
"""

# Chain identifiers
ARBITRUM_ONE = 42161
ARBITRUM_NOVA = 42170
ORBIT_L3 = 421337

KNOWN_CHAINS = (ARBITRUM_ONE, ARBITRUM_NOVA, ORBIT_L3)

# Fees are expressed in basis points (30 = 0.3%)
BPS_DENOMINATOR = 10_000

# Nominal fee used to estimate price impact. This is a ranking heuristic,
# not the pool's settlement fee.
IMPACT_FEE_BPS = 30

# Flat gas estimate for a single constant-product swap
SWAP_GAS_COST = 180_000

# Routes whose aggregate gas exceeds this are never proposed
MAX_ROUTE_GAS = 1_000_000

# Estimated wall-clock seconds per hop
STEP_EXECUTION_SECONDS = 15

# Route confidence by shape
DIRECT_ROUTE_CONFIDENCE = 0.95
MULTIHOP_ROUTE_CONFIDENCE = 0.8

# Parser confidence levels
CONFIDENCE_KNOWN_TOKENS = 0.9
CONFIDENCE_UNKNOWN_TOKEN = 0.5
CONFIDENCE_FALLBACK = 0.3
MIN_INTENT_CONFIDENCE = 0.3

# Default gas price ceiling passed through to the execution layer (20 gwei)
DEFAULT_MAX_GAS_PRICE = 20 * 10**9
