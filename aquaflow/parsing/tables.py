"""Lookup tables driving intent parsing.

The tables are plain immutable data. A ParserTables instance is built once
and handed to IntentParser by reference, so callers can swap in alternate
alias sets or chain vocabularies without touching parser code.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from aquaflow.constants import ARBITRUM_NOVA, ARBITRUM_ONE, ORBIT_L3

ANY_CHAIN = "any"

Phrase = tuple[str, ...]


@dataclass(frozen=True)
class ChainKeyword:
    """Phrases that express a chain preference."""

    chain: str
    phrases: tuple[Phrase, ...]


@dataclass(frozen=True)
class UrgencyLevel:
    """Phrases that pull the deadline in to `minutes` from now."""

    minutes: int
    phrases: tuple[Phrase, ...]


@dataclass(frozen=True)
class ParserTables:
    """Immutable vocabulary used by IntentParser.

    Attributes:
        aliases: Upper-case alias -> canonical symbol
        chain_keywords: Chain preference phrases, in reporting order
        urgency_levels: Deadline phrases, most urgent first
        default_deadline_minutes: Deadline when no urgency phrase is present
        stablecoins: Symbols treated as stablecoins for default slippage
        chain_ids: Chain preference name -> chain id (ANY_CHAIN is unrestricted)
    """

    aliases: Mapping[str, str]
    chain_keywords: tuple[ChainKeyword, ...]
    urgency_levels: tuple[UrgencyLevel, ...]
    default_deadline_minutes: int = 30
    stablecoins: frozenset[str] = field(default_factory=frozenset)
    chain_ids: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))


DEFAULT_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "ETHEREUM": "ETH",
        "ETHER": "ETH",
        "WETH": "ETH",
        "BITCOIN": "BTC",
        "WBTC": "BTC",
        "ARBITRUM": "ARB",
        "TETHER": "USDT",
        "USD": "USDC",
        "DOLLAR": "USDC",
    }
)

DEFAULT_CHAIN_KEYWORDS = (
    ChainKeyword("arbitrum-one", (("arbitrum", "one"), ("arb", "one"))),
    ChainKeyword("arbitrum-nova", (("arbitrum", "nova"), ("arb", "nova"))),
    ChainKeyword("orbit-l3", (("orbit",), ("l3",))),
    ChainKeyword(ANY_CHAIN, (("anywhere",), ("any", "chain"), ("best", "price"))),
    ChainKeyword("cheapest", (("cheapest",), ("lowest", "fee"))),
    ChainKeyword("fastest", (("fastest",), ("quick",))),
)

DEFAULT_URGENCY_LEVELS = (
    UrgencyLevel(5, (("urgent",), ("asap",))),
    UrgencyLevel(10, (("quick",), ("fast",))),
)

DEFAULT_CHAIN_IDS: Mapping[str, int] = MappingProxyType(
    {
        "arbitrum-one": ARBITRUM_ONE,
        "arbitrum-nova": ARBITRUM_NOVA,
        "orbit-l3": ORBIT_L3,
        # Nova typically has lower fees, One faster finality
        "cheapest": ARBITRUM_NOVA,
        "fastest": ARBITRUM_ONE,
    }
)

DEFAULT_TABLES = ParserTables(
    aliases=DEFAULT_ALIASES,
    chain_keywords=DEFAULT_CHAIN_KEYWORDS,
    urgency_levels=DEFAULT_URGENCY_LEVELS,
    default_deadline_minutes=30,
    stablecoins=frozenset({"USDC", "USDT", "DAI"}),
    chain_ids=DEFAULT_CHAIN_IDS,
)
