"""Free-text intent parser.

Turns "swap 100 USDC to USDT" into a ParsedIntent. Parsing never raises:
text that cannot be interpreted yields an `unknown` intent with zero
confidence, and a loose keyword scan yields a low-confidence guess that
callers must not trust blindly.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime, timedelta
from decimal import Decimal, InvalidOperation

import structlog

from aquaflow.constants import (
    CONFIDENCE_FALLBACK,
    CONFIDENCE_KNOWN_TOKENS,
    CONFIDENCE_UNKNOWN_TOKEN,
    KNOWN_CHAINS,
    MIN_INTENT_CONFIDENCE,
)
from aquaflow.models.intent import (
    AmountType,
    IntentAction,
    ParsedIntent,
    ValidationResult,
)
from aquaflow.models.types import normalize_symbol
from aquaflow.parsing.grammar import (
    DEFAULT_INTENT_RULES,
    SLIPPAGE_RULES,
    IntentRule,
    Matched,
    contains_phrase,
    first_match,
    is_amount,
    tokenize,
)
from aquaflow.parsing.tables import ANY_CHAIN, DEFAULT_TABLES, ParserTables
from aquaflow.registry.tokens import TokenRegistry

logger = structlog.get_logger()

STABLE_PAIR_SLIPPAGE = Decimal("0.1")
DEFAULT_SLIPPAGE = Decimal("0.5")


def _utcnow() -> datetime:
    return datetime.now(UTC)


class IntentParser:
    """Parses and validates free-text trade intents.

    Args:
        tokens: Registry used to decide whether a symbol is known.
        tables: Alias, chain and urgency vocabulary.
        rules: Intent grammar rules, tried in order.
        clock: Source of "now" for deadlines (UTC, timezone-aware).
    """

    def __init__(
        self,
        tokens: TokenRegistry,
        tables: ParserTables = DEFAULT_TABLES,
        rules: Sequence[IntentRule] = DEFAULT_INTENT_RULES,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.tokens = tokens
        self.tables = tables
        self.rules = tuple(rules)
        self.clock = clock

    def normalize_symbol(self, symbol: str) -> str:
        """Map a raw token word to its canonical symbol.

        Idempotent: canonical symbols map to themselves.
        """
        normalized = normalize_symbol(symbol)
        return self.tables.aliases.get(normalized, normalized)

    def is_known(self, symbol: str) -> bool:
        return bool(symbol) and symbol in self.tokens

    def parse(self, raw_text: str) -> ParsedIntent:
        """Parse free text into a ParsedIntent.

        Args:
            raw_text: User input such as "swap 100 USDC to USDT"

        Returns:
            ParsedIntent; `unknown` with confidence 0 if nothing was recognized
        """
        if not isinstance(raw_text, str):
            return self._enrich(ParsedIntent.unknown(), [])

        words = tokenize(raw_text)
        result = first_match(self.rules, words)
        if isinstance(result, Matched):
            intent = self._from_match(result)
        else:
            intent = self._fallback(words)

        intent = self._enrich(intent, words)
        logger.debug(
            "intent_parsed",
            action=intent.action.value,
            rule=result.rule.name if isinstance(result, Matched) else None,
            token_in=intent.token_in,
            token_out=intent.token_out,
            amount=intent.amount,
            confidence=intent.confidence,
        )
        return intent

    def _from_match(self, match: Matched) -> ParsedIntent:
        rule = match.rule
        if not isinstance(rule, IntentRule):
            raise TypeError(f"Rule {rule.name} does not describe an intent")
        token_in = self.normalize_symbol(match.captures["token_in"])
        token_out = self.normalize_symbol(match.captures["token_out"])
        both_known = self.is_known(token_in) and self.is_known(token_out)

        return ParsedIntent(
            action=rule.action,
            token_in=token_in,
            token_out=token_out,
            amount=match.captures["amount"],
            amount_type=rule.amount_type,
            confidence=CONFIDENCE_KNOWN_TOKENS if both_known else CONFIDENCE_UNKNOWN_TOKEN,
        )

    def _fallback(self, words: Sequence[str]) -> ParsedIntent:
        """Loose scan: first number and first two distinct known tokens."""
        numbers = [w for w in words if is_amount(w)]
        symbols: list[str] = []
        for w in words:
            if is_amount(w):
                continue
            symbol = self.normalize_symbol(w)
            if self.is_known(symbol) and symbol not in symbols:
                symbols.append(symbol)

        if numbers and len(symbols) >= 2:
            return ParsedIntent(
                action=IntentAction.SWAP,
                token_in=symbols[0],
                token_out=symbols[1],
                amount=numbers[0],
                amount_type=AmountType.EXACT_IN,
                confidence=CONFIDENCE_FALLBACK,
            )
        return ParsedIntent.unknown()

    def _enrich(self, intent: ParsedIntent, words: Sequence[str]) -> ParsedIntent:
        return intent.model_copy(
            update={
                "chain_preference": self._chain_preference(words),
                "slippage": self._slippage(intent, words),
                "deadline": self._deadline(words),
            }
        )

    def _chain_preference(self, words: Sequence[str]) -> list[str]:
        preferences: list[str] = []
        for keyword in self.tables.chain_keywords:
            if keyword.chain in preferences:
                continue
            if any(contains_phrase(words, p) for p in keyword.phrases):
                preferences.append(keyword.chain)
        return preferences or [ANY_CHAIN]

    def _slippage(self, intent: ParsedIntent, words: Sequence[str]) -> Decimal:
        result = first_match(SLIPPAGE_RULES, words)
        if isinstance(result, Matched):
            return Decimal(result.captures["slippage"])

        stablecoins = self.tables.stablecoins
        if intent.token_in in stablecoins and intent.token_out in stablecoins:
            return STABLE_PAIR_SLIPPAGE
        return DEFAULT_SLIPPAGE

    def _deadline(self, words: Sequence[str]) -> datetime:
        minutes = self.tables.default_deadline_minutes
        for level in self.tables.urgency_levels:
            if any(contains_phrase(words, p) for p in level.phrases):
                minutes = level.minutes
                break
        return self.clock() + timedelta(minutes=minutes)

    def validate(self, intent: ParsedIntent) -> ValidationResult:
        """Check an intent is routable.

        Returns every violation found, not just the first.

        Args:
            intent: Intent to check

        Returns:
            ValidationResult with human-readable errors
        """
        errors: list[str] = []

        if intent.confidence < MIN_INTENT_CONFIDENCE:
            errors.append("Unable to understand intent clearly")

        if intent.action is not IntentAction.SWAP:
            errors.append(f"Unsupported action: {intent.action.value}")

        if not self.is_known(intent.token_in):
            errors.append(f"Unknown input token: {intent.token_in}")

        if not self.is_known(intent.token_out):
            errors.append(f"Unknown output token: {intent.token_out}")

        same_token = normalize_symbol(intent.token_in) == normalize_symbol(intent.token_out)
        if intent.token_in and same_token:
            errors.append("Input and output tokens cannot be the same")

        try:
            amount = Decimal(intent.amount)
            positive = amount.is_finite() and amount > 0
        except InvalidOperation:
            positive = False
        if not positive:
            errors.append("Amount must be greater than zero")

        return ValidationResult(valid=not errors, errors=errors)

    def resolve_chains(self, preferences: Sequence[str] | None) -> tuple[int, ...]:
        """Map chain preference names to chain ids.

        `any` (or no preference) means every known chain. Unrecognized
        names are ignored.
        """
        if not preferences or ANY_CHAIN in preferences:
            return KNOWN_CHAINS
        chain_ids: list[int] = []
        for name in preferences:
            chain_id = self.tables.chain_ids.get(name)
            if chain_id is not None and chain_id not in chain_ids:
                chain_ids.append(chain_id)
        return tuple(chain_ids) or KNOWN_CHAINS
