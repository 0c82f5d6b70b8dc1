"""Ordered grammar rules for free-text trade intents.

Input text is split into lower-case word tokens, then matched against
rules built from two element kinds:

    Literal   one of a set of alternative words ("to" | "for" | "→")
    Capture   a named slot holding an amount or a word

A rule matches at the first start position where every element matches
consecutive tokens. Matching returns ``Matched`` (with captures) or
``NO_MATCH``, so callers branch on the result type instead of on None.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

from aquaflow.models.intent import AmountType, IntentAction

_TOKEN_PATTERN = re.compile(r"\d+(?:\.\d+)?|\w+|[→%]")
_AMOUNT_PATTERN = re.compile(r"\d+(?:\.\d+)?")


def tokenize(text: str) -> list[str]:
    """Split text into lower-case words, decimal literals, '%' and '→'."""
    return _TOKEN_PATTERN.findall(text.lower())


def is_amount(word: str) -> bool:
    return _AMOUNT_PATTERN.fullmatch(word) is not None


class CaptureKind(str, Enum):
    """What a capture slot accepts."""

    AMOUNT = "amount"
    WORD = "word"


@dataclass(frozen=True)
class Literal:
    """Matches any one of `words`."""

    words: frozenset[str]

    def accepts(self, word: str) -> bool:
        return word in self.words


@dataclass(frozen=True)
class Capture:
    """Binds one token to `slot`."""

    slot: str
    kind: CaptureKind = CaptureKind.WORD

    def accepts(self, word: str) -> bool:
        if self.kind is CaptureKind.AMOUNT:
            return is_amount(word)
        return word not in ("%", "→") and not is_amount(word)


Element = Literal | Capture


def lit(*words: str) -> Literal:
    return Literal(frozenset(words))


def amount(slot: str = "amount") -> Capture:
    return Capture(slot, CaptureKind.AMOUNT)


def word(slot: str) -> Capture:
    return Capture(slot, CaptureKind.WORD)


@dataclass(frozen=True)
class Matched:
    """A rule matched; captures map slot names to the matched tokens."""

    rule: GrammarRule
    captures: Mapping[str, str]
    start: int


@dataclass(frozen=True)
class NoMatch:
    """No rule matched."""


NO_MATCH = NoMatch()

MatchResult = Matched | NoMatch


@dataclass(frozen=True)
class GrammarRule:
    """A named sequence of grammar elements."""

    name: str
    elements: tuple[Element, ...]

    def match(self, words: Sequence[str]) -> MatchResult:
        """Find the leftmost position where this rule matches.

        Args:
            words: Tokens from tokenize()

        Returns:
            Matched with captures, or NO_MATCH
        """
        width = len(self.elements)
        for start in range(len(words) - width + 1):
            captures: dict[str, str] = {}
            for offset, element in enumerate(self.elements):
                token = words[start + offset]
                if not element.accepts(token):
                    break
                if isinstance(element, Capture):
                    captures[element.slot] = token
            else:
                return Matched(rule=self, captures=captures, start=start)
        return NO_MATCH


@dataclass(frozen=True)
class IntentRule(GrammarRule):
    """Grammar rule that produces a trade intent.

    Rules capture the slots `amount`, `token_in` and `token_out`.
    """

    action: IntentAction = IntentAction.SWAP
    amount_type: AmountType = AmountType.EXACT_IN


def first_match(rules: Sequence[GrammarRule], words: Sequence[str]) -> MatchResult:
    """Try rules in order; the first that matches wins."""
    for rule in rules:
        result = rule.match(words)
        if isinstance(result, Matched):
            return result
    return NO_MATCH


def phrase(*words: str) -> GrammarRule:
    """Rule matching a literal word sequence."""
    return GrammarRule(" ".join(words), tuple(lit(w) for w in words))


def contains_phrase(words: Sequence[str], phrase_words: Sequence[str]) -> bool:
    return isinstance(phrase(*phrase_words).match(words), Matched)


_DIRECTION = lit("to", "for", "→")

DEFAULT_INTENT_RULES: tuple[IntentRule, ...] = (
    IntentRule(
        "swap",
        (lit("swap"), amount(), word("token_in"), _DIRECTION, word("token_out")),
    ),
    IntentRule(
        "exchange",
        (lit("exchange"), amount(), word("token_in"), _DIRECTION, word("token_out")),
    ),
    IntentRule(
        "convert",
        (lit("convert"), amount(), word("token_in"), _DIRECTION, word("token_out")),
    ),
    IntentRule(
        "buy_with",
        (lit("buy"), amount(), word("token_out"), lit("with"), word("token_in")),
        amount_type=AmountType.EXACT_OUT,
    ),
    IntentRule(
        "sell_for",
        (lit("sell"), amount(), word("token_in"), lit("for"), word("token_out")),
    ),
)

SLIPPAGE_RULES: tuple[GrammarRule, ...] = (
    GrammarRule("percent_slippage", (amount("slippage"), lit("%"), lit("slippage"))),
    GrammarRule("max_percent", (lit("max"), amount("slippage"), lit("%"))),
    GrammarRule("slippage_value", (lit("slippage"), amount("slippage"))),
)
