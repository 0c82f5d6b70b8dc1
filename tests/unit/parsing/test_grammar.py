"""Tests for the tokenizer and grammar rules."""

from aquaflow.models import AmountType
from aquaflow.parsing import DEFAULT_INTENT_RULES, NO_MATCH, Matched, first_match, tokenize
from aquaflow.parsing.grammar import (
    SLIPPAGE_RULES,
    GrammarRule,
    amount,
    contains_phrase,
    is_amount,
    lit,
    word,
)


class TestTokenize:
    def test_lowercases_and_splits(self):
        assert tokenize("Swap 100 USDC to USDT") == ["swap", "100", "usdc", "to", "usdt"]

    def test_keeps_decimals_and_symbols(self):
        assert tokenize("swap 0.5 ETH→USDC, 1.5% slippage") == [
            "swap",
            "0.5",
            "eth",
            "→",
            "usdc",
            "1.5",
            "%",
            "slippage",
        ]

    def test_empty(self):
        assert tokenize("   ") == []

    def test_is_amount(self):
        assert is_amount("100")
        assert is_amount("0.25")
        assert not is_amount("1e5")
        assert not is_amount("usdc")


class TestGrammarRule:
    def test_match_captures_slots(self):
        rule = GrammarRule("pair", (word("a"), lit("and"), word("b")))
        result = rule.match(["eth", "and", "usdc"])
        assert isinstance(result, Matched)
        assert result.captures == {"a": "eth", "b": "usdc"}
        assert result.start == 0

    def test_leftmost_match_wins(self):
        rule = GrammarRule("send", (lit("send"), amount()))
        result = rule.match(["send", "1", "then", "send", "2"])
        assert isinstance(result, Matched)
        assert result.captures["amount"] == "1"

    def test_word_capture_rejects_numbers_and_marks(self):
        rule = GrammarRule("w", (word("x"),))
        assert rule.match(["42"]) is NO_MATCH
        assert rule.match(["%"]) is NO_MATCH
        assert isinstance(rule.match(["arb"]), Matched)

    def test_too_few_words(self):
        rule = DEFAULT_INTENT_RULES[0]
        assert rule.match(["swap", "100"]) is NO_MATCH

    def test_contains_phrase(self):
        words = tokenize("swap on arbitrum nova please")
        assert contains_phrase(words, ("arbitrum", "nova"))
        assert not contains_phrase(words, ("arbitrum", "one"))


class TestIntentRules:
    def test_rule_order(self):
        assert [rule.name for rule in DEFAULT_INTENT_RULES] == [
            "swap",
            "exchange",
            "convert",
            "buy_with",
            "sell_for",
        ]

    def test_buy_with_is_exact_output(self):
        result = first_match(DEFAULT_INTENT_RULES, tokenize("buy 2 eth with usdc"))
        assert isinstance(result, Matched)
        assert result.rule.name == "buy_with"
        assert result.rule.amount_type is AmountType.EXACT_OUT
        assert result.captures == {"amount": "2", "token_out": "eth", "token_in": "usdc"}

    def test_first_matching_rule_wins(self):
        """Text that fits several rules is claimed by the earliest."""
        words = tokenize("swap 1 eth to usdc or sell 1 eth for usdt")
        result = first_match(DEFAULT_INTENT_RULES, words)
        assert isinstance(result, Matched)
        assert result.rule.name == "swap"
        assert result.captures["token_out"] == "usdc"

    def test_no_rule_matches(self):
        assert first_match(DEFAULT_INTENT_RULES, tokenize("hello there")) is NO_MATCH


class TestSlippageRules:
    def test_percent_slippage(self):
        result = first_match(SLIPPAGE_RULES, tokenize("with 1.5% slippage"))
        assert isinstance(result, Matched)
        assert result.captures["slippage"] == "1.5"

    def test_max_percent(self):
        result = first_match(SLIPPAGE_RULES, tokenize("max 2%"))
        assert isinstance(result, Matched)
        assert result.captures["slippage"] == "2"

    def test_slippage_value(self):
        result = first_match(SLIPPAGE_RULES, tokenize("slippage 0.3"))
        assert isinstance(result, Matched)
        assert result.captures["slippage"] == "0.3"
