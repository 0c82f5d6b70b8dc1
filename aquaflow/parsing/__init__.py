"""Free-text intent parsing.

Module structure:
- grammar.py: tokenizer and ordered grammar rules
- tables.py: alias, chain and urgency vocabulary
- parser.py: IntentParser (parse + validate)
"""

from aquaflow.parsing.grammar import (
    DEFAULT_INTENT_RULES,
    NO_MATCH,
    GrammarRule,
    IntentRule,
    Matched,
    NoMatch,
    first_match,
    tokenize,
)
from aquaflow.parsing.parser import IntentParser
from aquaflow.parsing.tables import ANY_CHAIN, DEFAULT_TABLES, ParserTables

__all__ = [
    "ANY_CHAIN",
    "DEFAULT_INTENT_RULES",
    "DEFAULT_TABLES",
    "GrammarRule",
    "IntentParser",
    "IntentRule",
    "Matched",
    "NO_MATCH",
    "NoMatch",
    "ParserTables",
    "first_match",
    "tokenize",
]
