"""Structured trade intent produced by the parser."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field


class IntentAction(str, Enum):
    """What the user asked for. Only swaps are routable."""

    SWAP = "swap"
    BRIDGE = "bridge"
    PROVIDE = "provide"
    UNKNOWN = "unknown"


class AmountType(str, Enum):
    """Which side of the trade the amount fixes."""

    EXACT_IN = "exact_in"
    EXACT_OUT = "exact_out"


class ParsedIntent(BaseModel):
    """A user's desired trade, derived from free text."""

    action: IntentAction
    token_in: str = Field(default="", alias="tokenIn")
    token_out: str = Field(default="", alias="tokenOut")
    # Human-readable decimal string ("100", "0.5"), scaled by token decimals at routing time
    amount: str = "0"
    amount_type: AmountType = Field(default=AmountType.EXACT_IN, alias="amountType")
    # Slippage tolerance in percent
    slippage: Decimal | None = None
    deadline: datetime | None = None
    chain_preference: list[str] | None = Field(default=None, alias="chainPreference")
    confidence: float = Field(ge=0.0, le=1.0)

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def is_unknown(self) -> bool:
        return self.action is IntentAction.UNKNOWN

    @classmethod
    def unknown(cls) -> "ParsedIntent":
        """Intent for text the parser could not interpret."""
        return cls(action=IntentAction.UNKNOWN, confidence=0.0)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a ParsedIntent.

    Errors are human-readable and are surfaced to callers verbatim.
    """

    valid: bool
    errors: list[str] = field(default_factory=list)
