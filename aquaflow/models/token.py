"""Token metadata."""

from pydantic import BaseModel, Field

from aquaflow.models.types import Address, Symbol


class Token(BaseModel):
    """A token deployed on one chain. Immutable once registered."""

    symbol: Symbol
    address: Address
    # Most tokens use 18 decimals; stablecoins commonly use 6
    decimals: int = Field(ge=0, le=77)
    chain_id: int = Field(alias="chainId")

    model_config = {"populate_by_name": True, "frozen": True}
