"""
Receipt schemas shared by the validator, the store and the scoring rules.

Wire names (``purchaseDate``, ``shortDescription`` ...) are kept as aliases so
models round-trip the JSON the API accepts.
"""
from __future__ import annotations

from datetime import date, time

from pydantic import BaseModel, ConfigDict, Field


def to_cents(amount: str) -> int:
    """Convert a validated ``\\d+.\\d{2}`` amount string to whole cents."""
    dollars, cents = amount.split(".")
    return int(dollars) * 100 + int(cents)


# ---------------------------------------------------------------------------
# Receipt
# ---------------------------------------------------------------------------

class Item(BaseModel):
    """One line entry on a receipt."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_description: str = Field(..., alias="shortDescription")
    price: str = Field(..., description="Amount with exactly two decimals")

    @property
    def price_cents(self) -> int:
        return to_cents(self.price)


class Receipt(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    retailer: str
    purchase_date: date = Field(..., alias="purchaseDate")
    purchase_time: time = Field(..., alias="purchaseTime")
    items: tuple[Item, ...]
    total: str = Field(..., description="Amount with exactly two decimals")

    @property
    def total_cents(self) -> int:
        return to_cents(self.total)


# ---------------------------------------------------------------------------
# API response envelopes
# ---------------------------------------------------------------------------

class ProcessReceiptResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int = Field(..., ge=0)
