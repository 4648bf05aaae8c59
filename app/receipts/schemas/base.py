"""
Canonical JSON schemas for receipt submission and points lookup.

Field names on the wire are camelCase; the models also accept the
snake_case attribute names so they can be built directly in Python.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Receipt (input)
# ---------------------------------------------------------------------------

class Item(BaseModel):
    """A single purchased line item."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_description: str = Field(..., alias="shortDescription")
    price: str = Field(..., description="Decimal string, e.g. '6.49'")


class Receipt(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    retailer: str
    purchase_date: str = Field(
        ..., alias="purchaseDate", description="Calendar date, YYYY-MM-DD"
    )
    purchase_time: str = Field(
        ..., alias="purchaseTime", description="24-hour time, HH:MM"
    )
    items: list[Item]
    total: str = Field(..., description="Decimal string, e.g. '35.35'")


# ---------------------------------------------------------------------------
# Scored receipt
# ---------------------------------------------------------------------------

class ScoredReceipt(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    points: int = Field(..., ge=0)


# ---------------------------------------------------------------------------
# API response envelopes
# ---------------------------------------------------------------------------

class ProcessResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: int
