"""Offer and command domain models.

Offers are standing orders fetched from the exchange. Commands describe
what the caller wants to trade. All models are immutable and use Decimal
for prices.
"""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

from pydantic import field_validator
from pydantic.dataclasses import dataclass

from offer_matcher.domain.types import OfferType


@dataclass(frozen=True)
class Offer:
    """A standing offer on the exchange.

    Immutable for the duration of one command. Use with_count() to get a
    copy with different availability.
    """

    id: int
    type: OfferType
    price: Decimal
    count: int  # Available quantity

    @field_validator("count")
    @classmethod
    def validate_count(cls, v: int) -> int:
        """Ensure available quantity is non-negative."""
        if v < 0:
            raise ValueError("Offer count must be non-negative")
        return v

    def with_count(self, count: int) -> Offer:
        """Return a copy with a different available quantity."""
        return replace(self, count=count)

    def __repr__(self) -> str:
        return f"Offer(#{self.id} {self.type.value} {self.count}@{self.price})"


@dataclass(frozen=True)
class _Command:
    price: Decimal  # Limit price
    count: int  # Desired quantity

    @field_validator("price")
    @classmethod
    def validate_price(cls, v: Decimal) -> Decimal:
        """Ensure limit price is positive."""
        if v <= 0:
            raise ValueError("Command price must be positive")
        return v

    @field_validator("count")
    @classmethod
    def validate_count(cls, v: int) -> int:
        """Ensure desired quantity is positive."""
        if v <= 0:
            raise ValueError("Command count must be positive")
        return v


@dataclass(frozen=True)
class BuyCommand(_Command):
    """Buy up to `count` units at `price` or cheaper."""


@dataclass(frozen=True)
class SellCommand(_Command):
    """Sell up to `count` units at `price` or higher."""
