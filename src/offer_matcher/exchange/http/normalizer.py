"""HTTP exchange data normalizer.

Converts JSON payloads from the exchange API to domain models.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from offer_matcher.domain.offers import Offer
from offer_matcher.domain.types import OfferType


class OfferNormalizer:
    """Converts exchange JSON formats to domain models.

    The exchange uses:
    - Prices as JSON strings or numbers, parsed through str() so floats
      never leak into Decimal arithmetic
    - "buy"/"sell" for offer types
    - {"filled": n} for trade results
    """

    @staticmethod
    def normalize_price(value: Any) -> Decimal:
        """Convert a JSON price to Decimal.

        Args:
            value: Price as string, int or float

        Returns:
            Decimal price

        Raises:
            ValueError: If the value is not a number
        """
        if isinstance(value, bool):
            raise ValueError(f"Invalid price: {value!r}")
        try:
            return Decimal(str(value))
        except InvalidOperation as err:
            raise ValueError(f"Invalid price: {value!r}") from err

    @staticmethod
    def normalize_offer_type(value: str) -> OfferType:
        """Convert a JSON offer type string to OfferType."""
        return OfferType(str(value).lower())

    @classmethod
    def normalize_offer(cls, data: dict[str, Any]) -> Offer:
        """Convert one JSON offer to an Offer.

        Args:
            data: {"id", "type", "price", "count"}

        Returns:
            Offer domain model

        Raises:
            ValueError: If the payload is malformed
        """
        try:
            return Offer(
                id=int(data["id"]),
                type=cls.normalize_offer_type(data["type"]),
                price=cls.normalize_price(data["price"]),
                count=int(data["count"]),
            )
        except (KeyError, TypeError) as err:
            raise ValueError(f"Malformed offer: {data!r}") from err

    @classmethod
    def normalize_offers(cls, payload: Any) -> list[Offer]:
        """Convert an /offers response body to a list of offers.

        Raises:
            ValueError: If the payload is malformed
        """
        if not isinstance(payload, dict) or not isinstance(payload.get("offers"), list):
            raise ValueError("Response has no 'offers' list")
        return [cls.normalize_offer(item) for item in payload["offers"]]

    @staticmethod
    def normalize_filled(payload: Any) -> int:
        """Extract the filled quantity from a trade response.

        Raises:
            ValueError: If the payload is malformed
        """
        if not isinstance(payload, dict) or "filled" not in payload:
            raise ValueError("Response has no 'filled' field")
        filled = payload["filled"]
        if isinstance(filled, bool) or not isinstance(filled, int):
            raise ValueError(f"Invalid filled quantity: {filled!r}")
        return filled
