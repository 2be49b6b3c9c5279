"""Tests for offer and command domain models."""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest
from pydantic import ValidationError

from offer_matcher.domain.offers import BuyCommand, Offer, SellCommand
from offer_matcher.domain.types import OfferType


class TestOfferType:
    """Tests for OfferType enum."""

    def test_values(self) -> None:
        """OfferType has buy and sell values."""
        assert OfferType.BUY.value == "buy"
        assert OfferType.SELL.value == "sell"

    def test_from_string(self) -> None:
        """OfferType can be built from its string value."""
        assert OfferType("sell") == OfferType.SELL


class TestOffer:
    """Tests for Offer."""

    def test_create_offer(self) -> None:
        """Offer stores its fields."""
        offer = Offer(id=1, type=OfferType.SELL, price=Decimal("120.50"), count=20)
        assert offer.id == 1
        assert offer.type == OfferType.SELL
        assert offer.price == Decimal("120.50")
        assert offer.count == 20

    def test_price_coerced_to_decimal(self) -> None:
        """Integer and string prices become Decimal."""
        assert isinstance(Offer(id=1, type=OfferType.BUY, price=90, count=1).price, Decimal)
        assert Offer(id=1, type=OfferType.BUY, price="0.1", count=1).price == Decimal("0.1")

    def test_zero_count_allowed(self) -> None:
        """An exhausted offer has count 0."""
        assert Offer(id=1, type=OfferType.BUY, price=Decimal("1"), count=0).count == 0

    def test_negative_count_rejected(self) -> None:
        """Negative availability is invalid."""
        with pytest.raises(ValidationError, match="non-negative"):
            Offer(id=1, type=OfferType.BUY, price=Decimal("1"), count=-1)

    def test_offer_is_immutable(self) -> None:
        """Offers cannot be modified after creation."""
        offer = Offer(id=1, type=OfferType.SELL, price=Decimal("1"), count=5)
        with pytest.raises(FrozenInstanceError):
            offer.count = 10  # type: ignore[misc]

    def test_with_count(self) -> None:
        """with_count() returns a copy with new availability."""
        offer = Offer(id=1, type=OfferType.SELL, price=Decimal("1"), count=5)
        updated = offer.with_count(2)
        assert updated.count == 2
        assert updated.id == offer.id
        assert offer.count == 5

    def test_repr(self) -> None:
        """repr shows id, side, count and price."""
        offer = Offer(id=3, type=OfferType.SELL, price=Decimal("100"), count=5)
        assert repr(offer) == "Offer(#3 sell 5@100)"


class TestCommands:
    """Tests for BuyCommand and SellCommand."""

    @pytest.mark.parametrize("command_cls", [BuyCommand, SellCommand])
    def test_create_command(self, command_cls: type) -> None:
        """Commands store limit price and count."""
        command = command_cls(price=Decimal("115"), count=20)
        assert command.price == Decimal("115")
        assert command.count == 20

    @pytest.mark.parametrize("command_cls", [BuyCommand, SellCommand])
    @pytest.mark.parametrize("price", [Decimal("0"), Decimal("-1")])
    def test_non_positive_price_rejected(self, command_cls: type, price: Decimal) -> None:
        """Limit price must be positive."""
        with pytest.raises(ValidationError, match="price must be positive"):
            command_cls(price=price, count=1)

    @pytest.mark.parametrize("command_cls", [BuyCommand, SellCommand])
    @pytest.mark.parametrize("count", [0, -5])
    def test_non_positive_count_rejected(self, command_cls: type, count: int) -> None:
        """Desired quantity must be positive."""
        with pytest.raises(ValidationError, match="count must be positive"):
            command_cls(price=Decimal("1"), count=count)

    def test_buy_and_sell_are_distinct_types(self) -> None:
        """A buy command is not a sell command."""
        assert not isinstance(BuyCommand(price=Decimal("1"), count=1), SellCommand)
