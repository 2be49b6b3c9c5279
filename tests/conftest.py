"""Pytest configuration and shared fixtures.

The fixtures below are the "fixture way" of setting up handler tests:
configuration and exchange doubles are declared once and injected by
name, instead of being built inline in each test.
"""

from decimal import Decimal
from unittest.mock import NonCallableMagicMock, create_autospec

import pytest

from offer_matcher.core.config import Configuration, StaticConfiguration
from offer_matcher.domain.errors import TradeError
from offer_matcher.domain.offers import Offer
from offer_matcher.domain.types import OfferType
from offer_matcher.exchange.base import StockExchangeApi

STOCK_EXCHANGE_URL = "https://moex.ru/api"


def make_offers() -> list[Offer]:
    """Three SELL offers above and three BUY offers below the 90-100 gap."""
    return [
        Offer(id=1, type=OfferType.SELL, count=20, price=Decimal("120")),
        Offer(id=2, type=OfferType.SELL, count=10, price=Decimal("110")),
        Offer(id=3, type=OfferType.SELL, count=5, price=Decimal("100")),
        Offer(id=4, type=OfferType.BUY, count=5, price=Decimal("90")),
        Offer(id=5, type=OfferType.BUY, count=10, price=Decimal("80")),
        Offer(id=6, type=OfferType.BUY, count=20, price=Decimal("70")),
    ]


def fill_from(offers: list[Offer]):
    """Build a trade side effect that fills min(requested, offer count)."""

    async def fill(offer_id: int, count: int) -> int:
        matches = [o for o in offers if o.id == offer_id]
        if not matches:
            raise TradeError(f"Unknown offer: {offer_id}", offer_id=offer_id)
        offer = matches[0]
        return count if offer.count > count else offer.count

    return fill


@pytest.fixture
def offers() -> list[Offer]:
    """Offers every handler test trades against."""
    return make_offers()


@pytest.fixture
def configuration() -> Configuration:
    """Configuration pointing at the test exchange."""
    return StaticConfiguration(STOCK_EXCHANGE_URL)


@pytest.fixture
def stock_exchange(offers: list[Offer]) -> NonCallableMagicMock:
    """Exchange double serving `offers` with the reference fill policy."""
    exchange = create_autospec(StockExchangeApi, instance=True)
    exchange.connect.return_value = None
    exchange.get_offers.return_value = offers
    exchange.buy.side_effect = fill_from(offers)
    exchange.sell.side_effect = fill_from(offers)
    return exchange
