"""SellHandler tests, doubles built inline in each test."""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock, PropertyMock, call

import pytest

from offer_matcher.core.config import Configuration
from offer_matcher.domain.errors import TradeError
from offer_matcher.domain.offers import Offer, SellCommand
from offer_matcher.domain.types import OfferType
from offer_matcher.exchange.base import StockExchangeApi
from offer_matcher.handlers.sell import SellHandler


def make_offers() -> list[Offer]:
    return [
        Offer(id=1, type=OfferType.SELL, count=20, price=Decimal("120")),
        Offer(id=2, type=OfferType.SELL, count=10, price=Decimal("110")),
        Offer(id=3, type=OfferType.SELL, count=5, price=Decimal("100")),
        Offer(id=4, type=OfferType.BUY, count=5, price=Decimal("90")),
        Offer(id=5, type=OfferType.BUY, count=10, price=Decimal("80")),
        Offer(id=6, type=OfferType.BUY, count=20, price=Decimal("70")),
    ]


class TestSellHandler:
    """Tests for SellHandler."""

    @pytest.mark.asyncio
    async def test_sells_offers_priced_equal_or_more(self) -> None:
        """Sells into highest eligible BUY offers first and skips cheaper ones."""
        # arrange
        configuration = MagicMock(spec=Configuration)
        type(configuration).stock_exchange_url = PropertyMock(
            return_value="https://moex.ru/api"
        )

        offers = make_offers()
        stock_exchange = AsyncMock(spec=StockExchangeApi)
        stock_exchange.get_offers.return_value = offers

        async def sell(offer_id: int, count: int) -> int:
            offer = next(o for o in offers if o.id == offer_id)
            return count if offer.count > count else offer.count

        stock_exchange.sell.side_effect = sell

        handler = SellHandler(configuration, stock_exchange)

        # act
        sold = await handler.handle(SellCommand(price=Decimal("75"), count=20))

        # assert
        assert sold == 15
        stock_exchange.connect.assert_awaited_once_with("https://moex.ru/api")
        assert stock_exchange.sell.await_args_list == [call(4, 20), call(5, 15)]
        assert all(c.args[0] != 6 for c in stock_exchange.sell.await_args_list)
        stock_exchange.buy.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_limit_equal_to_offer_price_is_eligible(self) -> None:
        """An offer priced exactly at the limit is traded."""
        offers = make_offers()
        stock_exchange = AsyncMock(spec=StockExchangeApi)
        stock_exchange.get_offers.return_value = offers
        stock_exchange.sell.side_effect = lambda offer_id, count: min(
            count, next(o for o in offers if o.id == offer_id).count
        )
        configuration = MagicMock(spec=Configuration)
        configuration.stock_exchange_url = "https://moex.ru/api"

        sold = await SellHandler(configuration, stock_exchange).handle(
            SellCommand(price=Decimal("80"), count=50)
        )

        assert sold == 15
        assert stock_exchange.sell.await_args_list == [call(4, 50), call(5, 45)]

    @pytest.mark.asyncio
    async def test_stops_once_count_is_filled(self) -> None:
        """First offer covering the whole count ends the loop."""
        stock_exchange = AsyncMock(spec=StockExchangeApi)
        stock_exchange.get_offers.return_value = make_offers()
        stock_exchange.sell.return_value = 3
        configuration = MagicMock(spec=Configuration)
        configuration.stock_exchange_url = "https://moex.ru/api"

        sold = await SellHandler(configuration, stock_exchange).handle(
            SellCommand(price=Decimal("1"), count=3)
        )

        assert sold == 3
        stock_exchange.sell.assert_awaited_once_with(4, 3)

    @pytest.mark.asyncio
    async def test_overfill_from_exchange_is_rejected(self) -> None:
        """A fill larger than requested raises instead of breaking the total."""
        stock_exchange = AsyncMock(spec=StockExchangeApi)
        stock_exchange.get_offers.return_value = make_offers()
        stock_exchange.sell.return_value = 30
        configuration = MagicMock(spec=Configuration)
        configuration.stock_exchange_url = "https://moex.ru/api"

        with pytest.raises(TradeError) as exc_info:
            await SellHandler(configuration, stock_exchange).handle(
                SellCommand(price=Decimal("75"), count=20)
            )

        assert exc_info.value.reason == "invalid_fill"
        assert exc_info.value.offer_id == 4
