"""Greedy offer matching shared by the buy and sell handlers.

A command walks the offers it may trade against in price priority and
trades each one in turn until the requested quantity is filled or the
offers run out. Buy and sell differ only in the MatchingPolicy they use.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar, Generic, TypeVar

from offer_matcher.core.config import Configuration
from offer_matcher.domain.errors import TradeError
from offer_matcher.domain.offers import BuyCommand, Offer, SellCommand
from offer_matcher.domain.types import OfferType
from offer_matcher.exchange.base import StockExchangeApi

logger = logging.getLogger(__name__)

TradeFn = Callable[[int, int], Awaitable[int]]
CommandT = TypeVar("CommandT", BuyCommand, SellCommand)


@dataclass(frozen=True)
class MatchingPolicy:
    """Direction-specific parts of the matching algorithm."""

    name: str
    offer_type: OfferType  # Offers this command consumes
    accepts: Callable[[Decimal, Decimal], bool]  # (offer price, limit price)
    sort_key: Callable[[Offer], Any]
    trade: Callable[[StockExchangeApi, int, int], Awaitable[int]]


BUY_POLICY = MatchingPolicy(
    name="buy",
    offer_type=OfferType.SELL,
    accepts=operator.le,
    sort_key=lambda offer: (offer.price, offer.id),
    trade=lambda exchange, offer_id, count: exchange.buy(offer_id, count),
)

SELL_POLICY = MatchingPolicy(
    name="sell",
    offer_type=OfferType.BUY,
    accepts=operator.ge,
    sort_key=lambda offer: (-offer.price, offer.id),
    trade=lambda exchange, offer_id, count: exchange.sell(offer_id, count),
)


def select_offers(
    offers: Iterable[Offer], policy: MatchingPolicy, limit: Decimal
) -> list[Offer]:
    """Filter offers to those a command may trade against, in visit order.

    Equal prices are visited by ascending offer id.

    Args:
        offers: All offers on the exchange
        policy: Direction of the command
        limit: Command limit price

    Returns:
        Eligible offers sorted by price priority
    """
    eligible = [
        offer
        for offer in offers
        if offer.type == policy.offer_type and policy.accepts(offer.price, limit)
    ]
    return sorted(eligible, key=policy.sort_key)


async def fill_offers(offers: Iterable[Offer], count: int, trade: TradeFn) -> int:
    """Trade offers in order until `count` is filled or offers run out.

    Each trade requests exactly what is still missing. No trade is issued
    once the target is reached.

    Args:
        offers: Offers in visit order
        count: Quantity to fill
        trade: Exchange operation, (offer_id, requested) -> filled

    Returns:
        Total quantity filled, at most `count`

    Raises:
        TradeError: If the exchange reports a negative fill or one larger
            than requested. The offending trade has already executed on
            the exchange, as have all earlier ones.
    """
    filled = 0
    for offer in offers:
        remaining = count - filled
        if remaining <= 0:
            break

        got = await trade(offer.id, remaining)
        if got < 0 or got > remaining:
            raise TradeError(
                f"Exchange reported fill of {got} for {remaining} requested",
                offer_id=offer.id,
                reason="invalid_fill",
                context={"requested": remaining, "filled": got},
            )
        logger.debug(f"Offer #{offer.id} @ {offer.price}: filled {got}/{remaining}")

        filled += got
        if filled >= count:
            break

    return filled


class OfferHandler(Generic[CommandT]):
    """Runs one command against the exchange.

    Subclasses pick the direction by setting `policy`. Errors from the
    configuration or the exchange are not caught: a command that fails
    midway raises even if some trades already went through.
    """

    policy: ClassVar[MatchingPolicy]

    def __init__(self, configuration: Configuration, stock_exchange: StockExchangeApi) -> None:
        """Initialize the handler.

        Args:
            configuration: Source of the exchange endpoint
            stock_exchange: Exchange client
        """
        self._configuration = configuration
        self._stock_exchange = stock_exchange

    async def handle(self, command: CommandT) -> int:
        """Execute a command.

        Args:
            command: Limit price and desired quantity

        Returns:
            Quantity filled, possibly less than requested
        """
        policy = self.policy
        logger.info(f"{policy.name} {command.count} @ {command.price}")

        url = self._configuration.stock_exchange_url
        await self._stock_exchange.connect(url)

        offers = await self._stock_exchange.get_offers()
        eligible = select_offers(offers, policy, command.price)

        async def trade(offer_id: int, count: int) -> int:
            return await policy.trade(self._stock_exchange, offer_id, count)

        filled = await fill_offers(eligible, command.count, trade)
        logger.info(
            f"{policy.name} filled {filled}/{command.count} "
            f"across {len(eligible)} eligible offers"
        )
        return filled
