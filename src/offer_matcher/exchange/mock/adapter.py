"""In-memory stock exchange for testing.

Provides a complete in-memory implementation of the stock exchange
interface, useful for unit tests and local dry runs.
"""

from __future__ import annotations

from collections.abc import Iterable

from offer_matcher.domain.errors import (
    ExchangeConnectionError,
    FetchError,
    TradeError,
)
from offer_matcher.domain.offers import Offer
from offer_matcher.domain.types import OfferType
from offer_matcher.exchange.base import StockExchangeApi

EXCHANGE_NAME = "mock"


class InMemoryStockExchange(StockExchangeApi):
    """In-memory stock exchange.

    Fill policy: a trade is filled in full when the offer has enough
    left, otherwise it is capped at what the offer has left. Each fill
    reduces the offer's remaining availability.

    If `url` is given, connect() only accepts that endpoint.
    """

    def __init__(self, offers: Iterable[Offer] = (), url: str | None = None) -> None:
        """Initialize the exchange.

        Args:
            offers: Offers to seed the book with
            url: Only endpoint that connect() accepts, or None for any
        """
        self._url = url
        self._connected_url: str | None = None
        self._offers: dict[int, Offer] = {}
        for offer in offers:
            self.add_offer(offer)

    async def connect(self, url: str) -> None:
        """Simulate connection establishment."""
        if not url:
            raise ExchangeConnectionError(
                "Exchange url is empty", url=url, exchange=EXCHANGE_NAME
            )
        if self._url is not None and url != self._url:
            raise ExchangeConnectionError(
                f"Unreachable exchange endpoint: {url}", url=url, exchange=EXCHANGE_NAME
            )
        self._connected_url = url

    async def disconnect(self) -> None:
        """Simulate disconnection."""
        self._connected_url = None

    async def get_offers(self) -> list[Offer]:
        """Return all offers with their remaining availability.

        Raises:
            FetchError: If not connected
        """
        if self._connected_url is None:
            raise FetchError("Not connected", exchange=EXCHANGE_NAME)
        return list(self._offers.values())

    async def buy(self, offer_id: int, count: int) -> int:
        """Buy from a SELL offer."""
        return self._trade(offer_id, count, OfferType.SELL)

    async def sell(self, offer_id: int, count: int) -> int:
        """Sell into a BUY offer."""
        return self._trade(offer_id, count, OfferType.BUY)

    def _trade(self, offer_id: int, count: int, counterparty: OfferType) -> int:
        """Fill against one offer.

        Args:
            offer_id: Offer to trade against
            count: Quantity requested
            counterparty: Offer type the trade must hit

        Returns:
            Quantity filled

        Raises:
            TradeError: If the trade is rejected
        """
        if self._connected_url is None:
            raise TradeError("Not connected", offer_id=offer_id, reason="not_connected")

        offer = self._offers.get(offer_id)
        if offer is None:
            raise TradeError(
                f"Unknown offer: {offer_id}", offer_id=offer_id, reason="unknown_offer"
            )
        if offer.type != counterparty:
            raise TradeError(
                f"Offer {offer_id} is a {offer.type.value} offer",
                offer_id=offer_id,
                reason="wrong_side",
            )
        if count <= 0:
            raise TradeError(
                f"Invalid trade count: {count}", offer_id=offer_id, reason="invalid_count"
            )

        filled = min(count, offer.count)
        self._offers[offer_id] = offer.with_count(offer.count - filled)
        return filled

    # Test helpers

    def add_offer(self, offer: Offer) -> None:
        """Add or replace an offer for testing."""
        self._offers[offer.id] = offer

    def remaining(self, offer_id: int) -> int:
        """Return remaining availability of an offer for testing."""
        return self._offers[offer_id].count

    def is_connected(self) -> bool:
        """Check connection state for testing."""
        return self._connected_url is not None

    @property
    def connected_url(self) -> str | None:
        """Endpoint passed to the last successful connect()."""
        return self._connected_url
