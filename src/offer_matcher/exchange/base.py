"""Stock exchange API abstraction.

Defines the interface that command handlers consume. Handlers depend
only on this abstraction, so tests can substitute any double.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from offer_matcher.domain.offers import Offer


class StockExchangeApi(ABC):
    """Abstract base for stock exchange clients.

    All exchange-specific code should be isolated in implementations
    of this interface. Every call is a blocking round-trip from the
    caller's point of view; no call is retried.
    """

    @abstractmethod
    async def connect(self, url: str) -> None:
        """Establish connection to the exchange.

        Args:
            url: Exchange endpoint address

        Raises:
            ExchangeConnectionError: If the endpoint is unreachable
        """
        ...

    @abstractmethod
    async def get_offers(self) -> list[Offer]:
        """Get every offer currently on the exchange.

        Returns:
            List of offers, both sides

        Raises:
            FetchError: If retrieval fails
        """
        ...

    @abstractmethod
    async def buy(self, offer_id: int, count: int) -> int:
        """Buy from a SELL offer.

        Args:
            offer_id: The offer to buy from
            count: Quantity requested

        Returns:
            Quantity actually bought: min(count, offer availability)

        Raises:
            TradeError: If the offer is unknown or the market rejects the trade
        """
        ...

    @abstractmethod
    async def sell(self, offer_id: int, count: int) -> int:
        """Sell into a BUY offer.

        Args:
            offer_id: The offer to sell into
            count: Quantity requested

        Returns:
            Quantity actually sold: min(count, offer availability)

        Raises:
            TradeError: If the offer is unknown or the market rejects the trade
        """
        ...

    async def disconnect(self) -> None:
        """Release any resources held by the client.

        Default implementation does nothing.
        """
        return None
