"""HTTP stock exchange client.

Talks JSON over HTTP to an exchange endpoint:

- GET  /status                   connectivity probe
- GET  /offers                   {"offers": [{"id", "type", "price", "count"}]}
- POST /offers/{id}/buy          {"count": n} -> {"filled": n}
- POST /offers/{id}/sell         {"count": n} -> {"filled": n}
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from offer_matcher.domain.errors import (
    ExchangeConnectionError,
    FetchError,
    TradeError,
)
from offer_matcher.domain.offers import Offer
from offer_matcher.exchange.base import StockExchangeApi
from offer_matcher.exchange.http.normalizer import OfferNormalizer

logger = logging.getLogger(__name__)

EXCHANGE_NAME = "http"


class HttpStockExchange(StockExchangeApi):
    """Stock exchange client backed by httpx.

    connect() opens an AsyncClient bound to the endpoint and probes it.
    Every other call requires a prior connect().
    """

    def __init__(
        self,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._normalizer = OfferNormalizer()

    async def connect(self, url: str) -> None:
        """Open a client for the endpoint and probe /status.

        Raises:
            ExchangeConnectionError: If the endpoint is unreachable
        """
        if not url:
            raise ExchangeConnectionError(
                "Exchange url is empty", url=url, exchange=EXCHANGE_NAME
            )

        await self.disconnect()
        client = httpx.AsyncClient(
            base_url=url.rstrip("/"),
            timeout=self._timeout,
            transport=self._transport,
        )

        try:
            response = await client.get("/status")
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            await client.aclose()
            logger.error(f"Exchange status check failed: {e.response.status_code}")
            raise ExchangeConnectionError(
                f"Exchange at {url} answered {e.response.status_code}",
                url=url,
                exchange=EXCHANGE_NAME,
            ) from e
        except httpx.RequestError as e:
            await client.aclose()
            logger.error(f"Exchange connection failed: {e}")
            raise ExchangeConnectionError(
                f"Cannot reach exchange at {url}: {e}",
                url=url,
                exchange=EXCHANGE_NAME,
            ) from e

        self._client = client
        logger.info(f"Connected to exchange at {url}")

    async def disconnect(self) -> None:
        """Close the underlying client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def get_offers(self) -> list[Offer]:
        """Fetch all offers.

        Raises:
            FetchError: On transport, status or payload errors
        """
        if not self._client:
            raise FetchError("Not connected", exchange=EXCHANGE_NAME)

        try:
            response = await self._client.get("/offers")
            response.raise_for_status()
            return self._normalizer.normalize_offers(response.json())
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Offer fetch failed: {e.response.status_code} - {e.response.text}"
            )
            raise FetchError(
                f"API error {e.response.status_code}: {e.response.text}",
                exchange=EXCHANGE_NAME,
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Offer fetch failed: {e}")
            raise FetchError(f"Request failed: {e}", exchange=EXCHANGE_NAME) from e
        except ValueError as e:
            logger.error(f"Malformed offers payload: {e}")
            raise FetchError(
                f"Malformed offers payload: {e}", exchange=EXCHANGE_NAME
            ) from e

    async def buy(self, offer_id: int, count: int) -> int:
        """Buy from a SELL offer."""
        return await self._trade("buy", offer_id, count)

    async def sell(self, offer_id: int, count: int) -> int:
        """Sell into a BUY offer."""
        return await self._trade("sell", offer_id, count)

    async def _trade(self, action: str, offer_id: int, count: int) -> int:
        """Post a trade against one offer.

        Args:
            action: "buy" or "sell"
            offer_id: Offer to trade against
            count: Quantity requested

        Returns:
            Quantity filled

        Raises:
            TradeError: On transport, status or payload errors
        """
        if not self._client:
            raise TradeError("Not connected", offer_id=offer_id, reason="not_connected")

        body: dict[str, Any] = {"count": count}
        try:
            response = await self._client.post(f"/offers/{offer_id}/{action}", json=body)
            response.raise_for_status()
            return self._normalizer.normalize_filled(response.json())
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"Trade {action} #{offer_id} failed: {status} - {e.response.text}")
            if status == 404:
                raise TradeError(
                    f"Unknown offer: {offer_id}", offer_id=offer_id, reason="unknown_offer"
                ) from e
            raise TradeError(
                f"Trade rejected with {status}: {e.response.text}",
                offer_id=offer_id,
                reason=str(status),
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Trade {action} #{offer_id} failed: {e}")
            raise TradeError(
                f"Request failed: {e}", offer_id=offer_id, reason="transport"
            ) from e
        except ValueError as e:
            logger.error(f"Malformed trade response: {e}")
            raise TradeError(
                f"Malformed trade response: {e}", offer_id=offer_id, reason="malformed"
            ) from e
