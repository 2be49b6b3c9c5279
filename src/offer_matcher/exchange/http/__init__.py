"""HTTP exchange client.

Provides a JSON-over-HTTP implementation of the stock exchange
interface, built on httpx.
"""

from offer_matcher.exchange.http.client import HttpStockExchange
from offer_matcher.exchange.http.normalizer import OfferNormalizer

__all__ = [
    "HttpStockExchange",
    "OfferNormalizer",
]
