"""Stock exchange clients.

This package contains the exchange abstraction layer and concrete
implementations for supported exchanges.
"""

from offer_matcher.exchange.base import StockExchangeApi
from offer_matcher.exchange.factory import create_exchange, register_exchange

__all__ = [
    "StockExchangeApi",
    "create_exchange",
    "register_exchange",
]
