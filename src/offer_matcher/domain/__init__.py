"""Domain models for offer matching.

This package contains all domain models that are exchange-agnostic.
All models are immutable and use Decimal for prices.
"""

from offer_matcher.domain.errors import (
    ConfigurationError,
    ExchangeConnectionError,
    ExchangeError,
    FetchError,
    TradeError,
    TradingError,
)
from offer_matcher.domain.offers import BuyCommand, Offer, SellCommand
from offer_matcher.domain.types import OfferType

__all__ = [
    # Types
    "OfferType",
    # Offers
    "BuyCommand",
    "Offer",
    "SellCommand",
    # Errors
    "ConfigurationError",
    "ExchangeConnectionError",
    "ExchangeError",
    "FetchError",
    "TradeError",
    "TradingError",
]
