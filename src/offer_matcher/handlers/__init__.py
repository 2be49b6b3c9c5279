"""Command handlers.

BuyHandler and SellHandler share one matching algorithm and differ
only in direction.
"""

from offer_matcher.handlers.base import (
    BUY_POLICY,
    SELL_POLICY,
    MatchingPolicy,
    OfferHandler,
    fill_offers,
    select_offers,
)
from offer_matcher.handlers.buy import BuyHandler
from offer_matcher.handlers.sell import SellHandler

__all__ = [
    "BUY_POLICY",
    "SELL_POLICY",
    "BuyHandler",
    "MatchingPolicy",
    "OfferHandler",
    "SellHandler",
    "fill_offers",
    "select_offers",
]
