"""Core value types for offer matching."""

from enum import Enum


class OfferType(str, Enum):
    """Offer direction: BUY or SELL.

    A SELL offer is someone selling, so it is what a buy command consumes.
    A BUY offer is someone buying, so it is what a sell command consumes.
    """

    BUY = "buy"
    SELL = "sell"
