"""Sell command handler."""

from __future__ import annotations

from offer_matcher.domain.offers import SellCommand
from offer_matcher.handlers.base import SELL_POLICY, OfferHandler


class SellHandler(OfferHandler[SellCommand]):
    """Sells into BUY offers priced at or above the limit, highest first."""

    policy = SELL_POLICY
