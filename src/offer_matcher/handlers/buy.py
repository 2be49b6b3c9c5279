"""Buy command handler."""

from __future__ import annotations

from offer_matcher.domain.offers import BuyCommand
from offer_matcher.handlers.base import BUY_POLICY, OfferHandler


class BuyHandler(OfferHandler[BuyCommand]):
    """Buys from SELL offers priced at or below the limit, cheapest first."""

    policy = BUY_POLICY
