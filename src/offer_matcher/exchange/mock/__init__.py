"""In-memory exchange for testing."""

from offer_matcher.exchange.mock.adapter import InMemoryStockExchange

__all__ = ["InMemoryStockExchange"]
