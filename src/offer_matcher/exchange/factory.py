"""Stock exchange client factory.

Provides configuration-driven client instantiation, allowing the
exchange to be selected via configuration rather than code changes.
"""

from __future__ import annotations

from collections.abc import Callable

from offer_matcher.core.config import ExchangeSettings, ExchangeType
from offer_matcher.domain.errors import ConfigurationError
from offer_matcher.exchange.base import StockExchangeApi

# Registry of client factories
_exchange_factories: dict[ExchangeType, Callable[[ExchangeSettings], StockExchangeApi]] = {}


def register_exchange(
    exchange_type: ExchangeType,
    factory: Callable[[ExchangeSettings], StockExchangeApi],
) -> None:
    """Register a client factory for an exchange type.

    Args:
        exchange_type: The type of exchange
        factory: Function that creates a client from settings
    """
    _exchange_factories[exchange_type] = factory


def create_exchange(settings: ExchangeSettings) -> StockExchangeApi:
    """Create a stock exchange client from configuration.

    Args:
        settings: Exchange settings

    Returns:
        Configured exchange client

    Raises:
        ConfigurationError: If no client registered for exchange type
    """
    factory = _exchange_factories.get(settings.type)
    if factory is None:
        raise ConfigurationError(
            f"No exchange registered for type: {settings.type.value}",
            field="exchange.type",
        )
    return factory(settings)


# Import and register built-in clients
from offer_matcher.exchange.http import HttpStockExchange  # noqa: E402
from offer_matcher.exchange.mock import InMemoryStockExchange  # noqa: E402

register_exchange(
    ExchangeType.MOCK,
    lambda settings: InMemoryStockExchange(
        (offer.to_offer() for offer in settings.offers), url=settings.mock_endpoint
    ),
)
register_exchange(
    ExchangeType.HTTP,
    lambda settings: HttpStockExchange(timeout=settings.timeout_seconds),
)
