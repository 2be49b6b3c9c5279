"""Application configuration."""

from offer_matcher.core.config import (
    AppConfig,
    Configuration,
    ExchangeSettings,
    ExchangeType,
    OfferConfig,
    StaticConfiguration,
    load_config,
)

__all__ = [
    "AppConfig",
    "Configuration",
    "ExchangeSettings",
    "ExchangeType",
    "OfferConfig",
    "StaticConfiguration",
    "load_config",
]
