"""Configuration for the offer matcher.

Defines the Configuration capability that command handlers read the
exchange endpoint from, and the YAML-backed application config that
provides it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, model_validator

from offer_matcher.domain.offers import Offer
from offer_matcher.domain.types import OfferType

DEFAULT_CONFIG_PATH = Path("config/offer_matcher.yaml")


class Configuration(ABC):
    """Read-only configuration consumed by command handlers."""

    @property
    @abstractmethod
    def stock_exchange_url(self) -> str:
        """Exchange endpoint address."""
        ...


class StaticConfiguration(Configuration):
    """Configuration with a fixed exchange endpoint."""

    def __init__(self, stock_exchange_url: str) -> None:
        self._stock_exchange_url = stock_exchange_url

    @property
    def stock_exchange_url(self) -> str:
        return self._stock_exchange_url

    def __repr__(self) -> str:
        return f"StaticConfiguration({self._stock_exchange_url!r})"


class ExchangeType(str, Enum):
    """Supported exchange clients."""

    MOCK = "mock"
    HTTP = "http"


class OfferConfig(BaseModel):
    """Seed offer for the in-memory exchange."""

    id: int
    type: OfferType
    price: Decimal
    count: int = Field(ge=0)

    def to_offer(self) -> Offer:
        """Convert to a domain Offer."""
        return Offer(id=self.id, type=self.type, price=self.price, count=self.count)


class ExchangeSettings(BaseModel):
    """Exchange connection configuration."""

    type: ExchangeType = ExchangeType.MOCK
    url: str = "https://moex.ru/api"
    mock_endpoint: str | None = None  # Endpoint the mock answers to; defaults to url
    timeout_seconds: float = Field(default=30.0, gt=0)
    offers: list[OfferConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def default_mock_endpoint(self) -> ExchangeSettings:
        """Default the mock endpoint to the url as loaded."""
        if self.mock_endpoint is None:
            self.mock_endpoint = self.url
        return self


class AppConfig(BaseModel):
    """Root configuration for the application."""

    exchange: ExchangeSettings = Field(default_factory=ExchangeSettings)

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    def configuration(self) -> Configuration:
        """Return the Configuration view handed to command handlers."""
        return StaticConfiguration(self.exchange.url)

    @classmethod
    def from_yaml(cls, path: str | Path) -> AppConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            Validated AppConfig

        Raises:
            FileNotFoundError: If the config file doesn't exist
            ValidationError: If the config is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.model_validate(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AppConfig:
        """Load configuration from a dictionary."""
        return cls.model_validate(data)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file.

        Args:
            path: Path to write the configuration
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(self.model_dump(mode="json"), f, default_flow_style=False)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load application configuration.

    Looks for config in the following order:
    1. Provided path argument
    2. ./config/offer_matcher.yaml
    3. Default configuration

    Args:
        path: Optional explicit path to config file

    Returns:
        Validated AppConfig
    """
    if path:
        return AppConfig.from_yaml(path)

    if DEFAULT_CONFIG_PATH.exists():
        return AppConfig.from_yaml(DEFAULT_CONFIG_PATH)

    return AppConfig()
